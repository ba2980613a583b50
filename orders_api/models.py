from sqlalchemy import CheckConstraint, Column, DateTime, Index, Integer, Numeric, String, func

from .config import ORDER_STATUSES
from .database import Base

_STATUS_LIST = ", ".join(f"'{s}'" for s in ORDER_STATUSES)


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_name = Column(String(255), nullable=False)
    product = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)  # exact money, 2 decimals
    status = Column(String(20), nullable=False)
    order_date = Column(String(10), nullable=False)  # YYYY-MM-DD, compared as text
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_orders_quantity_pos"),
        CheckConstraint("amount > 0", name="ck_orders_amount_pos"),
        CheckConstraint(f"status IN ({_STATUS_LIST})", name="ck_orders_status_enum"),
        Index("ix_orders_order_date_id", "order_date", "id"),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "customer_name": self.customer_name,
            "product": self.product,
            "quantity": self.quantity,
            "amount": float(self.amount) if self.amount is not None else None,
            "status": self.status,
            "order_date": self.order_date,
            "created_at": self.created_at.isoformat() if self.created_at is not None else None,
        }

    def __repr__(self) -> str:
        return f"<Order id={self.id} status={self.status} order_date={self.order_date}>"
