# orders_api/schemas.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


# 📦 Order
class OrderBase(BaseModel):
    customer_name: str
    product: str
    quantity: int
    amount: float
    status: str
    order_date: str


class OrderCreate(OrderBase):
    pass


class OrderUpdate(BaseModel):
    """Partial update: every field optional, presence tracked by pydantic."""

    customer_name: Optional[str] = None
    product: Optional[str] = None
    quantity: Optional[int] = None
    amount: Optional[float] = None
    status: Optional[str] = None
    order_date: Optional[str] = None

    def changes(self) -> dict:
        """Fields that were sent with a usable value, in declaration order.

        Null and empty-string values count as "not provided".
        """
        out = {}
        for name in type(self).model_fields:
            if name not in self.model_fields_set:
                continue
            value = getattr(self, name)
            if value is None or value == "":
                continue
            out[name] = value
        return out


class OrderOut(BaseModel):
    id: int
    customer_name: str
    product: str
    quantity: int
    amount: float
    status: str
    order_date: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class OrderCreated(OrderBase):
    id: int
    created_at: Optional[datetime] = None
    message: str = "Order created successfully"


class OrderMessage(BaseModel):
    message: str
    id: int


# 🔎 List filters (normalized)
class OrderFilters(BaseModel):
    page: int = 1
    limit: int = 10
    status: Optional[str] = None
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    page: int
    limit: int
    totalOrders: int
    totalPages: int
    hasNextPage: bool
    hasPreviousPage: bool


class OrderPage(BaseModel):
    data: List[OrderOut]
    pagination: Pagination


class Health(BaseModel):
    status: str
    timestamp: str
