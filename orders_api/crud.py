# orders_api/crud.py
"""Storage operations. Each one takes the session explicitly and issues a
single statement (listing: a count and then a page)."""
import logging
from decimal import Decimal
from typing import List, Tuple

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from . import query
from .config import MAX_INTEGER, MAX_OFFSET
from .errors import NotFoundError, StorageError
from .models import Order
from .schemas import OrderCreate, OrderFilters, Pagination

logger = logging.getLogger(__name__)


async def _rollback(session: AsyncSession, action: str, exc: Exception) -> None:
    logger.error("Database error while %s: %s", action, exc)
    await session.rollback()


def _check_id_range(order_id: int) -> None:
    # ids beyond the column range cannot exist and cannot be bound either
    if order_id > MAX_INTEGER:
        raise NotFoundError()


async def create_order(session: AsyncSession, data: OrderCreate) -> Order:
    order = Order(
        customer_name=data.customer_name,
        product=data.product,
        quantity=data.quantity,
        amount=Decimal(str(data.amount)),
        status=data.status,
        order_date=data.order_date,
    )
    try:
        session.add(order)
        await session.commit()
        await session.refresh(order)  # id and created_at come from the database
    except SQLAlchemyError as e:
        await _rollback(session, "creating order", e)
        raise StorageError() from e
    logger.info("Created order %s", order.id)
    return order


async def get_order(session: AsyncSession, order_id: int) -> Order:
    _check_id_range(order_id)
    try:
        res = await session.execute(select(Order).where(Order.id == order_id))
        order = res.scalar_one_or_none()
    except SQLAlchemyError as e:
        await _rollback(session, f"reading order {order_id}", e)
        raise StorageError() from e
    if order is None:
        raise NotFoundError()
    return order


async def list_orders(session: AsyncSession, filters: OrderFilters) -> Tuple[List[Order], Pagination]:
    try:
        total = (await session.execute(query.count_query(filters))).scalar_one()
        if filters.offset > MAX_OFFSET:
            # far past the last page; the offset would not fit the driver's integer
            rows = []
        else:
            res = await session.execute(query.page_query(filters))
            rows = list(res.scalars().all())
    except SQLAlchemyError as e:
        await _rollback(session, "listing orders", e)
        raise StorageError() from e
    return rows, query.paginate(total, filters.page, filters.limit)


async def update_order(session: AsyncSession, order_id: int, changes: dict) -> None:
    """Apply ``changes`` to one order. Concurrent writers: last one wins."""
    _check_id_range(order_id)
    values = query.update_values(query.update_terms(changes))
    stmt = (
        update(Order)
        .where(Order.id == order_id)
        .values(**values)
        .execution_options(synchronize_session=False)
    )
    try:
        result = await session.execute(stmt)
        await session.commit()
    except SQLAlchemyError as e:
        await _rollback(session, f"updating order {order_id}", e)
        raise StorageError() from e
    if result.rowcount == 0:
        raise NotFoundError()
    logger.info("Updated order %s (%s)", order_id, ", ".join(values))


async def delete_order(session: AsyncSession, order_id: int) -> None:
    _check_id_range(order_id)
    stmt = delete(Order).where(Order.id == order_id).execution_options(synchronize_session=False)
    try:
        result = await session.execute(stmt)
        await session.commit()
    except SQLAlchemyError as e:
        await _rollback(session, f"deleting order {order_id}", e)
        raise StorageError() from e
    if result.rowcount == 0:
        raise NotFoundError()
    logger.info("Deleted order %s", order_id)
