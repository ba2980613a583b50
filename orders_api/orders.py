# orders_api/orders.py
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from . import crud
from .database import get_session
from .schemas import OrderCreated, OrderMessage, OrderOut, OrderPage
from .validation import parse_order_id, validate_create, validate_filters, validate_update

router = APIRouter(prefix="/orders", tags=["orders"])


# ✅ Create an order
@router.post("", response_model=OrderCreated, status_code=status.HTTP_201_CREATED)
async def create_order(
    body: Any = Body(None),
    session: AsyncSession = Depends(get_session),
):
    data = validate_create(body)
    order = await crud.create_order(session, data)
    return OrderCreated(id=order.id, created_at=order.created_at, **data.model_dump())


# 🧾 Order list: filters + pagination
@router.get("", response_model=OrderPage)
async def list_orders(request: Request, session: AsyncSession = Depends(get_session)):
    filters = validate_filters(request.query_params)
    rows, pagination = await crud.list_orders(session, filters)
    return OrderPage(
        data=[OrderOut.model_validate(o) for o in rows],
        pagination=pagination,
    )


# 📦 Single order
@router.get("/{order_id}", response_model=OrderOut)
async def get_order(order_id: str, session: AsyncSession = Depends(get_session)):
    order = await crud.get_order(session, parse_order_id(order_id))
    return order


@router.put("/{order_id}", response_model=OrderMessage)
async def update_order(
    order_id: str,
    body: Any = Body(None),
    session: AsyncSession = Depends(get_session),
):
    oid = parse_order_id(order_id)
    changes = validate_update(body).changes()
    await crud.update_order(session, oid, changes)
    return OrderMessage(message="Order updated successfully", id=oid)


@router.delete("/{order_id}", response_model=OrderMessage)
async def delete_order(order_id: str, session: AsyncSession = Depends(get_session)):
    oid = parse_order_id(order_id)
    await crud.delete_order(session, oid)
    return OrderMessage(message="Order deleted successfully", id=oid)
