"""Query construction and pagination for the order listing.

Filters and updates are first expressed as ``(column, operator, value)``
terms and only then turned into SQLAlchemy expressions, so every value ends
up as a bound parameter and never in the statement text.
"""
import math
import operator
from decimal import Decimal
from typing import Any, Iterable, List, Tuple

from sqlalchemy import Select, and_, func, select

from .models import Order
from .schemas import OrderFilters, Pagination

Term = Tuple[str, str, Any]

_OPERATORS = {
    "=": operator.eq,
    ">=": operator.ge,
    "<=": operator.le,
}

# (normalized filter attribute, column, operator)
_FILTER_COLUMNS = (
    ("status", "status", "="),
    ("min_amount", "amount", ">="),
    ("max_amount", "amount", "<="),
    ("start_date", "order_date", ">="),
    ("end_date", "order_date", "<="),
)

_UPDATABLE_COLUMNS = ("customer_name", "product", "quantity", "amount", "status", "order_date")


def filter_terms(filters: OrderFilters) -> List[Term]:
    """One term per filter that is present; absent filters add nothing."""
    terms = []
    for attr, column, op in _FILTER_COLUMNS:
        value = getattr(filters, attr)
        if value is None:
            continue
        if column == "amount":
            value = Decimal(str(value))
        terms.append((column, op, value))
    return terms


def build_predicate(terms: Iterable[Term]):
    """AND of the terms, or None when there is nothing to filter on."""
    clauses = [_OPERATORS[op](getattr(Order, column), value) for column, op, value in terms]
    if not clauses:
        return None
    return and_(*clauses)


def _filtered(stmt: Select, filters: OrderFilters) -> Select:
    predicate = build_predicate(filter_terms(filters))
    if predicate is None:
        return stmt
    return stmt.where(predicate)


def count_query(filters: OrderFilters) -> Select:
    return _filtered(select(func.count()).select_from(Order), filters)


def page_query(filters: OrderFilters) -> Select:
    # order_date alone is not unique; id breaks ties so the order is total
    return (
        _filtered(select(Order), filters)
        .order_by(Order.order_date.desc(), Order.id.desc())
        .limit(filters.limit)
        .offset(filters.offset)
    )


def paginate(total: int, page: int, limit: int) -> Pagination:
    total_pages = math.ceil(total / limit) if total else 0
    return Pagination(
        page=page,
        limit=limit,
        totalOrders=total,
        totalPages=total_pages,
        hasNextPage=page < total_pages,
        hasPreviousPage=page > 1,
    )


def update_terms(changes: dict) -> List[Term]:
    terms = []
    for column in _UPDATABLE_COLUMNS:
        if column not in changes:
            continue
        value = changes[column]
        if column == "amount":
            value = Decimal(str(value))
        terms.append((column, "=", value))
    return terms


def update_values(terms: Iterable[Term]) -> dict:
    return {column: value for column, op, value in terms}
