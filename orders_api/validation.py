"""Input validation for the order endpoints.

Pure functions: each takes the raw request payload (JSON body or query
parameters) and returns a normalized pydantic model, or raises
:class:`~orders_api.errors.ValidationError`. Nothing here touches storage.
"""
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping

import pydantic

from .config import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_AMOUNT,
    MAX_INTEGER,
    MAX_LIMIT,
    ORDER_STATUSES,
)
from .errors import ValidationError
from .schemas import OrderCreate, OrderFilters, OrderUpdate

ORDER_FIELDS = ("customer_name", "product", "quantity", "amount", "status", "order_date")

PAGINATION_CONSTRAINTS = f"page >= 1, 1 <= limit <= {MAX_LIMIT}"

CENT = Decimal("0.01")

_MAGNITUDE_LIMITS = (("quantity", MAX_INTEGER), ("amount", MAX_AMOUNT))


def _is_number(value: Any) -> bool:
    # JSON true/false arrive as bool, which is an int subclass
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, Decimal)):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _require_object(body: Any) -> Mapping:
    if not isinstance(body, Mapping):
        raise ValidationError("InvalidBody", "Request body must be a JSON object")
    return body


def _check_status(value: Any) -> None:
    if value not in ORDER_STATUSES:
        raise ValidationError(
            "InvalidStatus", "Invalid status", {"validStatuses": list(ORDER_STATUSES)}
        )


def _invalid_magnitude() -> ValidationError:
    return ValidationError(
        "InvalidMagnitude",
        "Quantity and amount must be positive numbers",
        {"maxQuantity": MAX_INTEGER, "maxAmount": MAX_AMOUNT},
    )


def _normalize_magnitudes(values: Mapping) -> dict:
    """Check quantity/amount and round amount to cents.

    The positivity check runs on the rounded amount, the value that is
    actually stored, so e.g. 0.001 is rejected.
    """
    out = dict(values)
    for name, upper in _MAGNITUDE_LIMITS:
        if out.get(name) is None:
            continue
        value = out[name]
        if not _is_number(value) or value <= 0 or value > upper:
            raise _invalid_magnitude()
    if out.get("amount") is not None:
        cents = Decimal(str(out["amount"])).quantize(CENT, rounding=ROUND_HALF_UP)
        if cents <= 0 or cents > Decimal(str(MAX_AMOUNT)):
            raise _invalid_magnitude()
        out["amount"] = float(cents)
    return out


def _build(model, values: Mapping):
    try:
        return model.model_validate(dict(values))
    except pydantic.ValidationError as e:
        details = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        raise ValidationError("InvalidFieldType", "Invalid field type", details) from e


def validate_create(body: Any) -> OrderCreate:
    body = _require_object(body)

    missing = [name for name in ORDER_FIELDS if not body.get(name)]
    if missing:
        raise ValidationError(
            "MissingFields",
            "Missing required fields",
            {"required": list(ORDER_FIELDS), "missing": missing},
        )

    _check_status(body["status"])
    values = _normalize_magnitudes({name: body[name] for name in ORDER_FIELDS})

    return _build(OrderCreate, values)


def validate_update(body: Any) -> OrderUpdate:
    """Validate a partial update.

    Only the six order fields are considered; anything else in the body is
    ignored. A supplied ``quantity``/``amount`` of zero or below is rejected
    rather than skipped, and amounts are rounded to cents. Null and
    empty-string values are treated as absent. If nothing usable is left,
    ``NoFieldsToUpdate`` is raised.
    """
    body = _require_object(body)
    supplied = {name: body[name] for name in ORDER_FIELDS if name in body}

    if supplied.get("status"):
        _check_status(supplied["status"])
    supplied = _normalize_magnitudes(supplied)

    update = _build(OrderUpdate, supplied)
    if not update.changes():
        raise ValidationError("NoFieldsToUpdate", "No fields to update")
    return update


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _parse_int(raw: Any, default: int) -> int:
    if _blank(raw):
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ValidationError(
            "InvalidPagination",
            "Invalid pagination parameters",
            {"constraints": PAGINATION_CONSTRAINTS},
        ) from None


def _parse_amount(raw: Any, param: str) -> float:
    try:
        value = float(str(raw).strip())
    except ValueError:
        value = math.nan
    if not math.isfinite(value) or value < 0:
        raise ValidationError("InvalidAmountFilter", f"Invalid {param} parameter")
    return value


def validate_filters(params: Mapping[str, Any]) -> OrderFilters:
    """Normalize listing query parameters.

    Recognized keys: ``page``, ``limit``, ``status``, ``minAmount``,
    ``maxAmount``, ``startDate``, ``endDate``. Blank values are treated as
    absent. Dates are passed through untouched and compared as text.
    """
    page = _parse_int(params.get("page"), DEFAULT_PAGE)
    limit = _parse_int(params.get("limit"), DEFAULT_LIMIT)
    if page < 1 or limit < 1 or limit > MAX_LIMIT:
        raise ValidationError(
            "InvalidPagination",
            "Invalid pagination parameters",
            {"constraints": PAGINATION_CONSTRAINTS},
        )

    filters = OrderFilters(page=page, limit=limit)

    status = params.get("status")
    if not _blank(status):
        if status not in ORDER_STATUSES:
            raise ValidationError(
                "InvalidStatusFilter",
                "Invalid status filter",
                {"validStatuses": list(ORDER_STATUSES)},
            )
        filters.status = status

    if not _blank(params.get("minAmount")):
        filters.min_amount = _parse_amount(params["minAmount"], "minAmount")
    if not _blank(params.get("maxAmount")):
        filters.max_amount = _parse_amount(params["maxAmount"], "maxAmount")

    if not _blank(params.get("startDate")):
        filters.start_date = params["startDate"]
    if not _blank(params.get("endDate")):
        filters.end_date = params["endDate"]

    return filters


def parse_order_id(raw: Any) -> int:
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()) or int(text) < 1:
        raise ValidationError("InvalidOrderId", "Invalid order ID")
    return int(text)
