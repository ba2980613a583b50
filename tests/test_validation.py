import pytest

from orders_api.errors import ValidationError
from orders_api.validation import (
    ORDER_FIELDS,
    parse_order_id,
    validate_create,
    validate_filters,
    validate_update,
)

VALID = {
    "customer_name": "John Doe",
    "product": "Laptop",
    "quantity": 2,
    "amount": 1999.99,
    "status": "pending",
    "order_date": "2026-02-01",
}


def error_code(fn, *args):
    with pytest.raises(ValidationError) as exc:
        fn(*args)
    return exc.value.code


# --- create ---------------------------------------------------------------


def test_create_returns_values_unchanged():
    order = validate_create(dict(VALID))
    assert order.model_dump() == VALID


def test_create_names_every_missing_field():
    with pytest.raises(ValidationError) as exc:
        validate_create({"customer_name": "Jane Doe", "product": "Mouse"})
    err = exc.value
    assert err.code == "MissingFields"
    assert err.message == "Missing required fields"
    assert err.details["missing"] == ["quantity", "amount", "status", "order_date"]
    assert err.details["required"] == list(ORDER_FIELDS)


@pytest.mark.parametrize("field,value", [("customer_name", ""), ("quantity", 0), ("amount", None)])
def test_create_falsy_value_counts_as_missing(field, value):
    body = {**VALID, field: value}
    with pytest.raises(ValidationError) as exc:
        validate_create(body)
    assert exc.value.code == "MissingFields"
    assert exc.value.details["missing"] == [field]


def test_create_rejects_unknown_status():
    with pytest.raises(ValidationError) as exc:
        validate_create({**VALID, "status": "invalid_status"})
    assert exc.value.code == "InvalidStatus"
    assert exc.value.details["validStatuses"] == ["pending", "processing", "completed", "cancelled"]


@pytest.mark.parametrize(
    "overrides",
    [{"quantity": -5}, {"amount": -1}, {"quantity": "5"}, {"amount": "10.00"}, {"quantity": True}],
)
def test_create_rejects_non_positive_or_non_numeric_magnitudes(overrides):
    assert error_code(validate_create, {**VALID, **overrides}) == "InvalidMagnitude"


def test_create_status_checked_before_magnitude():
    assert error_code(validate_create, {**VALID, "status": "lost", "quantity": -1}) == "InvalidStatus"


@pytest.mark.parametrize("overrides", [{"quantity": 1.5}, {"customer_name": 42}])
def test_create_rejects_wrong_types(overrides):
    assert error_code(validate_create, {**VALID, **overrides}) == "InvalidFieldType"


@pytest.mark.parametrize("body", [None, [], "order"])
def test_create_requires_object_body(body):
    assert error_code(validate_create, body) == "InvalidBody"


# --- update ---------------------------------------------------------------


def test_update_returns_only_supplied_fields():
    update = validate_update({"status": "completed", "unknown": "ignored"})
    assert update.changes() == {"status": "completed"}


def test_update_changes_follow_field_order():
    update = validate_update({"order_date": "2026-03-01", "customer_name": "Bob", "amount": 12.5})
    assert list(update.changes()) == ["customer_name", "amount", "order_date"]


@pytest.mark.parametrize("body", [{}, {"unknown": 1}, {"customer_name": ""}, {"product": None}])
def test_update_without_usable_fields(body):
    assert error_code(validate_update, body) == "NoFieldsToUpdate"


def test_update_rejects_unknown_status():
    assert error_code(validate_update, {"status": "shipped"}) == "InvalidStatus"


@pytest.mark.parametrize("body", [{"quantity": 0}, {"amount": 0}, {"quantity": -2}, {"amount": "3"}])
def test_update_rejects_zero_and_negative_magnitudes(body):
    assert error_code(validate_update, body) == "InvalidMagnitude"


def test_update_empty_status_is_ignored_not_rejected():
    update = validate_update({"status": "", "product": "Keyboard"})
    assert update.changes() == {"product": "Keyboard"}


# --- filters --------------------------------------------------------------


def test_filters_defaults():
    f = validate_filters({})
    assert (f.page, f.limit) == (1, 10)
    assert f.status is None and f.min_amount is None and f.start_date is None
    assert f.offset == 0


def test_filters_full_set():
    f = validate_filters(
        {
            "page": "3",
            "limit": "20",
            "status": "completed",
            "minAmount": "10",
            "maxAmount": "99.5",
            "startDate": "2026-01-01",
            "endDate": "2026-12-31",
        }
    )
    assert (f.page, f.limit, f.offset) == (3, 20, 40)
    assert f.status == "completed"
    assert (f.min_amount, f.max_amount) == (10.0, 99.5)
    assert (f.start_date, f.end_date) == ("2026-01-01", "2026-12-31")


def test_filters_blank_values_are_absent():
    f = validate_filters({"page": "", "status": "", "minAmount": "", "endDate": ""})
    assert f.page == 1
    assert f.status is None and f.min_amount is None and f.end_date is None


@pytest.mark.parametrize(
    "params",
    [{"page": "0"}, {"page": "-1"}, {"limit": "0"}, {"limit": "101"}, {"limit": "500"}, {"page": "abc"}, {"limit": "2.5"}],
)
def test_filters_invalid_pagination(params):
    assert error_code(validate_filters, params) == "InvalidPagination"


def test_filters_limit_bounds_inclusive():
    assert validate_filters({"limit": "1"}).limit == 1
    assert validate_filters({"limit": "100"}).limit == 100


def test_filters_invalid_status():
    assert error_code(validate_filters, {"status": "shipped"}) == "InvalidStatusFilter"


@pytest.mark.parametrize("param", ["minAmount", "maxAmount"])
@pytest.mark.parametrize("raw", ["abc", "-1", "nan", "inf"])
def test_filters_invalid_amounts(param, raw):
    with pytest.raises(ValidationError) as exc:
        validate_filters({param: raw})
    assert exc.value.code == "InvalidAmountFilter"
    assert exc.value.message == f"Invalid {param} parameter"


def test_filters_zero_amount_allowed():
    assert validate_filters({"minAmount": "0"}).min_amount == 0.0


def test_filters_dates_are_opaque():
    f = validate_filters({"startDate": "not-a-date"})
    assert f.start_date == "not-a-date"


# --- ids ------------------------------------------------------------------


def test_parse_order_id():
    assert parse_order_id("42") == 42


@pytest.mark.parametrize("raw", ["abc", "", "1.5", "-3", "0", "²"])
def test_parse_order_id_rejects(raw):
    assert error_code(parse_order_id, raw) == "InvalidOrderId"


# --- magnitudes: rounding and column range ----------------------------------


@pytest.mark.parametrize("amount", [0.001, 0.004, 1e12])
def test_create_rejects_amounts_that_cannot_be_stored_positive(amount):
    assert error_code(validate_create, {**VALID, "amount": amount}) == "InvalidMagnitude"


@pytest.mark.parametrize("amount,stored", [(50.005, 50.01), (0.005, 0.01), (19.999, 20.0), (12.5, 12.5)])
def test_create_rounds_amount_to_cents(amount, stored):
    assert validate_create({**VALID, "amount": amount}).amount == stored


def test_update_rounds_and_checks_amount():
    assert validate_update({"amount": 50.005}).changes() == {"amount": 50.01}
    assert error_code(validate_update, {"amount": 0.001}) == "InvalidMagnitude"


def test_quantity_must_fit_the_column():
    assert error_code(validate_create, {**VALID, "quantity": 10**20}) == "InvalidMagnitude"
    assert error_code(validate_update, {"quantity": 2**31}) == "InvalidMagnitude"
    assert validate_create({**VALID, "quantity": 2**31 - 1}).quantity == 2**31 - 1


def test_huge_page_is_still_valid():
    f = validate_filters({"page": "99999999999999999999"})
    assert f.page == 99999999999999999999
