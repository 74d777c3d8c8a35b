"""Operation Endpoint: POST / contract for all four services.

Tests cover:
    - Concrete scenarios: 1+2, 2-1, 2*3, 6/3, 6/0
    - Every malformed body maps to 400 {"error": "Invalid request"} on every service
    - Success bodies carry only "result", error bodies only "error", including
      unreadable bodies and framework 404/405 replies
    - Int operands follow double overflow and precision
    - Identical requests give identical responses
"""

import logging

import pytest

from arithmetic_services.core.domain_types import Operation
from arithmetic_services.core.operations import OperationSpec


INVALID = {"error": "Invalid request"}


# ─── success ─────────────────────────────────────────────────────

async def test_adder_adds(adder):
    res = await adder.post("/", json={"a": 1, "b": 2})
    assert res.status_code == 200
    assert res.json() == {"result": 3}


async def test_subtractor_subtracts(subtractor):
    res = await subtractor.post("/", json={"a": 2, "b": 1})
    assert res.status_code == 200
    assert res.json() == {"result": 1}


async def test_multiplier_multiplies(multiplier):
    res = await multiplier.post("/", json={"a": 2, "b": 3})
    assert res.status_code == 200
    assert res.json() == {"result": 6}


async def test_divider_divides(divider):
    res = await divider.post("/", json={"a": 6, "b": 3})
    assert res.status_code == 200
    assert res.json() == {"result": 2}
    assert res.text == '{"result":2}'


@pytest.mark.parametrize(
    ("a", "b"), [(0.1, 0.2), (-3, 7.5), (1e10, -1e-10), (0, 0)],
)
async def test_adder_matches_native_float_addition(adder, a, b):
    res = await adder.post("/", json={"a": a, "b": b})
    assert res.status_code == 200
    assert res.json() == {"result": a + b}


async def test_divider_returns_fractional_quotient(divider):
    res = await divider.post("/", json={"a": 1, "b": 3})
    assert res.json() == {"result": 1 / 3}


async def test_unknown_keys_are_ignored(subtractor):
    res = await subtractor.post("/", json={"a": 5, "b": 3, "op": "add"})
    assert res.status_code == 200
    assert res.json() == {"result": 2}


async def test_repeated_request_is_idempotent(multiplier):
    bodies = []
    for _ in range(3):
        res = await multiplier.post("/", json={"a": 1.1, "b": 3})
        bodies.append((res.status_code, res.json()))
    assert bodies == [bodies[0]] * 3


# ─── division by zero ────────────────────────────────────────────

@pytest.mark.parametrize("a", [6, 0, -2.5, 1e300])
async def test_divider_rejects_zero_divisor(divider, a):
    res = await divider.post("/", json={"a": a, "b": 0})
    assert res.status_code == 400
    assert res.json() == {"error": "Division by zero"}


async def test_divider_rejects_float_zero_divisor(divider):
    res = await divider.post("/", json={"a": 6, "b": 0.0})
    assert res.status_code == 400
    assert res.json() == {"error": "Division by zero"}


async def test_invalid_request_wins_over_division_by_zero(divider):
    res = await divider.post("/", json={"a": "6", "b": 0})
    assert res.status_code == 400
    assert res.json() == INVALID


# ─── invalid request ─────────────────────────────────────────────

@pytest.mark.parametrize(
    "body",
    [
        {"a": "x", "b": 2},
        {"a": 1, "b": "2"},
        {"a": None, "b": 2},
        {"a": 1, "b": None},
        {"a": True, "b": 1},
        {"a": 1},
        {"b": 2},
        {},
        {"a": [1], "b": 2},
        {"a": {"v": 1}, "b": 2},
        [1, 2],
        "a=1&b=2",
        42,
        None,
    ],
)
async def test_malformed_body_is_invalid_request(any_service, body):
    res = await any_service.post("/", json=body)
    assert res.status_code == 400
    assert res.json() == INVALID


async def test_missing_body_is_invalid_request(any_service):
    res = await any_service.post("/")
    assert res.status_code == 400
    assert res.json() == INVALID


async def test_unparseable_json_is_invalid_request(any_service):
    res = await any_service.post(
        "/", content=b'{"a": 1, "b":', headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == INVALID


@pytest.mark.parametrize("literal", [b"NaN", b"Infinity", b"-Infinity"])
async def test_non_finite_operand_is_invalid_request(any_service, literal):
    res = await any_service.post(
        "/",
        content=b'{"a": ' + literal + b', "b": 1}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == INVALID


async def test_error_body_never_carries_result(any_service):
    res = await any_service.post("/", json={"a": "x", "b": 2})
    assert "result" not in res.json()


# ─── overflow ────────────────────────────────────────────────────

async def test_overflowing_result_is_reported(multiplier):
    res = await multiplier.post("/", json={"a": 1e308, "b": 10})
    assert res.status_code == 400
    assert res.json() == {"error": "Result out of range"}


async def test_int_operands_overflow_like_floats(multiplier):
    as_ints = await multiplier.post("/", json={"a": 10**200, "b": 10**200})
    as_floats = await multiplier.post("/", json={"a": 1e200, "b": 1e200})
    assert as_ints.status_code == as_floats.status_code == 400
    assert as_ints.json() == as_floats.json() == {"error": "Result out of range"}


async def test_int_operands_round_like_doubles(adder):
    res = await adder.post("/", json={"a": 2**53, "b": 1})
    assert res.status_code == 200
    assert res.json() == {"result": 2**53}


async def test_int_operand_beyond_double_range_is_invalid_request(adder):
    res = await adder.post("/", json={"a": 10**400, "b": 1})
    assert res.status_code == 400
    assert res.json() == INVALID


# ─── unreadable bodies and framework errors ──────────────────────

async def test_non_utf8_body_is_invalid_request(any_service):
    res = await any_service.post(
        "/", content=b'{"a": "\xff", "b": 1}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == INVALID


async def test_int_literal_past_parser_digit_limit_is_invalid_request(adder):
    res = await adder.post(
        "/", content=b'{"a": ' + b"9" * 5000 + b', "b": 1}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == INVALID


async def test_unknown_path_uses_error_shape(any_service):
    res = await any_service.post("/missing", json={"a": 1, "b": 2})
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


async def test_wrong_method_uses_error_shape(any_service):
    res = await any_service.get("/")
    assert res.status_code == 405
    assert res.json() == {"error": "Method Not Allowed"}
    assert "POST" in res.headers["allow"]


# ─── error logging ───────────────────────────────────────────────

async def test_domain_error_log_carries_category_and_severity(divider, caplog):
    caplog.set_level(logging.WARNING, logger="arithmetic_services.api.error_handlers")
    await divider.post("/", json={"a": 6, "b": 0})
    (record,) = [r for r in caplog.records if getattr(r, "error_code", None)]
    assert record.error_code == "DIVISION_BY_ZERO"
    assert record.category == "business_rule"
    assert record.severity == "warning"
    assert record.service == "divider"


async def test_validation_error_log_carries_category(adder, caplog):
    caplog.set_level(logging.WARNING, logger="arithmetic_services.api.error_handlers")
    await adder.post("/", json={"a": "x", "b": 2})
    (record,) = [r for r in caplog.records if getattr(r, "error_code", None)]
    assert record.error_code == "INVALID_REQUEST"
    assert record.category == "validation"


# ─── unexpected failure ──────────────────────────────────────────

async def test_unexpected_exception_returns_500_without_details(
    make_client, monkeypatch,
):
    def explode(a, b):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(
        "arithmetic_services.api.routes.operation.get_spec",
        lambda operation: OperationSpec(operation, explode),
    )
    async with make_client(Operation.ADD, raise_app_exceptions=False) as client:
        res = await client.post("/", json={"a": 1, "b": 2})
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
    assert "secret" not in res.text
