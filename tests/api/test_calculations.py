"""Calculations Route — POST /api/v1/calculations.

Invariants:
    - Successful computation returns 200 with result; persisted_to echoes the caller path
    - Divide-by-zero → 400 INVALID_ARGUMENT and no file written
    - Non-integer operands → 400 INVALID_ARGUMENT naming the operand, same as the core error
    - Unknown operations → 400 UNKNOWN_OPERATION; other malformed payloads → 400 VALIDATION_ERROR
"""

import pytest


async def test_add_returns_result(client):
    res = await client.post(
        "/api/v1/calculations", json={"operation": "add", "x": 2, "y": 3},
    )
    assert res.status_code == 200
    assert res.json() == {
        "operation": "add", "x": 2, "y": 3, "result": 5, "persisted_to": None,
    }


async def test_divide_floors(client):
    res = await client.post(
        "/api/v1/calculations", json={"operation": "divide", "x": -7, "y": 2},
    )
    assert res.json()["result"] == -4


async def test_persists_when_path_given(client, output_dir):
    res = await client.post(
        "/api/v1/calculations",
        json={"operation": "multiply", "x": 6, "y": 7, "path": "answer.txt"},
    )
    assert res.status_code == 200
    assert res.json()["persisted_to"] == "answer.txt"
    assert (output_dir / "answer.txt").read_text() == "42"


async def test_divide_by_zero_returns_invalid_argument(client, output_dir):
    res = await client.post(
        "/api/v1/calculations",
        json={"operation": "divide", "x": 1, "y": 0, "path": "never.txt"},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_ARGUMENT"
    assert error["context"]["operation"] == "divide"
    assert error["field"] == "y"
    assert not (output_dir / "never.txt").exists()


@pytest.mark.parametrize("payload, field, got", [
    ({"operation": "add", "x": 1.5, "y": 1}, "x", "float"),
    ({"operation": "add", "x": "1", "y": 1}, "x", "str"),
    ({"operation": "add", "x": True, "y": 1}, "x", "bool"),
    ({"operation": "divide", "x": 1, "y": None}, "y", "NoneType"),
])
async def test_non_integer_operand_is_invalid_argument(client, payload, field, got):
    res = await client.post("/api/v1/calculations", json=payload)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_ARGUMENT"
    assert error["field"] == field
    assert error["message"] == f"Operand '{field}' must be an integer, got {got}"


async def test_unknown_operation(client):
    res = await client.post(
        "/api/v1/calculations", json={"operation": "modulo", "x": 1, "y": 1},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "UNKNOWN_OPERATION"
    assert error["field"] == "operation"
    assert error["message"] == "Unknown operation 'modulo'"


@pytest.mark.parametrize("payload, field", [
    ({"operation": "add", "x": 1}, "y"),
    ({"operation": "add", "x": 1, "y": 1, "path": "   "}, "path"),
])
async def test_malformed_payload_returns_validation_error(client, payload, field):
    res = await client.post("/api/v1/calculations", json=payload)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["field"] == field


async def test_path_escape_rejected(client, output_dir):
    res = await client.post(
        "/api/v1/calculations",
        json={"operation": "add", "x": 1, "y": 1, "path": "../escape.txt"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_ARGUMENT"
    assert not (output_dir.parent / "escape.txt").exists()


async def test_missing_subdirectory_is_persistence_error(client):
    res = await client.post(
        "/api/v1/calculations",
        json={"operation": "add", "x": 1, "y": 1, "path": "nested/r.txt"},
    )
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "PERSISTENCE_ERROR"
