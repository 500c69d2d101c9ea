import datetime
import logging
import re
from decimal import Decimal

import pytest

from eclat.utils.api_docs import main as generate_docs, render_markdown
from eclat.utils.config import Settings
from eclat.utils.helper import generate_order_number, generate_reservation_code, to_base36
from eclat.utils.middleware.logger import REQUEST_ID_HEADER
from eclat.utils.pricing import checkout_totals, line_subtotal, money, summarize
from tests.conftest import order_payload


def test_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "Z"
    assert to_base36(36) == "10"


def test_order_number_format():
    now = datetime.datetime(2024, 5, 1, tzinfo=datetime.timezone.utc)
    number = generate_order_number(now)
    assert re.match(r"^ORD-[0-9A-Z]+-[0-9A-Z]{4}$", number)
    assert number.split("-")[1] == to_base36(int(now.timestamp() * 1000))


def test_reservation_code_format():
    code = generate_reservation_code(datetime.datetime(2031, 1, 1))
    assert code.startswith("RES-2031-")
    assert 1000 <= int(code.rsplit("-", 1)[1]) <= 9999


def test_money_rounds_half_up():
    assert money("0.125") == Decimal("0.13")
    assert line_subtotal(14.5, 3) == Decimal("43.50")


def test_summarize_and_checkout_totals():
    assert summarize([(24, 2), (68, 1)], tax_rate=0.10) == (Decimal("116.00"), Decimal("11.60"), Decimal("127.60"))
    assert checkout_totals([(10, 1)], tax_rate=0.10, delivery_fee=0) == {
        "subtotal": 10.0,
        "tax": 1.0,
        "deliveryFee": 0.0,
        "total": 11.0,
    }


def test_settings_overrides():
    s = Settings(TAX_RATE=0.2, STORE_BACKEND="sql")
    assert s.TAX_RATE == 0.2
    assert s.STORE_BACKEND == "sql"


def test_settings_reject_unknown_keys():
    with pytest.raises(AttributeError):
        Settings(NOT_A_SETTING=1)


def test_request_id_is_echoed_and_generated(client):
    resp = client.get("/api/menu", headers={REQUEST_ID_HEADER: "abc123"})
    assert resp.headers[REQUEST_ID_HEADER] == "abc123"
    assert client.get("/api/menu").headers[REQUEST_ID_HEADER]


def test_order_creation_is_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="eclat"):
        number = client.post("/api/orders", json=order_payload()).json()["order"]["orderNumber"]
    assert f"New order received: {number}" in caplog.text


def test_render_markdown():
    schema = {
        "info": {"title": "Éclat Bistro", "version": "1.0.0"},
        "paths": {
            "/api/orders": {
                "post": {
                    "summary": "Create Order",
                    "tags": ["Orders"],
                    "requestBody": {"content": {"application/json": {"schema": {"$ref": "#/components/schemas/OrderCreate"}}}},
                    "responses": {"201": {"description": "Successful Response"}},
                }
            }
        },
    }
    md = render_markdown(schema, generated_at=datetime.datetime(2024, 1, 1))
    assert md.startswith("# Éclat Bistro API Documentation")
    assert "## `/api/orders`" in md
    assert "**Request Body:** `OrderCreate`" in md
    assert "- `201`: Successful Response" in md


def test_docs_command_writes_files(tmp_path):
    output = generate_docs(["--out-dir", str(tmp_path)])
    assert output.exists()
    assert (tmp_path / "openapi.json").exists()
    assert "/api/customer/dashboard" in output.read_text(encoding="utf-8")
