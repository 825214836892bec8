from __future__ import annotations

import uuid

import pytest

from pos_api import crud
from pos_api.models import PaymentMode, SalesInvoice
from pos_api.schemas import SalesInvoiceCreate


async def test_create_sales_invoice(client, customer):
    resp = await client.post(
        "/api/create_sales_invoice",
        json={"customerId": customer["_id"], "paymentMode": "Cash", "totalAmount": 250},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Sales invoice created successfully"
    invoice = body["salesInvoice"]
    uuid.UUID(invoice["_id"])
    assert invoice["customerId"] == customer["_id"]
    assert invoice["paymentMode"] == "Cash"
    assert invoice["totalAmount"] == 250
    assert invoice["createdAt"]


async def test_get_sales_invoice_joins_customer_name_and_phone(client, customer):
    created = await client.post(
        "/api/create_sales_invoice",
        json={"customerId": customer["_id"], "paymentMode": "Card", "totalAmount": 99.5},
    )
    invoice_id = created.json()["salesInvoice"]["_id"]

    resp = await client.get(f"/api/get_sales_invoice/{invoice_id}")
    assert resp.status_code == 200
    invoice = resp.json()["salesInvoice"]
    assert invoice["_id"] == invoice_id
    assert invoice["paymentMode"] == "Card"
    assert invoice["totalAmount"] == 99.5
    assert invoice["customerId"] == {
        "_id": customer["_id"],
        "name": "Apex Retail",
        "phone": "+91 98765 43210",
    }


@pytest.mark.parametrize("payment_mode", ["Bitcoin", "cash", ""])
async def test_payment_mode_outside_enum_is_rejected(client, customer, payment_mode):
    resp = await client.post(
        "/api/create_sales_invoice",
        json={"customerId": customer["_id"], "paymentMode": payment_mode, "totalAmount": 10},
    )
    assert resp.status_code == 500
    assert resp.json() == {"message": "Failed to create sales invoice"}
    assert (await client.get("/api/sales_report")).json() == []


async def test_missing_required_field_is_rejected(client, customer):
    resp = await client.post(
        "/api/create_sales_invoice",
        json={"customerId": customer["_id"], "paymentMode": "UPI"},
    )
    assert resp.status_code == 500
    assert resp.json() == {"message": "Failed to create sales invoice"}


async def test_malformed_customer_id_is_rejected(client):
    resp = await client.post(
        "/api/create_sales_invoice",
        json={"customerId": "not-an-id", "paymentMode": "UPI", "totalAmount": 10},
    )
    assert resp.status_code == 500


async def test_dangling_customer_reference_is_accepted(client):
    missing_customer = str(uuid.uuid4())
    created = await client.post(
        "/api/create_sales_invoice",
        json={"customerId": missing_customer, "paymentMode": "UPI", "totalAmount": 40},
    )
    assert created.status_code == 201
    assert created.json()["salesInvoice"]["customerId"] == missing_customer

    invoice_id = created.json()["salesInvoice"]["_id"]
    resp = await client.get(f"/api/get_sales_invoice/{invoice_id}")
    assert resp.status_code == 200
    assert resp.json()["salesInvoice"]["customerId"] is None


async def test_unknown_invoice_is_not_found(client):
    resp = await client.get(f"/api/get_sales_invoice/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Invoice not found"}


async def test_malformed_invoice_id_is_server_error(client):
    resp = await client.get("/api/get_sales_invoice/abc123")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Failed to fetch invoice details"}


async def test_repeated_create_is_not_idempotent(client, customer):
    payload = {"customerId": customer["_id"], "paymentMode": "Cash", "totalAmount": 5}
    first = await client.post("/api/create_sales_invoice", json=payload)
    second = await client.post("/api/create_sales_invoice", json=payload)
    assert first.json()["salesInvoice"]["_id"] != second.json()["salesInvoice"]["_id"]


async def test_crud_create_sets_defaults(db):
    invoice = await crud.sales_invoice.create(
        db,
        obj_in=SalesInvoiceCreate(customerId=str(uuid.uuid4()), paymentMode="UPI", totalAmount=12.5),
    )
    assert isinstance(invoice, SalesInvoice)
    assert isinstance(invoice.id, uuid.UUID)
    assert invoice.payment_mode is PaymentMode.UPI
    assert invoice.created_at is not None


def test_model_rejects_invalid_payment_mode():
    with pytest.raises(ValueError):
        SalesInvoice(customer_id=uuid.uuid4(), payment_mode="Cheque", total_amount=1)


def test_model_parses_customer_id_string():
    customer_id = uuid.uuid4()
    invoice = SalesInvoice(customer_id=str(customer_id), payment_mode="Card", total_amount=1)
    assert invoice.customer_id == customer_id
    assert invoice.payment_mode is PaymentMode.CARD


@pytest.mark.parametrize(
    "payload",
    [
        {"paymentMode": "Cash", "totalAmount": "abc"},
        {"paymentMode": "Cash", "totalAmount": True},
        {"paymentMode": "Cash", "totalAmount": [10]},
        {"paymentMode": 3, "totalAmount": 10},
    ],
)
async def test_uncoercible_invoice_fields_get_generic_server_error(client, customer, payload):
    resp = await client.post("/api/create_sales_invoice", json=dict(payload, customerId=customer["_id"]))
    assert resp.status_code == 500
    assert resp.json() == {"message": "Failed to create sales invoice"}
    assert (await client.get("/api/sales_report")).json() == []


async def test_non_string_customer_id_gets_generic_server_error(client):
    resp = await client.post(
        "/api/create_sales_invoice",
        json={"customerId": 123, "paymentMode": "UPI", "totalAmount": 10},
    )
    assert resp.status_code == 500
    assert resp.json() == {"message": "Failed to create sales invoice"}


async def test_numeric_string_total_is_coerced(client, customer):
    resp = await client.post(
        "/api/create_sales_invoice",
        json={"customerId": customer["_id"], "paymentMode": "UPI", "totalAmount": "42.5"},
    )
    assert resp.status_code == 201
    assert resp.json()["salesInvoice"]["totalAmount"] == 42.5


def test_model_rejects_non_numeric_total():
    with pytest.raises(ValueError):
        SalesInvoice(customer_id=uuid.uuid4(), payment_mode="Cash", total_amount="abc")
