"""Integration tests for Payment and Invoice API endpoints"""

import pytest
from datetime import date
from decimal import Decimal
from httpx import AsyncClient

from src.domain import Invoice


async def seed_invoice(db_session, client_id: int, number: str, total: str) -> Invoice:
    invoice = Invoice(
        invoice_number=number,
        client_id=client_id,
        issue_date=date(2024, 3, 1),
        due_date=date(2024, 3, 16),
        subtotal=Decimal(total),
        tax=Decimal("0.00"),
        total=Decimal(total),
    )
    db_session.add(invoice)
    await db_session.commit()
    await db_session.refresh(invoice)
    return invoice


class TestPaymentsAPIIntegration:
    """Integration test suite for Payment API endpoints"""

    @pytest.mark.asyncio
    async def test_register_payment_success(self, client: AsyncClient, db_session, billing_client):
        """POST /payments allocates and banks the remainder, returns 201"""
        invoice = await seed_invoice(db_session, billing_client.id, "INV-2024-000001", "100.00")

        payload = {
            "clientId": billing_client.id,
            "amount": "120.00",
            "paymentDate": "2024-03-10",
            "paymentMethod": "bank_transfer",
            "transactionId": "TRX-88231",
            "invoiceAllocations": [{"invoiceId": invoice.id, "amount": "100.00"}],
        }
        response = await client.post("/payments", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["totalAllocated"] == 100.0
        assert data["creditAdded"] == 20.0
        assert data["currentCredit"] == 20.0
        assert all(
            isinstance(data[key], float) for key in ("totalAllocated", "creditAdded", "currentCredit")
        )
        assert data["payment"]["amount"] == 120.0
        assert data["payment"]["clientId"] == billing_client.id
        assert data["payment"]["paymentMethod"] == "bank_transfer"
        assert data["payment"]["paymentDate"] == "2024-03-10"

    @pytest.mark.asyncio
    async def test_register_payment_missing_fields(self, client: AsyncClient, billing_client):
        """POST /payments without payment date and method returns 400"""
        response = await client.post(
            "/payments", json={"clientId": billing_client.id, "amount": "10.00"}
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"]["code"] == "VALIDATION_ERROR"
        assert "required" in data["error"]["message"]

    @pytest.mark.asyncio
    async def test_register_payment_non_positive_amount(self, client: AsyncClient, billing_client):
        payload = {
            "clientId": billing_client.id,
            "amount": "0",
            "paymentDate": "2024-03-10",
            "paymentMethod": "cash",
        }
        response = await client.post("/payments", json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_register_payment_sub_cent_amount(self, client: AsyncClient, billing_client):
        payload = {
            "clientId": billing_client.id,
            "amount": "0.001",
            "paymentDate": "2024-03-10",
            "paymentMethod": "cash",
        }
        response = await client.post("/payments", json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_register_payment_allocations_exceed_amount(self, client: AsyncClient, db_session, billing_client):
        client_id = billing_client.id
        first = await seed_invoice(db_session, client_id, "INV-2024-000001", "40.00")
        second = await seed_invoice(db_session, client_id, "INV-2024-000002", "40.00")
        payload = {
            "clientId": client_id,
            "amount": "50.00",
            "paymentDate": "2024-03-10",
            "paymentMethod": "cash",
            "invoiceAllocations": [
                {"invoiceId": first.id, "amount": "40.00"},
                {"invoiceId": second.id, "amount": "40.00"},
            ],
        }
        response = await client.post("/payments", json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ALLOCATION_EXCEEDS_PAYMENT"

        credit = await client.get(f"/payments/client/{client_id}/credit")
        assert credit.json()["creditBalance"] == 0.0

    @pytest.mark.asyncio
    async def test_register_payment_malformed_body(self, client: AsyncClient):
        response = await client.post("/payments", json={"amount": "abc"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_register_payment_foreign_invoice(self, client: AsyncClient, billing_client):
        payload = {
            "clientId": billing_client.id,
            "amount": "10.00",
            "paymentDate": "2024-03-10",
            "paymentMethod": "cash",
            "invoiceAllocations": [{"invoiceId": 4242, "amount": "10.00"}],
        }
        response = await client.post("/payments", json=payload)

        assert response.status_code == 400
        data = response.json()
        assert data["error"]["code"] == "INVOICE_NOT_FOUND"
        assert "4242" in data["error"]["message"]

    @pytest.mark.asyncio
    async def test_register_payment_unknown_client(self, client: AsyncClient):
        payload = {
            "clientId": 999,
            "amount": "10.00",
            "paymentDate": "2024-03-10",
            "paymentMethod": "cash",
        }
        response = await client.post("/payments", json=payload)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CLIENT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_unpaid_invoices_and_credit(self, client: AsyncClient, db_session, billing_client):
        await seed_invoice(db_session, billing_client.id, "INV-2024-000001", "100.00")

        unpaid = await client.get(f"/payments/client/{billing_client.id}/unpaid-invoices")
        credit = await client.get(f"/payments/client/{billing_client.id}/credit")

        assert unpaid.status_code == 200
        invoices = unpaid.json()
        assert len(invoices) == 1
        assert invoices[0]["invoice_number"] == "INV-2024-000001"
        assert invoices[0]["amount_due"] == 100.0
        assert isinstance(invoices[0]["amount_due"], float)
        assert invoices[0]["amount_paid"] == 0.0
        assert "amountDue" not in invoices[0]
        assert invoices[0]["status"] == "pending"

        assert credit.status_code == 200
        assert credit.json()["clientId"] == billing_client.id
        assert credit.json()["creditBalance"] == 0.0
        assert isinstance(credit.json()["creditBalance"], float)

    @pytest.mark.asyncio
    async def test_credit_for_unknown_client(self, client: AsyncClient):
        response = await client.get("/payments/client/999/credit")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CLIENT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_payment_history_and_detail(self, client: AsyncClient, db_session, billing_client):
        invoice = await seed_invoice(db_session, billing_client.id, "INV-2024-000001", "100.00")
        for day, amount in (("2024-03-01", "30.00"), ("2024-03-05", "20.00")):
            created = await client.post(
                "/payments",
                json={
                    "clientId": billing_client.id,
                    "amount": amount,
                    "paymentDate": day,
                    "paymentMethod": "cash",
                    "invoiceAllocations": [{"invoiceId": invoice.id, "amount": amount}],
                },
            )
            assert created.status_code == 201

        history = await client.get(
            f"/payments/client/{billing_client.id}/history", params={"page": 1, "limit": 1}
        )

        assert history.status_code == 200
        data = history.json()
        assert data["pagination"] == {"page": 1, "limit": 1, "totalCount": 2, "totalPages": 2}
        latest = data["payments"][0]
        assert latest["paymentDate"] == "2024-03-05"
        assert latest["allocations"][0]["invoiceNumber"] == "INV-2024-000001"

        detail = await client.get(f"/payments/{latest['id']}")
        assert detail.status_code == 200
        assert detail.json()["allocations"][0]["amount"] == 20.0

        invoice_payments = await client.get(f"/invoices/{invoice.id}/payments")
        assert invoice_payments.status_code == 200
        assert len(invoice_payments.json()) == 2

    @pytest.mark.asyncio
    async def test_payment_not_found(self, client: AsyncClient):
        response = await client.get("/payments/12345")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PAYMENT_NOT_FOUND"


class TestInvoicesAPIIntegration:

    @pytest.mark.asyncio
    async def test_legacy_invoice_payment(self, client: AsyncClient, db_session, billing_client):
        invoice = await seed_invoice(db_session, billing_client.id, "INV-2024-000001", "100.00")

        response = await client.post(
            f"/invoices/{invoice.id}/payments",
            json={"amount": "150.00", "paymentDate": "2024-03-10", "paymentMethod": "cash"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["totalAllocated"] == 100.0
        assert data["creditAdded"] == 50.0

    @pytest.mark.asyncio
    async def test_list_payments_for_unknown_invoice(self, client: AsyncClient):
        response = await client.get("/invoices/999/payments")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_legacy_invoice_payment_unknown_invoice(self, client: AsyncClient):
        response = await client.post(
            "/invoices/999/payments",
            json={"amount": "10.00", "paymentDate": "2024-03-10", "paymentMethod": "cash"},
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_invoice_pdf(self, client: AsyncClient, db_session, billing_client):
        invoice = await seed_invoice(db_session, billing_client.id, "INV-2024-000007", "29.99")

        response = await client.get(f"/invoices/{invoice.id}/pdf")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert "invoice_INV-2024-000007.pdf" in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")
