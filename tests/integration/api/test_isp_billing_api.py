"""Integration tests for the HTTP API"""

import pytest
from decimal import Decimal
from httpx import AsyncClient

TENANT = "tenant_api"


async def create_party(client: AsyncClient, kind: str, name: str, **extra) -> dict:
    response = await client.post("/api/parties", json={"tenant_id": TENANT, "kind": kind, "name": name, **extra})
    assert response.status_code == 201, response.text
    return response.json()


class TestIspBillingAPIIntegration:
    """Integration test suite for the API endpoints"""

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_bill_and_payment_lifecycle(self, client: AsyncClient):
        """Bill 10000, pay 4000, edit to 6000, delete: balances follow every step"""
        provider = await create_party(client, "provider", "Upstream Transit")

        response = await client.post(
            "/api/invoices",
            json={
                "tenant_id": TENANT,
                "document_type": "purchase_bill",
                "party_id": provider["id"],
                "billing_date": "2024-01-01",
                "lines": [{"item_name": "IIG Bandwidth", "unit": "Mbps", "quantity": "100", "rate": "100"}],
            },
        )
        assert response.status_code == 201, response.text
        invoice = response.json()
        assert invoice["invoice_number"].startswith("PB-")
        assert Decimal(invoice["due_amount"]) == Decimal("10000")

        response = await client.post(
            "/api/payments",
            json={
                "tenant_id": TENANT,
                "payment_type": "provider_payment",
                "party_id": provider["id"],
                "invoice_id": invoice["id"],
                "amount": "4000",
                "payment_method": "bank",
            },
        )
        assert response.status_code == 201, response.text
        payment = response.json()
        assert payment["invoice_payment_status"] == "partial"
        assert Decimal(payment["party_balance"]) == Decimal("6000")

        response = await client.patch(f"/api/payments/{payment['id']}", json={"amount": "6000"})
        assert response.status_code == 200, response.text
        assert Decimal(response.json()["invoice_due_amount"]) == Decimal("4000")

        response = await client.delete(f"/api/payments/{payment['id']}")
        assert response.status_code == 200, response.text
        assert response.json()["invoice_payment_status"] == "due"

        response = await client.get(f"/api/audit/payment/{payment['id']}")
        assert response.status_code == 200
        assert [e["action"] for e in response.json()["entries"]] == ["update_payment", "delete_payment"]

        response = await client.get(f"/api/audit/party/{provider['id']}")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ENTITY_TYPE"

        response = await client.get(f"/api/parties/provider/{provider['id']}/balance")
        assert response.status_code == 200
        balance = response.json()
        assert Decimal(balance["balance"]) == Decimal("10000")
        assert balance["in_sync"] is True

        response = await client.get(f"/api/parties/provider/{provider['id']}/ledger")
        assert response.status_code == 200
        assert response.json()["total"] == 4

        response = await client.get("/api/reconciliation", params={"tenant_id": TENANT})
        assert response.status_code == 200
        assert response.json()["discrepancies_found"] == 0

    @pytest.mark.asyncio
    async def test_payment_below_minimum_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/payments",
            json={
                "tenant_id": TENANT,
                "payment_type": "collection",
                "party_id": "client_1",
                "amount": "5",
            },
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"]["code"] == "VALIDATION_ERROR"
        assert "amount" in data["error"]["message"]

    @pytest.mark.asyncio
    async def test_unknown_party_returns_404(self, client: AsyncClient):
        response = await client.post(
            "/api/payments",
            json={
                "tenant_id": TENANT,
                "payment_type": "collection",
                "party_id": "missing-client",
                "amount": "50",
            },
        )

        assert response.status_code == 404
        assert response.json() == {
            "error": {"code": "PARTY_NOT_FOUND", "message": "Client missing-client not found"}
        }

    @pytest.mark.asyncio
    async def test_unknown_invoice_pdf_returns_404(self, client: AsyncClient):
        response = await client.get("/api/invoices/missing/pdf")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_reseller_transfer_errors(self, client: AsyncClient):
        parent = await create_party(client, "reseller", "Zone Reseller", opening_balance="100")
        sub = await create_party(client, "reseller", "Street Reseller", parent_id=parent["id"])
        locked = await create_party(client, "reseller", "Locked Reseller", can_transfer_balance=False)

        response = await client.post(
            f"/api/resellers/{parent['id']}/fund",
            json={"sub_reseller_id": sub["id"], "amount": "300"},
        )
        assert response.status_code == 402
        assert response.json()["error"]["code"] == "INSUFFICIENT_BALANCE"

        response = await client.post(
            f"/api/resellers/{locked['id']}/fund",
            json={"sub_reseller_id": sub["id"], "amount": "10"},
        )
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "TRANSFER_NOT_ALLOWED"

        response = await client.post(
            f"/api/resellers/{parent['id']}/fund",
            json={"sub_reseller_id": sub["id"], "amount": "60"},
        )
        assert response.status_code == 200, response.text
        assert Decimal(response.json()["reseller_balance"]) == Decimal("40")

    @pytest.mark.asyncio
    async def test_recharge_state_machine(self, client: AsyncClient):
        customer = await create_party(client, "customer", "Rahim Uddin", expiry_date="2024-03-10")

        response = await client.post(
            "/api/recharges",
            json={
                "tenant_id": TENANT,
                "customer_id": customer["id"],
                "amount": "500",
                "payment_method": "due",
                "recharge_date": "2024-03-01",
            },
        )
        assert response.status_code == 201, response.text
        recharge = response.json()
        assert recharge["status"] == "due"
        assert recharge["customer_expiry_date"] == "2024-04-09"

        response = await client.post(f"/api/recharges/{recharge['id']}/verify", json={})
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "INVALID_RECHARGE_STATE"

        response = await client.post(f"/api/recharges/{recharge['id']}/mark-paid", json={"payment_method": "due"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_PAYMENT_METHOD"

        response = await client.post(f"/api/recharges/{recharge['id']}/mark-paid", json={"payment_method": "cash"})
        assert response.status_code == 200, response.text
        assert response.json()["status"] == "completed"
        assert Decimal(response.json()["customer_due_amount"]) == Decimal("0")

    @pytest.mark.asyncio
    async def test_wallet_withdraw_over_balance(self, client: AsyncClient):
        customer = await create_party(client, "customer", "Rahim Uddin")

        response = await client.post(
            f"/api/wallet/{customer['id']}/transactions",
            json={"transaction_type": "topup", "amount": "100"},
        )
        assert response.status_code == 201, response.text

        response = await client.post(
            f"/api/wallet/{customer['id']}/transactions",
            json={"transaction_type": "withdraw", "amount": "150"},
        )
        assert response.status_code == 402
        assert response.json()["error"]["code"] == "INSUFFICIENT_WALLET_BALANCE"

        response = await client.get(f"/api/wallet/{customer['id']}/transactions")
        assert response.status_code == 200
        assert Decimal(response.json()["wallet_balance"]) == Decimal("100")

    @pytest.mark.asyncio
    async def test_verify_with_wallet_shortfall_returns_400(self, client: AsyncClient):
        """A manual payment naming more wallet money than the customer holds stays pending"""
        customer = await create_party(client, "customer", "Karim Mia", expiry_date="2024-03-10")
        response = await client.post(
            f"/api/wallet/{customer['id']}/transactions",
            json={"transaction_type": "topup", "amount": "100"},
        )
        assert response.status_code == 201, response.text

        response = await client.post(
            "/api/recharges",
            json={
                "tenant_id": TENANT,
                "customer_id": customer["id"],
                "amount": "500",
                "payment_method": "bkash",
                "manual": True,
                "notes": "bKash TRX91 (Wallet: 200)",
                "recharge_date": "2024-03-01",
            },
        )
        assert response.status_code == 201, response.text
        recharge = response.json()
        assert recharge["status"] == "pending_manual"

        response = await client.post(f"/api/recharges/{recharge['id']}/verify", json={})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "WALLET_DEBIT_FAILED"

        response = await client.get(
            "/api/recharges", params={"tenant_id": TENANT, "customer_id": customer["id"]}
        )
        assert response.status_code == 200
        assert [r["status"] for r in response.json()["recharges"]] == ["pending_manual"]

        response = await client.get(f"/api/wallet/{customer['id']}/transactions")
        assert Decimal(response.json()["wallet_balance"]) == Decimal("100")

    @pytest.mark.asyncio
    async def test_reseller_recharges_customer(self, client: AsyncClient):
        reseller = await create_party(client, "reseller", "Zone Reseller", opening_balance="600")
        locked = await create_party(
            client, "reseller", "Collector Only", opening_balance="600", can_recharge_customers=False
        )
        customer = await create_party(client, "customer", "Rahim Uddin", expiry_date="2024-03-10")
        body = {"customer_id": customer["id"], "amount": "500", "recharge_date": "2024-03-01"}

        response = await client.post(f"/api/resellers/{locked['id']}/recharge-customer", json=body)
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "RECHARGE_NOT_ALLOWED"

        response = await client.post(f"/api/resellers/{reseller['id']}/recharge-customer", json=body)
        assert response.status_code == 200, response.text
        data = response.json()
        assert Decimal(data["reseller_balance"]) == Decimal("100")
        assert data["reseller_transaction"]["type"] == "customer_payment"
        assert data["recharge"]["payment_method"] == "reseller_wallet"
        assert data["recharge"]["customer_expiry_date"] == "2024-04-09"

        response = await client.post(f"/api/resellers/{reseller['id']}/recharge-customer", json=body)
        assert response.status_code == 402
        assert response.json()["error"]["code"] == "INSUFFICIENT_BALANCE"

    @pytest.mark.asyncio
    async def test_item_catalogue_feeds_invoice_lines(self, client: AsyncClient):
        response = await client.post("/api/item-categories", json={"tenant_id": TENANT, "name": "Bandwidth"})
        assert response.status_code == 201, response.text
        category = response.json()

        response = await client.post(
            "/api/items",
            json={"tenant_id": TENANT, "name": "IIG Bandwidth", "category_id": category["id"], "unit_price": "100"},
        )
        assert response.status_code == 201, response.text
        item = response.json()
        assert item["category_name"] == "Bandwidth"

        response = await client.post(
            "/api/items", json={"tenant_id": TENANT, "name": "Orphan", "category_id": "missing"}
        )
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CATEGORY_NOT_FOUND"

        response = await client.get("/api/items", params={"tenant_id": TENANT, "category_id": category["id"]})
        assert response.status_code == 200
        assert [i["name"] for i in response.json()["items"]] == ["IIG Bandwidth"]

        response = await client.get("/api/item-categories", params={"tenant_id": TENANT})
        assert [c["name"] for c in response.json()["categories"]] == ["Bandwidth"]

        provider = await create_party(client, "provider", "Upstream Transit")
        response = await client.post(
            "/api/invoices",
            json={
                "tenant_id": TENANT,
                "document_type": "purchase_bill",
                "party_id": provider["id"],
                "lines": [
                    {
                        "item_id": item["id"],
                        "item_name": item["name"],
                        "unit": item["unit"],
                        "quantity": "20",
                        "rate": item["unit_price"],
                    }
                ],
            },
        )
        assert response.status_code == 201, response.text
        line = response.json()["lines"][0]
        assert line["item_id"] == item["id"]
        assert Decimal(line["total"]) == Decimal("2000")
