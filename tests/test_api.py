"""HTTP API 테스트 — 응답 봉투와 상태 코드.

HTTP API tests — envelope bodies and status codes for every entity router.
"""

import uuid
from datetime import datetime

from httpx import AsyncClient

CATEGORIES = "/api/v1/categories"
ORDERS = "/api/v1/orders"
CLIENTS = "/api/v1/clients"
PRIORITIES = "/api/v1/priorities"


def category_body(**overrides) -> dict:
    body = {"category": "ELECTRONICS", "description": "Gadgets", "status": "ACTIVE"}
    body.update(overrides)
    return body


async def test_health(client: AsyncClient):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


# ===== Categories =====

class TestCategoryAPI:
    """카테고리 API 테스트."""

    async def test_category_lifecycle(self, client: AsyncClient):
        """생성 → 수정 → 삭제 → 삭제된 ID 수정 실패."""
        res = await client.post(CATEGORIES, json=category_body())
        assert res.status_code == 201
        body = res.json()
        assert body["code"] == 201
        assert body["message"] == "Category created successfully"
        created = body["response"]
        assert created["id"]
        assert created["created_at"] == created["updated_at"]

        res = await client.put(
            f"{CATEGORIES}/{created['id']}",
            json=category_body(description="Updated Gadgets"),
        )
        assert res.status_code == 200
        updated = res.json()["response"]
        assert updated["description"] == "Updated Gadgets"
        assert datetime.fromisoformat(updated["updated_at"]) > datetime.fromisoformat(created["updated_at"])

        res = await client.delete(f"{CATEGORIES}/{created['id']}")
        assert res.status_code == 200
        assert res.json() == {
            "response": None,
            "code": 200,
            "message": "Category deleted successfully",
        }

        res = await client.put(f"{CATEGORIES}/{created['id']}", json=category_body())
        assert res.status_code == 404
        body = res.json()
        assert body["code"] == 404
        assert body["response"] is None
        assert body["message"] == "Error updating category: Category not found"

    async def test_put_without_status_keeps_inactive(self, client: AsyncClient):
        """PUT 본문에 상태가 없으면 기존 INACTIVE 유지."""
        res = await client.post(CATEGORIES, json=category_body(status="INACTIVE"))
        created = res.json()["response"]

        res = await client.put(
            f"{CATEGORIES}/{created['id']}",
            json={"category": "FOOD", "description": "Updated"},
        )
        assert res.status_code == 200
        assert res.json()["response"]["status"] == "INACTIVE"

    async def test_list_categories(self, client: AsyncClient):
        await client.post(CATEGORIES, json=category_body(category="FOOD"))
        await client.post(CATEGORIES, json=category_body(category="CLOTHING"))

        res = await client.get(CATEGORIES)
        assert res.status_code == 200
        kinds = {c["category"] for c in res.json()["response"]}
        assert kinds == {"FOOD", "CLOTHING"}

    async def test_get_category(self, client: AsyncClient):
        created = (await client.post(CATEGORIES, json=category_body())).json()["response"]
        res = await client.get(f"{CATEGORIES}/{created['id']}")
        assert res.status_code == 200
        assert res.json()["response"]["id"] == created["id"]

    async def test_invalid_enumeration(self, client: AsyncClient):
        """열거형 외 값은 400 봉투."""
        res = await client.post(CATEGORIES, json=category_body(category="WEAPONS"))
        assert res.status_code == 400
        body = res.json()
        assert body["code"] == 400
        assert body["response"] is None
        assert body["message"].startswith("Invalid request")
        assert "category" in body["message"]

    async def test_malformed_path_id(self, client: AsyncClient):
        res = await client.delete(f"{CATEGORIES}/not-a-uuid")
        assert res.status_code == 400
        assert res.json()["code"] == 400

    async def test_delete_missing(self, client: AsyncClient):
        res = await client.delete(f"{CATEGORIES}/{uuid.uuid4()}")
        assert res.status_code == 404
        assert res.json()["message"] == "Error deleting category: Category not found"


# ===== Orders =====

class TestOrderAPI:
    """주문 API 테스트."""

    async def test_create_and_list_orders(self, client: AsyncClient, order_payload):
        res = await client.post(ORDERS, json=order_payload)
        assert res.status_code == 201
        order = res.json()["response"]
        assert order["status"] == "PENDING"
        assert order["payment_method"] == "CREDIT_CARD"
        assert order["order_date"] == order["updated_at"]

        res = await client.get(ORDERS)
        assert res.status_code == 200
        assert [o["id"] for o in res.json()["response"]] == [order["id"]]

    async def test_negative_total_rejected(self, client: AsyncClient, order_payload):
        """음수 금액은 400."""
        res = await client.post(ORDERS, json={**order_payload, "total_amount": "-5.00"})
        assert res.status_code == 400
        assert "total_amount" in res.json()["message"]

    async def test_invalid_payment_method(self, client: AsyncClient, order_payload):
        res = await client.post(ORDERS, json={**order_payload, "payment_method": "BARTER"})
        assert res.status_code == 400

    async def test_update_order_status(self, client: AsyncClient, order_payload):
        order = (await client.post(ORDERS, json=order_payload)).json()["response"]

        res = await client.put(
            f"{ORDERS}/{order['id']}",
            json={**order_payload, "status": "DELIVERED", "tracking_number": "TRK-42"},
        )
        assert res.status_code == 200
        updated = res.json()["response"]
        assert updated["status"] == "DELIVERED"
        assert updated["tracking_number"] == "TRK-42"

    async def test_order_for_unknown_client(self, client: AsyncClient, order_payload):
        res = await client.post(ORDERS, json={**order_payload, "client_id": str(uuid.uuid4())})
        assert res.status_code == 404
        assert res.json()["message"] == "Error creating order: Client not found"

        res = await client.get(ORDERS)
        assert res.json()["response"] == []


# ===== Clients / Priorities =====

class TestClientPriorityAPI:
    """고객/우선순위 API 테스트."""

    async def test_client_crud(self, client: AsyncClient):
        res = await client.post(CLIENTS, json={"name": "Marta Gil", "email": "marta@example.com"})
        assert res.status_code == 201
        created = res.json()["response"]

        res = await client.post(CLIENTS, json={"name": "Dup", "email": "marta@example.com"})
        assert res.status_code == 409

        res = await client.put(
            f"{CLIENTS}/{created['id']}",
            json={"name": "Marta Gil", "email": "marta.gil@example.com", "phone": "555-0199"},
        )
        assert res.status_code == 200
        assert res.json()["response"]["phone"] == "555-0199"

        res = await client.delete(f"{CLIENTS}/{created['id']}")
        assert res.status_code == 200
        res = await client.get(f"{CLIENTS}/{created['id']}")
        assert res.status_code == 404

    async def test_invalid_email(self, client: AsyncClient):
        res = await client.post(CLIENTS, json={"name": "No Mail", "email": "nope"})
        assert res.status_code == 400

    async def test_priority_crud(self, client: AsyncClient):
        res = await client.post(PRIORITIES, json={"level": "HIGH", "description": "Next dispatch"})
        assert res.status_code == 201
        created = res.json()["response"]

        res = await client.post(PRIORITIES, json={"level": "HIGH"})
        assert res.status_code == 409

        res = await client.get(PRIORITIES)
        assert [p["level"] for p in res.json()["response"]] == ["HIGH"]

        res = await client.delete(f"{PRIORITIES}/{created['id']}")
        assert res.status_code == 200

    async def test_client_with_orders_cannot_be_deleted(
        self, client: AsyncClient, order_payload, customer
    ):
        await client.post(ORDERS, json=order_payload)
        res = await client.delete(f"{CLIENTS}/{customer.id}")
        assert res.status_code == 409
        assert res.json()["message"] == "Error deleting client: Client has existing orders"
