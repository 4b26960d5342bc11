"""Category Routes — end-to-end through the session gate, services and SQLite.

Invariants:
    - ADMIN session: full CRUD; duplicate create → 409
    - USER session: reads allowed, writes 403
    - No session: 401 on every endpoint
    - Error bodies follow the translator shapes
"""

from app.config import get_settings
from app.models.category import Category


async def _create(client, headers, name="Tech", descr="Tech posts"):
    return await client.post(
        "/api/categories", json={"catName": name, "descr": descr}, headers=headers,
    )


# ─── Scenarios ───────────────────────────────────────────────────

async def test_admin_creates_then_duplicate_conflicts(client, admin_headers):
    res = await _create(client, admin_headers)
    assert res.status_code == 201
    body = res.json()
    assert body["catName"] == "Tech"
    assert body["descr"] == "Tech posts"
    assert isinstance(body["id"], int)

    dup = await _create(client, admin_headers)
    assert dup.status_code == 409
    assert dup.json()["status"] == 409
    assert "already exists" in dup.json()["message"]


async def test_user_put_is_forbidden(client, user_headers):
    res = await client.put(
        "/api/categories/1", json={"descr": "x"}, headers=user_headers,
    )
    assert res.status_code == 403
    assert res.json() == {
        "error": "You do not have permission to perform this action.",
    }


async def test_forbidden_write_does_not_reach_service(client, user_headers, test_db):
    res = await _create(client, user_headers)
    assert res.status_code == 403
    assert await test_db.get(Category, 1) is None


async def test_no_session_list_is_unauthorized(client):
    res = await client.get("/api/categories")
    assert res.status_code == 401
    assert res.json() == {
        "error": "Unauthorized: Please log in to access this resource.",
    }


async def test_unknown_session_is_unauthorized(client):
    res = await client.get(
        "/api/categories", headers={get_settings().session_header_name: "bogus"},
    )
    assert res.status_code == 401


async def test_session_cookie_is_accepted(client, admin_headers):
    settings = get_settings()
    token = admin_headers[settings.session_header_name]
    res = await client.get(
        "/api/categories",
        headers={"Cookie": f"{settings.session_cookie_name}={token}"},
    )
    assert res.status_code == 200


# ─── Reads ───────────────────────────────────────────────────────

async def test_user_can_list_and_get(client, admin_headers, user_headers):
    created = (await _create(client, admin_headers)).json()
    res = await client.get("/api/categories", headers=user_headers)
    assert res.status_code == 200
    assert res.json() == [created]
    res = await client.get(f"/api/categories/{created['id']}", headers=user_headers)
    assert res.json() == created


async def test_get_missing_is_404(client, user_headers):
    res = await client.get("/api/categories/999", headers=user_headers)
    assert res.status_code == 404
    assert res.json() == {"status": 404, "message": "Category with id 999 not found."}


# ─── Update ──────────────────────────────────────────────────────

async def test_update_descr_only(client, admin_headers):
    created = (await _create(client, admin_headers)).json()
    res = await client.put(
        f"/api/categories/{created['id']}", json={"descr": "All tech"},
        headers=admin_headers,
    )
    assert res.status_code == 200
    assert res.json() == {"id": created["id"], "catName": "Tech", "descr": "All tech"}


async def test_update_empty_body_is_400(client, admin_headers):
    created = (await _create(client, admin_headers)).json()
    res = await client.put(
        f"/api/categories/{created['id']}", json={}, headers=admin_headers,
    )
    assert res.status_code == 400
    assert "At least one field" in res.json()["message"]


async def test_update_blank_name_is_field_error(client, admin_headers):
    created = (await _create(client, admin_headers)).json()
    res = await client.put(
        f"/api/categories/{created['id']}", json={"catName": " "},
        headers=admin_headers,
    )
    assert res.status_code == 400
    assert set(res.json()) == {"catName"}


async def test_update_missing_is_404(client, admin_headers):
    res = await client.put(
        "/api/categories/999", json={"descr": "x"}, headers=admin_headers,
    )
    assert res.status_code == 404


async def test_update_to_existing_name_hits_unique_constraint(client, admin_headers):
    await _create(client, admin_headers, name="Tech")
    other = (await _create(client, admin_headers, name="Science")).json()
    res = await client.put(
        f"/api/categories/{other['id']}", json={"catName": "Tech"},
        headers=admin_headers,
    )
    assert res.status_code == 409


# ─── Create validation / delete ──────────────────────────────────

async def test_create_blank_fields_is_field_map(client, admin_headers):
    res = await _create(client, admin_headers, name="", descr="")
    assert res.status_code == 400
    assert res.json() == {
        "catName": "Category name is required",
        "descr": "Category description is required",
    }


async def test_delete_then_get_is_404(client, admin_headers):
    created = (await _create(client, admin_headers)).json()
    res = await client.delete(
        f"/api/categories/{created['id']}", headers=admin_headers,
    )
    assert res.status_code == 200
    assert res.json() == {"message": "Category deleted successfully"}
    res = await client.get(
        f"/api/categories/{created['id']}", headers=admin_headers,
    )
    assert res.status_code == 404


async def test_delete_missing_is_404(client, admin_headers):
    res = await client.delete("/api/categories/999", headers=admin_headers)
    assert res.status_code == 404
