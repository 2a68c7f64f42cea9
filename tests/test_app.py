import importlib
import pytest
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager
from wishlist_api.auth.utils import verify_password
from wishlist_api.config.settings import config_settings
from wishlist_api.main import app, create_app
from wishlist_api.schema.full_schema import User
from payloads import merchant_payload, product_payload, user_payload

USER_ROUTES_MODULE = "wishlist_api.user.routes"


@pytest.mark.asyncio
async def test_health(ac_client):

    resp = await ac_client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_request_id_generated_and_echoed(ac_client):

    resp = await ac_client.get("/health")
    assert resp.headers.get("X-Request-ID")

    resp = await ac_client.get("/users/9999", headers={"X-Request-ID": "req-123"})
    assert resp.status_code == 404
    assert resp.headers["X-Request-ID"] == "req-123"


@pytest.mark.asyncio
async def test_unknown_route_uses_error_shape(ac_client):

    resp = await ac_client.get("/nowhere")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


@pytest.mark.asyncio
async def test_non_integer_id_is_invalid(ac_client):

    resp = await ac_client.get("/users/abc")
    assert resp.status_code == 422
    assert resp.json() == {"message": "Invalid request"}


@pytest.mark.asyncio
async def test_unhandled_error_returns_500(monkeypatch, ac_client):

    routes_mod = importlib.import_module(USER_ROUTES_MODULE)

    async def boom(session):
        raise RuntimeError("db exploded with secret details")

    monkeypatch.setattr(routes_mod, "list_users", boom)

    # starlette re-raises after the fallback handler has produced the response
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/users", headers={"X-Request-ID": "rid-500"})

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}
    assert resp.headers["X-Request-ID"] == "rid-500"


@pytest.mark.asyncio
async def test_openapi_and_docs(ac_client):

    resp = await ac_client.get("/openapi.json")
    assert resp.status_code == 200
    paths = resp.json()["paths"]
    assert "/users/{user_id}/wishlist/items/{item_id}" in paths
    assert "/merchants/{merchant_id}/products" in paths

    resp = await ac_client.get("/api-docs")
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_admin_console(ac_client, user):

    resp = await ac_client.get("/admin/")
    assert resp.status_code == 200

    resp = await ac_client.get("/admin/user/list")
    assert resp.status_code == 200
    assert user["email"] in resp.text
    assert "pbkdf2" not in resp.text


@pytest.mark.asyncio
async def test_metrics_endpoint(monkeypatch):

    monkeypatch.setattr(config_settings, "ENABLE_METRICS", True)
    metrics_app = create_app()

    async with LifespanManager(metrics_app):
        async with AsyncClient(transport=ASGITransport(app=metrics_app), base_url="http://test") as client:
            await client.get("/health")
            resp = await client.get("/metrics")

    assert resp.status_code == 200
    assert "http_requests_total" in resp.text


@pytest.mark.asyncio
async def test_end_to_end(ac_client):

    resp = await ac_client.post("/users", json=user_payload)
    assert resp.status_code == 201
    user_id = resp.json()["id"]

    resp = await ac_client.get(f"/users/{user_id}/wishlist")
    assert resp.status_code == 200
    assert resp.json()["items"] == []

    resp = await ac_client.post("/merchants", json=merchant_payload)
    assert resp.status_code == 201
    merchant_id = resp.json()["id"]

    resp = await ac_client.post("/products", json=product_payload(merchant_id))
    assert resp.status_code == 201
    product = resp.json()

    resp = await ac_client.get(f"/merchants/{merchant_id}/products")
    assert resp.status_code == 200
    assert resp.json() == [product]

    resp = await ac_client.post(f"/users/{user_id}/wishlist/items", json={"productId": product["id"]})
    assert resp.status_code == 201

    resp = await ac_client.get(f"/users/{user_id}/wishlist")
    items = resp.json()["items"]
    assert len(items) == 1
    assert items[0]["product"] == product


@pytest.mark.asyncio
async def test_cors_preflight(ac_client):

    origin = "http://frontend.example"
    resp = await ac_client.options("/users", headers={
        "Origin": origin,
        "Access-Control-Request-Method": "POST",
        "Access-Control-Request-Headers": "content-type",
    })
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] in (origin, "*")
    assert "POST" in resp.headers["access-control-allow-methods"]

    resp = await ac_client.get("/health", headers={"Origin": origin})
    assert resp.headers["access-control-allow-origin"] in (origin, "*")
    assert "x-request-id" in resp.headers["access-control-expose-headers"].lower()


@pytest.mark.asyncio
async def test_admin_edit_form_hides_password(ac_client, user):

    resp = await ac_client.get(f"/admin/user/edit/{user['id']}")
    assert resp.status_code == 200
    assert user["email"] in resp.text
    assert "pbkdf2" not in resp.text


@pytest.mark.asyncio
async def test_admin_edit_keeps_password(ac_client, user, db_session):

    form = {"name": "Renamed", "email": user["email"], "password": ""}
    resp = await ac_client.post(f"/admin/user/edit/{user['id']}", data=form)
    assert resp.status_code == 302, resp.text

    row = await db_session.get(User, user["id"])
    assert row.name == "Renamed"
    assert verify_password(user_payload["password"], row.password)


@pytest.mark.asyncio
async def test_admin_edit_sets_new_password(ac_client, user, db_session):

    form = {"name": user["name"], "email": user["email"], "password": "new-secret"}
    resp = await ac_client.post(f"/admin/user/edit/{user['id']}", data=form)
    assert resp.status_code == 302, resp.text

    row = await db_session.get(User, user["id"])
    assert row.password != "new-secret"
    assert verify_password("new-secret", row.password)
