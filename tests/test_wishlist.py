import pytest
from sqlalchemy import func, select
from wishlist_api.schema.full_schema import WishList


@pytest.mark.asyncio
async def test_get_wishlist(ac_client, user):

    resp = await ac_client.get(f"/users/{user['id']}/wishlist")
    assert resp.status_code == 200, resp.text

    body = resp.json()
    assert body["userId"] == user["id"]
    assert body["isPublic"] is False
    assert body["title"] is None
    assert body["items"] == []


@pytest.mark.asyncio
async def test_second_wishlist_conflict(ac_client, user, db_session):

    resp = await ac_client.post(f"/users/{user['id']}/wishlist")
    assert resp.status_code == 409
    assert resp.json() == {"message": "WishList already exists"}

    count = await db_session.scalar(select(func.count()).select_from(WishList).where(WishList.user_id == user["id"]))
    assert count == 1


@pytest.mark.asyncio
async def test_recreate_after_delete(ac_client, user, product):

    await ac_client.post(f"/users/{user['id']}/wishlist/items", json={"productId": product["id"]})

    resp = await ac_client.delete(f"/users/{user['id']}/wishlist")
    assert resp.status_code == 200
    assert resp.json() == {"message": "WishList deleted"}

    resp = await ac_client.get(f"/users/{user['id']}/wishlist")
    assert resp.status_code == 404
    assert resp.json() == {"message": "WishList not found"}

    resp = await ac_client.post(f"/users/{user['id']}/wishlist")
    assert resp.status_code == 201, resp.text
    assert resp.json()["userId"] == user["id"]

    # the old items went with the old wishlist
    resp = await ac_client.get(f"/users/{user['id']}/wishlist")
    assert resp.json()["items"] == []


@pytest.mark.asyncio
async def test_create_wishlist_unknown_user(ac_client):

    resp = await ac_client.post("/users/9999/wishlist")
    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


@pytest.mark.asyncio
async def test_patch_wishlist(ac_client, user):

    resp = await ac_client.patch(f"/users/{user['id']}/wishlist", json={"title": "Birthday", "isPublic": True})
    assert resp.status_code == 200, resp.text
    assert resp.json()["title"] == "Birthday"
    assert resp.json()["isPublic"] is True

    resp = await ac_client.patch(f"/users/{user['id']}/wishlist", json={"is_public": False})
    assert resp.status_code == 200
    assert resp.json()["title"] == "Birthday"
    assert resp.json()["isPublic"] is False


@pytest.mark.asyncio
async def test_patch_wishlist_rejects_null_flag(ac_client, user):

    resp = await ac_client.patch(f"/users/{user['id']}/wishlist", json={"isPublic": None})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_missing_wishlist(ac_client):

    assert (await ac_client.get("/users/9999/wishlist")).status_code == 404
    assert (await ac_client.patch("/users/9999/wishlist", json={"title": "x"})).status_code == 404
    assert (await ac_client.delete("/users/9999/wishlist")).status_code == 404
