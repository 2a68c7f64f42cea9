import pytest


async def add_item(ac_client, user_id, product_id, status=None):
    resp = await ac_client.post(f"/users/{user_id}/wishlist/items", json={"productId": product_id, "status": status})
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.mark.asyncio
async def test_add_item(ac_client, user, product):

    item = await add_item(ac_client, user["id"], product["id"], status="wanted")
    assert item["productId"] == product["id"]
    assert item["status"] == "wanted"

    wishlist = (await ac_client.get(f"/users/{user['id']}/wishlist")).json()
    assert item["wishListId"] == wishlist["id"]
    assert [i["id"] for i in wishlist["items"]] == [item["id"]]
    assert wishlist["items"][0]["product"]["name"] == product["name"]


@pytest.mark.asyncio
async def test_add_unknown_product(ac_client, user):

    resp = await ac_client.post(f"/users/{user['id']}/wishlist/items", json={"productId": 9999})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Product not found"}


@pytest.mark.asyncio
async def test_add_item_without_wishlist(ac_client, product):

    resp = await ac_client.post("/users/9999/wishlist/items", json={"productId": product["id"]})
    assert resp.status_code == 404
    assert resp.json() == {"message": "WishList not found"}


@pytest.mark.asyncio
async def test_list_and_get_items(ac_client, user, product):

    first = await add_item(ac_client, user["id"], product["id"])
    second = await add_item(ac_client, user["id"], product["id"], status="gift")

    resp = await ac_client.get(f"/users/{user['id']}/wishlist/items")
    assert resp.status_code == 200
    items = resp.json()
    assert [i["id"] for i in items] == [first["id"], second["id"]]
    assert all(i["product"]["id"] == product["id"] for i in items)

    resp = await ac_client.get(f"/users/{user['id']}/wishlist/items/{second['id']}")
    assert resp.status_code == 200
    assert resp.json()["status"] == "gift"
    assert resp.json()["product"]["merchantId"] == product["merchantId"]


@pytest.mark.asyncio
async def test_item_of_other_user_is_not_found(ac_client, user, user2, product):

    item = await add_item(ac_client, user["id"], product["id"])
    other = f"/users/{user2['id']}/wishlist/items/{item['id']}"

    resp = await ac_client.get(other)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Item not found"}

    assert (await ac_client.patch(other, json={"status": "stolen"})).status_code == 404
    assert (await ac_client.delete(other)).status_code == 404

    # still there, unchanged, for its owner
    resp = await ac_client.get(f"/users/{user['id']}/wishlist/items/{item['id']}")
    assert resp.status_code == 200
    assert resp.json()["status"] is None


@pytest.mark.asyncio
async def test_patch_item_status(ac_client, user, product):

    item = await add_item(ac_client, user["id"], product["id"], status="wanted")

    resp = await ac_client.patch(f"/users/{user['id']}/wishlist/items/{item['id']}", json={"status": "received"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["status"] == "received"
    assert resp.json()["productId"] == product["id"]


@pytest.mark.asyncio
async def test_delete_item(ac_client, user, product):

    item = await add_item(ac_client, user["id"], product["id"])

    resp = await ac_client.delete(f"/users/{user['id']}/wishlist/items/{item['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Item removed from wishlist"}

    resp = await ac_client.delete(f"/users/{user['id']}/wishlist/items/{item['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_deleting_product_removes_items(ac_client, user, product):

    await add_item(ac_client, user["id"], product["id"])
    await ac_client.delete(f"/products/{product['id']}")

    resp = await ac_client.get(f"/users/{user['id']}/wishlist")
    assert resp.json()["items"] == []
