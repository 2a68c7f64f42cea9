user_payload = {"name": "John Doe", "email": "john@example.com", "password": "qwerty123"}
user2_payload = {"name": "Jane Roe", "email": "jane@example.com", "password": "asdfgh456"}

merchant_payload = {
    "name": "Coffee House",
    "login": "coffee_house",
    "password": "beans!",
    "description": "Freshly roasted beans",
}


def product_payload(merchant_id, **overrides):
    payload = {
        "name": "Espresso beans 1kg",
        "description": "Dark roast",
        "img": "http://example.com/beans.png",
        "price": 1999,
        "merchantId": merchant_id,
    }
    payload.update(overrides)
    return payload
