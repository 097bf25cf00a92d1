import pytest

ADMIN_EMAIL = "admin@mittirang.com"
ADMIN_PASSWORD = "admin123"


def test_write_routes_require_auth(client):
    assert client.post("/api/admin/products", json={"name": "Shoe", "price": 10}).status_code == 401
    assert client.put("/api/admin/products/1", json={"name": "Shoe", "price": 10}).status_code == 401
    assert client.delete("/api/admin/products/1").status_code == 401
    assert client.get("/api/admin/products").status_code == 401


def test_bad_token_rejected(client):
    res = client.get("/api/admin/products", headers={"Authorization": "Bearer not-a-token"})
    assert res.status_code == 401


def test_login_wrong_password(client):
    res = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "nope"})
    assert res.status_code == 401


def test_login_sets_cookie_used_by_admin_routes(client):
    res = client.post("/api/auth/login", json={"email": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD})
    assert res.status_code == 200
    assert "admin-token" in res.cookies

    # the cookie alone authenticates
    assert client.get("/api/auth/me").json() == {"email": ADMIN_EMAIL}
    assert client.get("/api/admin/products").status_code == 200

    client.post("/api/auth/logout")
    client.cookies.clear()
    assert client.get("/api/auth/me").status_code == 401


@pytest.mark.parametrize(
    "payload, code",
    [
        ({"name": "Shoe", "price": 1000, "sellingprice": 1200}, "invalid_selling_price"),
        ({"name": "", "price": 1000}, "missing_name"),
        ({"name": "Shoe", "price": "free"}, "invalid_price"),
    ],
)
def test_create_validation_errors(client, admin_headers, payload, code):
    res = client.post("/api/admin/products", json=payload, headers=admin_headers)
    assert res.status_code == 400
    assert res.json()["code"] == code
    assert client.get("/api/products").json() == []


def test_update_and_delete(client, admin_headers):
    res = client.post(
        "/api/admin/products",
        json={"name": "Runner", "price": "2500", "sellingprice": "2000", "sizes": [9, 8]},
        headers=admin_headers,
    )
    pid = res.json()["id"]

    res = client.put(
        f"/api/admin/products/{pid}",
        json={"name": "Runner Pro", "price": 2500, "sizes": ["11", 10]},
        headers=admin_headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Runner Pro"
    assert body["sizes"] == [10, 11]
    assert body["sellingprice"] is None
    assert body["discount"]["has"] is False

    res = client.put(
        f"/api/admin/products/{pid}",
        json={"name": "Runner Pro", "price": 2500, "sellingprice": 2500},
        headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["code"] == "invalid_selling_price"

    assert client.delete(f"/api/admin/products/{pid}", headers=admin_headers).status_code == 204
    assert client.get(f"/api/products/{pid}").status_code == 404
    assert client.delete(f"/api/admin/products/{pid}", headers=admin_headers).status_code == 404


def test_update_unknown_product(client, admin_headers):
    res = client.put("/api/admin/products/42", json={"name": "X", "price": 1}, headers=admin_headers)
    assert res.status_code == 404


def test_dashboard_summary_counts(client, admin_headers):
    for name in ("First", "Second"):
        client.post("/api/admin/products", json={"name": name, "price": 100, "sellingprice": 80}, headers=admin_headers)

    res = client.get("/api/admin/products", headers=admin_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 2
    assert body["discounted"] == 2
    assert {p["name"] for p in body["items"]} == {"First", "Second"}
