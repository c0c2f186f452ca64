from tests.helpers import error_codes


def add_category(client, name, parent_id=None):
    response = client.post("/api/categories", json={"name": name, "parentId": parent_id})
    assert response.status_code == 200
    return response.json()


def add_product(client, name, price=10, count=1, categories=None):
    response = client.post(
        "/api/products",
        json={"name": name, "price": price, "count": count, "categories": categories},
    )
    assert response.status_code == 200
    return response.json()


class TestCategoryRoutes:
    """HTTP tests for the category tree."""

    def test_add_and_get(self, admin_http):
        parent = add_category(admin_http, "Books")
        child = add_category(admin_http, "Novels", parent["id"])

        body = admin_http.get(f"/api/categories/{child['id']}").json()

        assert body == {"id": child["id"], "name": "Novels", "parentId": parent["id"], "parentName": "Books"}
        assert "parentId" not in parent

    def test_edit_empty(self, admin_http):
        category = add_category(admin_http, "Books")

        response = admin_http.put(f"/api/categories/{category['id']}", json={})

        assert error_codes(response) == [("EditCategoryEmpty", None)]

    def test_delete_and_list(self, admin_http):
        books = add_category(admin_http, "Books")
        add_category(admin_http, "Food")

        assert admin_http.delete(f"/api/categories/{books['id']}").json() == {}
        assert [c["name"] for c in admin_http.get("/api/categories").json()] == ["Food"]

    def test_categories_require_admin(self, client_http):
        response = client_http.post("/api/categories", json={"name": "Books"})

        assert error_codes(response) == [("NotAdmin", None)]


class TestProductRoutes:
    """HTTP tests for products and listing."""

    def test_add_and_get(self, admin_http, client_http):
        books = add_category(admin_http, "Books")
        product = add_product(admin_http, "Pen", categories=[books["id"]])

        body = client_http.get(f"/api/products/{product['id']}").json()

        assert body == {"id": product["id"], "name": "Pen", "price": 10, "count": 1, "categories": [books["id"]]}

    def test_add_invalid_price(self, admin_http):
        response = admin_http.post("/api/products", json={"name": "Pen", "price": 0})

        assert response.status_code == 400
        assert error_codes(response) == [("ValidationError", "price")]

    def test_edit_and_delete(self, admin_http):
        product = add_product(admin_http, "Pen")

        response = admin_http.put(f"/api/products/{product['id']}", json={"price": 25})

        assert response.json()["price"] == 25
        assert admin_http.delete(f"/api/products/{product['id']}").json() == {}
        assert error_codes(admin_http.get(f"/api/products/{product['id']}")) == [("ProductNotFound", "id")]

    def test_list_filters(self, admin_http, client_http):
        cat = add_category(admin_http, "cat1")
        add_product(admin_http, "warcraft")
        add_product(admin_http, "apple", categories=[cat["id"]])
        add_product(admin_http, "berretta")

        everything = client_http.get("/api/products").json()
        uncategorized = client_http.get("/api/products", params={"category": ""}).json()
        selected = client_http.get("/api/products", params={"category": str(cat["id"])}).json()

        assert [p["name"] for p in everything] == ["apple", "berretta", "warcraft"]
        assert [p["name"] for p in uncategorized] == ["berretta", "warcraft"]
        assert [p["name"] for p in selected] == ["apple"]

    def test_list_by_category(self, admin_http, client_http):
        at = add_category(admin_http, "at")
        wat = add_category(admin_http, "wat")
        add_product(admin_http, "berretta", categories=[at["id"], wat["id"]])
        add_product(admin_http, "pen")

        body = client_http.get("/api/products", params={"order": "category"}).json()

        assert body == [
            {"id": body[0]["id"], "name": "pen", "price": 10, "count": 1},
            {"id": body[1]["id"], "name": "berretta", "price": 10, "count": 1, "categories": [at["id"]]},
            {"id": body[1]["id"], "name": "berretta", "price": 10, "count": 1, "categories": [wat["id"]]},
        ]

    def test_list_bad_query(self, client_http):
        assert error_codes(client_http.get("/api/products", params={"category": "1,x"})) == [
            ("ValidationError", "category")
        ]
        assert error_codes(client_http.get("/api/products", params={"order": "price"})) == [
            ("ValidationError", "order")
        ]

    def test_list_without_session(self, http):
        assert error_codes(http().get("/api/products")) == [("NotLoggedIn", None)]
