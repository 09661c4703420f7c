"""
API tests for the /products routes.
"""


class TestListProductsEndpoint:
    def test_list_all(self, client):
        response = client.get("/api/products")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        data = response.json()
        assert len(data["products"]) == 8
        assert data["metadata"] == {
            "total": 8,
            "filtered": 8,
            "filters": {
                "minPrice": None,
                "maxPrice": None,
                "name": None,
                "sortBy": None,
                "order": "asc",
            },
        }

    def test_price_range_and_name(self, client):
        response = client.get(
            "/api/products",
            params={"minPrice": "50", "maxPrice": "150", "name": "gaming", "sortBy": "price"},
        )
        assert response.status_code == 200
        data = response.json()
        assert [p["name"] for p in data["products"]] == ["Mouse Gaming", "Teclado Gaming"]
        assert data["metadata"]["filters"]["minPrice"] == 50.0
        assert data["metadata"]["filters"]["maxPrice"] == 150.0
        assert data["metadata"]["filtered"] == 2

    def test_invalid_numbers_are_ignored(self, client):
        response = client.get("/api/products", params={"minPrice": "abc", "maxPrice": "xyz"})
        assert response.status_code == 200
        data = response.json()
        assert data["metadata"]["filtered"] == 8
        assert data["metadata"]["filters"]["minPrice"] is None

    def test_sort_by_name_desc(self, client):
        asc = client.get("/api/products", params={"sortBy": "name"}).json()["products"]
        desc = client.get("/api/products", params={"sortBy": "name", "order": "desc"}).json()["products"]
        assert [p["name"] for p in desc] == [p["name"] for p in reversed(asc)]
        assert desc[0]["name"] == "Webcam"


class TestCreateProductEndpoint:
    def test_create(self, client):
        response = client.post("/api/products", json={"name": " Tablet ", "price": 499.99})
        assert response.status_code == 201
        product = response.json()
        assert product == {"id": 9, "name": "Tablet", "price": 499.99}
        assert response.headers["location"] == "/api/products/9"

    def test_created_product_visible_on_by_id_route(self, client):
        location = client.post("/api/products", json={"name": "Tablet", "price": 10}).headers["location"]
        response = client.get(location)
        assert response.status_code == 200
        assert response.json()["name"] == "Tablet"

    def test_missing_fields(self, client):
        response = client.post("/api/products", json={"name": "Tablet"})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Missing data"
        assert body["required"] == ["name", "price"]
        assert "message" in body

    def test_wrong_price_type(self, client):
        response = client.post("/api/products", json={"name": "Tablet", "price": "10"})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid data types"

    def test_huge_integer_price(self, client):
        response = client.post(
            "/api/products",
            content='{"name": "Tablet", "price": 1' + "0" * 400 + "}",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid price"

    def test_non_positive_price(self, client):
        response = client.post("/api/products", json={"name": "Tablet", "price": 0})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid price"

    def test_duplicate_name(self, client):
        response = client.post("/api/products", json={"name": "MONITOR", "price": 10})
        assert response.status_code == 409
        assert response.json()["error"] == "Duplicate product"
        assert client.get("/api/products").json()["metadata"]["total"] == 8


class TestProductByIdEndpoint:
    def test_get(self, client):
        response = client.get("/api/products/1")
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Laptop", "price": 1200.0}

    def test_get_non_numeric(self, client):
        response = client.get("/api/products/abc")
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid ID"

    def test_get_missing(self, client):
        response = client.get("/api/products/9999")
        assert response.status_code == 404
        assert response.json()["error"] == "Product not found"

    def test_delete(self, client):
        response = client.delete("/api/products/2")
        assert response.status_code == 200
        body = response.json()
        assert body["deletedProduct"] == {"id": 2, "name": "Mouse", "price": 25.0}
        assert body["remainingProducts"] == 7
        assert client.get("/api/products/2").status_code == 404
        assert client.get("/api/products").json()["metadata"]["total"] == 7

    def test_delete_missing(self, client):
        response = client.delete("/api/products/9999")
        assert response.status_code == 404
        assert client.get("/api/products").json()["metadata"]["total"] == 8

    def test_overlong_numeric_id(self, client):
        for method in ("GET", "DELETE"):
            response = client.request(method, "/api/products/" + "1" * 5000)
            assert response.status_code == 400
            assert response.json()["error"] == "Invalid ID"

    def test_delete_non_numeric(self, client):
        assert client.delete("/api/products/x").status_code == 400

    def test_id_not_reused_after_delete(self, client):
        client.delete("/api/products/8")
        response = client.post("/api/products", json={"name": "Tablet", "price": 10})
        assert response.json()["id"] == 9

    def test_other_methods_not_allowed(self, client):
        for method in ("POST", "PUT", "PATCH", "OPTIONS", "TRACE"):
            response = client.request(method, "/api/products/1", json={"name": "x"})
            assert response.status_code == 405
            assert response.headers["allow"] == "GET, DELETE"
            body = response.json()
            assert body["error"] == "Method not allowed"
            assert body["allowedMethods"] == ["GET", "DELETE"]
