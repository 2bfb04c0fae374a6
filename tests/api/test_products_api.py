"""Tests for product endpoints."""


class TestProductQueries:
    """Test product read endpoints."""

    def test_list_products(self, client):
        response = client.get("/products")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 12
        assert data["items"][0]["sku"] == "HP-FLO-001"
        assert data["items"][0]["price"] == "45.00"

    def test_list_by_category(self, client):
        response = client.get("/products", params={"category_id": "pre-rolls"})
        assert response.status_code == 200
        assert [p["id"] for p in response.json()["items"]] == ["5", "6"]

    def test_list_by_unknown_category(self, client):
        response = client.get("/products", params={"category_id": "tinctures"})
        assert response.status_code == 404
        assert response.json()["error_code"] == "CATEGORY_NOT_FOUND"

    def test_list_include_inactive(self, client):
        client.post("/products/1", json={"active": False})

        assert client.get("/products").json()["total"] == 11
        response = client.get("/products", params={"include_inactive": True})
        assert response.json()["total"] == 12

    def test_low_stock(self, client):
        response = client.get("/products/low-stock")
        assert {p["id"] for p in response.json()["items"]} == {"3", "8", "9"}

    def test_out_of_stock(self, client):
        response = client.get("/products/out-of-stock")
        assert {p["id"] for p in response.json()["items"]} == {"6", "11"}

    def test_get_product(self, client):
        response = client.get("/products/4")
        assert response.status_code == 200
        assert response.json()["name"] == "OG Kush"

    def test_get_product_not_found(self, client):
        response = client.get("/products/ghost")
        assert response.status_code == 404

        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert data["details"] == {"product_id": "ghost"}
        assert data["request_id"]


class TestProductMutations:
    """Test product write endpoints."""

    def test_update_returns_changes(self, client):
        response = client.post("/products/1", json={"price": 50, "inventory": 20})
        assert response.status_code == 200

        data = response.json()
        assert data["product"]["price"] == "50.00"
        assert [c["type"] for c in data["changes"]] == ["inventory", "price"]
        assert data["changes"][1]["before"] == "$45.00"
        assert data["changes"][1]["after"] == "$50.00"

    def test_update_unknown_product(self, client):
        response = client.post("/products/ghost", json={"price": 5})
        assert response.status_code == 404

    def test_update_invalid_price(self, client):
        response = client.post("/products/1", json={"price": 0})
        assert response.status_code == 422

        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"]["field"] == "price"

    def test_update_immutable_field(self, client):
        """Test unknown or immutable fields are rejected by the schema."""
        response = client.post("/products/1", json={"sku": "HP-FLO-999"})
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_add_product(self, client):
        response = client.post(
            "/products",
            json={"name": "Kush Cookies", "price": "38.50", "category": "Edibles"},
        )
        assert response.status_code == 201

        data = response.json()
        assert data["sku"] == "HP-EDI-010"
        assert data["price"] == "38.50"
        assert client.get(f"/products/{data['id']}").status_code == 200

    def test_add_product_unknown_category(self, client):
        response = client.post(
            "/products",
            json={"name": "CBD Drops", "price": 30, "category": "Tinctures"},
        )
        assert response.status_code == 422

    def test_delete_product(self, client):
        response = client.delete("/products/2")
        assert response.status_code == 200
        assert response.json()["id"] == "2"
        assert client.get("/products/2").status_code == 404

    def test_duplicate_product(self, client):
        response = client.post("/products/4/duplicate")
        assert response.status_code == 201

        data = response.json()
        assert data["name"] == "OG Kush (Copy)"
        assert data["sku"] == "HP-FLO-005"

    def test_adjust_stock(self, client):
        response = client.post("/products/1/stock", json={"amount": 30, "mode": "remove"})
        assert response.status_code == 200
        assert response.json()["product"]["inventory"] == 0

    def test_adjust_stock_negative(self, client):
        response = client.post("/products/1/stock", json={"amount": -3, "mode": "add"})
        assert response.status_code == 422
        assert response.json()["details"]["field"] == "amount"

    def test_adjust_stock_bad_mode(self, client):
        response = client.post("/products/1/stock", json={"amount": 3, "mode": "double"})
        assert response.status_code == 422
