LAPTOP = {"nombre": "Laptop", "precio": 1200.50, "stock": 10, "categoriaId": 1}


def test_create_producto(producto_client):
    r = producto_client.post("/api/productos", json=LAPTOP)
    assert r.status_code == 201
    assert r.json() == {"id": 1, **LAPTOP}


def test_create_accepts_snake_case_categoria_id(producto_client):
    r = producto_client.post(
        "/api/productos",
        json={"nombre": "Mouse", "precio": 25.99, "stock": 50, "categoria_id": 3},
    )
    assert r.status_code == 201
    assert r.json()["categoriaId"] == 3


def test_create_with_dangling_categoria_is_accepted(producto_client):
    r = producto_client.post("/api/productos", json={**LAPTOP, "categoriaId": 999})
    assert r.status_code == 201
    assert r.json()["categoriaId"] == 999


def test_list_and_get(producto_client):
    created = producto_client.post("/api/productos", json=LAPTOP).json()
    assert producto_client.get("/api/productos").json() == [created]
    assert producto_client.get(f"/api/productos/{created['id']}").json() == created


def test_get_missing_producto_is_404(producto_client):
    r = producto_client.get("/api/productos/5")
    assert r.status_code == 404
    assert r.json()["code"] == "producto_not_found"


def test_update_copies_supplied_fields(producto_client):
    created = producto_client.post("/api/productos", json=LAPTOP).json()
    r = producto_client.put(
        f"/api/productos/{created['id']}",
        json={"nombre": "Laptop Gaming", "precio": 1500.00, "stock": 5, "categoriaId": 2},
    )
    assert r.status_code == 200
    assert r.json() == {
        "id": created["id"],
        "nombre": "Laptop Gaming",
        "precio": 1500.0,
        "stock": 5,
        "categoriaId": 2,
    }


def test_update_without_stock_keeps_stock(producto_client):
    created = producto_client.post("/api/productos", json=LAPTOP).json()
    r = producto_client.put(
        f"/api/productos/{created['id']}",
        json={"nombre": "Laptop", "precio": 999.99, "categoriaId": 1},
    )
    assert r.status_code == 200
    assert r.json()["stock"] == 10
    assert r.json()["precio"] == 999.99


def test_update_missing_producto_is_404(producto_client):
    r = producto_client.put(
        "/api/productos/8", json={"nombre": "X", "precio": 1, "categoriaId": 1}
    )
    assert r.status_code == 404
    assert r.json()["code"] == "producto_not_found"


def test_delete_then_get_is_404(producto_client):
    created = producto_client.post("/api/productos", json=LAPTOP).json()
    r = producto_client.delete(f"/api/productos/{created['id']}")
    assert r.status_code == 204
    assert producto_client.get(f"/api/productos/{created['id']}").status_code == 404


def test_delete_missing_producto_is_a_no_op(producto_client):
    r = producto_client.delete("/api/productos/123")
    assert r.status_code == 204


def test_invalid_body_is_rejected(producto_client):
    r = producto_client.post("/api/productos", json={"nombre": "Sin precio"})
    assert r.status_code == 422
