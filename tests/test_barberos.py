def test_root_liveness(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.text == "Sistema barbería arriba"


def test_barbero_crud_flow(client):
    r = client.post("/barberos", json={"nombre": "Carlos"})
    assert r.status_code == 201
    barbero = r.json()
    assert barbero["especialidad"] is None
    id_barbero = barbero["id_barbero"]

    r = client.put(f"/barberos/{id_barbero}", json={"especialidad": "Barba"})
    assert r.status_code == 200
    assert r.json() == {"id_barbero": id_barbero, "nombre": "Carlos", "especialidad": "Barba"}

    r = client.get("/barberos")
    assert [b["id_barbero"] for b in r.json()] == [id_barbero]

    r = client.delete(f"/barberos/{id_barbero}")
    assert r.status_code == 200
    assert r.json()["nombre"] == "Carlos"
    assert client.get(f"/barberos/{id_barbero}").status_code == 404


def test_create_barbero_requires_nombre(client):
    r = client.post("/barberos", json={"especialidad": "Fade"})
    assert r.status_code == 400
    assert "nombre" in r.json()["detail"]


def test_update_barbero_rejects_null_nombre(client, make_barbero):
    b = make_barbero()
    r = client.put(f"/barberos/{b.id_barbero}", json={"nombre": None})
    assert r.status_code == 400


def test_update_barbero_not_found(client):
    r = client.put("/barberos/77", json={"nombre": "Nadie"})
    assert r.status_code == 404


def test_delete_barbero_with_bloqueos_conflicts(client, make_barbero, make_bloqueo):
    b = make_barbero()
    make_bloqueo(b.id_barbero)
    r = client.delete(f"/barberos/{b.id_barbero}")
    assert r.status_code == 409


def test_update_barbero_empty_patch(client, make_barbero):
    b = make_barbero()
    r = client.put(f"/barberos/{b.id_barbero}", json={})
    assert r.status_code == 400


def test_delete_barbero_not_found(client):
    assert client.delete("/barberos/404").status_code == 404
