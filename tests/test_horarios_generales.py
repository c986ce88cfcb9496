def _horario(dia="Lunes", inicio="09:00", fin="19:00"):
    return {"dia_semana": dia, "hora_inicio": inicio, "hora_fin": fin}


def test_horarios_generales_crud_flow(client):
    r = client.post("/horarios-generales", json=_horario(dia="Sábado", inicio="10:00", fin="14:00"))
    assert r.status_code == 201
    sabado = r.json()
    assert sabado["hora_inicio"] == "10:00:00"

    assert client.post("/horarios-generales", json=_horario(dia="Lunes")).status_code == 201

    rows = client.get("/horarios-generales").json()
    assert [h["dia_semana"] for h in rows] == ["Lunes", "Sábado"]

    r = client.put(f"/horarios-generales/{sabado['id_horario']}", json=_horario(dia="Sábado", inicio="09:00", fin="15:00"))
    assert r.status_code == 200
    assert r.json()["hora_fin"] == "15:00:00"

    r = client.delete(f"/horarios-generales/{sabado['id_horario']}")
    assert r.status_code == 200
    assert [h["dia_semana"] for h in client.get("/horarios-generales").json()] == ["Lunes"]
    assert client.delete(f"/horarios-generales/{sabado['id_horario']}").status_code == 404


def test_overlapping_horario_general_conflicts(client):
    client.post("/horarios-generales", json=_horario(inicio="09:00", fin="13:00"))
    r = client.post("/horarios-generales", json=_horario(inicio="12:00", fin="18:00"))
    assert r.status_code == 409

    # an afternoon shift right after the morning one is fine
    assert client.post("/horarios-generales", json=_horario(inicio="13:00", fin="18:00")).status_code == 201


def test_update_horario_general_may_keep_its_own_range(client):
    h = client.post("/horarios-generales", json=_horario()).json()
    r = client.put(f"/horarios-generales/{h['id_horario']}", json=_horario(fin="20:00"))
    assert r.status_code == 200


def test_horario_general_validation(client):
    assert client.post("/horarios-generales", json=_horario(dia="Funday")).status_code == 400
    assert client.post("/horarios-generales", json=_horario(inicio="19:00", fin="09:00")).status_code == 400
    assert client.put("/horarios-generales/999", json=_horario()).status_code == 404
