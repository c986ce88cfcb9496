# tests/conftest.py
import os
import tempfile
from datetime import date, time

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.db import build_engine, init_db
from app.main import create_app
from app.models import Barbero, BloqueoBarbero, Cliente, Reserva

FECHA = date(2030, 3, 4)  # a Monday


@pytest.fixture(scope="function")
def engine():
    # temp DB
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    engine = build_engine(f"sqlite:///{path}")
    init_db(engine)
    try:
        yield engine
    finally:
        engine.dispose()
        os.remove(path)


@pytest.fixture(scope="function")
def test_db_session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(scope="function")
def client(engine):
    app = create_app(engine=engine)
    with TestClient(app) as c:
        yield c


# —— Factories ——
@pytest.fixture
def make_barbero(test_db_session):
    def _make_barbero(nombre="Carlos", especialidad="Fade"):
        b = Barbero(nombre=nombre, especialidad=especialidad)
        test_db_session.add(b)
        test_db_session.commit()
        test_db_session.refresh(b)
        return b
    return _make_barbero


@pytest.fixture
def make_cliente(test_db_session):
    def _make_cliente(nombre="Ana", telefono="111", correo="a@x.com"):
        c = Cliente(nombre=nombre, telefono=telefono, correo=correo)
        test_db_session.add(c)
        test_db_session.commit()
        test_db_session.refresh(c)
        return c
    return _make_cliente


@pytest.fixture
def make_bloqueo(test_db_session):
    def _make_bloqueo(id_barbero, fecha=FECHA, hora_inicio=time(13, 0), hora_fin=time(14, 0), estado="activo"):
        b = BloqueoBarbero(
            id_barbero=id_barbero,
            fecha=fecha,
            hora_inicio=hora_inicio,
            hora_fin=hora_fin,
            motivo="Almuerzo",
            estado=estado,
        )
        test_db_session.add(b)
        test_db_session.commit()
        test_db_session.refresh(b)
        return b
    return _make_bloqueo


@pytest.fixture
def make_reserva(test_db_session):
    def _make_reserva(id_cliente, id_barbero, fecha=FECHA, hora=time(10, 0), estado="confirmado"):
        r = Reserva(
            id_cliente=id_cliente,
            id_barbero=id_barbero,
            servicio_nombre="Corte",
            servicio_precio=15000,
            fecha=fecha,
            hora=hora,
            estado=estado,
        )
        test_db_session.add(r)
        test_db_session.commit()
        test_db_session.refresh(r)
        return r
    return _make_reserva


@pytest.fixture
def reserva_body():
    def _reserva_body(id_barbero, hora="10:00", nombre="Ana", correo="a@x.com", telefono="111", fecha=FECHA):
        return {
            "cliente": {"nombre": nombre, "correo": correo, "telefono": telefono},
            "reserva": {
                "servicio_nombre": "Corte clásico",
                "servicio_precio": 15000,
                "id_barbero": id_barbero,
                "fecha": fecha.isoformat(),
                "hora": hora,
            },
        }
    return _reserva_body
