# app/routers/reservas_routes.py

import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session, select

from app.booking import create_reserva
from app.data import RESERVA_CANCELADA
from app.db import get_session
from app.errors import NotFoundError
from app.models import Barbero, Cliente, Reserva
from app.schemas import ReservaCreate, ReservaDetalle, ReservaPublic

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/reservas",
    tags=["reservas"],
)


def _detalle_query():
    return (
        select(
            Reserva,
            Barbero.nombre.label("barbero_nombre"),
            Cliente.nombre.label("cliente_nombre"),
        )
        .join(Barbero, Reserva.id_barbero == Barbero.id_barbero)
        .join(Cliente, Reserva.id_cliente == Cliente.id_cliente)
    )


def _to_detalle(row) -> ReservaDetalle:
    reserva, barbero_nombre, cliente_nombre = row
    return ReservaDetalle(
        **reserva.model_dump(),
        barbero_nombre=barbero_nombre,
        cliente_nombre=cliente_nombre,
    )


@router.get("", response_model=List[ReservaDetalle])
def list_reservas(
    id_cliente: Optional[int] = Query(default=None, alias="clienteId"),
    id_barbero: Optional[int] = Query(default=None, alias="barberoId"),
    fecha: Optional[date] = Query(default=None),
    session: Session = Depends(get_session),
):
    stmt = _detalle_query()

    if id_cliente is not None:
        stmt = stmt.where(Reserva.id_cliente == id_cliente)
    if id_barbero is not None:
        stmt = stmt.where(Reserva.id_barbero == id_barbero)
    if fecha is not None:
        stmt = stmt.where(Reserva.fecha == fecha)

    stmt = stmt.order_by(Reserva.fecha, Reserva.hora)
    return [_to_detalle(row) for row in session.exec(stmt).all()]


@router.get("/{id_reserva}", response_model=ReservaDetalle)
def get_reserva(id_reserva: int, session: Session = Depends(get_session)):
    row = session.exec(_detalle_query().where(Reserva.id_reserva == id_reserva)).first()
    if row is None:
        raise NotFoundError("Reserva no encontrada")
    return _to_detalle(row)


@router.post("", response_model=ReservaPublic, status_code=201)
def book_reserva(body: ReservaCreate, session: Session = Depends(get_session)):
    return create_reserva(session, body)


@router.delete("/{id_reserva}", response_model=ReservaPublic)
def cancel_reserva(id_reserva: int, session: Session = Depends(get_session)):
    target = session.get(Reserva, id_reserva)
    if target is None:
        raise NotFoundError("Reserva no encontrada")

    # Cancelling twice just returns the cancelled row again
    if target.estado != RESERVA_CANCELADA:
        target.estado = RESERVA_CANCELADA
        session.add(target)
        session.commit()
        session.refresh(target)
        logger.info(f"Cancelled reservation {id_reserva}")

    return target
