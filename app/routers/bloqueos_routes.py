# app/routers/bloqueos_routes.py

import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session, select

from app.core import overlaps
from app.data import ESTADO_ACTIVO, ESTADO_INACTIVO
from app.db import get_session
from app.errors import ConflictError, NotFoundError
from app.models import Barbero, BloqueoBarbero
from app.schemas import BloqueoCreate, BloqueoPublic

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bloqueos",
    tags=["bloqueos"],
)


@router.get("", response_model=List[BloqueoPublic])
def list_bloqueos(
    id_barbero: Optional[int] = Query(default=None, alias="barberoId"),
    fecha: Optional[date] = Query(default=None),
    session: Session = Depends(get_session),
):
    stmt = select(BloqueoBarbero)

    if id_barbero is not None:
        stmt = stmt.where(BloqueoBarbero.id_barbero == id_barbero)
    if fecha is not None:
        stmt = stmt.where(BloqueoBarbero.fecha == fecha)

    stmt = stmt.order_by(BloqueoBarbero.fecha, BloqueoBarbero.hora_inicio)
    return session.exec(stmt).all()


@router.post("", response_model=BloqueoPublic, status_code=201)
def create_bloqueo(bloqueo: BloqueoCreate, session: Session = Depends(get_session)):
    if session.get(Barbero, bloqueo.id_barbero) is None:
        raise NotFoundError("Barbero no encontrado")

    existing_blocks = session.exec(
        select(BloqueoBarbero)
        .where(BloqueoBarbero.id_barbero == bloqueo.id_barbero)
        .where(BloqueoBarbero.fecha == bloqueo.fecha)
        .where(BloqueoBarbero.estado == ESTADO_ACTIVO)
    ).all()

    for existing_block in existing_blocks:
        if overlaps(bloqueo.hora_inicio, bloqueo.hora_fin, existing_block.hora_inicio, existing_block.hora_fin):
            raise ConflictError("El bloqueo se superpone con otro bloqueo activo")

    db_bloqueo = BloqueoBarbero(
        id_barbero=bloqueo.id_barbero,
        fecha=bloqueo.fecha,
        hora_inicio=bloqueo.hora_inicio,
        hora_fin=bloqueo.hora_fin,
        motivo=bloqueo.motivo,
        estado=ESTADO_ACTIVO,
    )

    session.add(db_bloqueo)
    session.commit()
    session.refresh(db_bloqueo)

    logger.info(f"Created block {db_bloqueo.id_bloqueo} for barber {db_bloqueo.id_barbero} on {db_bloqueo.fecha}")
    return db_bloqueo


@router.delete("/{id_bloqueo}", response_model=BloqueoPublic)
def delete_bloqueo(id_bloqueo: int, session: Session = Depends(get_session)):
    db_bloqueo = session.get(BloqueoBarbero, id_bloqueo)
    if db_bloqueo is None or db_bloqueo.estado != ESTADO_ACTIVO:
        raise NotFoundError("Bloqueo no encontrado")

    db_bloqueo.estado = ESTADO_INACTIVO
    session.add(db_bloqueo)
    session.commit()
    session.refresh(db_bloqueo)

    return db_bloqueo
