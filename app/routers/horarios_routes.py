# app/routers/horarios_routes.py
# Weekly working hours per barber. Once a barber has any active row,
# bookings outside those ranges are rejected (see app.booking.check_horario).

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session, select

from app.core import overlaps
from app.data import DIAS_SEMANA, ESTADO_ACTIVO, ESTADO_INACTIVO
from app.db import get_session
from app.errors import ConflictError, NotFoundError
from app.models import Barbero, HorarioBarbero
from app.schemas import HorarioCreate, HorarioPublic

router = APIRouter(
    prefix="/horarios",
    tags=["horarios"],
)


@router.get("", response_model=List[HorarioPublic])
def list_horarios(
    id_barbero: Optional[int] = Query(default=None, alias="barberoId"),
    session: Session = Depends(get_session),
):
    stmt = select(HorarioBarbero)
    if id_barbero is not None:
        stmt = stmt.where(HorarioBarbero.id_barbero == id_barbero)

    horarios = session.exec(stmt).all()
    # Weekday names do not sort alphabetically, order by position in the week
    return sorted(
        horarios,
        key=lambda h: (h.id_barbero, DIAS_SEMANA.index(h.dia_semana), h.hora_inicio),
    )


@router.post("", response_model=HorarioPublic, status_code=201)
def create_horario(horario: HorarioCreate, session: Session = Depends(get_session)):
    if session.get(Barbero, horario.id_barbero) is None:
        raise NotFoundError("Barbero no encontrado")

    same_day = session.exec(
        select(HorarioBarbero)
        .where(HorarioBarbero.id_barbero == horario.id_barbero)
        .where(HorarioBarbero.dia_semana == horario.dia_semana)
        .where(HorarioBarbero.estado == ESTADO_ACTIVO)
    ).all()

    for h in same_day:
        if overlaps(horario.hora_inicio, horario.hora_fin, h.hora_inicio, h.hora_fin):
            raise ConflictError("El horario se superpone con otro horario activo")

    db_horario = HorarioBarbero(
        id_barbero=horario.id_barbero,
        dia_semana=horario.dia_semana,
        hora_inicio=horario.hora_inicio,
        hora_fin=horario.hora_fin,
        estado=ESTADO_ACTIVO,
    )

    session.add(db_horario)
    session.commit()
    session.refresh(db_horario)
    return db_horario


@router.delete("/{id_horario}", response_model=HorarioPublic)
def delete_horario(id_horario: int, session: Session = Depends(get_session)):
    db_horario = session.get(HorarioBarbero, id_horario)
    if db_horario is None or db_horario.estado != ESTADO_ACTIVO:
        raise NotFoundError("Horario no encontrado")

    db_horario.estado = ESTADO_INACTIVO
    session.add(db_horario)
    session.commit()
    session.refresh(db_horario)
    return db_horario
