# app/routers/horarios_generales_routes.py
# Shop-wide opening hours. Informational only: bookings are checked against
# each barber's own hours (horarios_barbero), not these.

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from app.core import overlaps
from app.data import DIAS_SEMANA
from app.db import get_session
from app.errors import ConflictError, NotFoundError
from app.models import HorarioGeneral
from app.schemas import HorarioGeneralCreate, HorarioGeneralPublic

router = APIRouter(
    prefix="/horarios-generales",
    tags=["horarios-generales"],
)


def get_horario_or_404(session: Session, id_horario: int) -> HorarioGeneral:
    horario = session.get(HorarioGeneral, id_horario)
    if horario is None:
        raise NotFoundError("Horario general no encontrado")
    return horario


def check_overlap(session: Session, horario: HorarioGeneralCreate, exclude_id: Optional[int] = None) -> None:
    same_day = session.exec(
        select(HorarioGeneral).where(HorarioGeneral.dia_semana == horario.dia_semana)
    ).all()

    for h in same_day:
        if h.id_horario == exclude_id:
            continue
        if overlaps(horario.hora_inicio, horario.hora_fin, h.hora_inicio, h.hora_fin):
            raise ConflictError("El horario se superpone con otro horario de la barbería")


@router.get("", response_model=List[HorarioGeneralPublic])
def list_horarios_generales(session: Session = Depends(get_session)):
    horarios = session.exec(select(HorarioGeneral)).all()
    return sorted(horarios, key=lambda h: (DIAS_SEMANA.index(h.dia_semana), h.hora_inicio))


@router.post("", response_model=HorarioGeneralPublic, status_code=201)
def create_horario_general(horario: HorarioGeneralCreate, session: Session = Depends(get_session)):
    check_overlap(session, horario)

    db_horario = HorarioGeneral(
        dia_semana=horario.dia_semana,
        hora_inicio=horario.hora_inicio,
        hora_fin=horario.hora_fin,
    )

    session.add(db_horario)
    session.commit()
    session.refresh(db_horario)
    return db_horario


@router.put("/{id_horario}", response_model=HorarioGeneralPublic)
def update_horario_general(
    id_horario: int,
    horario: HorarioGeneralCreate,
    session: Session = Depends(get_session),
):
    db_horario = get_horario_or_404(session, id_horario)
    check_overlap(session, horario, exclude_id=id_horario)

    db_horario.dia_semana = horario.dia_semana
    db_horario.hora_inicio = horario.hora_inicio
    db_horario.hora_fin = horario.hora_fin

    session.add(db_horario)
    session.commit()
    session.refresh(db_horario)
    return db_horario


@router.delete("/{id_horario}", response_model=HorarioGeneralPublic)
def delete_horario_general(id_horario: int, session: Session = Depends(get_session)):
    db_horario = get_horario_or_404(session, id_horario)
    deleted = HorarioGeneralPublic.model_validate(db_horario)

    session.delete(db_horario)
    session.commit()
    return deleted
