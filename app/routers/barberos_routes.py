# app/routers/barberos_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.db import get_session
from app.errors import ConflictError, NotFoundError, ValidationError
from app.models import Barbero
from app.schemas import BarberoCreate, BarberoUpdate, BarberoPublic

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/barberos",
    tags=["barberos"],
)


def get_barbero_or_404(session: Session, id_barbero: int) -> Barbero:
    barbero = session.get(Barbero, id_barbero)
    if barbero is None:
        raise NotFoundError("Barbero no encontrado")
    return barbero


@router.get("", response_model=List[BarberoPublic])
def list_barberos(session: Session = Depends(get_session)):
    return session.exec(select(Barbero).order_by(Barbero.id_barbero)).all()


@router.get("/{id_barbero}", response_model=BarberoPublic)
def get_barbero(id_barbero: int, session: Session = Depends(get_session)):
    return get_barbero_or_404(session, id_barbero)


@router.post("", response_model=BarberoPublic, status_code=201)
def create_barbero(barbero: BarberoCreate, session: Session = Depends(get_session)):
    db_barbero = Barbero(nombre=barbero.nombre, especialidad=barbero.especialidad)

    session.add(db_barbero)
    session.commit()
    session.refresh(db_barbero)

    logger.info(f"Created barber {db_barbero.id_barbero}")
    return db_barbero


@router.put("/{id_barbero}", response_model=BarberoPublic)
def update_barbero(
    id_barbero: int,
    patch: BarberoUpdate,
    session: Session = Depends(get_session),
):
    # especialidad may be cleared with an explicit null, nombre may not
    changes = patch.model_dump(exclude_unset=True)
    if changes.get("nombre", "") is None:
        raise ValidationError("nombre no puede ser nulo")
    if not changes:
        raise ValidationError("No se enviaron campos para actualizar")

    db_barbero = get_barbero_or_404(session, id_barbero)
    for field, value in changes.items():
        setattr(db_barbero, field, value)

    session.add(db_barbero)
    session.commit()
    session.refresh(db_barbero)
    return db_barbero


@router.delete("/{id_barbero}", response_model=BarberoPublic)
def delete_barbero(id_barbero: int, session: Session = Depends(get_session)):
    db_barbero = get_barbero_or_404(session, id_barbero)
    deleted = BarberoPublic.model_validate(db_barbero)

    session.delete(db_barbero)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise ConflictError("El barbero tiene reservas, bloqueos u horarios asociados")

    logger.info(f"Deleted barber {id_barbero}")
    return deleted
