# app/routers/clientes_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.db import get_session
from app.errors import ConflictError, NotFoundError, ValidationError
from app.models import Cliente
from app.schemas import ClienteCreate, ClienteUpdate, ClientePublic

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/clientes",
    tags=["clientes"],
)

CONTACT_TAKEN = "Ya existe un cliente con ese teléfono o correo"


def get_cliente_or_404(session: Session, id_cliente: int) -> Cliente:
    cliente = session.get(Cliente, id_cliente)
    if cliente is None:
        raise NotFoundError("Cliente no encontrado")
    return cliente


@router.get("", response_model=List[ClientePublic])
def list_clientes(session: Session = Depends(get_session)):
    return session.exec(select(Cliente).order_by(Cliente.id_cliente)).all()


@router.get("/{id_cliente}", response_model=ClientePublic)
def get_cliente(id_cliente: int, session: Session = Depends(get_session)):
    return get_cliente_or_404(session, id_cliente)


@router.post("", response_model=ClientePublic, status_code=201)
def create_cliente(cliente: ClienteCreate, session: Session = Depends(get_session)):
    db_cliente = Cliente(
        nombre=cliente.nombre,
        telefono=cliente.telefono,
        correo=cliente.correo,
    )

    session.add(db_cliente)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise ConflictError(CONTACT_TAKEN)

    session.refresh(db_cliente)  # fills db_cliente.id_cliente
    logger.info(f"Created client {db_cliente.id_cliente}")
    return db_cliente


@router.put("/{id_cliente}", response_model=ClientePublic)
def update_cliente(
    id_cliente: int,
    patch: ClienteUpdate,
    session: Session = Depends(get_session),
):
    changes = patch.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise ValidationError("No se enviaron campos para actualizar")

    db_cliente = get_cliente_or_404(session, id_cliente)
    for field, value in changes.items():
        setattr(db_cliente, field, value)

    session.add(db_cliente)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise ConflictError(CONTACT_TAKEN)

    session.refresh(db_cliente)
    return db_cliente


@router.delete("/{id_cliente}", response_model=ClientePublic)
def delete_cliente(id_cliente: int, session: Session = Depends(get_session)):
    db_cliente = get_cliente_or_404(session, id_cliente)
    deleted = ClientePublic.model_validate(db_cliente)

    session.delete(db_cliente)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise ConflictError("El cliente tiene reservas asociadas")

    logger.info(f"Deleted client {id_cliente}")
    return deleted
