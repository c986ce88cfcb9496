# app/booking.py
"""Reservation booking.

Resolves the client by contact info, rejects slots taken by an active block,
outside the barber's working hours, or already holding a confirmed booking,
then inserts the reservation. Everything runs in the request's transaction,
so a rejected booking leaves no client changes behind either.
"""

import logging
from datetime import date, time
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.core import within
from app.data import ESTADO_ACTIVO, DIAS_SEMANA, RESERVA_CONFIRMADA
from app.errors import ConflictError, InternalError, NotFoundError
from app.models import Barbero, BloqueoBarbero, Cliente, HorarioBarbero, Reserva
from app.schemas import ClienteReserva, ReservaCreate

logger = logging.getLogger(__name__)

SLOT_BLOCKED = "El barbero tiene un bloqueo activo en esa fecha y hora"
SLOT_OUTSIDE_HOURS = "El barbero no atiende en esa fecha y hora"
SLOT_TAKEN = "El barbero ya tiene una reserva confirmada en esa fecha y hora"


def find_cliente_by_contact(session: Session, correo: str, telefono: str) -> Optional[Cliente]:
    # Email match wins when email and phone belong to different clients
    cliente = session.exec(select(Cliente).where(Cliente.correo == correo)).first()
    if cliente is None:
        cliente = session.exec(select(Cliente).where(Cliente.telefono == telefono)).first()
    return cliente


def resolve_cliente(session: Session, datos: ClienteReserva) -> Cliente:
    """Return the client owning this email/phone, renamed, or a new one."""
    cliente = find_cliente_by_contact(session, datos.correo, datos.telefono)
    if cliente is None:
        cliente = Cliente(nombre=datos.nombre, telefono=datos.telefono, correo=datos.correo)
        session.add(cliente)
        try:
            session.flush()
            logger.info(f"Registered client {cliente.id_cliente} while booking")
            return cliente
        except IntegrityError:
            # Someone registered the same contact between our lookup and insert
            session.rollback()
            cliente = find_cliente_by_contact(session, datos.correo, datos.telefono)
            if cliente is None:
                logger.error(f"Contact conflict for {datos.correo} but no matching client found")
                raise InternalError("No se pudo resolver el cliente de la reserva")

    cliente.nombre = datos.nombre
    session.add(cliente)
    session.flush()
    return cliente


def check_bloqueos(session: Session, id_barbero: int, fecha: date, hora: time) -> None:
    bloqueos = session.exec(
        select(BloqueoBarbero)
        .where(BloqueoBarbero.id_barbero == id_barbero)
        .where(BloqueoBarbero.fecha == fecha)
        .where(BloqueoBarbero.estado == ESTADO_ACTIVO)
    ).all()

    for b in bloqueos:
        if within(hora, b.hora_inicio, b.hora_fin):
            raise ConflictError(SLOT_BLOCKED)


def check_horario(session: Session, id_barbero: int, fecha: date, hora: time) -> None:
    # Barbers without configured hours take bookings at any time
    horarios = session.exec(
        select(HorarioBarbero)
        .where(HorarioBarbero.id_barbero == id_barbero)
        .where(HorarioBarbero.estado == ESTADO_ACTIVO)
    ).all()
    if not horarios:
        return

    dia = DIAS_SEMANA[fecha.weekday()]
    for h in horarios:
        if h.dia_semana == dia and within(hora, h.hora_inicio, h.hora_fin):
            return
    raise ConflictError(SLOT_OUTSIDE_HOURS)


def check_reserva_confirmada(session: Session, id_barbero: int, fecha: date, hora: time) -> None:
    existing = session.exec(
        select(Reserva)
        .where(Reserva.id_barbero == id_barbero)
        .where(Reserva.fecha == fecha)
        .where(Reserva.hora == hora)
        .where(Reserva.estado == RESERVA_CONFIRMADA)
    ).first()
    if existing is not None:
        raise ConflictError(SLOT_TAKEN)


def create_reserva(session: Session, body: ReservaCreate) -> Reserva:
    datos = body.reserva

    try:
        if session.get(Barbero, datos.id_barbero) is None:
            raise NotFoundError("Barbero no encontrado")

        cliente = resolve_cliente(session, body.cliente)

        check_bloqueos(session, datos.id_barbero, datos.fecha, datos.hora)
        check_horario(session, datos.id_barbero, datos.fecha, datos.hora)
        check_reserva_confirmada(session, datos.id_barbero, datos.fecha, datos.hora)
    except (ConflictError, NotFoundError, InternalError) as exc:
        session.rollback()
        logger.info(f"Booking rejected for barber {datos.id_barbero} on {datos.fecha} {datos.hora}: {exc.detail}")
        raise

    reserva = Reserva(
        id_cliente=cliente.id_cliente,
        id_barbero=datos.id_barbero,
        servicio_nombre=datos.servicio_nombre,
        servicio_precio=datos.servicio_precio,
        fecha=datos.fecha,
        hora=datos.hora,
        estado=RESERVA_CONFIRMADA,
    )

    session.add(reserva)
    try:
        session.commit()
    except IntegrityError:
        # A concurrent booking won the race for the same slot
        session.rollback()
        logger.info(f"Booking for barber {datos.id_barbero} lost the race on {datos.fecha} {datos.hora}")
        raise ConflictError(SLOT_TAKEN)

    session.refresh(reserva)
    logger.info(f"Reservation {reserva.id_reserva} confirmed for client {reserva.id_cliente}")
    return reserva
