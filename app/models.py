# app/models.py

from typing import Optional
from datetime import date as Date, time
from decimal import Decimal

from sqlalchemy import CheckConstraint, Index, text
from sqlmodel import SQLModel, Field

from app.data import DIAS_SEMANA

DIA_SEMANA_VALIDO = "dia_semana in (" + ",".join(f"'{dia}'" for dia in DIAS_SEMANA) + ")"


class Cliente(SQLModel, table=True):
    __tablename__ = "clientes"

    id_cliente: Optional[int] = Field(default=None, primary_key=True)
    nombre: str = Field(max_length=100)
    telefono: Optional[str] = Field(default=None, max_length=20, unique=True)
    correo: Optional[str] = Field(default=None, max_length=100, unique=True)


class Barbero(SQLModel, table=True):
    __tablename__ = "barberos"

    id_barbero: Optional[int] = Field(default=None, primary_key=True)
    nombre: str = Field(max_length=100)
    especialidad: Optional[str] = Field(default=None, max_length=100)


class HorarioGeneral(SQLModel, table=True):
    __tablename__ = "horarios"
    __table_args__ = (
        CheckConstraint("hora_inicio < hora_fin", name="horario_general_rango_valido"),
        CheckConstraint(DIA_SEMANA_VALIDO, name="horario_general_dia_valido"),
    )

    id_horario: Optional[int] = Field(default=None, primary_key=True)
    dia_semana: str = Field(max_length=10)
    hora_inicio: time
    hora_fin: time


class HorarioBarbero(SQLModel, table=True):
    __tablename__ = "horarios_barbero"
    __table_args__ = (
        CheckConstraint("hora_inicio < hora_fin", name="horario_rango_valido"),
        CheckConstraint("estado in ('activo','inactivo')", name="horario_estado_valido"),
        CheckConstraint(DIA_SEMANA_VALIDO, name="horario_dia_valido"),
    )

    id_horario_barbero: Optional[int] = Field(default=None, primary_key=True)
    id_barbero: int = Field(foreign_key="barberos.id_barbero", index=True)
    dia_semana: str = Field(max_length=10)
    hora_inicio: time
    hora_fin: time
    estado: str = Field(default="activo", max_length=10)


class BloqueoBarbero(SQLModel, table=True):
    __tablename__ = "bloqueos_barbero"
    __table_args__ = (
        CheckConstraint("hora_inicio < hora_fin", name="bloqueo_rango_valido"),
        CheckConstraint("estado in ('activo','inactivo')", name="bloqueo_estado_valido"),
    )

    id_bloqueo: Optional[int] = Field(default=None, primary_key=True)
    id_barbero: int = Field(foreign_key="barberos.id_barbero", index=True)
    fecha: Date = Field(index=True)
    hora_inicio: time
    hora_fin: time
    motivo: Optional[str] = None
    estado: str = Field(default="activo", max_length=10)


class Reserva(SQLModel, table=True):
    __tablename__ = "reservas"
    __table_args__ = (
        CheckConstraint("estado in ('confirmado','cancelado')", name="reserva_estado_valido"),
        # A cancelled booking must not keep the slot taken
        Index(
            "unica_reserva_barbero",
            "id_barbero",
            "fecha",
            "hora",
            unique=True,
            sqlite_where=text("estado = 'confirmado'"),
            postgresql_where=text("estado = 'confirmado'"),
        ),
    )

    id_reserva: Optional[int] = Field(default=None, primary_key=True)
    id_cliente: int = Field(foreign_key="clientes.id_cliente", index=True)
    id_barbero: int = Field(foreign_key="barberos.id_barbero", index=True)
    servicio_nombre: str = Field(max_length=100)
    servicio_precio: Decimal = Field(max_digits=10, decimal_places=2)
    fecha: Date
    hora: time
    estado: str = Field(default="confirmado", max_length=10)
