# app/schemas.py

from decimal import Decimal
from datetime import date, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.data import DIAS_SEMANA


class ClienteCreate(BaseModel):
    nombre: str = Field(min_length=1, max_length=100)
    telefono: str = Field(min_length=1, max_length=20)
    correo: str = Field(min_length=1, max_length=100)


class ClienteUpdate(BaseModel):
    nombre: Optional[str] = Field(default=None, min_length=1, max_length=100)
    telefono: Optional[str] = Field(default=None, min_length=1, max_length=20)
    correo: Optional[str] = Field(default=None, min_length=1, max_length=100)


class ClientePublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_cliente: int
    nombre: str
    telefono: Optional[str] = None
    correo: Optional[str] = None


class BarberoCreate(BaseModel):
    nombre: str = Field(min_length=1, max_length=100)
    especialidad: Optional[str] = Field(default=None, max_length=100)


class BarberoUpdate(BaseModel):
    nombre: Optional[str] = Field(default=None, min_length=1, max_length=100)
    especialidad: Optional[str] = Field(default=None, max_length=100)


class BarberoPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_barbero: int
    nombre: str
    especialidad: Optional[str] = None


class _RangoHorario(BaseModel):
    hora_inicio: time
    hora_fin: time

    @model_validator(mode="after")
    def check_range(self):
        if self.hora_inicio >= self.hora_fin:
            raise ValueError("hora_inicio debe ser anterior a hora_fin")
        return self


class BloqueoCreate(_RangoHorario):
    id_barbero: int
    fecha: date
    motivo: Optional[str] = None


class BloqueoPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_bloqueo: int
    id_barbero: int
    fecha: date
    hora_inicio: time
    hora_fin: time
    motivo: Optional[str] = None
    estado: str


class _RangoSemanal(_RangoHorario):
    dia_semana: str

    @model_validator(mode="after")
    def check_weekday(self):
        if self.dia_semana not in DIAS_SEMANA:
            raise ValueError("dia_semana debe ser uno de: " + ", ".join(DIAS_SEMANA))
        return self


class HorarioGeneralCreate(_RangoSemanal):
    pass


class HorarioGeneralPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_horario: int
    dia_semana: str
    hora_inicio: time
    hora_fin: time


class HorarioCreate(_RangoSemanal):
    id_barbero: int


class HorarioPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_horario_barbero: int
    id_barbero: int
    dia_semana: str
    hora_inicio: time
    hora_fin: time
    estado: str


class ClienteReserva(BaseModel):
    nombre: str = Field(min_length=1, max_length=100)
    correo: str = Field(min_length=1, max_length=100)
    telefono: str = Field(min_length=1, max_length=20)


class DatosReserva(BaseModel):
    servicio_nombre: str = Field(min_length=1, max_length=100)
    servicio_precio: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    id_barbero: int
    fecha: date
    hora: time


class ReservaCreate(BaseModel):
    """Client contact plus the slot being booked.

    Any ``estado`` sent by the caller is ignored; new bookings are always
    confirmed. A flat body with the same keys at the top level is accepted.
    """

    cliente: ClienteReserva
    reserva: DatosReserva

    @model_validator(mode="before")
    @classmethod
    def accept_flat_body(cls, data):
        if isinstance(data, dict) and "cliente" not in data and "reserva" not in data:
            return {
                "cliente": {k: data[k] for k in ClienteReserva.model_fields if k in data},
                "reserva": {k: data[k] for k in DatosReserva.model_fields if k in data},
            }
        return data


class ReservaPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_reserva: int
    id_cliente: int
    id_barbero: int
    servicio_nombre: str
    servicio_precio: Decimal
    fecha: date
    hora: time
    estado: str


class ReservaDetalle(ReservaPublic):
    barbero_nombre: str
    cliente_nombre: str
