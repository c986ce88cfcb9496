# app/data.py

ESTADO_ACTIVO = "activo"
ESTADO_INACTIVO = "inactivo"

RESERVA_CONFIRMADA = "confirmado"
RESERVA_CANCELADA = "cancelado"

# Index matches date.weekday(): 0=Lunes ... 6=Domingo
DIAS_SEMANA = [
    "Lunes",
    "Martes",
    "Miércoles",
    "Jueves",
    "Viernes",
    "Sábado",
    "Domingo",
]

ROOT_MESSAGE = "Sistema barbería arriba"
