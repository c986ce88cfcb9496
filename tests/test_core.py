from datetime import time

from app.core import overlaps, within
from app.errors import describe_validation_errors


def test_overlaps_half_open_ranges():
    assert overlaps(time(9), time(10), time(9, 30), time(11))
    assert overlaps(time(9), time(12), time(10), time(11))
    assert not overlaps(time(9), time(10), time(10), time(11))
    assert not overlaps(time(11), time(12), time(10), time(11))


def test_within_is_start_inclusive_end_exclusive():
    assert within(time(13), time(13), time(14))
    assert within(time(13, 59), time(13), time(14))
    assert not within(time(14), time(13), time(14))


def test_describe_validation_errors_lists_missing_and_invalid():
    errors = [
        {"type": "missing", "loc": ("body", "cliente", "correo"), "msg": "Field required", "input": {}},
        {"type": "string_type", "loc": ("body", "reserva", "servicio_nombre"), "msg": "Input should be a valid string", "input": None},
        {"type": "time_parsing", "loc": ("body", "reserva", "hora"), "msg": "Input should be in a valid time format", "input": "25:99"},
    ]
    message = describe_validation_errors(errors)
    assert "Faltan campos obligatorios: cliente.correo, reserva.servicio_nombre" in message
    assert "reserva.hora: Input should be in a valid time format" in message
