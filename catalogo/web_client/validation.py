# catalogo/web_client/validation.py

import math
from typing import Any, Mapping, Optional

CATEGORIA_NOMBRE_MIN_LENGTH = 3


class FormValidationError(ValueError):
    """
    A user-facing message raised before any request is sent.
    """


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def _as_number(value: Any) -> Optional[float]:
    """Finite float, or None when the value is empty or not a number."""
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _as_id(value: Any) -> Optional[int]:
    """Positive integer id, or None when nothing usable was selected."""
    number = _as_number(value)
    if number is None or not number.is_integer() or number <= 0:
        return None
    return int(number)


def validate_categoria(data: Mapping[str, Any]) -> dict:
    """
    Checks a categoria form and returns the payload to send (nombre trimmed).
    """
    nombre = data.get("nombre")
    if _is_blank(nombre):
        raise FormValidationError("El nombre de la categoría es requerido")
    nombre = str(nombre).strip()
    if len(nombre) < CATEGORIA_NOMBRE_MIN_LENGTH:
        raise FormValidationError(
            f"El nombre debe tener al menos {CATEGORIA_NOMBRE_MIN_LENGTH} caracteres"
        )
    return {"nombre": nombre}


def validate_producto(data: Mapping[str, Any]) -> dict:
    """
    Checks a producto form and returns the payload to send.
    """
    nombre = data.get("nombre")
    if _is_blank(nombre):
        raise FormValidationError("El nombre del producto es requerido")

    precio = _as_number(data.get("precio"))
    if precio is None or precio <= 0:
        raise FormValidationError("El precio debe ser mayor a 0")

    stock = _as_number(data.get("stock"))
    if stock is None or stock < 0:
        raise FormValidationError("El stock no puede ser negativo")
    if not stock.is_integer():
        raise FormValidationError("El stock debe ser un número entero")

    categoria_id = _as_id(data.get("categoriaId", data.get("categoria_id")))
    if categoria_id is None:
        raise FormValidationError("Debe seleccionar una categoría")

    return {
        "nombre": str(nombre).strip(),
        "precio": precio,
        "stock": int(stock),
        "categoriaId": categoria_id,
    }
