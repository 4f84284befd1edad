"""Validaciones y parseo de entradas del cliente."""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import TypeVar

from parametros import DATE_FORMAT, DATE_FORMAT_HINT
from shared.errors import ValidationError

T = TypeVar("T")

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_PRICE_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:[.,][0-9]*)?|[.,][0-9]+)")
_CENTS = Decimal("0.01")


def require_text(raw: str, field: str) -> str:
    """Retorna el texto sin espacios extremos; falla si queda vacio."""
    value = (raw or "").strip()
    if not value:
        raise ValidationError(f"{field} no puede estar vacio.")
    return value


def parse_quantity(raw: str) -> int:
    """Parsea una cantidad entera no negativa escrita con digitos 0-9."""
    text = (raw or "").strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValidationError(f"Cantidad invalida: '{text}'. Debe ser un numero entero.")

    try:
        quantity = int(text)
    except ValueError as exc:
        raise ValidationError(f"Cantidad invalida: '{text}'.") from exc

    if quantity < 0:
        raise ValidationError("La cantidad no puede ser negativa.")
    return quantity


def parse_price(raw: str) -> Decimal:
    """Parsea un precio decimal exacto, aceptando punto o coma como separador.

    El precio debe poder expresarse en centavos dentro de la precision
    decimal vigente; si no, se rechaza como entrada invalida.
    """
    text = (raw or "").strip()
    if not _PRICE_PATTERN.fullmatch(text):
        raise ValidationError(f"Precio invalido: '{text}'.")

    price = Decimal(text.replace(",", "."))
    try:
        price.quantize(_CENTS)
    except InvalidOperation as exc:
        raise ValidationError(f"Precio fuera de rango: '{text}'.") from exc
    return price


def parse_date(raw: str) -> date:
    """Parsea una fecha en el formato configurado (dd/mm/aaaa)."""
    text = (raw or "").strip()
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as exc:
        raise ValidationError(
            f"Fecha invalida: '{text}'. Usa el formato {DATE_FORMAT_HINT}."
        ) from exc


def parse_days(raw: str) -> int:
    """Parsea una cantidad de dias; se aceptan valores negativos."""
    text = (raw or "").strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValidationError(f"Dias invalidos: '{text}'. Debe ser un numero entero.")

    try:
        return int(text)
    except ValueError as exc:
        raise ValidationError(f"Dias invalidos: '{text}'.") from exc


def parse_optional(raw: str, parser: Callable[[str], T]) -> T | None:
    """Retorna ``None`` si la entrada esta vacia; si no, aplica ``parser``."""
    if not (raw or "").strip():
        return None
    return parser(raw)
