"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(slots=True)
class Producto:
    """Representa un producto en inventario."""

    nombre: str
    codigo_barras: str
    cantidad: int
    precio_unitario: Decimal
    fecha_vencimiento: date

    @property
    def valor_total(self) -> Decimal:
        """Valor del stock del producto, siempre derivado de cantidad y precio."""
        return self.cantidad * self.precio_unitario
