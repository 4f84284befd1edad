"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from servidor.domain.models import Producto


@dataclass(slots=True)
class ProductDraft:
    """Datos tipados para registrar un producto nuevo."""

    nombre: str
    codigo_barras: str
    cantidad: int
    precio_unitario: Decimal
    fecha_vencimiento: date

    def to_producto(self) -> Producto:
        """Construye el registro de dominio a partir del draft."""
        return Producto(
            nombre=self.nombre,
            codigo_barras=self.codigo_barras,
            cantidad=self.cantidad,
            precio_unitario=self.precio_unitario,
            fecha_vencimiento=self.fecha_vencimiento,
        )


@dataclass(slots=True)
class ProductUpdate:
    """Cambios para un producto existente; ``None`` conserva el valor actual."""

    nombre: str | None = None
    cantidad: int | None = None
    precio_unitario: Decimal | None = None
    fecha_vencimiento: date | None = None
