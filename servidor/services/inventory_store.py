"""Almacen en memoria de productos de inventario."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, timedelta
from decimal import Decimal

from servidor.domain.models import Producto
from shared.protocol import ProductUpdate

LOGGER = logging.getLogger(__name__)


class InventoryStore:
    """Coleccion ordenada por insercion de productos, indexada por codigo de barras.

    El codigo de barras no es unico: las busquedas retornan la primera
    coincidencia y las eliminaciones afectan a todas. Ningun registro interno
    sale del almacen; todas las consultas retornan copias.
    """

    def __init__(self) -> None:
        self._products: list[Producto] = []

    def __len__(self) -> int:
        return len(self._products)

    def add_product(self, product: Producto) -> None:
        """Agrega un producto al final de la coleccion, sin chequear duplicados."""
        self._products.append(replace(product))
        LOGGER.info(
            "Producto agregado: codigo_barras=%s, nombre=%s",
            product.codigo_barras,
            product.nombre,
        )

    def update_product(self, codigo_barras: str, changes: ProductUpdate) -> Producto | None:
        """Actualiza en sitio el primer producto con el codigo indicado.

        Los campos de ``changes`` en ``None`` conservan el valor actual. Si el
        codigo no existe la coleccion queda intacta y se retorna ``None``.
        """
        product = self._find_first(codigo_barras)
        if product is None:
            LOGGER.warning("Actualizacion ignorada, codigo no encontrado: %s", codigo_barras)
            return None

        if changes.nombre is not None:
            product.nombre = changes.nombre
        if changes.cantidad is not None:
            product.cantidad = changes.cantidad
        if changes.precio_unitario is not None:
            product.precio_unitario = changes.precio_unitario
        if changes.fecha_vencimiento is not None:
            product.fecha_vencimiento = changes.fecha_vencimiento

        LOGGER.info("Producto actualizado: codigo_barras=%s", codigo_barras)
        return replace(product)

    def remove_product(self, codigo_barras: str) -> int:
        """Elimina todos los productos con el codigo indicado y retorna cuantos."""
        remaining = [p for p in self._products if p.codigo_barras != codigo_barras]
        removed = len(self._products) - len(remaining)
        self._products = remaining

        LOGGER.info("Productos eliminados: codigo_barras=%s, total=%d", codigo_barras, removed)
        return removed

    def find_by_barcode(self, codigo_barras: str) -> Producto | None:
        """Retorna una copia del primer producto con el codigo, o ``None``."""
        product = self._find_first(codigo_barras)
        return replace(product) if product is not None else None

    def find_by_name(self, text: str) -> list[Producto]:
        """Busca productos cuyo nombre contiene ``text``, sin distinguir mayusculas."""
        needle = text.casefold()
        return [replace(p) for p in self._products if needle in p.nombre.casefold()]

    def find_by_expiry_date(self, cutoff: date) -> list[Producto]:
        """Retorna productos que vencen en o antes de ``cutoff``, en orden de insercion."""
        return [replace(p) for p in self._products if p.fecha_vencimiento <= cutoff]

    def total_value(self) -> Decimal:
        """Suma exacta del valor total de todos los productos."""
        return sum((p.valor_total for p in self._products), Decimal("0"))

    def expiring_within(self, days: int, today: date | None = None) -> list[Producto]:
        """Productos que vencen dentro de ``days`` dias, ordenados por vencimiento.

        El orden es estable: productos con la misma fecha mantienen su orden
        de insercion. Si el corte queda fuera del calendario se usa
        ``date.max`` o ``date.min``.
        """
        base = today or date.today()
        try:
            cutoff = base + timedelta(days=days)
        except OverflowError:
            cutoff = date.max if days > 0 else date.min
        return sorted(self.find_by_expiry_date(cutoff), key=lambda p: p.fecha_vencimiento)

    def _find_first(self, codigo_barras: str) -> Producto | None:
        """Retorna la referencia interna al primer producto con el codigo."""
        return next((p for p in self._products if p.codigo_barras == codigo_barras), None)
