"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal

from parametros import DEFAULT_EXPIRING_DAYS
from servidor.domain.models import Producto
from shared.errors import ValidationError
from shared.protocol import ProductDraft, ProductUpdate

from .gateway import InventoryGateway
from .validators import (
    parse_date,
    parse_days,
    parse_optional,
    parse_price,
    parse_quantity,
    require_text,
)

LOGGER = logging.getLogger(__name__)

SEARCH_BY_NAME = "nombre"
SEARCH_BY_BARCODE = "codigo"
SEARCH_BY_EXPIRY = "vencimiento"


class InventoryController:
    """Coordina acciones del menu con el almacen de inventario."""

    def __init__(self, gateway: InventoryGateway) -> None:
        self._gateway = gateway
        self._search_handlers: dict[str, Callable[[str], list[Producto]]] = {
            SEARCH_BY_NAME: self._search_by_name,
            SEARCH_BY_BARCODE: self._search_by_barcode,
            SEARCH_BY_EXPIRY: self._search_by_expiry,
        }

    def on_add_product(
        self,
        nombre: str,
        codigo_barras: str,
        cantidad: str,
        precio: str,
        fecha_vencimiento: str,
    ) -> Producto:
        """Parsea los campos ingresados y registra un producto nuevo."""
        draft = ProductDraft(
            nombre=require_text(nombre, "El nombre"),
            codigo_barras=require_text(codigo_barras, "El codigo de barras"),
            cantidad=parse_quantity(cantidad),
            precio_unitario=parse_price(precio),
            fecha_vencimiento=parse_date(fecha_vencimiento),
        )
        self._gateway.add_product(draft)
        LOGGER.info("Accion ejecutada: agregar producto %s", draft.codigo_barras)
        return draft.to_producto()

    def get_product(self, codigo_barras: str) -> Producto | None:
        """Retorna el producto actual para un codigo, o ``None`` si no existe."""
        return self._gateway.find_by_barcode(codigo_barras.strip())

    def on_update_product(
        self,
        codigo_barras: str,
        nombre: str,
        cantidad: str,
        precio: str,
        fecha_vencimiento: str,
    ) -> Producto:
        """Actualiza un producto existente; los campos vacios conservan su valor."""
        codigo = require_text(codigo_barras, "El codigo de barras")
        changes = ProductUpdate(
            nombre=parse_optional(nombre, str.strip),
            cantidad=parse_optional(cantidad, parse_quantity),
            precio_unitario=parse_optional(precio, parse_price),
            fecha_vencimiento=parse_optional(fecha_vencimiento, parse_date),
        )

        updated = self._gateway.update_product(codigo, changes)
        if updated is None:
            raise ValidationError(f"Producto no encontrado: {codigo}")

        LOGGER.info("Accion ejecutada: actualizar producto %s", codigo)
        return updated

    def on_remove_product(self, codigo_barras: str) -> int:
        """Elimina todos los productos con el codigo y retorna cuantos se quitaron."""
        codigo = require_text(codigo_barras, "El codigo de barras")
        removed = self._gateway.remove_product(codigo)
        LOGGER.info("Accion ejecutada: eliminar producto %s (%d)", codigo, removed)
        return removed

    def on_search(self, criterio: str, valor: str) -> list[Producto]:
        """Busca productos por nombre, codigo de barras o fecha de vencimiento."""
        handler = self._search_handlers.get(criterio)
        if handler is None:
            raise ValidationError(f"Criterio de busqueda invalido: {criterio}")
        return handler(valor)

    def on_total_value(self) -> Decimal:
        """Retorna el valor total del inventario."""
        return self._gateway.total_value()

    def on_expiring_report(self, dias: str) -> tuple[int, list[Producto]]:
        """Retorna los dias usados y los productos que vencen dentro de ese plazo.

        Si no se ingresan dias se usa ``DEFAULT_EXPIRING_DAYS``.
        """
        days = parse_optional(dias, parse_days)
        if days is None:
            days = DEFAULT_EXPIRING_DAYS
        return days, self._gateway.expiring_within(days)

    def _search_by_name(self, valor: str) -> list[Producto]:
        return self._gateway.find_by_name(valor.strip())

    def _search_by_barcode(self, valor: str) -> list[Producto]:
        product = self._gateway.find_by_barcode(valor.strip())
        return [product] if product is not None else []

    def _search_by_expiry(self, valor: str) -> list[Producto]:
        return self._gateway.find_by_expiry_date(parse_date(valor))
