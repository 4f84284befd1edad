"""Formateo de productos y montos para la consola."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext

from parametros import CURRENCY_SYMBOL, DATE_FORMAT
from servidor.domain.models import Producto

_CENTS = Decimal("0.01")


def format_currency(amount: Decimal) -> str:
    """Formatea un monto con dos decimales, redondeando hacia arriba en .5."""
    with localcontext() as ctx:
        # Montos grandes necesitan mas digitos que la precision por defecto.
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        rounded = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        return f"{sign}{CURRENCY_SYMBOL}{abs(rounded):,.2f}"


def format_date(value: date) -> str:
    """Formatea una fecha con el formato de la aplicacion."""
    return value.strftime(DATE_FORMAT)


def format_product_details(product: Producto) -> str:
    """Construye el bloque de detalle como lineas ``Campo: valor``."""
    lines = [
        f"Nombre: {product.nombre}",
        f"Codigo de barras: {product.codigo_barras}",
        f"Cantidad: {product.cantidad}",
        f"Precio unitario: {format_currency(product.precio_unitario)}",
        f"Fecha de vencimiento: {format_date(product.fecha_vencimiento)}",
        f"Valor total: {format_currency(product.valor_total)}",
    ]
    return "\n".join(lines)


def format_product_list(products: Iterable[Producto], empty_message: str) -> str:
    """Une los bloques de detalle separados por una linea en blanco."""
    blocks = [format_product_details(product) for product in products]
    if not blocks:
        return empty_message
    return "\n\n".join(blocks)
