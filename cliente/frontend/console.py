"""Menu de texto de Lazy Inventory."""

from __future__ import annotations

import logging
from collections.abc import Callable

from cliente.backend.controller import (
    SEARCH_BY_BARCODE,
    SEARCH_BY_EXPIRY,
    SEARCH_BY_NAME,
    InventoryController,
)
from cliente.backend.product_formatter import (
    format_currency,
    format_date,
    format_product_list,
)
from parametros import APP_NAME, DATE_FORMAT_HINT
from shared.errors import ServiceError, ValidationError

LOGGER = logging.getLogger(__name__)

EXIT_OPTION = "7"
NO_RESULTS_MESSAGE = "No se encontraron productos."

_SEARCH_OPTIONS: dict[str, tuple[str, str, str]] = {
    "1": ("Nombre", SEARCH_BY_NAME, "Nombre: "),
    "2": ("Codigo de barras", SEARCH_BY_BARCODE, "Codigo de barras: "),
    "3": ("Fecha de vencimiento", SEARCH_BY_EXPIRY, f"Fecha de vencimiento ({DATE_FORMAT_HINT}): "),
}


class ConsoleMenu:
    """Menu principal en consola con una tabla de acciones por opcion."""

    def __init__(
        self,
        controller: InventoryController,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ) -> None:
        self._controller = controller
        self._input = input_func
        self._output = output_func
        self._actions: dict[str, tuple[str, Callable[[], None]]] = {
            "1": ("Agregar producto", self._add_product),
            "2": ("Actualizar producto", self._update_product),
            "3": ("Eliminar producto", self._remove_product),
            "4": ("Buscar producto", self._search_products),
            "5": ("Valor total del inventario", self._show_total_value),
            "6": ("Reporte de productos prontos a vencer", self._show_expiring_report),
        }

    def run(self) -> None:
        """Muestra el menu hasta que el usuario elige salir o se cierra la entrada."""
        LOGGER.info("Menu iniciado.")
        while True:
            self._print_menu()
            try:
                option = self._input("> ").strip()
            except EOFError:
                break

            if option == EXIT_OPTION:
                break

            action = self._actions.get(option)
            if action is None:
                self._output("Opcion invalida!")
                continue

            label, handler = action
            try:
                handler()
            except EOFError:
                break
            except (ValidationError, ServiceError) as exc:
                LOGGER.info("Accion '%s' no completada: %s", label, exc)
                self._output(f"Error: {exc}")

        LOGGER.info("Accion ejecutada: salir")

    def _print_menu(self) -> None:
        lines = [f"\n{APP_NAME} - Elige una opcion:"]
        lines.extend(f"{key}. {label}" for key, (label, _) in self._actions.items())
        lines.append(f"{EXIT_OPTION}. Salir")
        self._output("\n".join(lines))

    def _add_product(self) -> None:
        nombre = self._input("Nombre del producto: ")
        codigo_barras = self._input("Codigo de barras: ")
        cantidad = self._input("Cantidad: ")
        precio = self._input("Precio unitario: ")
        fecha = self._input(f"Fecha de vencimiento ({DATE_FORMAT_HINT}): ")

        self._controller.on_add_product(nombre, codigo_barras, cantidad, precio, fecha)
        self._output("Producto agregado con exito!")

    def _update_product(self) -> None:
        codigo_barras = self._input("Codigo de barras del producto a actualizar: ")
        current = self._controller.get_product(codigo_barras)
        if current is None:
            self._output("Producto no encontrado!")
            return

        # Un campo vacio conserva el valor mostrado entre parentesis.
        nombre = self._input(f"Nombre del producto ({current.nombre}): ")
        cantidad = self._input(f"Cantidad ({current.cantidad}): ")
        precio = self._input(f"Precio unitario ({format_currency(current.precio_unitario)}): ")
        fecha = self._input(f"Fecha de vencimiento ({format_date(current.fecha_vencimiento)}): ")

        self._controller.on_update_product(codigo_barras, nombre, cantidad, precio, fecha)
        self._output("Producto actualizado con exito!")

    def _remove_product(self) -> None:
        codigo_barras = self._input("Codigo de barras del producto a eliminar: ")
        removed = self._controller.on_remove_product(codigo_barras)
        if removed == 0:
            self._output("Producto no encontrado!")
            return
        self._output(f"Producto eliminado con exito! ({removed} registro(s))")

    def _search_products(self) -> None:
        options = ", ".join(f"{key}. {label}" for key, (label, _, _) in _SEARCH_OPTIONS.items())
        choice = self._input(f"Buscar por: {options}\n> ").strip()
        search_option = _SEARCH_OPTIONS.get(choice)
        if search_option is None:
            self._output("Opcion invalida!")
            return

        _, criterio, prompt = search_option
        results = self._controller.on_search(criterio, self._input(prompt))
        self._output("Productos encontrados:")
        self._output(format_product_list(results, NO_RESULTS_MESSAGE))

    def _show_total_value(self) -> None:
        total = self._controller.on_total_value()
        self._output(f"Valor total del inventario: {format_currency(total)}")

    def _show_expiring_report(self) -> None:
        dias = self._input("Dias hasta la fecha de vencimiento: ")
        days, products = self._controller.on_expiring_report(dias)
        self._output(f"Productos prontos a vencer en {days} dias:")
        self._output(format_product_list(products, NO_RESULTS_MESSAGE))
