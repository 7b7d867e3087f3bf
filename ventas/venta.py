"""Sale records and a small timing/counting helper for reports."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(eq=False)
class Sale:
    """One sale record. Equal by id, ordered by total amount."""

    sale_id: int = 0
    date: str = ""
    country: str = ""
    city: str = ""
    customer: str = ""
    product: str = ""
    category: str = ""
    quantity: int = 0
    unit_price: float = 0.0
    total: float = 0.0
    shipping_method: str = ""
    shipping_status: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sale):
            return NotImplemented
        return self.sale_id == other.sale_id

    def __hash__(self) -> int:
        return hash(self.sale_id)

    def __lt__(self, other: Sale) -> bool:
        return self.total < other.total

    def __gt__(self, other: Sale) -> bool:
        return self.total > other.total

    def format(self) -> str:
        """Return the sale on one line, as shown in listings."""
        return (
            f"ID: {self.sale_id}, Fecha: {self.date}, País: {self.country}, "
            f"Ciudad: {self.city}, Cliente: {self.customer}, Producto: {self.product}, "
            f"Categoría: {self.category}, Cantidad: {self.quantity}, "
            f"Precio Unitario: ${self.unit_price:g}, Monto Total: ${self.total:g}, "
            f"Medio de Envío: {self.shipping_method}, Estado: {self.shipping_status}"
        )

    def __str__(self) -> str:
        return self.format()


@dataclass
class TopResult:
    """A named value in a ranking, such as a city and its sales total."""

    name: str
    value: float


class Metrics:
    """Measures elapsed time and counts decisions for one process."""

    def __init__(self, process: str, structure: str) -> None:
        self.process = process
        self.structure = structure
        self.conditionals = 0
        self.elapsed_ms = 0.0
        self._started = time.perf_counter()

    def start(self) -> None:
        self._started = time.perf_counter()

    def stop(self) -> None:
        self.elapsed_ms = (time.perf_counter() - self._started) * 1000.0

    def count(self) -> None:
        self.conditionals += 1

    def __enter__(self) -> Metrics:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def report(self) -> str:
        """Return the measurements as printed after each operation."""
        return (
            f"Proceso: {self.process}\n"
            f"Estructura/Algoritmo: {self.structure}\n"
            f"Tiempo de ejecución: {self.elapsed_ms:g} ms\n"
            f"Condicionales utilizados: {self.conditionals}\n"
            "------------------------\n"
        )