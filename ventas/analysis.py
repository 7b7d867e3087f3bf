"""Parsing of sales CSV lines and the aggregate results computed from the sales."""

from __future__ import annotations

import math
import re
from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from ventas.priority_queue import PriorityQueue
from ventas.venta import Sale

TOP_CITIES = 5
"""Largest number of cities kept per country in the ranking."""

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)

_FIELD_COUNT = 12


@dataclass
class Results:
    """Aggregates computed over every sale."""

    amount_by_product_country: dict[str, dict[str, float]] = field(default_factory=dict)
    average_by_category_country: dict[str, dict[str, float]] = field(default_factory=dict)
    shipping_by_country: dict[str, str] = field(default_factory=dict)
    shipping_by_category: dict[str, str] = field(default_factory=dict)
    status_by_country: dict[str, str] = field(default_factory=dict)
    top_cities_by_country: dict[str, list[tuple[str, float]]] = field(default_factory=dict)
    busiest_day: str = ""
    best_selling_product: str = ""
    least_selling_product: str = ""


def _parse_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError("stoi")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError("stoi")
    return value


def _parse_float(text: str) -> float:
    """Read the number at the start of ``text``, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError("stod")
    value = float(match.group(1))
    if math.isinf(value) and "inf" not in match.group(1).lower():
        raise ValueError("stod")
    return value


def parse_sale(line: str) -> Sale:
    """Build a sale from one comma-separated CSV line.

    Numeric fields are trimmed; text fields are kept exactly as written.
    Raises ValueError when a numeric field cannot be read.
    """
    fields = line.rstrip("\r\n").split(",")
    fields += [""] * (_FIELD_COUNT - len(fields))
    (
        sale_id,
        date,
        country,
        city,
        customer,
        product,
        category,
        quantity,
        unit_price,
        total,
        shipping_method,
        shipping_status,
    ) = fields[:_FIELD_COUNT]
    return Sale(
        sale_id=_parse_int(sale_id.strip()),
        date=date,
        country=country,
        city=city,
        customer=customer,
        product=product,
        category=category,
        quantity=_parse_int(quantity.strip()),
        unit_price=_parse_float(unit_price.strip()),
        total=_parse_float(total.strip()),
        shipping_method=shipping_method,
        shipping_status=shipping_status,
    )


def read_sales(
    lines: Iterable[str], warn: Callable[[str], None] | None = None
) -> list[Sale]:
    """Parse CSV lines after the header, reporting bad lines through ``warn``."""
    sales: list[Sale] = []
    rows = iter(lines)
    next(rows, None)
    for number, line in enumerate(rows, start=2):
        try:
            sales.append(parse_sale(line))
        except ValueError as exc:
            if warn is not None:
                text = line.rstrip("\r\n")
                warn(f"❌ Error al procesar línea {number}: {text}\n   Motivo: {exc}")
    return sales


def _sorted_nested(table: dict[str, dict[str, float]]) -> dict[str, dict[str, float]]:
    return {key: dict(sorted(inner.items())) for key, inner in sorted(table.items())}


def _most_frequent(counts: dict[str, dict[str, int]]) -> dict[str, str]:
    """For each group, the label seen most often; ties go to the first label by name."""
    chosen: dict[str, str] = {}
    for label in sorted(counts):
        for group, seen in sorted(counts[label].items()):
            current = chosen.get(group, "")
            if not current or seen > counts[current][group]:
                chosen[group] = label
    return dict(sorted(chosen.items()))


def compute_results(sales: Iterable[Sale]) -> Results:
    """Compute every aggregate shown in the main report."""
    amount: dict[str, dict[str, float]] = defaultdict(lambda: defaultdict(float))
    category_sums: dict[str, dict[str, list[float]]] = defaultdict(
        lambda: defaultdict(lambda: [0.0, 0])
    )
    shipping_country: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))
    shipping_category: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))
    status_country: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))
    city_amount: dict[str, dict[str, float]] = defaultdict(lambda: defaultdict(float))
    day_amount: dict[str, float] = defaultdict(float)
    product_quantity: dict[str, int] = defaultdict(int)

    for sale in sales:
        amount[sale.product][sale.country] += sale.total
        pair = category_sums[sale.category][sale.country]
        pair[0] += sale.total
        pair[1] += 1
        shipping_country[sale.shipping_method][sale.country] += 1
        shipping_category[sale.shipping_method][sale.category] += 1
        status_country[sale.shipping_status][sale.country] += 1
        city_amount[sale.city][sale.country] += sale.total
        day_amount[sale.date] += sale.total
        product_quantity[sale.product] += sale.quantity

    averages = {
        category: {
            country: (total / count if count > 0 else 0.0)
            for country, (total, count) in by_country.items()
        }
        for category, by_country in category_sums.items()
    }

    queues: dict[str, PriorityQueue[tuple[str, float]]] = {}
    for city in sorted(city_amount):
        for country, total in sorted(city_amount[city].items()):
            queue = queues.setdefault(country, PriorityQueue())
            priority = int(-total) if math.isfinite(total) else 0
            queue.enqueue_priority((city, total), priority)
            while len(queue) > TOP_CITIES:
                queue.dequeue()

    busiest_day = ""
    best_amount = 0.0
    for day in sorted(day_amount):
        if day_amount[day] > best_amount:
            best_amount = day_amount[day]
            busiest_day = day

    best_product = ""
    least_product = ""
    most = 0
    fewest = _INT_MAX
    for product in sorted(product_quantity):
        quantity = product_quantity[product]
        if quantity > most:
            most = quantity
            best_product = product
        if 0 < quantity < fewest:
            fewest = quantity
            least_product = product

    return Results(
        amount_by_product_country=_sorted_nested(amount),
        average_by_category_country=_sorted_nested(averages),
        shipping_by_country=_most_frequent(shipping_country),
        shipping_by_category=_most_frequent(shipping_category),
        status_by_country=_most_frequent(status_country),
        top_cities_by_country={country: list(queues[country]) for country in sorted(queues)},
        busiest_day=busiest_day,
        best_selling_product=best_product,
        least_selling_product=least_product,
    )


def date_key(text: str) -> int:
    """Turn a ``DD/MM/YYYY`` (or ``DD-MM-YYYY``) date into the integer ``YYYYMMDD``.

    Raises ValueError when a part is missing or the result is not a number.
    """
    parts = text.replace("-", "/").split("/")
    parts += [""] * (3 - len(parts))
    day, month, year = parts[:3]
    if not day or not month or not year:
        raise ValueError("Formato de fecha invalido. Se esperaba DD/MM/YYYY.")
    if len(day) == 1:
        day = "0" + day
    if len(month) == 1:
        month = "0" + month
    return _parse_int(year + month + day)