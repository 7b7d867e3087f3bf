import time

from ventas.venta import Metrics, Sale, TopResult


def make_sale(sale_id=1, total=100.0):
    return Sale(
        sale_id=sale_id,
        date="2024-01-05",
        country="Chile",
        city="Santiago",
        customer="Ana",
        product="Mouse",
        category="Perifericos",
        quantity=2,
        unit_price=50.0,
        total=total,
        shipping_method="Aereo",
        shipping_status="Entregado",
    )


def test_equality_is_by_id():
    assert make_sale(1, 10.0) == make_sale(1, 99.0)
    assert not make_sale(1, 10.0) == make_sale(2, 10.0)


def test_ordering_is_by_total():
    cheap = make_sale(1, 10.0)
    dear = make_sale(2, 20.0)
    assert cheap < dear
    assert dear > cheap
    assert sorted([dear, cheap]) == [cheap, dear]


def test_hash_follows_id():
    assert len({make_sale(1, 10.0), make_sale(1, 20.0), make_sale(2, 5.0)}) == 2


def test_default_sale_is_blank():
    sale = Sale()
    assert sale.sale_id == 0
    assert sale.country == ""
    assert sale.total == 0.0


def test_format_contains_every_field():
    text = make_sale().format()
    assert text.startswith("ID: 1, Fecha: 2024-01-05, País: Chile, Ciudad: Santiago")
    assert "Precio Unitario: $50, Monto Total: $100" in text
    assert text.endswith("Medio de Envío: Aereo, Estado: Entregado")
    assert str(make_sale()) == text


def test_top_result_fields():
    result = TopResult("Lima", 12.5)
    assert result.name == "Lima"
    assert result.value == 12.5


def test_metrics_counts_conditionals():
    metrics = Metrics("Proceso X", "HashMapList")
    metrics.count()
    metrics.count()
    assert metrics.conditionals == 2
    assert "Condicionales utilizados: 2\n" in metrics.report()


def test_metrics_report_layout():
    metrics = Metrics("Cargar CSV", "Grafo")
    metrics.start()
    metrics.stop()
    lines = metrics.report().splitlines()
    assert lines[0] == "Proceso: Cargar CSV"
    assert lines[1] == "Estructura/Algoritmo: Grafo"
    assert lines[2].startswith("Tiempo de ejecución: ")
    assert lines[2].endswith(" ms")
    assert lines[4] == "------------------------"


def test_metrics_measures_elapsed_time():
    with Metrics("Espera", "ninguna") as metrics:
        time.sleep(0.01)
    assert metrics.elapsed_ms >= 5.0