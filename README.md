# ventas

`ventas` is a library that reads sales records in CSV form and computes
summaries from them:

- the top five cities per country, by total amount
- the total amount per product and country
- the average sale per category and country
- the most used shipping method per country and per category
- the most frequent shipping status per country
- the day with the highest total sales
- the best-selling and least-selling products, by units

It also includes the small data structures these summaries use. These are
linked, doubly linked and circular lists, a stack, a queue, a stable priority
queue, hash tables, an undirected graph and an in-place quicksort.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## CSV format

The file starts with a header line. Each following line holds one sale with
twelve comma-separated fields:

```
id,date,country,city,client,product,category,quantity,unit_price,total,shipping_method,shipping_status
```

Numeric fields are trimmed before they are read. Text fields are kept exactly
as written.

## Computing the summaries

```python
from ventas.analysis import read_sales, compute_results

with open("ventas_sudamerica.csv", encoding="utf-8") as f:
    sales = read_sales(f, warn=print)

results = compute_results(sales)
print(results.top_cities_by_country)
print(results.busiest_day, results.best_selling_product, results.least_selling_product)
```

- `read_sales(lines, warn)` skips the header and parses every other line.
- `warn` is optional. When you pass it, it is called with a message for each
  line that cannot be read, and that line is skipped.
- `parse_sale(line)` parses a single line into a `ventas.venta.Sale`. It raises
  `ValueError` when a numeric field is not a number.

`compute_results` returns a `Results` dataclass with these fields:

- `amount_by_product_country`
- `average_by_category_country`
- `shipping_by_country`
- `shipping_by_category`
- `status_by_country`
- `top_cities_by_country`
- `busiest_day`
- `best_selling_product`
- `least_selling_product`

`date_key("5/3/2024")` turns a `DD/MM/YYYY` or `DD-MM-YYYY` date into the
integer `20240305`, which is useful for date-range filtering.

### Sales and metrics

`Sale` (in `ventas.venta`) treats two sales as equal when they have the same
id, and orders sales by total amount. `Sale.format()` returns the sale as a
one-line listing.

`Metrics` times an operation and counts decisions. You can use it as a
context manager, then call `report()` to get the measurements as text:

```python
from ventas.venta import Metrics

with Metrics("Cargar CSV", "dict") as metrics:
    metrics.count()
print(metrics.report())
```

## Data structures

```python
from ventas.priority_queue import PriorityQueue
from ventas.hashing import HashMapList
from ventas.graph import Graph
from ventas.sorting import quick_sort

queue = PriorityQueue()
queue.enqueue_priority("urgent", 1)
queue.enqueue("whenever")
print(queue.dequeue())            # urgent

table = HashMapList(100)
table.put("Lima", 3)
print(table.get("Lima"), "Lima" in table)

network = Graph()
for node in ("Lima", "Peru"):
    network.add_node(node)
network.add_edge("Lima", "Peru")
print(network.connected("Lima", "Peru"))   # True

values = [5, 1, 4, 2]
quick_sort(values)
print(values)                     # [1, 2, 4, 5]
```

Reading from an empty priority queue, stack or queue raises `EmptyError`.
`ventas.hashing.HashMap` keeps a single entry per slot and raises
`CollisionError` when a second key lands in an occupied slot.

The module `ventas.linked_list` provides:

- `LinkedList`
- `DoublyLinkedList`
- `CircularList`

The module `ventas.stack_queue` provides `Stack` and `Queue`.

## What it does not do

The package installs no command and has no interactive menu. It does not keep
a store of sales that you can add to, modify or delete from. To change the
data, edit the list of `Sale` objects yourself and call `compute_results`
again.

The package also has no binary search tree or AVL tree, and no tree benchmark.