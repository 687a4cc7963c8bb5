# smartcity

Data structures and CSV loaders for modelling a city: bus stops, schools,
hospitals and the roads that link them. The package has no dependencies
outside the standard library.

## Modules

- `smartcity.circular_queue`: `CircularQueue`, a FIFO queue with a fixed
  capacity. `enqueue` raises `QueueFullError` when the queue is full.
  `dequeue`, `peek_front` and `peek_rear` raise `IndexError` when it is empty.
  Items are `QueueNode(data, extra)`.
- `smartcity.stack`: `Stack`, a LIFO stack whose capacity doubles when it
  fills up. It has `push`, `pop`, `peek`, `format_top_down` and
  `format_chronological`. Iteration runs from bottom to top.
- `smartcity.min_heap`: `MinHeap`, a binary min-heap of `HeapNode`s with
  `insert`, `extract_min`, `peek_min` and `decrease_priority`. The last raises
  `KeyError` for an unknown identifier and `ValueError` when the new
  priority is higher than the old one.
- `smartcity.hash_table`: `HashTable`, which uses separate chaining and the
  `polynomial_hash` rolling hash (base 31). When the load factor goes above
  0.75 it grows to `next_prime(2 * size)` buckets. The helpers `is_prime` and
  `next_prime` are public too. `search` returns `None` for a missing key;
  `remove` raises `KeyError`.
- `smartcity.linked_list`: `SinglyLinkedList`, an ordered list of string items
  such as the stops on a route. It supports insertion and removal by
  position or by value, `reverse`, and `format(separator)`.
- `smartcity.tree_node` and `smartcity.tree`: `TreeNode` and `Tree`, an N-ary
  tree for hierarchies such as sector, school, department and class. It
  offers `add_child`, `remove_node`, `node_depth`, `height`, `leaf_nodes`,
  `is_ancestor` and `path_to_node`.
- `smartcity.graph`: `Graph`, a weighted graph, directed or undirected, with a
  maximum number of vertices. `GraphFullError` is raised past that limit. The
  module also has `haversine` distances, `add_edge_with_distance`, Dijkstra
  `shortest_path`, `nearest_location`, `nearest_neighbor`, `nearest_stop` and
  `connect_to_nearest_stop`. Stops are the vertices whose id starts with
  `"Stop"`.
- `smartcity.data_loader`: a CSV line parser (`parse_csv_line`) that handles
  quoted fields and doubled quotes, `split_comma_list`, `load_rows`, one
  loader per dataset file (`load_schools`, `load_hospitals`,
  `load_pharmacies`, `load_stops`, `load_buses`, `load_school_buses`,
  `load_population`, `load_malls`, `load_products`, `load_facilities`,
  `load_airports`, `load_railways`), and `format_rows` for inspection.

## Example

```python
from smartcity.graph import Graph

city = Graph(max_vertices=100, directed=False)
city.add_vertex("Stop1", "G-10 Markaz", 33.6844, 73.0479)
city.add_vertex("Stop2", "F-8 Markaz", 33.7100, 73.0400)
city.add_vertex("Stop3", "Blue Area", 33.7200, 73.0600)
city.add_edge_with_distance("Stop1", "Stop2")
city.add_edge_with_distance("Stop2", "Stop3")

result = city.shortest_path("Stop1", "Stop3")
if result is not None:
    path, distance_km = result
    print(" -> ".join(path), f"{distance_km:.2f} km")
```

`shortest_path` returns `None` when the end cannot be reached. It raises
`KeyError` when either vertex is unknown.

Loading a dataset file:

```python
from smartcity.data_loader import load_stops

rows = load_stops("stops.csv", 200)
for stop_id, name, coordinates, *_ in rows:
    print(stop_id, name, coordinates)
```

The loaders read UTF-8 and skip the header line and blank lines. They keep
only rows with enough fields for their format, and stop after `max_rows`
rows when it is given. They raise `DataFileError`, a subclass of `OSError`,
when the file cannot be opened.

## What it does not do

This is a library only. It has no command-line program and no map or
visualisation window. Loaded rows stay lists of strings: nothing turns them
into schools, hospitals or buses, and nothing places them in a `Graph` for you.

## Tests

```
pip install -e .[test]
pytest
```