"""Weighted graph of geographic locations with shortest-path queries."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

EARTH_RADIUS_KM = 6371.0

# Distances at or above this value are treated as unreachable.
MAX_DISTANCE = 1_000_000.0

_STOP_PREFIX = "Stop"


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two coordinates."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2.0) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2.0) ** 2
    )
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


@dataclass
class Edge:
    """A weighted edge pointing at a vertex by its index."""

    destination: int
    weight: float


@dataclass
class Vertex:
    """A location in the graph together with its outgoing edges."""

    vertex_id: str
    name: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    data: Any = None
    edges: list[Edge] = field(default_factory=list)


class GraphFullError(Exception):
    """Raised when a vertex is added to a graph that is at capacity."""


class Graph:
    """A weighted graph stored as adjacency lists, directed or undirected."""

    def __init__(self, max_vertices: int = 100, directed: bool = False) -> None:
        if max_vertices <= 0:
            raise ValueError("max_vertices must be positive")
        self.max_vertices = max_vertices
        self.directed = directed
        self._vertices: list[Vertex] = []
        self._index: dict[str, int] = {}

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._vertices):
            raise IndexError(f"vertex index {index} out of range")

    def index_of(self, vertex_id: str) -> int:
        """Return the index of ``vertex_id``; raise KeyError if absent."""
        try:
            return self._index[vertex_id]
        except KeyError:
            raise KeyError(vertex_id) from None

    def add_vertex(
        self,
        vertex_id: str,
        name: str,
        latitude: float,
        longitude: float,
        data: Any = None,
    ) -> Vertex:
        """Add a vertex and return it.

        Raises GraphFullError at capacity and ValueError for a duplicate id.
        """
        if len(self._vertices) >= self.max_vertices:
            raise GraphFullError(f"graph is full ({self.max_vertices} vertices)")
        if vertex_id in self._index:
            raise ValueError(f"vertex {vertex_id!r} already exists")
        vertex = Vertex(vertex_id, name, latitude, longitude, data)
        self._index[vertex_id] = len(self._vertices)
        self._vertices.append(vertex)
        return vertex

    def add_edge(self, from_id: str, to_id: str, weight: float) -> None:
        """Add an edge between two vertices named by id."""
        self.add_edge_by_index(self.index_of(from_id), self.index_of(to_id), weight)

    def add_edge_by_index(self, from_index: int, to_index: int, weight: float) -> None:
        """Add an edge between two vertices named by index.

        An existing edge from ``from_index`` to ``to_index`` only has its
        weight replaced.
        """
        self._check_index(from_index)
        self._check_index(to_index)
        edges = self._vertices[from_index].edges
        for edge in edges:
            if edge.destination == to_index:
                edge.weight = weight
                return
        edges.append(Edge(to_index, weight))
        if not self.directed:
            self._vertices[to_index].edges.append(Edge(from_index, weight))

    def add_edge_with_distance(self, from_id: str, to_id: str) -> float:
        """Add an edge weighted by the haversine distance; return the weight."""
        source = self._vertices[self.index_of(from_id)]
        target = self._vertices[self.index_of(to_id)]
        distance = haversine(
            source.latitude, source.longitude, target.latitude, target.longitude
        )
        self.add_edge_by_index(self._index[from_id], self._index[to_id], distance)
        return distance

    def remove_edge(self, from_id: str, to_id: str) -> None:
        """Remove the edge between two vertices.

        Raises KeyError for an unknown vertex and ValueError if no such edge.
        """
        from_index = self.index_of(from_id)
        to_index = self.index_of(to_id)
        edges = self._vertices[from_index].edges
        for position, edge in enumerate(edges):
            if edge.destination == to_index:
                del edges[position]
                break
        else:
            raise ValueError(f"no edge from {from_id!r} to {to_id!r}")
        if not self.directed:
            reverse = self._vertices[to_index].edges
            for position, edge in enumerate(reverse):
                if edge.destination == from_index:
                    del reverse[position]
                    break

    def remove_vertex(self, vertex_id: str) -> Vertex:
        """Remove a vertex and every edge touching it; return the vertex."""
        index = self.index_of(vertex_id)
        for vertex in self._vertices:
            kept: list[Edge] = []
            for edge in vertex.edges:
                if edge.destination == index:
                    continue
                if edge.destination > index:
                    edge.destination -= 1
                kept.append(edge)
            vertex.edges = kept
        removed = self._vertices.pop(index)
        self._index = {v.vertex_id: i for i, v in enumerate(self._vertices)}
        return removed

    def shortest_path(
        self, start_id: str, end_id: str
    ) -> Optional[tuple[list[str], float]]:
        """Dijkstra's shortest path as (vertex ids, total distance).

        Returns None when the end cannot be reached; raises KeyError for an
        unknown vertex.
        """
        start = self.index_of(start_id)
        end = self.index_of(end_id)
        if start == end:
            return [self._vertices[start].vertex_id], 0.0

        count = len(self._vertices)
        distances = [MAX_DISTANCE] * count
        previous = [-1] * count
        visited = [False] * count
        distances[start] = 0.0
        queue: list[tuple[float, int]] = [(0.0, start)]

        while queue:
            distance, current = heapq.heappop(queue)
            if visited[current] or distance > distances[current]:
                continue
            if distance >= MAX_DISTANCE or current == end:
                break
            visited[current] = True
            for edge in self._vertices[current].edges:
                neighbor = edge.destination
                if visited[neighbor]:
                    continue
                candidate = distance + edge.weight
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    previous[neighbor] = current
                    heapq.heappush(queue, (candidate, neighbor))

        if distances[end] >= MAX_DISTANCE:
            return None

        path: list[str] = []
        current = end
        while current != -1:
            path.append(self._vertices[current].vertex_id)
            current = previous[current]
        path.reverse()
        return path, distances[end]

    def nearest_location(self, latitude: float, longitude: float) -> Optional[str]:
        """Id of the vertex closest to the coordinates, or None if empty."""
        best: Optional[str] = None
        best_distance = MAX_DISTANCE
        for vertex in self._vertices:
            distance = haversine(latitude, longitude, vertex.latitude, vertex.longitude)
            if distance < best_distance:
                best_distance = distance
                best = vertex.vertex_id
        return best

    def nearest_neighbor(self, vertex_id: str) -> Optional[str]:
        """Id of the neighbour reached by the lightest edge, or None."""
        index = self.index_of(vertex_id)
        best: Optional[int] = None
        best_weight = MAX_DISTANCE
        for edge in self._vertices[index].edges:
            if edge.weight < best_weight:
                best_weight = edge.weight
                best = edge.destination
        return None if best is None else self._vertices[best].vertex_id

    def nearest_stop(self, latitude: float, longitude: float) -> Optional[str]:
        """Id of the closest vertex whose id starts with "Stop", or None."""
        best: Optional[str] = None
        best_distance = MAX_DISTANCE
        for vertex in self._vertices:
            if not vertex.vertex_id.startswith(_STOP_PREFIX):
                continue
            distance = haversine(latitude, longitude, vertex.latitude, vertex.longitude)
            if distance < best_distance:
                best_distance = distance
                best = vertex.vertex_id
        return best

    def connect_to_nearest_stop(self, vertex_id: str) -> Optional[str]:
        """Link a vertex to its nearest stop; return that stop's id or None."""
        vertex = self._vertices[self.index_of(vertex_id)]
        stop_id = self.nearest_stop(vertex.latitude, vertex.longitude)
        if stop_id is None:
            return None
        self.add_edge_with_distance(vertex_id, stop_id)
        return stop_id

    def vertex_coordinates(self, vertex_id: str) -> tuple[float, float]:
        """(latitude, longitude) of a vertex."""
        vertex = self._vertices[self.index_of(vertex_id)]
        return vertex.latitude, vertex.longitude

    def connected_stops(
        self, vertex_id: str, max_stops: Optional[int] = None
    ) -> list[str]:
        """Ids of neighbouring stops in edge order, at most ``max_stops``."""
        index = self.index_of(vertex_id)
        stops: list[str] = []
        for edge in self._vertices[index].edges:
            if max_stops is not None and len(stops) >= max_stops:
                break
            neighbor_id = self._vertices[edge.destination].vertex_id
            if neighbor_id.startswith(_STOP_PREFIX):
                stops.append(neighbor_id)
        return stops

    def degree(self, vertex_id: str) -> int:
        """Number of edges leaving a vertex."""
        return len(self._vertices[self.index_of(vertex_id)].edges)

    def are_adjacent(self, from_id: str, to_id: str) -> bool:
        """True if an edge leads from ``from_id`` to ``to_id``."""
        from_index = self._index.get(from_id)
        to_index = self._index.get(to_id)
        if from_index is None or to_index is None:
            return False
        return any(
            edge.destination == to_index for edge in self._vertices[from_index].edges
        )

    def edge_count(self) -> int:
        """Number of edges; each undirected edge counts once."""
        total = sum(len(vertex.edges) for vertex in self._vertices)
        return total if self.directed else total // 2

    def clear(self) -> None:
        self._vertices.clear()
        self._index.clear()

    def vertex_at(self, index: int) -> Vertex:
        self._check_index(index)
        return self._vertices[index]

    def edges_for_vertex(
        self, vertex_index: int, max_edges: Optional[int] = None
    ) -> list[tuple[int, float]]:
        """(destination index, weight) pairs of a vertex's edges."""
        self._check_index(vertex_index)
        edges = self._vertices[vertex_index].edges
        if max_edges is not None:
            edges = edges[:max_edges]
        return [(edge.destination, edge.weight) for edge in edges]

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices))

    def __str__(self) -> str:
        lines = [f"Graph Structure (Vertices: {len(self._vertices)}):"]
        for index, vertex in enumerate(self._vertices):
            if vertex.edges:
                body = "-> ".join(
                    f"{self._vertices[edge.destination].vertex_id}({edge.weight:g}) "
                    for edge in vertex.edges
                )
            else:
                body = "No edges"
            lines.append(f"Vertex[{index}]: {vertex.vertex_id} ({vertex.name}) - {body}")
        return "\n".join(lines)