"""
Graph model for the MST transportation network optimizer
Vertices are dense integer indices with optional display names
"""

from collections import deque
from dataclasses import dataclass

import networkx as nx


class InvalidVertexError(ValueError):
    """Raised when an edge references a vertex the graph does not have"""


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Immutable undirected edge.

    Two edges are equal when they join the same unordered pair of vertices
    with the same weight. Equality is only used for membership queries;
    the graph stores every added edge, parallel or not.
    """

    source: int
    destination: int
    weight: float
    source_name: str = None
    destination_name: str = None

    def _key(self):
        return (
            min(self.source, self.destination),
            max(self.source, self.destination),
            self.weight,
        )

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def reversed(self):
        """Same edge seen from the destination endpoint"""
        return Edge(
            self.destination,
            self.source,
            self.weight,
            self.destination_name,
            self.source_name,
        )

    def _labels(self):
        if self.source_name is not None and self.destination_name is not None:
            return self.source_name, self.destination_name
        return str(self.source), str(self.destination)

    def describe(self):
        src, dst = self._labels()
        return f"{src} -> {dst} ({self.weight:.2f})"

    def __str__(self):
        src, dst = self._labels()
        return f"({src}-{dst}, {self.weight:.2f})"


class DisjointSet:
    """Union-find over 0..n-1 with path compression and union by rank"""

    def __init__(self, size):
        self.parent = list(range(size))
        self.rank = [0] * size

    def __len__(self):
        return len(self.parent)

    def find(self, x):
        """Return the representative of x's set, flattening the path to it"""
        if x < 0 or x >= len(self.parent):
            raise IndexError(f"Element {x} out of range for {len(self.parent)} elements")

        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        # Point every node on the path straight at the root
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]

        return root

    def union(self, x, y):
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

    def connected(self, x, y):
        return self.find(x) == self.find(y)


class Graph:
    """
    Weighted undirected graph with a fixed vertex count.

    Edges are kept twice: once in a flat list (one entry per add_edge call)
    and once per endpoint in the adjacency lists, where each record is
    oriented outward from the endpoint that owns it.
    """

    def __init__(self, vertices):
        """
        vertices: either the number of vertices or an ordered list of
        vertex names (names map to indices by position and are
        stored as strings)
        """
        if isinstance(vertices, int):
            node_names = []
            vertex_count = vertices
        else:
            # Names are addressed as strings, like the JSON loader produces them
            node_names = [str(name) for name in vertices]
            vertex_count = len(node_names)

        if vertex_count < 0:
            raise InvalidVertexError(f"Vertex count must be non-negative, got {vertex_count}")

        self._vertex_count = vertex_count
        self._node_names = node_names
        self._name_to_index = {}
        for index, name in enumerate(node_names):
            if name in self._name_to_index:
                raise InvalidVertexError(f"Duplicate vertex name: {name}")
            self._name_to_index[name] = index

        self._edges = []
        self._adjacency = [[] for _ in range(vertex_count)]

        self.name = None
        self.graph_id = 0

    @property
    def vertex_count(self):
        return self._vertex_count

    @property
    def edges(self):
        return tuple(self._edges)

    @property
    def edge_count(self):
        return len(self._edges)

    @property
    def node_names(self):
        return list(self._node_names)

    def adjacency(self, vertex):
        """Outward edge records of a vertex"""
        return tuple(self._adjacency[vertex])

    def node_name(self, index):
        if 0 <= index < len(self._node_names):
            return self._node_names[index]
        return str(index)

    def node_index(self, name):
        return self._name_to_index.get(name)

    def _resolve(self, vertex):
        """Map an index or a name to a valid index"""
        if isinstance(vertex, str):
            index = self._name_to_index.get(vertex)
            if index is None:
                raise InvalidVertexError(f"Invalid node name: {vertex}")
            return index

        if isinstance(vertex, bool) or not isinstance(vertex, int):
            raise InvalidVertexError(f"Invalid vertex reference: {vertex!r}")

        if not 0 <= vertex < self._vertex_count:
            raise InvalidVertexError(
                f"Invalid vertex index: {vertex} (graph has {self._vertex_count} vertices)"
            )
        return vertex

    def add_edge(self, source, destination, weight):
        """
        Add an undirected edge by vertex index or by vertex name.

        Both endpoints are resolved before anything is stored, so a bad
        reference leaves the graph unchanged.
        """
        src = self._resolve(source)
        dst = self._resolve(destination)

        if self._node_names:
            edge = Edge(src, dst, weight, self._node_names[src], self._node_names[dst])
        else:
            edge = Edge(src, dst, weight)

        self._edges.append(edge)
        self._adjacency[src].append(edge)
        self._adjacency[dst].append(edge.reversed())
        return edge

    def is_connected(self):
        """BFS from vertex 0 reaches every vertex"""
        if self._vertex_count == 0:
            return True

        visited = [False] * self._vertex_count
        visited[0] = True
        visited_count = 1
        queue_bfs = deque([0])

        while queue_bfs:
            current = queue_bfs.popleft()
            for edge in self._adjacency[current]:
                neighbor = edge.destination
                if not visited[neighbor]:
                    visited[neighbor] = True
                    visited_count += 1
                    queue_bfs.append(neighbor)

        return visited_count == self._vertex_count

    def has_cycle(self):
        """Union-find over each distinct vertex pair finds an already-joined pair"""
        uf = DisjointSet(self._vertex_count)
        processed = set()

        for edge in self._edges:
            key = (min(edge.source, edge.destination), max(edge.source, edge.destination))
            if key in processed:
                continue
            processed.add(key)

            if uf.find(edge.source) == uf.find(edge.destination):
                return True
            uf.union(edge.source, edge.destination)

        return False

    def to_networkx(self):
        """
        Build a networkx view of the graph for plotting and reference checks.
        Parallel edges collapse to the lightest one.
        """
        G = nx.Graph()
        for index in range(self._vertex_count):
            G.add_node(index, name=self.node_name(index))

        for edge in self._edges:
            u, v = edge.source, edge.destination
            if G.has_edge(u, v) and G[u][v]["weight"] <= edge.weight:
                continue
            G.add_edge(u, v, weight=edge.weight)

        return G

    def __str__(self):
        lines = [
            f"Graph: {self.name if self.name is not None else 'Unnamed'}",
            f"Vertices: {self._vertex_count}, Edges: {len(self._edges)}",
            "Edges:",
        ]

        printed = set()
        for edge in self._edges:
            key = (min(edge.source, edge.destination), max(edge.source, edge.destination))
            if key not in printed:
                lines.append(f"  {edge}")
                printed.add(key)

        return "\n".join(lines) + "\n"
