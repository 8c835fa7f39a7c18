"""Shared test fixtures."""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from mst_graph import DisjointSet, Graph


def build_graph(nodes, edges):
    graph = Graph(nodes)
    for src, dst, weight in edges:
        graph.add_edge(src, dst, weight)
    return graph


def has_cycle(edges, vertex_count):
    uf = DisjointSet(vertex_count)
    for edge in edges:
        if uf.find(edge.source) == uf.find(edge.destination):
            return True
        uf.union(edge.source, edge.destination)
    return False


def connects_all_vertices(edges, vertex_count):
    uf = DisjointSet(vertex_count)
    for edge in edges:
        uf.union(edge.source, edge.destination)
    root = uf.find(0)
    return all(uf.find(v) == root for v in range(1, vertex_count))


@pytest.fixture
def diamond_graph():
    """A-B=1, A-C=4, B-C=2, C-D=3, B-D=5; MST cost 6."""
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("A", "C", 4), ("B", "C", 2), ("C", "D", 3), ("B", "D", 5)],
    )


@pytest.fixture
def equal_weight_cycle():
    """4-cycle with every weight 5; MST cost 15."""
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 5), ("B", "C", 5), ("C", "D", 5), ("D", "A", 5)],
    )


@pytest.fixture
def disconnected_graph():
    """A-B and C-D with no path between the pairs."""
    return build_graph(["A", "B", "C", "D"], [("A", "B", 1), ("C", "D", 2)])


@pytest.fixture
def sample_input(tmp_path):
    """Small input file with a connected and a disconnected graph."""
    path = tmp_path / "input.json"
    path.write_text(
        """{
  "graphs": [
    {"id": 1, "name": "Diamond", "nodes": ["A", "B", "C", "D"],
     "edges": [{"from": "A", "to": "B", "weight": 1},
               {"from": "A", "to": "C", "weight": 4},
               {"from": "B", "to": "C", "weight": 2},
               {"from": "C", "to": "D", "weight": 3},
               {"from": "B", "to": "D", "weight": 5}]},
    {"id": 2, "name": "Split", "nodes": ["A", "B", "C", "D"],
     "edges": [{"from": "A", "to": "B", "weight": 1},
               {"from": "C", "to": "D", "weight": 2}]}
  ]
}
"""
    )
    return path
