"""
JSON input/output for the MST optimizer

Input:  {"graphs": [{"id", "name", "nodes": [...], "edges": [{"from", "to", "weight"}]}]}
Output: {"results": [{"graph_id", "graph_name", "input_stats", "prim", "kruskal", "cost_match"}]}
"""

import json
import math
import os

from mst_algorithms import compare_results
from mst_graph import Graph


class GraphFormatError(ValueError):
    """Raised when an input file does not describe a valid graph"""


class ResultPair:
    """Prim and Kruskal results for the same graph"""

    def __init__(self, graph_id, graph_name, vertex_count, edge_count, prim_result, kruskal_result):
        self.graph_id = graph_id
        self.graph_name = graph_name
        self.vertex_count = vertex_count
        self.edge_count = edge_count
        self.prim_result = prim_result
        self.kruskal_result = kruskal_result

    @classmethod
    def from_graph(cls, graph, prim_result, kruskal_result):
        return cls(
            graph.graph_id,
            graph.name,
            graph.vertex_count,
            graph.edge_count,
            prim_result,
            kruskal_result,
        )

    def to_dict(self):
        return {
            "graph_id": self.graph_id,
            "graph_name": self.graph_name,
            "input_stats": {"vertices": self.vertex_count, "edges": self.edge_count},
            "prim": self.prim_result.to_dict(),
            "kruskal": self.kruskal_result.to_dict(),
            "cost_match": compare_results(self.prim_result, self.kruskal_result).cost_match,
        }


def _parse_weight(edge_data, position):
    weight = edge_data["weight"]
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise GraphFormatError(f"Edge {position}: weight must be a number, got {weight!r}")
    weight = float(weight)
    if not math.isfinite(weight) or weight < 0:
        raise GraphFormatError(f"Edge {position}: weight must be finite and non-negative, got {weight}")
    return weight


def parse_graph(graph_data):
    """Build a Graph from one entry of the "graphs" array"""
    if not isinstance(graph_data, dict):
        raise GraphFormatError(f"Graph entry must be an object, got {type(graph_data).__name__}")

    graph_id = graph_data.get("id", 0)

    nodes = graph_data.get("nodes", [])
    if not isinstance(nodes, list):
        raise GraphFormatError(f"Graph {graph_id}: 'nodes' must be a list")

    graph = Graph([str(node) for node in nodes])
    graph.graph_id = graph_id
    graph.name = graph_data.get("name", f"Graph {graph_id}")

    edges = graph_data.get("edges", [])
    if not isinstance(edges, list):
        raise GraphFormatError(f"Graph {graph_id}: 'edges' must be a list")

    for position, edge_data in enumerate(edges):
        if not isinstance(edge_data, dict):
            raise GraphFormatError(f"Graph {graph_id}, edge {position}: must be an object")
        missing = [key for key in ("from", "to", "weight") if key not in edge_data]
        if missing:
            raise GraphFormatError(
                f"Graph {graph_id}, edge {position}: missing {', '.join(missing)}"
            )
        weight = _parse_weight(edge_data, position)
        graph.add_edge(str(edge_data["from"]), str(edge_data["to"]), weight)

    return graph


def parse_graphs(data):
    if not isinstance(data, dict):
        raise GraphFormatError("Input root must be an object")

    graphs_data = data.get("graphs")
    if graphs_data is None:
        return []
    if not isinstance(graphs_data, list):
        raise GraphFormatError("'graphs' must be a list")

    return [parse_graph(graph_data) for graph_data in graphs_data]


def read_graphs(file_path):
    """Load every graph from an input JSON file"""
    with open(file_path, "r") as f:
        data = json.load(f)
    return parse_graphs(data)


def graph_to_dict(graph):
    """Inverse of parse_graph, used by the generators"""
    return {
        "id": graph.graph_id,
        "name": graph.name,
        "nodes": [graph.node_name(i) for i in range(graph.vertex_count)],
        "edges": [
            {
                "from": graph.node_name(edge.source),
                "to": graph.node_name(edge.destination),
                "weight": edge.weight,
            }
            for edge in graph.edges
        ],
    }


def write_graphs(file_path, graphs):
    _ensure_parent_dir(file_path)
    with open(file_path, "w") as f:
        json.dump({"graphs": [graph_to_dict(graph) for graph in graphs]}, f, indent=2)


def write_results(file_path, results):
    """Save a list of ResultPair objects"""
    _ensure_parent_dir(file_path)
    with open(file_path, "w") as f:
        json.dump({"results": [pair.to_dict() for pair in results]}, f, indent=2)


def _ensure_parent_dir(file_path):
    parent = os.path.dirname(file_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
