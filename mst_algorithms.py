"""
Prim's and Kruskal's MST algorithms with operation counting and timing
Both engines return an MSTResult: MSTSuccess or MSTFailure
"""

import heapq
import math
import time
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from mst_graph import DisjointSet, Edge

DISCONNECTED_MESSAGE = "Graph is not connected - MST cannot be formed"
COST_TOLERANCE = 1e-3


@dataclass(frozen=True)
class MSTSuccess:
    """Spanning tree found by one algorithm run"""

    algorithm_name: str
    edges: Tuple[Edge, ...]
    total_cost: float
    vertex_count: int
    edge_count: int
    operation_count: int
    execution_time_ms: float

    success = True

    def to_dict(self):
        return {
            "success": True,
            "mst_edges": [
                {
                    "from": edge.source_name if edge.source_name is not None else edge.source,
                    "to": edge.destination_name if edge.destination_name is not None else edge.destination,
                    "weight": edge.weight,
                }
                for edge in self.edges
            ],
            "total_cost": self.total_cost,
            "operations_count": self.operation_count,
            "execution_time_ms": round(self.execution_time_ms, 3),
        }

    def __str__(self):
        lines = [
            f"=== {self.algorithm_name} Results ===",
            f"Total Cost: {self.total_cost:.2f}",
            f"Vertices: {self.vertex_count}, MST Edges: {len(self.edges)}",
            f"Operations: {self.operation_count}",
            f"Execution Time: {self.execution_time_ms:.3f} ms",
            "MST Edges:",
        ]
        lines.extend(f"  {edge}" for edge in self.edges)
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class MSTFailure:
    """Algorithm run that could not produce a spanning tree"""

    algorithm_name: str
    message: str
    vertex_count: int
    edge_count: int
    execution_time_ms: float

    success = False

    def to_dict(self):
        return {"success": False, "message": self.message}

    def __str__(self):
        return f"{self.algorithm_name}: {self.message}"


MSTResult = Union[MSTSuccess, MSTFailure]


def _elapsed_ms(start_time):
    return (time.perf_counter() - start_time) * 1000.0


class PrimEngine:
    """Grow the tree from vertex 0 through a min-heap of frontier edges"""

    name = "Prim's Algorithm"

    def find_mst(self, graph):
        start_time = time.perf_counter()
        vertices = graph.vertex_count

        if not graph.is_connected():
            return MSTFailure(
                algorithm_name=self.name,
                message=DISCONNECTED_MESSAGE,
                vertex_count=vertices,
                edge_count=graph.edge_count,
                execution_time_ms=_elapsed_ms(start_time),
            )

        mst_edges = []
        total_cost = 0.0
        operation_count = 0

        if vertices > 0:
            in_mst = [False] * vertices
            # (weight, push order, edge); push order keeps equal weights FIFO
            frontier = []
            sequence = 0

            in_mst[0] = True
            operation_count += 1  # initial vertex

            for edge in graph.adjacency(0):
                heapq.heappush(frontier, (edge.weight, sequence, edge))
                sequence += 1
                operation_count += 1  # push

            while frontier and len(mst_edges) < vertices - 1:
                _, _, edge = heapq.heappop(frontier)
                operation_count += 1  # pop

                vertex = edge.destination
                if in_mst[vertex]:
                    operation_count += 1  # discard
                    continue

                mst_edges.append(edge)
                total_cost += edge.weight
                in_mst[vertex] = True
                operation_count += 1  # accept

                for next_edge in graph.adjacency(vertex):
                    if not in_mst[next_edge.destination]:
                        heapq.heappush(frontier, (next_edge.weight, sequence, next_edge))
                        sequence += 1
                        operation_count += 1  # push
                    operation_count += 1  # comparison

            if len(mst_edges) < vertices - 1:
                raise RuntimeError(
                    f"Prim frontier exhausted after {len(mst_edges)} of "
                    f"{vertices - 1} edges on a connected graph"
                )

        return MSTSuccess(
            algorithm_name=self.name,
            edges=tuple(mst_edges),
            total_cost=total_cost,
            vertex_count=vertices,
            edge_count=graph.edge_count,
            operation_count=operation_count,
            execution_time_ms=_elapsed_ms(start_time),
        )


class KruskalEngine:
    """Scan edges by ascending weight, keeping those that join two components"""

    name = "Kruskal's Algorithm"

    def find_mst(self, graph):
        start_time = time.perf_counter()
        vertices = graph.vertex_count

        if not graph.is_connected():
            return MSTFailure(
                algorithm_name=self.name,
                message=DISCONNECTED_MESSAGE,
                vertex_count=vertices,
                edge_count=graph.edge_count,
                execution_time_ms=_elapsed_ms(start_time),
            )

        operation_count = 0

        # sorted() is stable: equal weights keep input order
        sorted_edges = sorted(graph.edges, key=lambda edge: edge.weight)
        if sorted_edges:
            operation_count += int(len(sorted_edges) * math.log(len(sorted_edges)))

        uf = DisjointSet(vertices)
        mst_edges = []
        total_cost = 0.0

        for edge in sorted_edges:
            if len(mst_edges) == vertices - 1:
                break
            operation_count += 1  # examine

            root_src = uf.find(edge.source)
            root_dst = uf.find(edge.destination)
            operation_count += 2  # two finds

            if root_src != root_dst:
                operation_count += 1  # comparison
                mst_edges.append(edge)
                total_cost += edge.weight
                uf.union(edge.source, edge.destination)
                operation_count += 1  # union

        return MSTSuccess(
            algorithm_name=self.name,
            edges=tuple(mst_edges),
            total_cost=total_cost,
            vertex_count=vertices,
            edge_count=graph.edge_count,
            operation_count=operation_count,
            execution_time_ms=_elapsed_ms(start_time),
        )


@dataclass(frozen=True)
class CostComparison:
    """Side-by-side summary of a Prim run and a Kruskal run on one graph"""

    cost_match: bool
    prim_cost: Optional[float]
    kruskal_cost: Optional[float]
    cost_difference: Optional[float]
    prim_time_ms: float
    kruskal_time_ms: float
    prim_operations: Optional[int]
    kruskal_operations: Optional[int]


def compare_results(prim_result, kruskal_result, tolerance=COST_TOLERANCE):
    """Check that two MST runs agree on total cost"""
    if not (prim_result.success and kruskal_result.success):
        return CostComparison(
            cost_match=False,
            prim_cost=None,
            kruskal_cost=None,
            cost_difference=None,
            prim_time_ms=prim_result.execution_time_ms,
            kruskal_time_ms=kruskal_result.execution_time_ms,
            prim_operations=None,
            kruskal_operations=None,
        )

    difference = abs(prim_result.total_cost - kruskal_result.total_cost)
    return CostComparison(
        cost_match=difference < tolerance,
        prim_cost=prim_result.total_cost,
        kruskal_cost=kruskal_result.total_cost,
        cost_difference=difference,
        prim_time_ms=prim_result.execution_time_ms,
        kruskal_time_ms=kruskal_result.execution_time_ms,
        prim_operations=prim_result.operation_count,
        kruskal_operations=kruskal_result.operation_count,
    )
