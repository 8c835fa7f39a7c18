"""
Correctness tests for Prim's and Kruskal's algorithms.
"""

import itertools
import time

import pytest

from conftest import build_graph, connects_all_vertices, has_cycle
from mst_algorithms import (
    DISCONNECTED_MESSAGE,
    CostComparison,
    KruskalEngine,
    MSTFailure,
    MSTSuccess,
    PrimEngine,
    compare_results,
)
from mst_graph import Edge, Graph

ENGINES = [PrimEngine, KruskalEngine]


@pytest.fixture(params=ENGINES, ids=["prim", "kruskal"])
def engine(request):
    return request.param()


def run_both(graph):
    return PrimEngine().find_mst(graph), KruskalEngine().find_mst(graph)


class TestConnectedGraphs:
    def test_small_connected_graph(self, diamond_graph):
        prim, kruskal = run_both(diamond_graph)

        assert prim.success
        assert kruskal.success
        assert prim.total_cost == pytest.approx(kruskal.total_cost, abs=1e-3)
        assert prim.total_cost == pytest.approx(6.0)
        assert len(prim.edges) == 3
        assert len(kruskal.edges) == 3

    def test_expected_edges_selected(self, diamond_graph, engine):
        result = engine.find_mst(diamond_graph)
        assert set(result.edges) == {Edge(0, 1, 1), Edge(1, 2, 2), Edge(2, 3, 3)}

    def test_edge_count_is_v_minus_one(self):
        graph = build_graph(
            ["A", "B", "C", "D", "E"],
            [("A", "B", 4), ("A", "C", 3), ("B", "C", 2), ("B", "D", 5),
             ("C", "D", 7), ("C", "E", 8), ("D", "E", 6)],
        )
        prim, kruskal = run_both(graph)

        assert len(prim.edges) == 4
        assert len(kruskal.edges) == 4
        assert prim.total_cost == pytest.approx(16.0)
        assert kruskal.total_cost == pytest.approx(16.0)

    def test_mst_is_acyclic(self, engine):
        graph = build_graph(
            ["A", "B", "C", "D"],
            [("A", "B", 1), ("B", "C", 2), ("C", "D", 3), ("D", "A", 4)],
        )
        assert graph.has_cycle()

        result = engine.find_mst(graph)
        assert not has_cycle(result.edges, graph.vertex_count)

    def test_mst_connects_all_vertices(self, engine):
        graph = build_graph(
            ["A", "B", "C", "D", "E"],
            [("A", "B", 1), ("B", "C", 2), ("C", "D", 3), ("D", "E", 4)],
        )
        result = engine.find_mst(graph)
        assert connects_all_vertices(result.edges, graph.vertex_count)

    def test_duplicate_weights(self, equal_weight_cycle):
        prim, kruskal = run_both(equal_weight_cycle)

        assert prim.total_cost == pytest.approx(kruskal.total_cost, abs=1e-3)
        assert prim.total_cost == pytest.approx(15.0)
        assert len(prim.edges) == 3
        assert len(kruskal.edges) == 3

    def test_complete_graph(self):
        graph = build_graph(
            ["A", "B", "C", "D"],
            [("A", "B", 1), ("A", "C", 2), ("A", "D", 3), ("B", "C", 4), ("B", "D", 5), ("C", "D", 6)],
        )
        prim, kruskal = run_both(graph)

        assert prim.total_cost == pytest.approx(kruskal.total_cost, abs=1e-3)
        assert len(prim.edges) == 3
        assert prim.total_cost == pytest.approx(6.0)

    def test_parallel_edges_use_the_lightest(self, engine):
        graph = build_graph(["A", "B", "C"], [("A", "B", 9), ("B", "A", 1), ("B", "C", 2), ("A", "B", 1)])
        result = engine.find_mst(graph)
        assert result.total_cost == pytest.approx(3.0)
        assert len(result.edges) == 2

    def test_self_loops_are_never_selected(self, engine):
        graph = build_graph(["A", "B"], [("A", "A", 0), ("A", "B", 3), ("B", "B", 0)])
        result = engine.find_mst(graph)
        assert result.edges == (Edge(0, 1, 3),)

    def test_zero_weight_edges(self, engine):
        graph = build_graph(["A", "B", "C"], [("A", "B", 0), ("B", "C", 0), ("A", "C", 1)])
        result = engine.find_mst(graph)
        assert result.total_cost == 0.0
        assert len(result.edges) == 2

    def test_unnamed_graph(self, engine):
        graph = Graph(3)
        graph.add_edge(0, 1, 2.5)
        graph.add_edge(1, 2, 1.5)
        graph.add_edge(0, 2, 4.0)

        result = engine.find_mst(graph)
        assert result.total_cost == pytest.approx(4.0)
        assert all(edge.source_name is None for edge in result.edges)

    def test_graph_is_not_modified(self, diamond_graph, engine):
        before = diamond_graph.edges
        engine.find_mst(diamond_graph)
        assert diamond_graph.edges == before
        assert diamond_graph.edge_count == 5


class TestPrimDetails:
    def test_edges_oriented_away_from_tree(self, diamond_graph):
        result = PrimEngine().find_mst(diamond_graph)
        pairs = [(edge.source, edge.destination) for edge in result.edges]
        assert pairs == [(0, 1), (1, 2), (2, 3)]

    def test_operation_count(self, diamond_graph):
        # 1 start + 2 seed pushes, then pops, accepts, pushes and comparisons
        result = PrimEngine().find_mst(diamond_graph)
        assert result.operation_count == 20

    def test_starts_from_vertex_zero(self):
        graph = build_graph(["A", "B", "C"], [("B", "C", 1), ("A", "B", 2)])
        result = PrimEngine().find_mst(graph)
        assert result.edges[0] == Edge(0, 1, 2)


class TestKruskalDetails:
    def test_edges_in_weight_order(self, diamond_graph):
        result = KruskalEngine().find_mst(diamond_graph)
        assert [edge.weight for edge in result.edges] == [1, 2, 3]

    def test_operation_count(self, diamond_graph):
        # int(5 * ln 5) = 8 for the sort, then 5 per accepted edge
        result = KruskalEngine().find_mst(diamond_graph)
        assert result.operation_count == 23

    def test_equal_weights_keep_input_order(self, equal_weight_cycle):
        result = KruskalEngine().find_mst(equal_weight_cycle)
        assert [(e.source_name, e.destination_name) for e in result.edges] == [
            ("A", "B"),
            ("B", "C"),
            ("C", "D"),
        ]


class TestFailures:
    def test_disconnected_graph(self, disconnected_graph):
        prim, kruskal = run_both(disconnected_graph)

        assert not prim.success
        assert not kruskal.success
        assert prim.message
        assert kruskal.message

    def test_disconnected_message_is_shared(self, disconnected_graph):
        prim, kruskal = run_both(disconnected_graph)
        assert prim.message == kruskal.message == DISCONNECTED_MESSAGE

    def test_failure_carries_no_tree(self, disconnected_graph, engine):
        result = engine.find_mst(disconnected_graph)

        assert isinstance(result, MSTFailure)
        assert not hasattr(result, "edges")
        assert not hasattr(result, "total_cost")

    def test_failure_keeps_input_stats(self, disconnected_graph, engine):
        result = engine.find_mst(disconnected_graph)
        assert result.vertex_count == 4
        assert result.edge_count == 2
        assert result.execution_time_ms >= 0


class TestTrivialGraphs:
    def test_single_vertex(self, engine):
        result = engine.find_mst(Graph(["A"]))

        assert result.success
        assert result.edges == ()
        assert result.total_cost == 0.0

    def test_empty_graph(self, engine):
        result = engine.find_mst(Graph(0))
        assert result.success
        assert result.edges == ()

    def test_two_vertices(self, engine):
        result = engine.find_mst(build_graph(["A", "B"], [("A", "B", 10)]))
        assert result.total_cost == 10
        assert len(result.edges) == 1


class TestReproducibility:
    def test_repeated_runs_match(self, diamond_graph, engine):
        first = engine.find_mst(diamond_graph)
        second = engine.find_mst(diamond_graph)

        assert first.total_cost == second.total_cost
        assert first.operation_count == second.operation_count
        assert first.edges == second.edges

    def test_operation_counts_positive(self, diamond_graph, engine):
        result = engine.find_mst(diamond_graph)
        assert result.operation_count > 0
        assert result.execution_time_ms >= 0

    def test_wall_clock_jump_does_not_affect_timing(self, diamond_graph, engine, monkeypatch):
        wall_clock = itertools.count(1_000_000.0, -60.0)
        monkeypatch.setattr(time, "time", lambda: next(wall_clock))

        result = engine.find_mst(diamond_graph)
        assert result.execution_time_ms >= 0

    @pytest.mark.parametrize("graph_fixture", ["diamond_graph", "disconnected_graph"])
    def test_elapsed_time_from_monotonic_clock(self, graph_fixture, engine, monkeypatch, request):
        graph = request.getfixturevalue(graph_fixture)
        ticks = itertools.count(10.0, 0.25)
        monkeypatch.setattr(time, "perf_counter", lambda: next(ticks))

        result = engine.find_mst(graph)
        assert result.execution_time_ms == pytest.approx(250.0)


class TestResultRecords:
    def test_success_is_immutable(self, diamond_graph):
        result = KruskalEngine().find_mst(diamond_graph)
        assert isinstance(result, MSTSuccess)
        with pytest.raises(AttributeError):
            result.total_cost = 0

    def test_success_to_dict(self, diamond_graph):
        data = KruskalEngine().find_mst(diamond_graph).to_dict()

        assert data["success"] is True
        assert data["total_cost"] == 6.0
        assert data["mst_edges"][0] == {"from": "A", "to": "B", "weight": 1}
        assert data["operations_count"] == 23
        assert "execution_time_ms" in data

    def test_unnamed_edges_serialize_as_indices(self):
        graph = Graph(2)
        graph.add_edge(0, 1, 1.0)
        data = PrimEngine().find_mst(graph).to_dict()
        assert data["mst_edges"] == [{"from": 0, "to": 1, "weight": 1.0}]

    def test_failure_to_dict(self, disconnected_graph):
        data = PrimEngine().find_mst(disconnected_graph).to_dict()
        assert data == {"success": False, "message": DISCONNECTED_MESSAGE}

    def test_string_rendering(self, diamond_graph, disconnected_graph):
        text = str(PrimEngine().find_mst(diamond_graph))
        assert "=== Prim's Algorithm Results ===" in text
        assert "Total Cost: 6.00" in text
        assert "(A-B, 1.00)" in text

        failed = str(KruskalEngine().find_mst(disconnected_graph))
        assert failed == f"Kruskal's Algorithm: {DISCONNECTED_MESSAGE}"


class TestCompareResults:
    def test_matching_costs(self, diamond_graph):
        comparison = compare_results(*run_both(diamond_graph))

        assert isinstance(comparison, CostComparison)
        assert comparison.cost_match
        assert comparison.cost_difference == pytest.approx(0.0)
        assert comparison.prim_operations == 20
        assert comparison.kruskal_operations == 23

    def test_mismatched_costs(self, diamond_graph):
        prim, kruskal = run_both(diamond_graph)
        skewed = MSTSuccess(
            algorithm_name=kruskal.algorithm_name,
            edges=kruskal.edges,
            total_cost=kruskal.total_cost + 1,
            vertex_count=kruskal.vertex_count,
            edge_count=kruskal.edge_count,
            operation_count=kruskal.operation_count,
            execution_time_ms=kruskal.execution_time_ms,
        )
        assert not compare_results(prim, skewed).cost_match

    def test_failed_run_never_matches(self, disconnected_graph):
        comparison = compare_results(*run_both(disconnected_graph))
        assert not comparison.cost_match
        assert comparison.prim_cost is None
        assert comparison.cost_difference is None
