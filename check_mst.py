"""
Check MST results against networkx's minimum spanning tree
"""

import networkx as nx

from mst_algorithms import COST_TOLERANCE
from mst_graph import DisjointSet


def reference_mst(graph):
    """Return (edges, total weight) of networkx's MST for the graph"""
    G = graph.to_networkx()
    mst = nx.minimum_spanning_tree(G, weight="weight")
    edges = sorted((min(u, v), max(u, v), d["weight"]) for u, v, d in mst.edges(data=True))
    return edges, sum(w for _, _, w in edges)


def spans_all_vertices(edges, vertex_count):
    """Union the edges and check that every vertex shares one representative"""
    uf = DisjointSet(vertex_count)
    for edge in edges:
        uf.union(edge.source, edge.destination)
    return all(uf.find(v) == uf.find(0) for v in range(vertex_count))


def is_acyclic(edges, vertex_count):
    uf = DisjointSet(vertex_count)
    for edge in edges:
        if uf.find(edge.source) == uf.find(edge.destination):
            return False
        uf.union(edge.source, edge.destination)
    return True


def verify_result(graph, result, tolerance=COST_TOLERANCE):
    """
    Compare an MST result with networkx.

    A failed result is consistent when the graph really is disconnected.
    """
    G = graph.to_networkx()
    report = {
        "algorithm": result.algorithm_name,
        "graph_connected": nx.is_connected(G) if graph.vertex_count > 0 else True,
    }

    if not result.success:
        report["reference_weight"] = None
        report["consistent"] = not report["graph_connected"]
        return report

    _, reference_weight = reference_mst(graph)
    expected_edges = max(graph.vertex_count - 1, 0)

    report["reference_weight"] = reference_weight
    report["cost_match"] = abs(result.total_cost - reference_weight) < tolerance
    report["edge_count_match"] = len(result.edges) == expected_edges
    report["acyclic"] = is_acyclic(result.edges, graph.vertex_count)
    report["spanning"] = spans_all_vertices(result.edges, graph.vertex_count)
    report["consistent"] = (
        report["cost_match"]
        and report["edge_count_match"]
        and report["acyclic"]
        and report["spanning"]
    )
    return report


def main():
    import argparse

    from mst_algorithms import KruskalEngine, PrimEngine
    from mst_io import read_graphs

    parser = argparse.ArgumentParser(description="Cross-check Prim and Kruskal against networkx")
    parser.add_argument("input", nargs="?", default="input.json", help="Input JSON (default: input.json)")
    args = parser.parse_args()

    all_consistent = True
    for graph in read_graphs(args.input):
        print(f"\n{graph.name} (ID: {graph.graph_id})")
        if graph.vertex_count > 0 and not graph.is_connected():
            print("  Graph is not connected - no reference MST")

        for engine in (PrimEngine(), KruskalEngine()):
            result = engine.find_mst(graph)
            report = verify_result(graph, result)
            status = "✓ CONSISTENT" if report["consistent"] else "✗ MISMATCH"
            if result.success:
                print(
                    f"  {result.algorithm_name:<20} cost={result.total_cost:<10.2f} "
                    f"networkx={report['reference_weight']:<10.2f} {status}"
                )
            else:
                print(f"  {result.algorithm_name:<20} {result.message} {status}")
            all_consistent = all_consistent and report["consistent"]

    return 0 if all_consistent else 1


if __name__ == "__main__":
    raise SystemExit(main())
