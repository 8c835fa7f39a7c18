"""
MST Transportation Network Optimizer
Runs Prim's and Kruskal's algorithms on every graph of an input file,
cross-validates their costs and saves the results
"""

import json
import os
import sys

from check_mst import verify_result
from mst_algorithms import KruskalEngine, PrimEngine, compare_results
from mst_graph import InvalidVertexError
from mst_io import GraphFormatError, ResultPair, read_graphs, write_results

DEFAULT_INPUT = "input.json"
DEFAULT_OUTPUT = "output.json"


def print_result(result):
    """Print one algorithm's outcome"""
    if not result.success:
        print(f"Failed: {result.message}")
        return

    print(f"Total Cost: {result.total_cost:g}")
    print(f"MST Edges: {len(result.edges)}")
    print(f"Operations: {result.operation_count}")
    print(f"Execution Time: {result.execution_time_ms:.3f} ms")
    print("Edges in MST:")
    for edge in result.edges:
        print(f"  {edge.describe()}")


def print_comparison(comparison):
    print("\n--- Comparison ---")
    print(f"Cost Match: {'YES' if comparison.cost_match else 'NO'}")
    print(f"Prim Time: {comparison.prim_time_ms:.3f} ms")
    print(f"Kruskal Time: {comparison.kruskal_time_ms:.3f} ms")
    print(f"Prim Operations: {comparison.prim_operations}")
    print(f"Kruskal Operations: {comparison.kruskal_operations}")


def process_graph(graph, verify=False, plot_dir=None):
    """Run both algorithms on one graph and report to the console"""
    print(f"Processing {graph.name} (ID: {graph.graph_id})")
    print(f"Vertices: {graph.vertex_count}, Edges: {graph.edge_count}")
    print(f"Nodes: {graph.node_names}")

    if not graph.is_connected():
        print("WARNING: Graph is not connected!")

    print("\nRunning Prim's Algorithm...")
    prim_result = PrimEngine().find_mst(graph)
    print_result(prim_result)

    print("\nRunning Kruskal's Algorithm...")
    kruskal_result = KruskalEngine().find_mst(graph)
    print_result(kruskal_result)

    if prim_result.success and kruskal_result.success:
        print_comparison(compare_results(prim_result, kruskal_result))

    if verify:
        print("\n--- NetworkX Check ---")
        reference = None
        for result in (prim_result, kruskal_result):
            report = verify_result(graph, result)
            status = "✓ CORRECT" if report["consistent"] else "✗ INCORRECT"
            print(f"{result.algorithm_name}: {status}")
            if report["reference_weight"] is not None:
                reference = report["reference_weight"]
        if reference is not None:
            print(f"NetworkX MST Weight: {reference:g}")

    if plot_dir:
        from mst_visualization import visualize_mst

        for tag, result in (("prim", prim_result), ("kruskal", kruskal_result)):
            path = os.path.join(plot_dir, f"mst_graph{graph.graph_id}_{tag}.png")
            visualize_mst(graph, result, path)
            print(f"Visualization saved to {path}")

    return ResultPair.from_graph(graph, prim_result, kruskal_result)


def print_summary(results):
    print("\n" + "=" * 70)
    print(" " * 29 + "SUMMARY")
    print("=" * 70)
    print(f"{'ID':<5} {'Graph':<26} {'V':<5} {'E':<6} {'Prim':<10} {'Kruskal':<10} {'Match':<6}")
    print("-" * 70)

    for pair in results:
        prim = f"{pair.prim_result.total_cost:g}" if pair.prim_result.success else "-"
        kruskal = f"{pair.kruskal_result.total_cost:g}" if pair.kruskal_result.success else "-"
        match = compare_results(pair.prim_result, pair.kruskal_result).cost_match
        status = "✓" if match else "✗"
        print(
            f"{pair.graph_id:<5} {str(pair.graph_name)[:25]:<26} {pair.vertex_count:<5} "
            f"{pair.edge_count:<6} {prim:<10} {kruskal:<10} {status:<6}"
        )


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        description="Find minimum spanning trees of transportation networks with Prim's and Kruskal's algorithms"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Input JSON with a 'graphs' array (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=DEFAULT_OUTPUT,
        help=f"Where to write the results JSON (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--csv", type=str, default=None, help="Also write a CSV summary to this file"
    )
    parser.add_argument(
        "--verify", action="store_true", help="Cross-check both algorithms against networkx"
    )
    parser.add_argument(
        "--plot-dir",
        type=str,
        default=None,
        help="Save a picture of every MST to this directory",
    )
    return parser


def main(argv=None):
    """Entry point; returns the process exit code"""
    args = build_parser().parse_args(argv)

    print("=" * 70)
    print(" " * 18 + "MST Transportation Network Optimizer")
    print("=" * 70)

    try:
        graphs = read_graphs(args.input)
    except (OSError, json.JSONDecodeError, GraphFormatError, InvalidVertexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Loaded {len(graphs)} graph(s) from {args.input}\n")

    results = []
    for graph in graphs:
        results.append(process_graph(graph, verify=args.verify, plot_dir=args.plot_dir))
        print("\n" + "=" * 70 + "\n")

    print_summary(results)

    write_results(args.output, results)
    print("\n" + "=" * 70)
    print(f"Results written to {args.output}")

    if args.csv:
        from result_analyzer import generate_csv_report

        generate_csv_report(args.output, args.csv)
        print(f"CSV report generated: {args.csv}")

    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
