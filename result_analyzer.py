"""
Generate a CSV summary from an MST results JSON file for analysis
"""

import csv
import json

from mst_algorithms import COST_TOLERANCE

CSV_HEADER = [
    "Graph_ID",
    "Graph_Name",
    "Vertices",
    "Edges",
    "Density",
    "Prim_Cost",
    "Prim_Ops",
    "Prim_Time_ms",
    "Kruskal_Cost",
    "Kruskal_Ops",
    "Kruskal_Time_ms",
    "Cost_Match",
]


class ResultSummary:
    """One CSV row"""

    def __init__(self, graph_id, graph_name, vertices, edges):
        self.graph_id = graph_id
        self.graph_name = graph_name
        self.vertices = vertices
        self.edges = edges
        self.density = graph_density(vertices, edges)
        self.prim_cost = None
        self.prim_operations = None
        self.prim_time = None
        self.kruskal_cost = None
        self.kruskal_operations = None
        self.kruskal_time = None

    @property
    def cost_match(self):
        """True/False when both runs succeeded, None otherwise"""
        if self.prim_cost is None or self.kruskal_cost is None:
            return None
        return abs(self.prim_cost - self.kruskal_cost) < COST_TOLERANCE

    def to_row(self):
        def fmt(value, spec):
            return "" if value is None else format(value, spec)

        if self.cost_match is None:
            match = "N/A"
        else:
            match = "YES" if self.cost_match else "NO"

        return [
            self.graph_id,
            self.graph_name,
            self.vertices,
            self.edges,
            f"{self.density:.3f}",
            fmt(self.prim_cost, ".1f"),
            fmt(self.prim_operations, "d"),
            fmt(self.prim_time, ".3f"),
            fmt(self.kruskal_cost, ".1f"),
            fmt(self.kruskal_operations, "d"),
            fmt(self.kruskal_time, ".3f"),
            match,
        ]


def graph_density(vertices, edges):
    """2E / (V * (V - 1)); zero for graphs with fewer than two vertices"""
    if vertices > 1:
        return (2.0 * edges) / (vertices * (vertices - 1))
    return 0.0


def summarize_result(result):
    graph_id = result["graph_id"]
    stats = result["input_stats"]
    summary = ResultSummary(
        graph_id,
        result.get("graph_name") or f"Unknown_Graph_{graph_id}",
        stats["vertices"],
        stats["edges"],
    )

    prim = result["prim"]
    if prim.get("success", True):
        summary.prim_cost = float(prim["total_cost"])
        summary.prim_operations = int(prim["operations_count"])
        summary.prim_time = float(prim["execution_time_ms"])

    kruskal = result["kruskal"]
    if kruskal.get("success", True):
        summary.kruskal_cost = float(kruskal["total_cost"])
        summary.kruskal_operations = int(kruskal["operations_count"])
        summary.kruskal_time = float(kruskal["execution_time_ms"])

    return summary


def generate_csv_report(json_file, csv_file):
    """Write one CSV row per graph in json_file and return the summaries"""
    with open(json_file, "r") as f:
        data = json.load(f)

    summaries = [summarize_result(result) for result in data.get("results", [])]

    with open(csv_file, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for summary in summaries:
            writer.writerow(summary.to_row())

    return summaries


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Summarize MST results as CSV")
    parser.add_argument(
        "json_file",
        nargs="?",
        default="output.json",
        help="Results JSON written by mst_optimizer (default: output.json)",
    )
    parser.add_argument(
        "csv_file",
        nargs="?",
        default="analysis_results.csv",
        help="CSV file to write (default: analysis_results.csv)",
    )
    args = parser.parse_args()

    summaries = generate_csv_report(args.json_file, args.csv_file)
    print(f"CSV report generated: {args.csv_file} ({len(summaries)} graphs)")


if __name__ == "__main__":
    main()
