"""
Create transportation network input files for the MST optimizer
Writes a single JSON file holding graphs of several sizes and shapes
"""

import os
import random

import networkx as nx

from check_mst import reference_mst
from mst_graph import Graph
from mst_io import write_graphs


def _node_names(num_nodes, prefix="N"):
    return [f"{prefix}{i}" for i in range(num_nodes)]


def _random_weight(rng):
    return round(1 + rng.random() * 99, 2)


def create_random_graph(num_nodes=10, target_edges=20, seed=42):
    """
    Create a random connected graph with about target_edges edges.

    A random spanning tree guarantees connectivity (vertex i attaches to a
    random earlier vertex), then distinct random edges are added until the
    target is met or the attempt budget runs out.
    """
    rng = random.Random(seed)
    graph = Graph(_node_names(num_nodes))
    existing = set()

    for i in range(1, num_nodes):
        parent = rng.randrange(i)
        graph.add_edge(parent, i, _random_weight(rng))
        existing.add((parent, i))

    max_edges = num_nodes * (num_nodes - 1) // 2
    edges_to_add = min(target_edges, max_edges) - len(existing)
    attempts = 0

    while len(existing) < min(target_edges, max_edges) and attempts < edges_to_add * 3:
        attempts += 1
        u = rng.randrange(num_nodes)
        v = rng.randrange(num_nodes)
        if u == v:
            continue
        key = (min(u, v), max(u, v))
        if key in existing:
            continue
        graph.add_edge(u, v, _random_weight(rng))
        existing.add(key)

    return graph


def create_erdos_renyi_graph(num_nodes=6, edge_probability=0.5, seed=42):
    """Create a connected Erdos-Renyi graph with integer weights 1-10"""
    rng = random.Random(seed)

    G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    # Ensure the graph is connected
    attempts = 0
    while num_nodes > 0 and not nx.is_connected(G) and attempts < 100:
        G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=rng.randint(0, 10000))
        attempts += 1

    if num_nodes > 0 and not nx.is_connected(G):
        # Force connectivity by chaining the components
        components = [sorted(c) for c in nx.connected_components(G)]
        for first, second in zip(components, components[1:]):
            G.add_edge(first[0], second[0])

    graph = Graph(_node_names(num_nodes))
    for u, v in sorted(G.edges()):
        graph.add_edge(u, v, rng.randint(1, 10))
    return graph


def _named_graph(graph_id, name, nodes, edges):
    graph = Graph(nodes)
    graph.graph_id = graph_id
    graph.name = name
    for src, dst, weight in edges:
        graph.add_edge(src, dst, weight)
    return graph


def _tag(graph, graph_id, name):
    graph.graph_id = graph_id
    graph.name = name
    return graph


def build_dataset(seed=42):
    """The standard ten-graph benchmark set, from trivial to large and dense"""
    districts = ["Central", "Harbor", "Airport", "University", "Market", "Riverside", "Oldtown", "Stadium"]
    return [
        _named_graph(1, "Small_Simple_Path", ["A", "B", "C", "D"],
                     [("A", "B", 4), ("B", "C", 3), ("C", "D", 5)]),
        _named_graph(2, "Small_Pentagon", ["A", "B", "C", "D", "E"],
                     [("A", "B", 2), ("B", "C", 3), ("C", "D", 4), ("D", "E", 5), ("E", "A", 6)]),
        _named_graph(3, "Small_Complete_K4", ["A", "B", "C", "D"],
                     [("A", "B", 1), ("A", "C", 2), ("A", "D", 3),
                      ("B", "C", 4), ("B", "D", 5), ("C", "D", 6)]),
        _named_graph(4, "Medium_City_Districts", districts,
                     [("Central", "Harbor", 7), ("Central", "Market", 3), ("Central", "Oldtown", 4),
                      ("Harbor", "Riverside", 6), ("Harbor", "Airport", 15), ("Airport", "Stadium", 9),
                      ("University", "Market", 5), ("University", "Stadium", 8), ("Market", "Riverside", 4),
                      ("Riverside", "Oldtown", 2), ("Oldtown", "University", 6), ("Stadium", "Market", 11)]),
        _tag(create_erdos_renyi_graph(10, 0.6, seed), 5, "Medium_Dense_Network"),
        _tag(create_random_graph(30, 90, seed), 6, "Large_Metropolitan"),
        _tag(create_random_graph(25, 30, seed + 1), 7, "Large_Sparse_Network"),
        _tag(create_random_graph(25, 200, seed + 2), 8, "Large_Dense_Network"),
        _named_graph(9, "Edge_Case_Single_Vertex", ["A"], []),
        _named_graph(10, "Edge_Case_Two_Vertices", ["A", "B"], [("A", "B", 10)]),
    ]


def print_graph_summary(graph):
    """Print summary of the graph"""
    print("\n" + "=" * 70)
    print(f"Graph Summary: {graph.name} (ID: {graph.graph_id})")
    print("=" * 70)
    print(f"Number of nodes: {graph.vertex_count}")
    print(f"Number of edges: {graph.edge_count}")
    print(f"Is connected: {graph.is_connected()}")

    if graph.edge_count <= 15:
        print("\nEdge list (with weights):")
        for edge in graph.edges:
            print(f"  {edge.describe()}")

    # Expected MST weight using NetworkX
    if graph.is_connected():
        _, mst_weight = reference_mst(graph)
        print(f"\nExpected MST weight (NetworkX): {mst_weight:g}")
    print("=" * 70)


def main():
    """Main function to create the input file"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate transportation network input for the MST optimizer"
    )
    parser.add_argument(
        "--output", type=str, default="input.json", help="Output file (default: input.json)"
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--nodes",
        type=int,
        default=None,
        help="Generate a single random graph with this many nodes instead of the standard set",
    )
    parser.add_argument(
        "--edges", type=int, default=None, help="Target edge count for --nodes (default: 3 x nodes)"
    )
    parser.add_argument(
        "--plot-dir",
        type=str,
        default=None,
        help="Also save a picture of every generated graph to this directory",
    )

    args = parser.parse_args()

    print("=" * 70)
    print("Transportation Network Generator")
    print("=" * 70)

    if args.nodes is not None:
        target_edges = args.edges if args.edges is not None else args.nodes * 3
        print(f"\nGenerating random graph...")
        print(f"  Nodes: {args.nodes}")
        print(f"  Target edges: {target_edges}")
        print(f"  Random seed: {args.seed}")
        graphs = [_tag(create_random_graph(args.nodes, target_edges, args.seed), 1, f"Random_{args.nodes}")]
    else:
        graphs = build_dataset(args.seed)

    for graph in graphs:
        print_graph_summary(graph)

    write_graphs(args.output, graphs)

    if args.plot_dir:
        from mst_visualization import visualize_graph

        for graph in graphs:
            path = os.path.join(args.plot_dir, f"input_graph_{graph.graph_id}.png")
            visualize_graph(graph, path)
            print(f"  Visualization saved to {path}")

    print("\n" + "=" * 70)
    print(f"Wrote {len(graphs)} graph(s) to {args.output}")
    print("=" * 70)
    print(f"\nTo compute MSTs:")
    print(f"  python mst_optimizer.py {args.output} output.json --verify")
    print("=" * 70)


if __name__ == "__main__":
    main()
