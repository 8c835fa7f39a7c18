"""
Plot transportation graphs and their MSTs with networkx + matplotlib
"""

import os

import matplotlib.pyplot as plt
import networkx as nx


def _ensure_parent_dir(save_path):
    parent = os.path.dirname(save_path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _labels(G):
    return {node: data["name"] for node, data in G.nodes(data=True)}


def _weight_labels(G):
    return {(u, v): f"{w:g}" for (u, v), w in nx.get_edge_attributes(G, "weight").items()}


def visualize_graph(graph, save_path, title=None):
    """Draw the input graph and save it to save_path"""
    G = graph.to_networkx()
    plt.figure(figsize=(10, 8))
    pos = nx.spring_layout(G, seed=42)

    nx.draw(
        G,
        pos,
        labels=_labels(G),
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="gray",
        width=2,
    )

    nx.draw_networkx_edge_labels(G, pos, _weight_labels(G), font_size=10)

    plt.title(title or f"Input Graph: {graph.name or 'Unnamed'}", fontsize=14, fontweight="bold")

    _ensure_parent_dir(save_path)
    plt.savefig(save_path, dpi=300, bbox_inches="tight")
    plt.close()
    return save_path


def visualize_mst(graph, result, save_path):
    """Draw the original graph next to the MST found by one algorithm"""
    G = graph.to_networkx()
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))
    pos = nx.spring_layout(G, seed=42)
    labels = _labels(G)

    # Original graph
    ax1.set_title("Original Graph", fontsize=14, fontweight="bold")
    nx.draw(
        G,
        pos,
        ax=ax1,
        labels=labels,
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
    )
    nx.draw_networkx_edge_labels(G, pos, _weight_labels(G), ax=ax1)

    # MST
    mst_graph = nx.Graph()
    mst_graph.add_nodes_from(G.nodes(data=True))
    if result.success:
        for edge in result.edges:
            mst_graph.add_edge(edge.source, edge.destination, weight=edge.weight)
        ax2.set_title(
            f"MST ({result.algorithm_name}) - cost {result.total_cost:.2f}",
            fontsize=14,
            fontweight="bold",
        )
    else:
        ax2.set_title(f"{result.algorithm_name}: no MST", fontsize=14, fontweight="bold")

    nx.draw(
        mst_graph,
        pos,
        ax=ax2,
        labels=labels,
        with_labels=True,
        node_color="lightgreen",
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="red",
        width=3,
    )

    if mst_graph.number_of_edges():
        nx.draw_networkx_edge_labels(
            mst_graph, pos, _weight_labels(mst_graph), ax=ax2
        )

    plt.tight_layout()
    _ensure_parent_dir(save_path)
    plt.savefig(save_path, dpi=300, bbox_inches="tight")
    plt.close(fig)
    return mst_graph
