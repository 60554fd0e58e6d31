#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Adaptor for NetworkX's Graph objects"""
import networkx as nx


def _from_networkx(cls, graph, weight='weight'):
    """Convert from NetworkX ``Graph``

    Parameters
    ----------
    graph: a NetworkX ``Graph`` instance
        an undirected graph. Every edge becomes a hyperedge with two members;
        self-loops become single-member hyperedges.
    weight: str
        name of the node and edge attribute that encode weights, absent
        attributes count as 1

    Returns
    -------
    metapartition.HyperGraph
        the converted hypergraph
    """

    nodes = list(graph.nodes)

    if not all(isinstance(x, int) for x in nodes) \
            or (nodes and (max(nodes) + 1 != len(nodes) or min(nodes) < 0)):
        graph = nx.relabel.convert_node_labels_to_integers(graph)

    vertex_weight = [0] * graph.number_of_nodes()
    for i, node in graph.nodes.items():
        vertex_weight[i] = node.get(weight, 1)

    edges = []
    edge_weight = []
    for (i, j), edge in graph.edges.items():
        edges.append([i] if i == j else [i, j])
        edge_weight.append(edge.get(weight, 1))

    return cls.from_edges(edges, vertex_weight=vertex_weight,
                          edge_weight=edge_weight)
