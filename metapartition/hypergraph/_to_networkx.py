#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Convertor to NetworkX's Graph objects"""
import networkx as nx


def _to_networkx(hg):
    """Convert to the bipartite star expansion as a NetworkX ``Graph``.

    Vertex ``i`` becomes node ``('v', i)`` with ``bipartite=0`` and hyperedge
    ``j`` becomes node ``('e', j)`` with ``bipartite=1``. Both carry their
    ``weight``, vertices additionally their ``part``.

    Parameters
    ----------
    hg: metapartition.HyperGraph
        The hypergraph to be converted

    Returns
    -------
    networkx.Graph
        the converted graph
    """

    nxgraph = nx.Graph()

    nxgraph.add_nodes_from(
        (('v', i), dict(bipartite=0, weight=w, part=p))
        for i, (w, p) in enumerate(zip(hg.vertex_weight.tolist(),
                                       hg.assignment.tolist()))
    )
    nxgraph.add_nodes_from(
        (('e', j), dict(bipartite=1, weight=w))
        for j, w in enumerate(hg.edge_weight.tolist())
    )

    offsets = hg.edge_offsets.tolist()
    members = hg.edge_members.tolist()
    for j in range(hg.num_edges):
        nxgraph.add_edges_from(
            (('v', v), ('e', j)) for v in members[offsets[j]:offsets[j + 1]]
        )

    return nxgraph
