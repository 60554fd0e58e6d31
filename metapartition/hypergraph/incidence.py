#!/usr/bin/env python
# -*- coding: utf-8 -*-


def build_incidence(hg):
    '''Compute, for every vertex, the hyperedges that contain it. The result
    is not cached on the hypergraph.

    Parameters
    ----------
    hg: metapartition.HyperGraph
        The hypergraph to be indexed.

    Returns
    -------
    incidence: list of lists
        ``incidence[v]`` lists the hyperedges containing ``v`` in ascending
        order. A vertex listed twice in a hyperedge appears twice.
    '''
    incidence = [[] for _ in range(hg.num_vertices)]
    offsets = hg.edge_offsets.tolist()
    members = hg.edge_members.tolist()
    for e in range(hg.num_edges):
        for v in members[offsets[e]:offsets[e + 1]]:
            incidence[v].append(e)
    return incidence
