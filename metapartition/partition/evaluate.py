#!/usr/bin/env python
# -*- coding: utf-8 -*-
import numpy as np
from metapartition.errors import PreconditionViolation


def evaluate(hg, assignment, k):
    '''Score a partition of a hypergraph.

    Parameters
    ----------
    hg: metapartition.HyperGraph
        The partitioned hypergraph.
    assignment: sequence of int
        Bin of each vertex in ``[0, k)``, or -1 for an unassigned vertex.
        Unassigned vertices count towards no bin and connect no bins.
    k: int
        Number of bins.

    Returns
    -------
    bins: numpy.ndarray
        Total vertex weight in each bin.
    cut: int
        Total weight of the hyperedges whose members span more than one
        bin.
    '''
    assignment = np.asarray(assignment, dtype=np.int64)
    if assignment.shape != (hg.num_vertices,):
        raise PreconditionViolation(
            f'Assignment of length {len(assignment)} given for '
            f'{hg.num_vertices} vertices.'
        )
    if len(assignment) and (assignment.min() < -1 or assignment.max() >= k):
        raise PreconditionViolation(
            f'Assignment values must lie in [-1, {k}).'
        )

    assigned = assignment >= 0
    bins = np.zeros(k, dtype=np.int64)
    np.add.at(bins, assignment[assigned],
              hg.vertex_weight[assigned].astype(np.int64))

    part = assignment.tolist()
    offsets = hg.edge_offsets.tolist()
    members = hg.edge_members.tolist()
    edge_weight = hg.edge_weight.tolist()
    cut = 0
    for e in range(hg.num_edges):
        connected = {part[v] for v in members[offsets[e]:offsets[e + 1]]}
        connected.discard(-1)
        if len(connected) > 1:
            cut += edge_weight[e]

    return bins, cut
