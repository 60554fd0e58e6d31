#!/usr/bin/env python
# -*- coding: utf-8 -*-
import numpy as np
from metapartition.errors import PreconditionViolation
from .evaluate import evaluate


def partition_dumb(hg, k=2):
    '''The dumb partitioner. Free vertices are visited by descending weight
    and each one goes into the lighter of the two bins, with ties going to
    bin 0. Fixed vertices stay where they are and count towards their bin
    from the start. The result is fully deterministic.

    Only bisection is supported. Picking the lightest of all ``k`` bins
    instead of the lighter of two would extend the scheme to k-way.

    Parameters
    ----------
    hg: metapartition.HyperGraph
        The hypergraph to be partitioned. It is not modified.
    k: int
        Number of bins, must be 2.

    Returns
    -------
    assignment: numpy.ndarray
        Bin of each vertex.
    bins: numpy.ndarray
        Total vertex weight in each bin.
    cut: int
        Total weight of the cut hyperedges.
    '''
    if k != 2:
        raise PreconditionViolation(
            f'The dumb partitioner only supports k=2, not k={k}.'
        )
    assignment = hg.assignment.copy()
    if len(assignment) and assignment.max() >= k:
        raise PreconditionViolation(
            f'Vertices fixed to bins beyond k={k}.'
        )

    weight = [0] * k
    for p, w in zip(assignment.tolist(), hg.vertex_weight.tolist()):
        if p != -1:
            weight[p] += w

    free = np.flatnonzero(assignment == -1)
    # stable sort keeps index order among equal weights
    order = free[np.argsort(-hg.vertex_weight[free].astype(np.int64),
                            kind='stable')]
    for v, w in zip(order.tolist(), hg.vertex_weight[order].tolist()):
        p = 0 if weight[0] <= weight[1] else 1
        assignment[v] = p
        weight[p] += w

    bins, cut = evaluate(hg, assignment, k)
    return assignment, bins, cut
