#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Distance computations over hypergraphs. Two vertices are adjacent if they
share a hyperedge. Vertices that cannot be reached are labeled with
``2 * num_vertices``, which exceeds every hop count in the hypergraph."""
import heapq
from collections import deque
import numpy as np
from metapartition.errors import IndexOutOfRange, PreconditionViolation
from .incidence import build_incidence


def _sources(hg, sources):
    sources = np.atleast_1d(np.asarray(sources, dtype=np.int64))
    bad = (sources < 0) | (sources >= hg.num_vertices)
    if np.any(bad):
        raise IndexOutOfRange(
            f'Sources {sources[bad].tolist()} out of range for '
            f'{hg.num_vertices} vertices.'
        )
    return sources.tolist()


def bfs(hg, sources, limit=None):
    '''Multi-source breadth-first search counting hyperedge hops.

    Parameters
    ----------
    hg: metapartition.HyperGraph
        The hypergraph to be searched.
    sources: int or sequence of int
        Vertices at distance 0.
    limit: None or int
        Hop budget. Vertices whose distance exceeds it are not expanded any
        further. None means unlimited.

    Returns
    -------
    distance: numpy.ndarray
        Hop distance of each vertex, ``2 * num_vertices`` if not reached.
    '''
    sources = _sources(hg, sources)
    infinity = 2 * hg.num_vertices
    incidence = build_incidence(hg)
    offsets = hg.edge_offsets.tolist()
    members = hg.edge_members.tolist()

    distance = [infinity] * hg.num_vertices
    queue = deque()
    for s in sources:
        distance[s] = 0
        queue.append(s)

    while queue:
        v = queue.popleft()
        d = distance[v]
        if limit is not None and d > limit:
            continue
        for e in incidence[v]:
            for u in members[offsets[e]:offsets[e + 1]]:
                if distance[u] > d + 1:
                    distance[u] = d + 1
                    queue.append(u)

    return np.array(distance, dtype=np.int64)


def dijkstra(hg, sources, edge_cost=None):
    '''Shortest paths where crossing a hyperedge costs a given amount.

    Parameters
    ----------
    hg: metapartition.HyperGraph
        The hypergraph to be searched.
    sources: int or sequence of int
        Vertices at distance 0.
    edge_cost: None or sequence of non-negative numbers
        Cost of moving between two members of each hyperedge. Defaults to
        the number of members of each hyperedge.

    Returns
    -------
    distance: numpy.ndarray
        Shortest distance of each vertex, ``2 * num_vertices`` if not
        reachable.
    '''
    sources = _sources(hg, sources)
    if edge_cost is None:
        edge_cost = hg.edge_lengths()
    edge_cost = np.asarray(edge_cost)
    if edge_cost.shape != (hg.num_edges,):
        raise PreconditionViolation(
            f'{edge_cost.size} edge costs given for {hg.num_edges} '
            'hyperedges.'
        )
    if np.any(edge_cost < 0):
        raise PreconditionViolation('Edge costs must be non-negative.')
    edge_cost = edge_cost.tolist()
    incidence = build_incidence(hg)
    offsets = hg.edge_offsets.tolist()
    members = hg.edge_members.tolist()

    distance = [None] * hg.num_vertices
    heap = []
    for s in sources:
        distance[s] = 0
        heap.append((0, s))
    heapq.heapify(heap)

    while heap:
        d, v = heapq.heappop(heap)
        if d > distance[v]:
            continue
        for e in incidence[v]:
            candidate = d + edge_cost[e]
            for u in members[offsets[e]:offsets[e + 1]]:
                if distance[u] is None or candidate < distance[u]:
                    distance[u] = candidate
                    heapq.heappush(heap, (candidate, u))

    infinity = 2 * hg.num_vertices
    return np.array([infinity if d is None else d for d in distance])
