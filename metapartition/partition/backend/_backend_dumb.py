#!/usr/bin/env python
# -*- coding: utf-8 -*-
from metapartition.hypergraph import HyperGraph
from metapartition.partition.dumb import partition_dumb
from ._backend import Backend


class DumbBackend(Backend):
    '''The greedy weight-balancing partitioner, always available.'''

    name = 'Dumb'
    deterministic = True

    @classmethod
    def available(cls, config=None):
        return True

    def __call__(self, num_vertices, num_edges, edge_weights, vertex_weights,
                 edge_offsets, edge_members, part, k, seed, imbalance,
                 objective):
        hg = HyperGraph(vertex_weight=vertex_weights,
                        edge_weight=edge_weights,
                        assignment=part,
                        edge_offsets=edge_offsets,
                        edge_members=edge_members)
        return partition_dumb(hg, k)[0]
