#!/usr/bin/env python
# -*- coding: utf-8 -*-
import numpy as np
from metapartition.partition.config import kahypar_config, to_ini
from ._backend import Backend
try:
    import kahypar
except ImportError:
    kahypar = None


class KaHyParBackend(Backend):
    '''KaHyPar through its Python extension module.

    Parameters
    ----------
    config: dict
        Entries overriding the default KaHyPar .ini configuration.
    '''

    name = 'KaHyPar'
    offset_t = np.uint64  # size_t hyperedge indices
    member_t = np.uint32

    @classmethod
    def available(cls, config=None):
        return kahypar is not None

    def __call__(self, num_vertices, num_edges, edge_weights, vertex_weights,
                 edge_offsets, edge_members, part, k, seed, imbalance,
                 objective):
        context = kahypar.Context()
        with to_ini(kahypar_config(objective, self.config)) as ini:
            context.loadINIconfiguration(ini)
        context.setK(k)
        context.setEpsilon(imbalance)
        context.setSeed(seed)
        context.suppressOutput(True)

        hypergraph = kahypar.Hypergraph(
            num_vertices, num_edges,
            edge_offsets.tolist(), edge_members.tolist(),
            k, edge_weights.tolist(), vertex_weights.tolist()
        )
        for v in np.flatnonzero(part != -1).tolist():
            hypergraph.fixNodeToBlock(v, int(part[v]))

        kahypar.partition(hypergraph, context)
        for v in range(num_vertices):
            part[v] = hypergraph.blockID(v)
        return part
