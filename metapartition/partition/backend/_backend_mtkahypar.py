#!/usr/bin/env python
# -*- coding: utf-8 -*-
import multiprocessing
import numpy as np
from metapartition.errors import PreconditionViolation
from ._backend import Backend
try:
    import mtkahypar
except ImportError:
    mtkahypar = None


_initializer = None


def _initialize():
    '''mt-KaHyPar may only be initialized once per process.'''
    global _initializer
    if _initializer is None:
        _initializer = mtkahypar.initialize(multiprocessing.cpu_count())
    return _initializer


class MtKaHyParBackend(Backend):
    '''mt-KaHyPar through its Python extension module.

    Parameters
    ----------
    config: dict
        ``preset`` selects the name of a ``mtkahypar.PresetType``, the
        default being 'DEFAULT'.
    '''

    name = 'mt-KaHyPar'
    # mt-KaHyPar takes 64-bit node ids
    offset_t = np.uint64
    member_t = np.uint64

    objectives = {'cut': 'CUT', 'km1': 'KM1', 'soed': 'SOED'}

    @classmethod
    def available(cls, config=None):
        return mtkahypar is not None

    def __call__(self, num_vertices, num_edges, edge_weights, vertex_weights,
                 edge_offsets, edge_members, part, k, seed, imbalance,
                 objective):
        if objective not in self.objectives:
            raise PreconditionViolation(f'Unknown objective {objective!r}.')
        config = self.config or {}
        mtk = _initialize()
        context = mtk.context_from_preset(
            getattr(mtkahypar.PresetType, config.get('preset', 'DEFAULT'))
        )
        context.set_partitioning_parameters(
            k, imbalance, getattr(mtkahypar.Objective,
                                  self.objectives[objective])
        )
        context.logging = False
        mtkahypar.set_seed(seed)

        offsets = edge_offsets.tolist()
        members = edge_members.tolist()
        hypergraph = mtk.create_hypergraph(
            context, num_vertices, num_edges,
            [members[offsets[e]:offsets[e + 1]] for e in range(num_edges)],
            vertex_weights.tolist(), edge_weights.tolist()
        )
        if np.any(part != -1):
            hypergraph.add_fixed_vertices(part.tolist(), k)

        partitioned = hypergraph.partition(context)
        return [partitioned.block_id(v) for v in range(num_vertices)]
