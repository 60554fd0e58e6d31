#!/usr/bin/env python
# -*- coding: utf-8 -*-
from abc import ABC, abstractmethod
import numpy as np
from metapartition.errors import PreconditionViolation


class Backend(ABC):
    """Interface of a partitioning engine.

    Engines are handed the hypergraph as flat arrays whose integer widths
    are dictated by the class attributes ``offset_t`` and ``member_t``, and
    answer with the bin of every vertex.

    Parameters
    ----------
    config: dict
        Engine-specific settings.
    """

    name = None
    offset_t = np.uint64
    member_t = np.uint32
    deterministic = False

    def __init__(self, config=None):
        self.config = config

    @classmethod
    @abstractmethod
    def available(cls, config=None):
        '''Whether the engine, configured by ``config``, can be used in this
        process.'''
        pass

    @abstractmethod
    def __call__(self, num_vertices, num_edges, edge_weights, vertex_weights,
                 edge_offsets, edge_members, part, k, seed, imbalance,
                 objective):
        '''Run the engine once.

        Parameters
        ----------
        num_vertices, num_edges: int
            Size of the hypergraph.
        edge_weights, vertex_weights: numpy.ndarray
            Weights as 32-bit integers.
        edge_offsets, edge_members: numpy.ndarray
            CSR arrays in the widths the engine expects.
        part: numpy.ndarray
            Fixed bin of every vertex or -1. The buffer belongs to this call.
        k: int
            Number of bins.
        seed: int
            Random seed.
        imbalance: float
            Allowed fractional deviation from perfect balance.
        objective: str
            'cut', 'km1' or 'soed'.

        Returns
        -------
        part: sequence of int
            Bin of every vertex.
        '''
        pass

    def marshal(self, hg):
        '''Copy the arrays of a hypergraph into the layout of this engine
        and check them for consistency.'''
        buffers = dict(
            edge_weights=np.array(hg.edge_weight, dtype=np.int32),
            vertex_weights=np.array(hg.vertex_weight, dtype=np.int32),
            edge_offsets=np.array(hg.edge_offsets, dtype=self.offset_t),
            edge_members=np.array(hg.edge_members, dtype=self.member_t),
            part=np.array(hg.assignment, dtype=np.int32),
        )
        n, m = hg.num_vertices, hg.num_edges
        if len(buffers['vertex_weights']) != n or len(buffers['part']) != n:
            raise PreconditionViolation(
                'Vertex arrays disagree on the number of vertices.'
            )
        if len(buffers['edge_weights']) != m or \
                len(buffers['edge_offsets']) != m + 1:
            raise PreconditionViolation(
                'Hyperedge arrays disagree on the number of hyperedges.'
            )
        if int(buffers['edge_offsets'][-1]) != len(buffers['edge_members']):
            raise PreconditionViolation(
                'Hyperedge offsets do not cover the member array.'
            )
        return buffers

    def partition(self, hg, k, seed, imbalance, objective='cut'):
        '''Partition a hypergraph with this engine.

        Returns
        -------
        part: numpy.ndarray
            Raw bin of every vertex as reported by the engine.
        '''
        buffers = self.marshal(hg)
        part = self(hg.num_vertices, hg.num_edges, k=k, seed=seed,
                    imbalance=imbalance, objective=objective, **buffers)
        part = np.array(part, dtype=np.int32, ndmin=1)
        if part.shape != (hg.num_vertices,):
            raise RuntimeError(
                f'{self.name} returned {len(part)} bins for '
                f'{hg.num_vertices} vertices.'
            )
        return part
