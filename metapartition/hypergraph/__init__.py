#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Metapartition's native hypergraph container class

This module defines the class ``HyperGraph`` that stores a vertex- and
hyperedge-weighted hypergraph in compressed (CSR) form, together with the
per-vertex partition assignment that partitioners read and write.
"""
import copy as cp
import logging
import numpy as np
import scipy.sparse
from metapartition.errors import IndexOutOfRange, PreconditionViolation
from ._hmetis import _from_hmetis, _to_hmetis
from ._from_networkx import _from_networkx
from ._to_networkx import _to_networkx


__all__ = ['HyperGraph']

logger = logging.getLogger(__name__)

# widths used by the native partitioning engines
weight_t = np.int32
part_t = np.int32
offset_t = np.uint64
member_t = np.uint32


class HyperGraph:
    """
    This is the class that stores a hypergraph in metapartition.

    Hyperedge ``i`` consists of the vertices
    ``edge_members[edge_offsets[i]:edge_offsets[i + 1]]``. Vertex indices are
    0-based.

    Parameters
    ----------
    vertex_weight: sequence of int
        Weight of each vertex.
    edge_weight: sequence of int
        Weight of each hyperedge. Defaults to 1 for every hyperedge.
    assignment: sequence of int
        Partition bin of each vertex, -1 for a free vertex. Defaults to all
        free.
    edge_offsets: sequence of int
        Offsets into ``edge_members``, one more than the number of
        hyperedges.
    edge_members: sequence of int
        Flattened member lists of all hyperedges.
    """

    def __init__(self, vertex_weight=None, edge_weight=None, assignment=None,
                 edge_offsets=None, edge_members=None):
        if vertex_weight is None:
            vertex_weight = []
        if edge_offsets is None:
            edge_offsets = [0]
        if edge_members is None:
            edge_members = []
        self.vertex_weight = np.array(vertex_weight, dtype=weight_t, ndmin=1)
        self.edge_offsets = np.array(edge_offsets, dtype=offset_t, ndmin=1)
        self.edge_members = np.array(edge_members, dtype=member_t, ndmin=1)
        if edge_weight is None:
            edge_weight = np.ones(len(self.edge_offsets) - 1)
        if assignment is None:
            assignment = -np.ones(len(self.vertex_weight))
        self.edge_weight = np.array(edge_weight, dtype=weight_t, ndmin=1)
        self.assignment = np.array(assignment, dtype=part_t, ndmin=1)
        self._check()

    def _check(self):
        if len(self.edge_offsets) < 1 or self.edge_offsets[0] != 0:
            raise PreconditionViolation('edge_offsets must start with 0.')
        if np.any(np.diff(self.edge_offsets.astype(np.int64)) < 0):
            raise PreconditionViolation('edge_offsets must be non-decreasing.')
        if int(self.edge_offsets[-1]) != len(self.edge_members):
            raise PreconditionViolation(
                f'edge_offsets ends at {int(self.edge_offsets[-1])} but '
                f'there are {len(self.edge_members)} edge members.'
            )
        if len(self.edge_weight) != len(self.edge_offsets) - 1:
            raise PreconditionViolation(
                f'{len(self.edge_weight)} hyperedge weights given for '
                f'{len(self.edge_offsets) - 1} hyperedges.'
            )
        if len(self.assignment) != len(self.vertex_weight):
            raise PreconditionViolation(
                f'{len(self.assignment)} assignments given for '
                f'{len(self.vertex_weight)} vertices.'
            )
        if len(self.edge_members) and \
                int(self.edge_members.max()) >= len(self.vertex_weight):
            raise PreconditionViolation(
                f'Hyperedge member {int(self.edge_members.max())} out of '
                f'range for {len(self.vertex_weight)} vertices.'
            )
        if len(self.assignment) and self.assignment.min() < -1:
            raise PreconditionViolation(
                'Assignments must be -1 (free) or a bin index.'
            )

    def __repr__(self):
        return '<{}(vertex_weight={}, edge_weight={}, assignment={}, '\
            'edge_offsets={}, edge_members={})>'.format(
                type(self).__name__,
                self.vertex_weight.tolist(),
                self.edge_weight.tolist(),
                self.assignment.tolist(),
                self.edge_offsets.tolist(),
                self.edge_members.tolist(),
            )

    def __str__(self):
        return f'HyperGraph: {self.num_vertices} vertices, '\
               f'{self.num_edges} edges'

    @classmethod
    def sample(cls):
        '''The 7-vertex, 4-hyperedge example hypergraph from the hMetis
        manual.'''
        return cls(
            vertex_weight=[1, 1, 1, 1, 1, 1, 1],
            edge_weight=[1, 1, 1, 1],
            assignment=[-1, -1, -1, -1, -1, -1, -1],
            edge_offsets=[0, 2, 6, 9, 12],
            edge_members=[0, 2, 0, 1, 3, 4, 3, 4, 6, 2, 5, 6],
        )

    @classmethod
    def from_edges(cls, edges, vertex_weight=None, edge_weight=None,
                   num_vertices=None):
        '''Build a hypergraph from a list of hyperedge member lists.

        Parameters
        ----------
        edges: iterable of sequences
            0-based member vertices of each hyperedge.
        vertex_weight: sequence of int
            Vertex weights. Defaults to 1 for every vertex.
        edge_weight: sequence of int
            Hyperedge weights. Defaults to 1 for every hyperedge.
        num_vertices: int
            Number of vertices. Inferred from ``vertex_weight`` or from the
            largest member if not given.

        Returns
        -------
        hg: HyperGraph
            A new hypergraph with all vertices free.
        '''
        edges = [list(e) for e in edges]
        if num_vertices is None:
            if vertex_weight is not None:
                num_vertices = len(vertex_weight)
            else:
                num_vertices = 1 + max(
                    (max(e) for e in edges if e), default=-1
                )
        if vertex_weight is None:
            vertex_weight = np.ones(num_vertices)
        offsets = np.cumsum([0] + [len(e) for e in edges])
        members = [v for e in edges for v in e]
        return cls(vertex_weight=vertex_weight, edge_weight=edge_weight,
                   edge_offsets=offsets, edge_members=members)

    @classmethod
    def from_networkx(cls, graph, weight='weight'):
        '''Convert a NetworkX graph, each edge becoming a 2-member
        hyperedge.

        Parameters
        ----------
        graph: networkx.Graph
            Nodes are numbered in iteration order.
        weight: str
            Node and edge attribute holding the respective weights.

        Returns
        -------
        hg: HyperGraph
            The converted hypergraph.
        '''
        return _from_networkx(cls, graph, weight)

    def to_networkx(self):
        '''Convert to the bipartite star expansion as a NetworkX
        ``Graph``.'''
        return _to_networkx(self)

    @classmethod
    def load(cls, path, fixed=None):
        '''Read a hypergraph in hMetis format.

        Parameters
        ----------
        path: str or path-like
            The ``.hgr`` file.
        fixed: str or path-like
            Optional companion file with one bin id (or -1) per vertex.

        Returns
        -------
        hg: HyperGraph
            A new hypergraph. Nothing is returned if parsing fails.
        '''
        return _from_hmetis(cls, path, fixed)

    def save(self, path, mode=None, fixed=None):
        '''Write the hypergraph in hMetis format.

        Parameters
        ----------
        path: str or path-like
            The ``.hgr`` file to be written.
        mode: None or int
            hMetis weighting mode (0, 1, 10 or 11). If None, weights are
            written only where some differ from 1.
        fixed: str or path-like
            If given, the assignment is written there as a fixed file.
        '''
        _to_hmetis(self, path, mode, fixed)

    @property
    def num_vertices(self):
        return len(self.vertex_weight)

    @property
    def num_edges(self):
        return len(self.edge_weight)

    @property
    def num_pins(self):
        return len(self.edge_members)

    def edge(self, i):
        '''Member vertices of hyperedge ``i``.'''
        if not 0 <= i < self.num_edges:
            raise IndexOutOfRange(
                f'Hyperedge {i} out of range for {self.num_edges} hyperedges.'
            )
        return self.edge_members[
            int(self.edge_offsets[i]):int(self.edge_offsets[i + 1])
        ]

    def edge_lengths(self):
        '''Number of members of each hyperedge.'''
        return np.diff(self.edge_offsets.astype(np.int64))

    def fixed_mask(self):
        return self.assignment != -1

    def copy(self, deep=True):
        '''Make a copy of an existing hypergraph.

        Parameters
        ----------
        deep: boolean
            If True, the arrays are copied as well. Otherwise the new
            hypergraph shares them with this one.
        '''
        g = self.__class__.__new__(self.__class__)
        for key, val in self.__dict__.items():
            g.__dict__[key] = cp.deepcopy(val) if deep else val
        return g

    def add_vertex(self, weight=1, part=-1):
        '''Append an isolated vertex and return its index.'''
        if part < -1:
            raise PreconditionViolation(f'Invalid bin {part}.')
        self.vertex_weight = np.append(
            self.vertex_weight, weight_t(weight)
        )
        self.assignment = np.append(self.assignment, part_t(part))
        return self.num_vertices - 1

    def add_edge(self, members, weight=1):
        '''Append a hyperedge and return its index.

        Parameters
        ----------
        members: sequence of int
            0-based ids of existing vertices.
        weight: int
            Weight of the new hyperedge.
        '''
        members = np.asarray(members, dtype=np.int64).ravel()
        if len(members) == 0:
            raise PreconditionViolation('A hyperedge needs at least 1 member.')
        if members.min() < 0 or members.max() >= self.num_vertices:
            raise IndexOutOfRange(
                f'Hyperedge members {members.tolist()} out of range for '
                f'{self.num_vertices} vertices.'
            )
        self.edge_members = np.concatenate(
            (self.edge_members, members.astype(member_t))
        )
        self.edge_offsets = np.append(
            self.edge_offsets, offset_t(len(self.edge_members))
        )
        self.edge_weight = np.append(self.edge_weight, weight_t(weight))
        return self.num_edges - 1

    def fix(self, vertices, part):
        '''Pin vertices to a bin so that partitioners leave them in place.

        Parameters
        ----------
        vertices: int or sequence of int
            0-based vertex ids.
        part: int
            Target bin, or -1 to release the vertices.
        '''
        vertices = np.atleast_1d(np.asarray(vertices, dtype=np.int64))
        bad = (vertices < 0) | (vertices >= self.num_vertices)
        if np.any(bad):
            raise IndexOutOfRange(
                f'Vertices {vertices[bad].tolist()} out of range for '
                f'{self.num_vertices} vertices.'
            )
        if part < -1:
            raise PreconditionViolation(f'Invalid bin {part}.')
        self.assignment[vertices] = part

    def bias(self, target_fraction):
        '''Nudge the eventual balance between bin 0 and bin 1.

        A fraction below 0.5 adds one unit of weight to a vertex fixed in
        bin 1, a fraction above 0.5 does so for bin 0. If no such anchor
        exists, a new unit-weight vertex fixed to that bin is appended. The
        nudge is always a single unit regardless of how far the fraction is
        from 0.5.

        Parameters
        ----------
        target_fraction: float
            Desired share of the total weight in bin 0.

        Returns
        -------
        anchor: int or None
            Index of the vertex that received the extra weight, None if
            ``target_fraction`` is exactly 0.5.
        '''
        if not 0 <= target_fraction <= 1:
            raise PreconditionViolation(
                f'Target fraction {target_fraction} is not in [0, 1].'
            )
        if target_fraction == 0.5:
            return None
        side = 1 if target_fraction < 0.5 else 0
        anchors = np.flatnonzero(self.assignment == side)
        if len(anchors):
            anchor = int(anchors[0])
            self.vertex_weight[anchor] += 1
        else:
            anchor = self.add_vertex(weight=1, part=side)
        logger.debug('biased bin %d through vertex %d', side, anchor)
        return anchor

    @property
    def incidence_matrix(self):
        '''Get the vertex-hyperedge incidence matrix as a sparse matrix.

        Returns
        -------
        incidence_matrix: sparse matrix
            A (num_vertices, num_edges) CSR matrix whose entry (v, e) counts
            the occurrences of v in hyperedge e.
        '''
        cols = np.repeat(np.arange(self.num_edges), self.edge_lengths())
        data = np.ones(self.num_pins, dtype=np.int64)
        A = scipy.sparse.coo_matrix(
            (data, (self.edge_members.astype(np.int64), cols)),
            shape=(self.num_vertices, self.num_edges)
        )
        return A.tocsr()
