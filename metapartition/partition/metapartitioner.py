#!/usr/bin/env python
# -*- coding: utf-8 -*-
import logging
from metapartition.errors import PreconditionViolation
from . import backend as _backends
from .evaluate import evaluate
from .mirror import checks, unmirror

logger = logging.getLogger(__name__)


class Metapartitioner:
    '''Front end to the available hypergraph partitioners.

    Parameters
    ----------
    num_starts: int, default=1
        Number of independent runs of a randomized engine. Run ``i`` uses
        seed ``seed + i`` and the run with the lowest cut is kept.
    k: int, default=2
        Number of bins.
    partitioner: str or Backend, default=None
        'hmetis', 'kahypar', 'mtkahypar', 'dumb', any other registered name,
        or a backend instance. If None, mt-KaHyPar is preferred when
        available, otherwise KaHyPar.
    objective: str, default='cut'
        What the engine minimizes: 'cut', 'soed' (sum of external degrees)
        or 'km1' (connectivity minus one). Results are always scored by cut.
    seed: int, default=8675309
        Random seed handed to the engine.
    imbalance: float, default=0.01
        Allowed fractional deviation from perfectly balanced bins.
    mirror_check: None, 'any' or 'majority', default='any'
        How a bisection that contradicts the fixed vertices is recognized as
        mirrored and flipped back. None disables the correction.
    config: dict
        Engine-specific settings, e.g. KaHyPar .ini entries.
    '''

    objectives = ('cut', 'soed', 'km1')

    def __init__(self, num_starts=1, k=2, partitioner=None, objective='cut',
                 seed=8675309, imbalance=0.01, mirror_check='any',
                 config=None):
        if k < 2:
            raise PreconditionViolation(f'Need at least 2 bins, got k={k}.')
        if num_starts < 1:
            raise PreconditionViolation(
                f'Need at least 1 start, got {num_starts}.'
            )
        if imbalance < 0:
            raise PreconditionViolation(
                f'Imbalance must be non-negative, got {imbalance}.'
            )
        if objective not in self.objectives:
            raise PreconditionViolation(f'Unknown objective {objective!r}.')
        if mirror_check is not None and mirror_check not in checks:
            raise PreconditionViolation(
                f'Unknown mirror check {mirror_check!r}.'
            )
        if partitioner is None:
            if _backends.available('mtkahypar'):
                partitioner = 'mtkahypar'
            else:
                partitioner = 'kahypar'
        self.num_starts = num_starts
        self.k = k
        self.partitioner = partitioner
        self.objective = objective
        self.seed = seed
        self.imbalance = imbalance
        self.mirror_check = mirror_check
        self.config = config

    def __repr__(self):
        return '{}(num_starts={}, k={}, partitioner={}, objective={}, '\
            'seed={}, imbalance={}, mirror_check={})'.format(
                type(self).__name__,
                self.num_starts,
                self.k,
                repr(self.partitioner),
                repr(self.objective),
                self.seed,
                self.imbalance,
                repr(self.mirror_check),
            )

    @staticmethod
    def name(partitioner):
        '''Human-readable name of a partitioner.'''
        if isinstance(partitioner, _backends.Backend):
            return partitioner.name
        return _backends.lookup(partitioner).name

    @staticmethod
    def available(partitioner, config=None):
        '''Whether a partitioner, with engine-specific settings ``config``,
        can be used in this process.'''
        return _backends.available(partitioner, config)

    def hg_partition(self, hg):
        '''Partition a hypergraph with the configured engine. Vertices fixed
        in ``hg.assignment`` keep their bin. The hypergraph itself is not
        modified.

        Parameters
        ----------
        hg: metapartition.HyperGraph
            The hypergraph to be partitioned.

        Returns
        -------
        part: numpy.ndarray
            Bin of every vertex.
        bins: numpy.ndarray
            Total vertex weight in each bin.
        cut: int
            Total weight of the cut hyperedges.
        '''
        engine = _backends.backend_factory(self.partitioner,
                                           config=self.config)
        starts = 1 if engine.deterministic else self.num_starts
        logger.info('partitioning %s into %d bins with %s, %d start(s)',
                    hg, self.k, engine.name, starts)

        best = None
        for i in range(starts):
            raw = engine.partition(hg, self.k, self.seed + i,
                                   self.imbalance, self.objective)
            part, _ = unmirror(hg.assignment, raw, self.k, self.mirror_check)
            bins, cut = evaluate(hg, part, self.k)
            logger.debug('start %d: cut %d, bins %s', i, cut, bins.tolist())
            if best is None or cut < best[2]:
                best = (part, bins, cut)
        return best

    def show(self, hg, part, bins, cut):
        '''Print a summary of a partition, listing at most the first 16
        vertices.'''
        print(f'Graph: {hg.num_vertices} vertices, {hg.num_edges} edges.  '
              f'Cut {cut}')
        for b, w in enumerate(bins):
            print(f'Bin {b} weight: {w}')
        for v, p in enumerate(part[:16]):
            print(f'Vertex {v} mapped to bin {p}')
