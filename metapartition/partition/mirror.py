#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Repair of bisections that some engines return with the two bins
swapped, detected by comparing against the fixed vertices."""
import logging
import warnings
import numpy as np
from metapartition.errors import MirroringWarning, PreconditionViolation

logger = logging.getLogger(__name__)

checks = ('any', 'majority')


def is_mirrored(fixed, assignment, check='any'):
    '''Decide whether a bisection disagrees with the fixed vertices.

    Parameters
    ----------
    fixed: sequence of int
        Pre-fixed bin of each vertex, -1 for free vertices.
    assignment: sequence of int
        Bin of each vertex as returned by a partitioner.
    check: 'any' or 'majority'
        'any' declares the result mirrored as soon as a single fixed vertex
        ended up elsewhere. 'majority' requires more than half of the fixed
        vertices to disagree.

    Returns
    -------
    mirrored: bool
    '''
    if check not in checks:
        raise PreconditionViolation(f'Unknown mirror check {check!r}.')
    fixed = np.asarray(fixed)
    assignment = np.asarray(assignment)
    mask = fixed != -1
    n_fixed = np.count_nonzero(mask)
    if n_fixed == 0:
        return False
    n_wrong = np.count_nonzero(fixed[mask] != assignment[mask])
    if check == 'any':
        return n_wrong > 0
    else:
        return 2 * n_wrong > n_fixed


def unmirror(fixed, assignment, k=2, check='any'):
    '''Flip every bin of a bisection (b -> 1 - b) if it looks mirrored with
    respect to the fixed vertices. A genuine disagreement on a fixed vertex
    is indistinguishable from a mirrored result under the 'any' check, so
    every flip is reported through a :py:class:`MirroringWarning`.

    Parameters
    ----------
    fixed: sequence of int
        Pre-fixed bin of each vertex, -1 for free vertices.
    assignment: numpy.ndarray
        Raw bin of each vertex.
    k: int
        Number of bins. Nothing is done unless k is 2.
    check: None, 'any' or 'majority'
        Detection rule, see :py:func:`is_mirrored`. None disables the
        correction.

    Returns
    -------
    assignment: numpy.ndarray
        Either the input array or a flipped copy.
    flipped: bool
        Whether the assignment was flipped.
    '''
    if check is None or k != 2:
        return assignment, False
    if not is_mirrored(fixed, assignment, check):
        return assignment, False
    message = 'partition disagrees with the fixed vertices, ' \
              'assuming it is mirrored and flipping all bins'
    logger.warning(message)
    warnings.warn(message, MirroringWarning)
    return 1 - np.asarray(assignment), True
