#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Reader and writer for the hMetis hypergraph file format.

The first line holds ``num_edges num_vertices [mode]``. It is followed by
one line of 1-based member ids per hyperedge, with a trailing weight if
``mode`` is 1 or 11, then one weight line per vertex if ``mode`` is 10 or 11.
Lines starting with ``%`` are comments.
"""
import logging
import numpy as np
from metapartition.errors import ParseError, PreconditionViolation

logger = logging.getLogger(__name__)

_modes = (0, 1, 10, 11)


def _records(fd, path):
    '''Yield (lineno, integers) for every non-blank, non-comment line of a
    file opened in binary mode.'''
    for lineno, line in enumerate(fd, 1):
        try:
            line = line.decode().strip()
        except UnicodeDecodeError:
            raise ParseError('invalid encoding', path, lineno) from None
        if not line or line.startswith('%'):
            continue
        try:
            yield lineno, [int(t) for t in line.split()]
        except ValueError:
            raise ParseError(
                f'cannot parse integers from {line!r}', path, lineno
            ) from None


def _next(records, path, what):
    try:
        return next(records)
    except StopIteration:
        raise ParseError(f'unexpected end of file, expecting {what}',
                         path) from None


def _read_fixed(path, num_vertices):
    parts = np.empty(num_vertices, dtype=np.int32)
    with open(path, 'rb') as fd:
        records = _records(fd, path)
        for v in range(num_vertices):
            lineno, fields = _next(records, path, f'bin of vertex {v + 1}')
            if len(fields) != 1:
                raise ParseError('expecting exactly one bin id', path, lineno)
            if fields[0] < -1:
                raise ParseError(f'invalid bin {fields[0]}', path, lineno)
            parts[v] = fields[0]
    return parts


def _from_hmetis(cls, path, fixed=None):
    with open(path, 'rb') as fd:
        records = _records(fd, path)
        lineno, header = _next(records, path, 'header')
        if len(header) not in (2, 3):
            raise ParseError('header must be "num_edges num_vertices [mode]"',
                             path, lineno)
        num_edges, num_vertices = header[:2]
        mode = header[2] if len(header) == 3 else 0
        if num_edges < 0 or num_vertices < 0:
            raise ParseError('negative counts in header', path, lineno)
        if mode not in _modes:
            raise ParseError(f'unknown mode {mode}', path, lineno)
        edge_weighted = mode in (1, 11)
        vertex_weighted = mode in (10, 11)

        offsets = [0]
        members = []
        edge_weight = []
        for e in range(num_edges):
            lineno, fields = _next(records, path, f'hyperedge {e + 1}')
            if edge_weighted:
                edge_weight.append(fields.pop())
            else:
                edge_weight.append(1)
            if not fields:
                raise ParseError('hyperedge without members', path, lineno)
            for v in fields:
                if not 1 <= v <= num_vertices:
                    raise ParseError(f'vertex {v} out of range', path, lineno)
                members.append(v - 1)
            offsets.append(len(members))

        if vertex_weighted:
            vertex_weight = []
            for v in range(num_vertices):
                lineno, fields = _next(records, path,
                                       f'weight of vertex {v + 1}')
                if len(fields) != 1:
                    raise ParseError('expecting exactly one vertex weight',
                                     path, lineno)
                vertex_weight.append(fields[0])
        else:
            vertex_weight = [1] * num_vertices

    if fixed is not None:
        assignment = _read_fixed(fixed, num_vertices)
    else:
        assignment = None

    hg = cls(vertex_weight=vertex_weight, edge_weight=edge_weight,
             assignment=assignment, edge_offsets=offsets,
             edge_members=members)
    logger.info('loaded %s: %d vertices, %d hyperedges, mode %d',
                path, num_vertices, num_edges, mode)
    return hg


def _to_hmetis(hg, path, mode=None, fixed=None):
    if mode is None:
        mode = 0
        if np.any(hg.edge_weight != 1):
            mode += 1
        if np.any(hg.vertex_weight != 1):
            mode += 10
    if mode not in _modes:
        raise PreconditionViolation(f'Unknown hMetis mode {mode}.')
    edge_weighted = mode in (1, 11)
    vertex_weighted = mode in (10, 11)

    offsets = hg.edge_offsets.tolist()
    members = hg.edge_members.tolist()
    edge_weight = hg.edge_weight.tolist()
    lines = []
    if mode:
        lines.append(f'{hg.num_edges} {hg.num_vertices} {mode}')
    else:
        lines.append(f'{hg.num_edges} {hg.num_vertices}')
    for e in range(hg.num_edges):
        pins = members[offsets[e]:offsets[e + 1]]
        if not pins:
            raise PreconditionViolation(
                f'Hyperedge {e} is empty and cannot be written.'
            )
        fields = [str(v + 1) for v in pins]
        if edge_weighted:
            fields.append(str(edge_weight[e]))
        lines.append(' '.join(fields))
    if vertex_weighted:
        lines.extend(str(w) for w in hg.vertex_weight.tolist())

    with open(path, 'w') as fd:
        fd.write('\n'.join(lines) + '\n')
    logger.info('wrote %s: %d vertices, %d hyperedges, mode %d',
                path, hg.num_vertices, hg.num_edges, mode)

    if fixed is not None:
        with open(fixed, 'w') as fd:
            fd.writelines(f'{p}\n' for p in hg.assignment.tolist())
