#!/usr/bin/env python
# -*- coding: utf-8 -*-
import pytest
import numpy as np
from metapartition import HyperGraph
from metapartition.errors import ParseError, PreconditionViolation


sample_hgr = '''\
4 7
1 3
1 2 4 5
4 5 7
3 6 7
'''

weighted_hgr = '''\
% hyperedge and vertex weights
3 4 11
1 2 5
2 3 4 1
% the last hyperedge
4 2 3
7
1
1
2
'''


@pytest.fixture
def write(tmp_path):
    def _write(text, name='graph.hgr'):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write


def assert_same(g1, g2):
    for attr in ['vertex_weight', 'edge_weight', 'assignment',
                 'edge_offsets', 'edge_members']:
        a, b = getattr(g1, attr), getattr(g2, attr)
        assert(a.dtype == b.dtype)
        assert(np.array_equal(a, b))


def test_load_sample(write):
    hg = HyperGraph.load(write(sample_hgr))
    assert_same(hg, HyperGraph.sample())


def test_load_weighted(write):
    hg = HyperGraph.load(write(weighted_hgr))
    assert(hg.num_vertices == 4)
    assert(hg.num_edges == 3)
    assert(hg.edge_weight.tolist() == [5, 1, 3])
    assert(hg.vertex_weight.tolist() == [7, 1, 1, 2])
    assert(hg.edge_offsets.tolist() == [0, 2, 5, 7])
    assert(hg.edge_members.tolist() == [0, 1, 1, 2, 3, 3, 1])


@pytest.mark.parametrize('mode, edge_weight, vertex_weight', [
    (1, [4, 2, 1, 9], [1] * 7),
    (10, [1] * 4, [3, 1, 4, 1, 5, 9, 2]),
])
def test_load_modes(write, mode, edge_weight, vertex_weight):
    lines = [f'4 7 {mode}']
    for e, pins in enumerate([[1, 3], [1, 2, 4, 5], [4, 5, 7], [3, 6, 7]]):
        fields = pins + ([edge_weight[e]] if mode == 1 else [])
        lines.append(' '.join(map(str, fields)))
    if mode == 10:
        lines.extend(map(str, vertex_weight))
    hg = HyperGraph.load(write('\n'.join(lines)))
    assert(hg.edge_weight.tolist() == edge_weight)
    assert(hg.vertex_weight.tolist() == vertex_weight)
    assert(hg.edge_members.tolist() == HyperGraph.sample().edge_members
           .tolist())


def test_load_fixed(write):
    fixed = write('-1\n0\n-1\n-1\n1\n-1\n-1\n', name='graph.fix')
    hg = HyperGraph.load(write(sample_hgr), fixed=fixed)
    assert(hg.assignment.tolist() == [-1, 0, -1, -1, 1, -1, -1])


def test_load_ignores_trailing_lines(write):
    hg = HyperGraph.load(write(sample_hgr + '\n\n1 2 3 4\n'))
    assert(hg.num_edges == 4)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        HyperGraph.load(str(tmp_path / 'nonexistent.hgr'))


@pytest.mark.parametrize('text, lineno', [
    ('', None),
    ('4\n', 1),
    ('4 7 2\n', 1),
    ('-1 7\n', 1),
    ('4 7\n1 3\n1 x 4 5\n4 5 7\n3 6 7\n', 3),
    ('4 7\n1 3\n1 2 4 5\n4 5 7\n', None),
    ('4 7\n1 3\n1 2 4 5\n4 5 8\n3 6 7\n', 4),
    ('4 7\n1 3\n1 2 4 5\n4 5 0\n3 6 7\n', 4),
    ('1 2 1\n2\n', 2),
    ('1 2 10\n1 2\n1\n', None),
    ('1 2 10\n1 2\n1 1\n1\n', 3),
    ('1 2 1.5\n', 1),
])
def test_load_malformed(write, text, lineno):
    path = write(text)
    with pytest.raises(ParseError) as excinfo:
        HyperGraph.load(path)
    assert(excinfo.value.path == path)
    assert(excinfo.value.lineno == lineno)
    assert(str(excinfo.value).startswith(path))


@pytest.mark.parametrize('data, lineno', [
    (b'1 2\n1 \xff2\n', 2),
    (b'\xfe 2\n1 2\n', 1),
])
def test_load_invalid_encoding(tmp_path, data, lineno):
    path = tmp_path / 'graph.hgr'
    path.write_bytes(data)
    with pytest.raises(ParseError) as excinfo:
        HyperGraph.load(str(path))
    assert(excinfo.value.lineno == lineno)
    assert('encoding' in str(excinfo.value))


def test_load_fixed_invalid_encoding(write, tmp_path):
    fixed = tmp_path / 'graph.fix'
    fixed.write_bytes(b'-1\n0\n\xff\n-1\n1\n-1\n-1\n')
    with pytest.raises(ParseError) as excinfo:
        HyperGraph.load(write(sample_hgr), fixed=str(fixed))
    assert(excinfo.value.lineno == 3)


def test_parse_error_is_value_error(write):
    with pytest.raises(ValueError):
        HyperGraph.load(write('four seven\n'))


@pytest.mark.parametrize('text', [
    '-1\n0\n',
    '-1\n0\n-1\n-1\n1\n-1\n-2\n',
    '-1\n0\n-1\n-1\n1 1\n-1\n-1\n',
])
def test_load_malformed_fixed(write, text):
    fixed = write(text, name='graph.fix')
    with pytest.raises(ParseError):
        HyperGraph.load(write(sample_hgr), fixed=fixed)


def test_save_sample(tmp_path):
    path = tmp_path / 'sample.hgr'
    HyperGraph.sample().save(str(path))
    assert(path.read_text() == sample_hgr)


def test_save_explicit_mode(tmp_path):
    path = tmp_path / 'sample.hgr'
    HyperGraph.sample().save(str(path), mode=11)
    lines = path.read_text().splitlines()
    assert(lines[0] == '4 7 11')
    assert(lines[1] == '1 3 1')
    assert(len(lines) == 1 + 4 + 7)


def test_save_fixed(tmp_path):
    hg = HyperGraph.sample()
    hg.fix([2], 1)
    hg.save(str(tmp_path / 'g.hgr'), fixed=str(tmp_path / 'g.fix'))
    g = HyperGraph.load(str(tmp_path / 'g.hgr'),
                        fixed=str(tmp_path / 'g.fix'))
    assert_same(hg, g)


def test_save_invalid(tmp_path):
    with pytest.raises(PreconditionViolation):
        HyperGraph.sample().save(str(tmp_path / 'g.hgr'), mode=2)
    hg = HyperGraph(vertex_weight=[1], edge_offsets=[0, 0])
    with pytest.raises(PreconditionViolation):
        hg.save(str(tmp_path / 'g.hgr'))


@pytest.mark.parametrize('seed', range(5))
@pytest.mark.parametrize('weighted', [(False, False), (True, False),
                                      (False, True), (True, True)])
def test_round_trip(tmp_path, seed, weighted):
    rng = np.random.RandomState(seed)
    n = rng.randint(1, 30)
    edges = [rng.choice(n, size=rng.randint(1, n + 1), replace=False)
             for _ in range(rng.randint(0, 40))]
    hg = HyperGraph.from_edges(
        edges,
        vertex_weight=rng.randint(1, 10, n) if weighted[1] else None,
        edge_weight=rng.randint(1, 10, len(edges)) if weighted[0] else None,
        num_vertices=n,
    )
    path = str(tmp_path / 'g.hgr')
    hg.save(path)
    g = HyperGraph.load(path)
    assert_same(hg, g)
    g.save(path)
    assert_same(hg, HyperGraph.load(path))
