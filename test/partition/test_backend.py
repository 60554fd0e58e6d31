#!/usr/bin/env python
# -*- coding: utf-8 -*-
import sys
import shutil
import pytest
import numpy as np
from metapartition import HyperGraph, Metapartitioner
from metapartition.errors import BackendUnavailable, PreconditionViolation
from metapartition.partition import backend
from metapartition.partition.backend import (
    DumbBackend, HMetisBackend, KaHyParBackend, MtKaHyParBackend
)


@pytest.mark.parametrize('cls, offset_t, member_t', [
    (DumbBackend, np.uint64, np.uint32),
    (KaHyParBackend, np.uint64, np.uint32),
    (MtKaHyParBackend, np.uint64, np.uint64),
    (HMetisBackend, np.int32, np.int32),
])
def test_marshal_widths(cls, offset_t, member_t):
    hg = HyperGraph.sample()
    hg.fix([2], 1)
    buffers = cls().marshal(hg)
    assert(buffers['edge_offsets'].dtype == offset_t)
    assert(buffers['edge_members'].dtype == member_t)
    assert(buffers['edge_offsets'].tolist() == hg.edge_offsets.tolist())
    assert(buffers['edge_members'].tolist() == hg.edge_members.tolist())
    assert(buffers['part'].tolist() == hg.assignment.tolist())
    # buffers are owned by the call, not shared with the hypergraph
    buffers['part'][0] = 1
    assert(hg.assignment[0] == -1)


def test_marshal_rejects_inconsistent_arrays():
    hg = HyperGraph.sample()
    hg.edge_weight = hg.edge_weight[:3]
    with pytest.raises(PreconditionViolation):
        DumbBackend().marshal(hg)
    hg = HyperGraph.sample()
    hg.edge_members = hg.edge_members[:10]
    with pytest.raises(PreconditionViolation):
        DumbBackend().marshal(hg)
    hg = HyperGraph.sample()
    hg.assignment = hg.assignment[:6]
    with pytest.raises(PreconditionViolation):
        DumbBackend().marshal(hg)


def test_registry():
    assert(backend.lookup('dumb') is DumbBackend)
    assert(backend.lookup('kahypar') is KaHyParBackend)
    assert(backend.available('dumb'))
    assert(backend.available(DumbBackend()))
    engine = DumbBackend()
    assert(backend.backend_factory(engine) is engine)
    assert(isinstance(backend.backend_factory('dumb'), DumbBackend))
    with pytest.raises(PreconditionViolation):
        backend.lookup('chaco')


@pytest.mark.parametrize('name', ['hmetis', 'kahypar', 'mtkahypar'])
def test_factory_unavailable(name):
    if backend.available(name):
        pytest.skip(f'{name} is installed')
    with pytest.raises(BackendUnavailable):
        backend.backend_factory(name)


def test_dumb_backend():
    hg = HyperGraph.sample()
    part = DumbBackend().partition(hg, 2, 0, 0.01)
    assert(part.tolist() == [0, 1, 0, 1, 0, 1, 0])


def _check_engine(name, k=2):
    hg = HyperGraph.sample()
    hg.fix([0], 0)
    hg.fix([6], 1)
    mp = Metapartitioner(partitioner=name, k=k, imbalance=0.2)
    part, bins, cut = mp.hg_partition(hg)
    assert(len(part) == 7)
    assert(set(part.tolist()) <= set(range(k)))
    assert(bins.sum() == 7)
    assert(part[0] == 0)
    assert(part[6] == 1)
    assert(cut >= 1)


def test_kahypar():
    pytest.importorskip('kahypar')
    _check_engine('kahypar')


def test_mtkahypar():
    pytest.importorskip('mtkahypar')
    _check_engine('mtkahypar')


def test_hmetis():
    if shutil.which(HMetisBackend.executable) is None:
        pytest.skip('shmetis not found')
    _check_engine('hmetis')


def test_hmetis_objective():
    with pytest.raises(PreconditionViolation):
        HMetisBackend()(7, 4, None, None, None, None, None, 2, 0, 0.01, 'km1')


@pytest.fixture
def fake_shmetis(tmp_path):
    '''A stand-in for shmetis that records its arguments and input files and
    answers with a preset bisection.'''
    def _make(answer, status=0):
        exe = tmp_path / 'fake_shmetis'
        output = ''.join(f'{p}\\n' for p in answer)
        exe.write_text(
            '#!/bin/sh\n'
            f'printf "%s\\n" "$@" > "{tmp_path / "args"}"\n'
            f'cp "$1" "{tmp_path / "input.hgr"}"\n'
            'if [ $# -eq 4 ]; then\n'
            f'    cp "$2" "{tmp_path / "input.fix"}"\n'
            'fi\n'
            f'printf "{output}" > "$1.part.2"\n'
            'echo "shmetis says hello"\n'
            f'exit {status}\n'
        )
        exe.chmod(0o755)
        return str(exe)
    return _make


skip_no_sh = pytest.mark.skipif(sys.platform == 'win32',
                                reason='needs a POSIX shell')


@skip_no_sh
def test_hmetis_configured_executable(tmp_path, fake_shmetis):
    exe = fake_shmetis([0, 0, 0, 1, 1, 1, 1])
    config = {'executable': exe}
    assert(HMetisBackend.available(config))
    assert(backend.available('hmetis', config))
    assert(Metapartitioner.available('hmetis', config))
    assert(not HMetisBackend.available(
        {'executable': str(tmp_path / 'nonexistent')}
    ))

    hg = HyperGraph.sample()
    hg.fix([0], 0)
    mp = Metapartitioner(partitioner='hmetis', config=config,
                         imbalance=0.05)
    part, bins, cut = mp.hg_partition(hg)
    assert(part.tolist() == [0, 0, 0, 1, 1, 1, 1])
    assert((bins.tolist(), cut) == ([3, 4], 2))

    args = (tmp_path / 'args').read_text().split('\n')[:-1]
    assert(args[0].endswith('graph.hgr'))
    assert(args[1].endswith('graph.fix'))
    assert(args[2:] == ['2', '5'])
    hgr = (tmp_path / 'input.hgr').read_text().split('\n')
    assert(hgr[0] == '4 7 11')
    assert(hgr[1] == '1 3 1')
    fix = (tmp_path / 'input.fix').read_text().split('\n')[:-1]
    assert(fix == ['0', '-1', '-1', '-1', '-1', '-1', '-1'])


@skip_no_sh
def test_hmetis_without_fixed_vertices(tmp_path, fake_shmetis):
    engine = HMetisBackend({'executable': fake_shmetis([1, 0, 1, 0, 1, 0, 1])})
    part = engine.partition(HyperGraph.sample(), 2, 0, 0.001)
    assert(part.tolist() == [1, 0, 1, 0, 1, 0, 1])
    args = (tmp_path / 'args').read_text().split('\n')[:-1]
    # UBfactor never drops below 1
    assert(args[1:] == ['2', '1'])
    assert(not (tmp_path / 'input.fix').exists())


@skip_no_sh
def test_hmetis_failure(fake_shmetis):
    engine = HMetisBackend({'executable': fake_shmetis([0] * 7, status=3)})
    with pytest.raises(RuntimeError, match='status 3'):
        engine.partition(HyperGraph.sample(), 2, 0, 0.01)
