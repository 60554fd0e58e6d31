#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os
import shutil
import logging
import tempfile
import subprocess
import numpy as np
from metapartition.errors import PreconditionViolation
from metapartition.hypergraph import HyperGraph
from ._backend import Backend

logger = logging.getLogger(__name__)


class HMetisBackend(Backend):
    '''hMetis through its ``shmetis`` executable, exchanging hMetis files in
    a scratch directory. hMetis names the offset array ``eptr`` and the
    member array ``eind``, the reverse of the KaHyPar naming, but both
    travel in their usual places inside the file.

    ``shmetis`` takes no seed, so the seed is ignored. The imbalance is
    passed as the UBfactor ``imbalance * 100``, at least 1.

    Parameters
    ----------
    config: dict
        ``executable`` overrides the name or path of the shmetis binary.
    '''

    name = 'hMetis'
    executable = 'shmetis'
    offset_t = np.int32
    member_t = np.int32

    @classmethod
    def _executable(cls, config):
        return (config or {}).get('executable', cls.executable)

    @classmethod
    def available(cls, config=None):
        return shutil.which(cls._executable(config)) is not None

    def __call__(self, num_vertices, num_edges, edge_weights, vertex_weights,
                 edge_offsets, edge_members, part, k, seed, imbalance,
                 objective):
        if objective != 'cut':
            raise PreconditionViolation(
                f'shmetis cannot optimize objective {objective!r}.'
            )
        executable = self._executable(self.config)
        hg = HyperGraph(vertex_weight=vertex_weights,
                        edge_weight=edge_weights,
                        assignment=part,
                        edge_offsets=edge_offsets,
                        edge_members=edge_members)
        ubfactor = max(1, int(imbalance * 100))

        with tempfile.TemporaryDirectory() as scratch:
            hgr = os.path.join(scratch, 'graph.hgr')
            args = [executable, hgr]
            if np.any(part != -1):
                fix = os.path.join(scratch, 'graph.fix')
                hg.save(hgr, mode=11, fixed=fix)
                args.append(fix)
            else:
                hg.save(hgr, mode=11)
            args += [str(k), str(ubfactor)]

            logger.debug('running %s', ' '.join(args))
            try:
                subprocess.run(args, cwd=scratch, check=True,
                               stdout=subprocess.PIPE,
                               stderr=subprocess.STDOUT,
                               universal_newlines=True)
            except subprocess.CalledProcessError as e:
                raise RuntimeError(
                    f'{executable} failed with status {e.returncode}:\n'
                    f'{e.stdout}'
                )
            return np.loadtxt(f'{hgr}.part.{k}', dtype=np.int32, ndmin=1)
