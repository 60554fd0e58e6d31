#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os
import tempfile
import contextlib
from metapartition.errors import PreconditionViolation


default_config = {
    # general
    'mode': 'recursive',
    'objective': 'cut',
    'seed': -1,
    'cmaxnet': -1,
    'vcycles': 0,
    # main -> preprocessing -> min hash sparsifier
    'p-use-sparsifier': 'false',
    # main -> preprocessing -> community detection
    'p-detect-communities': 'false',
    # main -> coarsening
    'c-type': 'heavy_lazy',
    'c-s': 3.25,
    'c-t': 160,
    # main -> coarsening -> rating
    'c-rating-score': 'heavy_edge',
    'c-rating-use-communities': 'false',
    'c-rating-heavy_node_penalty': 'no_penalty',
    'c-rating-acceptance-criterion': 'best',
    'c-fixed-vertex-acceptance-criterion': 'fixed_vertex_allowed',
    # main -> initial partitioning
    'i-mode': 'direct',
    'i-technique': 'flat',
    # initial partitioning -> initial partitioning
    'i-algo': 'pool',
    'i-runs': 20,
    # initial partitioning -> local search
    'i-r-type': 'twoway_fm',
    'i-r-runs': -1,
    'i-r-fm-stop': 'simple',
    'i-r-fm-stop-i': 50,
    # main -> local search
    'r-type': 'twoway_fm',
    'r-runs': -1,
    'r-fm-stop': 'simple',
    'r-fm-stop-alpha': 1,
    'r-fm-stop-i': 350,
}

# connectivity is optimized by direct k-way refinement
km1_config = {
    'mode': 'direct',
    'objective': 'km1',
    'r-type': 'kway_fm_km1',
}


def kahypar_config(objective='cut', overrides=None):
    '''Assemble a KaHyPar configuration for an objective.

    Parameters
    ----------
    objective: 'cut' or 'km1'
        The metric to be minimized. KaHyPar has no sum-of-external-degrees
        objective.
    overrides: dict
        Entries that take precedence over the defaults.

    Returns
    -------
    config: dict
        Key-value pairs as appears in
        https://github.com/kahypar/kahypar/tree/master/config.
    '''
    config = dict(default_config)
    if objective == 'km1':
        config.update(km1_config)
    elif objective != 'cut':
        raise PreconditionViolation(
            f'KaHyPar cannot optimize objective {objective!r}.'
        )
    config.update(overrides or {})
    return config


@contextlib.contextmanager
def to_ini(config=None):
    '''Converts a dictionary-based configuration set to an .ini file so that
    it can be loaded by Kahypar's C extension module. The file is removed
    when the context exits.

    Parameters
    ----------
    config: dict
        Key-value pairs as appears in
        https://github.com/kahypar/kahypar/tree/master/config.
    '''

    config = config if config is not None else default_config
    fd, name = tempfile.mkstemp(suffix='.ini', text=True)
    try:
        with os.fdopen(fd, 'w') as f:
            f.write('\n'.join([f'{key}={value}'
                               for key, value in config.items()]))
        yield name
    finally:
        os.unlink(name)
