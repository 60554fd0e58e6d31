#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Registry of partitioning engines. Which engines exist is fixed, whether
they can be used is decided at runtime by each engine's ``available()``.
"""
from metapartition.errors import BackendUnavailable, PreconditionViolation
from ._backend import Backend
from ._backend_dumb import DumbBackend
from ._backend_hmetis import HMetisBackend
from ._backend_kahypar import KaHyParBackend
from ._backend_mtkahypar import MtKaHyParBackend

__all__ = ['Backend', 'register', 'lookup', 'available', 'backend_factory']

_registry = {}


def register(name, backend):
    '''Make a backend class selectable by name, replacing any previous
    registration.'''
    _registry[name] = backend


def unregister(name):
    _registry.pop(name, None)


def lookup(name):
    try:
        return _registry[name]
    except KeyError:
        raise PreconditionViolation(f'Unknown backend {name!r}') from None


def available(backend, config=None):
    '''Whether a backend (name or instance) can be used. An instance is
    judged by its own configuration.'''
    if isinstance(backend, Backend):
        return backend.available(backend.config)
    return lookup(backend).available(config)


def backend_factory(backend, config=None):
    if isinstance(backend, Backend):
        return backend
    cls = lookup(backend)
    if not cls.available(config):
        raise BackendUnavailable(f'Partitioner {cls.name} is not available.')
    return cls(config=config)


register('dumb', DumbBackend)
register('hmetis', HMetisBackend)
register('kahypar', KaHyParBackend)
register('mtkahypar', MtKaHyParBackend)
