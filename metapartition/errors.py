#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Exceptions raised across metapartition. Each one also derives from the
builtin exception that callers would naturally catch for the situation."""


class MetapartitionError(Exception):
    pass


class ParseError(MetapartitionError, ValueError):
    '''Malformed or truncated hMetis interchange file.

    Parameters
    ----------
    reason: str
        What went wrong.
    path: str
        The file being parsed, if known.
    lineno: int
        1-based line number of the offending line, if known.
    '''

    def __init__(self, reason, path=None, lineno=None):
        self.reason = reason
        self.path = path
        self.lineno = lineno
        where = []
        if path is not None:
            where.append(str(path))
        if lineno is not None:
            where.append(str(lineno))
        if where:
            super().__init__(f'{":".join(where)}: {reason}')
        else:
            super().__init__(reason)


class IndexOutOfRange(MetapartitionError, IndexError):
    pass


class BackendUnavailable(MetapartitionError, RuntimeError):
    pass


class PreconditionViolation(MetapartitionError, ValueError):
    pass


class MirroringWarning(UserWarning):
    '''Issued when a backend result is flipped to agree with fixed
    vertices.'''
    pass
