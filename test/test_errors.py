#!/usr/bin/env python
# -*- coding: utf-8 -*-
import pytest
from metapartition.errors import (MetapartitionError, ParseError,
                                  IndexOutOfRange, BackendUnavailable,
                                  PreconditionViolation)


def test_parse_error_message():
    e = ParseError('bad token', 'g.hgr', 3)
    assert(str(e) == 'g.hgr:3: bad token')
    assert((e.reason, e.path, e.lineno) == ('bad token', 'g.hgr', 3))
    assert(str(ParseError('truncated', 'g.hgr')) == 'g.hgr: truncated')
    assert(str(ParseError('truncated')) == 'truncated')


@pytest.mark.parametrize('cls, builtin', [
    (ParseError, ValueError),
    (IndexOutOfRange, IndexError),
    (BackendUnavailable, RuntimeError),
    (PreconditionViolation, ValueError),
])
def test_hierarchy(cls, builtin):
    assert(issubclass(cls, MetapartitionError))
    assert(issubclass(cls, builtin))
