#!/usr/bin/env python
# -*- coding: utf-8 -*-
from .evaluate import evaluate
from .dumb import partition_dumb
from .mirror import unmirror
from .metapartitioner import Metapartitioner

__all__ = ['evaluate', 'partition_dumb', 'unmirror', 'Metapartitioner']
