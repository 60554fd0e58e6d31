"""
Metapartition library
"""
from .hypergraph import HyperGraph
from .partition import Metapartitioner

__all__ = ['HyperGraph', 'Metapartitioner']

__version__ = '0.1a1'
