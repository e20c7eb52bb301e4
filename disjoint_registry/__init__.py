"""
.. autosummary::
    :nosignatures:

    canonical_json
    UnionFind
    UnionFind.at_capacity
    UnionFind.copy
    UnionFind.register
    UnionFind.register_all
    UnionFind.same_group
    UnionFind.size
    UnionFind.union
    AlreadyRegistered
    CapacityExceeded
    Unregistered
    UnionFindError
"""
from importlib.metadata import version

from disjoint_registry.canonical import canonical_json
from disjoint_registry.union_find import (
    AlreadyRegistered,
    CapacityExceeded,
    Unregistered,
    UnionFind,
    UnionFindError
)

__version__ = version('disjoint-registry')

__all__ = [
    '__version__',
    'AlreadyRegistered',
    'CapacityExceeded',
    'canonical_json',
    'Unregistered',
    'UnionFind',
    'UnionFindError'
]
