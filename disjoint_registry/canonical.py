import json
import reprlib

import numpy as np


def canonical_json(item):
    """Returns a canonical string key for ``item``.

    The key is a compact JSON serialization of the item's structure.
    Two items receive the same key exactly when they serialize to the
    same JSON document, which makes this the default notion of item
    identity used by :class:`.UnionFind`.

    Parameters
    ----------
    item : object
        Any value made of ``None``, booleans, numbers, strings, lists,
        tuples, dicts, sets and :mod:`numpy` arrays or scalars.

    Returns
    -------
    out : str
        The canonical key for ``item``.

    Raises
    ------
    TypeError
        If ``item`` (or something it contains) has no JSON form, contains
        a reference cycle, is nested too deeply, or is a dict whose keys
        cannot be sorted.

    Notes
    -----
    Dictionary keys are sorted, so dicts with the same contents share a
    key regardless of insertion order. Lists and tuples both become JSON
    arrays, so ``(1, 2)`` and ``[1, 2]`` are the same item. Dict keys are
    converted to strings by JSON, so ``{1: 'a'}`` and ``{'1': 'a'}`` are
    also the same item. Supply a custom ``canonicalize`` function to
    :class:`.UnionFind` when any of this conflicts with how your items
    should compare.

    Examples
    --------
    >>> canonical_json({'b': 1, 'a': [1, 2]})
    '{"a":[1,2],"b":1}'
    >>> canonical_json({'a': [1, 2], 'b': 1}) == canonical_json({'b': 1, 'a': (1, 2)})
    True
    """
    try:
        return json.dumps(item, sort_keys=True, separators=(',', ':'),
                          default=_to_builtin)
    except (TypeError, ValueError, RecursionError) as exc:
        msg = ("Could not canonicalize {0!r} ({1}). Supply a custom "
               "canonicalize function.").format(reprlib.repr(item), exc)
        raise TypeError(msg) from exc


def _to_builtin(obj):
    """Converts values JSON does not know about into ones it does."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=canonical_json)

    msg = "Object of type {0} is not JSON serializable".format(type(obj).__name__)
    raise TypeError(msg)
