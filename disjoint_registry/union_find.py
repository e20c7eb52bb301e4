import copy
import logging
import numbers
import reprlib

import numpy as np

from disjoint_registry.canonical import canonical_json


logger = logging.getLogger(__name__)


class UnionFindError(Exception):
    """Base class for exceptions in disjoint-registry."""
    pass


class CapacityExceeded(UnionFindError):
    """Raised when registering more items than the registry can hold."""

    def __init__(self, capacity, requested=1):
        self.capacity = capacity
        self.requested = requested
        msg = "Registry is full: it holds at most {0} items.".format(capacity)
        if requested > 1:
            msg = ("Cannot register {0} more items: the registry holds at "
                   "most {1} items.").format(requested, capacity)
        super().__init__(msg)


class Unregistered(UnionFindError):
    """Raised when an operation refers to an item that was never registered."""

    def __init__(self, item, key):
        self.item = item
        self.key = key
        super().__init__("{0} is not registered (key {1!r}).".format(reprlib.repr(item), key))


class AlreadyRegistered(UnionFindError):
    """Raised when an item's canonical key is registered a second time."""

    def __init__(self, item, key, slot=None):
        self.item = item
        self.key = key
        self.slot = slot
        super().__init__("{0} is already registered (key {1!r}).".format(reprlib.repr(item), key))


class UnionFind(object):
    """A fixed-capacity union-find registry with union by size and path
    compression.

    The registry holds a collection of items, each belonging to exactly
    one group. Items are registered one at a time with
    :meth:`.register`, and start out in a group of their own. Using
    :meth:`.union` the groups containing two items are fused together,
    and :meth:`.same_group` tells whether two items ended up in the same
    group. Groups are never split and items are never removed.

    Items can be any objects. Internally each item is identified by a
    canonical string key, computed by ``canonicalize``, which is mapped
    to a dense slot index. Two items with the same key are the same item
    as far as the registry is concerned.

    Parameters
    ----------
    capacity : int
        The maximum number of items the registry will ever hold.
    canonicalize : function (optional, default: :func:`.canonical_json`)
        A function taking an item and returning a ``str`` key. It should
        return equal keys exactly for the items you consider equal.
    items : iterable (optional)
        Items to register right away, see :meth:`.register_all`.

    Attributes
    ----------
    num_groups : int
        The number of groups contained in the registry.

    Raises
    ------
    TypeError
        If ``capacity`` is not an integer or ``canonicalize`` is not
        callable.
    ValueError
        If ``capacity`` is not positive.

    Notes
    -----
    Each group is a tree of slots whose root identifies the group. When
    two groups are merged the root of the smaller group is attached
    under the root of the larger one; on a tie the group of the second
    argument is attached under the group of the first. Finding a root
    rewrites every slot on the traversed path to point straight at the
    root. Together these make every operation run in nearly constant
    amortized time.

    The registry is not thread-safe. Share it between threads only when
    every call is protected by a lock.

    Examples
    --------
    >>> import disjoint_registry as dr
    >>> uf = dr.UnionFind(5)
    >>> for item in 'ABCDE':
    ...     _ = uf.register(item)
    >>> uf.union('A', 'B')
    >>> uf.union('C', 'D')
    >>> uf.same_group('A', 'C')
    False
    >>> uf.union('B', 'C')
    >>> uf.same_group('A', 'D'), uf.size('D'), uf.num_groups
    (True, 4, 2)
    """

    def __init__(self, capacity, canonicalize=None, items=None):

        if not isinstance(capacity, numbers.Integral) or isinstance(capacity, bool):
            msg = "capacity must be an integer."
            raise TypeError(msg)
        elif capacity <= 0:
            msg = "capacity must be a positive integer."
            raise ValueError(msg)

        if canonicalize is None:
            canonicalize = canonical_json
        elif not callable(canonicalize):
            msg = "canonicalize must be a function returning a string."
            raise TypeError(msg)

        self._capacity = int(capacity)
        self.canonicalize = canonicalize
        self.num_groups = 0

        self._slots = {}
        self._parent = np.empty(self._capacity, dtype=np.intp)
        self._size = np.empty(self._capacity, dtype=np.intp)

        if items is not None:
            self.register_all(items)

    def __repr__(self):
        my_str = "UnionFind: {0} of {1} items in {2} groups."
        return my_str.format(len(self), self._capacity, self.num_groups)

    def __len__(self):
        return len(self._slots)

    def __contains__(self, item):
        try:
            key = self._key(item)
        except TypeError:
            return False
        return key in self._slots

    @property
    def capacity(self):
        """The maximum number of items the registry can hold."""
        return self._capacity

    def at_capacity(self):
        """Returns whether the registry is full or not.

        Returns
        -------
        out : bool
            Returns whether another item can be registered.
        """
        return len(self._slots) >= self._capacity

    def copy(self):
        """Returns a deep copy of itself."""
        return copy.deepcopy(self)

    def register(self, item):
        """Adds ``item`` to the registry, in a group of its own.

        Parameters
        ----------
        item : object
            The item to register.

        Returns
        -------
        out : int
            The slot index assigned to ``item``. Slots are numbered
            from zero in registration order.

        Raises
        ------
        CapacityExceeded
            If the registry already holds ``capacity`` items.
        AlreadyRegistered
            If an item with the same canonical key was registered before.
        TypeError
            If ``item`` cannot be canonicalized.
        """
        if self.at_capacity():
            raise CapacityExceeded(self._capacity)

        key = self._key(item)
        if key in self._slots:
            raise AlreadyRegistered(item, key, self._slots[key])

        slot = self._add_slot(key)
        logger.debug("Registered %r at slot %d", key, slot)
        return slot

    def register_all(self, items):
        """Adds every item in ``items`` to the registry.

        Either all of the items are registered or, when any of them
        cannot be, none are.

        Parameters
        ----------
        items : iterable
            The items to register, in order.

        Returns
        -------
        out : list
            The slot index assigned to each item.

        Raises
        ------
        CapacityExceeded
            If the items do not fit in the remaining capacity.
        AlreadyRegistered
            If an item was registered before, or appears twice in
            ``items``.
        TypeError
            If an item cannot be canonicalized.
        """
        items = list(items)
        if len(self._slots) + len(items) > self._capacity:
            raise CapacityExceeded(self._capacity, len(items))

        keys = [self._key(item) for item in items]
        seen = set()
        for item, key in zip(items, keys):
            if key in self._slots:
                raise AlreadyRegistered(item, key, self._slots[key])
            if key in seen:
                raise AlreadyRegistered(item, key)
            seen.add(key)

        slots = [self._add_slot(key) for key in keys]
        logger.debug("Registered %d items, %d slots in use", len(slots), len(self))
        return slots

    def size(self, item):
        """Returns the number of items in the group that ``item`` belongs to.

        Parameters
        ----------
        item : object
            A registered item.

        Returns
        -------
        out : int
            The number of items in the group that contains ``item``.

        Raises
        ------
        Unregistered
            If ``item`` was never registered.
        """
        root = self._find_root(self._slot(item))
        return int(self._size[root])

    def union(self, a, b):
        """Merges the group that contains ``a`` with the group that
        contains ``b``.

        Parameters
        ----------
        a, b : objects
            Two registered items whose groups are to be merged.

        Raises
        ------
        Unregistered
            If ``a`` or ``b`` was never registered. Nothing is changed.
        """
        slot_a, slot_b = self._slot(a), self._slot(b)
        s1, s2 = self._find_root(slot_a), self._find_root(slot_b)
        if s1 == s2:
            return

        if self._size[s1] < self._size[s2]:
            s1, s2 = s2, s1

        self._parent[s2] = s1
        self._size[s1] += self._size[s2]
        self.num_groups -= 1
        logger.debug("Attached root %d under root %d, group size %d",
                     s2, s1, self._size[s1])

    def same_group(self, a, b):
        """Returns whether ``a`` and ``b`` belong to the same group.

        Parameters
        ----------
        a, b : objects
            Two registered items.

        Returns
        -------
        out : bool
            ``True`` if ``a`` and ``b`` are in the same group.

        Raises
        ------
        Unregistered
            If ``a`` or ``b`` was never registered.
        """
        slot_a, slot_b = self._slot(a), self._slot(b)
        return self._find_root(slot_a) == self._find_root(slot_b)

    def _key(self, item):
        key = self.canonicalize(item)
        if not isinstance(key, str):
            msg = "canonicalize must return a string, got {0}.".format(type(key).__name__)
            raise TypeError(msg)
        return key

    def _slot(self, item):
        try:
            key = self._key(item)
        except TypeError as exc:
            raise Unregistered(item, None) from exc
        try:
            return self._slots[key]
        except KeyError:
            raise Unregistered(item, key) from None

    def _add_slot(self, key):
        slot = len(self._slots)
        self._slots[key] = slot
        self._parent[slot] = slot
        self._size[slot] = 1
        self.num_groups += 1
        return slot

    def _find_root(self, slot):
        """Locates the root of ``slot``'s tree, compressing the path."""
        path = [slot]
        parent = self._parent[slot]

        while parent != self._parent[parent]:
            path.append(parent)
            parent = self._parent[parent]

        if len(path) > 1:
            self._parent[path] = parent

        return int(parent)
