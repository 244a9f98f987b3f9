from typing import Hashable, Optional, TypeVar

from .hash_set import HashSet, _elements_of

__all__ = ['equal', 'difference', 'symmetric_difference', 'intersection', 'union']

_T = TypeVar('_T', bound=Hashable)


def equal(a: Optional[HashSet[_T]], b: Optional[HashSet[_T]]) -> bool:
    """Content equality that also accepts `None` on either side.

    `None` is only equal to `None`: it is not equal to an empty set, in
    either order.
    """
    if a is b:
        return True
    if a is None:
        return False
    return a.equal(b)


def difference(a: Optional[HashSet[_T]], b: Optional[HashSet[_T]]) -> HashSet[_T]:
    s = HashSet()
    s.add_all(a)
    s.remove_all(b)
    return s


def symmetric_difference(a: Optional[HashSet[_T]], b: Optional[HashSet[_T]]) -> HashSet[_T]:
    s = HashSet()
    s.add_all(a)
    for x in _elements_of(b):
        if s.contains(x):
            s.remove(x)
        else:
            s.add(x)
    return s


def intersection(a: Optional[HashSet[_T]], b: Optional[HashSet[_T]]) -> HashSet[_T]:
    # walk the smaller side
    if len(_elements_of(a)) > len(_elements_of(b)):
        a, b = b, a

    s = HashSet()
    for x in _elements_of(a):
        if x in _elements_of(b):
            s.add(x)
    return s


def union(a: Optional[HashSet[_T]], b: Optional[HashSet[_T]]) -> HashSet[_T]:
    s = HashSet()
    s.add_all(a)
    s.add_all(b)
    return s
