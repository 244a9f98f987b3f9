from typing import (Dict, Hashable, Iterable, Iterator, List, MutableSet,
                    Optional, Generic, TypeVar)

from typing_extensions import Self

__all__ = ['HashSet', 'new', 'of']

_T = TypeVar('_T', bound=Hashable)

_EMPTY: Dict = {}


def _elements_of(s: Optional['HashSet']) -> Dict:
    # `None` and a set without storage both read as empty
    if s is None or s._elements is None:
        return _EMPTY
    return s._elements


class HashSet(MutableSet[_T], Generic[_T]):
    """An unordered collection of unique hashable values.

    A freshly constructed instance owns no storage; the backing dict is
    allocated by the first write. Every argument that names another set may
    also be `None`, which reads as an empty set.
    """

    def __init__(self, iterable: Optional[Iterable[_T]] = None) -> None:
        self._elements: Optional[Dict[_T, None]] = None

        if iterable is not None:
            for x in iterable:
                self.add(x)

    @classmethod
    def of(cls, *elements: _T) -> Self:
        return cls(elements)

    def len(self) -> int:
        return len(_elements_of(self))

    def is_empty(self) -> bool:
        return self.len() == 0

    def contains(self, element: _T) -> bool:
        return element in _elements_of(self)

    def contains_all(self, other: Optional['HashSet[_T]']) -> bool:
        return _contains_all(self, other)

    def equal(self, other: Optional['HashSet[_T]']) -> bool:
        """Content equality. A `None` argument is never equal to a set."""
        if self is other:
            return True
        if other is None or self.len() != other.len():
            return False
        return self.contains_all(other)

    def is_subset_of(self, other: Optional['HashSet[_T]']) -> bool:
        if self.len() > len(_elements_of(other)):
            return False
        return _contains_all(other, self)

    def is_proper_subset_of(self, other: Optional['HashSet[_T]']) -> bool:
        if self.len() >= len(_elements_of(other)):
            return False
        return _contains_all(other, self)

    def is_superset_of(self, other: Optional['HashSet[_T]']) -> bool:
        if self.len() < len(_elements_of(other)):
            return False
        return self.contains_all(other)

    def is_proper_superset_of(self, other: Optional['HashSet[_T]']) -> bool:
        if self.len() <= len(_elements_of(other)):
            return False
        return self.contains_all(other)

    def as_list(self) -> List[_T]:
        """All elements, in no particular order."""
        return list(_elements_of(self))

    def add(self, element: _T) -> None:
        if self._elements is None:
            self._elements = {}
        self._elements[element] = None

    def add_all(self, other: Optional['HashSet[_T]']) -> None:
        for x in _elements_of(other):
            self.add(x)

    def remove(self, element: _T) -> None:
        if self._elements is not None:
            self._elements.pop(element, None)

    def discard(self, element: _T) -> None:
        self.remove(element)

    def remove_all(self, other: Optional['HashSet[_T]']) -> None:
        for x in list(_elements_of(other)):
            self.remove(x)

    def copy(self) -> Self:
        return self.__class__(_elements_of(self))

    def __contains__(self, x: object) -> bool:
        return x in _elements_of(self)

    def __len__(self) -> int:
        return self.len()

    def __iter__(self) -> Iterator[_T]:
        return iter(_elements_of(self))

    def __repr__(self) -> str:
        if self.is_empty():
            return f'{self.__class__.__name__}()'
        return f'{self.__class__.__name__}({self.as_list()!r})'


def _contains_all(s: Optional[HashSet], other: Optional[HashSet]) -> bool:
    elements = _elements_of(s)
    return all(x in elements for x in _elements_of(other))


def new() -> HashSet:
    return HashSet()


def of(*elements: _T) -> HashSet[_T]:
    return HashSet(elements)
