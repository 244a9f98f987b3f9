from .algebra import difference, equal, intersection, symmetric_difference, union
from .hash_set import HashSet, new, of
