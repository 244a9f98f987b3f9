from typing import Hashable, Optional

from datasets import Dataset, DatasetDict
from tqdm.auto import tqdm

from ..hash_set import HashSet
from ..algebra import intersection
from ..utils import to_hashable

__all__ = ['column_to_set', 'split_overlap']


def column_to_set(
    dataset: Dataset,
    column: str,
    flatten: bool = False,
    desc: Optional[str] = None,
) -> HashSet[Hashable]:
    """Collects the distinct values of one column.

    With `flatten`, each row is expected to hold a list and every item of it
    is added instead of the list itself.
    """
    s = HashSet()
    values = dataset[column]
    for x in tqdm(values, desc=desc or f'Collecting {column}', leave=False):
        if flatten:
            for y in x:
                s.add(to_hashable(y))
        else:
            s.add(to_hashable(x))
    return s


def split_overlap(
    dataset_dict: DatasetDict,
    column: str,
    left: str = 'train',
    right: str = 'test',
    flatten: bool = False,
    desc: Optional[str] = None,
) -> HashSet[Hashable]:
    desc = desc or 'Collecting'
    a = column_to_set(dataset_dict[left], column, flatten, desc=f'{desc} {left}/{column}')
    b = column_to_set(dataset_dict[right], column, flatten, desc=f'{desc} {right}/{column}')
    return intersection(a, b)
