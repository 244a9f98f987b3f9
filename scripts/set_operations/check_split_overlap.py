import os
from typing import Optional

import fire
from datasets import load_from_disk

from hashset.data import split_overlap
from hashset.utils import disable_datasets_cache


def main(
    dataset_path: Optional[str] = None,
    column: str = 'id',
    left: str = 'train',
    right: str = 'test',
    flatten: bool = False,
):
    dataset_path = dataset_path or os.environ.get('HASHSET_DATASET_PATH', None)
    if dataset_path is None:
        raise ValueError('No dataset path given and HASHSET_DATASET_PATH is not set')

    with disable_datasets_cache():
        dataset = load_from_disk(dataset_path)
        overlap = split_overlap(dataset, column, left, right, flatten=flatten)

    print(f'{left}/{right} share {overlap.len()} value(s) of {column!r}')
    for x in overlap:
        print(x)


if __name__ == '__main__':
    fire.Fire(main)
