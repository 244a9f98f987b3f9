import json
import sys
from typing import Optional, TextIO

import fire
from tqdm.auto import tqdm

from hashset import (HashSet, difference, equal, intersection,
                     symmetric_difference, union)

OPERATIONS = {
    'union': union,
    'intersection': intersection,
    'difference': difference,
    'symmetric_difference': symmetric_difference,
}

RELATIONS = {
    'subset': HashSet.is_subset_of,
    'proper_subset': HashSet.is_proper_subset_of,
    'superset': HashSet.is_superset_of,
    'proper_superset': HashSet.is_proper_superset_of,
    'equal': equal,
}


def to_element(value) -> str:
    # canonical JSON text keeps `true`, `1` and `1.0` apart and objects intact
    return json.dumps(value, sort_keys=True, ensure_ascii=False)


def read_elements(path: str) -> HashSet:
    s = HashSet()
    with open(path, encoding='utf-8') as f:
        for l in tqdm(f, desc=f'Reading {path}', leave=False):
            if not l.strip():
                continue
            s.add(to_element(json.loads(l)))
    return s


def write_elements(s: HashSet, f: TextIO):
    for x in s:
        f.write(x + '\n')


def main(
    op: str,
    left: str,
    right: str,
    output_path: Optional[str] = None,
):
    if op not in OPERATIONS and op not in RELATIONS:
        raise ValueError(f'Unknown operation {op!r}, expected one of {sorted([*OPERATIONS, *RELATIONS])}')
    if op in RELATIONS and output_path is not None:
        raise ValueError(f'{op!r} prints a bool and does not take an output path')

    a = read_elements(left)
    b = read_elements(right)

    if op in RELATIONS:
        print(RELATIONS[op](a, b))
        return

    result = OPERATIONS[op](a, b)
    if output_path is None:
        write_elements(result, sys.stdout)
        return

    with open(output_path, 'w', encoding='utf-8') as f:
        write_elements(result, f)


if __name__ == '__main__':
    fire.Fire(main)
