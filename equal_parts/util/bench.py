from time import perf_counter

import pandas as pd

from equal_parts.data.partition import split_into, into_equal_parts

DEFAULT_SIZES = [100, 1000, 10000, 100000]
DEFAULT_PART_COUNTS = [2, 4, 8, 16, 32]


def time_split(data, num_parts: int, owned: bool, repeats: int) -> float:
    """Average seconds to split data and collect every part."""
    split = into_equal_parts if owned else split_into
    start = perf_counter()
    for _ in range(repeats):
        list(split(data, num_parts))
    return (perf_counter() - start) / repeats


def run_benchmarks(sizes=None, part_counts=None, repeats: int = 10) -> pd.DataFrame:
    sizes = DEFAULT_SIZES if sizes is None else sizes
    part_counts = DEFAULT_PART_COUNTS if part_counts is None else part_counts

    rows = []
    for size in sizes:
        data = list(range(size))
        for num_parts in part_counts:
            for variant, owned in (("view", False), ("owned", True)):
                seconds = time_split(data, num_parts, owned, repeats)
                rows.append(
                    {
                        "variant": variant,
                        "size": size,
                        "num_parts": num_parts,
                        "seconds": seconds,
                    }
                )
    return pd.DataFrame(rows, columns=["variant", "size", "num_parts", "seconds"])
