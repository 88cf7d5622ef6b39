"""
Parallel batch factorization.

Uses multiprocessing to fan independent factorize calls out across CPU
cores and fans the keyed results back into one dict.

Failure policy: the first error raised by any unit propagates to the
caller. Leaving the Pool context terminates the workers, which drops any
outstanding units; no partial result is returned.
"""

from multiprocessing import Pool, cpu_count
from typing import Dict, Iterable, List, Tuple

from .factorization import factorize
from .widths import DEFAULT_WIDTH, WidthLike, width_for


def _factorize_unit(args: Tuple[int, str]) -> Tuple[int, List[int]]:
    """Process a single input: return (n, factors of n)."""
    n, width_name = args
    return n, factorize(n, width_name)


def factorize_all(numbers: Iterable[int], num_workers: int = None,
                  width: WidthLike = DEFAULT_WIDTH,
                  verbose: bool = False) -> Dict[int, List[int]]:
    """
    Factorize every number concurrently.

    Parameters
    ----------
    numbers : iterable of int
        Inputs; duplicates collapse to one entry.
    num_workers : int, optional
        Number of parallel workers. Defaults to CPU count, never more than
        the number of distinct inputs.
    width : str or np.dtype
        Integer width every input is interpreted in.
    verbose : bool
        Print progress lines.

    Returns
    -------
    dict
        Maps each input to its factor list. Iteration order follows the
        dict, not the order units finished in.

    Raises
    ------
    InvalidNumber, IntegerOverflow
        The first failure reported by any unit.
    """
    width_name = width_for(width).name
    distinct = list(dict.fromkeys(numbers))
    if not distinct:
        return {}

    if num_workers is None:
        num_workers = cpu_count()
    num_workers = max(1, min(num_workers, len(distinct)))

    if verbose:
        print(f"    Factorizing {len(distinct)} numbers with {num_workers} workers...")

    tasks = [(n, width_name) for n in distinct]
    results: Dict[int, List[int]] = {}
    with Pool(num_workers) as pool:
        for n, factors in pool.imap_unordered(_factorize_unit, tasks):
            results[n] = factors

    if verbose:
        print(f"    Collected {len(results)} factorizations")

    return results
