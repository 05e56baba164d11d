from typing import Dict, List, Mapping

from . import ALGORITHMS, MatchKernel


def run_all_algorithms(text: str, pattern: str,
                       algorithms: Mapping[str, MatchKernel] = ALGORITHMS) -> Dict[str, List[int]]:
    results = {}

    for name, kernel in algorithms.items():
        results[str(name)] = kernel(text, pattern)

    return results
