# matcher.py
# Routes a search to the kernel picked by a pre-analysis, or to every kernel
# when the pre-analysis has no opinion.

import logging
from typing import Dict, List, Mapping, Optional

from algorithms import ALGORITHMS, MatchKernel, UnknownAlgorithmError, get_algorithm
from algorithms.run_all import run_all_algorithms
from file_utils import read_text
from pre_analysis import PreAnalysis, analysis_from_settings
from utils import load_settings

logger = logging.getLogger(__name__)


class KernelDisagreementError(RuntimeError):
    """Raised when kernels return different offsets for the same input.

    The first kernel in registry order is the reference; ``disagreeing`` lists
    the kernels whose offsets differ from it.
    """

    def __init__(self, text, pattern, results):
        self.text = text
        self.pattern = pattern
        self.results = results
        self.reference, *others = results
        expected = results[self.reference]
        self.disagreeing = [name for name in others if results[name] != expected]
        names = ", ".join(self.disagreeing)
        super().__init__(
            f"Kernels disagree with {self.reference} on pattern {pattern!r}: {names}")


def default_analysis() -> PreAnalysis:
    return analysis_from_settings(load_settings())


def search(text: str, pattern: str,
           analysis: Optional[PreAnalysis] = None,
           registry: Mapping[str, MatchKernel] = ALGORITHMS) -> Dict[str, List[int]]:
    """Run the chosen kernel, or all of them, and key the offsets by kernel name."""
    if analysis is None:
        analysis = default_analysis()

    choice = analysis.choose_algorithm(text, pattern)
    if choice is None:
        if not registry:
            raise UnknownAlgorithmError("no kernels registered")
        logger.debug("No pre-analysis opinion, running %d kernels", len(registry))
        return run_all_algorithms(text, pattern, registry)

    if registry is ALGORITHMS:
        kernel = get_algorithm(choice)
    elif choice in registry:
        kernel = registry[choice]
    else:
        raise UnknownAlgorithmError(choice)
    logger.debug("Running %s", choice)
    return {str(choice): kernel(text, pattern)}


def find_all(text: str, pattern: str,
             analysis: Optional[PreAnalysis] = None,
             registry: Mapping[str, MatchKernel] = ALGORITHMS) -> List[int]:
    results = search(text, pattern, analysis, registry)
    outcomes = list(results.values())
    if any(offsets != outcomes[0] for offsets in outcomes[1:]):
        raise KernelDisagreementError(text, pattern, results)
    return outcomes[0]


def find_in_document(path, pattern: str,
                     analysis: Optional[PreAnalysis] = None) -> List[int]:
    return find_all(read_text(path), pattern, analysis)
