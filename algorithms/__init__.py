"""Exact string matching kernels.

Every kernel has the same shape, ``kernel(text, pattern) -> list[int]``, and
returns the strictly increasing start offsets of ``pattern`` in ``text``. An
empty pattern matches at every offset ``0..len(text)``; a pattern longer than
the text matches nowhere.
"""

from enum import Enum
from types import MappingProxyType
from typing import Callable, List

from .boyer_moore import boyer_moore_search
from .go_crazy import go_crazy_search
from .kmp import kmp_search
from .naive import naive_search
from .rabin_karp import rabin_karp_search

MatchKernel = Callable[[str, str], List[int]]


class Algorithm(str, Enum):
    NAIVE = "Naive"
    KMP = "KMP"
    RABIN_KARP = "RabinKarp"
    BOYER_MOORE = "BoyerMoore"
    GO_CRAZY = "GoCrazy"

    def __str__(self):
        return self.value


class UnknownAlgorithmError(KeyError):
    pass


ALGORITHMS = MappingProxyType({
    Algorithm.NAIVE: naive_search,
    Algorithm.KMP: kmp_search,
    Algorithm.RABIN_KARP: rabin_karp_search,
    Algorithm.BOYER_MOORE: boyer_moore_search,
    Algorithm.GO_CRAZY: go_crazy_search,
})


def get_algorithm(name) -> MatchKernel:
    """Look up a kernel by ``Algorithm`` member or its string value."""
    try:
        return ALGORITHMS[Algorithm(name)]
    except ValueError:
        raise UnknownAlgorithmError(name) from None


__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "MatchKernel",
    "UnknownAlgorithmError",
    "boyer_moore_search",
    "get_algorithm",
    "go_crazy_search",
    "kmp_search",
    "naive_search",
    "rabin_karp_search",
]
