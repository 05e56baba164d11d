# pre_analysis.py
# Algorithm selection: looks at a (text, pattern) pair and names the kernel
# expected to be fastest, without running any of them.

import logging
from typing import Optional, Protocol

from algorithms import Algorithm

logger = logging.getLogger(__name__)

# Characteristic checks never look past this many pattern characters.
SAMPLE_SIZE = 64


class UnknownPreAnalysisError(KeyError):
    pass


class PreAnalysis(Protocol):
    def choose_algorithm(self, text: str, pattern: str) -> Optional[Algorithm]:
        """Return the kernel to run, or None to run all of them."""
        ...

    def get_strategy_description(self) -> str:
        ...


class SmartRoutingAnalysis:
    """Hierarchical rule set with a fixed, sample-bounded analysis cost.

    1. Trivial inputs: empty text or pattern -> Naive, pattern longer than
       text -> RabinKarp.
    2. Micro patterns (length <= 4) -> GoCrazy; smarter kernels cost more to
       set up than they save.
    3. Content: at most two distinct characters in the sample -> KMP; any
       non-ASCII character in the sample -> RabinKarp.
    4. Length > 20 with more than 15 distinct sampled characters -> BoyerMoore;
       pattern longer than half the text -> GoCrazy.
    5. Otherwise Naive.
    """

    def __init__(self, sample_size=SAMPLE_SIZE):
        self.sample_size = sample_size

    def choose_algorithm(self, text, pattern):
        choice = self._route(text, pattern)
        logger.debug("Routing n=%d m=%d to %s", len(text), len(pattern), choice)
        return choice

    def _route(self, text, pattern):
        n = len(text)
        m = len(pattern)

        if m == 0 or n == 0:
            return Algorithm.NAIVE
        if m > n:
            return Algorithm.RABIN_KARP

        if m <= 4:
            return Algorithm.GO_CRAZY

        sample = pattern[:self.sample_size]
        if self.is_highly_repetitive(sample):
            return Algorithm.KMP
        if self.contains_non_ascii(sample):
            return Algorithm.RABIN_KARP

        if m > 20 and len(set(sample)) > 15:
            return Algorithm.BOYER_MOORE
        if m > n // 2:
            return Algorithm.GO_CRAZY

        return Algorithm.NAIVE

    @staticmethod
    def is_highly_repetitive(sample):
        # Only one- and two-symbol alphabets count; "abcabc" does not.
        if len(sample) <= 2:
            return False
        return len(set(sample)) <= 2

    @staticmethod
    def contains_non_ascii(sample):
        return any(ord(c) > 127 for c in sample)

    def get_strategy_description(self):
        return ("Smart Routing: micro patterns go to GoCrazy, repetitive patterns to KMP, "
                "non-ASCII patterns to RabinKarp, long diverse patterns to BoyerMoore and "
                "patterns longer than half the text to GoCrazy; everything else runs Naive. "
                f"Content checks sample at most {self.sample_size} pattern characters.")


class ExamplePreAnalysis:
    """Simple length-and-prefix heuristic kept for comparison."""

    def choose_algorithm(self, text, pattern):
        if len(pattern) <= 3:
            return Algorithm.NAIVE
        if self._has_repeating_prefix(pattern):
            return Algorithm.KMP
        if len(pattern) > 10 and len(text) > 1000:
            return Algorithm.RABIN_KARP
        return Algorithm.NAIVE

    @staticmethod
    def _has_repeating_prefix(pattern):
        if len(pattern) < 2:
            return False
        return pattern[:5].count(pattern[0]) >= 3

    def get_strategy_description(self):
        return "Example strategy: choose based on pattern length and characteristics"


class InstructorPreAnalysis:
    """Reference variant for testing: never has an opinion, so every kernel runs."""

    def choose_algorithm(self, text, pattern):
        return None

    def get_strategy_description(self):
        return "Instructor's testing implementation"


PRE_ANALYSES = {
    "smart": SmartRoutingAnalysis,
    "example": ExamplePreAnalysis,
    "instructor": InstructorPreAnalysis,
}

DEFAULT_PRE_ANALYSIS = "smart"


def get_pre_analysis(name=DEFAULT_PRE_ANALYSIS, **options) -> PreAnalysis:
    try:
        factory = PRE_ANALYSES[name]
    except KeyError:
        raise UnknownPreAnalysisError(name) from None
    return factory(**options)


def analysis_from_settings(settings) -> PreAnalysis:
    """Build the pre-analysis named in a settings dict (see utils.load_settings)."""
    name = settings.get("pre_analysis", DEFAULT_PRE_ANALYSIS)
    if name == "smart":
        return get_pre_analysis(name, sample_size=settings.get("sample_size", SAMPLE_SIZE))
    return get_pre_analysis(name)


_default = SmartRoutingAnalysis()


def choose_algorithm(text, pattern):
    return _default.choose_algorithm(text, pattern)


def get_strategy_description():
    return _default.get_strategy_description()
