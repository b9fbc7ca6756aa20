# ==============================================
# PatternAnalyzer
# ==============================================
#
# PURPOSE:
#   Turn one raw sample string into:
#     1. a pattern string (one classification symbol per character)
#     2. an ordered list of Facts (one per character)
#
# EXAMPLE:
#   "Dale, Danny" → "CvcvpSCvccc"
#   Fact for 'a': key='a', placeholder='v', prior_key='D', next_key='l',
#                 starts_with=False, ends_with=False, index_offset=1
#
# CLASS: PatternAnalyzer
# ----------------------
#   Stateless — a single instance can be shared by any number of profiles.
#
#   Methods:
#   --------
#   - analyze(sample: str) -> tuple[str, list[Fact]]
#   - pattern_of(sample: str) -> str
#
# ==============================================

from typing import List, Tuple

from shapegen.errors import InvalidInput
from shapegen.profile.fact import Fact
from .placeholder import PatternPlaceholder


class PatternAnalyzer:
    """Maps a sample to its symbolic pattern and per-character facts."""

    def __init__(self, placeholder: type = PatternPlaceholder):
        self.placeholder = placeholder

    def analyze(self, sample: str) -> Tuple[str, List[Fact]]:
        """
        Analyze one sample.

        Args:
            sample: Non-empty string to analyze

        Returns:
            (pattern, facts) where len(pattern) == len(facts) == len(sample)

        Raises:
            InvalidInput: If the sample is not a string or is empty
        """
        self._validate(sample)

        last_index = len(sample) - 1
        symbols = []
        facts = []

        for index, char in enumerate(sample):
            symbol = self.placeholder.classify(char)
            symbols.append(symbol)
            facts.append(Fact(
                key=char,
                pattern_placeholder=symbol,
                prior_key=sample[index - 1] if index > 0 else None,
                next_key=sample[index + 1] if index < last_index else None,
                starts_with=index == 0,
                ends_with=index == last_index,
                index_offset=index,
            ))

        return "".join(symbols), facts

    def pattern_of(self, sample: str) -> str:
        """Return only the pattern string for a sample."""
        self._validate(sample)
        return "".join(self.placeholder.classify(char) for char in sample)

    def _validate(self, sample: str) -> None:
        if not isinstance(sample, str):
            raise InvalidInput(f"Sample must be a string, got {type(sample).__name__}")
        if sample == "":
            raise InvalidInput("Sample must not be empty")
