# ==============================================
# Fact
# ==============================================
#
# PURPOSE:
#   Data class that holds what was observed about ONE character of
#   ONE sample: its classification symbol, where it sat in the sample
#   and which characters surrounded it. This is the "evidence" the
#   profile uses to rebuild strings.
#
# CLASS: Fact (dataclass)
# -----------------------
#   Attributes:
#   -----------
#   - key: str                    → The character itself ('a', '1', '%', ...)
#   - pattern_placeholder: str    → Its classification symbol ('v', '#', '~', ...)
#   - prior_key: str | None       → Character right before it (None at index 0)
#   - next_key: str | None        → Character right after it (None at the end)
#   - starts_with: bool           → True iff index_offset == 0
#   - ends_with: bool             → True iff it is the last character
#   - index_offset: int           → 0-based position in the sample
#
#   Methods:
#   --------
#   - matches(placeholder, starts_with, ends_with, index_offset) -> bool
#       The structural filter used while reconstructing a pattern.
#
#   - to_dict() / from_dict(data)   → Plain dict (de)serialization
#   - to_json() / from_json(text)   → JSON string (de)serialization
#
# ==============================================

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from shapegen.errors import InvalidInput


@dataclass
class Fact:
    """
    A single character's classification plus positional metadata.

    Example: the 'r' in "word" is
        Fact(key="r", pattern_placeholder="c", prior_key="o", next_key="d",
             starts_with=False, ends_with=False, index_offset=2)
    """

    # --- Core identity ---
    key: str  # The character this fact describes
    pattern_placeholder: str  # Classification symbol of the character

    # --- Neighbours (taken from the raw sample, not the pattern) ---
    prior_key: Optional[str] = None
    next_key: Optional[str] = None

    # --- Position ---
    starts_with: bool = False
    ends_with: bool = False
    index_offset: int = 0

    def matches(
        self,
        placeholder: str,
        starts_with: bool,
        ends_with: bool,
        index_offset: int
    ) -> bool:
        """
        Check whether this fact can fill a pattern position.

        Args:
            placeholder: Symbol required at the position
            starts_with: Whether the position is the first one
            ends_with: Whether the position is the last one
            index_offset: 0-based index of the position

        Returns:
            True if every structural attribute agrees
        """
        return (
            self.pattern_placeholder == placeholder
            and self.starts_with == starts_with
            and self.ends_with == ends_with
            and self.index_offset == index_offset
        )

    # ======================================
    # Serialization
    # ======================================
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the fact to a JSON-serializable dictionary.

        Returns:
            Dictionary holding all seven fields
        """
        return {
            "key": self.key,
            "prior_key": self.prior_key,
            "next_key": self.next_key,
            "pattern_placeholder": self.pattern_placeholder,
            "starts_with": self.starts_with,
            "ends_with": self.ends_with,
            "index_offset": self.index_offset,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Fact":
        """
        Reconstruct a Fact from a dictionary.

        Older archives stored starts_with / ends_with as 0/1;
        those are accepted and turned into booleans.

        Args:
            data: Dictionary produced by to_dict()

        Returns:
            A Fact instance

        Raises:
            InvalidInput: If a required field is missing or has the wrong shape
        """
        try:
            key = data["key"]
            placeholder = data["pattern_placeholder"]
            index_offset = int(data["index_offset"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInput(f"Malformed fact data: {e}")

        if not isinstance(key, str) or len(key) != 1:
            raise InvalidInput(f"Fact key must be a single character, got {key!r}")
        if index_offset < 0:
            raise InvalidInput(f"index_offset must be non-negative, got {index_offset}")

        return cls(
            key=key,
            pattern_placeholder=placeholder,
            prior_key=data.get("prior_key"),
            next_key=data.get("next_key"),
            starts_with=bool(data.get("starts_with", False)),
            ends_with=bool(data.get("ends_with", False)),
            index_offset=index_offset,
        )

    def to_json(self) -> str:
        """Serialize the fact to a compact JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_json(cls, serialized: str) -> "Fact":
        """
        Reconstruct a Fact from a JSON string (used when restoring from an archive).

        Raises:
            InvalidInput: If the text is not valid JSON for a fact
        """
        try:
            data = json.loads(serialized)
        except (TypeError, json.JSONDecodeError) as e:
            raise InvalidInput(f"Fact is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise InvalidInput("Fact JSON must be an object")
        return cls.from_dict(data)
