# ==============================================
# PatternPlaceholder
# ==============================================
#
# PURPOSE:
#   The classification alphabet. Every character of a sample maps to
#   exactly one symbol, and a sample's pattern is the string of those
#   symbols.
#
# ALPHABET:
#   Name              Symbol   Characters
#   ----------------  ------   ------------------------------------
#   VowelUpper        V        A E I O U
#   VowelLower        v        a e i o u
#   ConsonantUpper    C        other ASCII uppercase letters (incl. Y)
#   ConsonantLower    c        other ASCII lowercase letters (incl. y)
#   Numeric           #        0-9
#   WhiteSpace        S        space, tab, newline, ...
#   Punctuation       p        . , ; : ! ? ^ / \ - ( ) [ ] { } "
#   SpecialChar       ~        anything else (apostrophe, @, é, ...)
#   Unknown           ~        shares the SpecialChar symbol
#
# CLASS: PatternPlaceholder
# -------------------------
#   Class-level constants only; never instantiated.
#
#   Methods:
#   --------
#   - get(name) -> str        → Symbol for a name ("VowelUpper" → "V")
#   - classify(char) -> str   → Symbol for one character
#
# ==============================================

from typing import Dict


class PatternPlaceholder:
    """Symbols used to describe the shape of a string."""

    VOWEL_UPPER = "V"
    VOWEL_LOWER = "v"
    CONSONANT_UPPER = "C"
    CONSONANT_LOWER = "c"
    NUMERIC = "#"
    WHITE_SPACE = "S"
    PUNCTUATION = "p"
    SPECIAL_CHAR = "~"
    UNKNOWN = "~"

    SYMBOLS: Dict[str, str] = {
        "Unknown": UNKNOWN,
        "ConsonantUpper": CONSONANT_UPPER,
        "ConsonantLower": CONSONANT_LOWER,
        "VowelUpper": VOWEL_UPPER,
        "VowelLower": VOWEL_LOWER,
        "Numeric": NUMERIC,
        "SpecialChar": SPECIAL_CHAR,
        "WhiteSpace": WHITE_SPACE,
        "Punctuation": PUNCTUATION,
    }

    VOWELS = set("aeiou")
    ASCII_LETTERS = set("abcdefghijklmnopqrstuvwxyz")
    DIGITS = set("0123456789")
    PUNCTUATION_CHARS = set(".,;:!?^/\\-()[]{}\"")

    @classmethod
    def get(cls, name: str) -> str:
        """
        Look up a symbol by its name.

        Raises:
            KeyError: If the name is not part of the alphabet
        """
        if name not in cls.SYMBOLS:
            raise KeyError(f"Unknown placeholder name: {name!r}")
        return cls.SYMBOLS[name]

    @classmethod
    def classify(cls, char: str) -> str:
        """
        Classify a single character.

        Only ASCII letters count as vowels or consonants; accented
        letters fall through to SpecialChar.

        Args:
            char: Exactly one character

        Returns:
            The character's symbol

        Raises:
            ValueError: If `char` is not exactly one character long
        """
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")

        lowered = char.lower()
        if lowered in cls.ASCII_LETTERS:
            if lowered in cls.VOWELS:
                return cls.VOWEL_UPPER if char.isupper() else cls.VOWEL_LOWER
            return cls.CONSONANT_UPPER if char.isupper() else cls.CONSONANT_LOWER

        if char in cls.DIGITS:
            return cls.NUMERIC

        if char.isspace():
            return cls.WHITE_SPACE

        if char in cls.PUNCTUATION_CHARS:
            return cls.PUNCTUATION

        return cls.SPECIAL_CHAR
