"""Input tokenizer shared by all three interpreter modes."""

import re

_SEPARATORS = re.compile(r"[\s,:;]+")

# Words skipped wherever a meaningful word is expected
FILLER_WORDS = frozenset({"the", "to", "at"})


def tokenize(line: str) -> list[str]:
    """Lowercase a line and split it on whitespace, commas, colons and semicolons."""
    return [word for word in _SEPARATORS.split(line.strip().lower()) if word]


def meaningful(words: list[str]) -> list[str]:
    """Drop filler words."""
    return [word for word in words if word not in FILLER_WORDS]


def first_word(words: list[str]) -> str | None:
    """Return the first non-filler word, or None."""
    for word in words:
        if word not in FILLER_WORDS:
            return word
    return None
