"""Module with natural language tokenisers."""

import re
from abc import ABC, abstractmethod
from typing_extensions import override

from nltk.tokenize import RegexpTokenizer


class Tokeniser(ABC):
    """An interface of a natural language word tokeniser."""

    @abstractmethod
    def tokenise(self, text: str) -> list[str]:
        """
        Split a text into words.

        Args:
            text (str): A text to be split.

        Returns:
            list[str]: Words in the order of appearance, with their original case.
        """


# Curly apostrophes would split contractions like "don’t" and elisions like
# "παρ’" in two.
QUOTE_MAP: dict[str, str] = {
    "‘": "'",  # left single quotation mark to straight (')
    "’": "'",  # right single quotation mark to straight (')
}

# Letters of the Greek Extended block, without its spacing accents and breathings.
GREEK_EXTENDED_LETTERS = (
    "\u1f00-\u1fbc\u1fbe\u1fc2-\u1fcc\u1fd0-\u1fdb\u1fe0-\u1fec\u1ff2-\u1ffc"
)


def normalise_apostrophes(text: str) -> str:
    """
    Replace typographic apostrophes with straight ones.

    Args:
        text (str): Text possibly typed with curly quotation marks.

    Returns:
        str: The text with only straight apostrophes.
    """
    for old, new in QUOTE_MAP.items():
        text = text.replace(old, new)
    return text


class EnglishTokeniser(Tokeniser):
    """Tokeniser matching runs of ASCII letters and apostrophes."""

    def __init__(self) -> None:
        """Compile the word pattern."""
        self._tokeniser = RegexpTokenizer(r"\b[a-zA-Z']+\b")

    @override
    def tokenise(self, text: str) -> list[str]:
        return self._tokeniser.tokenize(normalise_apostrophes(text))


class GreekTokeniser(Tokeniser):
    """Tokeniser matching runs of Greek (monotonic and polytonic) and Latin letters."""

    def __init__(self) -> None:
        """Compile the case-insensitive word pattern."""
        self._tokeniser = RegexpTokenizer(
            rf"[a-zα-ωάέήίϊϋόύώΐΰ{GREEK_EXTENDED_LETTERS}]+",
            flags=re.UNICODE | re.IGNORECASE,
        )

    @override
    def tokenise(self, text: str) -> list[str]:
        return self._tokeniser.tokenize(text)
