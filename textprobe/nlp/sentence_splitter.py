"""Module for splitting a text into sentences."""

from abc import ABC, abstractmethod
from typing_extensions import override

from nltk.tokenize import RegexpTokenizer


class SentenceSplitter(ABC):
    """Interface for splitting a text into sentences."""

    @abstractmethod
    def split_into_sentences(self, text: str) -> list[str]:
        """
        Split a text into sentences.

        Args:
            text (str): Text to be split.

        Returns:
            list[str]: List of sentences, one items is one sentence. A text without
                terminal punctuation is a single sentence.
        """


class PunctuationSentenceSplitter(SentenceSplitter):
    """Splitter cutting a text at whitespace following terminal punctuation."""

    def __init__(self, terminators: str = ".!?") -> None:
        """
        Build the splitting pattern.

        Args:
            terminators (str, optional): Characters ending a sentence.
                Defaults to ".!?".
        """
        self._tokeniser = RegexpTokenizer(
            rf"(?<=[{terminators}])\s+", gaps=True, discard_empty=True
        )

    @override
    def split_into_sentences(self, text: str) -> list[str]:
        return [
            sentence
            for sentence in self._tokeniser.tokenize(text)
            if not sentence.isspace()
        ]
