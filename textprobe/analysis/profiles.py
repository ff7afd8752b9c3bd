"""
Module with language profiles.

A profile bundles everything that differs between supported languages: word and
sentence segmentation, closed word lists and the register features. Adding
a language means adding a profile here and its tables to `profiles.toml`.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing_extensions import override

import emoji

from textprobe.data_models import Language
from textprobe.lexicon import english, greek
from textprobe.nlp.sentence_splitter import PunctuationSentenceSplitter
from textprobe.nlp.tokeniser import (
    EnglishTokeniser,
    GreekTokeniser,
    Tokeniser,
    normalise_apostrophes,
)


def _ratio(hits: int, total: int) -> float:
    return hits / total if total else 0.0


def _count_phrases(text: str, phrases: Iterable[str]) -> int:
    return sum(text.count(phrase) for phrase in phrases)


def _count_present_phrases(text: str, phrases: Iterable[str]) -> int:
    return sum(phrase in text for phrase in phrases)


def _count_tokens(words: list[str], vocabulary: frozenset[str]) -> int:
    return sum(word in vocabulary for word in words)


class LanguageProfile(ABC):
    """An interface for language-specific text processing rules."""

    language: Language
    _tokeniser: Tokeniser
    _sentence_splitter: PunctuationSentenceSplitter

    def extract_words(self, text: str) -> list[str]:
        """
        Extract words from a text keeping their original case.

        Args:
            text (str): Text to be tokenised.

        Returns:
            list[str]: Words in the order of appearance.
        """
        return self._tokeniser.tokenise(text)

    def split_into_sentences(self, text: str) -> list[str]:
        """
        Split a text into sentences.

        Args:
            text (str): Text to be split.

        Returns:
            list[str]: Non-blank sentences.
        """
        return self._sentence_splitter.split_into_sentences(text)

    @abstractmethod
    def contraction_ratio(self, words: list[str]) -> float:
        """
        Get a fraction of words being contractions.

        Args:
            words (list[str]): Lowercased words of the text.

        Returns:
            float: The ratio in the range [0, 1].
        """

    @abstractmethod
    def personal_pronoun_ratio(self, words: list[str]) -> float:
        """
        Get a fraction of words being personal pronouns.

        Args:
            words (list[str]): Lowercased words of the text.

        Returns:
            float: The ratio in the range [0, 1].
        """

    @abstractmethod
    def register_features(
        self, text: str, words: list[str], sentences: list[str]
    ) -> dict[str, float]:
        """
        Measure register-specific features of the text.

        Args:
            text (str): Lowercased raw text.
            words (list[str]): Lowercased words of the text.
            sentences (list[str]): Sentences of the text.

        Returns:
            dict[str, float]: Mapping of `TextAnalysisResult` field names to values.
                Empty if the profile has no register features.
        """

    @abstractmethod
    def is_formal(self, text: str, words: list[str]) -> bool:
        """
        Classify the register of the text.

        Args:
            text (str): Lowercased raw text.
            words (list[str]): Lowercased words of the text.

        Returns:
            bool: Whether the formal branch of signals applies.
        """


class EnglishProfile(LanguageProfile):
    """Profile of English texts."""

    language: Language = "english"

    def __init__(self) -> None:
        """Initialise English tokenisation rules."""
        self._tokeniser = EnglishTokeniser()
        self._sentence_splitter = PunctuationSentenceSplitter(".!?")

    @override
    def contraction_ratio(self, words: list[str]) -> float:
        return _ratio(_count_tokens(words, english.CONTRACTIONS), len(words))

    @override
    def personal_pronoun_ratio(self, words: list[str]) -> float:
        return _ratio(_count_tokens(words, english.PERSONAL_PRONOUNS), len(words))

    @override
    def register_features(
        self, text: str, words: list[str], sentences: list[str]
    ) -> dict[str, float]:
        return {}

    @override
    def is_formal(self, text: str, words: list[str]) -> bool:
        # English has a single branch of signals.
        return False


class GreekProfile(LanguageProfile):
    """Profile of Greek texts with the informal and formal registers."""

    language: Language = "greek"

    def __init__(self) -> None:
        """Initialise Greek tokenisation rules, `;` is the Greek question mark."""
        self._tokeniser = GreekTokeniser()
        self._sentence_splitter = PunctuationSentenceSplitter(".!?;\u037e")

    @override
    def contraction_ratio(self, words: list[str]) -> float:
        return 0.0

    @override
    def personal_pronoun_ratio(self, words: list[str]) -> float:
        return _ratio(_count_tokens(words, greek.PERSONAL_PRONOUNS), len(words))

    @override
    def register_features(
        self, text: str, words: list[str], sentences: list[str]
    ) -> dict[str, float]:
        text = normalise_apostrophes(text)
        per_hundred_words = 100 / len(words) if words else 0.0
        colloquial_hits = (
            _count_phrases(text, greek.COLLOQUIAL_EXPRESSIONS)
            + _count_phrases(text, greek.COLLOQUIAL_PUNCTUATION)
            + emoji.emoji_count(text)
        )
        return {
            "generic_attribution_rate": (
                _count_phrases(text, greek.GENERIC_ATTRIBUTION_PHRASES)
                * per_hundred_words
            ),
            "hedging_rate": (
                _count_phrases(text, greek.HEDGING_PHRASES) * per_hundred_words
            ),
            "transition_rate": _ratio(
                _count_phrases(text, greek.TRANSITIONAL_PHRASES), len(sentences)
            ),
            "overformal_ratio": _ratio(
                _count_tokens(words, greek.OVERFORMAL_WORDS), len(words)
            ),
            "filler_rate": _count_phrases(text, greek.FILLER_WORDS) * per_hundred_words,
            "abbreviation_rate": (
                _count_tokens(words, greek.ABBREVIATIONS) * per_hundred_words
            ),
            "colloquial_rate": _ratio(colloquial_hits, len(sentences)),
        }

    @override
    def is_formal(self, text: str, words: list[str]) -> bool:
        text = normalise_apostrophes(text)
        tokens = set(words)
        informal_markers = (
            _count_present_phrases(text, greek.FILLER_WORDS)
            + len(tokens & greek.ABBREVIATIONS)
            + _count_present_phrases(text, greek.COLLOQUIAL_EXPRESSIONS)
        )
        formal_markers = (
            _count_present_phrases(text, greek.HEDGING_PHRASES)
            + len(tokens & greek.OVERFORMAL_WORDS)
            + _count_present_phrases(text, greek.TRANSITIONAL_PHRASES)
        )
        return formal_markers >= informal_markers


_PROFILES: dict[Language, LanguageProfile] = {
    "english": EnglishProfile(),
    "greek": GreekProfile(),
}


def get_profile(language: Language) -> LanguageProfile:
    """
    Get the processing profile of a language.

    Args:
        language (Language): The language of the text.

    Raises:
        ValueError: Raised if the language is not supported.

    Returns:
        LanguageProfile: The shared, stateless profile of the language.
    """
    if language not in _PROFILES:
        raise ValueError(
            f"Unsupported language `{language}`. "
            f"Supported languages: {', '.join(_PROFILES)}."
        )
    return _PROFILES[language]
