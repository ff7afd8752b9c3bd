"""Module extracting linguistic features from a text."""

import math
import statistics
import unicodedata

from loguru import logger

from textprobe.analysis.profiles import LanguageProfile, get_profile
from textprobe.data_models import Language, TextAnalysisResult
from textprobe.nlp.language import detect_language


class TextAnalyser:
    """Feature extractor turning a raw text into `TextAnalysisResult`."""

    # Fewer words make n-gram statistics meaningless.
    min_words_for_repetition = 10

    def analyse(self, text: str, language: Language | None = None) -> TextAnalysisResult:
        """
        Measure linguistic features of a text.

        Args:
            text (str): The text to be analysed.
            language (Language | None, optional): Language of the text. Detected
                from the script of the text if not provided. Defaults to None.

        Raises:
            ValueError: Raised if an unsupported language is provided explicitly.

        Returns:
            TextAnalysisResult: Features of the text. An all-zero result is returned
                for empty or whitespace-only texts.
        """
        if not text or text.isspace():
            return TextAnalysisResult()

        # Decomposed accents would otherwise split words.
        text = unicodedata.normalize("NFC", text)

        profile = get_profile(language or detect_language(text))
        sentences = profile.split_into_sentences(text)
        words = profile.extract_words(text)
        lowercased_words = [word.lower() for word in words]
        lowercased_text = text.lower()
        sentence_lengths = [
            len(profile.extract_words(sentence)) for sentence in sentences
        ]

        analysis = TextAnalysisResult(
            burstiness=self._burstiness(sentence_lengths),
            vocabulary_diversity=self._vocabulary_diversity(lowercased_words),
            sentence_length_variance=self._variance(sentence_lengths),
            average_sentence_length=(
                statistics.fmean(sentence_lengths) if sentence_lengths else 0.0
            ),
            word_length_variance=self._variance([len(word) for word in words]),
            punctuation_density=self._punctuation_density(text),
            repetition_score=self._repetition_score(lowercased_words),
            sentence_starter_diversity=self._sentence_starter_diversity(
                sentences, profile
            ),
            contraction_ratio=profile.contraction_ratio(lowercased_words),
            personal_pronoun_ratio=profile.personal_pronoun_ratio(lowercased_words),
            total_words=len(words),
            total_sentences=len(sentences),
            unique_words=len(set(lowercased_words)),
            language=profile.language,
            is_formal=profile.is_formal(lowercased_text, lowercased_words),
            **profile.register_features(lowercased_text, lowercased_words, sentences),
        )
        logger.debug(
            f"Analysed {analysis.total_words} words in {analysis.total_sentences} "
            f"sentences ({analysis.language}, formal: {analysis.is_formal})."
        )
        return analysis

    def _burstiness(self, sentence_lengths: list[int]) -> float:
        # (σ - μ) / (σ + μ): -1 for perfectly uniform, towards 1 for bursty texts.
        if len(sentence_lengths) < 2:
            return 0.0
        mean = statistics.fmean(sentence_lengths)
        standard_deviation = math.sqrt(statistics.pvariance(sentence_lengths, mean))
        if standard_deviation + mean == 0:
            return 0.0
        return (standard_deviation - mean) / (standard_deviation + mean)

    def _variance(self, values: list[int]) -> float:
        if len(values) < 2:
            return 0.0
        return float(statistics.pvariance(values))

    def _vocabulary_diversity(self, lowercased_words: list[str]) -> float:
        # Type-token ratio.
        if not lowercased_words:
            return 0.0
        return len(set(lowercased_words)) / len(lowercased_words)

    def _punctuation_density(self, text: str) -> float:
        punctuation = sum(
            unicodedata.category(character).startswith("P") for character in text
        )
        return punctuation / len(text)

    def _repetition_score(self, lowercased_words: list[str]) -> float:
        if len(lowercased_words) < self.min_words_for_repetition:
            return 0.0

        bigrams = list(zip(lowercased_words, lowercased_words[1:], strict=False))
        trigrams = list(
            zip(
                lowercased_words,
                lowercased_words[1:],
                lowercased_words[2:],
                strict=False,
            )
        )
        bigram_repetition = 1.0 - len(set(bigrams)) / len(bigrams)
        trigram_repetition = 1.0 - len(set(trigrams)) / len(trigrams)
        # Repeated trigrams are a stronger cue than repeated bigrams.
        return (bigram_repetition + 2 * trigram_repetition) / 3

    def _sentence_starter_diversity(
        self, sentences: list[str], profile: LanguageProfile
    ) -> float:
        if len(sentences) < 2:
            return 1.0

        starters = []
        for sentence in sentences:
            words = profile.extract_words(sentence)
            if words:
                starters.append(words[0].lower())

        if not starters:
            return 1.0
        return len(set(starters)) / len(starters)
