"""Unit tests for mapping features to signals."""

import pytest

from textprobe.detection.interpretations import get_signal_texts
from textprobe.detection.signals import (
    analyse_llm_signal,
    analyse_signal,
    clamp,
    classify,
)
from textprobe.detection.tuning import LLM_SIGNAL, SignalRule, TuningTables


@pytest.fixture
def vocabulary_rule(tuning_tables: TuningTables) -> SignalRule:
    """Provide the English vocabulary diversity rule."""
    return tuning_tables.get_rules("english", "default")["vocabulary_diversity"]


@pytest.fixture
def repetition_rule(tuning_tables: TuningTables) -> SignalRule:
    """Provide the English repetition rule."""
    return tuning_tables.get_rules("english", "default")["repetition"]


@pytest.fixture
def llm_rule(tuning_tables: TuningTables) -> SignalRule:
    """Provide the English LLM rule."""
    return tuning_tables.get_rules("english", "default")[LLM_SIGNAL]


@pytest.mark.unit
class TestClassify:
    """Test banding of feature values."""

    def test_low_value_is_ai(self, vocabulary_rule: SignalRule) -> None:
        """Test values below the threshold grow more AI-like with distance."""
        band, likelihood = classify(0.3, vocabulary_rule)

        assert band == "ai"
        assert likelihood == pytest.approx(0.75)

    def test_threshold_itself_is_not_ai(self, vocabulary_rule: SignalRule) -> None:
        """Test the threshold belongs to the neutral band."""
        assert classify(0.45, vocabulary_rule) == ("neutral", 0.45)

    def test_between_thresholds_is_neutral(self, vocabulary_rule: SignalRule) -> None:
        """Test values between both thresholds are neutral."""
        assert classify(0.5, vocabulary_rule) == ("neutral", 0.45)
        assert classify(0.6, vocabulary_rule) == ("neutral", 0.45)

    def test_high_value_is_human(self, vocabulary_rule: SignalRule) -> None:
        """Test values beyond the human threshold are human-like."""
        assert classify(0.8, vocabulary_rule) == ("human", 0.3)

    def test_high_direction(self, repetition_rule: SignalRule) -> None:
        """Test rules where high values are AI-like."""
        band, likelihood = classify(0.2, repetition_rule)

        assert band == "ai"
        assert likelihood == pytest.approx(1.1)
        assert classify(0.05, repetition_rule) == ("human", 0.3)


@pytest.mark.unit
class TestAnalyseSignal:
    """Test construction of signals."""

    def test_likelihood_is_clamped(self, repetition_rule: SignalRule) -> None:
        """Test likelihoods past 1.0 are clamped."""
        signal = analyse_signal("repetition", 0.2, repetition_rule, "english")

        assert signal.ai_likelihood == 1.0
        assert signal.interpretation == "Repetitive phrasing patterns detected"

    def test_value_is_scaled_for_display(self, vocabulary_rule: SignalRule) -> None:
        """Test ratios are displayed in percent."""
        signal = analyse_signal(
            "vocabulary_diversity", 0.4567, vocabulary_rule, "english"
        )

        assert signal.value == pytest.approx(45.7)
        assert signal.name == "Vocabulary Diversity"
        assert signal.key == "vocabulary_diversity"

    def test_greek_interpretation(self, vocabulary_rule: SignalRule) -> None:
        """Test the language selects the interpretation texts."""
        signal = analyse_signal("vocabulary_diversity", 0.8, vocabulary_rule, "greek")

        assert signal.name == get_signal_texts("vocabulary_diversity", "greek").name
        assert signal.interpretation == "Πλούσιο λεξιλόγιο, ένδειξη ανθρώπινης γραφής"

    def test_unknown_signal_texts(self) -> None:
        """Test signals without texts are reported."""
        with pytest.raises(KeyError, match="sparkle"):
            get_signal_texts("sparkle", "english")


@pytest.mark.unit
class TestAnalyseLLMSignal:
    """Test wrapping LLM estimates as signals."""

    @pytest.mark.parametrize(
        ("probability", "likelihood", "interpretation"),
        [
            (75, 0.75, "LLM detected AI-like patterns in writing style"),
            (50, 0.5, "LLM found mixed signals in writing patterns"),
            (40, 0.4, "LLM detected human-like writing patterns"),
            (10, 0.1, "LLM detected human-like writing patterns"),
        ],
    )
    def test_buckets(
        self,
        llm_rule: SignalRule,
        probability: int,
        likelihood: float,
        interpretation: str,
    ) -> None:
        """Test the estimate is bucketed by the thresholds."""
        signal = analyse_llm_signal(probability, llm_rule, "english")

        assert signal.key == LLM_SIGNAL
        assert signal.value == probability
        assert signal.ai_likelihood == pytest.approx(likelihood)
        assert signal.interpretation == interpretation

    @pytest.mark.parametrize(("probability", "likelihood"), [(150, 1.0), (-5, 0.0)])
    def test_out_of_range_estimates_are_clamped(
        self, llm_rule: SignalRule, probability: int, likelihood: float
    ) -> None:
        """Test likelihoods of invalid estimates stay within [0, 1]."""
        signal = analyse_llm_signal(probability, llm_rule, "english")

        assert signal.ai_likelihood == likelihood


@pytest.mark.unit
class TestClamp:
    """Test clamping of values."""

    @pytest.mark.parametrize(
        ("value", "expected"), [(-0.5, 0.0), (0.5, 0.5), (1.5, 1.0)]
    )
    def test_default_range(self, value: float, expected: float) -> None:
        """Test values are clamped to [0, 1] by default."""
        assert clamp(value) == expected

    def test_custom_range(self) -> None:
        """Test custom bounds."""
        assert clamp(150, 0, 100) == 100
