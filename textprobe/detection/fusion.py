"""Module fusing weighted signals into a single AI probability."""

from loguru import logger

from textprobe.data_models import (
    AiDetectionResult,
    DetectionSignal,
    Language,
    TextAnalysisResult,
)
from textprobe.detection.interpretations import SUMMARY_TEMPLATES, Verdict
from textprobe.detection.signals import analyse_llm_signal, analyse_signal
from textprobe.detection.tuning import LLM_SIGNAL, TuningTables, load_tuning_tables

# (minimum words, multiplier) pairs checked in order; longer texts are trusted more.
CONFIDENCE_STEPS: tuple[tuple[int, float], ...] = ((200, 1.0), (100, 0.95), (50, 0.85))
SHORT_TEXT_CONFIDENCE = 0.7


def calculate_confidence_multiplier(total_words: int) -> float:
    """
    Get a confidence multiplier for a text of a given length.

    Args:
        total_words (int): Number of words in the text.

    Returns:
        float: 0.7 below 50 words, 0.85 below 100, 0.95 below 200 and 1.0 otherwise.
    """
    for min_words, multiplier in CONFIDENCE_STEPS:
        if total_words >= min_words:
            return multiplier
    return SHORT_TEXT_CONFIDENCE


def fuse(signals: list[DetectionSignal], weights: dict[str, float]) -> float:
    """
    Average likelihoods of signals weighted by their weights.

    Weights are renormalised over the signals actually present, so a missing
    optional signal only changes the denominator.

    Args:
        signals (list[DetectionSignal]): Signals to be combined.
        weights (dict[str, float]): Mapping of signal keys to their weights.

    Returns:
        float: Weighted mean likelihood in [0, 1], 0.0 if there is no weight.
    """
    total_weight = sum(weights[signal.key] for signal in signals)
    if total_weight <= 0:
        return 0.0
    score = sum(signal.ai_likelihood * weights[signal.key] for signal in signals)
    return score / total_weight


class AiDetector:
    """Fusion engine turning features into a calibrated AI probability."""

    top_signals_in_summary = 3

    def __init__(self, tuning_tables: TuningTables | None = None) -> None:
        """
        Initialise the detector with thresholds and weights of signals.

        Args:
            tuning_tables (TuningTables | None, optional): Tables with signal rules.
                The configured tables are loaded if not provided. Defaults to None.
        """
        self._tables = tuning_tables or load_tuning_tables()

    def calculate_ai_probability(
        self, analysis: TextAnalysisResult, llm_probability: int | None = None
    ) -> AiDetectionResult:
        """
        Combine signals of a text into the probability of it being LLM-written.

        Args:
            analysis (TextAnalysisResult): Features of the text.
            llm_probability (int | None, optional): An LLM-based estimate in percent,
                expected in [0, 100]. Its weight is left out if not provided.
                Defaults to None.

        Returns:
            AiDetectionResult: Probability in percent, the confidence multiplier,
                signals that produced it and a summary.
        """
        confidence = calculate_confidence_multiplier(analysis.total_words)
        language = analysis.language
        if analysis.total_words == 0:
            return AiDetectionResult(
                ai_probability=0,
                confidence=confidence,
                analysis=analysis,
                summary=SUMMARY_TEMPLATES[language]["insufficient"],
            )

        rules = self._tables.get_rules(language, analysis.formality_branch)
        signals = [
            analyse_signal(key, getattr(analysis, rule.feature), rule, language)
            for key, rule in rules.items()
            if rule.feature is not None
        ]
        if llm_probability is not None:
            signals.append(
                analyse_llm_signal(llm_probability, rules[LLM_SIGNAL], language)
            )

        score = fuse(signals, {key: rule.weight for key, rule in rules.items()})
        probability = max(0, min(100, round(score * 100 * confidence)))
        logger.debug(
            f"Fused {len(signals)} signals ({language}, "
            f"{analysis.formality_branch}) into score {score:.3f}, "
            f"probability {probability}%."
        )

        return AiDetectionResult(
            ai_probability=probability,
            confidence=confidence,
            signals=signals,
            analysis=analysis,
            summary=self._summarise(probability, signals, language),
        )

    def _summarise(
        self, probability: int, signals: list[DetectionSignal], language: Language
    ) -> str:
        # Signals furthest from the undecided 0.5 explain the verdict best.
        top_signals = sorted(
            signals, key=lambda signal: abs(signal.ai_likelihood - 0.5), reverse=True
        )[: self.top_signals_in_summary]
        factors = ", ".join(signal.name.lower() for signal in top_signals)

        verdict: Verdict
        if probability >= 70:
            verdict = "high"
        elif probability >= 40:
            verdict = "mixed"
        else:
            verdict = "human"
        return SUMMARY_TEMPLATES[language][verdict].format(factors=factors)
