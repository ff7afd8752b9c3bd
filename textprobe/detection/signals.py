"""Module mapping measured features to AI-likelihood signals."""

from textprobe.data_models import DetectionSignal, Language
from textprobe.detection.interpretations import Band, get_signal_texts
from textprobe.detection.tuning import LLM_SIGNAL, SignalRule


def clamp(value: float, lowest: float = 0.0, highest: float = 1.0) -> float:
    """
    Clamp a value to an inclusive range.

    Args:
        value (float): The value to be clamped.
        lowest (float, optional): Lower bound. Defaults to 0.0.
        highest (float, optional): Upper bound. Defaults to 1.0.

    Returns:
        float: The value within [lowest, highest].
    """
    return max(lowest, min(highest, value))


def classify(value: float, rule: SignalRule) -> tuple[Band, float]:
    """
    Find the band of a value and the AI-likelihood it implies.

    Args:
        value (float): Raw value of the feature.
        rule (SignalRule): Thresholds of the signal.

    Returns:
        tuple[Band, float]: The band and the unclamped likelihood.
    """
    if rule.direction == "low":
        distance = rule.ai_threshold - value
        human_typical = rule.human_threshold is None or value > rule.human_threshold
    else:
        distance = value - rule.ai_threshold
        human_typical = rule.human_threshold is None or value < rule.human_threshold

    if distance > 0:
        return ("ai", rule.ai_base + distance * rule.ai_slope)
    if human_typical:
        return ("human", rule.human_likelihood)
    return ("neutral", rule.neutral_likelihood)


def analyse_signal(
    key: str, value: float, rule: SignalRule, language: Language
) -> DetectionSignal:
    """
    Map a feature value to a signal.

    Args:
        key (str): Key of the signal in the tuning tables.
        value (float): Raw value of the feature.
        rule (SignalRule): Thresholds of the signal for the language and branch.
        language (Language): Language of the interpretation.

    Returns:
        DetectionSignal: The signal with the likelihood clamped to [0, 1].
    """
    band, likelihood = classify(value, rule)
    texts = get_signal_texts(key, language)
    return DetectionSignal(
        key=key,
        name=texts.name,
        value=round(value * rule.value_scale, rule.value_digits),
        ai_likelihood=clamp(likelihood),
        interpretation=texts.interpret(band),
    )


def analyse_llm_signal(
    llm_probability: int, rule: SignalRule, language: Language
) -> DetectionSignal:
    """
    Wrap an LLM-based estimate as a signal.

    The estimate is expected in the range [0, 100]. Validating it is up to
    the caller, the likelihood is only clamped.

    Args:
        llm_probability (int): Probability of the text being LLM-written estimated
            by an LLM, in percent.
        rule (SignalRule): Interpretation thresholds of the `llm` signal.
        language (Language): Language of the interpretation.

    Returns:
        DetectionSignal: The signal with the likelihood `llm_probability / 100`.
    """
    if llm_probability > rule.ai_threshold:
        band: Band = "ai"
    elif rule.human_threshold is not None and llm_probability > rule.human_threshold:
        band = "neutral"
    else:
        band = "human"

    texts = get_signal_texts(LLM_SIGNAL, language)
    return DetectionSignal(
        key=LLM_SIGNAL,
        name=texts.name,
        value=llm_probability,
        ai_likelihood=clamp(llm_probability / 100),
        interpretation=texts.interpret(band),
    )
