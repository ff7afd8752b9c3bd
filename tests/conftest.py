"""Shared pytest fixtures for textprobe tests.

Provides sample texts, tuning tables and a fake LLM detector.
"""

from typing import Any

import pytest

from textprobe.analysis.features import TextAnalyser
from textprobe.detection.fusion import AiDetector
from textprobe.detection.llm_based import LLMVerdict
from textprobe.detection.tuning import (
    DEFAULT_TUNING_FILE,
    TuningTables,
    load_tuning_tables,
)

# ============================================================================
# Fake LLM Detector
# ============================================================================


class FakeLLMDetector:
    """LLM detector returning a fixed verdict without calling any API."""

    def __init__(
        self,
        score: int = 80,
        reasons: list[str] | None = None,
        error: Exception | None = None,
    ) -> None:
        """Initialise the fake.

        Args:
            score: Score returned by `estimate`.
            reasons: Reasons returned by `estimate`.
            error: Exception raised by `estimate` instead of returning a verdict.
        """
        self.score = score
        self.reasons = reasons if reasons is not None else ["Formulaic transitions"]
        self.error = error
        self.call_count = 0
        self.last_text: str | None = None

    async def estimate(self, text: str) -> LLMVerdict:
        """Return the configured verdict or raise the configured error."""
        self.call_count += 1
        self.last_text = text
        if self.error is not None:
            raise self.error
        return LLMVerdict(score=self.score, reasons=self.reasons)


@pytest.fixture
def fake_llm_detector() -> FakeLLMDetector:
    """Provide a fake LLM detector estimating 80%."""
    return FakeLLMDetector()


@pytest.fixture
def fake_llm_detector_class() -> type[FakeLLMDetector]:
    """Provide the fake class for tests needing custom verdicts or errors."""
    return FakeLLMDetector


# ============================================================================
# Pipeline Fixtures
# ============================================================================


@pytest.fixture
def analyser() -> TextAnalyser:
    """Provide a feature extractor."""
    return TextAnalyser()


@pytest.fixture
def tuning_tables() -> TuningTables:
    """Provide the tables shipped with the package."""
    return load_tuning_tables(DEFAULT_TUNING_FILE)


@pytest.fixture
def ai_detector(tuning_tables: TuningTables) -> AiDetector:
    """Provide a fusion engine with the packaged tables."""
    return AiDetector(tuning_tables)


def _minimal_branch() -> dict[str, Any]:
    return {
        "burstiness": {
            "feature": "burstiness",
            "weight": 0.5,
            "ai_threshold": -0.2,
            "ai_base": 0.9,
            "human_likelihood": 0.2,
        },
        "llm": {
            "weight": 0.2,
            "direction": "high",
            "ai_threshold": 60,
            "human_threshold": 40,
        },
    }


@pytest.fixture
def minimal_tables_data() -> dict[str, Any]:
    """Provide raw tables with a single statistical signal per branch."""
    return {
        "english": {"default": _minimal_branch()},
        "greek": {"formal": _minimal_branch(), "informal": _minimal_branch()},
    }


@pytest.fixture
def minimal_tables(minimal_tables_data: dict[str, Any]) -> TuningTables:
    """Provide validated tables with a single statistical signal per branch."""
    return TuningTables.model_validate(minimal_tables_data)


# ============================================================================
# Sample Texts
# ============================================================================


@pytest.fixture
def english_human_text() -> str:
    """Provide a casual English text with contractions and varied sentences."""
    return (
        "I don't really know why I bothered. The bus was late again, "
        "so I walked. Rain. Lots of it! My shoes are still soaked and "
        "honestly I'm not even mad anymore, it's just funny at this point. "
        "Tomorrow I'll take the bike, if it hasn't been stolen yet."
    )


@pytest.fixture
def english_ai_text() -> str:
    """Provide a uniform, formal English text."""
    return (
        "Artificial intelligence is transforming modern industries today. "
        "Furthermore, it enables organizations to optimize their processes. "
        "Moreover, it provides valuable insights for strategic decisions. "
        "Additionally, it supports innovation across many different sectors. "
        "Consequently, businesses are investing heavily in these technologies."
    )


@pytest.fixture
def greek_formal_text() -> str:
    """Provide a formal Greek text with hedging, transitions and lofty words."""
    return (
        "Είναι σημαντικό να σημειωθεί ότι η τεχνητή νοημοσύνη αποτελεί καίριο "
        "ζήτημα. Επιπλέον, σύμφωνα με τους ειδικούς, η αξιοποίηση των δεδομένων "
        "είναι θεμελιώδης. Συνεπώς, απαιτείται ολιστική προσέγγιση."
    )


@pytest.fixture
def greek_informal_text() -> str:
    """Provide a casual Greek text with fillers and colloquialisms."""
    return (
        "Έλα ρε, τι κάνεις; Δηλαδή δεν ήρθες χθες, χαχα!! Εντάξει, πες μου "
        "πότε είσαι ελεύθερος, βασικά θέλω να τα πούμε."
    )
