"""Module with project-wide data models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

Language = Literal["english", "greek"]
FormalityBranch = Literal["default", "formal", "informal"]
ChatRole = Literal["assistant", "user", "system"]


class TextAnalysisResult(BaseModel):
    """
    Linguistic features measured in a single text.

    Ratios are in the range [0, 1] apart from burstiness, which lies in [-1, 1].
    Variances, counts and the register rates (hits per 100 words or per sentence)
    are non-negative. The register features are only measured for Greek texts.
    """

    burstiness: float = 0.0
    vocabulary_diversity: float = Field(0.0, ge=0.0, le=1.0)
    sentence_length_variance: float = Field(0.0, ge=0.0)
    average_sentence_length: float = Field(0.0, ge=0.0)
    word_length_variance: float = Field(0.0, ge=0.0)
    punctuation_density: float = Field(0.0, ge=0.0, le=1.0)
    repetition_score: float = Field(0.0, ge=0.0, le=1.0)
    sentence_starter_diversity: float = Field(0.0, ge=0.0, le=1.0)
    contraction_ratio: float = Field(0.0, ge=0.0, le=1.0)
    personal_pronoun_ratio: float = Field(0.0, ge=0.0, le=1.0)
    total_words: int = Field(0, ge=0)
    total_sentences: int = Field(0, ge=0)
    unique_words: int = Field(0, ge=0)

    language: Language = "english"
    is_formal: bool = False

    generic_attribution_rate: float = Field(0.0, ge=0.0)
    hedging_rate: float = Field(0.0, ge=0.0)
    transition_rate: float = Field(0.0, ge=0.0)
    overformal_ratio: float = Field(0.0, ge=0.0, le=1.0)
    filler_rate: float = Field(0.0, ge=0.0)
    abbreviation_rate: float = Field(0.0, ge=0.0)
    colloquial_rate: float = Field(0.0, ge=0.0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def is_greek(self) -> bool:
        """Whether the text was analysed with the Greek profile."""
        return self.language == "greek"

    @property
    def formality_branch(self) -> FormalityBranch:
        """
        Get the branch of signals that applies to the text.

        Returns:
            FormalityBranch: `default` for English, `formal` or `informal`
                for Greek.
        """
        if self.language != "greek":
            return "default"
        return "formal" if self.is_formal else "informal"


class DetectionSignal(BaseModel):
    """A single feature mapped to a likelihood of the text being LLM-written."""

    key: str
    name: str
    value: float
    ai_likelihood: float = Field(..., ge=0.0, le=1.0)
    interpretation: str

    model_config = ConfigDict(frozen=True)


class AiDetectionResult(BaseModel):
    """Final verdict of the detection combined from all signals."""

    ai_probability: int = Field(..., ge=0, le=100)
    confidence: float = Field(..., gt=0.0, le=1.0)
    signals: list[DetectionSignal] = []
    analysis: TextAnalysisResult = TextAnalysisResult()
    summary: str = ""

    model_config = ConfigDict(frozen=True)


class ChatMessage(BaseModel):
    """Chat message exchanged between a user and an LLM."""

    message: str
    role: ChatRole

    def to_dict(self) -> dict[str, str]:
        """
        Convert a message to an OpenAI-compatible dictionary.

        Returns:
            dict[str, str]: Message as a dictionary.
        """
        return {"content": self.message, "role": self.role}
