"""Package with data models for the API."""

from pydantic import BaseModel, Field

from textprobe.data_models import Language
from textprobe.detection.detector import DetectionReport


class HealthcheckResponse(BaseModel):
    """Response from the healthcheck endpoint indicating the status of the system."""

    is_healthy: bool
    llm_available: bool


class AnalysisRequest(BaseModel):
    """API request for linguistic features of a text."""

    text: str
    language: Language | None = Field(
        None, description="Language of the text, detected if not provided."
    )
    sanitise: bool | None = Field(
        None, description="Whether markdown and HTML are removed before analysis."
    )


class DetectionRequest(AnalysisRequest):
    """API request for a text origin evaluation."""

    text: str = Field(..., min_length=1)
    use_llm: bool = True


class SignalResponse(BaseModel):
    """A single signal with its likelihood expressed in percent."""

    name: str
    value: float
    ai_likelihood: int
    interpretation: str


class TextStatsResponse(BaseModel):
    """Basic statistics of the assessed text."""

    total_words: int
    total_sentences: int
    unique_words: int
    vocabulary_diversity: float
    average_sentence_length: float


class DetectionResponse(BaseModel):
    """Response sent when a client requests detection in a text."""

    ai_probability: int
    confidence: float
    summary: str
    reasons: list[str]
    signals: list[SignalResponse]
    stats: TextStatsResponse
    language: Language
    is_formal: bool
    remarks: list[str]

    @classmethod
    def from_report(cls, report: DetectionReport) -> "DetectionResponse":
        """
        Flatten a detection report into the shape returned by the API.

        Args:
            report (DetectionReport): Report of the detection pipeline.

        Returns:
            DetectionResponse: The response with likelihoods in percent.
        """
        result = report.result
        analysis = result.analysis
        return cls(
            ai_probability=result.ai_probability,
            confidence=result.confidence,
            summary=result.summary,
            reasons=report.reasons,
            signals=[
                SignalResponse(
                    name=signal.name,
                    value=signal.value,
                    ai_likelihood=round(signal.ai_likelihood * 100),
                    interpretation=signal.interpretation,
                )
                for signal in result.signals
            ],
            stats=TextStatsResponse(
                total_words=analysis.total_words,
                total_sentences=analysis.total_sentences,
                unique_words=analysis.unique_words,
                vocabulary_diversity=round(analysis.vocabulary_diversity, 3),
                average_sentence_length=round(analysis.average_sentence_length, 1),
            ),
            language=analysis.language,
            is_formal=analysis.is_formal,
            remarks=report.remarks,
        )
