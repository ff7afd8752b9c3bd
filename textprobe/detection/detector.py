"""Module with the detection pipeline combining statistics and an LLM estimate."""

from cerebras.cloud.sdk import APIError
from loguru import logger
from pydantic import BaseModel

from textprobe.analysis.features import TextAnalyser
from textprobe.configuration import config
from textprobe.data_models import AiDetectionResult, Language, TextAnalysisResult
from textprobe.detection.fusion import AiDetector
from textprobe.detection.llm_based import LLMDetector
from textprobe.nlp.sanitiser import sanitise


class DetectionReport(BaseModel):
    """Detection result together with reasons given by the LLM and remarks."""

    result: AiDetectionResult
    reasons: list[str] = []
    remarks: list[str] = []


class TextDetector:
    """Pipeline from a raw text to the probability of it being LLM-written."""

    def __init__(
        self,
        analyser: TextAnalyser | None = None,
        ai_detector: AiDetector | None = None,
        llm_detector: LLMDetector | None = None,
        *,
        sanitise_by_default: bool = config.sanitise_by_default,
    ) -> None:
        """
        Initialise stages of the pipeline.

        Args:
            analyser (TextAnalyser | None, optional): Feature extractor.
                Defaults to a new `TextAnalyser`.
            ai_detector (AiDetector | None, optional): Fusion engine.
                Defaults to an `AiDetector` with the configured tuning tables.
            llm_detector (LLMDetector | None, optional): Source of the optional
                LLM-based signal. LLM estimates are skipped if not provided.
                Defaults to None.
            sanitise_by_default (bool, optional): Whether markdown and HTML are
                removed when a call does not say otherwise. Defaults to the value
                from the configuration.
        """
        self._analyser = analyser or TextAnalyser()
        self._ai_detector = ai_detector or AiDetector()
        self._llm_detector = llm_detector
        self._sanitise_by_default = sanitise_by_default

    @property
    def llm_available(self) -> bool:
        """Whether the LLM-based signal can be requested."""
        return self._llm_detector is not None

    def _prepare(self, text: str, sanitise_text: bool | None) -> str:
        if sanitise_text is None:
            sanitise_text = self._sanitise_by_default
        return sanitise(text) if sanitise_text else text

    def analyse(
        self,
        text: str,
        language: Language | None = None,
        *,
        sanitise_text: bool | None = None,
    ) -> TextAnalysisResult:
        """
        Extract linguistic features of a text.

        Args:
            text (str): The text to be analysed.
            language (Language | None, optional): Language of the text, detected
                if not provided. Defaults to None.
            sanitise_text (bool | None, optional): Whether to remove formatting
                first. Defaults to the detector's setting.

        Returns:
            TextAnalysisResult: Features of the text.
        """
        return self._analyser.analyse(self._prepare(text, sanitise_text), language)

    def detect(
        self,
        text: str,
        llm_probability: int | None = None,
        language: Language | None = None,
        *,
        sanitise_text: bool | None = None,
    ) -> AiDetectionResult:
        """
        Estimate the probability of a text being LLM-written.

        Args:
            text (str): The text to be assessed.
            llm_probability (int | None, optional): Externally computed LLM estimate
                in percent, expected in [0, 100]. Defaults to None.
            language (Language | None, optional): Language of the text, detected
                if not provided. Defaults to None.
            sanitise_text (bool | None, optional): Whether to remove formatting
                first. Defaults to the detector's setting.

        Returns:
            AiDetectionResult: The fused verdict.
        """
        analysis = self.analyse(text, language, sanitise_text=sanitise_text)
        return self._ai_detector.calculate_ai_probability(analysis, llm_probability)

    async def report(
        self,
        text: str,
        language: Language | None = None,
        *,
        use_llm: bool = True,
        sanitise_text: bool | None = None,
    ) -> DetectionReport:
        """
        Estimate the probability, blending in the estimate of the remote LLM.

        Falls back to statistics only if there is no LLM detector, the text has no
        words or the LLM cannot be queried. Remarks explain every fallback and
        a reduced confidence.

        Args:
            text (str): The text to be assessed.
            language (Language | None, optional): Language of the text, detected
                if not provided. Defaults to None.
            use_llm (bool, optional): Whether to query the LLM. Defaults to True.
            sanitise_text (bool | None, optional): Whether to remove formatting
                first. Defaults to the detector's setting.

        Returns:
            DetectionReport: The fused verdict with LLM reasons and remarks.
        """
        prepared_text = self._prepare(text, sanitise_text)
        analysis = self._analyser.analyse(prepared_text, language)
        remarks: list[str] = []
        reasons: list[str] = []
        llm_probability = None

        if use_llm and self._llm_detector is None:
            remarks.append("LLM analysis is not configured, statistics only are used.")
        elif use_llm and analysis.total_words == 0:
            remarks.append("The text has no words to analyse.")
        elif use_llm and self._llm_detector is not None:
            try:
                verdict = await self._llm_detector.estimate(prepared_text)
            except (APIError, ValueError) as e:
                logger.warning(f"LLM analysis failed, using statistics only: {e}")
                remarks.append("LLM analysis failed, statistics only are used.")
            else:
                llm_probability = verdict.score
                reasons = verdict.reasons

        result = self._ai_detector.calculate_ai_probability(analysis, llm_probability)
        if result.confidence < 1.0:
            remarks.append(
                f"The text is short ({analysis.total_words} words), so the "
                f"probability was scaled by {result.confidence}. Texts of at least "
                "200 words give the most reliable results."
            )
        return DetectionReport(result=result, reasons=reasons, remarks=remarks)
