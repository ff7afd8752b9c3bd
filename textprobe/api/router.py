"""Module with endpoints of the Web API."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request
from loguru import logger

from textprobe.api.data_models import (
    AnalysisRequest,
    DetectionRequest,
    DetectionResponse,
    HealthcheckResponse,
)
from textprobe.api.rate_limiter import RateLimiter
from textprobe.api.utils import get_ip_address_or_raise
from textprobe.configuration import config
from textprobe.data_models import TextAnalysisResult
from textprobe.detection.detector import TextDetector
from textprobe.detection.fusion import AiDetector
from textprobe.detection.llm_based import LLMDetector
from textprobe.detection.tuning import load_tuning_tables


def build_text_detector() -> TextDetector:
    """
    Build the detection pipeline from the configuration.

    Returns:
        TextDetector: The pipeline, with the LLM-based signal only if a key is set.
    """
    tuning_tables = load_tuning_tables(config.tuning_file)
    llm_detector = None
    if config.cerebras_api_key:
        llm_detector = LLMDetector()
    else:
        logger.warning("No Cerebras API key is set, LLM analysis is disabled.")
    return TextDetector(
        ai_detector=AiDetector(tuning_tables), llm_detector=llm_detector
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Prepare the detection pipeline and the rate limiter unless already provided."""
    if getattr(app.state, "text_detector", None) is None:
        app.state.text_detector = build_text_detector()
    if getattr(app.state, "rate_limiter", None) is None:
        app.state.rate_limiter = RateLimiter()
    logger.info(f"{config.project_name} API is ready.")
    yield
    logger.info(f"{config.project_name} API is shutting down.")


def get_text_detector(fastapi_request: Request) -> TextDetector:
    """Get the detection pipeline shared by all requests."""
    return fastapi_request.app.state.text_detector


def limit_requests(fastapi_request: Request) -> None:
    """
    Count a request of a client against its limit.

    Raises:
        HTTPException: Raised if the client exceeded the limit or cannot be identified.
    """
    rate_limiter: RateLimiter = fastapi_request.app.state.rate_limiter
    rate_limiter(get_ip_address_or_raise(fastapi_request))


router = APIRouter()


@router.get("/health")
async def healthcheck(
    text_detector: TextDetector = Depends(get_text_detector),
) -> HealthcheckResponse:
    """Report whether the API is up and if the LLM-based signal is available."""
    return HealthcheckResponse(
        is_healthy=True, llm_available=text_detector.llm_available
    )


@router.post("/analyse", dependencies=[Depends(limit_requests)])
async def analyse(
    request: AnalysisRequest,
    text_detector: TextDetector = Depends(get_text_detector),
) -> TextAnalysisResult:
    """Measure linguistic features of a text without estimating its origin."""
    return text_detector.analyse(
        request.text, request.language, sanitise_text=request.sanitise
    )


@router.post("/detect", dependencies=[Depends(limit_requests)])
async def detect(
    request: DetectionRequest,
    text_detector: TextDetector = Depends(get_text_detector),
) -> DetectionResponse:
    """Estimate the probability of a text being written by an LLM."""
    report = await text_detector.report(
        request.text,
        request.language,
        use_llm=request.use_llm,
        sanitise_text=request.sanitise,
    )
    return DetectionResponse.from_report(report)
