"""Module assembling the FastAPI application."""

from api_analytics.fastapi import Analytics, Config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from textprobe.api.rate_limiter import RateLimiter
from textprobe.api.router import lifespan
from textprobe.api.router import router as main_router
from textprobe.api.utils import get_ip_address_or_raise
from textprobe.configuration import config
from textprobe.detection.detector import TextDetector

description = """
**textprobe** estimates how likely it is that a text was written by an LLM.

## Features

- English and Greek texts, the language is detected automatically.
- Formal and informal Greek registers are scored with separate signals.
- Optional LLM-based signal blended with the statistical ones.
- Every verdict comes with the signals and a summary explaining it.
"""


def create_app(
    text_detector: TextDetector | None = None,
    rate_limiter: RateLimiter | None = None,
) -> FastAPI:
    """
    Create the application serving the Web API under `/v1`.

    Args:
        text_detector (TextDetector | None, optional): Detection pipeline. Built from
            the configuration at startup if not provided. Defaults to None.
        rate_limiter (RateLimiter | None, optional): Limiter of requests per client.
            Built from the configuration at startup if not provided.
            Defaults to None.

    Returns:
        FastAPI: The application.
    """
    fastapi_app = FastAPI(
        title=config.project_name,
        summary="Detection of LLM-written English and Greek texts.",
        description=description,
        lifespan=lifespan,
        docs_url="/v1/docs",
        openapi_url="/v1/openapi.json",
        redoc_url="/v1/redoc",
    )
    fastapi_app.state.text_detector = text_detector
    fastapi_app.state.rate_limiter = rate_limiter

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # API usage analytics.
    if config.apianalyticsdev_api_key:
        analytics_config = Config()
        analytics_config.get_ip_address = get_ip_address_or_raise
        fastapi_app.add_middleware(
            Analytics,
            api_key=config.apianalyticsdev_api_key,
            config=analytics_config,
        )

    @fastapi_app.get("/")
    async def root() -> RedirectResponse:
        """Redirect root to docs."""
        return RedirectResponse(url="/v1/docs")

    @fastapi_app.get("/v1")
    async def root_v1() -> RedirectResponse:
        """Redirect /v1 to docs."""
        return RedirectResponse(url="/v1/docs")

    fastapi_app.include_router(main_router, prefix="/v1")
    return fastapi_app
