"""Entry point to the application as a Typer CLI."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from typer import Typer

from textprobe.configuration import config

app = Typer(no_args_is_help=True)

TextArgument = Annotated[
    str | None, typer.Argument(help="Text to be assessed. Use --file for long texts.")
]
FileOption = Annotated[
    Path | None,
    typer.Option(
        "--file", "-f", exists=True, dir_okay=False, help="File with the text."
    ),
]
SanitiseOption = Annotated[
    bool | None,
    typer.Option(
        "--sanitise/--no-sanitise",
        help="Remove markdown and HTML formatting before the analysis.",
    ),
]


def _read_text(text: str | None, file: Path | None) -> str:
    if (text is None) == (file is None):
        raise typer.BadParameter("Provide either a text or --file, but not both.")
    if file is not None:
        return file.read_text(encoding="utf-8")
    return text or ""


@app.command("api")
def run_api() -> None:
    """Start up the backend sharing the Web API."""
    import uvicorn

    from textprobe.api.app import create_app

    uvicorn.run(create_app(), host=config.api_host, port=config.api_port)


@app.command("analyse")
def analyse_text(
    text: TextArgument = None,
    file: FileOption = None,
    sanitise: SanitiseOption = None,
) -> None:
    """Print linguistic features of a text as JSON."""
    from textprobe.detection.detector import TextDetector

    analysis = TextDetector().analyse(_read_text(text, file), sanitise_text=sanitise)
    typer.echo(analysis.model_dump_json(indent=2))


@app.command("detect")
def detect_text(
    text: TextArgument = None,
    file: FileOption = None,
    llm: Annotated[
        bool, typer.Option("--llm", help="Blend in the estimate of a remote LLM.")
    ] = False,
    sanitise: SanitiseOption = None,
) -> None:
    """Print the probability of a text being LLM-written as JSON."""
    from textprobe.detection.detector import TextDetector
    from textprobe.detection.llm_based import LLMDetector

    llm_detector = None
    if llm:
        try:
            llm_detector = LLMDetector()
        except ValueError as e:
            logger.error(f"{e}")
            raise typer.Exit(code=1) from e

    text_detector = TextDetector(llm_detector=llm_detector)
    report = asyncio.run(
        text_detector.report(
            _read_text(text, file), use_llm=llm, sanitise_text=sanitise
        )
    )
    typer.echo(report.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
