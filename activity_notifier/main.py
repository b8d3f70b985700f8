"""Command line entry point for the activity notifier."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional, Sequence

import click
import httpx
from pydantic import ValidationError

from .application.pipeline import PipelineResult
from .platform.wiring import provide_pipeline
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


async def run(
    settings: Settings,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> PipelineResult:
    """Run the pipeline once and return its result."""
    async with provide_pipeline(settings, transport=transport) as pipeline:
        return await pipeline()


@click.command()
@click.pass_context
def cli(ctx: click.Context) -> int:
    """Post the latest Strava activity to the configured webhook."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)
        # Only field names: the rejected input carries credentials.
        fields = ", ".join(".".join(map(str, error["loc"])) for error in exc.errors())
        logger.error("Invalid configuration: missing or invalid %s", fields)
        return 1
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, stream=sys.stderr)

    transport = (ctx.obj or {}).get("transport")
    result = asyncio.run(run(settings, transport=transport))

    if not result.ok:
        logger.error(
            "Pipeline failed while %s: %s", result.failed_stage.value, result.error
        )
        return 1

    logger.info("Posted activity %s: %s", result.activity.id, result.message.text)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """Invoke the Click command and propagate its exit code."""
    args = list(argv) if argv is not None else None

    try:
        return cli.main(
            args=args,
            prog_name="activity-notifier",
            standalone_mode=False,
            obj={"transport": transport},
        )
    except click.exceptions.Exit as exc:  # pragma: no cover - --help
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return 1
