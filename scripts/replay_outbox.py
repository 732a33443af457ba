#!/usr/bin/env python3
"""Replay failed side effects stored in the outbox."""

import asyncio
import sys

import logfire

from loop.config import Settings
from loop.domain.service import SideEffectDispatcher
from loop.util.di.container import create_container
from loop.util.logging import setup_logging
from loop.util.observability import configure_logfire


async def replay(limit: int | None) -> int:
    container = create_container()
    try:
        async with container() as request_container:
            dispatcher = await request_container.get(SideEffectDispatcher)
            report = await dispatcher.replay(limit)
    finally:
        await container.close()

    print(f"Replayed: {report.replayed}, failed: {report.failed}")
    return 0 if report.failed == 0 else 1


def main() -> int:
    """Run one outbox replay batch and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    limit = int(sys.argv[1]) if len(sys.argv) > 1 else None

    try:
        return asyncio.run(replay(limit))
    except Exception as e:
        logfire.error(
            "Outbox replay failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
