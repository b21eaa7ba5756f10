"""CLI for the news view."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx
from pydantic import BaseModel, field_validator

from newsapp.config import NewsAppConfig, create_view, get_default_config_path, load_config
from newsapp.render import render_text
from newsapp.view import NewsView

logger = logging.getLogger(__name__)

PROMPT = "Search for news... "


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str | None = None
    config: Path

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def show(view: NewsView) -> None:
    print(render_text(view.render()))


def interactive(runner: asyncio.Runner, view: NewsView) -> None:
    """Activate the view, then submit each line read from stdin as a query.

    Lines are read on the main thread between searches, so Ctrl-C at the
    prompt interrupts right away.
    """
    runner.run(view.activate())
    show(view)
    while True:
        try:
            line = input(f"\n{PROMPT}")
        except EOFError:
            break
        if line.strip().lower() == "exit":
            break
        view.set_query(line)
        runner.run(view.submit())
        show(view)


def run(args: CLIArgs, config: NewsAppConfig) -> None:
    """Run a single search, or the interactive loop when no query was given.

    Args:
        args: Validated CLI arguments.
        config: Loaded configuration.
    """
    with asyncio.Runner() as runner:
        client = httpx.AsyncClient(timeout=None)
        try:
            view = create_view(config, client=client)
            if args.query is None:
                interactive(runner, view)
                return
            view.set_query(args.query)
            runner.run(view.submit())
            show(view)
        finally:
            runner.run(client.aclose())


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Search news articles and show them as cards.")
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search query (omit for an interactive session)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/news.yaml)",
    )
    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        args = CLIArgs(query=ns.query, config=config_path)
        config = load_config(args.config)
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    logging.getLogger().setLevel(config.logging.level)

    try:
        run(args, config)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
