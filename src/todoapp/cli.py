"""CLI for the to-do list."""

import argparse
import logging
import sys
from pathlib import Path

from todoapp.app import TodoApp
from todoapp.config import create_app, get_default_config_path, load_config
from todoapp.render import render_text

logger = logging.getLogger(__name__)


def _alert(message: str) -> None:
    print(message, file=sys.stderr)


def _position(app: TodoApp, number: int) -> int:
    """Convert a 1-based position from the command line to a list index."""
    if not 1 <= number <= len(app.tasks):
        raise IndexError(f"No task number {number} (list has {len(app.tasks)})")
    return number - 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage a persisted to-do list.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/todo.yaml)",
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("list", help="Show all tasks")
    add = commands.add_parser("add", help="Add a task")
    add.add_argument("label", help="Task text")
    toggle = commands.add_parser("toggle", help="Mark a task done or not done")
    toggle.add_argument("number", type=int, help="Task number as shown by 'list'")
    remove = commands.add_parser("remove", help="Remove a task")
    remove.add_argument("number", type=int, help="Task number as shown by 'list'")
    return parser


def run(app: TodoApp, args: argparse.Namespace) -> int:
    """Apply one command to an activated app and print the list.

    Returns:
        Process exit code.
    """
    if args.command == "add":
        app.input_value = args.label
        if app.submit() is None:
            return 1
    elif args.command == "toggle":
        app.toggle_task(_position(app, args.number))
    elif args.command == "remove":
        app.remove_task(_position(app, args.number))

    print(render_text(app.render()))
    return 0


def main() -> None:
    """Entry point for the CLI."""
    args = build_parser().parse_args()
    config_path: Path = args.config if args.config else get_default_config_path()

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        config = load_config(config_path)
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)

    try:
        app = create_app(config, alert=_alert)
        app.activate()
        code = run(app, args)
    except (OSError, ValueError, IndexError) as e:
        logger.error(str(e))
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
