from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from flyprovider.app import create_app, delete_app, import_app, read_app, update_app
from flyprovider.common.state_file import StateFileError, load_state, remove_state, save_state
from flyprovider.config import ConfigurationError, configure_logging
from flyprovider.domain.diagnostics import Diagnostics, Severity

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from flyprovider.domain.model import ResourceState

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage Fly applications")
    subparsers = parser.add_subparsers(dest="command", required=True)

    app = subparsers.add_parser("app", help="Application lifecycle commands")
    app_sub = app.add_subparsers(dest="app_command", required=True)

    create = app_sub.add_parser("create", help="Create an application")
    create.add_argument("--name", type=str, required=True, help="Name of the application")
    create.add_argument(
        "--org",
        type=str,
        help="Organization slug (defaults to the personal organization)",
    )

    app_sub.add_parser("read", help="Refresh the tracked application from the API")

    update = app_sub.add_parser("update", help="Validate a planned change")
    update.add_argument("--name", type=str, help="Planned application name")
    update.add_argument("--org", type=str, help="Planned organization slug")

    app_sub.add_parser("delete", help="Delete the tracked application")

    import_ = app_sub.add_parser("import", help="Start tracking an existing application")
    import_.add_argument("identifier", type=str, help="Name of the existing application")

    for sub in app_sub.choices.values():
        sub.add_argument(
            "--state",
            type=Path,
            required=True,
            help="JSON file holding the tracked application state",
        )

    return parser.parse_args(list(argv))


def _require_state(path: Path) -> ResourceState:
    state = load_state(path)
    if state is None:
        raise ValueError(f"No application is tracked in {path}")
    return state


def _require_untracked(path: Path) -> None:
    state = load_state(path)
    if state is not None:
        raise ValueError(f"{path} already tracks application {state.name!r}")


def _run(args: argparse.Namespace) -> Diagnostics:  # noqa: PLR0911
    path: Path = args.state
    command = args.app_command

    if command == "create":
        _require_untracked(path)
        created = create_app(name=args.name, organization=args.org)
        if created.state is not None:
            save_state(path, created.state)
            log.info("Tracking application %s in %s", created.state.name, path)
        return created.diagnostics

    if command == "read":
        refreshed = read_app(_require_state(path))
        if refreshed.removed:
            remove_state(path)
            log.info("Application no longer exists; removed %s", path)
        elif refreshed.state is not None:
            save_state(path, refreshed.state)
        return refreshed.diagnostics

    if command == "update":
        updated = update_app(_require_state(path), name=args.name, organization=args.org)
        return updated.diagnostics

    if command == "delete":
        deleted = delete_app(_require_state(path))
        remove_state(path)
        return deleted.diagnostics

    if command == "import":
        _require_untracked(path)
        imported = import_app(args.identifier)
        if imported.state is not None:
            save_state(path, imported.state)
            log.info("Imported application %s into %s", imported.state.name, path)
        return imported.diagnostics

    raise ValueError(f"Unsupported command: {command}")


def _report(diagnostics: Diagnostics) -> None:
    for diagnostic in diagnostics:
        level = logging.ERROR if diagnostic.severity is Severity.ERROR else logging.WARNING
        if diagnostic.detail:
            log.log(level, "%s: %s", diagnostic.summary, diagnostic.detail)
        else:
            log.log(level, "%s", diagnostic.summary)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        diagnostics = _run(parsed_args)
    except (ConfigurationError, StateFileError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while managing application")
        sys.exit(1)

    _report(diagnostics)
    if diagnostics.has_error():
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
