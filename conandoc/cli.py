"""CLI entrypoint for conandoc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.text import Text

from .config import load_config
from .errors import ConanDocError
from .logging import configure_logging, get_logger
from .models import PipelineRequest
from .orchestrator import Orchestrator
from .progress import StageReporter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conandoc",
        description="Generate Doxygen documentation for a Conan package and its dependencies.",
    )
    parser.add_argument(
        "package",
        help="Path to conan package (or a package reference understood by conan).",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Path to output folder (defaults to <package>/build/docs/<name>_<version>).",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        help="Open generated documentation in the default viewer.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .conandoc.yml file or the directory containing it.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write a debug log, including every external command, to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for conandoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")
    console = Console()
    err_console = Console(stderr=True)

    try:
        config = load_config(args.config)
        orchestrator = Orchestrator(config, reporter=StageReporter(console))
        orchestrator.run(
            PipelineRequest(reference=args.package, out=args.out, open_viewer=bool(args.open))
        )
    except ConanDocError as exc:
        logger.debug("Pipeline aborted", exc_info=True)
        err_console.print(Text(f"conandoc failed: {exc}", style="red"))
        if exc.hint:
            err_console.print(Text(exc.hint, style="yellow"))
        if not args.verbose:
            err_console.print(Text("Run with --verbose for more details.", style="dim"))
        return 1
    except KeyboardInterrupt:
        err_console.print(Text("Interrupted", style="red"))
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
