"""Command-line interface.

Examples::

    qtgen new class App::MainWindow --type cpp --base QMainWindow --qobject -d src
    qtgen new class MainWindow -t python -b QMainWindow
    qtgen new class Settings -t cpp --include QSettings,QString --pragma

Without ``--output-dir`` (or ``QTGEN_OUTPUT_DIR``) the generated files are
echoed to the console instead of written to disk.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .config import Settings
from .errors import GeneratorError
from .generator import GenerationRequest, Generator
from .targets import TargetCategory, supported_type_names
from .utils import (
    configure_logging,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

logger = logging.getLogger(__name__)


def _split_list(values: Sequence[str] | None) -> list[str]:
    """Flatten repeated, comma-separated option values into one list."""
    items: list[str] = []
    for value in values or []:
        items.extend(part.strip() for part in value.split(",") if part.strip())
    return items


def _optional_path(value: str) -> Path | None:
    """Argparse type for path options: an empty value means "not given"."""
    return Path(value) if value.strip() else None


def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    """Build the ``qtgen`` argument parser, with defaults from *settings*."""
    settings = settings or Settings()

    parser = argparse.ArgumentParser(
        prog="qtgen",
        description="Generate Qt classes from declarative templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  qtgen new class App::MainWindow -t cpp -b QMainWindow -q -d src\n"
            "  qtgen new class MainWindow -t python -b QMainWindow\n"
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new = subparsers.add_parser("new", help="Generate a new entity")
    new.add_argument(
        "category",
        choices=[c.value for c in TargetCategory],
        help="What to generate",
    )
    new.add_argument("name", help="Entity name, e.g. App::MainWindow or app.MainWindow")
    new.add_argument(
        "--type", "-t",
        required=True,
        help="Target type (class: %s)" % ", ".join(supported_type_names(TargetCategory.CLASS)),
    )
    new.add_argument("--base", "-b", default="", help="Base class name")
    new.add_argument(
        "--add", "-a",
        action="append",
        metavar="MACRO",
        help="Macro to add to the class body (repeatable, comma-separated)",
    )
    new.add_argument(
        "--include", "-i",
        action="append",
        metavar="CLASS",
        help="Qt class to include (repeatable, comma-separated)",
    )
    new.add_argument(
        "--import",
        dest="imports",
        action="append",
        metavar="CLASS",
        help="Qt class to import in Python classes (repeatable, comma-separated)",
    )
    new.add_argument(
        "--qobject", "-q",
        action="store_true",
        help="Make the class a QObject (adds Q_OBJECT and a parent constructor)",
    )
    new.add_argument(
        "--pragma",
        action="store_true",
        help="Use '#pragma once' instead of an include guard",
    )
    new.add_argument(
        "--module", "-m",
        default=settings.python_module,
        help=f"Qt for Python module (default: {settings.python_module})",
    )
    new.add_argument(
        "--output-dir", "-d",
        type=_optional_path,
        default=settings.output_dir,
        help="Output directory (default: echo to the console)",
    )
    new.add_argument(
        "--template-dir", "-p",
        type=_optional_path,
        default=settings.template_dir,
        help="Custom template root (default: bundled templates)",
    )
    new.add_argument(
        "--license-file", "-l",
        type=_optional_path,
        default=settings.license_file,
        help="License template to render at the top of each file",
    )
    new.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=settings.verbose,
        help="Print debug logs",
    )
    return parser


def request_from_args(args: argparse.Namespace) -> GenerationRequest:
    """Translate parsed arguments into a :class:`GenerationRequest`."""
    return GenerationRequest(
        category=args.category,
        type=args.type,
        name=args.name,
        output_dir=args.output_dir,
        license_file=args.license_file,
        template_dir=args.template_dir,
        base_class=args.base,
        macros=_split_list(args.add),
        includes=_split_list(args.include),
        qobject=args.qobject,
        use_pragma=args.pragma,
        module=args.module,
        imports=_split_list(args.imports),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``qtgen``.  Returns the process exit code."""
    parser = build_parser(Settings.from_env())
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    request = request_from_args(args)

    generator = Generator(request)
    try:
        result = generator.run()
    except GeneratorError as exc:
        logger.debug("generation failed in state %s", generator.state.value)
        print_error(f"Error: {exc}")
        if generator.file_names and request.output_dir:
            print_warning(
                "Files written before the failure: " + ", ".join(generator.file_names)
            )
        return 1

    if request.output_dir is None:
        return 0

    if not result.file_names:
        print_warning("No files were generated")
        return 0

    print_summary_table(
        {name: str(path) for name, path in zip(result.file_names, result.written_paths)},
        title=f"{result.target_type.value} files",
    )
    print_success(f"Generated {len(result.file_names)} file(s) in {request.output_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
