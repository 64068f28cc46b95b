from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import build_target, generate_entities, scaffold_files
from .class_diagram.types import SkippedLine
from .project import write_project
from .types import GenerateOptions

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def setup_logging(log_level: str = "WARNING") -> None:
    """Configure CLI logging on stderr."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uml-entities",
        description="Generate C# entity classes and a DbContext from a PlantUML class diagram.",
    )
    parser.add_argument(
        "diagram",
        nargs="?",
        default="-",
        help="Diagram file to read ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "-o", "--output",
        help="Project directory to write into; prints the generated sources when omitted",
    )
    parser.add_argument("--namespace", help="C# namespace (default: Zen.Model)")
    parser.add_argument("--context", dest="context_name", help="DbContext class name (default: ZenContext)")
    parser.add_argument("--base-class", help="Entity base class (default: BaseEntity)")
    parser.add_argument("--project-name", help="Project name for the .csproj (default: Zen)")
    parser.add_argument("--model-dir", help="Subdirectory for .cs units (default: Model)")
    parser.add_argument(
        "--scaffold",
        action="store_true",
        help="Also emit the entity base class and the project file",
    )
    parser.add_argument(
        "--show-skipped",
        action="store_true",
        help="Report diagram lines that produced no output",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def _read_diagram(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    options = GenerateOptions(
        namespace=args.namespace,
        context_name=args.context_name,
        base_class=args.base_class,
        project_name=args.project_name,
        model_dir=args.model_dir,
    )
    target = build_target(options)

    skipped: list[SkippedLine] = []
    try:
        text = _read_diagram(args.diagram)
        files = generate_entities(text, options, skipped.append)
    except ValueError as err:
        logger.error("%s", err)
        return EXIT_USAGE
    except OSError as err:
        logger.error("Cannot read diagram %s: %s", args.diagram, err)
        return EXIT_ERROR

    if args.show_skipped:
        for item in skipped:
            print(f"line {item.line}: skipped ({item.reason}): {item.text}", file=sys.stderr)

    if not files:
        logger.warning("No classes found in diagram")

    if args.scaffold and files:
        files = {**scaffold_files(target), **files}

    if args.output is None:
        for file_name, content in files.items():
            print(f"// ---- {file_name} ----")
            print(content)
        return EXIT_OK

    try:
        updated = write_project(args.output, files, target)
    except OSError as err:
        logger.error("Cannot write project %s: %s", args.output, err)
        return EXIT_ERROR

    for path in updated:
        print(path)
    return EXIT_OK
