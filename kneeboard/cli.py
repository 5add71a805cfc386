"""Command line entry point.

Usage:
    kneeboard create [-i plan.yaml] [-o notes.pdf]
    kneeboard template [-t template.yaml]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from kneeboard.adapters.plan_file import dump_plan, load_plan
from kneeboard.config import Settings
from kneeboard.errors import KneeboardError
from kneeboard.services.planner import create_planning
from kneeboard.services.template import create_template_plan

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kneeboard", description="Kneeboard notes generator")
    parser.add_argument("-v", "--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create kneeboard notes from a plan file")
    create.add_argument(
        "-i",
        "--input",
        type=Path,
        default=Path(settings.input_path),
        help=f"Plan definition file, YAML or JSON (default: {settings.input_path})",
    )
    create.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path(settings.output_path),
        help=f"PDF file to write (default: {settings.output_path})",
    )

    template = subparsers.add_parser("template", help="Write an example plan file")
    template.add_argument(
        "-t",
        "--template",
        type=Path,
        default=Path(settings.template_path),
        help=f"Template file to write (default: {settings.template_path})",
    )

    return parser


def create(input_path: Path, output_path: Path) -> int:
    """Render the plan in ``input_path`` to ``output_path``; returns the byte count."""
    plan = load_plan(input_path)
    document = create_planning(plan)

    with output_path.open("wb") as f:
        size = document.write(f)

    logger.info("Wrote %s (%d bytes)", output_path, size)
    return size


def template(template_path: Path) -> None:
    dump_plan(create_template_plan(), template_path)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = Settings.from_env()

    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "create":
            create(args.input, args.output)
        else:
            template(args.template)
    except KneeboardError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("%s: %s", e.filename or "I/O error", e.strerror or e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
