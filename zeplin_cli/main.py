"""Command line entry point: zeplin-cli screen <subcommand> ..."""

import argparse
import logging
import sys

from .config import DEFAULT_OUTPUT_DIR, DEFAULT_SPEC_DEPTH
from .handlers import annotation, clip, download, get, list_screens, spec


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zeplin-cli", description="Inspect and export Zeplin screens.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    screen = commands.add_parser("screen", help="Work with screens")
    sub = screen.add_subparsers(dest="subcommand", required=True)

    p = sub.add_parser("get", help="Show screen details, layers, assets and links")
    p.add_argument("url", help="Zeplin screen URL")
    p.set_defaults(handler=get.handler)

    p = sub.add_parser("list", help="List a project's screens as JSON")
    p.add_argument("-p", "--project-id", required=True, help="Project ID")
    p.add_argument("-l", "--limit", type=int, help="Max number of screens")
    p.add_argument("--offset", type=int, help="Pagination offset")
    p.set_defaults(handler=list_screens.handler)

    p = sub.add_parser("spec", help="Print the screen as a compact CSS-like spec")
    p.add_argument("url", help="Zeplin screen URL")
    p.add_argument("--depth", type=int, default=DEFAULT_SPEC_DEPTH, help="Layer tree depth to print")
    p.add_argument("--section", help="Only top-level layers whose name contains this text")
    p.set_defaults(handler=spec.handler)

    p = sub.add_parser("download", help="Download the screen's assets")
    p.add_argument("url", help="Zeplin screen URL")
    p.add_argument("-o", "--output", default=DEFAULT_OUTPUT_DIR, help="Output directory")
    p.add_argument("-j", "--jobs", type=int, default=1, help="Parallel downloads")
    p.set_defaults(handler=download.handler)

    p = sub.add_parser("annotation", help="Find the section an annotation points at")
    p.add_argument("url", help="Zeplin screen URL")
    p.add_argument("text", help="Annotation text to search for")
    p.set_defaults(handler=annotation.handler)

    p = sub.add_parser("clip", help="Copy depth-1 sections to the clipboard")
    p.add_argument("url", help="Zeplin screen URL")
    p.set_defaults(handler=clip.handler)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
