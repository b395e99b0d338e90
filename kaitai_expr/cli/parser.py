import argparse
import sys


def build_parser() -> argparse.ArgumentParser:
    """Describe the command line so help output stays in one place."""
    parser = argparse.ArgumentParser(
        prog="kaitai-expr",
        description="Render Kaitai Struct expression trees to expression source text.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING)",
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force colored output on or off (default: auto-detect)",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render", help="Render JSON expression trees, one per line"
    )
    render_parser.add_argument(
        "-f",
        "--file",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="JSON file holding a tree or a list of trees (default: stdin)",
    )

    float_parser = subparsers.add_parser(
        "float", help="Validate raw doubles and show their float literals"
    )
    float_parser.add_argument("literals", nargs="+", help="Raw double values")

    return parser


__all__ = ["build_parser"]
