"""Command line: turn a chat CSV into SRV3 (YTT) subtitles."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .chat import CsvFormatError, generate_batches, parse_csv
from .params import ChatParams
from .ytt import generate_xml

_TIME_UNITS = ("ms", "sec")


def _existing_file(value: str) -> Path:
    path = Path(value)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"File does not exist: {value}")
    return path


def _time_unit(value: str) -> str:
    unit = value.lower()
    if unit not in _TIME_UNITS:
        raise argparse.ArgumentTypeError(
            f"{value} not in {{{', '.join(_TIME_UNITS)}}}"
        )
    return unit


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subtitles_generator",
        description="Chat → YTT/SRV3 subtitle generator",
    )
    parser.add_argument(
        "-c", "--config", required=True, type=_existing_file, help="Path to INI config file"
    )
    parser.add_argument(
        "-i", "--input", required=True, type=_existing_file, help="Path to chat CSV file"
    )
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        type=Path,
        help="Output file (e.g. output.srv3 or output.ytt)",
    )
    parser.add_argument(
        "-u",
        "--time-unit",
        required=True,
        type=_time_unit,
        help="Time unit inside CSV: “ms” or “sec”",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator; return the process exit status."""
    args = _build_parser().parse_args(argv)
    multiplier = 1000 if args.time_unit == "sec" else 1

    params = ChatParams()
    try:
        params.load(args.config)
    except OSError:
        print(f'Error: Cannot open config file: "{args.config}"', file=sys.stderr)
        return 1

    try:
        chat = parse_csv(args.input, multiplier)
    except OSError:
        print(f'Error: Could not open file "{args.input}"', file=sys.stderr)
        return 1
    except CsvFormatError as error:
        print(f"Error: {error}.", file=sys.stderr)
        return 1
    if not chat:
        print(
            f'Error: Failed to parse chat CSV or it\'s empty: "{args.input}"', file=sys.stderr
        )
        return 1

    xml = generate_xml(generate_batches(chat, params), params)
    try:
        args.output.write_text(xml, encoding="utf-8")
    except OSError:
        print(f'Error: Cannot open output file: "{args.output}"', file=sys.stderr)
        return 1
    print(f'Successfully wrote subtitles to: "{args.output}"')
    return 0


if __name__ == "__main__":
    sys.exit(main())