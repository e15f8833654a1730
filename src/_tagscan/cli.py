"""Command line interface printing the tokens of a markup file."""

import argparse
import logging
import sys
from pathlib import Path

from _tagscan.config import ScanConfig
from _tagscan.reading import read
from _tagscan.tokenizer.errors import UnterminatedTokenError
from _tagscan.writing import write


def make_parser():
    parser = argparse.ArgumentParser(
        prog="tagscan", description="Print the tokens of a markup file"
    )
    parser.add_argument("path", type=Path, help="Path to the markup file")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first syntax error instead of printing an error token",
    )
    parser.add_argument(
        "--verbatim-raw-text",
        action="store_true",
        help="Emit the body of script and style elements as text",
    )
    parser.add_argument(
        "--quote-aware-attributes",
        action="store_true",
        help="Keep spaces and '>' inside quoted attribute values",
    )
    parser.add_argument(
        "--allow-trailing-text",
        action="store_true",
        help="Emit text at the end of the file instead of an error token",
    )
    parser.add_argument("--encoding", default="utf-8", help="Encoding of the file")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = ScanConfig(
        strict=args.strict,
        verbatim_raw_text=args.verbatim_raw_text,
        quote_aware_attributes=args.quote_aware_attributes,
        allow_trailing_text=args.allow_trailing_text,
        encoding=args.encoding,
    )

    try:
        tokens = read(args.path, config)
    except OSError as err:
        print(f"error: could not read {args.path}: {err}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as err:
        print(f"error: could not decode {args.path}: {err}", file=sys.stderr)
        return 1
    except LookupError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    except UnterminatedTokenError as err:
        print(f"error: {args.path}: {err}", file=sys.stderr)
        return 2

    write(sys.stdout, tokens)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
