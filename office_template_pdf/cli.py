"""Command-line interface for the Office template → PDF generator."""

from __future__ import annotations

import argparse
import sys

from office_template_pdf.config import load_api_key
from office_template_pdf.converter import (
    DEFAULT_SAVE_MODE,
    SAVE_MODES,
    generate_pdf,
    sdk_session,
)
from office_template_pdf.data import load_json_data
from office_template_pdf.errors import (
    ConfigurationError,
    ConversionError,
    DataLoadError,
    SdkInitializationError,
)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_CONVERSION_FAILED = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="office-template-pdf",
        description="Fill an Office document template with JSON data and "
        "render it to PDF using the Apryse SDK.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="./template.docx",
        help="Office template (default: ./template.docx).",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default="./output.pdf",
        help="Output PDF path (default: ./output.pdf).",
    )
    parser.add_argument(
        "json_file",
        nargs="?",
        default="data.json",
        help="JSON data file (default: data.json).",
    )
    parser.add_argument(
        "--save-mode",
        choices=SAVE_MODES,
        default=DEFAULT_SAVE_MODE,
        help=f"PDF save layout (default: {DEFAULT_SAVE_MODE}).",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Load APRYSE_API_KEY from this .env file.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with status {EXIT_CONVERSION_FAILED} when conversion fails.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print progress information.",
    )
    return parser


def _run(args: argparse.Namespace) -> int:
    try:
        api_key = load_api_key(args.env_file)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FATAL

    try:
        with sdk_session(api_key):
            try:
                data = load_json_data(args.json_file)
            except DataLoadError as exc:
                print(exc, file=sys.stderr)
                return EXIT_FATAL

            try:
                out = generate_pdf(
                    args.input,
                    args.output,
                    data,
                    save_mode=args.save_mode,
                    verbose=args.verbose,
                )
            except ConversionError as exc:
                print(f"An error occurred during PDF generation: {exc}", file=sys.stderr)
                return EXIT_CONVERSION_FAILED if args.strict else EXIT_OK
    except SdkInitializationError as exc:
        print(f"PDFNet initialization error: {exc}", file=sys.stderr)
        return EXIT_FATAL

    print(f"PDF successfully saved to {out}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    sys.exit(_run(args))


if __name__ == "__main__":
    main()
