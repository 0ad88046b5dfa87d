"""CLI interface for path-scrubber.

Usage:
    # Pick a file interactively; the scrubbed copy lands in $HOME
    path-scrubber

    # Scrub a given file, with a config and a different extension
    path-scrubber target/release/app --config scrub.yaml --suffix go

    # Show what would be blanked out without writing anything
    python -m path_scrubber.cli app.bin --dry-run

Exit status is 0 on success and 1 on any failure; every failure is a
single line on stderr.
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

from .config import ScrubberConfig, load_config, load_from_yaml, resolve_output_dir
from .errors import (
    ConfigFailure,
    NameResolutionFailure,
    ReadFailure,
    ScrubError,
    SelectionAborted,
    WriteFailure,
)
from .redactor import Redactor
from .types import ScrubResult

logger = logging.getLogger(__name__)

PICKER_TITLE = "Select input file"


def pick_file() -> Path | None:
    """Ask for a single existing file with the native dialog."""
    try:
        import tkinter
        from tkinter import filedialog
    except ImportError as e:
        raise SelectionAborted(f"No file selected (file dialog unavailable: {e})") from e

    try:
        root = tkinter.Tk()
    except tkinter.TclError as e:
        raise SelectionAborted(f"No file selected (file dialog unavailable: {e})") from e
    root.withdraw()
    try:
        chosen = filedialog.askopenfilename(title=PICKER_TITLE)
    finally:
        root.destroy()
    return Path(chosen) if chosen else None


def output_name(path: Path) -> str:
    """Base filename of the input, which the output reuses."""
    name = path.name
    if name in ("", ".", ".."):
        raise NameResolutionFailure(path)
    return name


def read_input(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise ReadFailure(path, e) from e


def write_output(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as e:
        raise WriteFailure(path, e) from e


def _build_config(args: argparse.Namespace) -> ScrubberConfig:
    try:
        config = load_from_yaml(args.config) if args.config else load_config({})
    except OSError as e:
        raise ConfigFailure(f"Failed to read config {args.config}: {e}") from e
    except ValueError as e:
        raise ConfigFailure(str(e)) from e
    if args.min_length is not None:
        config.min_length = args.min_length
    if args.suffix is not None:
        config.suffix = args.suffix
    if args.output_dir is not None:
        config.output_dir = args.output_dir
    return config


def _build_redactor(config: ScrubberConfig) -> Redactor:
    try:
        return Redactor(config.redactor_config())
    except ValueError as e:
        raise ConfigFailure(str(e)) from e


def _report(result: ScrubResult) -> None:
    for m in result.matches:
        sys.stdout.write(f"{m.start}\t{m.text}\n")
    sys.stderr.write(
        f"{len(result.matches)} path(s) in {result.strings_scanned} string(s); nothing written\n"
    )


def run(args: argparse.Namespace, redactor: Redactor, config: ScrubberConfig) -> Path | None:
    """One scrub pass.  Returns the output path, or None on a dry run."""
    # Resolved first: a missing $HOME must fail before the dialog opens
    out_dir = resolve_output_dir(config)

    input_path = Path(args.file) if args.file else pick_file()
    if input_path is None:
        raise SelectionAborted()
    name = output_name(input_path)

    data = read_input(input_path)
    logger.debug("read %d bytes from %s, pattern %s", len(data), input_path, redactor.pattern.pattern)
    result = redactor.scrub(data)

    if args.dry_run:
        _report(result)
        return None

    output_path = out_dir / name
    write_output(output_path, result.data)
    logger.debug("wrote %d bytes to %s", len(result.data), output_path)
    return output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="path-scrubber",
        description="Blank out embedded source-file paths in a binary",
    )
    parser.add_argument("file", nargs="?", help="Input file (default: pick with a dialog)")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--min-length", type=int, default=None, help="Minimum string length (default 4)")
    parser.add_argument("--suffix", default=None, help="Two-character extension to match (default rs)")
    parser.add_argument("--output-dir", default=None, help="Where to write the result (default $HOME; HOME must be set either way)")
    parser.add_argument("--dry-run", action="store_true", help="List matches, write nothing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = _build_config(args)
        redactor = _build_redactor(config)
        output_path = run(args, redactor, config)
    except ScrubError as e:
        sys.stderr.write(f"{e}\n")
        return 1

    if output_path is not None:
        print(f"\n✅ Successfully written output file: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
