"""Command line interface for binimg."""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path
from typing import Callable, Iterable, List

from .converter import (
    ConvertOptions,
    convert_binimg_to_png,
    convert_png_to_binimg,
)
from .errors import BinImgError, ConversionError

BINIMG_EXTENSION = "bin"


def iter_inputs(paths: Iterable[str], extension: str) -> List[Path]:
    suffix = f".{extension}"
    results: List[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            if path.suffix.lower() != suffix:
                raise ConversionError(f"Unsupported file type (expected {suffix}): {path}")
            results.append(path)
        elif path.is_dir():
            for entry in sorted(path.iterdir()):
                if entry.is_file() and entry.suffix.lower() == suffix:
                    results.append(entry)
        else:
            raise ConversionError(f"Input path does not exist: {path}")
    if not results:
        raise ConversionError(f"No {suffix} files were found in the provided inputs.")
    return results


def ensure_unique_names(paths: List[Path], prefix: str, suffix: str, extension: str) -> List[str]:
    names: List[str] = []
    seen = set()
    for path in paths:
        name = f"{prefix}{path.stem}{suffix}.{extension}"
        if name in seen:
            raise ConversionError(f"Duplicate output name would occur: {name}")
        seen.add(name)
        names.append(name)
    return names


def write_outputs(
    inputs: List[Path],
    names: List[str],
    output_dir: Path,
    force: bool,
    write_one: Callable[[Path, Path], None],
) -> None:
    conflicts = []
    for name in names:
        target = output_dir / name
        if target.exists() and not force:
            conflicts.append(str(target))
    if conflicts:
        raise ConversionError(
            "Output files already exist (use --force to overwrite):\n" + "\n".join(conflicts)
        )

    output_dir.mkdir(parents=True, exist_ok=True)

    for src, name in zip(inputs, names):
        target = output_dir / name
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            write_one(src, target)
        for warning in caught:
            print(f"Warning: {warning.message}")
        print(f"wrote {target}")


def _add_common_arguments(parser: argparse.ArgumentParser, input_help: str, output_help: str) -> None:
    parser.add_argument("inputs", nargs="+", help=input_help)
    parser.add_argument("-o", "--output-dir", required=True, help=output_help)
    parser.add_argument("--prefix", default="", help="Optional prefix for output filenames")
    parser.add_argument("--suffix", default="", help="Optional suffix for output filenames")
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files without prompting",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binimg",
        description=(
            "Convert between PNG files and binimg (.bin) images.\n"
            "binimg stores one byte per pixel: a 16-entry hue table with 15 lightness\n"
            "levels for colors, or 16 gray levels. Images are limited to 255x255."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Convert PNG files to .bin")
    _add_common_arguments(
        encode_parser,
        "PNG files or folders containing PNGs (non-recursive)",
        "Destination directory for .bin files",
    )
    encode_parser.add_argument(
        "--oversize",
        choices=["truncate", "crop", "error", "shrink"],
        default="error",
        help=(
            "How to handle images larger than 255x255. truncate clamps the header\n"
            "but keeps every pixel (the file no longer matches its header)"
        ),
    )
    encode_parser.add_argument(
        "--strict-hue",
        action="store_true",
        help="Fail instead of writing hue index 0 for a hue outside the table",
    )

    decode_parser = subparsers.add_parser("decode", help="Render .bin files to PNG")
    _add_common_arguments(
        decode_parser,
        ".bin files or folders containing them (non-recursive)",
        "Destination directory for .png files",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        output_dir = Path(args.output_dir)
        if args.command == "encode":
            options = ConvertOptions(oversize_mode=args.oversize, strict_hue=args.strict_hue)
            inputs = iter_inputs(args.inputs, "png")
            names = ensure_unique_names(inputs, args.prefix, args.suffix, BINIMG_EXTENSION)

            def write_one(src: Path, target: Path) -> None:
                target.write_bytes(convert_png_to_binimg(src, options))

        else:
            inputs = iter_inputs(args.inputs, BINIMG_EXTENSION)
            names = ensure_unique_names(inputs, args.prefix, args.suffix, "png")

            def write_one(src: Path, target: Path) -> None:
                convert_binimg_to_png(src).save(target, format="PNG")

        write_outputs(inputs, names, output_dir, args.force, write_one)
        return 0
    except BinImgError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
