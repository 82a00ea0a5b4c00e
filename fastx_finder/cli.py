"""Command-line interface for fastx-finder."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import CLI_DEFAULTS, FORMAT_FASTA, FORMAT_FASTQ, MANIFEST_JSON, MATCHES_CSV, SCAN_DEFAULTS, SUPPORTED_FORMATS
from .io import ensure_dir, now_iso, write_fasta_record, write_fastq_record, write_json
from .logging_utils import configure_logging, get_logger
from .parser import ParseOptions, parse_file
from .scanner import Record
from .table import write_records_csv


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="fastx-finder",
        description="Find FASTA/FASTQ records whose header contains a name.",
    )
    parser.add_argument("filename", type=Path, help="FASTA or FASTQ file to scan.")
    parser.add_argument("name", help="Substring to look for in record headers.")
    parser.add_argument(
        "--case-sensitive",
        action="store_true",
        default=SCAN_DEFAULTS.case_sensitive,
        help="Match the name case-sensitively (default: case-insensitive).",
    )
    parser.add_argument(
        "--format",
        choices=list(SUPPORTED_FORMATS),
        default=None,
        help="Input format (default: detected from the file).",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        nargs="?",
        const=CLI_DEFAULTS.out_dir,
        default=None,
        help=f"Write all matches, a CSV table and a manifest (bare flag: {CLI_DEFAULTS.out_dir}).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def find_matches(path: Path, name: str, case_sensitive: bool, file_format: Optional[str] = None) -> List[Record]:
    options = ParseOptions(format=file_format, target_name=name, case_sensitive=case_sensitive)
    return parse_file(path, options)


def format_report(records: Sequence[Record], name: str, preview_width: int = CLI_DEFAULTS.preview_width) -> str:
    """Describe the first match in a few human-readable lines."""

    if not records:
        return f"No records matching '{name}' found."
    first = records[0]
    preview = first.sequence[:preview_width]
    if len(first.sequence) > preview_width:
        preview += "..."
    lines = [
        f"Line {first.header_line}: {first.header}",
        f"Sequence: {preview}",
        f"Length: {len(first.sequence)}",
    ]
    extra = len(records) - 1
    if extra > 0:
        lines.append(f"({extra} more matching record{'s' if extra > 1 else ''})")
    return "\n".join(lines)


def write_matches(records: Sequence[Record], out_dir: Path, args: argparse.Namespace) -> Path:
    """Write matches next to a CSV table and a JSON manifest; return the manifest path."""

    logger = get_logger("cli")
    ensure_dir(out_dir)
    is_fastq = any(record.quality is not None for record in records)
    suffix = FORMAT_FASTQ if is_fastq else FORMAT_FASTA
    records_path = out_dir / f"matches.{suffix}"
    with records_path.open("w", encoding="utf-8") as handle:
        for record in records:
            if record.quality is not None:
                write_fastq_record(handle, record.header, record.sequence, record.quality)
            else:
                write_fasta_record(handle, record.header, record.sequence, width=CLI_DEFAULTS.fasta_width)
    csv_path = write_records_csv(records, out_dir / MATCHES_CSV)

    manifest_path = out_dir / MANIFEST_JSON
    write_json(
        manifest_path,
        {
            "timestamp": now_iso(),
            "inputs": {"file": str(args.filename)},
            "outputs": {"records": str(records_path), "table": str(csv_path)},
            "params": {
                "name": args.name,
                "case_sensitive": args.case_sensitive,
                "format": args.format,
            },
            "matched_records": len(records),
        },
    )
    logger.info("Matches -> %s", records_path)
    logger.info("Manifest -> %s", manifest_path)
    return manifest_path


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    logger = get_logger()

    try:
        records = find_matches(args.filename, args.name, args.case_sensitive, args.format)
        print(format_report(records, args.name))
        if args.out_dir is not None:
            write_matches(records, args.out_dir, args)
    except OSError as exc:
        logger.error(str(exc))
        return 1
    except Exception:  # pragma: no cover - safety net
        logger.exception("Unexpected error")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
