"""Reading raw FASTA/FASTQ text and writing records back out."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO


class SequenceReadError(OSError):
    """Raised when a sequence file exists but cannot be read as text."""


def read_sequence_text(path: Path) -> str:
    """Return the whole file as text, keeping its original line terminators."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise SequenceReadError(f"Unable to decode {path} as UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise SequenceReadError(f"Unable to read {path}: {exc.strerror or exc}") from exc


def write_fasta_record(handle: TextIO, header: str, sequence: str, width: int = 80) -> None:
    """Write a FASTA record to an open file handle."""

    handle.write(f">{header}\n")
    for idx in range(0, len(sequence), width):
        handle.write(sequence[idx : idx + width] + "\n")


def write_fastq_record(handle: TextIO, header: str, sequence: str, quality: str) -> None:
    """Write a four-line FASTQ record to an open file handle."""

    handle.write(f"@{header}\n{sequence}\n+\n{quality}\n")
