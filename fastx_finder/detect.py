"""Guess whether text or a file holds FASTA or FASTQ records."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import DEFAULT_FASTQ_HEADER_CHAR, DEFAULT_HEADER_CHAR, FORMAT_FASTA, FORMAT_FASTQ

FASTA_SUFFIXES = {".fa", ".fasta", ".fna", ".faa"}
FASTQ_SUFFIXES = {".fq", ".fastq"}


def detect_format(text: str) -> Optional[str]:
    """Return 'fasta' or 'fastq' from the first non-whitespace character, else None."""

    stripped = text.lstrip()
    if not stripped:
        return None
    first = stripped[0]
    if first == DEFAULT_FASTQ_HEADER_CHAR:
        return FORMAT_FASTQ
    if first == DEFAULT_HEADER_CHAR:
        return FORMAT_FASTA
    return None


def detect_format_from_path(path: Path | str) -> Optional[str]:
    suffix = Path(path).suffix.lower()
    if suffix in FASTA_SUFFIXES:
        return FORMAT_FASTA
    if suffix in FASTQ_SUFFIXES:
        return FORMAT_FASTQ
    return None


__all__ = ["detect_format", "detect_format_from_path"]
