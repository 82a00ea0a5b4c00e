"""fastx-finder: scan FASTA/FASTQ text into line-annotated records."""

from .detect import detect_format, detect_format_from_path
from .hooks import (
    default_header_transform,
    default_quality_transform,
    default_sequence_transform,
    matches_target,
)
from .parser import ParseOptions, parse, parse_fasta, parse_fastq, parse_file
from .scanner import LineCounter, Record, ScanConfig, ScannerState, scan, split_lines

__version__ = "0.1.0"

__all__ = [
    "LineCounter",
    "ParseOptions",
    "Record",
    "ScanConfig",
    "ScannerState",
    "default_header_transform",
    "default_quality_transform",
    "default_sequence_transform",
    "detect_format",
    "detect_format_from_path",
    "matches_target",
    "parse",
    "parse_fasta",
    "parse_fastq",
    "parse_file",
    "scan",
    "split_lines",
]
