"""IO helpers for fastx-finder."""

from .fastx import SequenceReadError, read_sequence_text, write_fasta_record, write_fastq_record
from .paths import ensure_dir, now_iso, write_json

__all__ = [
    "SequenceReadError",
    "ensure_dir",
    "now_iso",
    "read_sequence_text",
    "write_fasta_record",
    "write_fastq_record",
    "write_json",
]
