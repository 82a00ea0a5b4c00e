"""Central location for default sigils and CLI settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Leading characters that give a line its role
DEFAULT_HEADER_CHAR = ">"
DEFAULT_FASTQ_HEADER_CHAR = "@"
DEFAULT_FASTQ_QUALITY_CHAR = "+"

FORMAT_FASTA = "fasta"
FORMAT_FASTQ = "fastq"
SUPPORTED_FORMATS = (FORMAT_FASTA, FORMAT_FASTQ)

DEFAULT_OUT_DIR = Path("data") / "matches"

# Output filenames written by `fastx-finder --out-dir`
MATCHES_CSV = "matches.csv"
MANIFEST_JSON = "manifest.json"


@dataclass(slots=True)
class ScanDefaults:
    """Sigils and matching behaviour used when a caller supplies none."""

    header_char: str = DEFAULT_HEADER_CHAR
    fastq_header_char: str = DEFAULT_FASTQ_HEADER_CHAR
    fastq_quality_char: str = DEFAULT_FASTQ_QUALITY_CHAR
    case_sensitive: bool = False


@dataclass(slots=True)
class CliDefaults:
    """Options surfaced on the command line."""

    preview_width: int = 50
    fasta_width: int = 80
    out_dir: Path = DEFAULT_OUT_DIR


SCAN_DEFAULTS = ScanDefaults()
CLI_DEFAULTS = CliDefaults()
