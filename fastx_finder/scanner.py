"""Single-pass FASTA/FASTQ record scanner.

The whole input is held in memory and walked once, line by line. Each line's
first character decides the transition of a five-state machine. Records are
annotated with the 1-based line numbers of their header and first sequence
line, and pass through the configured entry filter before they are kept.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .config import FORMAT_FASTA, FORMAT_FASTQ, SCAN_DEFAULTS, SUPPORTED_FORMATS
from .hooks import DEFAULT_TRANSFORMS, TextTransform, matches_target

logger = logging.getLogger("fastx_finder.scanner")


class ScannerState(enum.Enum):
    SEEK_HEADER = "seek_header"
    IN_HEADER = "in_header"
    IN_SEQUENCE = "in_sequence"
    IN_PLUS_LINE = "in_plus_line"
    IN_QUALITY = "in_quality"


@dataclass
class Record:
    header_line: int
    header: str
    sequence_line: int
    sequence: str = ""
    quality: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class LineCounter:
    """Physical line currently being scanned (1-based)."""

    line: int = 1


ValueHook = Callable[[str, LineCounter], str]
EntryHook = Callable[[Record, LineCounter], Optional[bool]]


@dataclass(frozen=True)
class ScanConfig:
    """Everything one ``scan`` call needs; never mutated while scanning.

    ``format`` is ``"fasta"``, ``"fastq"`` or ``None`` to infer it from the
    first character of the input. ``on_parse_value`` replaces
    ``header_transform`` when given. ``on_parse_entry`` suppresses a record
    by returning ``False``.
    """

    header_char: str = SCAN_DEFAULTS.header_char
    fastq_header_char: str = SCAN_DEFAULTS.fastq_header_char
    fastq_quality_char: str = SCAN_DEFAULTS.fastq_quality_char
    format: Optional[str] = None
    target_name: Optional[str] = None
    case_sensitive: bool = SCAN_DEFAULTS.case_sensitive
    on_parse_value: Optional[ValueHook] = None
    on_parse_entry: Optional[EntryHook] = None
    header_transform: TextTransform = DEFAULT_TRANSFORMS["header"]
    sequence_transform: TextTransform = DEFAULT_TRANSFORMS["sequence"]
    quality_transform: TextTransform = DEFAULT_TRANSFORMS["quality"]

    def __post_init__(self) -> None:
        for name in ("header_char", "fastq_header_char", "fastq_quality_char"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
        if self.format is not None:
            normalized = self.format.lower()
            if normalized not in SUPPORTED_FORMATS:
                raise ValueError(f"Unsupported format: {self.format}")
            object.__setattr__(self, "format", normalized)


def split_lines(data: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, text)`` for each physical line of ``data``.

    Lines end at ``\\n``, ``\\r\\n`` or a lone ``\\r``; the terminator is not
    part of the text. A trailing terminator does not open an extra line.
    """

    length = len(data)
    start = 0
    line_number = 1
    next_lf = data.find("\n")
    next_cr = data.find("\r")
    while start < length:
        if 0 <= next_lf < start:
            next_lf = data.find("\n", start)
        if 0 <= next_cr < start:
            next_cr = data.find("\r", start)
        if next_lf < 0 and next_cr < 0:
            yield line_number, data[start:]
            return
        if next_lf < 0:
            end = next_cr
        elif next_cr < 0:
            end = next_lf
        else:
            end = min(next_lf, next_cr)
        yield line_number, data[start:end]
        start = end + 2 if data.startswith("\r\n", end) else end + 1
        line_number += 1


def scan(data: str, config: Optional[ScanConfig] = None) -> List[Record]:
    """Parse ``data`` into records, in input order.

    Malformed content never raises: stray lines are skipped and the scanner
    falls back to a safe state. The result may be empty.
    """

    if config is None:
        config = ScanConfig()
    file_format = config.format or _infer_format(data, config)
    scanner = _Scanner(config, file_format)
    for line_number, line in split_lines(data):
        scanner.counter.line = line_number
        scanner.feed(line)
    records = scanner.finish()
    logger.debug(
        "Scanned %s lines as %s: kept %s records",
        scanner.counter.line if data else 0,
        file_format,
        len(records),
    )
    return records


def _infer_format(data: str, config: ScanConfig) -> str:
    if data.strip()[:1] == config.fastq_header_char:
        return FORMAT_FASTQ
    return FORMAT_FASTA


class _Scanner:
    """Mutable state for a single scan call."""

    def __init__(self, config: ScanConfig, file_format: str) -> None:
        self.config = config
        self.is_fastq = file_format == FORMAT_FASTQ
        self.header_char = config.fastq_header_char if self.is_fastq else config.header_char
        self.counter = LineCounter()
        self.state = ScannerState.SEEK_HEADER
        self.records: List[Record] = []
        self._pending: Optional[Record] = None
        self._sequence_chunks: List[str] = []
        self._quality_chunks: List[str] = []
        self._transitions: Dict[ScannerState, Callable[[str], ScannerState]] = {
            ScannerState.SEEK_HEADER: self._seek_header,
            ScannerState.IN_HEADER: self._in_header,
            ScannerState.IN_SEQUENCE: self._in_sequence,
            ScannerState.IN_PLUS_LINE: self._in_plus_line,
            ScannerState.IN_QUALITY: self._in_quality,
        }

    def feed(self, line: str) -> None:
        # Empty and whitespace-only lines count toward numbering only.
        if not line or line.isspace():
            return
        self.state = self._transitions[self.state](line)

    def finish(self) -> List[Record]:
        self._finalize()
        return self.records

    def _seek_header(self, line: str) -> ScannerState:
        if line.startswith(self.header_char):
            self._finalize()
            self._start_record(line)
            return ScannerState.IN_HEADER
        return ScannerState.SEEK_HEADER

    def _in_header(self, line: str) -> ScannerState:
        if line.startswith(self.header_char):
            self._finalize()
            self._start_record(line)
            return ScannerState.IN_HEADER
        if self.is_fastq and line.startswith(self.config.fastq_quality_char):
            return ScannerState.IN_PLUS_LINE
        self._sequence_chunks.append(line)
        if self._pending is not None:
            self._pending.sequence_line = self.counter.line
        return ScannerState.IN_PLUS_LINE if self.is_fastq else ScannerState.IN_SEQUENCE

    def _in_sequence(self, line: str) -> ScannerState:
        if line.startswith(self.header_char):
            self._finalize()
            self._start_record(line)
            return ScannerState.IN_HEADER
        self._sequence_chunks.append(line)
        return ScannerState.IN_SEQUENCE

    def _in_plus_line(self, line: str) -> ScannerState:
        if line.startswith(self.config.fastq_quality_char):
            return ScannerState.IN_QUALITY
        return ScannerState.IN_PLUS_LINE

    def _in_quality(self, line: str) -> ScannerState:
        if line.startswith(self.header_char):
            self._finalize()
            self._start_record(line)
            return ScannerState.IN_HEADER
        self._quality_chunks = [line]
        return ScannerState.SEEK_HEADER

    def _start_record(self, line: str) -> None:
        raw_header = line[1:]
        if self.config.on_parse_value is not None:
            header = self.config.on_parse_value(raw_header, self.counter)
        else:
            header = self.config.header_transform(raw_header)
        line_number = self.counter.line
        self._pending = Record(
            header_line=line_number,
            header=header,
            sequence_line=line_number + 1,
            quality="" if self.is_fastq else None,
        )
        self._sequence_chunks = []
        self._quality_chunks = []

    def _finalize(self) -> None:
        record = self._pending
        if record is None:
            return
        self._pending = None
        record.sequence = self.config.sequence_transform("".join(self._sequence_chunks))
        if record.quality is not None:
            record.quality = self.config.quality_transform("".join(self._quality_chunks))
        self._sequence_chunks = []
        self._quality_chunks = []
        if self._accept(record):
            self.records.append(record)

    def _accept(self, record: Record) -> bool:
        if not record.header:
            return False
        if not matches_target(record.header, self.config.target_name, self.config.case_sensitive):
            return False
        hook = self.config.on_parse_entry
        if hook is not None and hook(record, self.counter) is False:
            return False
        return True


__all__ = [
    "EntryHook",
    "LineCounter",
    "Record",
    "ScanConfig",
    "ScannerState",
    "ValueHook",
    "scan",
    "split_lines",
]
