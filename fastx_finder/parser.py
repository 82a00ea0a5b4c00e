"""Convenience wrappers around :func:`fastx_finder.scanner.scan`.

These resolve defaults, detect the format, run the optional pre/post hooks
and hand the result to a callback. The scanner itself stays unaware of them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, List, Optional

from .config import FORMAT_FASTA, FORMAT_FASTQ, SCAN_DEFAULTS
from .detect import detect_format, detect_format_from_path
from .io import read_sequence_text
from .scanner import EntryHook, Record, ScanConfig, ValueHook, scan

logger = logging.getLogger("fastx_finder.parser")

RecordsCallback = Callable[[List[Record]], None]


@dataclass
class ParseOptions:
    format: Optional[str] = None
    target_name: Optional[str] = None
    case_sensitive: bool = SCAN_DEFAULTS.case_sensitive
    header_char: str = SCAN_DEFAULTS.header_char
    fastq_header_char: str = SCAN_DEFAULTS.fastq_header_char
    fastq_quality_char: str = SCAN_DEFAULTS.fastq_quality_char
    on_parse_value: Optional[ValueHook] = None
    on_parse_entry: Optional[EntryHook] = None
    on_pre_parse: Optional[Callable[[str], str]] = None
    on_post_parse: Optional[Callable[[List[Record]], List[Record]]] = None
    callback: Optional[RecordsCallback] = None


def parse(
    data: str,
    options: Optional[ParseOptions] = None,
    callback: Optional[RecordsCallback] = None,
) -> List[Record]:
    """Parse FASTA or FASTQ text and return the matching records."""

    options = options or ParseOptions()
    callback = _resolve_callback(options, callback)

    if options.on_pre_parse is not None:
        data = options.on_pre_parse(data)

    config = ScanConfig(
        header_char=options.header_char,
        fastq_header_char=options.fastq_header_char,
        fastq_quality_char=options.fastq_quality_char,
        format=options.format or detect_format(data),
        target_name=options.target_name,
        case_sensitive=options.case_sensitive,
        on_parse_value=options.on_parse_value,
        on_parse_entry=options.on_parse_entry,
    )
    records = scan(data, config)

    if options.on_post_parse is not None:
        records = options.on_post_parse(records)
    if callback is not None:
        callback(records)
    return records


def parse_fasta(
    data: str,
    options: Optional[ParseOptions] = None,
    callback: Optional[RecordsCallback] = None,
) -> List[Record]:
    return parse(data, _with_format(options, FORMAT_FASTA), callback)


def parse_fastq(
    data: str,
    options: Optional[ParseOptions] = None,
    callback: Optional[RecordsCallback] = None,
) -> List[Record]:
    return parse(data, _with_format(options, FORMAT_FASTQ), callback)


def parse_file(
    path: Path | str,
    options: Optional[ParseOptions] = None,
    callback: Optional[RecordsCallback] = None,
) -> List[Record]:
    """Read ``path`` and parse it; the suffix decides the format if the content cannot."""

    path = Path(path)
    data = read_sequence_text(path)
    options = options or ParseOptions()
    if options.format is None and detect_format(data) is None:
        guessed = detect_format_from_path(path)
        if guessed is not None:
            logger.debug("Format of %s guessed from suffix: %s", path, guessed)
            options = _with_format(options, guessed)
    return parse(data, options, callback)


def _with_format(options: Optional[ParseOptions], file_format: str) -> ParseOptions:
    return replace(options or ParseOptions(), format=file_format)


def _resolve_callback(
    options: ParseOptions,
    callback: Optional[RecordsCallback],
) -> Optional[RecordsCallback]:
    if callback is not None and options.callback is not None:
        logger.warning(
            "Both a callback argument and options.callback were supplied; using the callback argument."
        )
        return callback
    return callback or options.callback


__all__ = ["ParseOptions", "parse", "parse_fasta", "parse_fastq", "parse_file"]
