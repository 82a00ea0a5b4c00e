"""Tabular export of scanned records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from .scanner import Record

logger = logging.getLogger("fastx_finder.table")

COLUMNS = ["header_line", "header", "sequence_line", "sequence_length", "sequence", "quality"]


def records_to_frame(records: Iterable[Record]) -> pd.DataFrame:
    """Return one row per record, columns in a fixed order."""

    rows = [
        {
            "header_line": record.header_line,
            "header": record.header,
            "sequence_line": record.sequence_line,
            "sequence_length": len(record.sequence),
            "sequence": record.sequence,
            "quality": record.quality,
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def write_records_csv(records: Iterable[Record], path: Path) -> Path:
    frame = records_to_frame(records)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(path, index=False)
    logger.info("Wrote %s records to %s", len(frame), path)
    return path
