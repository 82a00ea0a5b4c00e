"""Tests for the default transforms, target matching and format detection."""

from __future__ import annotations

import pytest

from fastx_finder.detect import detect_format, detect_format_from_path
from fastx_finder.hooks import (
    DEFAULT_TRANSFORMS,
    default_header_transform,
    default_quality_transform,
    default_sequence_transform,
    matches_target,
)


def test_default_transforms() -> None:
    assert default_header_transform("  chr1 sample \n") == "chr1 sample"
    assert default_sequence_transform(" ac\tgt \n nn ") == "ACGTNN"
    assert default_quality_transform(" II#I ") == "II#I"


def test_default_transforms_mapping_is_read_only() -> None:
    assert DEFAULT_TRANSFORMS["sequence"] is default_sequence_transform
    with pytest.raises(TypeError):
        DEFAULT_TRANSFORMS["sequence"] = str.lower  # type: ignore[index]


def test_matches_target() -> None:
    assert matches_target("Sample_01", "sample")
    assert not matches_target("Sample_01", "sample", case_sensitive=True)
    assert matches_target("Sample_01", "Sample", case_sensitive=True)
    assert matches_target("anything", None)
    assert matches_target("anything", "")
    assert not matches_target("other", "sample")


def test_detect_format_from_content() -> None:
    assert detect_format("@read1\nACGT\n+\nIIII\n") == "fastq"
    assert detect_format("\n  >seq1\nACGT\n") == "fasta"
    assert detect_format("ACGT\n") is None
    assert detect_format("   \n") is None


def test_detect_format_from_path() -> None:
    assert detect_format_from_path("reads.FQ") == "fastq"
    assert detect_format_from_path("genome.fna") == "fasta"
    assert detect_format_from_path("notes.txt") is None
