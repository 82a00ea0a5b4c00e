"""Smoke tests for the fastx-finder CLI."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from fastx_finder.cli import format_report, main
from fastx_finder.config import CLI_DEFAULTS
from fastx_finder.scanner import scan

ROOT = Path(__file__).resolve().parents[1]
PKG_ROOT = ROOT


def _run_cli(args: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = f"{PKG_ROOT}{os.pathsep}{env.get('PYTHONPATH', '')}"
    return subprocess.run(
        [sys.executable, "-m", "fastx_finder.cli", *args],
        cwd=cwd or ROOT,
        env=env,
        check=False,
        text=True,
        capture_output=True,
    )


def _write_test_fasta(path: Path) -> None:
    content = """>other_1 unrelated
ACGT
>Sample_01 first hit
ACGTACGTACGTACGTACGTACGTACGTACGTACGTACGTACGTACGTACGTACGT
>sample_02 second hit
GGGG
"""
    path.write_text(content, encoding="utf-8")


def test_help_runs() -> None:
    proc = _run_cli(["--help"])
    assert proc.returncode == 0, proc.stderr
    assert "usage" in proc.stdout.lower()


def test_wrong_argument_count_exits_1() -> None:
    proc = _run_cli(["only-a-file.fasta"])
    assert proc.returncode == 1
    assert "usage" in proc.stderr.lower()


def test_missing_file_exits_1(tmp_path: Path) -> None:
    proc = _run_cli([str(tmp_path / "absent.fasta"), "sample"])
    assert proc.returncode == 1
    assert "absent.fasta" in proc.stderr


def test_reports_first_match(tmp_path: Path) -> None:
    fasta = tmp_path / "seqs.fasta"
    _write_test_fasta(fasta)
    proc = _run_cli([str(fasta), "sample"], cwd=tmp_path)
    assert proc.returncode == 0, proc.stderr
    lines = proc.stdout.splitlines()
    assert lines[0] == "Line 3: Sample_01 first hit"
    assert lines[1] == "Sequence: " + "ACGT" * 12 + "AC..."
    assert lines[2] == "Length: 56"
    assert lines[3] == "(1 more matching record)"


def test_main_case_sensitive_without_match(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    fasta = tmp_path / "seqs.fasta"
    _write_test_fasta(fasta)
    assert main([str(fasta), "SAMPLE", "--case-sensitive"]) == 0
    assert "No records matching 'SAMPLE' found." in capsys.readouterr().out


def test_out_dir_writes_matches(tmp_path: Path) -> None:
    fastq = tmp_path / "reads.fastq"
    fastq.write_text("@read_a\nACGT\n+\nIIII\n@read_b\nGG\n+\nJJ\n@x\nTT\n+\nKK\n", encoding="utf-8")
    out_dir = tmp_path / "out"
    assert main([str(fastq), "read", "--out-dir", str(out_dir)]) == 0

    assert (out_dir / "matches.fastq").read_text(encoding="utf-8") == "@read_a\nACGT\n+\nIIII\n@read_b\nGG\n+\nJJ\n"
    assert (out_dir / "matches.csv").exists()
    manifest = json.loads((out_dir / "manifest.json").read_text(encoding="utf-8"))
    assert manifest["matched_records"] == 2
    assert manifest["params"]["name"] == "read"


def test_format_report_short_sequence() -> None:
    report = format_report(scan(">a\nACGT\n"), "a")
    assert report.splitlines() == ["Line 1: a", "Sequence: ACGT", "Length: 4"]


def test_bare_out_dir_flag_uses_default_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    fasta = tmp_path / "seqs.fasta"
    _write_test_fasta(fasta)
    monkeypatch.chdir(tmp_path)
    assert main([str(fasta), "sample", "--out-dir"]) == 0

    out_dir = tmp_path / CLI_DEFAULTS.out_dir
    assert (out_dir / "matches.fasta").read_text(encoding="utf-8").count(">") == 2
    assert (out_dir / "manifest.json").exists()
    assert "Line 3: Sample_01 first hit" in capsys.readouterr().out
