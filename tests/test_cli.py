"""
Tests for the signal-graph command-line tool (evaluate_candidate.main).
"""

from __future__ import annotations

import json

from signal_graph.tools.evaluate_candidate import main


def test_cli_flags_text(capsys):
    """--flags with text format prints score and feedback."""
    code = main(["--candidate", "Candidate_9", "--flags", "ssn_mismatch, alias_mismatch", "--format", "text"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Candidate: Candidate_9" in out
    assert "Signals:   alias_mismatch, ssn_mismatch" in out
    assert "Score:     12 - High risk: Proceed with caution." in out


def test_cli_profile_json(capsys):
    """--profile prints the evaluation as JSON."""
    code = main(["--profile", "0"])
    out = capsys.readouterr().out
    assert code == 0
    assert '"candidate_id": "Candidate_Synth_001"' in out
    assert '"score": 8' in out
    assert '"tier": "MODERATE"' in out


def test_cli_bad_profile(capsys):
    """Out-of-range profile exits with status 2 and an error on stderr."""
    code = main(["--profile", "7"])
    err = capsys.readouterr().err
    assert code == 2
    assert "No synthetic profile at index 7" in err


def test_cli_blank_candidate(capsys):
    """A blank --candidate is rejected."""
    code = main(["--candidate", "  ", "--flags", "ssn_mismatch"])
    assert code == 2
    assert "candidate_id must be non-empty" in capsys.readouterr().err


def test_cli_exports(tmp_path, capsys):
    """--csv and --report write both files into --export-dir."""
    code = main(["--profile", "2", "--csv", "--report", "--export-dir", str(tmp_path), "--format", "text"])
    assert code == 0
    csv_path = tmp_path / "Candidate_Synth_003_profile.csv"
    assert csv_path.read_text(encoding="utf-8") == (
        "Candidate ID,Flags\n"
        "Candidate_Synth_003,criminal_misdemeanor,address_instability,multiple_employers"
    )
    assert (tmp_path / "Candidate_Synth_003_report.json").exists()


def test_cli_list_signals(capsys):
    """--list-signals prints every catalog entry."""
    assert main(["--list-signals"]) == 0
    out = capsys.readouterr().out
    assert "criminal_felony_recent" in out
    assert "Pattern of Reform" in out
    assert len([line for line in out.splitlines() if line.strip()]) == 11


def test_cli_compare_profiles(capsys):
    """--compare-profiles prints the chart data."""
    assert main(["--compare-profiles"]) == 0
    out = capsys.readouterr().out
    assert '"Candidate_Synth_002"' in out
    assert '"score": 21' in out


def test_cli_json_stdout_stays_parseable_with_exports(tmp_path, capsys):
    """Export log lines go to stderr; stdout is a single JSON document."""
    code = main(["--profile", "0", "--csv", "--report", "--export-dir", str(tmp_path)])
    captured = capsys.readouterr()
    assert code == 0
    data = json.loads(captured.out)
    assert data["candidate_id"] == "Candidate_Synth_001"
    assert data["score"] == 8
    assert "csv_exported" not in captured.out
    assert "csv_exported" in captured.err
    assert "report_exported" in captured.err


def test_cli_traversal_candidate_stays_in_export_dir(tmp_path, capsys):
    """A candidate id with path separators is written inside --export-dir."""
    out = tmp_path / "out"
    code = main(["--candidate", "../../escaped", "--flags", "employment_gap", "--csv", "--export-dir", str(out)])
    assert code == 0
    written = list(out.iterdir())
    assert [p.name for p in written] == [".._.._escaped_profile.csv"]
    assert not (tmp_path / "escaped_profile.csv").exists()
