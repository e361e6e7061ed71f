import io
import json

import pytest

from rhyme_lab.cli import main
from rhyme_lab.utils.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setattr("rhyme_lab.cli.configure_logging", lambda level=None: None)


def test_json_output_from_file(tmp_path, capsys):
    verse = tmp_path / "verse.txt"
    verse.write_text("cat\ndog\nhat\nfog", encoding="utf-8")

    assert main([str(verse), "--json", "--log-level", "WARNING"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["metrics"]["scheme"] == "ABAB"
    assert len(payload["groups"]) == 2


def test_text_summary_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("cat sat splat\nhat"))

    assert main(["--log-level", "WARNING"]) == 0

    output = capsys.readouterr().out
    assert "End rhyme scheme: AA" in output
    assert "Rhyme groups:" in output
    assert "Internal rhymes:" in output


def test_flags_toggle_optional_sections(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("happy cat\nthat hat"))

    assert main(["-", "--no-internal", "--no-assonance", "--flow", "--log-level", "WARNING"]) == 0

    output = capsys.readouterr().out
    assert "Internal rhymes:" not in output
    assert "Assonance groups:" not in output
    assert "Flow:" in output


def test_invalid_threshold_exits_with_status_two(capsys):
    assert main(["--perfect-threshold", "nan", "--log-level", "WARNING"]) == 2
    assert "perfect_threshold" in capsys.readouterr().err


def test_chain_and_profile_flags(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("cat sat hat\nbat mat rat"))

    assert main(["--chains", "--profile", "--json", "--log-level", "WARNING"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["artistProfile"]["internalRhymeDensity"] > 0
    assert "multisyllabicChains" in payload


def test_profile_section_in_text_summary(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("cat sat hat\nbat mat rat"))

    assert main(["--profile", "--log-level", "WARNING"]) == 0

    output = capsys.readouterr().out
    assert "Artist profile:" in output
    assert "Dominant flow:" in output


def test_unknown_log_level_exits_with_status_two(monkeypatch, capsys):
    monkeypatch.setattr("rhyme_lab.cli.configure_logging", configure_logging)

    assert main(["--log-level", "chatty"]) == 2
    assert "unknown log level" in capsys.readouterr().err
