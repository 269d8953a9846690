import importlib

import pytest

from mdtoc.settings import get_settings

update_toc = importlib.import_module("scripts.update_toc")


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in (
        "MDTOC_MIN_LEVEL",
        "MDTOC_MAX_LEVEL",
        "MDTOC_ORDERED",
        "MDTOC_LINE_NUMBER",
        "MDTOC_SECTION_TOC",
        "MDTOC_MARKER",
        "MDTOC_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _write(tmp_path, text):
    path = tmp_path / "guide.md"
    path.write_text(text, encoding="utf-8")
    return path


def test_main_in_place_then_diff_is_clean(tmp_path, capsys):
    path = _write(tmp_path, "# Guide\n\n## Install\n")

    assert update_toc.main([str(path), "--diff"]) == 1
    assert "TOC out of date" in capsys.readouterr().err

    assert update_toc.main([str(path), "-i"]) == 0
    assert path.read_text(encoding="utf-8").count("<!--TOC-->") == 2

    assert update_toc.main([str(path), "-d"]) == 0


def test_main_prints_preview_with_flag_overrides(tmp_path, capsys):
    path = _write(tmp_path, "# A\n## a\n### b\n")

    assert update_toc.main([str(path), "--section", "--max-level", "2"]) == 0

    assert capsys.readouterr().out == "### A\n\n- [a](#a)\n"
    assert path.read_text(encoding="utf-8") == "# A\n## a\n### b\n"


def test_main_flags_override_environment(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("MDTOC_MIN_LEVEL", "2")
    monkeypatch.setenv("MDTOC_ORDERED", "true")
    path = _write(tmp_path, "# A\n## a\n## b\n")

    assert update_toc.main([str(path), "--min-level", "1"]) == 0

    assert capsys.readouterr().out == "1. [A](#a)\n   1. [a](#a)\n   2. [b](#b)\n"


def test_main_rejects_invalid_options(tmp_path, capsys):
    path = _write(tmp_path, "# A\n")

    assert update_toc.main([str(path), "--min-level", "5", "--max-level", "2"]) == 2
    assert "Invalid options" in capsys.readouterr().err


def test_main_reports_missing_files(tmp_path, capsys):
    assert update_toc.main([str(tmp_path / "absent.md")]) == 2
    assert "absent.md" in capsys.readouterr().err

    present = _write(tmp_path, "# A\n")
    assert update_toc.main([str(present), "--config", str(tmp_path / "absent.yaml")]) == 2


def test_main_rejects_bad_environment(tmp_path, capsys, monkeypatch):
    path = _write(tmp_path, "# A\n")

    monkeypatch.setenv("MDTOC_MAX_LEVEL", "deep")
    assert update_toc.main([str(path)]) == 2

    monkeypatch.setenv("MDTOC_MAX_LEVEL", "3")
    monkeypatch.setenv("MDTOC_LOG_LEVEL", "chatty")
    assert update_toc.main([str(path)]) == 2
    assert "Invalid options" in capsys.readouterr().err
