import logging
from pathlib import Path

import pytest

from mdtoc.models.configs import TOCOptions
from mdtoc.orchestration.runner import run_toc


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "README.md"
    path.write_text(text, encoding="utf-8")
    return path


def test_run_toc_preview_does_not_touch_file(tmp_path):
    path = _write(tmp_path, "# Title\n## Intro\n")

    result = run_toc(path, TOCOptions())

    assert result.output == "- [Title](#title)\n  - [Intro](#intro)"
    assert result.written is False
    assert path.read_text(encoding="utf-8") == "# Title\n## Intro\n"


def test_run_toc_in_place_writes_once(tmp_path):
    path = _write(tmp_path, "# Title\n<!--TOC-->\n<!--TOC-->\n## Intro\n")

    first = run_toc(path, TOCOptions(), in_place=True)
    second = run_toc(path, TOCOptions(), in_place=True)

    assert first.changed and first.written
    assert not second.changed and not second.written
    assert "- [Intro](#intro)" in path.read_text(encoding="utf-8")


def test_run_toc_diff_reports_without_writing(tmp_path):
    original = "# Title\n## Intro\n"
    path = _write(tmp_path, original)

    result = run_toc(path, TOCOptions(), diff=True)

    assert result.changed is True
    assert path.read_text(encoding="utf-8") == original


def test_run_toc_warns_on_orphan_marker(tmp_path, caplog):
    path = _write(tmp_path, "# T\n<!--TOC-->\nx\n<!--TOC-->\ny\n<!--TOC-->\n")

    with caplog.at_level(logging.WARNING, logger="mdtoc"):
        run_toc(path, TOCOptions(), diff=True)

    assert "3 TOC markers" in caplog.text


def test_run_toc_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_toc(tmp_path / "absent.md", TOCOptions())
