from collections.abc import Mapping
import logging
from pathlib import Path
from typing import Any

import pytest

from latex2web.adapters.latexml import ConverterOutput
import latex2web.conversion as conversion
from latex2web.core.config import ConversionConfig
from latex2web.core.diagnostics import LoggingEmitter
from latex2web.core.exceptions import ConverterUnavailableError, DocumentParseError
from latex2web.core.themes import resolve


SAMPLE = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<document xmlns="http://dlmf.nist.gov/LaTeXML">'
    "<title>Notes</title>"
    "<creator role=\"author\"><personname>Ada Lovelace</personname></creator>"
    "<section><title>Intro</title>"
    '<para><p>Hello <text font="bold">world</text></p></para>'
    "</section>"
    "</document>"
)


class RecordingEmitter:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []
        self.warnings: list[str] = []

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


def test_convert_xml_builds_full_page() -> None:
    page = conversion.convert_xml(SAMPLE)

    assert "<title>Notes</title>" in page
    assert '<p class="author">Ada Lovelace</p>' in page
    assert "<section><h2>Intro</h2><p><p>Hello <strong>world</strong></p></p></section>" in page
    assert resolve("clean-serif") in page


def test_convert_xml_uses_requested_theme() -> None:
    page = conversion.convert_xml(SAMPLE, ConversionConfig(theme="dark"))
    assert resolve("dark") in page


def test_convert_xml_without_title_or_author() -> None:
    page = conversion.convert_xml("<document><para>x</para></document>")
    assert "<title>Untitled</title>" in page
    assert 'class="author"' not in page


def test_convert_xml_rejects_malformed_markup() -> None:
    with pytest.raises(DocumentParseError):
        conversion.convert_xml("<document><para></document>")


def test_convert_file_reads_intermediate_xml(tmp_path: Path) -> None:
    source = tmp_path / "paper.xml"
    source.write_text(SAMPLE, encoding="utf-8")
    emitter = RecordingEmitter()

    target = conversion.convert_file(source, emitter=emitter)

    assert target == tmp_path / "paper.html"
    assert "<strong>world</strong>" in target.read_text(encoding="utf-8")
    assert [name for name, _ in emitter.events] == ["xml_input", "output_written"]
    assert emitter.events[-1][1] == {"path": str(target)}


def test_convert_file_runs_converter_for_latex(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    source = tmp_path / "paper.tex"
    source.write_text("\\documentclass{article}", encoding="utf-8")
    calls: list[tuple[Path, str]] = []

    def fake_run_converter(path: Path, executable: str) -> ConverterOutput:
        calls.append((path, executable))
        return ConverterOutput(xml=SAMPLE)

    monkeypatch.setattr(conversion, "run_converter", fake_run_converter)
    emitter = RecordingEmitter()
    output = tmp_path / "out" / "page.html"
    config = ConversionConfig(converter="my-latexml", output=output)

    target = conversion.convert_file(source, config, emitter=emitter)

    assert target == output
    assert output.exists()
    assert calls == [(source, "my-latexml")]
    assert emitter.events[0] == (
        "converter_start",
        {"source": str(source), "converter": "my-latexml"},
    )


def test_convert_file_writes_nothing_when_converter_missing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    source = tmp_path / "paper.tex"
    source.write_text("", encoding="utf-8")

    def missing(_path: Path, executable: str) -> ConverterOutput:
        raise ConverterUnavailableError(executable)

    monkeypatch.setattr(conversion, "run_converter", missing)

    with pytest.raises(ConverterUnavailableError):
        conversion.convert_file(source)
    assert not (tmp_path / "paper.html").exists()


def test_write_output_file_reports_target(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(OSError, match="Failed to write HTML output"):
        conversion.write_output_file(blocker / "page.html", "<html></html>")


def test_logging_emitter_reports_conversion(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    source = tmp_path / "paper.xml"
    source.write_text(SAMPLE, encoding="utf-8")

    with caplog.at_level(logging.INFO, logger="latex2web.core.diagnostics"):
        conversion.convert_file(source, emitter=LoggingEmitter())

    assert f"reading intermediate XML from {source}" in caplog.messages
    assert f"wrote {tmp_path / 'paper.html'}" in caplog.messages


def test_converter_warnings_reach_the_emitter(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    source = tmp_path / "paper.tex"
    source.write_text("", encoding="utf-8")
    monkeypatch.setattr(
        conversion,
        "run_converter",
        lambda _path, _exe: ConverterOutput(
            xml=SAMPLE, warnings=("Warning:undefined:\\foo The token \\foo is not defined",)
        ),
    )
    emitter = RecordingEmitter()

    conversion.convert_file(source, emitter=emitter)

    assert emitter.warnings == ["latexml: Warning:undefined:\\foo The token \\foo is not defined"]
    assert emitter.events[0][0] == "converter_start"


def test_logging_emitter_forwards_warnings(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="latex2web.core.diagnostics"):
        LoggingEmitter().warning("latexml: Warning:missing_file:foo.sty")

    assert caplog.messages == ["latexml: Warning:missing_file:foo.sty"]
