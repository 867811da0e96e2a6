"""Tests for the preview window and its display-independent helper."""

from __future__ import annotations

import os

import pytest

from ipatalk.config import AppConfig
from ipatalk.gui.preview import render_preview


def test_render_preview_success() -> None:
    assert render_preview("kʰa˥") == ("kh~a++", None)
    assert render_preview("kʰa˥", tones=False) == ("kh~a", None)


def test_render_preview_reports_error() -> None:
    output, error = render_preview("kʰA")
    assert output == ""
    assert error == "unknown symbol (kʰA + U+0041)"


def test_preview_window_refreshes() -> None:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    from ipatalk.gui.main_window import PreviewWindow

    app = widgets.QApplication.instance() or widgets.QApplication([])
    window = PreviewWindow(AppConfig({"talk": {"tones": True}}))
    window.input_edit.setText("ɲa˥˩")
    assert window.output_edit.text() == "ny~a++a--"

    window.tones_check.setChecked(False)
    assert window.output_edit.text() == "ny~a"

    window.input_edit.setText("A")
    assert window.output_edit.text() == ""
    assert "unknown symbol" in window.statusBar().currentMessage()
    window.close()
    assert app is not None
