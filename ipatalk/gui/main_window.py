"""Preview window for ipatalk.

This module defines :class:`PreviewWindow`, a single-pane window with
an IPA input line, a *Tones* checkbox and a read-only output line.
The output is recomputed on every edit; when the input cannot be
transliterated the output is cleared and the error is shown in the
status bar, so the offending symbol can be spotted while typing.

Initial settings (tones on/off, font, window size) come from the
``talk`` and ``gui`` sections of :class:`~ipatalk.config.AppConfig`.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtGui import QFont, QGuiApplication
from PyQt6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..config import AppConfig, get_app_config
from .preview import render_preview

logger = logging.getLogger(__name__)


class PreviewWindow(QMainWindow):
    """Live IPA → talk notation preview."""

    def __init__(self, config: Optional[AppConfig] = None, parent=None) -> None:
        super().__init__(parent)
        self.config = config or get_app_config()
        self.init_ui()
        self.refresh()

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------

    def init_ui(self) -> None:
        """Set up the window title and child widgets."""
        self.setWindowTitle("ipatalk – IPA Preview")
        self.resize(
            int(self.config.get("gui", "window_width", default=720)),
            int(self.config.get("gui", "window_height", default=220)),
        )
        font = QFont(
            self.config.get("gui", "font_family", default="Charis SIL"),
            int(self.config.get("gui", "font_size", default=16)),
        )

        central = QWidget()
        layout = QVBoxLayout(central)

        layout.addWidget(QLabel("IPA"))
        self.input_edit = QLineEdit()
        self.input_edit.setFont(font)
        self.input_edit.setPlaceholderText("e.g. ˈkʰa˥˩")
        self.input_edit.textChanged.connect(self.refresh)
        layout.addWidget(self.input_edit)

        layout.addWidget(QLabel("Talk notation"))
        self.output_edit = QLineEdit()
        self.output_edit.setFont(font)
        self.output_edit.setReadOnly(True)
        layout.addWidget(self.output_edit)

        controls = QHBoxLayout()
        self.tones_check = QCheckBox("Tones")
        self.tones_check.setChecked(bool(self.config.get("talk", "tones", default=True)))
        self.tones_check.toggled.connect(self.refresh)
        controls.addWidget(self.tones_check)
        controls.addStretch(1)
        copy_btn = QPushButton("Copy")
        copy_btn.clicked.connect(self.copy_output)
        controls.addWidget(copy_btn)
        layout.addLayout(controls)

        self.setCentralWidget(central)
        self.statusBar().showMessage("Ready")

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Re-render the output for the current input and tone setting."""
        text = self.input_edit.text()
        output, error = render_preview(text, self.tones_check.isChecked())
        self.output_edit.setText(output)
        if error:
            logger.debug("preview failed: %s", error)
            self.statusBar().showMessage(error)
        else:
            self.statusBar().showMessage(f"{len(text)} codepoint(s) → {len(output)} character(s)")

    def copy_output(self) -> None:
        QGuiApplication.clipboard().setText(self.output_edit.text())
        self.statusBar().showMessage("Copied to clipboard", 2000)
