"""
Qt GUI for entropass: controls, entropy bar, salt and clipboard.

All generation and rating is delegated to the engine; this module only
reads widgets and shows results.
"""

from __future__ import annotations

import sys
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from .config import (
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_ENTROPY_BITS,
    MIN_LENGTH,
    GenerationOptions,
)
from .entropy import (
    calculate_entropy,
    get_entropy_percentage,
    get_strength_color,
    get_strength_label,
    meets_minimum_entropy,
)
from .errors import ProcessingError
from .generator import generate_password
from .pool import build_character_pool
from .random_source import DEFAULT_SOURCE, RandomSource
from .salt import SALT_DISCLOSURE, apply_salt, generate_salt, validate_salt

CLIPBOARD_CLEAR_MS = 15000


class GeneratorWidget(QWidget):
    """
    Generator panel: configuration, salt, password display and strength.
    """

    def __init__(
        self,
        source: RandomSource | None = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.source = source or DEFAULT_SOURCE

        # Secure clipboard auto-clear
        self._clipboard_token: str | None = None
        self._clipboard_timer = QTimer(self)
        self._clipboard_timer.setSingleShot(True)
        self._clipboard_timer.timeout.connect(self._on_clipboard_timeout)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addWidget(self._build_password_group())
        layout.addWidget(self._build_config_group())
        layout.addWidget(self._build_salt_group())
        layout.addWidget(self._build_status_label())

        self._update_strength()

    # -- groups --

    def _build_config_group(self) -> QGroupBox:
        group = QGroupBox("Options")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        length_label = QLabel(f"Password length ({MIN_LENGTH}-{MAX_LENGTH})")
        self.length_spin = QSpinBox()
        self.length_spin.setRange(MIN_LENGTH, MAX_LENGTH)
        self.length_spin.setValue(DEFAULT_LENGTH)
        self.length_spin.valueChanged.connect(self._update_strength)

        self.upper_check = QCheckBox("Uppercase (A-Z)")
        self.lower_check = QCheckBox("Lowercase (a-z)")
        self.numbers_check = QCheckBox("Numbers (0-9)")
        self.symbols_check = QCheckBox("Symbols (!@#$...)")

        layout.addWidget(length_label)
        layout.addWidget(self.length_spin)
        for check in self._class_checks():
            check.setChecked(True)
            check.toggled.connect(self._update_strength)
            layout.addWidget(check)

        hint = QLabel("NIST recommends 8-15 characters minimum for strong passwords")
        hint.setWordWrap(True)
        layout.addWidget(hint)

        group.setLayout(layout)
        return group

    def _build_password_group(self) -> QGroupBox:
        group = QGroupBox("Generated password")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.password_field = QLineEdit()
        self.password_field.setReadOnly(True)
        pw_font = QFont("Consolas")
        pw_font.setPointSize(13)
        self.password_field.setFont(pw_font)
        self.password_field.setPlaceholderText("Your password will appear here")

        buttons_row = QHBoxLayout()
        self.generate_button = QPushButton("Generate")
        self.generate_button.setCursor(Qt.PointingHandCursor)
        self.generate_button.clicked.connect(self.on_generate_clicked)
        self.copy_button = QPushButton("Copy to Clipboard")
        self.copy_button.clicked.connect(self.on_copy_clicked)
        buttons_row.addWidget(self.generate_button)
        buttons_row.addWidget(self.copy_button)

        self.strength_bar = QProgressBar()
        self.strength_bar.setRange(0, 100)
        self.strength_bar.setTextVisible(False)
        self.strength_label = QLabel("Password strength: -")
        self.strength_label.setAlignment(Qt.AlignCenter)

        self.threshold_label = QLabel(
            "Weak <30b | Moderate 30-50b | Strong 50-70b | Very Strong >70b"
        )
        self.threshold_label.setAlignment(Qt.AlignCenter)

        layout.addWidget(self.password_field)
        layout.addLayout(buttons_row)
        layout.addWidget(self.strength_bar)
        layout.addWidget(self.strength_label)
        layout.addWidget(self.threshold_label)

        group.setLayout(layout)
        return group

    def _build_salt_group(self) -> QGroupBox:
        group = QGroupBox("Salt (optional)")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.salt_edit = QLineEdit()
        self.salt_edit.setPlaceholderText("Enter custom salt or generate one...")
        self.salt_edit.textChanged.connect(self._update_salt_state)

        self.salt_info_label = QLabel("")

        row = QHBoxLayout()
        self.salt_generate_button = QPushButton("Generate Salt")
        self.salt_generate_button.clicked.connect(self.on_generate_salt_clicked)
        self.salt_clear_button = QPushButton("Clear Salt")
        self.salt_clear_button.clicked.connect(self.salt_edit.clear)
        row.addWidget(self.salt_generate_button)
        row.addWidget(self.salt_clear_button)

        note = QLabel(
            "Your generated password will have this salt appended to it. "
            + SALT_DISCLOSURE
        )
        note.setWordWrap(True)

        layout.addWidget(self.salt_edit)
        layout.addWidget(self.salt_info_label)
        layout.addLayout(row)
        layout.addWidget(note)

        group.setLayout(layout)
        return group

    def _build_status_label(self) -> QLabel:
        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        return self.status_label

    # -- state --

    def _class_checks(self) -> list[QCheckBox]:
        return [self.upper_check, self.lower_check, self.numbers_check, self.symbols_check]

    def current_options(self) -> GenerationOptions:
        return GenerationOptions.from_flags(
            length=self.length_spin.value(),
            uppercase=self.upper_check.isChecked(),
            lowercase=self.lower_check.isChecked(),
            numbers=self.numbers_check.isChecked(),
            symbols=self.symbols_check.isChecked(),
        )

    def _update_strength(self) -> None:
        options = self.current_options()
        pool = build_character_pool(options.enabled_classes)
        bits = calculate_entropy(len(pool), options.length)
        self._show_strength(bits)

    def _show_strength(self, bits: float) -> None:
        self.strength_bar.setValue(int(get_entropy_percentage(bits)))
        self.strength_bar.setStyleSheet(
            f"QProgressBar::chunk {{ background-color: {get_strength_color(bits)}; }}"
        )
        if bits <= 0:
            self.strength_label.setText("Password strength: -")
            return
        text = f"Password strength: {get_strength_label(bits)} ({bits:.1f} bits)"
        if not meets_minimum_entropy(bits):
            text += f" - below {MIN_ENTROPY_BITS} bits"
        self.strength_label.setText(text)

    def _update_salt_state(self, salt: str) -> bool:
        checked = validate_salt(salt)
        if checked.is_err():
            self.salt_info_label.setText(str(checked.error))
            return False
        self.salt_info_label.setText(f"Salt length: {len(salt)} characters" if salt else "")
        return True

    # -- actions --

    def on_generate_salt_clicked(self) -> None:
        self.salt_edit.setText(generate_salt(source=self.source))

    def on_generate_clicked(self) -> None:
        salt = self.salt_edit.text()
        if not self._update_salt_state(salt):
            self._show_error(self.salt_info_label.text())
            return

        result = generate_password(self.current_options(), self.source)
        if result.is_err():
            self._show_error(str(result.error))
            return

        generated = result.unwrap()
        self.password_field.setText(apply_salt(generated.password, salt))
        self._show_strength(generated.entropy_bits)
        self.status_label.setText(
            f"Generated {len(generated.password)} characters "
            f"from a pool of {generated.pool_size}."
        )

    def _arm_secure_clipboard(self, owner_tag: str, timeout_ms: int = CLIPBOARD_CLEAR_MS) -> None:
        """
        Start a timer to clear the clipboard after a short interval.

        owner_tag is used so we only clear clipboard content we put there.
        """
        self._clipboard_token = owner_tag
        self._clipboard_timer.start(timeout_ms)

    def _on_clipboard_timeout(self) -> None:
        if not self._clipboard_token:
            return

        cb = QGuiApplication.clipboard()
        if cb.text() == self._clipboard_token:
            cb.clear()

        self._clipboard_token = None
        self.status_label.setText("Clipboard cleared for safety.")

    def copy_to_clipboard(self) -> None:
        """
        Put the displayed password on the clipboard.

        Raises ProcessingError when there is nothing to copy or the host
        clipboard refuses the write.
        """
        password = self.password_field.text()
        if not password:
            raise ProcessingError("No password to copy. Generate one first.")

        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ProcessingError("No clipboard is available on this display.")
        clipboard.setText(password)
        # Windows clipboard can be temporarily locked by other apps
        if clipboard.text() != password:
            raise ProcessingError(
                "Could not copy to clipboard because another application is using it."
            )

        self._arm_secure_clipboard(owner_tag=password)

    def on_copy_clicked(self) -> None:
        try:
            self.copy_to_clipboard()
        except ProcessingError as exc:
            self._show_error(str(exc))
            return
        self.status_label.setText("Copied to clipboard (auto-clear in a few seconds).")

    def _show_error(self, message: str) -> None:
        self.status_label.setText(message)
        msg = QMessageBox(self)
        msg.setWindowTitle("Error")
        msg.setIcon(QMessageBox.Critical)
        msg.setText(message)
        msg.open()


class EntropassWindow(QMainWindow):
    def __init__(self, source: RandomSource | None = None) -> None:
        super().__init__()
        self.setWindowTitle("entropass")
        self.setMinimumSize(520, 720)

        self.generator = GeneratorWidget(source)
        self.setCentralWidget(self.generator)
        self._apply_base_style()

    def _apply_base_style(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow, QWidget {
                color: #e5e7eb;
                background-color: #05070c;
                font-family: Segoe UI, Arial, sans-serif;
            }
            QGroupBox {
                border: 1px solid #1f2933;
                border-radius: 10px;
                margin-top: 16px;
                background-color: #080b12;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                subcontrol-position: top left;
                padding: 2px 8px;
                color: #7dd3fc;
                font-weight: 600;
            }
            QLineEdit, QSpinBox {
                border: 1px solid #1f2933;
                border-radius: 6px;
                padding: 6px 8px;
                background-color: #050810;
            }
            QPushButton {
                border-radius: 8px;
                padding: 6px 14px;
                background-color: #0b1120;
                border: 1px solid #38bdf8;
            }
            QPushButton:hover {
                background-color: #020617;
            }
            QProgressBar {
                border: 1px solid #1f2933;
                border-radius: 6px;
                background-color: #050810;
                height: 12px;
            }
            """
        )


def main(source: RandomSource | None = None) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    window = EntropassWindow(source)
    window.show()
    return app.exec()
