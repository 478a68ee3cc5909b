"""Theme customizer window."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QThread
from PySide6.QtGui import QColor, QGuiApplication
from PySide6.QtWidgets import (
    QColorDialog,
    QComboBox,
    QDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
)

from themekit.core.color import is_hex_color
from themekit.core.personalize import PersonalizeThemeRequest
from themekit.themes.constants import AVAILABLE_FONTS
from themekit.themes.loader import theme_share_text
from themekit.themes.models import Theme, ThemeSuggestion
from themekit.workers.suggestion_worker import SuggestionWorker

if TYPE_CHECKING:
    from themekit.core.personalize import SuggestionProvider
    from themekit.themes.store import ThemeStore


class ThemeDialog(QDialog):
    """Edit the active theme and review generated suggestions."""

    def __init__(
        self,
        store: ThemeStore,
        provider: SuggestionProvider | None = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._provider = provider
        self._thread: QThread | None = None
        self._worker: SuggestionWorker | None = None
        self.setWindowTitle("Customize Theme")
        self.setMinimumWidth(520)
        self._setup_ui()
        self._store.theme_changed.connect(self._load_theme)
        self._store.suggestion_changed.connect(self._show_suggestion)
        self._load_theme(self._store.theme)
        self._show_suggestion(self._store.ai_suggested_theme)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        heading = QLabel("Customize Theme")
        heading.setObjectName("ThemeHeading")
        layout.addWidget(heading)

        editor = QGroupBox("Theme")
        form = QFormLayout(editor)
        self._name_edit = QLineEdit()
        form.addRow("Name:", self._name_edit)
        self._primary_edit = self._add_color_row(form, "Primary:")
        self._background_edit = self._add_color_row(form, "Background:")
        self._accent_edit = self._add_color_row(form, "Accent:")
        self._font_combo = QComboBox()
        for option in AVAILABLE_FONTS:
            self._font_combo.addItem(option.name, option.name)
        form.addRow("Font:", self._font_combo)

        editor_buttons = QHBoxLayout()
        self._save_btn = QPushButton("Save Theme")
        self._save_btn.clicked.connect(self._save_theme)
        self._reset_btn = QPushButton("Reset to Default")
        self._reset_btn.setObjectName("SecondaryButton")
        self._reset_btn.clicked.connect(self._store.reset_theme)
        self._copy_btn = QPushButton("Copy Theme")
        self._copy_btn.setObjectName("SecondaryButton")
        self._copy_btn.clicked.connect(self._copy_theme)
        editor_buttons.addWidget(self._save_btn)
        editor_buttons.addWidget(self._reset_btn)
        editor_buttons.addWidget(self._copy_btn)
        form.addRow(editor_buttons)
        layout.addWidget(editor)

        generator = QGroupBox("AI Theme Generator")
        gen_layout = QVBoxLayout(generator)
        self._preferences_edit = QPlainTextEdit()
        self._preferences_edit.setPlaceholderText("Describe the colors and styles you like")
        self._usage_edit = QLineEdit()
        self._usage_edit.setPlaceholderText("How and when do you use the app?")
        self._generate_btn = QPushButton("Generate Theme")
        self._generate_btn.clicked.connect(self._generate)
        self._generate_btn.setEnabled(self._provider is not None)
        self._suggestion_label = QLabel("")
        self._suggestion_label.setObjectName("StatusDetail")
        self._suggestion_label.setWordWrap(True)
        self._apply_suggestion_btn = QPushButton("Apply Suggestion")
        self._apply_suggestion_btn.clicked.connect(self._store.apply_ai_suggestion)
        gen_layout.addWidget(self._preferences_edit)
        gen_layout.addWidget(self._usage_edit)
        gen_layout.addWidget(self._generate_btn)
        gen_layout.addWidget(self._suggestion_label)
        gen_layout.addWidget(self._apply_suggestion_btn)
        layout.addWidget(generator)

        self._status = QLabel("")
        self._status.setObjectName("StatusDetail")
        self._status.setWordWrap(True)
        layout.addWidget(self._status)

    def _add_color_row(self, form: QFormLayout, label: str) -> QLineEdit:
        edit = QLineEdit()
        edit.setMaxLength(7)
        pick = QPushButton("Pick")
        pick.setObjectName("SecondaryButton")
        pick.clicked.connect(lambda: self._pick_color(edit))
        row = QHBoxLayout()
        row.setContentsMargins(0, 0, 0, 0)
        row.addWidget(edit, 1)
        row.addWidget(pick)
        form.addRow(label, row)
        return edit

    def _pick_color(self, edit: QLineEdit) -> None:
        initial = QColor(edit.text()) if is_hex_color(edit.text()) else QColor("#ffffff")
        color = QColorDialog.getColor(initial, self, "Choose Color")
        if color.isValid():
            edit.setText(color.name().upper())

    def _load_theme(self, theme: Theme) -> None:
        self._name_edit.setText(theme.name)
        self._primary_edit.setText(theme.primary)
        self._background_edit.setText(theme.background)
        self._accent_edit.setText(theme.accent)
        index = self._font_combo.findData(theme.font)
        self._font_combo.setCurrentIndex(max(0, index))

    def current_theme(self) -> Theme:
        return Theme(
            name=self._name_edit.text().strip() or "Custom",
            primary=self._primary_edit.text().strip(),
            background=self._background_edit.text().strip(),
            accent=self._accent_edit.text().strip(),
            font=str(self._font_combo.currentData() or AVAILABLE_FONTS[0].name),
        )

    def _save_theme(self) -> None:
        theme = self.current_theme()
        self._store.set_theme(theme)
        invalid = [
            label
            for label, value in (
                ("primary", theme.primary),
                ("background", theme.background),
                ("accent", theme.accent),
            )
            if not is_hex_color(value)
        ]
        if invalid:
            self._status.setText(f"Saved. Not a hex color, left unchanged: {', '.join(invalid)}")
        else:
            self._status.setText(f"Saved theme: {theme.name}")

    def _copy_theme(self) -> None:
        QGuiApplication.clipboard().setText(theme_share_text(self._store.theme))
        self._status.setText("Theme settings copied to clipboard.")

    def _show_suggestion(self, suggestion: ThemeSuggestion | None) -> None:
        self._apply_suggestion_btn.setEnabled(suggestion is not None)
        if suggestion is None:
            self._suggestion_label.setText("")
            return
        text = (
            f"{suggestion.theme_name or 'Untitled'}: "
            f"{suggestion.primary_color} / {suggestion.background_color} / "
            f"{suggestion.accent_color}, {suggestion.font}"
        )
        if not suggestion.is_theme_acceptable:
            text += "\nReview recommended before applying."
        self._suggestion_label.setText(text)

    def _generate(self) -> None:
        if self._provider is None or self._thread is not None:
            return
        request = PersonalizeThemeRequest(
            user_preferences=self._preferences_edit.toPlainText(),
            usage_patterns=self._usage_edit.text(),
        )
        self._generate_btn.setEnabled(False)
        self._status.setText("Generating theme...")

        thread = QThread(self)
        worker = SuggestionWorker(self._provider, request)
        worker.moveToThread(thread)
        thread.started.connect(worker.run)
        worker.finished.connect(self._on_suggestion)
        worker.error.connect(self._on_suggestion_error)
        for signal in (worker.finished, worker.error, worker.cancelled):
            signal.connect(thread.quit)
        thread.finished.connect(worker.deleteLater)
        thread.finished.connect(thread.deleteLater)
        thread.finished.connect(self._on_thread_finished)
        self._thread = thread
        self._worker = worker
        thread.start()

    def _on_suggestion(self, suggestion: ThemeSuggestion) -> None:
        self._store.set_ai_suggested_theme(suggestion)
        self._status.setText(f"Theme {suggestion.theme_name!r} suggested.")

    def _on_suggestion_error(self, message: str) -> None:
        self._store.set_ai_suggested_theme(None)
        self._status.setText(message)

    def _on_thread_finished(self) -> None:
        self._thread = None
        self._worker = None
        self._generate_btn.setEnabled(self._provider is not None)

    def closeEvent(self, event) -> None:
        if self._worker is not None:
            self._worker.cancel()
        if self._thread is not None:
            self._thread.quit()
            self._thread.wait(2000)
        super().closeEvent(event)
