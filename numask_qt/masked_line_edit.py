"""QLineEdit bound to a :class:`~numask.live_editor.LiveEditor`."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Tuple

from PySide6.QtCore import QObject, Qt, QTimer, Signal
from PySide6.QtGui import QFocusEvent, QKeyEvent, QKeySequence
from PySide6.QtWidgets import QLineEdit, QWidget

from numask.live_editor import ConfigLike, LiveEditor
from numask.mask_config import MaskConfig
from numask.number_format import NumberLike, to_canonical
from numask.scheduling import Callback

_SHORTCUT_MODIFIERS = Qt.ControlModifier | Qt.AltModifier | Qt.MetaModifier


class QtScheduler:
    """Run callbacks on the next turn of the Qt event loop.

    Callbacks still queued when *receiver* is destroyed are dropped.
    """

    def __init__(self, receiver: QObject) -> None:
        self._receiver = receiver

    def call_soon(self, callback: Callback) -> None:
        QTimer.singleShot(0, self._receiver, callback)


class LineEditField:
    """Expose a ``QLineEdit`` through the field interface of the editor."""

    def __init__(self, edit: QLineEdit) -> None:
        self._edit = edit

    def text(self) -> str:
        return self._edit.text()

    def set_text(self, text: str) -> None:
        self._edit.setText(text)

    def selection(self) -> Tuple[int, int]:
        if self._edit.hasSelectedText():
            start = self._edit.selectionStart()
            return start, start + self._edit.selectionLength()
        position = self._edit.cursorPosition()
        return position, position

    def set_selection(self, start: int, end: int) -> None:
        if start == end:
            self._edit.setCursorPosition(start)
        else:
            self._edit.setSelection(start, end - start)

    def set_enabled(self, enabled: bool) -> None:
        self._edit.setEnabled(enabled)


class MaskedLineEdit(QLineEdit):
    """Line edit showing a grouped number and reporting its canonical value.

    ``valueChanged`` carries a :class:`~decimal.Decimal` rounded to the
    configured precision, or ``None``.  ``touched`` fires on every focus loss.
    """

    valueChanged = Signal(object)
    touched = Signal()

    def __init__(self, config: ConfigLike = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._editor = LiveEditor(
            LineEditField(self),
            QtScheduler(self),
            config,
            on_value_changed=self._emit_value,
            on_touched=self.touched.emit,
        )
        self.textEdited.connect(self._on_text_edited)

    # ---------------- public API ----------------
    @property
    def editor(self) -> LiveEditor:
        return self._editor

    def mask_config(self) -> MaskConfig:
        return self._editor.config

    def set_mask_config(self, config: ConfigLike) -> None:
        self._editor.reconfigure(config)

    def set_value(self, value: NumberLike) -> None:
        self._editor.set_value(value)

    def value(self) -> Optional[float]:
        """Return the canonical value of the current text."""
        return to_canonical(self.text(), self._editor.config)

    def set_disabled(self, disabled: bool) -> None:
        self._editor.set_disabled(disabled)

    def unbind(self) -> None:
        self.textEdited.disconnect(self._on_text_edited)
        self._editor.unbind()

    # ---------------- Qt events ----------------
    def focusInEvent(self, event: QFocusEvent) -> None:
        self._editor.handle_focus()
        super().focusInEvent(event)

    def focusOutEvent(self, event: QFocusEvent) -> None:
        super().focusOutEvent(event)
        self._editor.handle_blur()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.matches(QKeySequence.StandardKey.Paste):
            self._editor.handle_paste()
        elif event.matches(QKeySequence.StandardKey.Cut):
            self._editor.handle_cut()
        elif self._is_character_key(event):
            if not self._editor.handle_keypress(event.text()):
                event.accept()
                return
        super().keyPressEvent(event)

    # ---------------- internals ----------------
    @staticmethod
    def _is_character_key(event: QKeyEvent) -> bool:
        text = event.text()
        if len(text) != 1 or not text.isprintable():
            return False
        return not (event.modifiers() & _SHORTCUT_MODIFIERS)

    def _on_text_edited(self, _text: str) -> None:
        self._editor.handle_input()

    def _emit_value(self, value: Optional[Decimal]) -> None:
        self.valueChanged.emit(value)
