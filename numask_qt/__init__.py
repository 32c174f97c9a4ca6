"""PySide6 widgets for masked numeric input."""

from .masked_line_edit import LineEditField, MaskedLineEdit, QtScheduler

__all__ = ["LineEditField", "MaskedLineEdit", "QtScheduler"]
