import logging
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from PySide6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from numask.mask_config import MaskConfig

from .masked_line_edit import MaskedLineEdit

logger = logging.getLogger(__name__)

DEMO_CONFIGS: List[Tuple[str, MaskConfig]] = [
    ("1,234.5 (en)", MaskConfig.for_lang("en", 2)),
    ("1 234,5 (ru)", MaskConfig.for_lang("ru", 2)),
    ("1.234,5 (de)", MaskConfig(2, ",", ".")),
    ("Без маски", MaskConfig(2, " ", " ")),
]


class MaskDemoWindow(QWidget):
    """Окно с несколькими полями ввода суммы в разных форматах."""

    def __init__(
        self,
        default_config: Optional[MaskConfig] = None,
        initial_value: float = 1234.5,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.setWindowTitle("numask")
        self.fields: Dict[str, MaskedLineEdit] = {}
        self.value_labels: Dict[str, QLabel] = {}

        configs = list(DEMO_CONFIGS)
        if default_config is not None:
            configs.insert(0, ("Настройки пользователя", default_config))

        layout = QVBoxLayout(self)
        group = QGroupBox("Поля ввода")
        form = QFormLayout()
        for title, config in configs:
            form.addRow(title, self._create_row(title, config, initial_value))
        group.setLayout(form)
        layout.addWidget(group)

    def _create_row(self, title: str, config: MaskConfig, initial_value: float) -> QWidget:
        row = QWidget()
        hbox = QHBoxLayout(row)
        hbox.setContentsMargins(0, 0, 0, 0)

        edit = MaskedLineEdit(config)
        edit.set_value(initial_value)
        value_label = QLabel("—")
        edit.valueChanged.connect(lambda value, t=title: self._on_value_changed(t, value))
        edit.touched.connect(lambda t=title: logger.debug("Field touched: %s", t))

        hbox.addWidget(edit, 1)
        hbox.addWidget(value_label)
        self.fields[title] = edit
        self.value_labels[title] = value_label
        return row

    def _on_value_changed(self, title: str, value: Optional[Decimal]) -> None:
        self.value_labels[title].setText("—" if value is None else str(value))
        logger.info("Value of %s changed to %s", title, value)
