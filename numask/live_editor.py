"""Stateful controller keeping a text field in sync with a numeric value."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Optional, Protocol, Tuple, Union

from .mask_config import MaskConfig, MaskConfigError
from .number_format import (
    NumberLike,
    fixed_point,
    format_masked,
    to_canonical,
    truncate_fraction,
    unmask,
)
from .scheduling import Scheduler
from .separators import find_decimal, is_allowed_keystroke, localize_decimal

logger = logging.getLogger(__name__)

ValueCallback = Callable[[Optional[Decimal]], None]
TouchedCallback = Callable[[], None]
ConfigLike = Union[MaskConfig, Mapping[str, Any], None]

_UNSET = object()


class FieldHost(Protocol):
    """The part of a host text widget the editor needs."""

    def text(self) -> str:  # pragma: no cover - protocol
        ...

    def set_text(self, text: str) -> None:  # pragma: no cover - protocol
        ...

    def selection(self) -> Tuple[int, int]:  # pragma: no cover - protocol
        ...

    def set_selection(self, start: int, end: int) -> None:  # pragma: no cover - protocol
        ...

    def set_enabled(self, enabled: bool) -> None:  # pragma: no cover - protocol
        ...


class EditorState(Enum):
    MASKED = "masked"
    EDITING = "editing"
    UNBOUND = "unbound"


def _resolve_config(config: ConfigLike) -> MaskConfig:
    if config is None:
        return MaskConfig()
    if isinstance(config, MaskConfig):
        return config
    if isinstance(config, Mapping):
        return MaskConfig.from_mapping(config)
    raise MaskConfigError(f"unsupported mask configuration: {config!r}")


class LiveEditor:
    """Drive one field through focus, keystroke, input, paste, cut and blur.

    While the field has focus it shows the editing form (no grouping); on
    blur and on external writes it shows the masked form.  The consumer is
    notified through ``on_value_changed`` only when the canonical value
    actually changes, and through ``on_touched`` on every blur.

    Paste, cut and caret restoration run through *scheduler* because the host
    applies its own edit only after the current event returns.
    """

    def __init__(
        self,
        field: FieldHost,
        scheduler: Scheduler,
        config: ConfigLike = None,
        on_value_changed: Optional[ValueCallback] = None,
        on_touched: Optional[TouchedCallback] = None,
    ) -> None:
        try:
            self._config = _resolve_config(config)
        except MaskConfigError:
            logger.error("Rejected mask configuration: %r", config)
            raise
        self._field = field
        self._scheduler = scheduler
        self._on_value_changed = on_value_changed
        self._on_touched = on_touched
        self._last_emitted: Any = _UNSET
        self._state = EditorState.MASKED
        logger.info(
            "Bound masked field: precision=%d decimal=%r thousand=%r",
            self._config.precision,
            self._config.decimal_separator,
            self._config.thousand_separator,
        )

    # ---------------- consumer side ----------------
    @property
    def config(self) -> MaskConfig:
        return self._config

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def last_emitted_value(self) -> Optional[float]:
        if self._last_emitted is _UNSET:
            return None
        return self._last_emitted

    def register_on_change(self, callback: Optional[ValueCallback]) -> None:
        self._on_value_changed = callback

    def register_on_touched(self, callback: Optional[TouchedCallback]) -> None:
        self._on_touched = callback

    def set_value(self, value: NumberLike) -> None:
        """Write an externally supplied value to the field in masked form."""
        if self._state is EditorState.UNBOUND:
            return
        self._write_masked(value)
        self._state = EditorState.MASKED

    def set_disabled(self, disabled: bool) -> None:
        if self._state is EditorState.UNBOUND:
            return
        self._field.set_enabled(not disabled)

    def reconfigure(self, config: ConfigLike) -> None:
        """Switch to *config*, re-rendering the current value with it.

        A field being edited stays in its ungrouped editing form.
        """
        if self._state is EditorState.UNBOUND:
            return
        try:
            new_config = _resolve_config(config)
        except MaskConfigError:
            logger.error("Rejected mask configuration: %r", config)
            raise
        value = to_canonical(self._field.text(), self._config)
        self._config = new_config
        if self._state is EditorState.EDITING:
            self._write_masked(value)
            self.handle_focus()
        else:
            self.set_value(value)
        logger.info("Reconfigured masked field: %s", new_config.to_mapping())

    def unbind(self) -> None:
        """Detach from the consumer; queued and later events become no-ops."""
        self._on_value_changed = None
        self._on_touched = None
        self._state = EditorState.UNBOUND

    # ---------------- field events ----------------
    def handle_focus(self) -> None:
        if self._state is EditorState.UNBOUND:
            return
        unmasked = unmask(self._field.text(), self._config.decimal_separator)
        self._write(localize_decimal(unmasked, self._config))
        self._state = EditorState.EDITING

    def handle_keypress(self, key: Union[str, int]) -> bool:
        """Classify a typed key; ``False`` means the host must not insert it."""
        if self._state is EditorState.UNBOUND:
            return True
        if isinstance(key, int):
            try:
                char = chr(key)
            except (ValueError, OverflowError):
                return False
        else:
            char = key

        if not is_allowed_keystroke(char, self._config):
            logger.debug("Rejected keystroke %r", char)
            return False
        if char != self._config.decimal_separator:
            return True

        text = self._field.text()
        index = find_decimal(text, self._config)
        if index < 0 or self._selection_spans(index):
            return True
        # Typing the separator again jumps past the existing one.
        self._field.set_selection(index + 1, index + 1)
        return False

    def handle_input(self) -> None:
        if self._state is EditorState.UNBOUND:
            return
        self._restrict_fraction()
        self._update_value()

    def handle_paste(self) -> None:
        self._scheduler.call_soon(self.handle_input)

    def handle_cut(self) -> None:
        self._scheduler.call_soon(self.handle_input)

    def handle_blur(self) -> None:
        if self._state is EditorState.UNBOUND:
            return
        value = to_canonical(self._field.text(), self._config)
        self._write_masked(value)
        self._state = EditorState.MASKED
        if self._on_touched is not None:
            self._on_touched()

    # ---------------- internals ----------------
    def _selection_spans(self, index: int) -> bool:
        start, end = self._field.selection()
        if start == end:
            return False
        return start <= index < end

    def _restrict_fraction(self) -> None:
        text = self._field.text()
        truncated = truncate_fraction(
            text, self._config.decimal_separator, self._config.precision
        )
        if truncated == text:
            return
        caret, _ = self._field.selection()
        self._write(truncated)
        logger.debug("Truncated fraction: %r -> %r", text, truncated)
        self._scheduler.call_soon(lambda: self._restore_caret(caret))

    def _restore_caret(self, position: int) -> None:
        if self._state is EditorState.UNBOUND:
            return
        position = max(0, min(position, len(self._field.text())))
        self._field.set_selection(position, position)

    def _update_value(self) -> None:
        value = to_canonical(self._field.text(), self._config)
        if self._last_emitted is not _UNSET and value == self._last_emitted:
            return
        self._last_emitted = value
        emitted = fixed_point(value, self._config.precision)
        logger.debug("Value changed: %s", emitted)
        if self._on_value_changed is not None:
            self._on_value_changed(emitted)

    def _write_masked(self, value: NumberLike) -> None:
        cfg = self._config
        self._write(
            format_masked(
                value, cfg.precision, cfg.decimal_separator, cfg.thousand_separator
            )
        )

    def _write(self, text: str) -> None:
        if self._config.disabled:
            text = ""
        self._field.set_text(text)


__all__ = ["FieldHost", "EditorState", "LiveEditor"]
