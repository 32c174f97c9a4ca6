"""Live numeric text masking engine."""

from .live_editor import EditorState, FieldHost, LiveEditor
from .mask_config import MaskConfig, MaskConfigError
from .number_format import (
    fixed_point,
    format_masked,
    parse_number,
    to_canonical,
    truncate_fraction,
    unmask,
)
from .scheduling import DeferredQueue, Scheduler

__all__ = [
    "EditorState",
    "FieldHost",
    "LiveEditor",
    "MaskConfig",
    "MaskConfigError",
    "fixed_point",
    "format_masked",
    "parse_number",
    "to_canonical",
    "truncate_fraction",
    "unmask",
    "DeferredQueue",
    "Scheduler",
]
