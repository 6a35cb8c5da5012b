from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from checkview.model.check_path import PartialPath
from checkview.model.ring_path import ArcDescriptor


class CheckState(Enum):
    """Visible state of the check mark."""
    UNCHECKED = "unchecked"
    ANIMATING = "animating"
    CHECKED = "checked"

    @property
    def is_checked(self) -> bool:
        return self is not CheckState.UNCHECKED


@dataclass(frozen=True)
class Frame:
    """Everything the renderer needs to draw one animation frame."""
    check_path: PartialPath
    ring_arc: ArcDescriptor
    scale: float
    state: CheckState
    layout_generation: int
