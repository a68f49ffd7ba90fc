"""
Value models for sway workspaces and outputs.

These mirror the JSON returned by ``swaymsg -t get_workspaces`` and
``swaymsg -t get_outputs``. They are read-only snapshots: nothing in xsway
mutates them after they are parsed.
"""

from typing import Optional, List
from enum import Enum

from pydantic import BaseModel, Field, field_validator, ConfigDict


# ============================================================================
# Enums
# ============================================================================

class Direction(str, Enum):
    """Direction for container focus and movement."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class SplitOrientation(str, Enum):
    """Split orientation."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    TOGGLE = "toggle"


class Layout(str, Enum):
    """Container layout types."""
    DEFAULT = "default"
    STACKING = "stacking"
    TABBED = "tabbed"
    SPLIT_H = "splith"
    SPLIT_V = "splitv"


# ============================================================================
# Snapshot models
# ============================================================================

class Rect(BaseModel):
    """Geometry of an output in layout coordinates."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class Workspace(BaseModel):
    """A workspace as reported by the compositor."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    name: str = ""
    num: int = Field(
        default=-1,
        description="Leading number of the name, -1 when the workspace is unnumbered"
    )
    output: str = ""
    visible: bool = False
    focused: bool = False

    @property
    def label(self) -> str:
        return label(self.name)


class Output(BaseModel):
    """A display output as reported by the compositor."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    name: str = ""
    rect: Rect = Field(default_factory=Rect)
    active: bool = False
    current_workspace: str = Field(
        default="",
        description="Name of the workspace visible on this output"
    )

    @field_validator('current_workspace', mode='before')
    @classmethod
    def null_workspace(cls, v: Optional[str]) -> str:
        # Disabled outputs report null.
        return "" if v is None else v


class OperationResult(BaseModel):
    """Outcome of one user-facing operation."""
    model_config = ConfigDict(validate_assignment=True, extra='forbid')

    operation: str
    commands: List[str] = Field(
        default_factory=list,
        description="Commands sent to the compositor, in order (empty for a no-op)"
    )
    output: str = Field(
        default="",
        description="Text the operation prints, without trailing newline"
    )
    notices: List[str] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


def label(full_name: str) -> str:
    """
    Return the human-facing part of a workspace name.

    ``"2:web"`` gives ``"web"``. Only the text between the first and the
    second colon is kept, so ``"1:a:b"`` gives ``"a"``. Names without a
    colon are returned unchanged.
    """
    parts = full_name.split(":")
    if len(parts) > 1:
        return parts[1]
    return full_name
