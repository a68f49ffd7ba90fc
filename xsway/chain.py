"""
Ordered builder for compositor command scripts.

Commands such as ``move workspace to output`` act on whatever the compositor
considers current when it reaches them, so the order in which commands are
added is part of their meaning. The chain is append-only.
"""

import logging
from enum import Enum
from typing import Iterator, List, Optional, Union

from .models import Direction, Layout, SplitOrientation, Workspace

logger = logging.getLogger(__name__)


def _token(value: Union[str, Enum]) -> str:
    if isinstance(value, Enum):
        return value.value
    return value


class CommandChain:
    """Commands to be sent to the compositor as one ';'-joined request."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self._commands: List[str] = []
        self.log = log or logger

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def commands(self) -> List[str]:
        return list(self._commands)

    def add(self, command: str) -> None:
        self.log.debug("Add cmd: %s", command)
        self._commands.append(command)

    def script(self) -> str:
        return ";".join(self._commands)

    # Primitives

    def show(self, ws: Workspace) -> None:
        self.add(f"workspace {ws.name}")

    def rename(self, new_name: str) -> None:
        self.add(f"rename workspace to {new_name}")

    def move_to_output(self, output: str) -> None:
        self.add(f"move workspace to output {output}")

    def focus_output(self, output: str) -> None:
        self.add(f"focus output {output}")

    def move_container_to_workspace(self, name: str) -> None:
        self.add(f"move container to workspace {name}")

    def focus(self, direction: Union[str, Direction]) -> None:
        self.add(f"focus {_token(direction)}")

    def split(self, orientation: Union[str, SplitOrientation]) -> None:
        self.add(f"split {_token(orientation)}")

    def move(self, direction: Union[str, Direction]) -> None:
        self.add(f"move {_token(direction)}")

    def layout(self, layout: Union[str, Layout]) -> None:
        self.add(f"layout {_token(layout)}")

    # Composites

    def swap(self, ws_a: Workspace, ws_b: Workspace) -> None:
        """
        Exchange two visible workspaces between their outputs.

        Expects ``ws_a`` to be the current workspace: it is sent to
        ``ws_b``'s output, ``ws_b`` is brought up and sent back to
        ``ws_a``'s output, and focus returns to that output.
        """
        self.move_to_output(ws_b.output)
        self.show(ws_b)
        self.move_to_output(ws_a.output)
        self.focus_output(ws_a.output)

    def show_on(self, ws: Workspace, output: str) -> None:
        """Show ``ws`` and pull it onto ``output`` if it lives elsewhere."""
        self.show(ws)
        if ws.output != output:
            self.move_to_output(output)
