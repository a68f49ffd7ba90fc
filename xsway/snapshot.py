"""
Snapshot of compositor state and the lookups over it.

A snapshot is taken once per invocation. Every lookup is a pure function of
the snapshot; commands sent later run against whatever the compositor state
has become by then.
"""

import re
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from .errors import WorkspaceNotFound
from .models import Output, Workspace

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(token: str) -> Optional[int]:
    """Parse a plain decimal integer, or return None."""
    if _INT_RE.fullmatch(token):
        return int(token)
    return None


class Snapshot(BaseModel):
    """Workspaces and outputs fetched at the start of an invocation."""
    model_config = ConfigDict(frozen=True)

    workspaces: List[Workspace] = Field(default_factory=list)
    outputs: List[Output] = Field(default_factory=list)

    @classmethod
    def fetch(cls, client) -> "Snapshot":
        return cls(
            workspaces=client.get_workspaces(),
            outputs=client.get_outputs()
        )

    def by_num(self, num: int) -> Workspace:
        for ws in self.workspaces:
            if ws.num == num:
                return ws
        raise WorkspaceNotFound(str(num))

    def by_name(self, name: str) -> Workspace:
        """First workspace, in snapshot order, whose name contains ``name``."""
        for ws in self.workspaces:
            if name in ws.name:
                return ws
        raise WorkspaceNotFound(name)

    def resolve(self, name_or_num: str) -> Workspace:
        """
        Look a workspace up by number or by name.

        Integer tokens are matched against workspace numbers only, even when
        the token also occurs inside some workspace name.

        Raises:
            WorkspaceNotFound: If no workspace matches
        """
        num = parse_int(name_or_num)
        if num is not None:
            return self.by_num(num)
        return self.by_name(name_or_num)

    def current(self) -> Workspace:
        for ws in self.workspaces:
            if ws.focused:
                return ws
        raise WorkspaceNotFound("focused")

    def on_output(self, output: str) -> Workspace:
        """The workspace currently visible on ``output``."""
        for ws in self.workspaces:
            if ws.visible and ws.output == output:
                return ws
        raise WorkspaceNotFound(output)

    def active_outputs(self) -> List[Output]:
        return [o for o in self.outputs if o.active]
