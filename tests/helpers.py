"""Shared test helpers."""

from __future__ import annotations

from typing import Any

from xsway.models import Output, Rect, Workspace
from xsway.operations import Context
from xsway.snapshot import Snapshot


class FakeClient:
    """Stands in for SwayClient, recording every script sent."""

    def __init__(self, workspaces=None, outputs=None, settings: Any = None):
        self.workspaces = list(workspaces or [])
        self.outputs = list(outputs or [])
        self.settings = settings
        self.sent: list[str] = []

    def get_workspaces(self):
        return list(self.workspaces)

    def get_outputs(self):
        return list(self.outputs)

    def run_command(self, command: str):
        self.sent.append(command)
        return {"success": True, "output": [{"success": True}], "command": command}


def ws(name: str, num: int = -1, output: str = "eDP-1",
       visible: bool = False, focused: bool = False) -> Workspace:
    return Workspace(name=name, num=num, output=output, visible=visible, focused=focused)


def out(name: str, x: int = 0, active: bool = True, current: str = "") -> Output:
    return Output(
        name=name,
        rect=Rect(x=x, y=0, width=1920, height=1080),
        active=active,
        current_workspace=current,
    )


def make_context(workspaces=(), outputs=()) -> tuple[Context, FakeClient]:
    client = FakeClient(workspaces, outputs)
    return Context(client), client


def snapshot(workspaces=(), outputs=()) -> Snapshot:
    return Snapshot(workspaces=list(workspaces), outputs=list(outputs))
