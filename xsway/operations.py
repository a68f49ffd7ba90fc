"""
User-facing xsway operations.

Each operation reads the invocation's snapshot, appends commands to the
context's chain, flushes the chain at most once and returns an
``OperationResult``. Lookup misses never escape an operation: they turn into
a fallback path or a no-op.
"""

import logging
from typing import List, Optional, Union

from .chain import CommandChain
from .config import Settings
from .errors import InvalidArgument, WorkspaceNotFound
from .ipc import SwayClient
from .models import Direction, Layout, OperationResult, SplitOrientation, Workspace
from .snapshot import Snapshot, parse_int

logger = logging.getLogger(__name__)


class Context:
    """Everything one invocation works with: client, snapshot, chain and logger."""

    def __init__(self, client, snapshot: Optional[Snapshot] = None,
                 log: Optional[logging.Logger] = None):
        self.client = client
        self.log = log or logger
        self.snapshot = snapshot if snapshot is not None else Snapshot.fetch(client)
        self.chain = CommandChain(self.log)
        self._flushed = False

    @classmethod
    def create(cls, settings: Optional[Settings] = None,
               log: Optional[logging.Logger] = None) -> "Context":
        return cls(SwayClient(settings), log=log)

    def flush(self, result: OperationResult) -> OperationResult:
        """Send the chain as a single request and record it on ``result``."""
        if self._flushed:
            raise RuntimeError("command chain already flushed")
        self._flushed = True
        if not len(self.chain):
            return result
        script = self.chain.script()
        self.log.debug("Run: %s", script)
        response = self.client.run_command(script)
        if not response.get("success"):
            self.log.debug("Compositor reported: %s", response.get("error"))
        result.commands = self.chain.commands
        return result


def parse_direction(value: Union[str, Direction]) -> Direction:
    try:
        return Direction(value)
    except ValueError:
        raise InvalidArgument(
            f"invalid direction {value!r}, expected one of: "
            + ", ".join(d.value for d in Direction)
        ) from None


# ============================================================================
# Output focus
# ============================================================================

def focus_output_at_position(ctx: Context, position: str) -> OperationResult:
    """
    Focus the active output at ``position``, counting from the left.

    Non-numeric or out of range positions are a no-op.
    """
    result = OperationResult(operation="focus-output-horizontal-position")
    index = parse_int(position)
    outputs = ctx.snapshot.active_outputs()
    if index is None or index < 0 or index >= len(outputs):
        ctx.log.debug("No active output at position %r", position)
        return result

    outputs = sorted(outputs, key=lambda o: o.rect.x)
    ctx.chain.focus_output(outputs[index].name)
    return ctx.flush(result)


# ============================================================================
# Workspace management
# ============================================================================

def show(ctx: Context, ws_name: str) -> OperationResult:
    """
    Show a workspace on the focused output, creating it if it does not exist.

    When the target is visible on another output the two workspaces trade
    places. Otherwise the target is pulled onto the focused output, and the
    current and target workspaces are visited once more in that order so
    that ``workspace back_and_forth`` leads back to the current one.
    """
    result = OperationResult(operation="show")
    snap, chain = ctx.snapshot, ctx.chain

    try:
        target = snap.resolve(ws_name)
    except WorkspaceNotFound:
        ctx.log.debug("No workspace matches %r, showing it by name", ws_name)
        chain.show(Workspace(name=ws_name))
        return ctx.flush(result)

    try:
        curr = snap.current()
    except WorkspaceNotFound:
        chain.show(target)
        return ctx.flush(result)

    if curr == target:
        return result

    if curr.visible and target.visible:
        chain.swap(curr, target)
    else:
        chain.show_on(target, curr.output)
        chain.show(curr)
        chain.show(target)
    chain.focus_output(curr.output)
    return ctx.flush(result)


def swap(ctx: Context) -> OperationResult:
    """Swap the workspaces of exactly two active outputs, keeping output focus."""
    result = OperationResult(operation="swap")
    snap = ctx.snapshot

    outputs = snap.active_outputs()
    if len(outputs) != 2:
        ctx.log.debug("swap needs 2 active outputs, found %d", len(outputs))
        return result
    try:
        ws0 = snap.resolve(outputs[0].current_workspace)
        ws1 = snap.resolve(outputs[1].current_workspace)
    except WorkspaceNotFound as e:
        ctx.log.debug("%s: %s", e, e.query)
        return result

    if ws0.focused:
        ctx.chain.swap(ws0, ws1)
    else:
        ctx.chain.swap(ws1, ws0)
    return ctx.flush(result)


def rename(ctx: Context, new_name: str) -> OperationResult:
    """Rename the focused workspace, keeping its number."""
    result = OperationResult(operation="rename")
    try:
        ws = ctx.snapshot.current()
    except WorkspaceNotFound:
        ws = None

    if ws is not None and ws.num != -1:
        new_name = f"{ws.num}:{new_name}"
    ctx.chain.rename(new_name)
    return ctx.flush(result)


def bind(ctx: Context, num: str) -> OperationResult:
    """
    Bind the focused workspace to ``num``.

    A workspace already holding ``num`` takes over the focused workspace's
    old number (or loses its number if the focused one had none). If that
    workspace lived on another output, the workspace it hid there is shown
    again.
    """
    result = OperationResult(operation="bind")
    snap, chain = ctx.snapshot, ctx.chain

    try:
        curr = snap.current()
    except WorkspaceNotFound as e:
        ctx.log.debug("bind: %s", e)
        return result
    curr_label = curr.label
    curr_num = str(curr.num)
    if curr_num == num:
        return result

    try:
        other = snap.resolve(num)
    except WorkspaceNotFound as e:
        result.notices.append(str(e))
    else:
        chain.show(other)
        if curr_num != "-1":
            chain.rename(f"{curr_num}:{other.label}")
        else:
            chain.rename(other.label)
        if other.output != curr.output:
            try:
                restore = snap.on_output(other.output)
            except WorkspaceNotFound:
                restore = None
            if restore is not None and restore != other:
                chain.show(restore)
        chain.show(curr)

    chain.rename(f"{num}:{curr_label}")
    chain.focus_output(curr.output)
    return ctx.flush(result)


def move(ctx: Context, ws_name_or_num: str) -> OperationResult:
    """Move the focused container to a workspace, creating it if needed."""
    result = OperationResult(operation="move")
    try:
        name = ctx.snapshot.resolve(ws_name_or_num).name
    except WorkspaceNotFound:
        name = ws_name_or_num
    ctx.chain.move_container_to_workspace(name)
    return ctx.flush(result)


# ============================================================================
# Layout
# ============================================================================

def merge(ctx: Context, direction: Union[str, Direction],
          orientation: Union[str, SplitOrientation],
          layout: Union[str, Layout]) -> OperationResult:
    """
    Merge the focused container into its neighbour in ``direction``.

    The neighbour is split with ``orientation``, the focused container is
    moved into the split and the split gets ``layout``.
    """
    result = OperationResult(operation="merge")
    try:
        d = parse_direction(direction)
    except InvalidArgument as e:
        result.error = str(e)
        return result

    chain = ctx.chain
    chain.focus(d)
    chain.split(orientation)
    chain.focus(d.opposite)
    chain.move(d)
    chain.layout(layout)
    return ctx.flush(result)


# ============================================================================
# Queries
# ============================================================================

def _list_order(ws: Workspace):
    # Numbered workspaces first, by number; then the rest by name.
    if ws.num != -1:
        return (0, ws.num, "")
    return (1, 0, ws.name)


def list_workspaces(ctx: Context) -> OperationResult:
    names: List[str] = [ws.name for ws in sorted(ctx.snapshot.workspaces, key=_list_order)]
    return OperationResult(operation="list", output="\n".join(names))


def current(ctx: Context) -> OperationResult:
    """Label of the focused workspace, or an empty string."""
    try:
        text = ctx.snapshot.current().label
    except WorkspaceNotFound:
        text = ""
    return OperationResult(operation="current", output=text)
