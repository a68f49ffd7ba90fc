"""Exceptions raised inside xsway."""


class XswayError(Exception):
    """Base class for xsway errors."""


class WorkspaceNotFound(XswayError, LookupError):
    """No workspace in the snapshot matches a lookup."""

    def __init__(self, query: str = ""):
        self.query = query
        super().__init__("No workspace found")


class InvalidArgument(XswayError, ValueError):
    """An operation argument would produce a malformed compositor command."""
