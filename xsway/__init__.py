"""
xsway: XMonad style workspace handling for sway.

Each invocation takes one snapshot of the compositor's workspaces and
outputs, builds an ordered chain of sway commands and sends it as a single
request.
"""

__version__ = "0.1.0"
