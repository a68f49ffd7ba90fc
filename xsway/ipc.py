"""
Compositor IPC client.

Talks to sway through the ``swaymsg`` binary (``i3-msg`` takes the same
arguments, so xsway also runs under i3). Every call returns a result
dictionary instead of raising, and the typed query helpers degrade to empty
lists when the compositor cannot be reached.
"""

import json
import logging
import subprocess
from typing import Optional, List, Dict, Any

from pydantic import ValidationError

from .config import Settings
from .models import Output, Workspace

logger = logging.getLogger(__name__)


class SwayClient:
    """Thin wrapper around the compositor's message binary."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    def run_command(self, command: str) -> Dict[str, Any]:
        """
        Execute a compositor command script and return the result.

        Args:
            command: One or more commands joined with ';'

        Returns:
            Dictionary containing command output or error information
        """
        try:
            result = subprocess.run(
                [self.settings.swaymsg, "-t", "command", command],
                capture_output=True,
                text=True,
                check=True,
                timeout=self.settings.timeout
            )
            output = json.loads(result.stdout)
            return {
                "success": True,
                "output": output,
                "command": command
            }
        except subprocess.CalledProcessError as e:
            return {
                "success": False,
                "error": e.stderr or str(e),
                "command": command
            }
        except json.JSONDecodeError as e:
            return {
                "success": False,
                "error": f"Failed to parse {self.settings.swaymsg} output: {str(e)}",
                "command": command,
                "raw_output": result.stdout
            }
        except subprocess.TimeoutExpired:
            return {
                "success": False,
                "error": f"Command timed out after {self.settings.timeout:g} seconds",
                "command": command
            }
        except OSError as e:
            return {
                "success": False,
                "error": f"Failed to run {self.settings.swaymsg}: {str(e)}",
                "command": command
            }

    def get(self, msg_type: str) -> Dict[str, Any]:
        """
        Execute a get query (like get_workspaces, get_outputs).

        Args:
            msg_type: Type of get query without the prefix (e.g., 'workspaces')

        Returns:
            Dictionary containing query results or error information
        """
        try:
            result = subprocess.run(
                [self.settings.swaymsg, "-t", f"get_{msg_type}"],
                capture_output=True,
                text=True,
                check=True,
                timeout=self.settings.timeout
            )
            output = json.loads(result.stdout)
            return {
                "success": True,
                "data": output
            }
        except subprocess.CalledProcessError as e:
            return {
                "success": False,
                "error": e.stderr or str(e)
            }
        except json.JSONDecodeError as e:
            return {
                "success": False,
                "error": f"Failed to parse {self.settings.swaymsg} output: {str(e)}",
                "raw_output": result.stdout
            }
        except subprocess.TimeoutExpired:
            return {
                "success": False,
                "error": f"Query timed out after {self.settings.timeout:g} seconds"
            }
        except OSError as e:
            return {
                "success": False,
                "error": f"Failed to run {self.settings.swaymsg}: {str(e)}"
            }

    def get_workspaces(self) -> List[Workspace]:
        return self._get_list("workspaces", Workspace)

    def get_outputs(self) -> List[Output]:
        return self._get_list("outputs", Output)

    def _get_list(self, msg_type, model):
        result = self.get(msg_type)
        if not result["success"]:
            logger.debug("get_%s failed: %s", msg_type, result["error"])
            return []
        data = result["data"]
        if not isinstance(data, list):
            logger.debug("get_%s returned %s, expected a list", msg_type, type(data).__name__)
            return []
        try:
            return [model.model_validate(item) for item in data]
        except ValidationError as e:
            logger.debug("get_%s returned unexpected data: %s", msg_type, e)
            return []
