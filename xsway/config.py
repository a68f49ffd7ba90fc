"""Runtime settings for xsway."""

from pydantic import BaseModel, Field, ConfigDict

DEFAULT_SWAYMSG = "swaymsg"
DEFAULT_TIMEOUT = 5.0

SWAYMSG_ENV = "XSWAY_SWAYMSG"
TIMEOUT_ENV = "XSWAY_TIMEOUT"


class Settings(BaseModel):
    """Settings for one invocation, built by the CLI from options and environment."""
    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra='forbid'
    )

    swaymsg: str = Field(
        default=DEFAULT_SWAYMSG,
        min_length=1,
        description="IPC client binary ('swaymsg', or 'i3-msg' under i3)"
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Seconds to wait for each IPC call"
    )
    debug: bool = Field(
        default=False,
        description="Log every command added to the chain and the script sent"
    )
