"""Configuration models for dockpilot."""

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class DockpilotConfig(BaseModel):
    """User configuration for dockpilot."""
    docker_host: Optional[str] = None
    log_channel_capacity: int = Field(default=100, ge=1)
    log_tail: Union[int, str] = "all"
    web_host: str = "0.0.0.0"
    exec_shell: str = "sh"
    terminal_command: Optional[List[str]] = None
    stop_timeout: int = Field(default=10, ge=0)
    force_delete: bool = False
