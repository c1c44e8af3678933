"""
Runtime configuration for the dispatch loop, render task and event sources.

Values can be overridden through environment variables (or a .env file):

- TERMLOOP_TICK_RATE: application ticks per second
- TERMLOOP_FRAME_RATE: render ticks per second
- TERMLOOP_ACTION_QUEUE_CAPACITY: bound for the action channel (unset = unbounded)
- TERMLOOP_OVERFLOW_POLICY: "reject" or "drop_oldest"
- TERMLOOP_MAX_ACTION_CHAIN: follow-up depth limit ("none" disables it)
- TERMLOOP_COALESCE_RENDERS: collapse queued render requests into one draw
- TERMLOOP_ALT_SCREEN: draw on the alternate screen
- TERMLOOP_LOG_FILE: write logs to this file
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Dict, Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

ENV_PREFIX = "TERMLOOP_"

OverflowPolicy = Literal["reject", "drop_oldest"]


class RuntimeConfig(BaseModel):
    """Tunables for a running application."""

    tick_rate: float = Field(
        default=4.0, gt=0, description="Application ticks per second"
    )
    frame_rate: float = Field(
        default=30.0, gt=0, description="Render ticks per second"
    )
    action_queue_capacity: Optional[int] = Field(
        default=None, ge=1, description="Bound for the action channel"
    )
    overflow_policy: OverflowPolicy = Field(
        default="reject", description="What a full action channel does on send"
    )
    max_action_chain: Optional[int] = Field(
        default=64, ge=1, description="Maximum depth of follow-up action chains"
    )
    coalesce_renders: bool = Field(
        default=False, description="Draw once for a run of queued render requests"
    )
    alt_screen: bool = Field(
        default=True, description="Draw on the terminal's alternate screen"
    )
    log_file: Optional[str] = Field(
        default=None, description="Path of the log file, logging is discarded if unset"
    )

    @property
    def tick_interval(self) -> float:
        return 1.0 / self.tick_rate

    @property
    def frame_interval(self) -> float:
        return 1.0 / self.frame_rate

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RuntimeConfig":
        """
        Build a configuration from TERMLOOP_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ (a .env file is
                only loaded when reading the real environment)

        Returns:
            Validated RuntimeConfig
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        values: Dict[str, Optional[str]] = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None:
                continue
            if raw.strip().lower() in ("", "none"):
                values[name] = None
            else:
                values[name] = raw.strip()
        return cls.model_validate(values)


@lru_cache(maxsize=1)
def get_runtime_config() -> RuntimeConfig:
    """Get the process-wide configuration, read once from the environment."""
    return RuntimeConfig.from_env()
