"""
Base application state shared between the dispatch loop and the render task.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..services.channels import ActionSender


@dataclass
class AppState:
    """
    State owned by the application for the lifetime of the process.

    Applications subclass this with their own fields. Instances are only
    read or written while held through a StateCell.
    """

    should_quit: bool = False
    action_tx: Optional["ActionSender"] = field(
        default=None, repr=False, compare=False
    )
