"""
Channels, shared state and event sources used by the runtime.
"""

from .channels import ActionSender, Channel
from .state import StateCell

__all__ = ["ActionSender", "Channel", "StateCell"]
