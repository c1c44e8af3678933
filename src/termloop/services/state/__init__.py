"""
Shared state services.
"""

from .state_cell import StateCell

__all__ = ["StateCell"]
