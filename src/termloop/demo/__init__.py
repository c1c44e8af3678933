"""
Demo applications built on the runtime.
"""

from .counter import CounterState, Decrement, Increment, update, view

__all__ = ["CounterState", "Decrement", "Increment", "update", "view"]
