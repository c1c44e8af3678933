"""
The concurrent runtime: dispatch loop, render task and orchestration.
"""

from .app import Application, run_app
from .dispatch_loop import DispatchLoop
from .render_task import RenderTask, RenderTaskState

__all__ = [
    "Application",
    "DispatchLoop",
    "RenderTask",
    "RenderTaskState",
    "run_app",
]
