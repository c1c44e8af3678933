"""
Configuration module for the runtime.
"""

from .runtime_config import RuntimeConfig, get_runtime_config

__all__ = ["RuntimeConfig", "get_runtime_config"]
