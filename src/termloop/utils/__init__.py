"""
Utility modules: logging setup and terminal UI helpers.
"""
