"""
UI Theme configuration: colors and icons for the bundled views.
"""

from typing import Dict

THEME: Dict[str, str] = {
    # Text Types
    "text": "#e6edf3",  # Main text
    "muted": "#7d8590",  # Muted text
    # UI Elements
    "border": "#30363d",
    "header": "#ffffff",
    # Counter
    "positive": "#00ff88",  # Bright green
    "negative": "#ff4444",  # Red
}

ICONS: Dict[str, str] = {
    "separator": "│",
    "arrow": "❯",
}

TICK_FRAMES = ["◐", "◓", "◑", "◒"]
