"""
Main entry point: runs the counter demo.
"""

import asyncio
from typing import Optional

from rich.console import Console

from .config import RuntimeConfig, get_runtime_config
from .demo import CounterState, update, view
from .runtime import Application
from .schemas.actions import RenderTick
from .services.input import KeyInputSource, ResizeSource, TickSource
from .utils.logging import setup_logging
from .utils.ui.theme import THEME

console = Console()


async def main(
    verbose: bool = False,
    alt_screen: Optional[bool] = None,
    config: Optional[RuntimeConfig] = None,
) -> CounterState:
    """
    Run the counter demo until the user quits.

    Args:
        verbose: Log at DEBUG level
        alt_screen: Override the configured alternate-screen setting
        config: Runtime configuration, read from the environment by default
    """
    config = config or get_runtime_config()
    if alt_screen is not None:
        config = config.model_copy(update={"alt_screen": alt_screen})
    setup_logging(verbose=verbose, log_file=config.log_file)

    app = Application(
        CounterState(),
        update,
        view,
        config=config,
        sources=[
            KeyInputSource(),
            ResizeSource(),
            TickSource(tick_rate=config.tick_rate, frame_rate=config.frame_rate),
        ],
    )
    return await app.run(initial_actions=[RenderTick()])


def cli():
    """CLI entry point with argument parsing."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Counter demo for the termloop concurrent terminal runtime",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level (to TERMLOOP_LOG_FILE when set)",
    )
    parser.add_argument(
        "--no-screen",
        action="store_true",
        help="Draw inline instead of on the alternate screen",
    )
    args = parser.parse_args()

    try:
        state = asyncio.run(
            main(verbose=args.verbose, alt_screen=False if args.no_screen else None)
        )
    except KeyboardInterrupt:
        console.print(f"\n  [{THEME['muted']}]Interrupted[/]")
        return
    console.print(f"  [{THEME['muted']}]Final count:[/] {state.counter}")


if __name__ == "__main__":
    cli()
