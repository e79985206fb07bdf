from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console


@contextmanager
def progress_indicator(
    message: str,
    *,
    enabled: bool,
    console: Console | None = None,
) -> Iterator[None]:
    """Show a transient spinner on stderr while the block runs.

    The spinner is removed when the block exits, whether it raised or not.
    Nothing is drawn when *enabled* is false or stderr is not a terminal.

    Args:
        message: Text shown next to the spinner
        enabled: False in JSON mode
        console: Console to draw on (defaults to a stderr console)
    """
    if not enabled:
        yield
        return

    status_console = console or Console(stderr=True)
    with status_console.status(message, spinner='simpleDots'):
        yield
