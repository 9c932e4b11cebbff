import asyncio
import sys


def run_async(coro):
    """
    Simple helper to run an async coroutine from synchronous code.

    This properly handles the event loop setup in all contexts:
    - Normal application usage
    - Within tests that use pytest-asyncio
    """
    try:
        return asyncio.run(coro)
    except RuntimeError as e:
        # If we're already in an event loop (like in pytest-asyncio tests)
        if "cannot be called from a running event loop" in str(e):
            loop = asyncio.get_event_loop()
            return loop.run_until_complete(coro)
        raise


def stdin_is_terminal() -> bool:
    """Whether standard input is attached to an interactive terminal."""
    stream = sys.stdin
    if stream is None or not hasattr(stream, "isatty"):
        return False
    try:
        return stream.isatty()
    except ValueError:
        # Closed stream
        return False
