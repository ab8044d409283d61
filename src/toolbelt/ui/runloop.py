"""Access to the UI event loop.

All UI work (stack mutations, transition completions, readiness checks)
runs as callbacks on a single asyncio event loop, which plays the role of
the platform's main thread.
"""

from __future__ import annotations

import asyncio

from toolbelt.exceptions import ContractViolation


def main_loop() -> asyncio.AbstractEventLoop:
    """Return the running UI event loop.

    Raises:
        ContractViolation: If called outside of a running event loop.
    """
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        raise ContractViolation(
            "UI operations must run on the UI event loop"
        ) from None
