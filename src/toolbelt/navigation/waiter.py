"""Wait for the top screen to be ready before acting on it.

Presenting a screen from a screen that is itself still appearing or
disappearing is unreliable. `wait_until_top_screen_ready` defers the
caller's work until the window's top presented screen is stable:

1. The check runs as a task on the UI loop, never inline.
2. No top screen: the callback receives None.
3. The top screen is transitioning and has a transition coordinator: the
   check is scheduled again, once, when the transition completes.
4. The top screen is transitioning without a coordinator: this should
   not happen and is reported as an assertion failure. With debug
   assertions enabled the wait fails: the `ContractViolation` goes to the
   loop's exception handler and is raised by `ReadinessWait.result()`, and
   the callback is never called. Otherwise the check is retried after
   ``settings.TRANSITION_RETRY_DELAY`` seconds.
5. Otherwise the callback receives the top screen.

The callback fires exactly once, unless the wait is cancelled first.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from toolbelt.config import settings
from toolbelt.exceptions import ContractViolation, assertion_failure
from toolbelt.ui.coordinator import TransitionContext
from toolbelt.ui.runloop import main_loop
from toolbelt.ui.screen import Screen, Window
from toolbelt.utils.logging import set_correlation_context

logger = logging.getLogger(__name__)

ReadyHandler = Callable[[Screen | None], None]


class ReadinessWait:
    """Handle for a pending wait on the top screen.

    Obtain one from `wait_until_top_screen_ready`. The wait can be cancelled
    while pending (for example when the screen that started it goes away)
    and awaited via `result`.
    """

    def __init__(
        self,
        window: Window,
        callback: ReadyHandler | None,
        *,
        retry_delay: float,
    ) -> None:
        self._window = window
        self._callback = callback
        self._retry_delay = retry_delay
        self._loop = main_loop()
        self._future: asyncio.Future[Screen | None] = self._loop.create_future()
        self._pending: asyncio.Handle | None = None
        self._transition: str | None = None
        self.checks = 0
        self.retries = 0

    def start(self) -> ReadinessWait:
        self._schedule()
        return self

    def done(self) -> bool:
        return self._future.done()

    def cancelled(self) -> bool:
        return self._future.cancelled()

    def cancel(self) -> bool:
        """Cancel the wait; the callback will not be called.

        Returns:
            True if the wait was still pending.
        """
        if self._future.done():
            return False
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self._future.cancel()
        logger.debug("Readiness wait cancelled after %d checks", self.checks)
        return True

    async def result(self) -> Screen | None:
        """Wait for the ready top screen.

        Raises:
            asyncio.CancelledError: If the wait was cancelled.
            ContractViolation: If the UI was found in an inconsistent state
                while debug assertions are enabled.
        """
        return await asyncio.shield(self._future)

    def _schedule(self) -> None:
        self._pending = self._loop.call_soon(self._check)

    def _schedule_after_transition(self, _context: TransitionContext) -> None:
        if not self._future.done():
            self._schedule()

    def _check(self) -> None:
        self._pending = None
        if self._future.done():
            return
        self.checks += 1

        screen = self._window.top_presented_screen
        if screen is None:
            self._finish(None)
            return
        set_correlation_context(screen=screen.title or repr(screen), transition=self._transition)

        if not screen.is_transitioning:
            self._finish(screen)
            return

        coordinator = screen.transition_coordinator
        if coordinator is not None:
            self._transition = coordinator.identifier
            set_correlation_context(transition=self._transition)
            logger.debug("Top screen %r is transitioning, waiting for %r", screen, coordinator)
            coordinator.animate_alongside(completion=self._schedule_after_transition)
            return

        try:
            assertion_failure("Top screen is transitioning without a transition coordinator")
        except ContractViolation as e:
            self._fail(e)
            return
        self.retries += 1
        self._pending = self._loop.call_later(self._retry_delay, self._check)

    def _fail(self, error: ContractViolation) -> None:
        self._future.set_exception(error)
        self._loop.call_exception_handler(
            {
                "message": "Readiness wait failed",
                "exception": error,
                "future": self._future,
            }
        )
        # Reported to the loop; awaiting result() still raises it
        self._future.exception()

    def _finish(self, screen: Screen | None) -> None:
        self._future.set_result(screen)
        if self._callback is not None:
            self._callback(screen)


def wait_until_top_screen_ready(
    window: Window,
    callback: ReadyHandler | None = None,
    *,
    retry_delay: float | None = None,
) -> ReadinessWait:
    """Call `callback` with the top presented screen once it is not transitioning.

    Returns immediately; the check runs on the UI loop.

    Args:
        window: Window whose presentation chain is inspected.
        callback: Receives the ready top screen, or None if there is none.
        retry_delay: Delay for the coordinator-less fallback. Defaults to
            ``settings.TRANSITION_RETRY_DELAY``.

    Returns:
        Handle that can be cancelled or awaited.

    Raises:
        ContractViolation: If called outside of the UI event loop.
    """
    delay = settings.TRANSITION_RETRY_DELAY if retry_delay is None else retry_delay
    return ReadinessWait(window, callback, retry_delay=delay).start()


async def top_screen_ready(window: Window) -> Screen | None:
    """Coroutine form of `wait_until_top_screen_ready`."""
    return await wait_until_top_screen_ready(window).result()


def present_from_top_screen(
    window: Window,
    screen: Screen,
    *,
    animated: bool = True,
    completion: Callable[[], None] | None = None,
) -> ReadinessWait:
    """Present `screen` from the top presented screen once it is ready.

    If the window has no screen at all, `completion` is called without
    presenting anything.

    Returns:
        Handle of the underlying readiness wait.
    """

    def present(top: Screen | None) -> None:
        if top is None:
            if completion is not None:
                completion()
            return
        top.present(screen, animated=animated, completion=completion)

    return wait_until_top_screen_ready(window, present)
