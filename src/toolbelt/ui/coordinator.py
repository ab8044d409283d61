"""Transition coordinators.

A `TransitionCoordinator` represents one in-flight visual transition. Code
that needs to run after the transition registers a completion with
`animate_alongside`; the owner of the transition (the navigation stack, a
presenting screen, or the host driving the animation) calls `complete`.

Completions never run inline: `complete` schedules each of them on the UI
loop in registration order, so owners registering their bookkeeping first
are guaranteed to have updated state before anyone else observes it.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from toolbelt.ui.runloop import main_loop

if TYPE_CHECKING:
    from toolbelt.ui.screen import Screen

logger = logging.getLogger(__name__)

_ids = itertools.count(1)


@dataclass(frozen=True)
class TransitionContext:
    """Details handed to transition completions.

    Attributes:
        from_screen: Screen that was visible when the transition began.
        to_screen: Screen that is visible once the transition ends.
        is_cancelled: True if the transition was cancelled (for example an
            interactive pop that was abandoned).
    """

    from_screen: Screen | None
    to_screen: Screen | None
    is_cancelled: bool = False


TransitionCompletion = Callable[[TransitionContext], None]


class TransitionCoordinator:
    """Coordinates code with a single in-flight transition."""

    def __init__(
        self,
        from_screen: Screen | None = None,
        to_screen: Screen | None = None,
        *,
        animated: bool = True,
        duration: float | None = None,
    ) -> None:
        """Create a coordinator bound to the running UI loop.

        Args:
            from_screen: Screen being replaced.
            to_screen: Screen being revealed.
            animated: Whether the transition is animated.
            duration: If given, the transition completes by itself after
                this many seconds. Otherwise the owner calls `complete`.
        """
        self.identifier = f"transition-{next(_ids)}"
        self.from_screen = from_screen
        self.to_screen = to_screen
        self.animated = animated
        self._loop = main_loop()
        self._completions: list[TransitionCompletion] = []
        self._context: TransitionContext | None = None
        self._done = self._loop.create_future()
        if duration is not None:
            self._loop.call_later(duration, self.complete)

    @property
    def is_complete(self) -> bool:
        return self._context is not None

    def animate_alongside(
        self,
        animation: Callable[[TransitionContext], None] | None = None,
        completion: TransitionCompletion | None = None,
    ) -> bool:
        """Run `animation` with the transition and `completion` after it.

        If the transition already finished, `completion` is scheduled right
        away and the call returns False.

        Args:
            animation: Called immediately with a provisional context.
            completion: Called once, on the UI loop, when the transition ends.

        Returns:
            True if the transition was still in flight.
        """
        if animation is not None:
            animation(TransitionContext(self.from_screen, self.to_screen))
        if self._context is not None:
            if completion is not None:
                self._loop.call_soon(completion, self._context)
            return False
        if completion is not None:
            self._completions.append(completion)
        return True

    def complete(self, *, cancelled: bool = False) -> None:
        """Mark the transition finished and schedule the completions.

        Completing twice is a no-op.

        Args:
            cancelled: Whether the transition was abandoned.
        """
        if self._context is not None:
            return
        self._context = TransitionContext(
            self.from_screen, self.to_screen, is_cancelled=cancelled
        )
        logger.debug(
            "Transition %s finished (cancelled=%s, %d completions)",
            self.identifier,
            cancelled,
            len(self._completions),
        )
        completions, self._completions = self._completions, []
        for completion in completions:
            self._loop.call_soon(completion, self._context)
        self._done.set_result(self._context)

    async def wait(self) -> TransitionContext:
        """Wait until the transition finishes."""
        return await asyncio.shield(self._done)

    def __repr__(self) -> str:
        state = "complete" if self.is_complete else "in flight"
        return f"<TransitionCoordinator {self.identifier} {state}>"
