"""Retro (pre-flat design) push and pop transitions.

Instead of the platform's default animation, the whole container slides
in from the side. The slide is attached to the stack's render layer and
the stack change itself is performed without animation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from toolbelt.config import settings
from toolbelt.exceptions import assertion_failure
from toolbelt.ui.screen import NavigationStack, Screen

logger = logging.getLogger(__name__)

RETRO_PUSH_KEY = "RetroPush"
RETRO_POP_KEY = "RetroPop"


class TimingFunction(Enum):
    LINEAR = "linear"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_EASE_OUT = "ease-in-ease-out"


class TransitionType(Enum):
    FADE = "fade"
    MOVE_IN = "move-in"
    PUSH = "push"
    REVEAL = "reveal"


class TransitionSubtype(Enum):
    FROM_RIGHT = "from-right"
    FROM_LEFT = "from-left"
    FROM_TOP = "from-top"
    FROM_BOTTOM = "from-bottom"


@dataclass(frozen=True)
class RetroTransition:
    """A layer transition description.

    Attributes:
        duration: Length of the transition in seconds.
        subtype: Direction the new content comes from.
        timing: Pacing of the transition.
        type: Kind of transition.
    """

    duration: float
    subtype: TransitionSubtype
    timing: TimingFunction = TimingFunction.EASE_IN_EASE_OUT
    type: TransitionType = TransitionType.PUSH

    @classmethod
    def for_push(cls) -> RetroTransition:
        return cls(settings.RETRO_TRANSITION_DURATION, TransitionSubtype.FROM_RIGHT)

    @classmethod
    def for_pop(cls) -> RetroTransition:
        return cls(settings.RETRO_TRANSITION_DURATION, TransitionSubtype.FROM_LEFT)


def push_retro(stack: NavigationStack, screen: Screen) -> None:
    """Push `screen` with a retro slide from the right."""
    stack.layer.add_animation(RetroTransition.for_push(), RETRO_PUSH_KEY)
    stack.push(screen, animated=False)


def pop_retro(stack: NavigationStack) -> Screen | None:
    """Pop the top screen with a retro slide from the left.

    Returns:
        The popped screen, or None if only the root remains.
    """
    stack.layer.add_animation(RetroTransition.for_pop(), RETRO_POP_KEY)
    return stack.pop(animated=False)


class TransitionAction(ABC):
    """A declarative transition from a source screen to a destination screen."""

    def __init__(self, source: Screen, destination: Screen, identifier: str = "") -> None:
        self.source = source
        self.destination = destination
        self.identifier = identifier

    @abstractmethod
    def perform(self) -> None:
        """Carry out the transition."""

    def _navigation_stack(self) -> NavigationStack | None:
        stack = self.source.navigation_stack
        if stack is None:
            assertion_failure(
                f"{type(self).__name__} must be performed within a navigation stack",
                source=repr(self.source),
            )
        return stack


class RetroPushAction(TransitionAction):
    """Pushes the destination onto the source's stack with a retro slide."""

    def perform(self) -> None:
        stack = self._navigation_stack()
        if stack is None:
            return
        push_retro(stack, self.destination)


class RetroPopAction(TransitionAction):
    """Pops the source's stack with a retro slide (the unwind of `RetroPushAction`)."""

    def perform(self) -> None:
        stack = self._navigation_stack()
        if stack is None:
            return
        pop_retro(stack)
