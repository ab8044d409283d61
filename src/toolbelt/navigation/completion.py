"""Navigation stack operations with completion handlers.

Each helper performs the stack change with animation (a completion handler
is pointless otherwise) and calls `completion` once the transition is over.
When the stack is already in the requested state, nothing is animated and
`completion` is called before the helper returns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from toolbelt.ui.screen import NavigationStack, Screen

logger = logging.getLogger(__name__)

Completion = Callable[[], None]


def push(stack: NavigationStack, screen: Screen, completion: Completion) -> None:
    """Push `screen` and call `completion` after the transition.

    Raises:
        ContractViolation: If `screen` is already on a navigation stack.
    """
    stack.push(screen, animated=True)
    _set_completion_handler(stack, completion)


def pop(stack: NavigationStack, completion: Completion) -> Screen | None:
    """Pop the top screen and call `completion` after the transition.

    Returns:
        The popped screen, or None if the stack holds a single screen (in
        which case `completion` has already been called).
    """
    popped = stack.pop(animated=True)
    if popped is None:
        completion()
        return None
    _set_completion_handler(stack, completion)
    return popped


def pop_to(
    stack: NavigationStack, screen: Screen, completion: Completion
) -> list[Screen] | None:
    """Pop until `screen` is on top and call `completion` after the transition.

    Returns:
        The popped screens, or None if `screen` was already on top (in
        which case `completion` has already been called).

    Raises:
        ContractViolation: If `screen` is not on the stack.
    """
    if stack.top_screen is screen:
        completion()
        return None
    popped = stack.pop_to(screen, animated=True)
    _set_completion_handler(stack, completion)
    return popped


def pop_to_root(stack: NavigationStack, completion: Completion) -> list[Screen] | None:
    """Pop everything above the root and call `completion` after the transition.

    Returns:
        The popped screens, or None if the root was already on top (in
        which case `completion` has already been called).
    """
    if len(stack.screens) <= 1:
        completion()
        return None
    popped = stack.pop_to_root(animated=True)
    _set_completion_handler(stack, completion)
    return popped


def _set_completion_handler(stack: NavigationStack, completion: Completion) -> None:
    coordinator = stack.transition_coordinator
    if coordinator is None:
        logger.debug("No transition in flight on %r, completing immediately", stack)
        completion()
        return
    coordinator.animate_alongside(completion=lambda _context: completion())
