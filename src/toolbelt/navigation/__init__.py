"""Navigation helpers built on the UI stack model.

Public API:
    - wait_until_top_screen_ready / top_screen_ready: defer work until the
      top presented screen is not transitioning
    - present_from_top_screen: present once the top screen is ready
    - push, pop, pop_to, pop_to_root: stack changes with completion handlers
    - push_retro, pop_retro, RetroPushAction, RetroPopAction: retro slides
"""

from toolbelt.navigation.completion import pop, pop_to, pop_to_root, push
from toolbelt.navigation.retro import (
    RetroPopAction,
    RetroPushAction,
    RetroTransition,
    TransitionAction,
    pop_retro,
    push_retro,
)
from toolbelt.navigation.waiter import (
    ReadinessWait,
    present_from_top_screen,
    top_screen_ready,
    wait_until_top_screen_ready,
)

__all__ = [
    "ReadinessWait",
    "RetroPopAction",
    "RetroPushAction",
    "RetroTransition",
    "TransitionAction",
    "pop",
    "pop_retro",
    "pop_to",
    "pop_to_root",
    "present_from_top_screen",
    "push",
    "push_retro",
    "top_screen_ready",
    "wait_until_top_screen_ready",
]
