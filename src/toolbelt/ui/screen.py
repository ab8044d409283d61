"""Screens, navigation stacks and windows.

`Screen` is a unit of UI (a view controller). Screens can present other
screens modally; a `NavigationStack` is itself a screen that manages an
ordered stack of child screens; a `Window` hosts the root screen.

Animated changes create a `TransitionCoordinator`. While it is in flight
the affected screen reports `is_transitioning` and exposes the coordinator
through `transition_coordinator`. Whoever drives the animation finishes it
with `coordinator.complete()` (or passes ``transition_duration`` so that it
completes by itself).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from toolbelt.exceptions import ContractViolation
from toolbelt.ui.coordinator import TransitionContext, TransitionCoordinator
from toolbelt.ui.view import Layer, View

logger = logging.getLogger(__name__)

Completion = Callable[[], None]


class Screen:
    """A screen of UI, managing one root view."""

    def __init__(self, title: str = "", *, transition_duration: float | None = None) -> None:
        """Create a screen.

        Args:
            title: Human-readable name, used in logs.
            transition_duration: Seconds after which transitions started by
                this screen complete on their own. None means the host
                completes them explicitly.
        """
        self.title = title
        self.view = View(name=title)
        self.transition_duration = transition_duration
        self.is_being_presented = False
        self.is_being_dismissed = False
        self._navigation_stack: NavigationStack | None = None
        self._presented_screen: Screen | None = None
        self._presenting_screen: Screen | None = None
        self._coordinator: TransitionCoordinator | None = None

    @property
    def navigation_stack(self) -> NavigationStack | None:
        """The navigation stack this screen is a child of, if any."""
        return self._navigation_stack

    @property
    def presented_screen(self) -> Screen | None:
        """Screen presented modally by this screen or its presentation context."""
        return self._presentation_context()._presented_screen

    @property
    def presenting_screen(self) -> Screen | None:
        return self._presenting_screen

    @property
    def is_transitioning(self) -> bool:
        """True while the screen is appearing or disappearing."""
        return self.is_being_presented or self.is_being_dismissed

    @property
    def transition_coordinator(self) -> TransitionCoordinator | None:
        """Coordinator of the transition this screen takes part in.

        Falls back to the enclosing navigation stack's coordinator, so
        children pushed or popped by a stack see the stack's transition.
        """
        if self._coordinator is not None:
            return self._coordinator
        if self._navigation_stack is not None:
            return self._navigation_stack.transition_coordinator
        return None

    def present(
        self,
        screen: Screen,
        *,
        animated: bool = True,
        completion: Completion | None = None,
    ) -> None:
        """Present `screen` modally on top of this one.

        A screen inside a navigation stack presents from the outermost stack,
        which then owns the presentation.

        Args:
            screen: Screen to present. Must not already be presented.
            animated: Whether to animate the presentation.
            completion: Called after the presentation finishes.
        """
        context = self._presentation_context()
        if context is not self:
            context.present(screen, animated=animated, completion=completion)
            return
        if self._presented_screen is not None:
            logger.warning(
                "Attempt to present %r on %r which is already presenting %r",
                screen,
                self,
                self._presented_screen,
            )
            return
        if screen._presenting_screen is not None:
            raise ContractViolation(f"{screen!r} is already presented")

        self._presented_screen = screen
        screen._presenting_screen = self
        if not animated:
            if completion is not None:
                completion()
            return

        screen.is_being_presented = True
        coordinator = screen._begin_transition(self, screen)

        def finish(_context: TransitionContext) -> None:
            screen.is_being_presented = False
            screen._end_transition(coordinator)
            if completion is not None:
                completion()

        coordinator.animate_alongside(completion=finish)

    def dismiss(
        self,
        *,
        animated: bool = True,
        completion: Completion | None = None,
    ) -> None:
        """Dismiss the screen presented by this one, or this screen itself.

        Args:
            animated: Whether to animate the dismissal.
            completion: Called after the dismissal finishes.
        """
        context = self._presentation_context()
        if context is not self and self._presenting_screen is None:
            context.dismiss(animated=animated, completion=completion)
            return
        if self._presented_screen is not None:
            presenter, screen = self, self._presented_screen
        elif self._presenting_screen is not None:
            presenter, screen = self._presenting_screen, self
        else:
            if completion is not None:
                completion()
            return

        def detach() -> None:
            presenter._presented_screen = None
            screen._presenting_screen = None

        if not animated:
            detach()
            if completion is not None:
                completion()
            return

        screen.is_being_dismissed = True
        coordinator = screen._begin_transition(screen, presenter)

        def finish(_context: TransitionContext) -> None:
            screen.is_being_dismissed = False
            screen._end_transition(coordinator)
            detach()
            if completion is not None:
                completion()

        coordinator.animate_alongside(completion=finish)

    def _presentation_context(self) -> Screen:
        # Children of a navigation stack present from the outermost stack
        context = self
        while context._navigation_stack is not None:
            context = context._navigation_stack
        return context

    def _begin_transition(
        self, from_screen: Screen | None, to_screen: Screen | None
    ) -> TransitionCoordinator:
        coordinator = TransitionCoordinator(
            from_screen, to_screen, duration=self.transition_duration
        )
        self._coordinator = coordinator
        logger.debug("%r started %r", self, coordinator)
        return coordinator

    def _end_transition(self, coordinator: TransitionCoordinator) -> None:
        # A newer transition may have replaced this one
        if self._coordinator is coordinator:
            self._coordinator = None

    def __repr__(self) -> str:
        label = f" {self.title!r}" if self.title else ""
        return f"<{type(self).__name__}{label}>"


class NavigationStack(Screen):
    """A screen managing an ordered stack of child screens.

    The last screen in `screens` is the visible one.
    """

    def __init__(
        self,
        root: Screen | None = None,
        title: str = "",
        *,
        transition_duration: float | None = None,
    ) -> None:
        super().__init__(title, transition_duration=transition_duration)
        self._screens: list[Screen] = []
        if root is not None:
            self._attach(root)

    @property
    def screens(self) -> list[Screen]:
        return list(self._screens)

    @property
    def top_screen(self) -> Screen | None:
        return self._screens[-1] if self._screens else None

    @property
    def root_screen(self) -> Screen | None:
        return self._screens[0] if self._screens else None

    @property
    def layer(self) -> Layer:
        """Render layer of the stack's container view."""
        return self.view.layer

    @property
    def is_transitioning(self) -> bool:
        return super().is_transitioning or self._coordinator is not None

    @property
    def transition_coordinator(self) -> TransitionCoordinator | None:
        if self._coordinator is not None:
            return self._coordinator
        return super().transition_coordinator

    def push(self, screen: Screen, *, animated: bool = True) -> None:
        """Push `screen` onto the stack and make it visible.

        Raises:
            ContractViolation: If `screen` is a navigation stack or is already
                on a stack.
        """
        if isinstance(screen, NavigationStack):
            raise ContractViolation("Pushing a navigation stack is not supported")
        if screen._navigation_stack is not None:
            raise ContractViolation(f"{screen!r} is already on a navigation stack")
        previous = self.top_screen
        self._attach(screen)
        if animated:
            self._animate(previous, screen)

    def pop(self, *, animated: bool = True) -> Screen | None:
        """Pop the top screen.

        Returns:
            The popped screen, or None if only the root remains.
        """
        if len(self._screens) <= 1:
            return None
        popped = self._screens.pop()
        popped._navigation_stack = None
        if animated:
            self._animate(popped, self.top_screen)
        return popped

    def pop_to(self, screen: Screen, *, animated: bool = True) -> list[Screen]:
        """Pop screens until `screen` is on top.

        Returns:
            The popped screens, bottom-most first. Empty if `screen` was
            already on top.

        Raises:
            ContractViolation: If `screen` is not on this stack.
        """
        if screen not in self._screens:
            raise ContractViolation(f"{screen!r} is not on {self!r}")
        index = self._screens.index(screen)
        popped = self._screens[index + 1 :]
        if not popped:
            return []
        previous = self.top_screen
        del self._screens[index + 1 :]
        for item in popped:
            item._navigation_stack = None
        if animated:
            self._animate(previous, screen)
        return popped

    def pop_to_root(self, *, animated: bool = True) -> list[Screen]:
        """Pop all screens except the root.

        Returns:
            The popped screens. Empty if the stack holds one screen or none.
        """
        root = self.root_screen
        if root is None:
            return []
        return self.pop_to(root, animated=animated)

    def _attach(self, screen: Screen) -> None:
        self._screens.append(screen)
        screen._navigation_stack = self

    def _animate(self, from_screen: Screen | None, to_screen: Screen | None) -> None:
        coordinator = self._begin_transition(from_screen, to_screen)
        coordinator.animate_alongside(
            completion=lambda _context: self._end_transition(coordinator)
        )


class Window:
    """Top-level container hosting a root screen."""

    def __init__(self, root_screen: Screen | None = None) -> None:
        self.root_screen = root_screen

    @property
    def top_presented_screen(self) -> Screen | None:
        """The root screen, or the last screen of its presentation chain."""
        screen = self.root_screen
        while screen is not None and screen.presented_screen is not None:
            screen = screen.presented_screen
        return screen
