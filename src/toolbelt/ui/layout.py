"""Layout guides with explicit change observation.

A `LayoutGuide` is a non-rendering rectangle owned by a view. Interested
parties register for changes of its ``owning_view`` or ``frame`` with
`subscribe` and stop listening with `unsubscribe`.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from toolbelt.geometry import EdgeInsets, Rect
from toolbelt.ui.view import View

logger = logging.getLogger(__name__)

GuideAttribute = Literal["owning_view", "frame"]


@dataclass(frozen=True)
class GuideChange:
    """A change to one observed attribute of a layout guide.

    Attributes:
        guide: The guide that changed.
        attribute: Name of the changed attribute.
        old: Value before the change.
        new: Value after the change.
    """

    guide: LayoutGuide
    attribute: GuideAttribute
    old: Any
    new: Any


GuideObserver = Callable[[GuideChange], None]


class LayoutGuide:
    """A rectangular region used for positioning, owned by a view."""

    def __init__(self, frame: Rect | None = None, *, identifier: str = "") -> None:
        self.identifier = identifier
        self.preferred_focus: list[View] = []
        self._frame = frame or Rect()
        self._owning_view: View | None = None
        self._observers: dict[int, tuple[GuideAttribute, GuideObserver]] = {}
        self._tokens = itertools.count(1)

    @property
    def owning_view(self) -> View | None:
        return self._owning_view

    @property
    def frame(self) -> Rect:
        """Frame in the owning view's coordinate space."""
        return self._frame

    @frame.setter
    def frame(self, value: Rect) -> None:
        old, self._frame = self._frame, value
        if old != value:
            self._notify("frame", old, value)

    def _set_owning_view(self, view: View | None) -> None:
        old, self._owning_view = self._owning_view, view
        if old is not view:
            self._notify("owning_view", old, view)

    def subscribe(self, attribute: GuideAttribute, observer: GuideObserver) -> int:
        """Register `observer` for changes of `attribute`.

        Returns:
            Token to pass to `unsubscribe`.
        """
        token = next(self._tokens)
        self._observers[token] = (attribute, observer)
        return token

    def unsubscribe(self, token: int) -> None:
        """Stop delivering changes to the observer registered as `token`."""
        self._observers.pop(token, None)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def _notify(self, attribute: GuideAttribute, old: Any, new: Any) -> None:
        change = GuideChange(self, attribute, old, new)
        # Observers may unsubscribe while being notified
        for token, (observed, observer) in list(self._observers.items()):
            if observed == attribute and token in self._observers:
                observer(change)

    def __repr__(self) -> str:
        label = f" {self.identifier!r}" if self.identifier else ""
        return f"<LayoutGuide{label} frame={self._frame.to_tuple()}>"


def align_to_owner_horizontally(
    guide: LayoutGuide,
    view: View,
    insets: EdgeInsets | None = None,
) -> Rect:
    """Stretch `guide` across its owner horizontally and along `view` vertically.

    Useful for focus guides that must catch movement towards a view that is
    not directly above or below the focused one.

    Args:
        guide: Guide to position. Must already have an owning view.
        view: View whose vertical extent the guide follows. Its frame is
            expected in the owner's coordinate space.
        insets: Insets applied to the resulting frame.

    Returns:
        The guide's new frame.

    Raises:
        ValueError: If the guide has no owning view.
    """
    owner = guide.owning_view
    if owner is None:
        raise ValueError("Layout guide must be added to a view before aligning")
    insets = insets or EdgeInsets.zero()
    frame = Rect(
        x=owner.bounds.x,
        y=view.frame.y,
        width=owner.bounds.width,
        height=view.frame.height,
    ).inset_by(insets)
    guide.frame = frame
    return frame


def horizontal_focus_guide(
    view: View,
    superview: View | None = None,
    insets: EdgeInsets | None = None,
) -> LayoutGuide:
    """Create a focus guide spanning the container horizontally at `view`'s height.

    The guide is added to `superview` (or `view.superview`), aligned with
    `align_to_owner_horizontally`, and prefers focusing `view`.

    Raises:
        ValueError: If there is no container to add the guide to.
    """
    container = superview or view.superview
    if container is None:
        raise ValueError("Focus guide needs a superview")
    guide = LayoutGuide(identifier=f"focus:{view.name}" if view.name else "")
    container.add_layout_guide(guide)
    align_to_owner_horizontally(guide, view, insets)
    guide.preferred_focus = [view]
    logger.debug("Added horizontal focus guide %r to %r", guide, container)
    return guide
