"""Views and render layers.

A minimal view tree: each `View` has a frame in its superview's coordinate
space, an ordered list of subviews, the layout guides it owns, and a render
`Layer` that records the animations attached to it.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from toolbelt.geometry import Point, Rect

if TYPE_CHECKING:
    from toolbelt.ui.layout import LayoutGuide

RGBA = tuple[int, int, int, int]


class Layer:
    """Render layer of a view; keeps the animations added to it by key."""

    def __init__(self) -> None:
        self._animations: dict[str, Any] = {}

    def add_animation(self, animation: Any, key: str) -> None:
        """Attach an animation, replacing any previous one under `key`."""
        self._animations[key] = animation

    def animation(self, key: str) -> Any | None:
        return self._animations.get(key)

    def animation_keys(self) -> list[str]:
        return list(self._animations)

    def remove_animation(self, key: str) -> None:
        self._animations.pop(key, None)

    def remove_all_animations(self) -> None:
        self._animations.clear()


class View:
    """A rectangular region of the screen that can contain other views."""

    def __init__(self, frame: Rect | None = None, *, name: str = "") -> None:
        self.name = name
        self.frame = frame or Rect()
        self.background_color: RGBA | None = None
        self.user_interaction_enabled = True
        self.layer = Layer()
        self._superview: View | None = None
        self._subviews: list[View] = []
        self._layout_guides: list[LayoutGuide] = []

    @property
    def superview(self) -> View | None:
        return self._superview

    @property
    def subviews(self) -> list[View]:
        return list(self._subviews)

    @property
    def layout_guides(self) -> list[LayoutGuide]:
        return list(self._layout_guides)

    @property
    def bounds(self) -> Rect:
        """The view's extent in its own coordinate space."""
        return Rect(x=0, y=0, width=self.frame.width, height=self.frame.height)

    def add_subview(self, view: View) -> None:
        """Add `view` on top of the current subviews, moving it if needed."""
        if view is self:
            raise ValueError("A view cannot be its own subview")
        view.remove_from_superview()
        self._subviews.append(view)
        view._superview = self

    def remove_from_superview(self) -> None:
        if self._superview is None:
            return
        self._superview._subviews.remove(self)
        self._superview = None

    def add_layout_guide(self, guide: LayoutGuide) -> None:
        """Take ownership of `guide`, removing it from its previous owner."""
        previous = guide.owning_view
        if previous is self:
            return
        if previous is not None:
            previous._layout_guides.remove(guide)
        self._layout_guides.append(guide)
        guide._set_owning_view(self)

    def remove_layout_guide(self, guide: LayoutGuide) -> None:
        if guide.owning_view is not self:
            return
        self._layout_guides.remove(guide)
        guide._set_owning_view(None)

    def walk(self) -> Iterator[View]:
        """Iterate over this view and all of its descendants, depth first."""
        yield self
        for subview in self._subviews:
            yield from subview.walk()

    def convert_to_window(self, point: Point) -> Point:
        """Convert a point in this view's coordinates to root coordinates."""
        x, y = point.x, point.y
        view: View | None = self
        while view is not None:
            x += view.frame.x
            y += view.frame.y
            view = view._superview
        return Point(x=x, y=y)

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return f"<{type(self).__name__}{label} frame={self.frame.to_tuple()}>"
