"""Debug overlays revealing layout guides.

A layout guide does not render anything, which makes misplaced guides hard
to spot. `LayoutGuideRevealer` inserts a translucent, non-interactive view
into the guide's owning view and keeps it sized and centered on the guide.

The overlay belongs to exactly one owner: as soon as the guide moves to a
different view (or is removed from its view) the overlay removes itself.
Call `reveal` again to show the guide in its new place.

Overlays can be rendered onto a Pillow image with `render_overlays` to get
a debug snapshot of where the guides are.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from PIL import Image, ImageColor, ImageDraw

from toolbelt.ui.constraints import Constraint, EqualCenter, EqualSize, activate
from toolbelt.ui.layout import GuideChange, LayoutGuide
from toolbelt.ui.view import RGBA, View

logger = logging.getLogger(__name__)

DEFAULT_REVEAL_COLOR: RGBA = (255, 0, 0, 51)  # Red at 20% opacity

ColorLike = str | tuple[int, int, int] | tuple[int, int, int, int]


def to_rgba(color: ColorLike) -> RGBA:
    """Normalize a color to an RGBA tuple.

    Args:
        color: Pillow color string (``"red"``, ``"#ff000033"``) or an
            RGB/RGBA tuple of 0-255 ints.

    Returns:
        (r, g, b, a) tuple.

    Raises:
        ValueError: If the color cannot be interpreted.
    """
    if isinstance(color, str):
        rgba = ImageColor.getcolor(color, "RGBA")
        if not isinstance(rgba, tuple) or len(rgba) != 4:
            raise ValueError(f"Cannot interpret {color!r} as an RGBA color")
        return (rgba[0], rgba[1], rgba[2], rgba[3])
    if len(color) not in (3, 4) or not all(0 <= c <= 255 for c in color):
        raise ValueError(f"Expected RGB or RGBA components in 0-255, got {color}")
    if len(color) == 3:
        return (color[0], color[1], color[2], 255)
    return (color[0], color[1], color[2], color[3])


class OverlayView(View):
    """Translucent view tracking a layout guide's geometry."""

    def __init__(self, guide: LayoutGuide, color: RGBA) -> None:
        super().__init__(name=f"reveal:{guide.identifier}" if guide.identifier else "reveal")
        self.guide = guide
        self.background_color = color
        self.user_interaction_enabled = False
        self.constraints: list[Constraint] = [
            EqualSize(self, guide),
            EqualCenter(self, guide),
        ]

    def update_constraints(self) -> None:
        activate(self.constraints)


@dataclass
class _Reveal:
    overlay: OverlayView
    tokens: list[int] = field(default_factory=list)


class LayoutGuideRevealer:
    """Keeps at most one overlay per layout guide.

    Usage:
        revealer = LayoutGuideRevealer()
        revealer.reveal(guide)                # red, 20% opacity
        revealer.reveal(guide, "#00ff0033")   # replaces the red overlay
        revealer.conceal(guide)
    """

    def __init__(self) -> None:
        self._reveals: dict[LayoutGuide, _Reveal] = {}

    def reveal(
        self,
        guide: LayoutGuide,
        color: ColorLike = DEFAULT_REVEAL_COLOR,
    ) -> OverlayView | None:
        """Show `guide` on screen by inserting a colored overlay at its position.

        Any overlay previously created for `guide` is removed first.

        Args:
            guide: Guide to reveal.
            color: Overlay color; should be translucent.

        Returns:
            The overlay view, or None if the guide has no owning view.
        """
        owner = guide.owning_view
        if owner is None:
            logger.warning("Attempt to reveal layout guide without owner view: %r", guide)
            return None

        self.conceal(guide)

        overlay = OverlayView(guide, to_rgba(color))
        owner.add_subview(overlay)
        overlay.update_constraints()

        reveal = _Reveal(overlay)
        reveal.tokens.append(guide.subscribe("owning_view", self._owner_changed))
        reveal.tokens.append(guide.subscribe("frame", self._frame_changed))
        self._reveals[guide] = reveal
        logger.debug("Revealed %r in %r", guide, owner)
        return overlay

    def conceal(self, guide: LayoutGuide) -> bool:
        """Remove the overlay of `guide` and stop tracking it.

        Returns:
            True if an overlay was removed.
        """
        reveal = self._reveals.pop(guide, None)
        if reveal is None:
            return False
        for token in reveal.tokens:
            guide.unsubscribe(token)
        reveal.overlay.remove_from_superview()
        return True

    def overlay_for(self, guide: LayoutGuide) -> OverlayView | None:
        reveal = self._reveals.get(guide)
        return reveal.overlay if reveal else None

    def __contains__(self, guide: object) -> bool:
        return guide in self._reveals

    def __len__(self) -> int:
        return len(self._reveals)

    def _owner_changed(self, change: GuideChange) -> None:
        reveal = self._reveals.get(change.guide)
        if reveal is None or change.new is reveal.overlay.superview:
            return
        # The overlay is only valid inside the owner it was created for
        logger.debug("Owner of %r changed, removing overlay", change.guide)
        self.conceal(change.guide)

    def _frame_changed(self, change: GuideChange) -> None:
        reveal = self._reveals.get(change.guide)
        if reveal is not None:
            reveal.overlay.update_constraints()


def render_overlays(image: Image.Image, root: View) -> Image.Image:
    """Composite every overlay under `root` onto a copy of `image`.

    Frames are converted to `root`'s coordinate space, so `image` is
    expected to be a snapshot of `root` at one pixel per point.

    Args:
        image: Snapshot of the root view.
        root: View whose overlays should be drawn.

    Returns:
        RGB image with overlays drawn.
    """
    layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)
    for view in root.walk():
        if not isinstance(view, OverlayView) or view.background_color is None:
            continue
        if view.frame.width < 1 or view.frame.height < 1:
            continue
        origin = view.convert_to_window(view.bounds.origin)
        offset = root.convert_to_window(root.bounds.origin)
        left = origin.x - offset.x
        top = origin.y - offset.y
        draw.rectangle(
            [
                (round(left), round(top)),
                (round(left + view.frame.width) - 1, round(top + view.frame.height) - 1),
            ],
            fill=view.background_color,
        )

    base = image.convert("RGBA") if image.mode != "RGBA" else image
    return Image.alpha_composite(base, layer).convert("RGB")
