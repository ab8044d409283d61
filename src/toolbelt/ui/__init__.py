"""In-process model of a mobile UI stack.

Public API:
    - Screen, NavigationStack, Window: screens and their presentation chain
    - TransitionCoordinator, TransitionContext: in-flight transitions
    - View, Layer: view tree and render layers
    - LayoutGuide, GuideChange: observable layout guides
    - LayoutGuideRevealer, render_overlays: layout guide debug overlays
"""

from toolbelt.ui.coordinator import TransitionContext, TransitionCoordinator
from toolbelt.ui.layout import (
    GuideChange,
    LayoutGuide,
    align_to_owner_horizontally,
    horizontal_focus_guide,
)
from toolbelt.ui.overlay import (
    DEFAULT_REVEAL_COLOR,
    LayoutGuideRevealer,
    OverlayView,
    render_overlays,
)
from toolbelt.ui.runloop import main_loop
from toolbelt.ui.screen import NavigationStack, Screen, Window
from toolbelt.ui.view import Layer, View

__all__ = [
    "DEFAULT_REVEAL_COLOR",
    "GuideChange",
    "Layer",
    "LayoutGuide",
    "LayoutGuideRevealer",
    "NavigationStack",
    "OverlayView",
    "Screen",
    "TransitionContext",
    "TransitionCoordinator",
    "View",
    "Window",
    "align_to_owner_horizontally",
    "horizontal_focus_guide",
    "main_loop",
    "render_overlays",
]
