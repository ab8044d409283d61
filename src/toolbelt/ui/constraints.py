"""Equality constraints keeping a view's frame in step with a layout guide.

Each constraint copies one geometric attribute from its source guide to
its target view when applied. Constraints are applied in order, so a size
constraint should precede a center constraint.
"""

from __future__ import annotations

from dataclasses import dataclass

from toolbelt.ui.layout import LayoutGuide
from toolbelt.ui.view import View


@dataclass(frozen=True)
class EqualSize:
    """Target view has the same width and height as the guide."""

    view: View
    guide: LayoutGuide

    def apply(self) -> None:
        self.view.frame = self.view.frame.with_size(self.guide.frame.size)


@dataclass(frozen=True)
class EqualCenter:
    """Target view is centered on the guide's center."""

    view: View
    guide: LayoutGuide

    def apply(self) -> None:
        self.view.frame = self.view.frame.with_center(self.guide.frame.center)


Constraint = EqualSize | EqualCenter


def activate(constraints: list[Constraint]) -> None:
    """Apply every constraint in order."""
    for constraint in constraints:
        constraint.apply()
