"""Tests for navigation stack operations with completion handlers."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import pytest

from toolbelt.navigation import pop, pop_to, pop_to_root, push
from toolbelt.ui import NavigationStack, Screen

Drain = Callable[..., Awaitable[None]]


@pytest.fixture
def root() -> Screen:
    return Screen("root")


@pytest.fixture
def stack(root: Screen) -> NavigationStack:
    return NavigationStack(root, "main")


class TestPush:
    """Tests for push with completion."""

    @pytest.mark.asyncio
    async def test_completion_after_transition(self, stack: NavigationStack, drain: Drain) -> None:
        """Test completion waits for the push animation."""
        detail = Screen("detail")
        done: list[bool] = []

        push(stack, detail, lambda: done.append(True))

        assert stack.top_screen is detail
        assert stack.is_transitioning
        await drain()
        assert done == []

        stack.transition_coordinator.complete()
        await drain()
        assert done == [True]
        assert not stack.is_transitioning


class TestPop:
    """Tests for pop with completion."""

    @pytest.mark.asyncio
    async def test_returns_popped_and_completes(
        self, stack: NavigationStack, drain: Drain
    ) -> None:
        """Test pop returns the popped screen and completes after the animation."""
        detail = Screen("detail")
        stack.push(detail, animated=False)
        done: list[bool] = []

        assert pop(stack, lambda: done.append(True)) is detail
        assert done == []

        stack.transition_coordinator.complete()
        await drain()
        assert done == [True]

    def test_root_only_completes_immediately(self, stack: NavigationStack) -> None:
        """Test popping the root is skipped and completes synchronously."""
        done: list[bool] = []
        assert pop(stack, lambda: done.append(True)) is None
        assert done == [True]
        assert not stack.is_transitioning


class TestPopTo:
    """Tests for pop_to with completion."""

    @pytest.mark.asyncio
    async def test_pops_screens_above_target(
        self, stack: NavigationStack, root: Screen, drain: Drain
    ) -> None:
        """Test screens above the target are returned and completion is deferred."""
        a, b = Screen("a"), Screen("b")
        stack.push(a, animated=False)
        stack.push(b, animated=False)
        done: list[bool] = []

        assert pop_to(stack, root, lambda: done.append(True)) == [a, b]
        assert done == []

        stack.transition_coordinator.complete()
        await drain()
        assert done == [True]

    def test_already_on_top_completes_immediately(
        self, stack: NavigationStack, root: Screen
    ) -> None:
        """Test pop_to the current top skips animation and completes at once."""
        done: list[bool] = []

        assert pop_to(stack, root, lambda: done.append(True)) is None

        assert done == [True]
        assert stack.transition_coordinator is None


class TestPopToRoot:
    """Tests for pop_to_root with completion."""

    def test_single_screen_completes_immediately(self, stack: NavigationStack) -> None:
        """Test a one-screen stack completes synchronously without animating."""
        done: list[bool] = []

        assert pop_to_root(stack, lambda: done.append(True)) is None

        assert done == [True]
        assert not stack.is_transitioning

    @pytest.mark.asyncio
    async def test_pops_to_root(self, stack: NavigationStack, root: Screen, drain: Drain) -> None:
        """Test everything above the root is popped."""
        a, b = Screen("a"), Screen("b")
        stack.push(a, animated=False)
        stack.push(b, animated=False)
        done: list[bool] = []

        assert pop_to_root(stack, lambda: done.append(True)) == [a, b]
        assert stack.screens == [root]

        stack.transition_coordinator.complete()
        await drain()
        assert done == [True]
