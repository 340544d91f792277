"""Two stacks and the operations used to sort between them.

Each stack is a list whose last element is the top. Every operation that
takes effect is recorded by name in ``operations``.
"""

from __future__ import annotations

from typing import Iterable, List


class StackError(Exception):
    """Raised when an operation needs an element the stack does not have."""


class Stacks:
    """Stack a, initially holding values (bottom first, top last), and empty stack b."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: List[int] = list(values)
        self.b: List[int] = []
        self.operations: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    @staticmethod
    def _push(source: List[int], target: List[int], name: str) -> None:
        if not source:
            raise StackError(f"{name}: source stack is empty")
        target.append(source.pop())

    @staticmethod
    def _swap(stack: List[int]) -> None:
        stack[-1], stack[-2] = stack[-2], stack[-1]

    @staticmethod
    def _rotate(stack: List[int]) -> None:
        if stack:
            stack.insert(0, stack.pop())

    @staticmethod
    def _reverse_rotate(stack: List[int]) -> None:
        if stack:
            stack.append(stack.pop(0))

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._push(self.b, self.a, "pa")
        self.operations.append("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._push(self.a, self.b, "pb")
        self.operations.append("pb")

    def sa(self) -> None:
        """Swap the top two elements of a; does nothing with fewer than two."""
        if len(self.a) < 2:
            return
        self._swap(self.a)
        self.operations.append("sa")

    def sb(self) -> None:
        """Swap the top two elements of b; does nothing with fewer than two."""
        if len(self.b) < 2:
            return
        self._swap(self.b)
        self.operations.append("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks; does nothing unless both hold two."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self._swap(self.a)
        self._swap(self.b)
        self.operations.append("ss")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._rotate(self.a)
        self.operations.append("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._rotate(self.b)
        self.operations.append("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self.operations.append("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._reverse_rotate(self.a)
        self.operations.append("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._reverse_rotate(self.b)
        self.operations.append("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self.operations.append("rrr")