"""The two stacks of the puzzle and the instructions that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO


def _swap(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque[int], steps: int) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(steps)
    return True


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of emitted instructions.

    Each named instruction (``sa``, ``pb``, ``rra``...) is recorded in
    ``operations`` and, when ``stream`` is set, written to it on its own line.
    The ``swap_*``, ``rotate_*`` and ``reverse_rotate_*`` moves act silently.
    """

    a: deque[int] = field(default_factory=deque)
    b: deque[int] = field(default_factory=deque)
    stream: TextIO | None = None
    operations: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a = deque(self.a)
        self.b = deque(self.b)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Stacks:
        """Build stacks with ``values`` on ``a`` (first value on top) and ``b`` empty."""
        return cls(a=deque(values))

    @property
    def size_a(self) -> int:
        return len(self.a)

    @property
    def size_b(self) -> int:
        return len(self.b)

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        if self.stream is not None:
            self.stream.write(name + "\n")

    # Silent moves.

    def swap_a(self) -> bool:
        """Swap the two top elements of ``a``; return whether anything moved."""
        return _swap(self.a)

    def swap_b(self) -> bool:
        """Swap the two top elements of ``b``; return whether anything moved."""
        return _swap(self.b)

    def rotate_a(self) -> bool:
        """Move the top of ``a`` to its bottom; return whether anything moved."""
        return _rotate(self.a, -1)

    def rotate_b(self) -> bool:
        """Move the top of ``b`` to its bottom; return whether anything moved."""
        return _rotate(self.b, -1)

    def reverse_rotate_a(self) -> bool:
        """Move the bottom of ``a`` to its top; return whether anything moved."""
        return _rotate(self.a, 1)

    def reverse_rotate_b(self) -> bool:
        """Move the bottom of ``b`` to its top; return whether anything moved."""
        return _rotate(self.b, 1)

    # Named instructions.

    def sa(self) -> None:
        if self.swap_a():
            self._emit("sa")

    def sb(self) -> None:
        if self.swap_b():
            self._emit("sb")

    def ss(self) -> None:
        self.swap_a()
        self.swap_b()
        self._emit("ss")

    def pa(self) -> None:
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def pb(self) -> None:
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def ra(self) -> None:
        if self.rotate_a():
            self._emit("ra")

    def rb(self) -> None:
        if self.rotate_b():
            self._emit("rb")

    def rr(self) -> None:
        self.rotate_a()
        self.rotate_b()
        self._emit("rr")

    def rra(self) -> None:
        if self.reverse_rotate_a():
            self._emit("rra")

    def rrb(self) -> None:
        if self.reverse_rotate_b():
            self._emit("rrb")

    def rrr(self) -> None:
        self.reverse_rotate_a()
        self.reverse_rotate_b()
        self._emit("rrr")


def is_sorted(values: Iterable[int]) -> bool:
    """Return whether ``values`` never decreases from one element to the next."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def has_duplicates(values: Iterable[int]) -> bool:
    """Return whether any value appears more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def get_index(values: Iterable[int], value: int) -> int:
    """Return the position of the first occurrence of ``value``.

    Raises ``ValueError`` when it is absent.
    """
    for index, item in enumerate(values):
        if item == value:
            return index
    raise ValueError(f"{value} is not in the stack")


def format_stack(values: Iterable[int]) -> str:
    """Render each value on its own line."""
    return "".join(f"{value}\n" for value in values)


def format_stacks(stacks: Stacks) -> str:
    """Render both stacks with their sizes."""
    return (
        "\nPile A :\n"
        + format_stack(stacks.a)
        + f"Taille A : {stacks.size_a}\n"
        + "\nPile B :\n"
        + format_stack(stacks.b)
        + f"Taille B : {stacks.size_b}\n\n"
    )