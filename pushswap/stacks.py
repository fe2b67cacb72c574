"""Stack state and the primitive push_swap operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Deque, List, Optional, TextIO

_WHITESPACE = " \n\t\r\f\v"


@dataclass(slots=True)
class Node:
    """One element on a stack: its value, its rank and its position."""

    value: int
    index: int = -1
    order: int = 0


@dataclass(slots=True)
class ProcessCounter:
    """Bookkeeping for one stack during a sorting pass."""

    processed: int = 0
    total: int = 0
    moved: int = 0


def is_sorted_ascending(stack: Iterable[Node]) -> bool:
    """Return True if values never decrease from top to bottom."""
    return all(a.value <= b.value for a, b in pairwise(stack))


def is_sorted_descending(stack: Iterable[Node]) -> bool:
    """Return True if values never increase from top to bottom."""
    return all(a.value >= b.value for a, b in pairwise(stack))


def get_median(stack: Iterable[Node]) -> int:
    """Return half the size of the stack, rounded down."""
    return sum(1 for _ in stack) // 2


def get_max_steps(stack: Iterable[Node]) -> int:
    """Return the number of bits needed to represent the largest index."""
    indices = [node.index for node in stack]
    if not indices:
        return 0
    largest = max(indices)
    if largest < 0:
        raise ValueError("stack indices have not been assigned")
    return largest.bit_length()


def atoll(text: str) -> int:
    """Parse a leading integer the way C's atoll does: spaces, sign, digits."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


class PushSwap:
    """Two stacks, the sorting bookkeeping, and the record of moves made."""

    def __init__(self, values: Iterable[int] = (), stream: Optional[TextIO] = None):
        self.stack_a: Deque[Node] = deque(Node(value) for value in values)
        self.stack_b: Deque[Node] = deque()
        self.step = 0
        self.max_steps = 0
        self.process_a = ProcessCounter()
        self.process_b = ProcessCounter()
        self.moves: List[str] = []
        self.stream = stream

    def _emit(self, name: str) -> None:
        self.moves.append(name)
        if self.stream is not None:
            self.stream.write(name + "\n")

    @staticmethod
    def _swap(stack: Deque[Node]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: Deque[Node]) -> None:
        if len(stack) >= 2:
            stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: Deque[Node]) -> None:
        if len(stack) >= 2:
            stack.rotate(1)

    def sa(self) -> None:
        """Swap the top two elements of stack a."""
        self._swap(self.stack_a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the top two elements of stack b."""
        self._swap(self.stack_b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self._swap(self.stack_a)
        self._swap(self.stack_b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of stack b onto stack a, if b is not empty."""
        if self.stack_b:
            self.stack_a.appendleft(self.stack_b.popleft())
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of stack a onto stack b, if a is not empty."""
        if self.stack_a:
            self.stack_b.appendleft(self.stack_a.popleft())
            self._emit("pb")

    def ra(self) -> None:
        """Rotate stack a: the top element goes to the bottom."""
        self._rotate(self.stack_a)
        self._emit("ra")

    def rb(self) -> None:
        """Rotate stack b: the top element goes to the bottom."""
        self._rotate(self.stack_b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks, only when each holds at least two elements."""
        if len(self.stack_a) >= 2 and len(self.stack_b) >= 2:
            self._rotate(self.stack_a)
            self._rotate(self.stack_b)
            self._emit("rr")

    def rra(self) -> None:
        """Reverse-rotate stack a: the bottom element goes to the top."""
        self._reverse_rotate(self.stack_a)
        self._emit("rra")

    def rrb(self) -> None:
        """Reverse-rotate stack b: the bottom element goes to the top."""
        self._reverse_rotate(self.stack_b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks, only when each holds at least two."""
        if len(self.stack_a) >= 2 and len(self.stack_b) >= 2:
            self._reverse_rotate(self.stack_a)
            self._reverse_rotate(self.stack_b)
            self._emit("rrr")

    def assign_indices(self) -> None:
        """Give every node in stack a its rank by value and its position."""
        for node in self.stack_a:
            node.index = -1
        ranked = sorted(self.stack_a, key=lambda node: node.value)
        for rank, node in enumerate(ranked):
            node.index = rank
        for position, node in enumerate(self.stack_a):
            node.order = position

    def reset_counters(self) -> None:
        """Clear the processed counts of both stacks."""
        self.process_a.processed = 0
        self.process_b.processed = 0