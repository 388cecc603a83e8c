"""The two stacks of the puzzle and the operations allowed on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the values never decrease from top to bottom."""
    return all(first <= second for first, second in zip(values, values[1:]))


def _swap_top(stack: list[int]) -> None:
    stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: list[int]) -> None:
    stack.append(stack.pop(0))


def _reverse_rotate(stack: list[int]) -> None:
    stack.insert(0, stack.pop())


class Stacks:
    """Stacks ``a`` and ``b`` with the operation log of every move made.

    Index 0 of each list is the top of that stack. A move that cannot act
    does nothing and is not logged, except ``rr`` and ``rrr``, which are
    always logged.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.operations: list[str] = []
        self._dispatch: dict[str, Callable[[], None]] = {
            "sa": self.sa,
            "sb": self.sb,
            "ss": self.ss,
            "pa": self.pa,
            "pb": self.pb,
            "ra": self.ra,
            "rb": self.rb,
            "rr": self.rr,
            "rra": self.rra,
            "rrb": self.rrb,
            "rrr": self.rrr,
        }

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def sa(self) -> None:
        """Swap the two top elements of a."""
        if len(self.a) < 2:
            return
        _swap_top(self.a)
        self.operations.append("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        if len(self.b) < 2:
            return
        _swap_top(self.b)
        self.operations.append("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks, where each has two elements."""
        can_a = len(self.a) >= 2
        can_b = len(self.b) >= 2
        if not (can_a or can_b):
            return
        if can_a:
            _swap_top(self.a)
        if can_b:
            _swap_top(self.b)
        self.operations.append("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self.operations.append("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self.operations.append("pb")

    def ra(self) -> None:
        """Rotate a upwards: its top becomes its bottom."""
        if len(self.a) < 2:
            return
        _rotate(self.a)
        self.operations.append("ra")

    def rb(self) -> None:
        """Rotate b upwards: its top becomes its bottom."""
        if len(self.b) < 2:
            return
        _rotate(self.b)
        self.operations.append("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards; always logged."""
        if len(self.a) >= 2:
            _rotate(self.a)
        if len(self.b) >= 2:
            _rotate(self.b)
        self.operations.append("rr")

    def rra(self) -> None:
        """Rotate a downwards: its bottom becomes its top."""
        if len(self.a) < 2:
            return
        _reverse_rotate(self.a)
        self.operations.append("rra")

    def rrb(self) -> None:
        """Rotate b downwards: its bottom becomes its top."""
        if len(self.b) < 2:
            return
        _reverse_rotate(self.b)
        self.operations.append("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards; always logged."""
        if len(self.a) >= 2:
            _reverse_rotate(self.a)
        if len(self.b) >= 2:
            _reverse_rotate(self.b)
        self.operations.append("rrr")

    def apply(self, operation: str) -> None:
        """Perform the operation with the given name."""
        try:
            move = self._dispatch[operation]
        except KeyError:
            raise ValueError(f"unknown operation: {operation!r}") from None
        move()