"""The two push_swap stacks and the instructions that act on them."""

from __future__ import annotations

from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b`` held in fixed-size buffers.

    Each buffer has one slot more than the number of values. Slots past the
    live part of a stack keep whatever the instructions leave there, and the
    sorting strategy relies on that. Every instruction that is emitted is
    appended to :attr:`moves`.
    """

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        self.nb_values = len(values)
        width = max(self.nb_values + 1, 2)
        self.a: list[int] = values + [0] * (width - self.nb_values)
        self.b: list[int] = [0] * width
        self.a_index: list[int] = sorted(values) + [0] * (width - self.nb_values)
        self.size_a = self.nb_values
        self.size_b = 0
        self.ra_gas_fee = 0
        self.rb_gas_fee = 0
        self.nb_neg = sum(1 for value in values if value < 0)
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.stack_a!r}, b={self.stack_b!r})"

    @property
    def stack_a(self) -> list[int]:
        """The live contents of stack ``a``, top first."""
        return self.a[: self.size_a]

    @property
    def stack_b(self) -> list[int]:
        """The live contents of stack ``b``, top first."""
        return self.b[: self.size_b]

    def _emit(self, name: str) -> None:
        self.moves.append(name)

    @staticmethod
    def _swap(buf: list[int]) -> None:
        buf[0], buf[1] = buf[1], buf[0]

    @staticmethod
    def _rotate(buf: list[int], size: int) -> None:
        if size > 0:
            buf[:size] = buf[1:size] + buf[:1]

    @staticmethod
    def _reverse_rotate(buf: list[int], size: int) -> None:
        if size > 0:
            buf[:size] = buf[size - 1 : size] + buf[: size - 1]

    def _push(self, src: list[int], dst: list[int]) -> None:
        n = self.nb_values
        dst[1 : n + 1] = dst[0:n]
        dst[0] = src[0]
        src[0 : n - 1] = src[1:n]
        src[n - 1] = 0

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; does nothing when ``b`` is empty."""
        if self.size_b == 0:
            return
        self._emit("pa")
        self._push(self.b, self.a)
        self.size_a += 1
        self.size_b -= 1

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; does nothing when ``a`` is empty."""
        if self.size_a == 0:
            return
        self._emit("pb")
        self._push(self.a, self.b)
        self.size_b += 1
        self.size_a -= 1

    def sa(self, emit: bool = True) -> None:
        """Swap the first two slots of ``a``."""
        if emit:
            self._emit("sa")
        self._swap(self.a)

    def sb(self, emit: bool = True) -> None:
        """Swap the first two slots of ``b``."""
        if emit:
            self._emit("sb")
        self._swap(self.b)

    def ra(self, emit: bool = True) -> None:
        """Rotate ``a`` so its top goes to the bottom."""
        if emit:
            self._emit("ra")
        self._rotate(self.a, self.size_a)

    def rb(self, emit: bool = True) -> None:
        """Rotate ``b`` so its top goes to the bottom."""
        if emit:
            self._emit("rb")
        self._rotate(self.b, self.size_b)

    def rra(self, emit: bool = True) -> None:
        """Rotate ``a`` so its bottom comes to the top."""
        if emit:
            self._emit("rra")
        self._reverse_rotate(self.a, self.size_a)

    def rrb(self, emit: bool = True) -> None:
        """Rotate ``b`` so its bottom comes to the top."""
        if emit:
            self._emit("rrb")
        self._reverse_rotate(self.b, self.size_b)

    def ss(self) -> None:
        """``sa`` and ``sb`` as one instruction."""
        self._emit("ss")
        self.sa(False)
        self.sb(False)

    def rr(self) -> None:
        """``ra`` and ``rb`` as one instruction."""
        self._emit("rr")
        self.ra(False)
        self.rb(False)

    def rrr(self) -> None:
        """``rra`` and ``rrb`` as one instruction."""
        self._emit("rrr")
        self.rra(False)
        self.rrb(False)

    @staticmethod
    def _ascending(values: list[int]) -> bool:
        return all(x <= y for x, y in zip(values, values[1:]))

    def is_a_sorted(self) -> bool:
        """True when stack ``a`` is in ascending order from the top."""
        return self._ascending(self.stack_a)

    def is_b_sorted(self) -> bool:
        """True when stack ``b`` is in ascending order from the top."""
        return self._ascending(self.stack_b)