"""Fixed-capacity result containers for bounded-degree curve queries."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, TypeVar

from bezier2d.consts import MAX_CUBIC_ROOTS, MAX_EXTREMA_PER_AXIS

T = TypeVar("T")


###############################################################################
# ResultsMax
###############################################################################
class ResultsMax(Generic[T]):
    """
    Ordered, append-only sequence holding at most `capacity` values.

    Root, extrema and intersection queries know their maximum result count
    from the polynomial degree, so exceeding the capacity is a contract
    violation and raises OverflowError.
    """

    capacity: int = 0

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[T] = ()):
        self._values: List[T] = []
        for value in values:
            self.append(value)

    def append(self, value: T) -> None:
        """Append a value.

        Raises:
            OverflowError: If the container already holds `capacity` values.
        """
        if len(self._values) >= self.capacity:
            raise OverflowError(
                f"{type(self).__name__} can hold at most {self.capacity} values, cannot add {value!r}"
            )
        self._values.append(value)

    @property
    def count(self) -> int:
        """int: Number of values stored."""
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __getitem__(self, index: int) -> T:
        if not -len(self._values) <= index < len(self._values):
            raise IndexError(f"Index {index} out of range for {type(self).__name__} with {len(self._values)} values")
        return self._values[index]

    def __bool__(self) -> bool:
        return bool(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResultsMax):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return self._values == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def to_list(self) -> List[T]:
        """The stored values as a new list."""
        return list(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"


class ResultsMax2(ResultsMax[T]):
    """Up to two values, e.g. the local extrema of one axis."""

    __slots__ = ()
    capacity = MAX_EXTREMA_PER_AXIS


class ResultsMax3(ResultsMax[T]):
    """Up to three values, e.g. cubic roots or line intersections."""

    __slots__ = ()
    capacity = MAX_CUBIC_ROOTS
