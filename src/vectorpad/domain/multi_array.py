"""Dense N-dimensional array used for point selection masks.

The array keeps its elements in one flat list addressed through row-major
strides computed once at construction, so element access never allocates.

Selection masks are 2D boolean arrays of shape (point_count, 3). The second
axis holds one slot per selectable handle of a control point:

- SLOT_ANCHOR: the on-curve anchor
- SLOT_CONTROL_1: the first (or only) control handle
- SLOT_CONTROL_2: the second control handle (cubic curves only)
"""

from collections.abc import Iterator, Sequence
from typing import Any, Generic, TypeVar

from vectorpad.exceptions import InvalidIndexError

T = TypeVar("T")

SLOT_ANCHOR = 0
SLOT_CONTROL_1 = 1
SLOT_CONTROL_2 = 2
SLOTS_PER_POINT = 3


class MultiArray(Generic[T]):
    """A fixed-shape, mutable N-dimensional array.

    Example:
        mask = MultiArray((3, 3), False)
        mask.set(True, 1, 2)
        mask.get(1, 2)  # True
    """

    __slots__ = ("_data", "_shape", "_strides")

    def __init__(self, shape: Sequence[int], initial_value: T) -> None:
        """Create an array filled with initial_value.

        Args:
            shape: Size of each dimension
            initial_value: Value every cell starts with

        Raises:
            ValueError: If any dimension is negative
        """
        if any(dim < 0 for dim in shape):
            raise ValueError(f"Dimensions must be non-negative, got {tuple(shape)}")

        self._shape: tuple[int, ...] = tuple(shape)
        self._strides: tuple[int, ...] = _row_major_strides(self._shape)

        size = 1
        for dim in self._shape:
            size *= dim
        self._data: list[T] = [initial_value] * size

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        return len(self._data)

    def _flat_index(self, indices: tuple[int, ...]) -> int:
        if len(indices) != len(self._shape):
            raise InvalidIndexError(indices, self._shape)

        flat = 0
        for index, dim, stride in zip(indices, self._shape, self._strides):
            if index < 0 or index >= dim:
                raise InvalidIndexError(indices, self._shape)
            flat += index * stride
        return flat

    def get(self, *indices: int) -> T:
        """Read the cell at the given coordinates.

        Raises:
            InvalidIndexError: If the coordinate count differs from the rank
                or any coordinate is out of bounds
        """
        return self._data[self._flat_index(indices)]

    def set(self, value: T, *indices: int) -> None:
        """Write value into the cell at the given coordinates.

        Raises:
            InvalidIndexError: If the coordinate count differs from the rank
                or any coordinate is out of bounds
        """
        self._data[self._flat_index(indices)] = value

    def copy(self) -> "MultiArray[T]":
        """Return an independent copy with the same shape and contents."""
        duplicate: MultiArray[T] = MultiArray.__new__(MultiArray)
        duplicate._shape = self._shape
        duplicate._strides = self._strides
        duplicate._data = list(self._data)
        return duplicate

    def _sub_array(self, index: int) -> "MultiArray[T]":
        sub: MultiArray[T] = MultiArray.__new__(MultiArray)
        sub._shape = self._shape[1:]
        sub._strides = self._strides[1:]
        start = index * self._strides[0]
        sub._data = self._data[start : start + self._strides[0]]
        return sub

    def to_list(self) -> list[Any]:
        """Convert to nested Python lists."""
        if not self._shape:
            return []
        if len(self._shape) == 1:
            return list(self._data)
        return [self._sub_array(i).to_list() for i in range(self._shape[0])]

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the first axis.

        Yields single elements for 1D arrays and nested lists (rows) otherwise.
        """
        if not self._shape:
            return
        if len(self._shape) == 1:
            yield from self._data
            return
        for i in range(self._shape[0]):
            yield self._sub_array(i).to_list()

    def __len__(self) -> int:
        return self._shape[0] if self._shape else 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiArray):
            return NotImplemented
        return self._shape == other._shape and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def render(self, indent: str = "") -> str:
        """Render as nested brackets, one line per innermost row.

        Args:
            indent: Indentation of the closing bracket of this level

        Returns:
            String such as "[\\n  [False, True],\\n  [False, False]\\n]"
        """
        if not self._shape or self._shape[0] == 0:
            return "[]"

        if len(self._shape) == 1:
            return "[" + ", ".join(str(value) for value in self._data) + "]"

        child_indent = indent + "  "
        children = [
            child_indent + self._sub_array(i).render(child_indent)
            for i in range(self._shape[0])
        ]
        return "[\n" + ",\n".join(children) + "\n" + indent + "]"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"MultiArray(shape={self._shape}, data={self._data!r})"


def _row_major_strides(shape: tuple[int, ...]) -> tuple[int, ...]:
    strides = [1] * len(shape)
    for i in range(len(shape) - 2, -1, -1):
        strides[i] = strides[i + 1] * shape[i + 1]
    return tuple(strides)


SelectionMask = MultiArray[bool]


def new_selection_mask(point_count: int) -> SelectionMask:
    """Create an all-False selection mask for a path with point_count points."""
    return MultiArray((point_count, SLOTS_PER_POINT), False)


def is_point_selected(mask: SelectionMask, index: int) -> bool:
    """Check whether any slot of the point at index is selected."""
    return any(mask.get(index, slot) for slot in range(SLOTS_PER_POINT))
