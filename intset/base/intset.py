# Fixed-capacity set of distinct integers kept in a preallocated list.
#
# Members live in data[0:used] with no holes, ordered by the time they
# (most recently) became members. Slots from data[used] on hold stale values
# and are never read. Re-adding a present member does not move it; a member
# that was removed and added again goes to the end.
#
# Capacity is a class attribute (MAX_SIZE) shared by all instances. Sets of
# another capacity are instances of a subclass made by IntSet.bounded().

from __future__ import annotations

import logging
import sys
from typing import Iterable, TextIO

from intset.base.exceptions import IntSetCapacityExceeded, IntSetValueTypeError

logger = logging.getLogger(__name__.rsplit('.')[-1])


class IntSet:
    """Set of at most ``MAX_SIZE`` distinct integers in membership order

    Operations reporting failure (``add``, ``remove``) return False and leave the
    set untouched. Derived sets (``union_with``, ``intersect``, ``subtract``) are new,
    independent instances of the same class.
    """
    MAX_SIZE: int = 10

    _bounded_classes: dict[tuple[type, int], type[IntSet]] = {}

    def __init__(self) -> None:
        self._data: list[int] = [0] * self.MAX_SIZE
        self._used: int = 0

    @classmethod
    def bounded(cls, capacity: int) -> type[IntSet]:
        """Returns IntSet class of given capacity

        Classes are cached, so two calls with the same capacity return the same class
        and their instances may be freely combined.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f'IntSet capacity must be a positive integer, got {capacity!r}')
        if capacity == cls.MAX_SIZE:
            return cls
        key = (cls, capacity)
        bounded_cls = cls._bounded_classes.get(key)
        if bounded_cls is not None:
            return bounded_cls
        bounded_cls = type(f'{cls.__name__}{capacity}', (cls,), {'MAX_SIZE': capacity})
        cls._bounded_classes[key] = bounded_cls
        logger.debug(f'Created {bounded_cls.__name__} with capacity {capacity}')
        return bounded_cls

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> IntSet:
        """Builds set adding values in order, values not fitting are skipped"""
        s = cls()
        for v in values:
            s.add(v)
        return s

    @property
    def capacity(self) -> int:
        return self.MAX_SIZE

    def size(self) -> int:
        return self._used

    def is_empty(self) -> bool:
        return self._used == 0

    def is_full(self) -> bool:
        return self._used >= self.MAX_SIZE

    def contains(self, value: int) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        for i in range(self._used):
            if self._data[i] == value:
                return True
        return False

    def add(self, value: int) -> bool:
        """Appends value as the newest member

        Returns:
            bool: True if value was inserted, False if it was already a member
                  or the set is full.
        """
        _check_value(value)
        if self.contains(value):
            return False
        if self._used >= self.MAX_SIZE:
            logger.debug(f'{value} not added, {self.__class__.__name__} is full ({self.MAX_SIZE})')
            return False
        self._data[self._used] = value
        self._used += 1
        return True

    def remove(self, value: int) -> bool:
        """Removes value, members after it are shifted left keeping their order

        Returns:
            bool: True if value was removed, False if it was not a member.
        """
        if not self.contains(value):
            return False
        i = self._data.index(value, 0, self._used)
        last = self._used - 1
        while i < last:
            self._data[i] = self._data[i + 1]
            i += 1
        self._used = last
        return True

    def reset(self) -> None:
        self._used = 0

    def union_with(self, other: IntSet) -> IntSet:
        """Returns members of self followed by members of other not in self

        Raises:
            IntSetCapacityExceeded: if the union does not fit into the capacity.
                Nothing is truncated.
        """
        _check_operand(other)
        required = self.size() + other.subtract(self).size()
        if required > self.MAX_SIZE:
            logger.error(f'Union of {self!r} and {other!r} needs {required} slots')
            raise IntSetCapacityExceeded(self.MAX_SIZE, required)
        result = self.copy()
        for v in other._members():
            result.add(v)
        return result

    def intersect(self, other: IntSet) -> IntSet:
        """Returns members of self which are also members of other, in self order"""
        _check_operand(other)
        result = self.__class__()
        for v in self._members():
            if other.contains(v):
                result.add(v)
        return result

    def subtract(self, other: IntSet) -> IntSet:
        """Returns members of self which are not members of other, in self order"""
        _check_operand(other)
        result = self.copy()
        for v in other._members():
            result.remove(v)
        return result

    def is_subset_of(self, other: IntSet) -> bool:
        _check_operand(other)
        for v in self._members():
            if not other.contains(v):
                return False
        return True

    def dump(self, out: TextIO | None = None) -> None:
        """Writes members separated by two spaces, writes nothing for empty set

        No newline is written. Output goes to ``sys.stdout`` by default.
        """
        if out is None:
            out = sys.stdout
        if self._used:
            out.write(str(self))

    def copy(self) -> IntSet:
        c = self.__class__()
        c._data[:self._used] = self._data[:self._used]
        c._used = self._used
        return c

    def _members(self) -> list[int]:
        return self._data[:self._used]

    def __copy__(self) -> IntSet:
        return self.copy()

    def __deepcopy__(self, memo) -> IntSet:
        return self.copy()

    def __len__(self) -> int:
        return self._used

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return equal(self, other)

    __hash__ = None

    def __str__(self) -> str:
        return '  '.join(str(v) for v in self._members())

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(capacity={self.MAX_SIZE}, [{", ".join(str(v) for v in self._members())}])'


def equal(is1: IntSet, is2: IntSet) -> bool:
    """Returns True if both sets have the same members, regardless of their order"""
    _check_operand(is1)
    _check_operand(is2)
    if is1.size() != is2.size():
        return False
    return is1.is_subset_of(is2) and is2.is_subset_of(is1)


def _check_value(value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise IntSetValueTypeError(value)


def _check_operand(other) -> None:
    if not isinstance(other, IntSet):
        raise TypeError(f'Expected IntSet, got {type(other).__name__}')
