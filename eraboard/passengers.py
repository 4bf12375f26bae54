"""Passenger lists for a time-travel boarding desk: eras, waiting line and boarded."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

DEFAULT_PASSENGER_LIMIT = 4


class EmptyListError(Exception):
    """Raised when an operation needs an element from an empty list."""


class InvalidIndexError(IndexError):
    """Raised when a 1-based position falls outside a list."""


@dataclass
class Era:
    """A destination era and the number of seats it still has."""

    name: str
    passenger_limit: int = DEFAULT_PASSENGER_LIMIT


class WaitingList:
    """Passengers waiting to board, in arrival order."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: deque[str] = deque(names)

    def append(self, name: str) -> None:
        self._names.append(name)

    def pop_first(self) -> str:
        if not self._names:
            raise EmptyListError("the waiting list is empty")
        return self._names.popleft()

    def pop_last(self) -> str:
        if not self._names:
            raise EmptyListError("the waiting list is empty")
        return self._names.pop()

    def pop_at(self, index: int) -> str:
        """Remove and return the passenger at 1-based position ``index``."""
        if not self._names:
            raise EmptyListError("the waiting list is empty")
        if not 1 <= index <= len(self._names):
            raise InvalidIndexError(f"no waiting passenger at position {index}")
        name = self._names[index - 1]
        del self._names[index - 1]
        return name

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)


class EraList:
    """The eras passengers can travel to, in the order they were added."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._eras: list[Era] = [Era(name) for name in names]

    def add(self, name: str) -> Era:
        era = Era(name)
        self._eras.append(era)
        return era

    def has_space(self) -> bool:
        return any(era.passenger_limit > 0 for era in self._eras)

    def first(self) -> Era:
        if not self._eras:
            raise EmptyListError("there are no eras")
        return self._eras[0]

    def select(self, choice: int, waiting: WaitingList) -> tuple[Era, str | None]:
        """Take a seat in the era at 1-based ``choice``.

        A choice past the end falls back to the first era; a choice below 1
        also lands on the first era. When the era is full, the last waiting
        passenger is dropped from ``waiting``. Returns the era and the name of
        the dropped passenger, or ``None`` when a seat was taken.
        """
        era = self.first()
        if 1 <= choice <= len(self._eras):
            era = self._eras[choice - 1]
        if era.passenger_limit > 0:
            era.passenger_limit -= 1
            return era, None
        return era, waiting.pop_last()

    def describe(self) -> list[str]:
        return [
            f"{position}. {era.name} - Limite de passageiros: {era.passenger_limit}"
            for position, era in enumerate(self._eras, start=1)
        ]

    def __iter__(self) -> Iterator[Era]:
        return iter(self._eras)

    def __len__(self) -> int:
        return len(self._eras)


class BoardedList:
    """Passengers already aboard, in boarding order."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: list[str] = list(names)

    def board_first(self, waiting: WaitingList) -> str:
        name = waiting.pop_first()
        self._names.append(name)
        return name

    def board_last(self, waiting: WaitingList) -> str:
        name = waiting.pop_last()
        self._names.append(name)
        return name

    def board_at(self, waiting: WaitingList, index: int) -> str:
        name = waiting.pop_at(index)
        self._names.append(name)
        return name

    def disembark_first(self) -> str:
        if not self._names:
            raise EmptyListError("nobody is aboard")
        return self._names.pop(0)

    def disembark_last(self) -> str:
        if not self._names:
            raise EmptyListError("nobody is aboard")
        return self._names.pop()

    def disembark_at(self, index: int) -> str:
        """Remove and return the passenger at 1-based position ``index``."""
        if not self._names:
            raise EmptyListError("nobody is aboard")
        if not 1 <= index <= len(self._names):
            raise InvalidIndexError(f"no boarded passenger at position {index}")
        return self._names.pop(index - 1)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)


def format_listing(names: Iterable[str]) -> str:
    """Number names from 1, one per line, as ``"1 - name"``."""
    return "\n".join(f"{position} - {name}" for position, name in enumerate(names, start=1))