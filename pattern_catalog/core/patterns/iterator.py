"""
Iterator pattern: walk an ordered collection through an explicit cursor.
"""

from typing import Iterator, Optional, Sequence

from pydantic import BaseModel, ConfigDict


class RosterEntry(BaseModel):
    """A player on the roster."""

    model_config = ConfigDict(frozen=True)

    team: str
    name: str


DEFAULT_ROSTER = (
    RosterEntry(team="Keas", name="Sean Larsson"),
    RosterEntry(team="Tuataras", name="James Harth"),
    RosterEntry(team="Bats", name="Hannah Berry"),
    RosterEntry(team="Wetas", name="Giles Fang"),
)


class RosterIterator:
    """
    Cursor over a fixed, ordered roster.

    `next()` returns None once the roster is exhausted instead of raising;
    `rewind()` makes the whole roster available again.
    """

    def __init__(self, entries: Optional[Sequence[RosterEntry]] = None) -> None:
        self._data = tuple(DEFAULT_ROSTER if entries is None else entries)
        self._index = 0

    def __len__(self) -> int:
        return len(self._data)

    @property
    def position(self) -> int:
        return self._index

    def has_next(self) -> bool:
        return self._index < len(self._data)

    def next(self) -> Optional[RosterEntry]:
        if self.has_next():
            entry = self._data[self._index]
            self._index += 1
            return entry
        return None

    def current(self) -> Optional[RosterEntry]:
        if self.has_next():
            return self._data[self._index]
        return None

    def rewind(self) -> None:
        self._index = 0

    def __iter__(self) -> Iterator[RosterEntry]:
        # Shares the cursor, so a partially consumed iterator yields the rest
        while self.has_next():
            yield self.next()
