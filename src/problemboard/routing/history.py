"""Push-state navigation history.

Mirrors the browser history stack: ``push`` appends a new entry and drops
anything ahead of the cursor, ``replace`` rewrites the current entry,
``back``/``forward`` move the cursor without touching the entries.
"""


class History:
    """In-memory push-state history stack.

    Usage::

        history = History()
        history.push("/north/42")
        history.back()
        assert history.current == "/"
    """

    __slots__ = ("_entries", "_index")

    def __init__(self, initial: str = "/") -> None:
        self._entries: list[str] = [initial]
        self._index = 0

    @property
    def current(self) -> str:
        """Path at the cursor."""
        return self._entries[self._index]

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._index < len(self._entries) - 1

    def peek(self, offset: int) -> str:
        """Path *offset* entries from the cursor, clamped to the stack ends."""
        index = min(max(self._index + offset, 0), len(self._entries) - 1)
        return self._entries[index]

    def push(self, path: str) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(path)
        self._index += 1

    def replace(self, path: str) -> None:
        self._entries[self._index] = path

    def back(self) -> str:
        """Move one entry back. Stays put at the oldest entry."""
        if self.can_go_back:
            self._index -= 1
        return self.current

    def forward(self) -> str:
        """Move one entry forward. Stays put at the newest entry."""
        if self.can_go_forward:
            self._index += 1
        return self.current

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"History(current={self.current!r}, entries={len(self._entries)})"
