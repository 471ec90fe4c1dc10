class IdSequence:
    """
    Monotonic integer ids: 1, 2, 3, ...
    Ids handed out are never reused, even if records go away.

    Not thread-safe on its own; the owning repository calls it under its lock.
    """

    def __init__(self, start: int = 1):
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value

    def advance_past(self, used_id: int) -> None:
        # after importing records with explicit ids
        self._next = max(self._next, used_id + 1)

    @property
    def peek(self) -> int:
        return self._next
