import threading
from typing import Set


class TokenRegistry:
    """Set of admin session tokens valid for the lifetime of the process."""

    def __init__(self):
        self._tokens: Set[str] = set()
        self._lock = threading.Lock()

    def add(self, token: str) -> None:
        with self._lock:
            self._tokens.add(token)

    def __contains__(self, token: object) -> bool:
        with self._lock:
            return token in self._tokens

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)
