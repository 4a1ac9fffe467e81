"""An owning wrapper around a resource that must be released exactly once."""

from __future__ import annotations

from typing import Any, Callable, Optional


class Handle:
    """Owns a raw resource and releases it with ``closer`` when closed."""

    def __init__(self, raw: Any, closer: Callable[[Any], None]) -> None:
        self._raw: Optional[Any] = raw
        self._closer = closer

    def get(self) -> Any:
        """Return the raw resource, or ``None`` once released."""
        return self._raw

    def is_valid(self) -> bool:
        """Return whether a resource is still held."""
        return self._raw is not None

    def take(self) -> Any:
        """Give up ownership and return the raw resource without closing it."""
        raw, self._raw = self._raw, None
        return raw

    def close(self) -> None:
        """Release the resource if one is held; further calls do nothing."""
        if self._raw is not None:
            raw, self._raw = self._raw, None
            self._closer(raw)

    def __enter__(self) -> Handle:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except Exception:
            pass