from __future__ import annotations

from typing import Optional

from .form_common import DocumentKind


class DocumentViewer:
    """Which document preview, if any, is open. At most one at a time."""

    def __init__(self) -> None:
        self._current: Optional[DocumentKind] = None

    @property
    def current(self) -> Optional[DocumentKind]:
        return self._current

    @property
    def is_open(self) -> bool:
        return self._current is not None

    def open(self, kind) -> DocumentKind:
        self._current = DocumentKind.parse(kind)
        return self._current

    def close(self) -> None:
        self._current = None

    def __repr__(self) -> str:
        state = self._current.value if self._current else "closed"
        return f"DocumentViewer({state})"
