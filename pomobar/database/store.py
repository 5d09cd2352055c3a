"""Key-value preference store backed by the ``preferences`` table.

Plays the role of the platform defaults database: values are opaque
strings stored under string keys.
"""

from __future__ import annotations

from .db import get_session
from .models import Preference


class PreferenceStore:
    """Tiny get/set/delete facade over :class:`Preference` rows."""

    def get(self, key: str) -> str | None:
        with get_session() as db:
            row = db.get(Preference, key)
            return row.value if row is not None else None

    def set(self, key: str, value: str) -> None:
        with get_session() as db:
            row = db.get(Preference, key)
            if row is None:
                db.add(Preference(key=key, value=value))
            else:
                row.value = value

    def delete(self, key: str) -> None:
        with get_session() as db:
            row = db.get(Preference, key)
            if row is not None:
                db.delete(row)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
