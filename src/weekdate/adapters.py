"""Hooks for the standard library ``json`` and ``sqlite3`` modules.

``WeekDate`` values adapt themselves for ``sqlite3`` parameters through
``__conform__``; ``register_sqlite`` also installs a module level adapter and
the converter needed to read them back from columns declared ``weekdate``
(used with ``detect_types=sqlite3.PARSE_DECLTYPES``).
"""

import json
import sqlite3
from collections.abc import Callable
from typing import Any

from .week import WeekDate

__all__ = [
    "SQLITE_TYPE",
    "WeekDateJSONEncoder",
    "json_object_hook",
    "register_sqlite",
]

SQLITE_TYPE = "weekdate"


class WeekDateJSONEncoder(json.JSONEncoder):
    """JSON encoder emitting week dates as ``"YYYY-Www"`` string literals."""

    def default(self, o: Any) -> Any:
        if isinstance(o, WeekDate):
            return o.isoformat()
        return super().default(o)


def json_object_hook(*fields: str) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Build an ``object_hook`` turning the named keys into ``WeekDate`` values.

    Example::

        json.loads(payload, object_hook=json_object_hook("week"))
    """

    def hook(obj: dict[str, Any]) -> dict[str, Any]:
        for name in fields:
            if name in obj and obj[name] is not None:
                # Re-serialize so non-string values hit the string literal check.
                obj[name] = WeekDate.unmarshal_json(json.dumps(obj[name]))
        return obj

    return hook


def register_sqlite(type_name: str = SQLITE_TYPE) -> None:
    """Register the ``WeekDate`` adapter and a converter for columns declared ``type_name``."""
    sqlite3.register_adapter(WeekDate, WeekDate.value)
    sqlite3.register_converter(type_name, WeekDate.scan)
