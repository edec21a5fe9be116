"""
In-memory entity store.

One explicit store object owns every record. It is created at process start
and handed to each unit of work; there is no module-level state. Rows are
kept as plain dicts so no caller ever holds a reference into the store.
"""

import asyncio
from typing import Dict

TABLES = ("users", "apartments", "service_requests", "payments", "locations")

Rows = Dict[str, dict]


class EntityStore:
    def __init__(self):
        self.lock = asyncio.Lock()
        self._tables: Dict[str, Rows] = {name: {} for name in TABLES}

    def snapshot(self) -> Dict[str, Rows]:
        """Independent copy of every table"""
        return {
            name: {record_id: dict(row) for record_id, row in rows.items()}
            for name, rows in self._tables.items()
        }

    def publish(self, tables: Dict[str, Rows]) -> None:
        """Replace the committed state in one step"""
        self._tables = {
            name: {record_id: dict(row) for record_id, row in tables[name].items()}
            for name in TABLES
        }

    def count(self, table: str) -> int:
        return len(self._tables[table])
