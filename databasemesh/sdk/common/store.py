# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Embedded key-value store with named buckets, backed by SQLite.

Values are stored as JSON text. Pydantic models and plain JSON types are both
accepted; reads are validated back into the requested type.
"""

import sqlite3
import threading
from .constants import DEFAULT_STORE_PATH
from ..exceptions import BucketNotFoundException
from datetime import datetime, timezone
from loguru import logger
from pathlib import Path
from pydantic import BaseModel, Field, TypeAdapter
from typing import Any, Dict, Optional, Type, TypeVar


V = TypeVar('V')


class StoreConfig(BaseModel):
    """Store location."""

    path: str = Field(DEFAULT_STORE_PATH, description='Path of the database file')


class StoreValue(BaseModel):
    """Base class for values that record when they were last written."""

    updated_at: Optional[datetime] = Field(None, description='Time of the last put')

    def set_update_at(self):
        """Stamp the value with the current UTC time."""
        self.updated_at = datetime.now(timezone.utc)


class KVStore:
    """Bucket-scoped key-value store."""

    def __init__(self, config: Optional[StoreConfig] = None):
        """Open the store, creating the database file when missing.

        Args:
            config: Store location, defaults to ``./bolt.db``
        """
        self.config = config or StoreConfig()
        path = Path(self.config.path or DEFAULT_STORE_PATH)
        path.parent.mkdir(parents=True, exist_ok=True)

        self._lock = threading.Lock()
        self._conn = sqlite3.connect(str(path), check_same_thread=False, isolation_level=None)
        with self._lock:
            self._conn.execute('CREATE TABLE IF NOT EXISTS buckets (name TEXT PRIMARY KEY)')
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS entries (
                    bucket TEXT NOT NULL,
                    key TEXT NOT NULL,
                    value TEXT NOT NULL,
                    PRIMARY KEY (bucket, key)
                )
            """
            )
        logger.debug(f'Opened key-value store at {path}')

    def close(self):
        """Close the underlying database connection."""
        with self._lock:
            self._conn.close()

    def get_db(self) -> sqlite3.Connection:
        """Return the underlying database connection."""
        return self._conn

    def _create_bucket(self, name: str):
        self._conn.execute('INSERT OR IGNORE INTO buckets (name) VALUES (?)', (name,))

    def _require_bucket(self, name: str):
        row = self._conn.execute('SELECT 1 FROM buckets WHERE name = ?', (name,)).fetchone()
        if row is None:
            raise BucketNotFoundException(name)

    def create_bucket(self, name: str):
        """Create a bucket; existing buckets are left untouched."""
        with self._lock:
            self._create_bucket(name)

    def put(self, bucket: str, key: str, value: Any):
        """Store a value, creating the bucket when needed.

        Args:
            bucket: Bucket name
            key: Entry key
            value: Pydantic model or JSON-serializable value. A ``StoreValue``
                is stamped with the write time first.
        """
        if isinstance(value, StoreValue):
            value.set_update_at()
        data = TypeAdapter(type(value)).dump_json(value).decode('utf-8')

        with self._lock:
            self._create_bucket(bucket)
            self._conn.execute(
                'INSERT OR REPLACE INTO entries (bucket, key, value) VALUES (?, ?, ?)',
                (bucket, key, data),
            )

    def get(self, bucket: str, key: str, value_type: Type[V]) -> Optional[V]:
        """Read one value.

        Args:
            bucket: Bucket name
            key: Entry key
            value_type: Type the stored JSON is validated into

        Returns:
            The value, or None when the key is absent

        Raises:
            BucketNotFoundException: If the bucket does not exist
        """
        with self._lock:
            self._require_bucket(bucket)
            row = self._conn.execute(
                'SELECT value FROM entries WHERE bucket = ? AND key = ?', (bucket, key)
            ).fetchone()

        if row is None:
            return None
        return TypeAdapter(value_type).validate_json(row[0])

    def delete(self, bucket: str, key: str):
        """Remove one key; removing an absent key is a no-op.

        Raises:
            BucketNotFoundException: If the bucket does not exist
        """
        with self._lock:
            self._require_bucket(bucket)
            self._conn.execute('DELETE FROM entries WHERE bucket = ? AND key = ?', (bucket, key))

    def get_all(self, bucket: str, value_type: Type[V]) -> Dict[str, V]:
        """Read every entry of a bucket, ordered by key."""
        return self.get_all_prefix(bucket, '', value_type)

    def get_all_prefix(self, bucket: str, prefix: str, value_type: Type[V]) -> Dict[str, V]:
        """Read the entries whose key starts with ``prefix``, ordered by key.

        Raises:
            BucketNotFoundException: If the bucket does not exist
        """
        with self._lock:
            self._require_bucket(bucket)
            rows = self._conn.execute(
                'SELECT key, value FROM entries '
                'WHERE bucket = ? AND substr(key, 1, ?) = ? ORDER BY key',
                (bucket, len(prefix), prefix),
            ).fetchall()

        adapter = TypeAdapter(value_type)
        return {key: adapter.validate_json(data) for key, data in rows}
