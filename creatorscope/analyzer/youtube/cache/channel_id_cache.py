"""
Handle-to-channel-id cache.

Resolving a handle costs one or two quota units, so resolutions (including
"not found") are remembered. By default the cache lives in a temporary
directory owned by one data source; passing a directory and expiry makes it
persistent across runs.
"""

import os
import shutil
import tempfile
from threading import Lock
from typing import Optional, Tuple

import bittensor as bt
from diskcache import Cache

# Stored in place of None so a cached miss can be told apart from no entry
NOT_FOUND = "__not_found__"


class ChannelIdCache:
    """Disk-backed mapping of lowercased handle -> channel id (or not found)."""

    def __init__(self, directory: Optional[str] = None, expire: Optional[float] = None):
        self._owns_directory = directory is None
        self.directory = directory or tempfile.mkdtemp(prefix="creatorscope-channel-ids-")
        os.makedirs(self.directory, exist_ok=True)
        self.expire = expire
        self._lock = Lock()
        self._cache = Cache(
            directory=self.directory,
            size_limit=1e8,  # 100MB
            disk_min_file_size=0,
            disk_pickle_protocol=4,
        )

    @staticmethod
    def _key(handle: str) -> str:
        return handle.lower()

    def lookup(self, handle: str) -> Tuple[bool, Optional[str]]:
        """
        Look up a handle.

        Returns:
            (hit, channel_id); channel_id is None on a miss or a cached "not found"
        """
        value = self._get_cache().get(self._key(handle))
        if value is None:
            return False, None
        bt.logging.debug(f"Channel id cache hit for handle {handle}")
        return True, None if value == NOT_FOUND else value

    def store(self, handle: str, channel_id: Optional[str]) -> None:
        self._get_cache().set(
            self._key(handle),
            channel_id if channel_id is not None else NOT_FOUND,
            expire=self.expire,
        )

    def clear(self) -> None:
        self._get_cache().clear()

    def _get_cache(self) -> Cache:
        if self._cache is None:
            raise RuntimeError("ChannelIdCache used after close()")
        return self._cache

    def close(self) -> None:
        """Close the cache, removing the directory when it was a temporary one."""
        with self._lock:
            if self._cache is None:
                return
            self._cache.close()
            self._cache = None
            if self._owns_directory:
                shutil.rmtree(self.directory, ignore_errors=True)

    def __len__(self) -> int:
        return len(self._get_cache())
