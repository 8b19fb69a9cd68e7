"""Content-addressed, on-disk store for fetched documents."""

from __future__ import annotations

import hashlib
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class ResponseCache:
    """Persist response bodies on disk, keyed by an opaque string.

    Keys are hashed, so any string (typically a full request URL) is a valid
    key.  Entries are never expired; a new publisher version produces new
    URLs and therefore new keys.
    """

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root)

    def read(self, key: str) -> bytes | None:
        """Return the bytes stored under ``key`` or ``None`` on a miss.

        Errors other than a missing entry are raised as :class:`OSError`.
        """

        try:
            return self._path(key).read_bytes()
        except FileNotFoundError:
            return None

    def write(self, key: str, data: bytes) -> bool:
        """Store ``data`` under ``key``; returns ``False`` if the write failed."""

        path = self._path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp-")
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(data)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.warning(f"Could not write cache entry for {key}: {exc}")
            return False
        return True

    def __contains__(self, key: str) -> bool:
        return self._path(key).is_file()

    def _path(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.root / digest[:2] / digest


__all__ = ["ResponseCache"]
