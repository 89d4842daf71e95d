from __future__ import annotations
import json, os, shutil
from typing import Any, Dict, Mapping, Optional, Protocol

from .errors import ConfigWriteError
from .logging_utils import get_logger

log = get_logger(__name__)

SAVED_MESSAGE = "Configuration saved successfully"


class ConfigStore(Protocol):
    def read(self) -> Optional[bytes]: ...
    def write(self, data: bytes) -> None: ...


class FileStore:
    """Single JSON document on disk. Missing file reads as ``None``."""

    def __init__(self, path: str):
        self.path = path

    def read(self) -> Optional[bytes]:
        try:
            with open(self.path, "rb") as f:
                return f.read()
        except FileNotFoundError:
            return None

    def write(self, data: bytes) -> None:
        d = os.path.dirname(self.path)
        if d:
            os.makedirs(d, exist_ok=True)
        tmp = self.path + ".tmp"
        with open(tmp, "wb") as f:
            f.write(data)
        shutil.move(tmp, self.path)

    def __repr__(self):
        return f"FileStore({self.path!r})"


class MemoryStore:
    def __init__(self, initial: Optional[bytes] = None):
        self.data = initial

    def read(self) -> Optional[bytes]:
        return self.data

    def write(self, data: bytes) -> None:
        self.data = bytes(data)


def merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Flat field-wise merge: every key in ``override`` replaces the one in ``base``.

    Values are taken as-is, nested dicts included; nothing is merged below the top level.
    """
    out = dict(base)
    for k, v in override.items():
        out[k] = v
    return out


class ConfigResolver:
    """Effective configuration = persisted document over the environment snapshot.

    The store is read on every ``resolve()``; nothing is cached between requests.
    """

    def __init__(self, snapshot: Mapping[str, Any], store: ConfigStore):
        self.snapshot = snapshot
        self.store = store

    def _load_persisted(self) -> Optional[Dict[str, Any]]:
        try:
            raw = self.store.read()
        except OSError as e:
            log.warning("Could not read persisted config from %r: %s", self.store, e)
            return None
        if raw is None:
            log.info("No persisted config at %r, using environment defaults", self.store)
            return None
        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            log.warning("Persisted config in %r is not valid JSON: %s", self.store, e)
            return None
        if not isinstance(data, dict):
            log.warning("Persisted config in %r is a %s, not an object", self.store, type(data).__name__)
            return None
        return data

    def resolve(self) -> Dict[str, Any]:
        persisted = self._load_persisted()
        if persisted is None:
            return dict(self.snapshot)
        return merge(self.snapshot, persisted)

    def persist(self, new_config: Mapping[str, Any]) -> str:
        """Replace the stored document with ``new_config``. No merge with the old one."""
        try:
            data = json.dumps(new_config, indent=2, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise ConfigWriteError(f"Configuration is not JSON serializable: {e}") from e
        try:
            self.store.write(data)
        except OSError as e:
            raise ConfigWriteError(f"Could not write configuration to {self.store!r}: {e}") from e
        log.info("Configuration saved: %s", new_config)
        return SAVED_MESSAGE
