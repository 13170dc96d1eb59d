import json
from collections.abc import Iterator, MutableMapping
from pathlib import Path
from typing import Any, Protocol

from pydantic import BaseModel

from liftlog.adapters.errors import StorageError
from liftlog.utils.log import logger


class StoragePort(Protocol):
    def save(self, key: str, value: Any) -> None: ...
    def load(self, key: str) -> Any | None: ...
    def remove(self, key: str) -> None: ...
    def clear(self) -> None: ...
    def keys(self) -> list[str]: ...


class JsonFileStore(MutableMapping[str, str]):
    """
    A str -> str mapping persisted to a single JSON file.

    The whole file is rewritten on every mutation; fine for the handful of
    keys a single user's log produces.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._data: dict[str, str] = self._read()

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            logger.exception(f"Failed to read local store at {self._path}")
            raise StorageError("Failed to read local store file") from e
        if not isinstance(data, dict):
            raise StorageError("Local store file does not contain an object")
        return {str(k): str(v) for k, v in data.items()}

    def _flush(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp.write_text(json.dumps(data, sort_keys=True), encoding="utf-8")
            tmp.replace(self._path)
        except OSError as e:
            logger.exception(f"Failed to write local store at {self._path}")
            raise StorageError("Failed to write local store file") from e

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._commit({**self._data, key: value})

    def __delitem__(self, key: str) -> None:
        if key not in self._data:
            raise KeyError(key)
        self._commit({k: v for k, v in self._data.items() if k != key})

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._commit({})

    def _commit(self, data: dict[str, str]) -> None:
        # Memory only moves to `data` once it is on disk
        self._flush(data)
        self._data = data


class LocalStorageAdapter:
    """
    StoragePort over a synchronous str -> str store holding JSON text.
    Defaults to an in-memory dict.
    """

    def __init__(self, store: MutableMapping[str, str] | None = None):
        self._store: MutableMapping[str, str] = store if store is not None else {}

    def save(self, key: str, value: Any) -> None:
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json", by_alias=True)

        try:
            text = json.dumps(value)
        except (TypeError, ValueError) as e:
            # Cyclic structures raise ValueError, unknown types TypeError
            logger.error(f"Failed to serialise value for key={key}: {e}")
            raise StorageError(f"Failed to save data to local storage: {e}") from e

        self._store[key] = text

    def load(self, key: str) -> Any | None:
        text = self._store.get(key)
        if text is None or text == "":
            return None

        try:
            return json.loads(text)
        except ValueError as e:
            logger.error(f"Corrupt record in local storage key={key}: {e}")
            raise StorageError(f"Failed to load data from local storage: {e}") from e

    def remove(self, key: str) -> None:
        self._store.pop(key, None)

    def clear(self) -> None:
        self._store.clear()

    def keys(self) -> list[str]:
        return sorted(self._store.keys())
