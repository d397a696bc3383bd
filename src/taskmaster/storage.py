from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter

from .models import Task
from .results import SaveResult

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

SAVED_MESSAGE = "Changes saved successfully!"


@dataclass(frozen=True)
class JsonOptions:
    """
    Serialization options for the JSON file.

    - indent: pretty-print indentation (None writes a single line)
    - ensure_ascii: False emits non-ASCII characters literally instead of \\uXXXX escapes
    - case_insensitive_keys: match object keys to model fields ignoring case on read
    - encoding: text encoding of the file
    - atomic_writes: write to a sibling temp file and rename it over the target
    """
    indent: Optional[int] = 2
    ensure_ascii: bool = False
    case_insensitive_keys: bool = True
    encoding: str = "utf-8"
    atomic_writes: bool = False


def _fold_key(key: str) -> str:
    return key.replace("_", "").casefold()


def _field_keys(model: Type[BaseModel]) -> Dict[str, str]:
    """Map folded key spellings to the alias the model validates by."""
    keys: Dict[str, str] = {}
    for name, info in model.model_fields.items():
        target = info.alias or name
        keys[_fold_key(name)] = target
        keys[_fold_key(target)] = target
    return keys


def normalize_keys(raw: Any, model: Type[BaseModel]) -> Any:
    """
    Rename the keys of a raw JSON object so they match the model's aliases
    regardless of case ('id', 'ID' and 'Id' all become 'Id'). When a field
    is spelled more than once the last occurrence wins; keys that match no
    field are kept as-is and later ignored by the model.
    """
    if not isinstance(raw, dict):
        return raw
    keys = _field_keys(model)
    normalized: Dict[str, Any] = {}
    for key, value in raw.items():
        target = keys.get(_fold_key(str(key)), key)
        normalized[target] = value
    return normalized


class JsonFileStore(Generic[M]):
    """
    Whole-file JSON persistence for a list of pydantic models.

    The file always holds a single JSON array. Reads never raise: a missing,
    unreadable or malformed file yields an empty list. Writes never raise
    either; they report the outcome as a SaveResult. Every write replaces the
    entire file content.
    """

    def __init__(
        self,
        path: Union[str, Path],
        model: Type[M],
        options: Optional[JsonOptions] = None,
    ) -> None:
        self._path = Path(path)
        self._model = model
        self._options = options or JsonOptions()
        self._adapter: TypeAdapter[List[M]] = TypeAdapter(List[model])  # type: ignore[valid-type]
        self.last_error: Optional[str] = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def options(self) -> JsonOptions:
        return self._options

    def load_all(self) -> List[M]:
        """
        Read every record from the file, in file order.

        Returns an empty list (and records `last_error`) when the file is
        missing, cannot be read, is not valid JSON, is not a JSON array, or
        holds an element that does not validate.
        """
        try:
            raw_text = self._path.read_text(encoding=self._options.encoding)
        except FileNotFoundError:
            return self._load_failed(f"Tasks file not found: {self._path}", level=logging.WARNING)
        except OSError as ex:
            return self._load_failed(f"Error reading the file {self._path}: {ex}")
        except UnicodeDecodeError as ex:
            return self._load_failed(f"Error decoding the file {self._path}: {ex}")

        # Files saved by other editors may start with a byte order mark.
        if raw_text.startswith("\ufeff"):
            raw_text = raw_text[1:]

        try:
            items = self._decode(raw_text)
        except ValueError as ex:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors.
            return self._load_failed(f"Invalid content in {self._path}: {ex}")
        except Exception as ex:
            logger.exception("Unexpected failure while reading %s", self._path)
            return self._load_failed(f"An error occurred while reading the file {self._path}: {ex}")

        self.last_error = None
        logger.info("Loaded %d record(s) from %s", len(items), self._path)
        return items

    def save_all(self, items: Iterable[M]) -> SaveResult:
        """
        Serialize the full collection and overwrite the file with it.

        The in-memory collection is never modified. On failure the file is
        left as the failed write left it, which for a non-atomic write may be
        truncated.
        """
        try:
            content = self._encode(items)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if self._options.atomic_writes:
                self._write_atomic(content)
            else:
                with open(self._path, "w", encoding=self._options.encoding) as f:
                    f.write(content)
        except OSError as ex:
            message = f"Error writing the file {self._path}: {ex}"
            logger.error(message)
            self.last_error = message
            return SaveResult(ok=False, message=message, path=self._path)
        except Exception as ex:
            logger.exception("Unexpected failure while writing %s", self._path)
            message = f"An error occurred while writing to the file {self._path}: {ex}"
            self.last_error = message
            return SaveResult(ok=False, message=message, path=self._path)

        self.last_error = None
        logger.debug("Wrote %s", self._path)
        return SaveResult(ok=True, message=SAVED_MESSAGE, path=self._path)

    def _decode(self, raw_text: str) -> List[M]:
        data = json.loads(raw_text)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        if self._options.case_insensitive_keys:
            data = [normalize_keys(item, self._model) for item in data]
        return self._adapter.validate_python(data)

    def _encode(self, items: Iterable[M]) -> str:
        payload = [item.model_dump(mode="json", by_alias=True) for item in items]
        return json.dumps(payload, indent=self._options.indent, ensure_ascii=self._options.ensure_ascii)

    def _write_atomic(self, content: str) -> None:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding=self._options.encoding) as f:
                f.write(content)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _load_failed(self, message: str, level: int = logging.ERROR) -> List[M]:
        logger.log(level, message)
        self.last_error = message
        return []


# PUBLIC_INTERFACE
class TaskStore(JsonFileStore[Task]):
    """JSON file store for the task list."""

    def __init__(self, path: Union[str, Path], options: Optional[JsonOptions] = None) -> None:
        super().__init__(path, Task, options)
