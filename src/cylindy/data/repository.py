"""
JSON-backed reference data with fallback tables.

A repository reads its document once, through a `SingleFlight` cache, from
a file path, an arbitrary loader callable or the JSON shipped with the
package. When the document cannot be read or fails validation, the
repository logs a warning and serves its built-in fallback data instead.
"""

from __future__ import annotations

from importlib import resources
import json
import logging
from pathlib import Path
from typing import Any, Callable, ClassVar

from .cache import SingleFlight

logger = logging.getLogger(__name__)

Document = dict[str, Any]


def is_number(value: Any) -> bool:
    """True for int and float values, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def read_json(path: str | Path) -> Document:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def read_package_json(filename: str) -> Document:
    """Read one of the JSON documents shipped in `cylindy.data`."""
    text = resources.files(__package__).joinpath(filename).read_text(encoding="utf-8")
    return json.loads(text)


class JsonRepository:
    """Base class for the cached reference-data repositories.

    Subclasses set `filename`, and implement `validate` and `fallback`.
    """

    filename: ClassVar[str]
    kind: ClassVar[str] = "reference"

    def __init__(
        self,
        path: str | Path | None = None,
        *,
        loader: Callable[[], Document] | None = None,
    ) -> None:
        if path is not None and loader is not None:
            raise ValueError("Pass either path or loader, not both")
        if loader is None:
            if path is not None:
                source = Path(path)
                loader = lambda: read_json(source)  # noqa: E731
            else:
                loader = lambda: read_package_json(self.filename)  # noqa: E731
        self._loader = loader
        self._cache: SingleFlight[Document] = SingleFlight(self._load)

    @classmethod
    def from_package(cls):
        """Repository over the JSON document shipped with cylindy."""
        return cls()

    def _load(self) -> Document:
        try:
            data = self._loader()
            self.validate(data)
        except (OSError, ValueError) as e:
            logger.warning("Using fallback %s data due to load error: %s", self.kind, e)
            return self.fallback()

        logger.info("Loaded %s data (%s)", self.kind, self.describe(data))
        return data

    @property
    def data(self) -> Document:
        return self._cache.get()

    @property
    def is_fallback(self) -> bool:
        return self.metadata().get("version") == "fallback"

    def metadata(self) -> dict[str, Any]:
        return dict(self.data.get("metadata", {}))

    def clear_cache(self) -> None:
        """Forget the loaded document; the next access reloads it."""
        self._cache.clear()
        logger.debug("%s cache cleared", self.kind.capitalize())

    def describe(self, data: Document) -> str:
        return self.filename

    def validate(self, data: Document) -> None:
        """Raise `ValueError` if `data` does not have the expected structure."""
        raise NotImplementedError

    def fallback(self) -> Document:
        raise NotImplementedError
