from collections.abc import Mapping
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any, List, Iterator, Union

from ogcard.services.schema_classifier import classify_type


ADDITIONAL_SUFFIX = "_additional"

LOCATION_COORDINATES = ("latitude", "longitude")
ADDRESS_KEYS = ("street_address", "locality", "region", "postal_code", "country_name")


@dataclass(frozen=True)
class ImageSize:
    """Pixel dimensions reported by an image probe"""
    width: int
    height: int


@dataclass
class FetchFailure:
    """
    Structured description of a failed page fetch.

    Returned by the web fetcher instead of raising so callers can tell
    network problems apart from parse failures.
    """
    http_code: int = 0
    message: str = ""
    resolved_url: Optional[str] = None
    status: str = "error"

    def to_dict(self) -> Dict[str, Any]:
        """Convert the failure to a dictionary representation"""
        return asdict(self)


class MetaValues:
    """
    Mutable store behind a result record: one ordered list of values per key.

    The first value of a list is the key's value; the rest are exposed as the
    ``<key>_additional`` companion.
    """

    def __init__(self):
        self._values: Dict[str, List[str]] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def get(self, key: str) -> Optional[str]:
        values = self._values.get(key)
        return values[0] if values else None

    def additional(self, key: str) -> List[str]:
        return list(self._values.get(key, [])[1:])

    def add(self, key: str, value: str) -> None:
        """Insert a first value or accumulate a repeated one; never overwrites."""
        self._values.setdefault(key, []).append(value)

    def set(self, key: str, value: str) -> None:
        """Replace the first value of a key, keeping any additional values."""
        if key in self._values:
            self._values[key][0] = value
        else:
            self._values[key] = [value]

    def discard(self, key: str) -> None:
        self._values.pop(key, None)

    def items(self):
        return self._values.items()


class OpenGraph(Mapping):
    """
    Read-only view over the metadata extracted from one document.

    Keys follow scan order. A key seen more than once is followed by its
    ``<key>_additional`` companion holding the later values as a list.
    """

    def __init__(self, values: MetaValues):
        self._flat: Dict[str, Union[str, List[str]]] = {}
        companions = {
            key + ADDITIONAL_SUFFIX: list(key_values[1:])
            for key, key_values in values.items()
            if len(key_values) > 1
        }
        for key, key_values in values.items():
            if key in companions:
                # a literal tag named like a companion joins the repeated values
                companions[key].extend(key_values)
                continue
            self._flat[key] = key_values[0]
            companion = key + ADDITIONAL_SUFFIX
            if companion in companions:
                self._flat[companion] = companions[companion]

    def __getitem__(self, key: str) -> Union[str, List[str]]:
        return self._flat[key]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._flat))

    def __len__(self) -> int:
        return len(self._flat)

    def __repr__(self) -> str:
        return f"OpenGraph({self._flat!r})"

    def has(self, key: str) -> bool:
        return key in self._flat

    @property
    def schema(self) -> Optional[str]:
        """Schema bucket of the record's ``type``, or None"""
        type_value = self._flat.get("type")
        return classify_type(type_value if isinstance(type_value, str) else None)

    def has_location(self) -> bool:
        """
        Will return True if the page has location data embedded.

        Either both coordinates are present or the full postal address is.
        """
        if all(key in self._flat for key in LOCATION_COORDINATES):
            return True
        return all(key in self._flat for key in ADDRESS_KEYS)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a JSON-ready dictionary"""
        result: Dict[str, Any] = {
            key: list(value) if isinstance(value, list) else value
            for key, value in self._flat.items()
        }
        if "schema" not in result:
            result["schema"] = self.schema
        return result
