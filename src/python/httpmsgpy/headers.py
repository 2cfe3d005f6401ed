"""Case-insensitive header storage with per-instance protected keys.

A HeaderCollection is not internally synchronized. Callers that share one
across threads must serialize writers themselves; reading a message's
start-line fields needs no locking because they never change.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from .errors import DuplicateKeyError, HeaderIsReadOnlyError, KeyNotFoundError


logger = logging.getLogger(__name__)


class CaseInsensitiveKey:
    """Wraps a header name so equality and hashing ignore case.

    The original spelling is kept in ``value`` and is what enumeration yields.
    """

    __slots__ = ("value", "_folded")

    def __init__(self, value: str):
        self.value = value
        self._folded = value.casefold()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CaseInsensitiveKey):
            return self._folded == other._folded
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._folded)

    def __repr__(self) -> str:
        return f"CaseInsensitiveKey({self.value!r})"

    def __str__(self) -> str:
        return self.value


class HeaderError(Enum):
    HEADER_IS_READ_ONLY = "header is read-only"
    DUPLICATE_KEY = "duplicate key"


_ERROR_TYPES = {
    HeaderError.HEADER_IS_READ_ONLY: HeaderIsReadOnlyError,
    HeaderError.DUPLICATE_KEY: DuplicateKeyError,
}


@dataclass(frozen=True)
class HeaderResult:
    """Outcome of a header mutation. Truthy on success."""
    key: str
    error: HeaderError | None = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.is_ok

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise _ERROR_TYPES[self.error](f"{self.error.value}: {self.key!r}")


class HeaderCollection:
    """Header name/value pairs keyed case-insensitively.

    Keys listed as protected at construction can never be added, overwritten
    or removed through the public methods. ``set``, ``add`` and ``remove``
    report refusals through the returned HeaderResult instead of raising.
    """

    def __init__(self, protected_keys: Iterable[str] = ()):
        self._protected_keys = frozenset(CaseInsensitiveKey(key) for key in protected_keys)
        self._elements: dict[CaseInsensitiveKey, str] = {}

    @property
    def protected_keys(self) -> frozenset[str]:
        return frozenset(key.value for key in self._protected_keys)

    def is_protected(self, key: str) -> bool:
        return CaseInsensitiveKey(key) in self._protected_keys

    def get(self, key: str) -> str:
        try:
            return self._elements[CaseInsensitiveKey(key)]
        except KeyError:
            raise KeyNotFoundError(f"header not found: {key!r}") from None

    def set(self, key: str, value: str) -> HeaderResult:
        invariant_key = CaseInsensitiveKey(key)
        if invariant_key in self._protected_keys:
            return self._refuse(key)

        self._elements[invariant_key] = value
        return HeaderResult(key)

    def add(self, key: str, value: str) -> HeaderResult:
        invariant_key = CaseInsensitiveKey(key)
        if invariant_key in self._protected_keys:
            return self._refuse(key)
        if invariant_key in self._elements:
            return HeaderResult(key, HeaderError.DUPLICATE_KEY)

        self._elements[invariant_key] = value
        return HeaderResult(key)

    def remove(self, key: str) -> HeaderResult:
        invariant_key = CaseInsensitiveKey(key)
        if invariant_key in self._protected_keys:
            return self._refuse(key)

        self._elements.pop(invariant_key, None)
        return HeaderResult(key)

    def contains_key(self, key: str) -> bool:
        return CaseInsensitiveKey(key) in self._elements

    def items(self) -> list[tuple[str, str]]:
        return [(key.value, value) for key, value in self._elements.items()]

    def copy(self) -> "HeaderCollection":
        duplicate = HeaderCollection()
        duplicate._protected_keys = self._protected_keys
        duplicate._elements = dict(self._elements)
        return duplicate

    def _set_without_protected_key_check(self, key: str, value: str) -> None:
        # Only message constructors call this, to seed their own protected entries.
        self._elements[CaseInsensitiveKey(key)] = value

    def _refuse(self, key: str) -> HeaderResult:
        logger.debug("Refused mutation of protected header %r", key)
        return HeaderResult(key, HeaderError.HEADER_IS_READ_ONLY)

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    def __setitem__(self, key: str, value: str) -> None:
        self.set(key, value).raise_for_error()

    def __delitem__(self, key: str) -> None:
        self.remove(key).raise_for_error()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains_key(key)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        # Iterates a snapshot taken when iteration starts, so mutating the
        # collection mid-loop does not affect the pairs produced.
        for key, value in list(self._elements.items()):
            yield key.value, value

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"HeaderCollection({self.items()!r})"
