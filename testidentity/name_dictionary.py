"""Case-invariant name dictionary mapping names to enum values.

Names are lowered once when stored and again when looked up, so every
comparison happens on the canonical lowercase form. The backing dict is
private: callers only get the curated operations below, which keeps raw
(non-lowered) keys out of the mapping.

Usage:
    names = CaseInvariantNameDictionary(Severity)
    names.map_range(Severity.HIGH, "high", "Severe")
    names.get_mapped_value("SEVERE")   # Severity.HIGH
    names.get_mapped_value("nope")     # Severity's first member
"""

from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T", bound=Enum)


class DuplicateKeyError(KeyError):
    """Raised when a lowercase name is mapped twice."""

    def __init__(self, key: str, existing: Enum, value: Enum):
        super().__init__(key)
        self.key = key
        self.existing = existing
        self.value = value

    def __str__(self) -> str:
        return f"Name '{self.key}' is already mapped to {self.existing!s} (attempted {self.value!s})"


class CaseInvariantNameDictionary(Generic[T]):
    """Maps the lowercase form of names to members of a single enum type."""

    def __init__(self, enum_type: type[T]):
        self._enum_type = enum_type
        self._names: dict[str, T] = {}

    @property
    def default_value(self) -> T:
        """Value returned for an unmapped name.

        Defaults to the enum's first declared member. Subclasses override this
        to point at a dedicated sentinel.
        """
        return next(iter(self._enum_type))

    def map(self, name: str, value: T) -> None:
        """Map the lowercase version of ``name`` to ``value``.

        Raises:
            DuplicateKeyError: if the lowercase name is already mapped.
        """
        key = name.lower()
        if key in self._names:
            raise DuplicateKeyError(key, self._names[key], value)
        self._names[key] = value

    def map_range(self, value: T, *names: str) -> None:
        """Map the lowercase version of every name in ``names`` to ``value``."""
        for name in names:
            self.map(name, value)

    def map_string_representation(self, value: T) -> None:
        """Map ``value`` to its own string representation."""
        self.map(str(value), value)

    def map_string_representations(self, *values: T) -> None:
        """Map each of ``values`` to its string representation, in order."""
        for value in values:
            self.map_string_representation(value)

    def get_mapped_value(self, name: str) -> T:
        """Get the value mapped to ``name``, or ``default_value`` if there is none.

        The name is lowered before the lookup; surrounding whitespace is kept.
        """
        return self._names.get(name.lower(), self.default_value)

    def names(self) -> list[str]:
        """Stored lowercase names, in insertion order."""
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._names

    def __len__(self) -> int:
        return len(self._names)
