"""Enum conversion utilities"""

from enum import Enum
from typing import TypeVar, Type, Optional, List

# Generic type for any Enum subclass
E = TypeVar("E", bound=Enum)

_MISSING = object()


class EnumHelper:
    """
    Utility class for working with Enums read from YAML, CLI flags and raw specs:
    - Convert enum members to strings (with case options)
    - Parse strings back to enum members (case-insensitive, '-' treated as '_')
    - List all member names
    """

    @staticmethod
    def to_string(enum_value: E, lowercase: bool = False) -> str:
        """
        Convert Enum member to string (its name).

        Args:
            enum_value: Enum member
            lowercase: Return lowercase string (for config files)

        Returns:
            Enum member name as string
        """
        if not isinstance(enum_value, Enum):
            raise TypeError(f"Expected Enum, got {type(enum_value).__name__}")
        name = enum_value.name
        return name.lower() if lowercase else name

    @staticmethod
    def from_string(enum_class: Type[E], name: str, default: Optional[E] = _MISSING) -> Optional[E]:
        """
        Parse string to Enum member.

        Args:
            enum_class: Enum class to parse into
            name: Member name, e.g. "clamp", "CLAMP", "ease-out"
            default: Returned when no member matches (omit to raise)

        Returns:
            Enum member or default

        Raises:
            ValueError: If no member matches and no default was given
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        key = name.strip().replace("-", "_").upper()
        for member in enum_class:
            if member.name == key:
                return member

        if default is not _MISSING:
            return default
        raise ValueError(f"Invalid {enum_class.__name__} name: {name}")

    @staticmethod
    def list_names(enum_class: Type[E], lowercase: bool = False) -> List[str]:
        """List all Enum member names."""
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        if lowercase:
            return [member.name.lower() for member in enum_class]
        return [member.name for member in enum_class]
