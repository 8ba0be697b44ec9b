"""
Serialization utilities - Conversion between value specifications and plain data

Provides bidirectional conversion between:
- Enums ↔ Strings (ExtrapolationMode, BackgroundVariant, LogLevel)
- Value specifications ↔ Dicts (YAML presets, JSON dumps)

Single source of truth for the YAML preset format.
"""

from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

from models.easing import easing_name
from models.enums import ExtrapolationMode
from models.errors import InvalidSpecificationError
from models.value_spec import ConstantValue, ValueSpec, parse_spec
from utils.enum_helper import EnumHelper

T = TypeVar('T', bound=Enum)


class Serializer:
    """Central enum and value specification serialization"""

    # ========================================================================
    # ENUM SERIALIZATION
    # ========================================================================

    @staticmethod
    def enum_to_str(value: Optional[Enum]) -> Optional[str]:
        """Convert any enum to string name"""
        return value.name if value else None

    @staticmethod
    def str_to_enum(value: str, enum_type: Type[T]) -> T:
        """Convert string to enum (case-insensitive), raise ValueError if invalid"""
        if isinstance(value, enum_type):
            return value
        return EnumHelper.from_string(enum_type, str(value))

    # ========================================================================
    # VALUE SPECIFICATION CONVERSION
    # ========================================================================

    @staticmethod
    def spec_to_dict(spec: ValueSpec) -> Dict[str, Any]:
        """
        Convert a value specification to its YAML/JSON form

        Raises:
            InvalidSpecificationError: If the spec uses a custom (unnamed) easing
        """
        if isinstance(spec, ConstantValue):
            return {"value": spec.value}

        data: Dict[str, Any] = {
            "domain": list(spec.domain),
            "range": list(spec.range),
            "extrapolate_left": EnumHelper.to_string(spec.extrapolate_left, lowercase=True),
            "extrapolate_right": EnumHelper.to_string(spec.extrapolate_right, lowercase=True),
        }
        if spec.easing is not None:
            name = easing_name(spec.easing)
            if name is None:
                raise InvalidSpecificationError(
                    "Custom easing functions cannot be serialized",
                    details={"easing": repr(spec.easing)},
                )
            data["easing"] = name
        return data

    @staticmethod
    def spec_from_dict(
        data: Any,
        default_left: ExtrapolationMode = ExtrapolationMode.CLAMP,
        default_right: ExtrapolationMode = ExtrapolationMode.CLAMP,
    ) -> ValueSpec:
        """Build a value specification from its YAML/JSON form (a number or a mapping)"""
        return parse_spec(data, default_left=default_left, default_right=default_right)

    @staticmethod
    def describe(spec: ValueSpec) -> str:
        """Compact one-line description for logs and CLI listings"""
        if isinstance(spec, ConstantValue):
            return f"constant {spec.value}"

        points = ", ".join(f"{d}→{r}" for d, r in zip(spec.domain, spec.range))
        parts = [points]
        if spec.easing is not None:
            parts.append(easing_name(spec.easing) or "custom easing")
        if spec.extrapolate_left is not ExtrapolationMode.CLAMP:
            parts.append(f"left={spec.extrapolate_left.name.lower()}")
        if spec.extrapolate_right is not ExtrapolationMode.CLAMP:
            parts.append(f"right={spec.extrapolate_right.name.lower()}")
        return " | ".join(parts)
