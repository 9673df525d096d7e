"""String enums whose members carry a human readable description.

Members are declared as ``name = value, description``::

    class ScalingStrategy(DescribedStrEnum):
        fixed = "fixed", "Neither the flavor nor the instance count changes"

Only the value is serialized and compared against, the description becomes
the member's ``__doc__``.
"""

from enum import StrEnum


__all__ = ["DescribedStrEnum"]


class DescribedStrEnum(StrEnum):
    def __new__(cls, value: str, description: str) -> "DescribedStrEnum":
        member = str.__new__(cls, value)
        member._value_ = value
        member.__doc__ = description
        return member

    @property
    def description(self) -> str:
        return self.__doc__ or ""
