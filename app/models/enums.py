"""
Customer Profile Enums
"""
import enum
from typing import Union


class _OrdinalEnum(str, enum.Enum):
    """String enum that also accepts its 1-based ordinal or member name"""

    @classmethod
    def parse(cls, value: Union[str, int, "_OrdinalEnum"]):
        if isinstance(value, cls):
            return value
        members = list(cls)
        if isinstance(value, int) and not isinstance(value, bool):
            if 1 <= value <= len(members):
                return members[value - 1]
            raise ValueError(f"{value} is not a valid {cls.__name__} ordinal")
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls.parse(int(text))
            for member in members:
                if text.lower() in (member.value.lower(), member.name.lower()):
                    return member
        raise ValueError(f"{value!r} is not a valid {cls.__name__}")


class AddressType(_OrdinalEnum):
    PRIMARY = "Primary"
    MAILING = "Mailing"
    PREVIOUS = "Previous"


class EmploymentType(_OrdinalEnum):
    FULL_TIME = "FullTime"
    PART_TIME = "PartTime"
    SELF_EMPLOYED = "SelfEmployed"
    RETIRED = "Retired"
    UNEMPLOYED = "Unemployed"
    CONTRACT = "Contract"
