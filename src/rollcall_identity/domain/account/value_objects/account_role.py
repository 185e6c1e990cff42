from enum import Enum


class AccountRole(str, Enum):
    """Account roles (students and department heads)."""

    STUDENT = "student"
    HEAD = "hod"

    @classmethod
    def _missing_(cls, value: object) -> "AccountRole | None":
        # "head" is accepted as a spelling of the department-head role
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "head":
                return cls.HEAD
            for member in cls:
                if member.value == normalized:
                    return member
        return None
