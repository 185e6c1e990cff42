"""Generation of department-scoped head identifiers."""

import re
from collections.abc import Iterable

_NON_LETTERS = re.compile(r"[^A-Z]")


class HeadIdentifierSequence:
    """Compute the next ``HOD_<DEPT>_<NNN>`` identifier for a department.

    The numeric part is one more than the highest number already in use for
    the department code, so deleting an older head never causes its
    identifier to be handed out again while a newer one exists.

    Examples
    --------
    >>> HeadIdentifierSequence.department_code("Physics")
    'PHY'
    >>> HeadIdentifierSequence.next_identifier("Physics", ["HOD_PHY_001"])
    'HOD_PHY_002'
    """

    PREFIX = "HOD"
    FALLBACK_CODE = "GEN"
    WIDTH = 3

    @classmethod
    def department_code(cls, department: str | None) -> str:
        if not department:
            return cls.FALLBACK_CODE
        code = _NON_LETTERS.sub("", department[:3].upper())
        return code or cls.FALLBACK_CODE

    @classmethod
    def identifier_prefix(cls, department: str | None) -> str:
        return f"{cls.PREFIX}_{cls.department_code(department)}_"

    @classmethod
    def next_identifier(
        cls,
        department: str | None,
        existing: Iterable[str],
    ) -> str:
        prefix = cls.identifier_prefix(department)
        highest = 0
        for identifier in existing:
            if not identifier.startswith(prefix):
                continue
            suffix = identifier[len(prefix) :]
            if suffix.isdigit():
                highest = max(highest, int(suffix))
        return f"{prefix}{highest + 1:0{cls.WIDTH}d}"
