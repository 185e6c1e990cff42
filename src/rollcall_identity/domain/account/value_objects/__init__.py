from rollcall_identity.domain.account.value_objects.account_role import AccountRole
from rollcall_identity.domain.account.value_objects.email import Email

__all__ = ["AccountRole", "Email"]
