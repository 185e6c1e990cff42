from rollcall_identity.application.commands.create_head_command import (
    CreateHeadCommand,
)
from rollcall_identity.application.commands.delete_head_command import (
    DeleteHeadCommand,
)
from rollcall_identity.application.commands.reset_head_password_command import (
    ResetHeadPasswordCommand,
)
from rollcall_identity.application.commands.update_head_command import (
    UpdateHeadCommand,
)
from rollcall_identity.application.commands.update_profile_command import (
    UpdateProfileCommand,
)

__all__ = [
    "CreateHeadCommand",
    "DeleteHeadCommand",
    "ResetHeadPasswordCommand",
    "UpdateHeadCommand",
    "UpdateProfileCommand",
]
