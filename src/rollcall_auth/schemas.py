"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded bearer token payload.

    Attributes
    ----------
    account_id
        The unique identifier of the account the token was issued for
    role
        The account role at issue time (informational only, the live
        account record is authoritative)
    exp
        Token expiration timestamp
    token_type
        Always "access" for tokens issued by this package
    """

    account_id: UUID
    role: str
    exp: datetime
    token_type: str = "access"

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp

    def is_access_token(self) -> bool:
        """Check if this is an access token."""
        return self.token_type == "access"
