"""JWT token service.

Provides signed, time-limited bearer tokens bound to an account id.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from rollcall_auth.exceptions import InvalidTokenError, TokenExpiredError
from rollcall_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens carry the account id (``sub``), the role at issue time and an
    expiry. Revocation is implicit: callers resolve ``sub`` to a live
    account and reject the token when the account is gone.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(account_id, "student")
    >>> payload = service.verify_token(token)
    >>> print(payload.account_id)
    """

    DEFAULT_ACCESS_EXPIRE_DAYS = 7
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_days: int = DEFAULT_ACCESS_EXPIRE_DAYS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_days
            Days until an access token expires (default 7)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(days=access_token_expire_days)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_expire

    def create_access_token(
        self,
        account_id: UUID,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create an access token.

        Parameters
        ----------
        account_id
            The account's unique identifier
        role
            The account's role value
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "sub": str(account_id),
            "role": role,
            "type": "access",
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        TokenExpiredError
            If the signature is valid but the token is past its expiry
        InvalidTokenError
            If the token is malformed, unsigned or signed with another key
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp"]},
            )

            return TokenPayload(
                account_id=UUID(payload["sub"]),
                role=payload.get("role", ""),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_type=payload.get("type", "access"),
            )

        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid login token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
