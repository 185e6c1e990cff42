"""Password hashing service using bcrypt.

Provides salted, deliberately slow password hashing and verification with
a length policy.
"""

import bcrypt

from rollcall_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt with a configurable work factor. Every call to ``hash``
    draws a fresh salt, so hashing the same secret twice yields different
    digests that both verify.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> digest = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", digest)
    True
    >>> service.verify("wrong_password", digest)
    False
    """

    # Password requirements
    MIN_LENGTH = 6
    MAX_LENGTH = 128

    # bcrypt only reads this many bytes; newer releases reject longer input
    BCRYPT_MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Higher values are more secure but slower.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(self._encode(password), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str | None) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(
                self._encode(password),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets the length policy.

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters long"
            raise WeakPasswordError(msg)

        if len(password) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)

    def _encode(self, password: str) -> bytes:
        return password.encode("utf-8")[: self.BCRYPT_MAX_BYTES]
