"""Unit tests for PasswordHashingService."""

import pytest

from rollcall_auth.exceptions import WeakPasswordError
from rollcall_auth.services import PasswordHashingService


class TestPasswordHashing:
    """Tests for hashing and verification."""

    def setup_method(self):
        # Low work factor keeps the suite fast
        self.service = PasswordHashingService(rounds=4)

    def test_hash_is_not_plaintext(self):
        digest = self.service.hash("secret1")

        assert digest != "secret1"
        assert digest.startswith("$2")

    def test_same_password_hashes_differently(self):
        first = self.service.hash("secret1")
        second = self.service.hash("secret1")

        assert first != second
        assert self.service.verify("secret1", first)
        assert self.service.verify("secret1", second)

    def test_verify_rejects_wrong_password(self):
        digest = self.service.hash("secret1")

        assert not self.service.verify("secret2", digest)

    def test_verify_rejects_malformed_hash(self):
        assert not self.service.verify("secret1", "not-a-bcrypt-hash")

    def test_verify_rejects_missing_values(self):
        assert not self.service.verify("", "anything")
        assert not self.service.verify("secret1", None)


class TestPasswordPolicy:
    """Tests for the length policy."""

    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    @pytest.mark.parametrize("password", ["123456", "x" * 128])
    def test_boundary_lengths_are_accepted(self, password):
        self.service.validate_strength(password)

    def test_five_characters_is_too_short(self):
        with pytest.raises(WeakPasswordError, match="at least 6"):
            self.service.validate_strength("12345")

    def test_over_max_length_is_rejected(self):
        with pytest.raises(WeakPasswordError, match="cannot exceed 128"):
            self.service.validate_strength("x" * 129)

    def test_empty_password_is_rejected(self):
        with pytest.raises(WeakPasswordError, match="cannot be empty"):
            self.service.validate_strength("")

    def test_hash_enforces_policy(self):
        with pytest.raises(WeakPasswordError):
            self.service.hash("short")


class TestLongPasswords:
    """Passwords beyond bcrypt's 72 byte input limit."""

    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_max_length_password_hashes_and_verifies(self):
        password = "p" * 128
        digest = self.service.hash(password)

        assert self.service.verify(password, digest)
