"""
Unit tests for account_service.core.security
"""
import pytest
from account_service.core.exceptions import InternalError, PasswordHashingError
from account_service.core.security import (
    hash_password,
    verify_password,
)
from account_service.domain.validators.credentials import validate_password


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("Secr3t!")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("Secr3t!")
        assert result != "Secr3t!"

    def test_hash_embeds_cost_factor(self):
        assert hash_password("Secr3t!", rounds=5).startswith("$2b$05$")

    def test_configured_rounds_are_used(self):
        # fast_settings sets BCRYPT_ROUNDS=4
        assert hash_password("Secr3t!").startswith("$2b$04$")

    def test_invalid_rounds_raise_hashing_error(self):
        with pytest.raises(PasswordHashingError):
            hash_password("Secr3t!", rounds=1)

    def test_hashing_error_is_internal_error(self):
        with pytest.raises(InternalError):
            hash_password("Secr3t!", rounds=1)


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("Secr3t!")
        assert verify_password("Secr3t!", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("Secr3t!")
        assert verify_password("Secr3t!x", hashed) is False

    @pytest.mark.parametrize("password", ["A1@aaa", "Secr3t!", "Z9&" + "x" * 61])
    def test_round_trip(self, password):
        hashed = hash_password(password)
        assert verify_password(password, hashed) is True
        assert verify_password(password + "x", hashed) is False

    def test_longest_accepted_multibyte_password(self):
        """A password at the 64-byte validation limit hashes and verifies strictly."""
        password = "é" * 29 + "Ab1!xy"
        assert validate_password(password) == []
        hashed = hash_password(password)
        assert verify_password(password, hashed) is True
        assert verify_password(password + "x", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("Secr3t!", "not-a-bcrypt-hash") is False
