"""Unit tests for TokenRecord expiry predicates."""

from datetime import timedelta

from warden_auth.clock import utc_now
from warden_auth.repositories import TokenRecord


class TestTokenRecord:
    def setup_method(self):
        self.now = utc_now()

    def test_empty_record(self):
        record = TokenRecord.empty(7)

        assert record.user_id == 7
        assert record.is_persisted is False
        assert record.has_valid_signed_token(self.now) is False
        assert record.has_usable_renewal_token(self.now) is False

    def test_signed_token_valid_before_expiry(self):
        record = TokenRecord.empty(1).with_signed_token(
            "tok",
            self.now + timedelta(seconds=1),
        )
        assert record.has_valid_signed_token(self.now) is True

    def test_signed_token_invalid_at_expiry(self):
        """Expiry equal to now counts as expired."""
        record = TokenRecord.empty(1).with_signed_token("tok", self.now)
        assert record.has_valid_signed_token(self.now) is False

    def test_signed_token_without_expiry_is_invalid(self):
        record = TokenRecord(user_id=1, signed_token="tok")
        assert record.has_valid_signed_token(self.now) is False

    def test_renewal_token_usable_before_expiry(self):
        record = TokenRecord.empty(1).with_renewal_token(
            "ab" * 32,
            self.now + timedelta(days=1),
        )
        assert record.has_usable_renewal_token(self.now) is True
        assert record.has_usable_renewal_token(self.now + timedelta(days=2)) is False

    def test_with_methods_keep_other_fields(self):
        original = TokenRecord(user_id=1, id=5).with_renewal_token(
            "r",
            self.now,
        )

        updated = original.with_signed_token("s", self.now)

        assert updated.id == 5
        assert updated.renewal_token == "r"
        assert updated.signed_token == "s"
        assert original.signed_token == ""
