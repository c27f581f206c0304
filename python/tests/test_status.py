"""
Tests for zibal_sdk.status module.

Checks the wire code table, the paid payload, messages and the
StatusField annotation used inside wire models.
"""

import pytest
from pydantic import BaseModel, ValidationError

from zibal_sdk.status import STATUS_CODES, Status, StatusField, StatusKind


class TestStatusTable:
    """Tests for decoding and encoding wire codes."""

    def test_table_size(self):
        """Test that all 23 gateway codes are known."""
        assert len(STATUS_CODES) == 23
        assert len(set(STATUS_CODES)) == 23

    @pytest.mark.parametrize("code", STATUS_CODES)
    def test_code_survives_decode_and_encode(self, code):
        """Test encode(decode(c)) == c with a non-empty message."""
        status = Status.decode(code)
        assert status is not None
        assert status.encode() == code
        assert status.code == code
        assert status.message

    @pytest.mark.parametrize("code", [0, -3, 13, 99, 101, 107, 200, 204, 999, -100])
    def test_unknown_codes_decode_to_none(self, code):
        """Test that codes outside the table are rejected."""
        assert Status.decode(code) is None

    def test_non_int_values_decode_to_none(self):
        """Test that bools and strings are not treated as codes."""
        assert Status.decode(True) is None
        assert Status.decode("100") is None  # type: ignore[arg-type]

    def test_every_kind_is_reachable(self):
        """Test that each variant has at least one wire code."""
        kinds = {Status.decode(code).kind for code in STATUS_CODES}
        assert kinds == set(StatusKind)


class TestPaidStatus:
    """Tests for the paid variant and its verified payload."""

    def test_paid_codes(self):
        """Test that 1 and 2 are verified and unverified payments."""
        assert Status.decode(1) == Status.paid(verified=True)
        assert Status.decode(2) == Status.paid(verified=False)
        assert Status.decode(1) != Status.decode(2)

    def test_paid_encoding(self):
        """Test that the payload selects the wire code."""
        assert Status.paid(True).code == 1
        assert Status.paid(False).code == 2

    def test_is_paid(self):
        """Test the is_paid helper."""
        assert Status.decode(1).is_paid
        assert Status.decode(2).is_paid
        assert not Status.decode(100).is_paid

    def test_paid_requires_payload(self):
        """Test that a paid status without verified is rejected."""
        with pytest.raises(ValidationError):
            Status(kind=StatusKind.PAID)

    def test_payload_only_for_paid(self):
        """Test that verified is rejected on other variants."""
        with pytest.raises(ValidationError):
            Status(kind=StatusKind.CONFIRMED, verified=True)


class TestStatusValue:
    """Tests for equality, hashing and immutability."""

    def test_equality_with_fresh_instance(self):
        """Test that statuses compare by value."""
        assert Status.decode(100) == Status.of(StatusKind.CONFIRMED)
        assert Status.decode(203) == Status(kind=StatusKind.INVALID_TRACK_ID)

    def test_hashable(self):
        """Test that statuses can be used as dict keys."""
        seen = {Status.decode(code) for code in STATUS_CODES}
        assert len(seen) == 23

    def test_frozen(self):
        """Test that statuses cannot be modified."""
        status = Status.decode(100)
        with pytest.raises(ValidationError):
            status.kind = StatusKind.WAITING

    def test_str(self):
        """Test readable string forms."""
        assert str(Status.decode(100)) == "confirmed"
        assert str(Status.decode(2)) == "paid(verified=False)"

    def test_messages(self):
        """Test a few gateway messages."""
        assert Status.decode(-2).message == "خطای داخلی"
        assert Status.decode(100).message == "با موفقیت تایید شد"
        assert Status.decode(1).message != Status.decode(2).message


class TestStatusField:
    """Tests for the StatusField annotation."""

    class Holder(BaseModel):
        status: StatusField

    def test_validates_from_int(self):
        """Test that an int becomes a Status."""
        holder = self.Holder.model_validate({"status": 3})
        assert holder.status == Status.of(StatusKind.CANCELLED_BY_USER)

    def test_accepts_status_instance(self):
        """Test that a Status instance is kept as is."""
        holder = self.Holder(status=Status.paid(True))
        assert holder.status.verified is True

    def test_unknown_code_fails(self):
        """Test that an unknown code fails with invalid_status_code."""
        with pytest.raises(ValidationError) as exc_info:
            self.Holder.model_validate({"status": 999})
        error = exc_info.value.errors()[0]
        assert error["type"] == "invalid_status_code"
        assert error["ctx"]["code"] == 999

    def test_integral_float_accepted(self):
        """Test that a whole-number float is read as its code."""
        holder = self.Holder.model_validate_json('{"status": 100.0}')
        assert holder.status == Status.of(StatusKind.CONFIRMED)

    def test_fractional_float_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            self.Holder.model_validate({"status": 100.5})
        assert exc_info.value.errors()[0]["type"] == "invalid_status_code"

    def test_serializes_to_code(self):
        """Test that the field dumps back to the wire code."""
        holder = self.Holder.model_validate({"status": 202})
        assert holder.model_dump() == {"status": 202}
        assert holder.model_dump_json() == '{"status":202}'
