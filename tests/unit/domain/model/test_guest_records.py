"""Unit tests for Comment and Gift records."""

from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from wedding.domain.model import Comment, Gift
from wedding.domain.value import Attendance, CommentId, GiftId, InvitationId


def _comment(**overrides):
    fields = {
        "id": CommentId(uuid4()),
        "invitation_id": InvitationId(uuid4()),
        "name": "Rina",
        "message": "Selamat menempuh hidup baru",
        "attendance": "yes",
    }
    fields.update(overrides)
    return Comment(**fields)


def _gift(**overrides):
    fields = {
        "id": GiftId(uuid4()),
        "invitation_id": InvitationId(uuid4()),
        "sender_name": "Andi",
        "amount": Decimal("500000"),
        "bank_account": "BCA 123-456",
    }
    fields.update(overrides)
    return Gift(**fields)


class TestComment:
    """Tests for the Comment model."""

    @pytest.mark.parametrize("value", ["yes", "no", "maybe"])
    def test_accepts_each_attendance_answer(self, value):
        comment = _comment(attendance=value)

        assert comment.attendance == Attendance(value)

    @pytest.mark.parametrize("value", ["perhaps", "YES", "", "attending"])
    def test_rejects_other_attendance_values(self, value):
        with pytest.raises(ValidationError):
            _comment(attendance=value)

    def test_requires_invitation_id(self):
        with pytest.raises(ValidationError):
            Comment(
                id=CommentId(uuid4()),
                name="Rina",
                message="Hi",
                attendance="yes",
            )

    def test_rejects_null_invitation_id(self):
        with pytest.raises(ValidationError):
            _comment(invitation_id=None)

    def test_message_keeps_only_inline_emphasis(self):
        comment = _comment(
            message='<b>Selamat</b> <a href="https://x.example">klik</a><script>x()</script>'
        )

        assert comment.message == "<b>Selamat</b> klik"

    def test_message_length_counts_escaped_text(self):
        assert _comment(message="&" * 100).message == "&amp;" * 100

        with pytest.raises(ValidationError, match="at most 500"):
            _comment(message="Selamat & bahagia " + "&" * 480)

    def test_name_is_sanitized(self):
        comment = _comment(name="<b>Rina</b><script>x()</script> & Dodi")

        assert comment.name == "<b>Rina</b> &amp; Dodi"

    def test_name_of_only_markup_is_rejected(self):
        with pytest.raises(ValidationError, match="Name must contain text"):
            _comment(name="<script>alert(1)</script>")

    def test_message_of_only_markup_is_rejected(self):
        with pytest.raises(ValidationError, match="Message must contain text"):
            _comment(message="<script>alert(1)</script>")

    def test_message_length_limit(self):
        with pytest.raises(ValidationError):
            _comment(message="a" * 501)

    def test_name_length_limit(self):
        with pytest.raises(ValidationError):
            _comment(name="a" * 101)


class TestGift:
    """Tests for the Gift model."""

    def test_confirmed_defaults_false(self):
        gift = _gift()

        assert gift.confirmed is False

    def test_message_is_optional(self):
        gift = _gift()

        assert gift.message is None

    def test_requires_invitation_id(self):
        with pytest.raises(ValidationError):
            Gift(
                id=GiftId(uuid4()),
                sender_name="Andi",
                amount=Decimal("1"),
                bank_account="BCA",
            )

    def test_rejects_negative_amount(self):
        with pytest.raises(ValidationError):
            _gift(amount=Decimal("-1"))

    def test_accepts_zero_amount(self):
        assert _gift(amount=Decimal("0")).amount == Decimal("0")

    def test_rejects_fractional_cents(self):
        with pytest.raises(ValidationError):
            _gift(amount=Decimal("10.005"))

    def test_confirm_returns_confirmed_copy(self):
        gift = _gift()

        confirmed = gift.confirm()

        assert confirmed.confirmed is True
        assert gift.confirmed is False
        assert confirmed.id == gift.id

    def test_confirm_is_idempotent(self):
        confirmed = _gift(confirmed=True)

        assert confirmed.confirm() is confirmed

    def test_guest_text_is_sanitized(self):
        gift = _gift(
            sender_name='Andi<img src=x onerror="alert(1)">',
            bank_account="<a href='https://x.example'>BCA</a> 123",
            message="<i>Semoga</i> <u>bahagia</u>",
        )

        assert gift.sender_name == "Andi"
        assert gift.bank_account == "BCA 123"
        assert gift.message == "<i>Semoga</i> bahagia"

    def test_message_length_counts_escaped_text(self):
        with pytest.raises(ValidationError, match="at most 500"):
            _gift(message="<" * 200)

    def test_sender_name_of_only_markup_is_rejected(self):
        with pytest.raises(ValidationError):
            _gift(sender_name="<script>x()</script>")
