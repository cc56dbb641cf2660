"""
Tests for the NotificationDispatcher.

smtplib.SMTP is patched so no connection is ever opened. Covers recipient
and subject validation, credential checks, message composition and
transport failure translation.
"""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from recap.errors import BadRequest, ConfigError, TransportError
from recap.notifications import (
    MailCredentials,
    NotificationDispatcher,
    find_invalid_recipients,
    is_email,
)

VALID_PASSWORD = "abcdabcdabcdabcd"


@pytest.fixture
def credentials():
    return MailCredentials(
        user="sender@gmail.com",
        app_password=VALID_PASSWORD,
        from_address="Recap Bot <sender@gmail.com>",
    )


@pytest.fixture
def dispatcher(credentials):
    return NotificationDispatcher(credentials)


@pytest.fixture
def mock_smtp():
    """Patch SMTP and yield the session object used inside the with block."""
    with patch("recap.notifications.dispatcher.smtplib.SMTP") as smtp_cls:
        session = smtp_cls.return_value.__enter__.return_value
        yield smtp_cls, session


class TestRecipientValidation:
    """Email syntax checks."""

    @pytest.mark.parametrize("address", [
        "alice@example.com",
        "a.b+tag@sub.example.co.uk",
        "x@y.z",
    ])
    def test_valid_addresses(self, address):
        assert is_email(address)

    @pytest.mark.parametrize("address", [
        "not-an-email",
        "missing@tld",
        "@example.com",
        "alice@",
        "ali ce@example.com",
        "alice@exa mple.com",
        "a@b@c.com",
        "alice@example.com\n",
        "x,y@b.co",
        "alice@example.com,bob@example.com",
        "",
    ])
    def test_invalid_addresses(self, address):
        assert not is_email(address)

    def test_find_invalid_recipients_keeps_order(self):
        recipients = ["ok@example.com", "bad", "also bad@x.com", "fine@x.org"]
        assert find_invalid_recipients(recipients) == ["bad", "also bad@x.com"]


class TestNotificationDispatcher:
    """Sending summary emails."""

    @pytest.mark.asyncio
    async def test_sends_one_message_to_all_recipients(self, dispatcher, mock_smtp):
        smtp_cls, session = mock_smtp

        message_id = await dispatcher.send(
            ["a@example.com", "b@example.com"], "Meeting Summary", text="Hello"
        )

        smtp_cls.assert_called_once_with("smtp.gmail.com", 587)
        session.starttls.assert_called_once()
        session.login.assert_called_once_with("sender@gmail.com", VALID_PASSWORD)
        session.send_message.assert_called_once()

        message = session.send_message.call_args.args[0]
        assert message["To"] == "a@example.com, b@example.com"
        assert message["Subject"] == "Meeting Summary"
        assert message["From"] == "Recap Bot <sender@gmail.com>"
        assert message["Message-ID"] == message_id
        assert message_id.startswith("<") and message_id.endswith("@gmail.com>")

    @pytest.mark.asyncio
    async def test_fresh_session_per_send(self, dispatcher, mock_smtp):
        smtp_cls, session = mock_smtp

        await dispatcher.send(["a@example.com"], "One", text="1")
        await dispatcher.send(["a@example.com"], "Two", text="2")

        assert smtp_cls.call_count == 2
        assert session.login.call_count == 2

    @pytest.mark.asyncio
    async def test_rejects_invalid_recipient_without_network(self, dispatcher, mock_smtp):
        smtp_cls, _ = mock_smtp

        with pytest.raises(BadRequest) as exc_info:
            await dispatcher.send(["not-an-email"], "Subject", text="x")

        assert "not-an-email" in exc_info.value.message
        smtp_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_names_every_invalid_recipient(self, dispatcher, mock_smtp):
        smtp_cls, _ = mock_smtp

        with pytest.raises(BadRequest) as exc_info:
            await dispatcher.send(["bad1", "good@example.com", "bad2@nowhere"], "Subject", text="x")

        assert exc_info.value.message == "Invalid recipient(s): bad1, bad2@nowhere"
        assert exc_info.value.details == {"invalid_recipients": ["bad1", "bad2@nowhere"]}
        smtp_cls.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("recipients,subject", [
        ([], "Subject"),
        (None, "Subject"),
        (["a@example.com"], ""),
        (["a@example.com"], "   "),
        (["a@example.com"], None),
    ])
    async def test_rejects_missing_recipients_or_subject(self, dispatcher, mock_smtp, recipients, subject):
        smtp_cls, _ = mock_smtp

        with pytest.raises(BadRequest, match="Missing recipients or subject"):
            await dispatcher.send(recipients, subject, text="x")

        smtp_cls.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("subject", ["Recap\r\nBcc: x@example.com", "Line one\nLine two", "Trailing\r"])
    async def test_rejects_multiline_subject(self, dispatcher, mock_smtp, subject):
        smtp_cls, _ = mock_smtp

        with pytest.raises(BadRequest, match="Subject must be a single line"):
            await dispatcher.send(["a@example.com"], subject, text="x")

        smtp_cls.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["user", "app_password", "from_address"])
    async def test_missing_credentials(self, credentials, mock_smtp, field):
        setattr(credentials, field, None)
        dispatcher = NotificationDispatcher(credentials)

        with pytest.raises(ConfigError, match="Missing Gmail environment variables"):
            await dispatcher.send(["a@example.com"], "Subject", text="x")

        mock_smtp[0].assert_not_called()

    @pytest.mark.asyncio
    async def test_app_password_must_be_sixteen_characters(self, credentials, mock_smtp):
        credentials.app_password = "short"
        dispatcher = NotificationDispatcher(credentials)

        with pytest.raises(ConfigError, match="16 characters"):
            await dispatcher.send(["a@example.com"], "Subject", text="x")

    @pytest.mark.asyncio
    async def test_app_password_spaces_are_ignored(self, credentials, mock_smtp):
        credentials.app_password = "abcd abcd abcd abcd"
        dispatcher = NotificationDispatcher(credentials)

        await dispatcher.send(["a@example.com"], "Subject", text="x")

        mock_smtp[1].login.assert_called_once_with("sender@gmail.com", VALID_PASSWORD)

    @pytest.mark.asyncio
    async def test_authentication_failure_is_transport_error(self, dispatcher, mock_smtp):
        _, session = mock_smtp
        session.login.side_effect = smtplib.SMTPAuthenticationError(535, b"Username and Password not accepted")

        with pytest.raises(TransportError, match="Username and Password not accepted"):
            await dispatcher.send(["a@example.com"], "Subject", text="x")

    @pytest.mark.asyncio
    async def test_connection_failure_is_transport_error(self, dispatcher, mock_smtp):
        smtp_cls, _ = mock_smtp
        smtp_cls.side_effect = OSError("Connection refused")

        with pytest.raises(TransportError, match="Connection refused"):
            await dispatcher.send(["a@example.com"], "Subject", text="x")

    @pytest.mark.asyncio
    async def test_timeout_passed_to_transport(self, credentials, mock_smtp):
        dispatcher = NotificationDispatcher(credentials, host="smtp.test", port=2525, timeout=5)

        await dispatcher.send(["a@example.com"], "Subject", text="x")

        mock_smtp[0].assert_called_once_with("smtp.test", 2525, timeout=5)


class TestBuildMessage:
    """MIME composition of text and HTML bodies."""

    def test_text_and_html_are_alternatives(self, dispatcher):
        message = dispatcher.build_message(["a@example.com"], "S", text="plain", html="<p>rich</p>")

        assert message.get_content_type() == "multipart/alternative"
        parts = {part.get_content_type(): part.get_content() for part in message.iter_parts()}
        assert parts["text/plain"].strip() == "plain"
        assert parts["text/html"].strip() == "<p>rich</p>"

    def test_html_only(self, dispatcher):
        message = dispatcher.build_message(["a@example.com"], "S", html="<p>rich</p>")

        assert message.get_content_type() == "text/html"

    def test_text_only(self, dispatcher):
        message = dispatcher.build_message(["a@example.com"], "S", text="plain")

        assert message.get_content_type() == "text/plain"
        assert message.get_content().strip() == "plain"

    def test_duplicate_recipients_collapsed(self):
        assert NotificationDispatcher.validate_request(
            ["a@example.com", "b@example.com", "a@example.com"], "S"
        ) == ["a@example.com", "b@example.com"]
