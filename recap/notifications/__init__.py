"""
Notification package initialization.
"""

from .validation import EMAIL_PATTERN, is_email, find_invalid_recipients
from .dispatcher import NotificationDispatcher, MailCredentials, APP_PASSWORD_LENGTH

__all__ = [
    'EMAIL_PATTERN',
    'is_email',
    'find_invalid_recipients',
    'NotificationDispatcher',
    'MailCredentials',
    'APP_PASSWORD_LENGTH',
]
