"""Mailer adapter registry — pluggable order email delivery.

Uses the fake adapter by default. Set ``EMAIL_ADAPTER=smtp`` (plus the
``SMTP_*`` variables read by ``SmtpEmailAdapter``) to deliver real mail.
"""

import os

_mailer_instance = None


def get_mailer():
    """Return the configured mailer adapter (singleton)."""
    global _mailer_instance
    if _mailer_instance is None:
        adapter = os.environ.get("EMAIL_ADAPTER", "fake")
        if adapter == "fake":
            from storefront.notification.mailer.fake import FakeEmailAdapter

            _mailer_instance = FakeEmailAdapter()
        elif adapter == "smtp":
            from storefront.notification.mailer.smtp import SmtpEmailAdapter

            _mailer_instance = SmtpEmailAdapter.from_env()
        else:
            raise ValueError(f"Unknown email adapter: {adapter}")
    return _mailer_instance


def set_mailer(mailer):
    """Install a specific adapter instance, replacing the configured one."""
    global _mailer_instance
    _mailer_instance = mailer


def reset_mailer():
    """Reset the mailer singleton (useful for testing)."""
    global _mailer_instance
    _mailer_instance = None
