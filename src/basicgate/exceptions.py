"""
Authentication Failures
=======================

Every reason a request can be refused by
:class:`~basicgate.middleware.BasicAuthMiddleware` has its own exception
class. They are raised while the ``Authorization`` header is inspected and
caught by the middleware itself, which answers all of them with the same
``401 Unauthorized`` challenge. They are public so that
:func:`~basicgate.middleware.parse_basic_credentials` can be used on its
own::

    from basicgate import parse_basic_credentials
    from basicgate.exceptions import AuthenticationError

    try:
        user, password = parse_basic_credentials(value)
    except AuthenticationError as e:
        print(f"rejected: {e.description}")
"""
from __future__ import annotations


class AuthenticationError(Exception):
    """Baseclass for all authentication failures."""

    description: str = "Authentication failed."

    def __init__(self, description: str | None = None) -> None:
        if description is not None:
            self.description = description

        super().__init__(self.description)

    @property
    def name(self) -> str:
        """The name of the failure, used in log messages."""
        return type(self).__name__

    def __repr__(self) -> str:
        return f"<{self.name} {self.description!r}>"


class MissingHeader(AuthenticationError):
    """The request has no ``Authorization`` header."""

    description = "No 'Authorization' header was sent."


class UnsupportedScheme(AuthenticationError):
    """The ``Authorization`` header does not start with ``Basic ``. The
    comparison is case-sensitive and the single space is required.
    """

    description = "The 'Authorization' header does not use the Basic scheme."


class MalformedEncoding(AuthenticationError):
    """The credentials are not valid base64, or the decoded bytes are not
    valid in the configured charset.
    """

    description = "The credentials could not be decoded."


class MalformedCredentials(AuthenticationError):
    """The decoded credentials have no ``:`` between user and password."""

    description = "The credentials are not in 'user:password' form."


class CredentialMismatch(AuthenticationError):
    """The validation function rejected the user and password."""

    description = "The user and password were not accepted."
