from __future__ import annotations

import codecs
import typing as t

from werkzeug.http import HTTP_STATUS_CODES
from werkzeug.http import quote_header_value
from werkzeug.wrappers import Response

if t.TYPE_CHECKING:
    from _typeshed.wsgi import StartResponse
    from _typeshed.wsgi import WSGIApplication
    from _typeshed.wsgi import WSGIEnvironment

#: A ``user, password`` comparison function.
ValidateFunc = t.Callable[[str, str], bool]


def default_unauthorized(
    environ: WSGIEnvironment, start_response: StartResponse
) -> t.Iterable[bytes]:
    """The responder used when none is configured. The request is not
    looked at, the response is always a plain text ``401 Unauthorized``.
    """
    response = Response(f"{HTTP_STATUS_CODES[401]}\n", 401, mimetype="text/plain")
    return response(environ, start_response)


def challenge_header(realm: str) -> str:
    """Format the value of the ``WWW-Authenticate`` header for a Basic
    auth challenge. The realm is always sent as a quoted string, with
    ``"`` and ``\\`` escaped.

    >>> challenge_header("Restricted")
    'Basic realm="Restricted"'
    """
    return f"Basic realm={quote_header_value(realm, allow_token=False)}"


def _static_validator(user: str, password: str) -> ValidateFunc:
    def validate(given_user: str, given_password: str) -> bool:
        return given_user == user and given_password == password

    return validate


class AuthOptions(t.NamedTuple):
    """The configuration for :class:`~basicgate.BasicAuthMiddleware`.

    Either pass ``user`` and ``password`` to accept exactly that pair,
    or pass ``validate``, a function called with the user and password
    sent by the client that returns whether they are accepted. If both
    are given, ``validate`` is used and the static pair is ignored.

    ``unauthorized`` is a WSGI application called for every refused
    request, after the ``WWW-Authenticate`` header was added. It
    defaults to :func:`default_unauthorized`.

    HTTP Basic auth sends the credentials in plain text. Serve the
    protected application over HTTPS.

    :param realm: Shown to the user by the browser's login prompt.
    :param user: The accepted user name.
    :param password: The accepted password.
    :param validate: A custom comparison function.
    :param unauthorized: A WSGI application producing the 401 response.
    :param charset: The charset the decoded credentials are read in.
    """

    realm: str = "Restricted"
    user: str | None = None
    password: str | None = None
    validate: ValidateFunc | None = None
    unauthorized: WSGIApplication | None = None
    charset: str = "utf-8"

    def resolve(self) -> AuthOptions:
        """Return a copy with the defaults for ``validate`` and
        ``unauthorized`` filled in. Options that are already resolved
        are checked and returned as they are.

        :raise ValueError: Neither ``validate`` nor both ``user`` and
            ``password`` are set.
        :raise TypeError: ``validate`` or ``unauthorized`` is not
            callable.
        :raise LookupError: ``charset`` is not a known encoding.
        """
        codecs.lookup(self.charset)
        validate = self.validate

        if validate is None:
            if self.user is None or self.password is None:
                raise ValueError(
                    "Either 'validate' or both 'user' and 'password' must be"
                    " given."
                )

            validate = _static_validator(self.user, self.password)
        elif not callable(validate):
            raise TypeError(f"'validate' must be callable, got {validate!r}.")

        unauthorized = self.unauthorized

        if unauthorized is None:
            unauthorized = default_unauthorized
        elif not callable(unauthorized):
            raise TypeError(
                f"'unauthorized' must be a WSGI application, got {unauthorized!r}."
            )

        if validate is self.validate and unauthorized is self.unauthorized:
            return self

        return self._replace(validate=validate, unauthorized=unauthorized)
