"""
Basic Authentication Middleware
===============================

Protect a WSGI application with HTTP Basic authentication as described
in :rfc:`7617`. The client sends ``user:password``, base64 encoded, in
the ``Authorization`` header. If the pair is accepted the request is
passed on to the application unchanged, otherwise the client gets a
``401 Unauthorized`` response with a ``WWW-Authenticate`` challenge.

.. code-block:: python

    from basicgate import BasicAuthMiddleware

    app = BasicAuthMiddleware(app, realm="Restricted", user="dave", password="secret")

Or use the factories to build the wrapper first and apply it later,
for example in a list of middleware:

.. code-block:: python

    from basicgate import AuthOptions, basic_auth

    protect = basic_auth(AuthOptions(realm="Admin", validate=check_user))
    app = protect(app)

The credentials are sent in plain text, serve the application over
HTTPS.

.. autoclass:: BasicAuthMiddleware
.. autofunction:: basic_auth
.. autofunction:: simple_basic_auth
.. autofunction:: parse_basic_credentials
"""
from __future__ import annotations

import base64
import logging
import typing as t

from werkzeug.datastructures import Headers
from werkzeug.wrappers import Request

from .exceptions import AuthenticationError
from .exceptions import CredentialMismatch
from .exceptions import MalformedCredentials
from .exceptions import MalformedEncoding
from .exceptions import MissingHeader
from .exceptions import UnsupportedScheme
from .options import AuthOptions
from .options import challenge_header

if t.TYPE_CHECKING:
    from _typeshed.wsgi import StartResponse
    from _typeshed.wsgi import WSGIApplication
    from _typeshed.wsgi import WSGIEnvironment

_logger = logging.getLogger("basicgate")
_basic_scheme = "Basic "


def parse_basic_credentials(
    value: str | None, charset: str = "utf-8"
) -> tuple[str, str]:
    """Parse the value of an ``Authorization`` header into a
    ``(user, password)`` tuple.

    The value must start with exactly ``"Basic "``. The rest is decoded
    with the standard base64 alphabet, padding is required. The text is
    split on the first ``:`` only, so the password may contain colons.

    >>> parse_basic_credentials("Basic dXNlcjpwYTpzcw==")
    ('user', 'pa:ss')

    :param value: The header value, or ``None`` if it was not sent.
    :param charset: The charset the decoded bytes are read in.
    :raise MissingHeader: ``value`` is ``None``.
    :raise UnsupportedScheme: The value does not start with ``"Basic "``.
    :raise MalformedEncoding: The value is not valid base64, or not valid
        in ``charset`` after decoding.
    :raise MalformedCredentials: There is no ``:`` in the decoded value.
    """
    if value is None:
        raise MissingHeader()

    if not value.startswith(_basic_scheme):
        raise UnsupportedScheme()

    try:
        data = base64.b64decode(value[len(_basic_scheme) :], validate=True)
    except ValueError:
        raise MalformedEncoding() from None

    try:
        text = data.decode(charset)
    except UnicodeDecodeError:
        raise MalformedEncoding(
            f"The credentials are not valid {charset!r} text."
        ) from None

    user, sep, password = text.partition(":")

    if not sep:
        raise MalformedCredentials()

    return user, password


class BasicAuthMiddleware:
    """Only pass requests with accepted Basic auth credentials on to the
    wrapped application.

    The options are resolved here. Options coming from :func:`basic_auth`
    are already resolved and are shared as they are. Refused requests
    get the ``WWW-Authenticate`` challenge and the response of the
    configured ``unauthorized`` application. The application is never
    called for them.

    :param app: The WSGI application to protect.
    :param options: An :class:`~basicgate.AuthOptions` instance.
    :param kwargs: If ``options`` is not given, the arguments to create
        one.
    """

    def __init__(
        self,
        app: WSGIApplication,
        options: AuthOptions | None = None,
        **kwargs: t.Any,
    ) -> None:
        if options is None:
            options = AuthOptions(**kwargs)
        elif kwargs:
            raise TypeError("Pass either 'options' or keyword arguments, not both.")

        self.app = app
        self.options = options.resolve()

    def _check(self, request: Request) -> None:
        user, password = parse_basic_credentials(
            request.headers.get("Authorization"), self.options.charset
        )

        if not self.options.validate(user, password):  # type: ignore[misc]
            raise CredentialMismatch()

    def authenticate(self, request: Request) -> bool:
        """Check the credentials sent with the request. Returns ``False``
        for any request that would be refused.
        """
        try:
            self._check(request)
        except AuthenticationError:
            return False

        return True

    def request_auth(
        self, environ: WSGIEnvironment, start_response: StartResponse
    ) -> t.Iterable[bytes]:
        """Call the ``unauthorized`` application with the challenge header
        added to its response. If it sets ``WWW-Authenticate`` itself, that
        value is kept.
        """
        challenge = challenge_header(self.options.realm)

        def challenge_start_response(status, headers, exc_info=None):  # type: ignore
            headers = Headers(headers)
            headers.setdefault("WWW-Authenticate", challenge)
            return start_response(status, headers.to_wsgi_list(), exc_info)

        return self.options.unauthorized(  # type: ignore[misc]
            environ, challenge_start_response
        )

    def __call__(
        self, environ: WSGIEnvironment, start_response: StartResponse
    ) -> t.Iterable[bytes]:
        request = Request(environ, populate_request=False, shallow=True)

        try:
            self._check(request)
        except AuthenticationError as e:
            _logger.debug(
                "Refused %s %r: %s", request.method, request.path, e.description
            )
            return self.request_auth(environ, start_response)

        return self.app(environ, start_response)


def basic_auth(
    options: AuthOptions,
) -> t.Callable[[WSGIApplication], BasicAuthMiddleware]:
    """Create a function that wraps an application in a
    :class:`BasicAuthMiddleware` configured with ``options``. The options
    are resolved right away, so configuration errors are raised here.

    .. code-block:: python

        protect = basic_auth(AuthOptions(realm="Restricted", user="dave", password="secret"))
        app = protect(app)
    """
    options = options.resolve()

    def wrap(app: WSGIApplication) -> BasicAuthMiddleware:
        return BasicAuthMiddleware(app, options)

    return wrap


def simple_basic_auth(
    user: str, password: str
) -> t.Callable[[WSGIApplication], BasicAuthMiddleware]:
    """Like :func:`basic_auth`, accepting exactly one ``user`` and
    ``password`` in the ``"Restricted"`` realm, with the default 401
    response.
    """
    return basic_auth(AuthOptions(realm="Restricted", user=user, password=password))
