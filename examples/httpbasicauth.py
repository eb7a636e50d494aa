"""
    HTTP Basic Auth Example
    ~~~~~~~~~~~~~~~~~~~~~~~

    Shows how to put an application behind HTTP basic auth with
    :class:`basicgate.BasicAuthMiddleware`.

    :license: BSD-3-Clause
"""
from werkzeug.serving import run_simple
from werkzeug.wrappers import Request
from werkzeug.wrappers import Response

from basicgate import AuthOptions
from basicgate import basic_auth
from basicgate import simple_basic_auth

USERS = {"user1": "password", "user2": "password"}


def check_auth(username, password):
    return username in USERS and USERS[username] == password


def unauthorized(environ, start_response):
    response = Response(
        "Could not verify your access level for that URL.\n"
        "You have to login with proper credentials",
        401,
    )
    return response(environ, start_response)


@Request.application
def application(request):
    return Response(f"Logged in as {request.authorization.username}")


def make_app(simple=False):
    if simple:
        protect = simple_basic_auth("user1", "password")
    else:
        protect = basic_auth(
            AuthOptions(
                realm="login required", validate=check_auth, unauthorized=unauthorized
            )
        )

    return protect(application)


if __name__ == "__main__":
    run_simple("localhost", 5000, make_app(), use_reloader=True)
