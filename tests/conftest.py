import pytest

from werkzeug.wrappers import Response


class CountingApp:
    """A downstream application that records how often it was called."""

    def __init__(self):
        self.calls = 0

    def __call__(self, environ, start_response):
        self.calls += 1
        return Response("secret data")(environ, start_response)


@pytest.fixture
def downstream():
    return CountingApp()
