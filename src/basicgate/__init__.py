"""
basicgate
~~~~~~~~~

HTTP Basic authentication for WSGI applications.

:license: BSD-3-Clause
"""
from .middleware import basic_auth
from .middleware import BasicAuthMiddleware
from .middleware import parse_basic_credentials
from .middleware import simple_basic_auth
from .options import AuthOptions
from .options import challenge_header
from .options import default_unauthorized

__version__ = "1.0.0"
