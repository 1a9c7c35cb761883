"""Institute registry REST API.

This package contains the HTTP layer, the request validation and projection
helpers, the entity repositories and the runtime configuration of the
service.
"""

__version__ = "0.1.0"
