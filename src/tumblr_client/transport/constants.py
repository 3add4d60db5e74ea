"""Constants for the API transport layer.

Centralizes URLs, status ranges and verbs shared across transport modules.
"""

# Every endpoint is resolved relative to this base
API_BASE = "https://api.tumblr.com/v2/"

# Status codes in [min, max) are treated as success, redirects included
HTTP_STATUS_SUCCESS_MIN = 200
HTTP_STATUS_SUCCESS_MAX = 400

# Verbs the facade is allowed to issue
HTTP_METHOD_GET = "GET"
HTTP_METHOD_POST = "POST"
HTTP_METHOD_PUT = "PUT"
HTTP_METHOD_DELETE = "DELETE"
ALLOWED_METHODS = frozenset(
    {HTTP_METHOD_GET, HTTP_METHOD_POST, HTTP_METHOD_PUT, HTTP_METHOD_DELETE}
)

DEFAULT_USER_AGENT = "tumblr-client/1.0"
DEFAULT_TIMEOUT_SECONDS = 30.0

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Log component names
COMPONENT_CLIENT = "client"
COMPONENT_SIGNING = "signing"
COMPONENT_CLI = "cli"
