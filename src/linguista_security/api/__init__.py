from .problems import problem_response, register_error_handlers
from .router import add_password_security, get_http_client, router

__all__ = [
    "router",
    "add_password_security",
    "get_http_client",
    "problem_response",
    "register_error_handlers",
]
