"""HTTP middleware: request/correlation ID propagation.

Applied in main app; order matters (first added = innermost).
"""

from userapi.middleware.request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
