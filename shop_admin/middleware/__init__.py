"""HTTP middleware: timeout and request ID.

Applied in main app; order matters (first added = outermost).
"""

from shop_admin.middleware.request_id import RequestIDMiddleware
from shop_admin.middleware.timeout import TimeoutMiddleware

__all__ = ["RequestIDMiddleware", "TimeoutMiddleware"]
