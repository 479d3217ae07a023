from fastapi import Request

from store_admin.config import get_settings
from store_admin.database import get_db
from store_admin.errors import AuthenticationError

__all__ = ["get_db", "get_current_user_id"]


def get_current_user_id(request: Request) -> str:
    """Caller identity set by the upstream auth proxy; missing means 403."""
    user_id = request.headers.get(get_settings().auth_header, "").strip()
    if not user_id:
        raise AuthenticationError()
    return user_id
