# request-scoped identity resolver
# wraps the verified token claims; mood, pomodoro, and task services read the owner id from here

from typing import Any, Optional

from planner_api.errors import AuthenticationMissing


class AuthContext:
    """read-only view of the verified token claims for the current request"""

    def __init__(self, claims: Optional[dict] = None):
        self._claims = claims or {}

    def current_user_id(self) -> str:
        """the subject claim, used as owner id for every record"""
        user_id = self._claims.get("sub")
        if not user_id:
            raise AuthenticationMissing("No authenticated user bound to this request")
        return user_id

    def claim(self, name: str) -> Optional[Any]:
        return self._claims.get(name)

    def user_email(self) -> Optional[str]:
        return self.claim("email")
