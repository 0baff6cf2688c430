"""
Authentication Service

Turns connection credentials into a player name. With a JWT secret configured
only signed tokens are accepted; without one the client-supplied username is
trusted as-is.
"""

import datetime
from typing import Any, Dict, Optional

import jwt

MAX_USERNAME_LENGTH = 32


class AuthService:
    """
    Identity service for interactive sessions and HTTP requests.
    """

    def __init__(self, jwt_secret: Optional[str] = None, token_expiration_days: int = 7):
        """
        Args:
            jwt_secret: Secret key for JWT tokens; None disables token checks
            token_expiration_days: Lifetime of tokens issued by issue_token
        """
        self.jwt_secret = jwt_secret
        self.token_expiration_days = token_expiration_days

    @property
    def requires_token(self) -> bool:
        return bool(self.jwt_secret)

    def issue_token(self, username: str) -> str:
        """
        Create a signed token for a username.

        Raises:
            RuntimeError: If no JWT secret is configured
        """
        if not self.jwt_secret:
            raise RuntimeError("JWT secret is not configured")

        now = datetime.datetime.now(datetime.timezone.utc)
        token_payload = {
            "username": username.strip().lower(),
            "iat": now,
            "exp": now + datetime.timedelta(days=self.token_expiration_days)
        }
        return jwt.encode(token_payload, self.jwt_secret, algorithm="HS256")

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Returns:
            Dictionary with success status and user data or error
        """
        if not self.jwt_secret:
            return {"success": False, "error": "Token authentication is not configured"}

        try:
            if not token:
                return {"success": False, "error": "Token is required"}

            payload = jwt.decode(token, self.jwt_secret, algorithms=["HS256"])
            username = payload.get("username")

            if not username:
                return {"success": False, "error": "Invalid token payload"}

            return {"success": True, "user": {"username": username}}

        except jwt.ExpiredSignatureError:
            return {"success": False, "error": "Token has expired"}
        except jwt.InvalidTokenError:
            return {"success": False, "error": "Invalid token"}

    def authenticate(self, credentials: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Resolve a player name from connection credentials.

        Accepts ``{"token": ...}`` when a secret is configured, otherwise
        ``{"username": ...}``.
        """
        credentials = credentials or {}

        if self.requires_token:
            return self.verify_token(credentials.get('token'))

        username = (credentials.get('username') or '').strip().lower()
        if not username:
            return {"success": False, "error": "Username is required"}
        if len(username) > MAX_USERNAME_LENGTH or '|' in username:
            return {"success": False, "error": "Invalid username"}

        return {"success": True, "user": {"username": username}}


# Global service instance
_auth_service = None


def get_auth_service() -> Optional[AuthService]:
    """Get the global auth service instance."""
    return _auth_service


def initialize_auth_service(jwt_secret: Optional[str] = None, token_expiration_days: int = 7) -> AuthService:
    """Initialize the global auth service instance."""
    global _auth_service
    _auth_service = AuthService(jwt_secret, token_expiration_days)
    return _auth_service
