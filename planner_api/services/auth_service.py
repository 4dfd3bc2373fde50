# auth service — bearer token verification against the identity provider
# fetches the json web key set once at startup and validates jwt signatures with it

import logging
from typing import Optional

import httpx
from jose import JWTError, jwt

from planner_api.config import settings

logger = logging.getLogger(__name__)


class JWKSClient:
    """holds the identity provider's public key set used to verify access tokens"""

    def __init__(
        self,
        jwks_uri: str,
        algorithms: Optional[list[str]] = None,
        issuer: str = "",
        audience: str = "",
    ):
        self.jwks_uri = jwks_uri
        self.algorithms = algorithms or ["RS256"]
        self.issuer = issuer
        self.audience = audience
        self.key_set: Optional[dict] = None

    @property
    def is_loaded(self) -> bool:
        return bool(self.key_set and self.key_set.get("keys"))

    async def load(self, client: Optional[httpx.AsyncClient] = None) -> None:
        """fetch the key set. a client may be passed in (tests use a mock transport)"""
        if not self.jwks_uri:
            logger.warning("CLERK_JWKS_URI is not set, every bearer token will be rejected")
            return

        logger.info(f"Fetching JWKS from {self.jwks_uri}")
        if client is None:
            async with httpx.AsyncClient(timeout=settings.JWKS_FETCH_TIMEOUT_SECONDS) as owned:
                resp = await owned.get(self.jwks_uri)
        else:
            resp = await client.get(self.jwks_uri)
        resp.raise_for_status()

        key_set = resp.json()
        if not isinstance(key_set, dict) or not key_set.get("keys"):
            raise ValueError(f"JWKS endpoint returned no keys: {self.jwks_uri}")

        self.key_set = key_set
        logger.info(f"Loaded {len(key_set['keys'])} signing key(s)")

    def decode(self, token: str) -> Optional[dict]:
        """verify signature and standard claims, returns payload or none"""
        if not token or not self.is_loaded:
            return None

        options = {"verify_aud": bool(self.audience)}
        try:
            return jwt.decode(
                token,
                self.key_set,
                algorithms=self.algorithms,
                audience=self.audience or None,
                issuer=self.issuer or None,
                options=options,
            )
        except JWTError as e:
            logger.warning(f"Token decode failed: {e}")
            return None


# singleton instance
jwks_client = JWKSClient(
    settings.CLERK_JWKS_URI,
    algorithms=settings.JWT_ALGORITHMS,
    issuer=settings.JWT_ISSUER,
    audience=settings.JWT_AUDIENCE,
)


def decode_token(token: str) -> Optional[dict]:
    """decode and validate a bearer token with the shared key set"""
    return jwks_client.decode(token)
