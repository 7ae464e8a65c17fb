"""
Authenticatie-status: loading, authenticated(user) of unauthenticated.

De rest van de client beslist enkel op basis van deze status.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

import requests

from ..models import UserRole
from .api import ApiError

logger = logging.getLogger(__name__)

CURRENT_USER_KEY = ("/api/users/me",)


class AuthStatus(enum.Enum):
    loading = "loading"
    authenticated = "authenticated"
    unauthenticated = "unauthenticated"


@dataclass(frozen=True)
class AuthState:
    status: AuthStatus
    user: Optional[dict] = None

    @classmethod
    def loading(cls):
        return cls(AuthStatus.loading)

    @classmethod
    def authenticated(cls, user):
        return cls(AuthStatus.authenticated, user)

    @classmethod
    def unauthenticated(cls):
        return cls(AuthStatus.unauthenticated)

    @property
    def is_loading(self):
        return self.status is AuthStatus.loading

    @property
    def is_authenticated(self):
        return self.status is AuthStatus.authenticated

    @property
    def role(self) -> Optional[UserRole]:
        """Rol van de user, of None als die ontbreekt of onbekend is."""
        if not isinstance(self.user, dict):
            return None
        try:
            return UserRole(self.user.get("role"))
        except ValueError:
            return None


class AuthResolver:
    def __init__(self, token_store, api_client, cache):
        self.token_store = token_store
        self.api_client = api_client
        self.cache = cache
        self.state = AuthState.loading()

    def resolve(self):
        """
        Bepaal de huidige identiteit:
        - geen token -> unauthenticated, zonder netwerk-call
        - wel token -> één /users/me fetch via de cache (geen retry)
        Bij een fout blijft het token staan.
        """
        if not self.token_store.has_token():
            self.state = AuthState.unauthenticated()
            return self.state

        try:
            user = self.cache.fetch(CURRENT_USER_KEY, self.api_client.auth.get_current_user)
        except (ApiError, requests.RequestException) as e:
            logger.info("Could not resolve current user: %s", e)
            self.state = AuthState.unauthenticated()
            return self.state

        if not user or not isinstance(user, dict):
            self.state = AuthState.unauthenticated()
        else:
            self.state = AuthState.authenticated(user)
        return self.state

    def invalidate(self):
        self.cache.invalidate(CURRENT_USER_KEY)
        self.state = AuthState.loading()
