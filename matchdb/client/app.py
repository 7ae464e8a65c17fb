import logging
from dataclasses import dataclass

from .api import ApiClient
from .auth import AuthResolver, AuthState
from .cache import DEFAULT_STALE_TIME, QueryCache
from .routing import Capabilities, View, capabilities_for, resolve_view
from .storage import FileTokenStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Navigation:
    path: str
    view: View
    state: AuthState
    capabilities: Capabilities


class ClientApp:
    """
    Client-applicatie: bouwt token store, API client, cache en resolver
    één keer op en geeft ze door. Sluiten ruimt cache en HTTP sessie op.
    """

    def __init__(self, api_url=None, token_store=None, stale_time=DEFAULT_STALE_TIME, session=None):
        self.token_store = token_store if token_store is not None else FileTokenStore()
        self.cache = QueryCache(stale_time=stale_time)
        self.api = ApiClient(api_url, self.token_store, session=session)
        self.auth = AuthResolver(self.token_store, self.api, self.cache)

    def navigate(self, path):
        state = self.auth.resolve()
        view = resolve_view(path, state)
        # capabilities één keer per navigatie bepalen
        navigation = Navigation(path, view, state, capabilities_for(state.role))
        logger.debug("navigate %s -> %s", path, view.value)
        return navigation

    def login(self, email, password):
        response = self.api.auth.login({"email": email, "password": password})
        self.auth.invalidate()
        return response

    def logout(self):
        self.api.auth.logout()
        self.auth.invalidate()

    def close(self):
        self.cache.clear()
        self.api.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
