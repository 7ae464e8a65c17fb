from .api import ApiClient, ApiError
from .app import ClientApp, Navigation
from .auth import AuthResolver, AuthState, AuthStatus
from .cache import QueryCache
from .routing import Capabilities, View, capabilities_for, resolve_view
from .storage import FileTokenStore, MemoryTokenStore, TokenStore
from .upload import UploadError, upload_cv

__all__ = [
    "ApiClient",
    "ApiError",
    "AuthResolver",
    "AuthState",
    "AuthStatus",
    "Capabilities",
    "ClientApp",
    "FileTokenStore",
    "MemoryTokenStore",
    "Navigation",
    "QueryCache",
    "TokenStore",
    "UploadError",
    "View",
    "capabilities_for",
    "resolve_view",
    "upload_cv",
]
