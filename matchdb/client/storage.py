"""
Token-opslag: één bearer token onder een vaste sleutel.

Of er een token is, is het enige signaal voor "er is een sessie".
"""
import json
import os
from typing import Optional

TOKEN_KEY = "access_token"
DEFAULT_SESSION_FILE = os.path.join(os.path.expanduser("~"), ".matchdb", "session.json")
TOKEN_FILE_MODE = 0o600


class TokenStore:
    def get(self) -> Optional[str]:
        raise NotImplementedError

    def set(self, token: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def has_token(self) -> bool:
        return bool(self.get())


class MemoryTokenStore(TokenStore):
    def __init__(self, token: Optional[str] = None):
        self._values = {}
        if token:
            self._values[TOKEN_KEY] = token

    def get(self) -> Optional[str]:
        return self._values.get(TOKEN_KEY)

    def set(self, token: str) -> None:
        self._values[TOKEN_KEY] = token

    def clear(self) -> None:
        self._values.pop(TOKEN_KEY, None)


class FileTokenStore(TokenStore):
    """Bewaart het token in een JSON-bestand zodat het een herstart overleeft."""

    def __init__(self, path: str = DEFAULT_SESSION_FILE):
        self.path = path

    def _read(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, encoding="utf-8") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError:
                return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        # token enkel leesbaar voor de eigenaar
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, TOKEN_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh)
        os.chmod(self.path, TOKEN_FILE_MODE)

    def get(self) -> Optional[str]:
        return self._read().get(TOKEN_KEY)

    def set(self, token: str) -> None:
        data = self._read()
        data[TOKEN_KEY] = token
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if data.pop(TOKEN_KEY, None) is not None:
            self._write(data)
