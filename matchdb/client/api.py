"""
API client die het bearer token meestuurt en fouten uniform maakt.

Geen retry, timeout of backoff: een mislukte call wordt gewoon een ApiError.
"""
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests

from ..config import Config
from .storage import MemoryTokenStore, TokenStore

FALLBACK_ERROR_MESSAGE = "Request failed"


class ApiError(Exception):
    """Uniforme fout voor elke mislukte API call."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    @property
    def is_unauthorized(self) -> bool:
        return self.status == 401


def error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return FALLBACK_ERROR_MESSAGE
    if not isinstance(body, dict) or body.get("message") in (None, ""):
        return FALLBACK_ERROR_MESSAGE
    message = body["message"]
    # validatiefouten komen soms als lijst
    if isinstance(message, list):
        return ", ".join(str(m) for m in message)
    return str(message)


class ApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        token_store: Optional[TokenStore] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or Config.API_URL).rstrip("/")
        self.token_store = token_store if token_store is not None else MemoryTokenStore()
        self.session = session or requests.Session()

        self.auth = AuthEndpoints(self)
        self.profiles = ProfileEndpoints(self)
        self.admin = AdminEndpoints(self)
        self.consultants = ConsultantEndpoints(self)
        self.companies = CompanyEndpoints(self)
        self.jobs = JobEndpoints(self)
        self.applications = ApplicationEndpoints(self)
        self.menu = MenuEndpoints(self)
        self.cv = CvEndpoints(self)

    def build_headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if extra:
            headers.update(extra)
        # token wordt op het moment van de call gelezen
        token = self.token_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def fetch(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Voer een request uit tegen de API.
        - non-2xx: ApiError met de 'message' uit de body (of een vaste fallback)
        - 2xx: de geparste JSON body (None bij een lege body)
        """
        try:
            response = self.session.request(
                method,
                f"{self.base_url}{endpoint}",
                json=body,
                headers=self.build_headers(headers),
            )
        except requests.RequestException as e:
            raise ApiError(str(e) or FALLBACK_ERROR_MESSAGE) from e

        if not response.ok:
            raise ApiError(error_message(response), response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError("Invalid JSON response", response.status_code) from e

    def close(self) -> None:
        self.session.close()


class _Endpoints:
    def __init__(self, client: ApiClient):
        self.client = client

    def fetch(self, *args, **kwargs):
        return self.client.fetch(*args, **kwargs)


class AuthEndpoints(_Endpoints):
    def register(self, data):
        return self.fetch("/auth/register", "POST", data)

    def login(self, data):
        response = self.fetch("/auth/login", "POST", data)
        # JWT bewaren voor volgende calls
        if isinstance(response, dict) and response.get("access_token"):
            self.client.token_store.set(response["access_token"])
        return response

    def logout(self):
        self.client.token_store.clear()

    def verify_email(self, email, otp):
        return self.fetch("/auth/verify-email", "POST", {"email": email, "otp": otp})

    def resend_verification(self, email):
        return self.fetch("/auth/resend-verification", "POST", {"email": email})

    def get_current_user(self):
        return self.fetch("/users/me")


class ProfileEndpoints(_Endpoints):
    def get_my_profile(self):
        return self.fetch("/profiles/me")

    def get_by_id(self, profile_id):
        return self.fetch(f"/profiles/{profile_id}")

    def create_profile(self, data):
        return self.fetch("/profiles", "POST", data)

    def update_profile(self, profile_id, data):
        return self.fetch(f"/profiles/{profile_id}", "PUT", data)


class AdminEndpoints(_Endpoints):
    def get_pending_users(self, role=None):
        query = f"?{urlencode({'role': role})}" if role else ""
        return self.fetch(f"/admin/users/pending{query}")

    def approve_user(self, user_id):
        return self.fetch(f"/admin/users/{user_id}/approve", "POST")

    def reject_user(self, user_id, reason=None):
        return self.fetch(f"/admin/users/{user_id}/reject", "POST", {"reason": reason})

    def get_stats(self):
        return self.fetch("/admin/stats")

    def send_broadcast(self, subject, message, recipients="all", cta_text=None, cta_url=None):
        """recipients: 'all', 'consultants', 'companies' of een lijst user ids."""
        payload = {"subject": subject, "message": message, "recipients": recipients}
        if cta_text:
            payload["ctaText"] = cta_text
        if cta_url:
            payload["ctaUrl"] = cta_url
        return self.fetch("/admin/broadcast", "POST", payload)


class ConsultantEndpoints(_Endpoints):
    def create(self, data):
        return self.fetch("/consultants", "POST", data)

    def get_all(self):
        return self.fetch("/consultants")

    def get_by_id(self, consultant_id):
        return self.fetch(f"/consultants/{consultant_id}")


class CompanyEndpoints(_Endpoints):
    def get_all(self):
        return self.fetch("/companies")

    def create(self, data):
        return self.fetch("/companies", "POST", data)


class JobEndpoints(_Endpoints):
    def create(self, data):
        return self.fetch("/jobs", "POST", data)

    def get_all(self, params=None):
        query = f"?{urlencode(params)}" if params else ""
        return self.fetch(f"/jobs{query}")

    def get_by_id(self, job_id):
        return self.fetch(f"/jobs/{job_id}")

    def update(self, job_id, data):
        return self.fetch(f"/jobs/{job_id}", "PUT", data)

    def delete(self, job_id):
        return self.fetch(f"/jobs/{job_id}", "DELETE")


class ApplicationEndpoints(_Endpoints):
    def create(self, data):
        return self.fetch("/applications", "POST", data)

    def get_my(self):
        return self.fetch("/applications/me")

    def get_by_id(self, application_id):
        return self.fetch(f"/applications/{application_id}")


class MenuEndpoints(_Endpoints):
    def get_for_user(self):
        return self.fetch("/menu")

    def get_public(self):
        return self.fetch("/menu/public")

    def get_all(self):
        return self.fetch("/menu/all")


class CvEndpoints(_Endpoints):
    def request_upload(self):
        """Vraag een vooraf geautoriseerde upload-URL aan."""
        return self.fetch("/cv/upload", "POST")
