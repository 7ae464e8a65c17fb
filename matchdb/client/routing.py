"""
Router: (pad, identiteit) -> precies één view.

Pure functie zonder eigen state. Matching is exacte padgelijkheid, de
eerste match in ROUTES wint.
"""
import enum
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union
from urllib.parse import urlsplit

from ..models import UserRole
from .auth import AuthState


class View(enum.Enum):
    LOADING = "loading"
    LANDING = "landing"
    HOME = "home"
    LOGIN = "login"
    REGISTER = "register"
    SIGNUP = "signup"
    JOIN_AS_PEER = "join-as-peer"
    VERIFY_EMAIL = "verify-email"
    VERIFY_OTP = "verify-otp"
    PROFILE = "profile"
    PROFILE_EDIT = "profile-edit"
    JOBS = "jobs"
    PROJECTS = "projects"
    SOLUTIONS = "solutions"
    COMPANIES = "companies"
    DASHBOARD = "dashboard"
    COMPANY_DASHBOARD = "company-dashboard"
    POST_JOB = "post-job"
    ADMIN_APPROVALS = "admin-approvals"
    ADMIN_BROADCAST = "admin-broadcast"
    ADMIN_BADGES = "admin-badges"
    ADMIN_USERS = "admin-users"
    TEST_LOGIN = "test-login"
    NOT_FOUND = "not-found"


@dataclass(frozen=True)
class Capabilities:
    dashboard: View
    has_profile: bool = False
    can_post_jobs: bool = False
    can_administer: bool = False


# onbekende of ontbrekende rol: zelfde rechten als een consultant
DEFAULT_CAPABILITIES = Capabilities(dashboard=View.DASHBOARD, has_profile=True)

ROLE_CAPABILITIES = {
    UserRole.consultant: DEFAULT_CAPABILITIES,
    UserRole.company: Capabilities(
        dashboard=View.COMPANY_DASHBOARD,
        has_profile=True,
        can_post_jobs=True,
    ),
    UserRole.admin: Capabilities(dashboard=View.DASHBOARD, can_administer=True),
    UserRole.staff: Capabilities(dashboard=View.DASHBOARD, can_administer=True),
}


def capabilities_for(role: Optional[UserRole]) -> Capabilities:
    """Enige plek waar een rol naar views en rechten vertaald wordt."""
    return ROLE_CAPABILITIES.get(role, DEFAULT_CAPABILITIES)


def home_view(state: AuthState) -> View:
    return View.HOME if state.is_authenticated else View.LANDING


def dashboard_view(state: AuthState) -> View:
    return capabilities_for(state.role).dashboard


RouteTarget = Union[View, Callable[[AuthState], View]]

ROUTES: Tuple[Tuple[str, RouteTarget], ...] = (
    ("/", home_view),
    ("/login", View.LOGIN),
    ("/register", View.REGISTER),
    ("/signup", View.SIGNUP),
    ("/join", View.JOIN_AS_PEER),
    ("/verify-email", View.VERIFY_EMAIL),
    ("/verify-otp", View.VERIFY_OTP),
    ("/profile", View.PROFILE),
    ("/profile/edit", View.PROFILE_EDIT),
    ("/jobs", View.JOBS),
    ("/projects", View.PROJECTS),
    ("/solutions", View.SOLUTIONS),
    ("/companies", View.COMPANIES),
    ("/dashboard", dashboard_view),
    ("/company-dashboard", View.COMPANY_DASHBOARD),
    ("/post-job", View.POST_JOB),
    ("/admin/approvals", View.ADMIN_APPROVALS),
    ("/admin/broadcast", View.ADMIN_BROADCAST),
    ("/admin/badges", View.ADMIN_BADGES),
    ("/admin/users", View.ADMIN_USERS),
    ("/test-login", View.TEST_LOGIN),
)


def normalize_path(path: str) -> str:
    """Query string en fragment tellen niet mee voor de match."""
    return urlsplit(path or "/").path or "/"


def resolve_view(path: str, state: AuthState) -> View:
    if state.is_loading:
        return View.LOADING

    path = normalize_path(path)
    for pattern, target in ROUTES:
        if pattern == path:
            return target(state) if callable(target) else target
    return View.NOT_FOUND
