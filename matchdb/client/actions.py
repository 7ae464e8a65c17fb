from dataclasses import dataclass
from typing import Optional

from .api import ApiError

LOGIN_REDIRECT = "/api/login"
LOGIN_REDIRECT_DELAY = 0.5  # seconden
APPLY_FAILED_MESSAGE = "Failed to submit application. Please try again."


@dataclass(frozen=True)
class ApplyResult:
    ok: bool
    application: Optional[dict] = None
    message: Optional[str] = None
    redirect_to: Optional[str] = None
    redirect_delay: float = 0.0


def apply_to_job(api_client, job_id, profile_id, cover_letter=None):
    """
    Solliciteer op een job.
    Enige plek waar 401 apart behandeld wordt: dan na een korte pauze
    terug naar login.
    """
    payload = {"jobId": job_id, "profileId": profile_id}
    if cover_letter:
        payload["coverLetter"] = cover_letter

    try:
        application = api_client.applications.create(payload)
    except ApiError as e:
        if e.is_unauthorized:
            return ApplyResult(
                ok=False,
                message="You are logged out. Logging in again...",
                redirect_to=LOGIN_REDIRECT,
                redirect_delay=LOGIN_REDIRECT_DELAY,
            )
        return ApplyResult(ok=False, message=e.message or APPLY_FAILED_MESSAGE)

    return ApplyResult(ok=True, application=application)
