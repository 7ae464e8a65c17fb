"""
Validatie-schema's voor alles wat naar de API gestuurd wordt.

Server-beheerde kolommen (id, timestamps, completion_score, tellers,
consultant status) zitten hier bewust niet in. Op de wire gebruikt de API
camelCase; snake_case namen worden ook aanvaard.
"""
from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, HttpUrl
from pydantic.alias_generators import to_camel

from .models import (
    ApplicationStatus,
    Availability,
    CompanySize,
    EmploymentType,
    EngagementType,
    ExperienceBracket,
    ExperienceLevel,
    RateBracket,
    SalaryType,
    Specialization,
    UserRole,
    UserStatus,
    VerificationStatus,
)

HANDLE_PATTERN = r"^[a-zA-Z0-9_-]+$"
MIN_BIO_LENGTH = 50


class ApiSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_payload(self) -> dict:
        """JSON-klare dict in camelCase, zonder lege velden."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ------------------ INSERT SCHEMAS ------------------

class UserCreate(ApiSchema):
    email: Optional[EmailStr] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole = UserRole.consultant
    status: UserStatus = UserStatus.pending
    email_verified: bool = False


class ProfileCreate(ApiSchema):
    user_id: str
    title: str = Field(min_length=1)
    bio: Optional[str] = None
    location: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experience: Optional[int] = Field(default=None, ge=0)
    hourly_rate: Optional[int] = Field(default=None, ge=0)
    availability: Optional[Availability] = None
    certifications: List[str] = Field(default_factory=list)
    portfolio_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    is_public: bool = True


class CompanyCreate(ApiSchema):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    size: Optional[CompanySize] = None
    location: Optional[str] = None
    logo_url: Optional[str] = None
    created_by_id: str


class JobCreate(ApiSchema):
    company_id: str
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    requirements: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    type: EmploymentType
    experience_level: Optional[ExperienceLevel] = None
    salary_min: Optional[int] = Field(default=None, ge=0)
    salary_max: Optional[int] = Field(default=None, ge=0)
    salary_type: Optional[SalaryType] = None

    databricks_usage: Optional[str] = None
    project_vision: Optional[str] = None
    project_scope: Optional[str] = None
    project_duration: Optional[str] = None
    databricks_components: List[str] = Field(default_factory=list)
    data_volume: Optional[str] = None

    key_team_members: List[str] = Field(default_factory=list)
    decision_makers: List[str] = Field(default_factory=list)
    technical_contact: Optional[str] = None
    hiring_manager: Optional[str] = None

    verification_status: VerificationStatus = VerificationStatus.pending
    verification_notes: Optional[str] = None
    verified_by_id: Optional[str] = None
    verified_at: Optional[datetime] = None

    is_active: bool = True
    posted_by_id: str


class ApplicationCreate(ApiSchema):
    job_id: str
    profile_id: str
    cover_letter: Optional[str] = None
    status: ApplicationStatus = ApplicationStatus.pending


class ConsultantCreate(ApiSchema):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    handle: str = Field(min_length=3, max_length=30, pattern=HANDLE_PATTERN)
    email: EmailStr
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    location: Optional[str] = None
    cv_path: Optional[str] = None
    years_experience: ExperienceBracket
    specialization: Specialization
    hourly_rate_range: Optional[RateBracket] = None
    availability: Optional[EngagementType] = None
    certifications: List[str] = Field(default_factory=list)
    skills: List[str] = Field(min_length=1)
    industries: List[str] = Field(default_factory=list)
    bio: str = Field(min_length=MIN_BIO_LENGTH)


class ConsultantReferenceCreate(ApiSchema):
    consultant_id: str
    project_name: str = Field(min_length=1)
    project_description: Optional[str] = None
    duration: Optional[str] = None
    manager_name: str = Field(min_length=1)
    manager_email: EmailStr
    technologies: List[str] = Field(default_factory=list)
    permission_to_contact: bool = False


# ------------------ FORM SCHEMAS ------------------
# Checks die de client doet voor het versturen van een formulier.

OptionalUrl = Optional[Union[HttpUrl, Literal[""]]]


class ProfileForm(ApiSchema):
    title: Optional[str] = None
    bio: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experience: Optional[str] = None
    location: Optional[str] = None
    avatar_url: OptionalUrl = None
    resume_url: OptionalUrl = None
    hourly_rate: Optional[float] = None
    availability: Optional[str] = None
    portfolio_url: OptionalUrl = None
    linkedin_url: OptionalUrl = None
    github_url: OptionalUrl = None
    is_public: Optional[bool] = None
    certifications: List[str] = Field(default_factory=list)


class JobForm(ApiSchema):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    requirements: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    type: Optional[str] = None
    experience_level: Optional[str] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None


class LoginRequest(ApiSchema):
    email: EmailStr
    password: str = Field(min_length=1)
