from sqlalchemy import (
    Column, Integer, String, Text, Boolean, JSON,
    ForeignKey, Enum, TIMESTAMP, Index, func, event
)
from sqlalchemy.orm import declarative_base, relationship
import enum
import uuid

Base = declarative_base()


def new_id():
    return str(uuid.uuid4())


def enum_column(enum_cls, name, **kwargs):
    """Enum kolom die de waarde (bv. 'full-time') opslaat i.p.v. de naam."""
    return Column(
        Enum(
            enum_cls,
            name=name,
            values_callable=lambda members: [m.value for m in members],
            validate_strings=True,
        ),
        **kwargs
    )


# ---- ENUM TYPES ----
class UserRole(enum.Enum):
    consultant = "consultant"
    company = "company"
    admin = "admin"
    staff = "staff"


class UserStatus(enum.Enum):
    pending = "pending"
    email_verified = "email_verified"
    approved = "approved"
    rejected = "rejected"
    suspended = "suspended"


class Availability(enum.Enum):
    available = "available"
    busy = "busy"
    not_available = "not_available"


class CompanySize(enum.Enum):
    startup = "startup"
    small = "small"
    medium = "medium"
    large = "large"
    enterprise = "enterprise"


class EmploymentType(enum.Enum):
    full_time = "full-time"
    part_time = "part-time"
    contract = "contract"
    remote = "remote"


class ExperienceLevel(enum.Enum):
    entry = "entry"
    mid = "mid"
    senior = "senior"
    expert = "expert"


class SalaryType(enum.Enum):
    yearly = "yearly"
    hourly = "hourly"
    daily = "daily"
    project = "project"


class VerificationStatus(enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class ApplicationStatus(enum.Enum):
    pending = "pending"
    reviewing = "reviewing"
    interview = "interview"
    rejected = "rejected"
    accepted = "accepted"


class ConsultantStatus(enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    draft = "draft"


class ExperienceBracket(enum.Enum):
    one_to_two = "1-2"
    three_to_five = "3-5"
    six_to_ten = "6-10"
    ten_plus = "10+"


class Specialization(enum.Enum):
    data_engineering = "data-engineering"
    machine_learning = "machine-learning"
    data_architecture = "data-architecture"
    analytics = "analytics"
    migration = "migration"


class RateBracket(enum.Enum):
    from_50 = "50-75"
    from_75 = "75-100"
    from_100 = "100-150"
    from_150 = "150-200"
    from_200 = "200+"


class EngagementType(enum.Enum):
    full_time = "full-time"
    part_time = "part-time"
    project_based = "project-based"
    limited = "limited"


# ---- TABLES ----
class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False)
    first_name = Column(String(120))
    last_name = Column(String(120))
    profile_image_url = Column(String(300))
    role = enum_column(UserRole, "user_role", nullable=False, default=UserRole.consultant)
    status = enum_column(UserStatus, "user_status", nullable=False, default=UserStatus.pending)
    email_verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), onupdate=func.now())

    profile = relationship(
        "Profile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    companies = relationship(
        "Company",
        back_populates="created_by",
    )
    posted_jobs = relationship(
        "Job",
        back_populates="posted_by",
        foreign_keys="Job.posted_by_id",
    )


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,  # één profiel per user
    )

    title = Column(String(200), nullable=False)
    bio = Column(Text)
    location = Column(String(160))
    skills = Column(JSON, nullable=False, default=list)
    experience = Column(Integer)  # jaren ervaring
    hourly_rate = Column(Integer)
    availability = enum_column(Availability, "profile_availability")
    certifications = Column(JSON, nullable=False, default=list)
    portfolio_url = Column(String(300))
    linkedin_url = Column(String(300))
    github_url = Column(String(300))
    is_public = Column(Boolean, nullable=False, default=True)
    completion_score = Column(Integer, nullable=False, default=0)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), onupdate=func.now())

    # relaties
    user = relationship("User", back_populates="profile")
    applications = relationship(
        "Application",
        back_populates="profile",
        cascade="all, delete-orphan",
    )
    views = relationship(
        "ProfileView",
        back_populates="profile",
        cascade="all, delete-orphan",
    )

    # velden die meetellen voor de completion score
    COMPLETION_FIELDS = (
        "title",
        "bio",
        "location",
        "skills",
        "experience",
        "hourly_rate",
        "availability",
        "certifications",
        "portfolio_url",
        "linkedin_url",
        "github_url",
    )

    def compute_completion_score(self):
        """Percentage (0-100) van de ingevulde profielvelden."""
        filled = sum(1 for field in self.COMPLETION_FIELDS if is_filled(getattr(self, field)))
        return round(100 * filled / len(self.COMPLETION_FIELDS))


def is_filled(value):
    # 0 jaar ervaring telt als ingevuld, een lege string of lijst niet
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return True


@event.listens_for(Profile, "before_insert")
@event.listens_for(Profile, "before_update")
def refresh_completion_score(mapper, connection, profile):
    profile.completion_score = profile.compute_completion_score()


class Company(Base):
    __tablename__ = "companies"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(160), nullable=False)
    description = Column(Text)
    website = Column(String(300))
    industry = Column(String(160))
    size = enum_column(CompanySize, "company_size")
    location = Column(String(160))
    logo_url = Column(String(300))
    created_by_id = Column(
        String(36),
        ForeignKey("users.id"),
        nullable=False
    )
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), onupdate=func.now())

    # relaties
    created_by = relationship("User", back_populates="companies")
    jobs = relationship(
        "Job",
        back_populates="company",
        cascade="all, delete-orphan",
    )


Index("idx_companies_created_by_id", Company.created_by_id)


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(36), primary_key=True, default=new_id)
    company_id = Column(
        String(36),
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False
    )

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(JSON, nullable=False, default=list)
    skills = Column(JSON, nullable=False, default=list)
    location = Column(String(160))
    type = enum_column(EmploymentType, "employment_type", nullable=False)
    experience_level = enum_column(ExperienceLevel, "experience_level")
    salary_min = Column(Integer)
    salary_max = Column(Integer)
    salary_type = enum_column(SalaryType, "salary_type")

    # project beschrijving
    databricks_usage = Column(Text)
    project_vision = Column(Text)
    project_scope = Column(Text)
    project_duration = Column(String(120))
    databricks_components = Column(JSON, nullable=False, default=list)
    data_volume = Column(String(120))

    # team en beslissers
    key_team_members = Column(JSON, nullable=False, default=list)
    decision_makers = Column(JSON, nullable=False, default=list)
    technical_contact = Column(String(200))
    hiring_manager = Column(String(200))

    # verificatie door admin (los van is_active)
    verification_status = enum_column(
        VerificationStatus,
        "verification_status",
        nullable=False,
        default=VerificationStatus.pending,
    )
    verification_notes = Column(Text)
    verified_by_id = Column(
        String(36),
        ForeignKey("users.id"),
        nullable=True
    )
    verified_at = Column(TIMESTAMP, nullable=True)

    is_active = Column(Boolean, nullable=False, default=True)
    application_count = Column(Integer, nullable=False, default=0)
    view_count = Column(Integer, nullable=False, default=0)
    posted_by_id = Column(
        String(36),
        ForeignKey("users.id"),
        nullable=False
    )
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), onupdate=func.now())

    # relaties
    company = relationship("Company", back_populates="jobs")
    posted_by = relationship(
        "User",
        back_populates="posted_jobs",
        foreign_keys=[posted_by_id],
    )
    verified_by = relationship("User", foreign_keys=[verified_by_id])
    applications = relationship(
        "Application",
        back_populates="job",
        cascade="all, delete-orphan",
    )
    views = relationship(
        "JobView",
        back_populates="job",
        cascade="all, delete-orphan",
    )


Index("idx_jobs_company_id", Job.company_id)
Index("idx_jobs_posted_by_id", Job.posted_by_id)


class Application(Base):
    __tablename__ = "applications"

    id = Column(String(36), primary_key=True, default=new_id)
    job_id = Column(
        String(36),
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False
    )
    profile_id = Column(
        String(36),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False
    )
    cover_letter = Column(Text)
    status = enum_column(
        ApplicationStatus,
        "application_status",
        nullable=False,
        default=ApplicationStatus.pending,
    )
    applied_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), onupdate=func.now())

    job = relationship("Job", back_populates="applications")
    profile = relationship("Profile", back_populates="applications")


# geen unique constraint: (job_id, profile_id) is in de praktijk uniek
Index("idx_applications_job_profile", Application.job_id, Application.profile_id)


class ProfileView(Base):
    __tablename__ = "profile_views"

    id = Column(String(36), primary_key=True, default=new_id)
    profile_id = Column(
        String(36),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False
    )
    viewer_id = Column(String(36), nullable=True)  # anoniem = NULL
    viewed_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    profile = relationship("Profile", back_populates="views")


Index("idx_profile_views_profile_id", ProfileView.profile_id)


class JobView(Base):
    __tablename__ = "job_views"

    id = Column(String(36), primary_key=True, default=new_id)
    job_id = Column(
        String(36),
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False
    )
    viewer_id = Column(String(36), nullable=True)  # anoniem = NULL
    viewed_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    job = relationship("Job", back_populates="views")


Index("idx_job_views_job_id", JobView.job_id)


class Consultant(Base):
    """Uitgebreide consultant-registratie, los van Profile."""

    __tablename__ = "consultants"

    id = Column(String(36), primary_key=True, default=new_id)
    first_name = Column(String(120), nullable=False)
    last_name = Column(String(120), nullable=False)
    handle = Column(String(30), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(String(50))
    linkedin = Column(String(300))
    location = Column(String(160))
    cv_path = Column(String(300))
    years_experience = enum_column(ExperienceBracket, "experience_bracket", nullable=False)
    specialization = enum_column(Specialization, "specialization", nullable=False)
    hourly_rate_range = enum_column(RateBracket, "rate_bracket")
    availability = enum_column(EngagementType, "engagement_type")
    certifications = Column(JSON, nullable=False, default=list)
    skills = Column(JSON, nullable=False)
    industries = Column(JSON, nullable=False, default=list)
    bio = Column(Text, nullable=False)
    status = enum_column(
        ConsultantStatus,
        "consultant_status",
        nullable=False,
        default=ConsultantStatus.pending,
    )
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), onupdate=func.now())

    references = relationship(
        "ConsultantReference",
        back_populates="consultant",
        cascade="all, delete-orphan",
    )

    @property
    def initials(self):
        """Initialen van voor- en achternaam."""
        initials = "".join(name[0].upper() for name in (self.first_name, self.last_name) if name)
        return initials or "C"


class ConsultantReference(Base):
    __tablename__ = "consultant_references"

    id = Column(String(36), primary_key=True, default=new_id)
    consultant_id = Column(
        String(36),
        ForeignKey("consultants.id", ondelete="CASCADE"),
        nullable=False
    )
    project_name = Column(String(200), nullable=False)
    project_description = Column(Text)
    duration = Column(String(120))
    manager_name = Column(String(200), nullable=False)
    manager_email = Column(String(255), nullable=False)
    technologies = Column(JSON, nullable=False, default=list)
    permission_to_contact = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    consultant = relationship("Consultant", back_populates="references")


Index("idx_consultant_references_consultant_id", ConsultantReference.consultant_id)
