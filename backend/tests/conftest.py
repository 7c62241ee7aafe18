"""Pytest configuration and shared fixtures."""

import copy
import socket
from typing import AsyncGenerator, Optional
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from application.use_cases import ApplicationLifecycleService
from domain.entities import Actor, Job, JobApplication
from domain.enums import ActorRole, ApplicationStatus
from domain.repositories import (
    IActorRepository,
    IJobApplicationRepository,
    IJobRepository,
)
from infrastructure.config import get_settings
from infrastructure.database import models  # noqa: F401
from infrastructure.database.session import Base

# Separate database so tests never touch development data
_DATABASE_URL = make_url(get_settings().database_url)
TEST_DATABASE_URL = _DATABASE_URL.set(database=f"{_DATABASE_URL.database}_test")


def _is_postgres_available() -> bool:
    """Check if PostgreSQL is accepting connections on the configured host."""
    try:
        with socket.create_connection(
            (TEST_DATABASE_URL.host or "localhost", TEST_DATABASE_URL.port or 5432),
            timeout=1,
        ):
            return True
    except OSError:
        return False


_POSTGRES_AVAILABLE = _is_postgres_available()


def skip_if_no_postgres() -> None:
    """Skip the test if PostgreSQL is not reachable."""
    if not _POSTGRES_AVAILABLE:
        pytest.skip(
            f"PostgreSQL not available at {TEST_DATABASE_URL.host}:{TEST_DATABASE_URL.port or 5432}. "
            f"Create the {TEST_DATABASE_URL.database} database and start the server to run this test."
        )


class InMemoryJobApplicationRepository(IJobApplicationRepository):
    """Stores copies of applications so callers cannot mutate stored state."""

    def __init__(self) -> None:
        self.items: dict[UUID, JobApplication] = {}
        self.transition_calls = 0

    def add(self, application: JobApplication) -> JobApplication:
        self.items[application.id] = copy.deepcopy(application)
        return application

    async def create(self, application: JobApplication) -> JobApplication:
        self.add(application)
        return copy.deepcopy(application)

    async def get_by_id(self, application_id: UUID) -> Optional[JobApplication]:
        stored = self.items.get(application_id)
        return copy.deepcopy(stored) if stored else None

    async def list_by_job_seeker(self, job_seeker_id: UUID) -> list[JobApplication]:
        return [
            copy.deepcopy(app)
            for app in sorted(self.items.values(), key=lambda a: a.created_at)
            if app.job_seeker_id == job_seeker_id
        ]

    async def exists_for_job_seeker(self, job_id: UUID, job_seeker_id: UUID) -> bool:
        return any(
            app.job_id == job_id and app.job_seeker_id == job_seeker_id
            for app in self.items.values()
        )

    async def transition_status(
        self,
        application: JobApplication,
        expected_status: ApplicationStatus,
    ) -> bool:
        self.transition_calls += 1
        stored = self.items.get(application.id)
        if stored is None or stored.status != expected_status:
            return False
        self.items[application.id] = copy.deepcopy(application)
        return True


class InMemoryJobRepository(IJobRepository):
    def __init__(self, *jobs: Job) -> None:
        self.items = {job.id: job for job in jobs}

    async def get_by_id(self, job_id: UUID) -> Optional[Job]:
        return self.items.get(job_id)


class InMemoryActorRepository(IActorRepository):
    def __init__(self, *actors: Actor) -> None:
        self.items = {actor.id: actor for actor in actors}

    async def get_by_id(self, actor_id: UUID) -> Optional[Actor]:
        return self.items.get(actor_id)


@pytest.fixture
def company_id():
    """Company that posted the job under test."""
    return uuid4()


@pytest.fixture
def other_company_id():
    """A second, unrelated company."""
    return uuid4()


@pytest.fixture
def agency_id():
    return uuid4()


@pytest.fixture
def job(company_id):
    return Job(company_id=company_id, title="Warehouse Associate")


@pytest.fixture
def company_admin(company_id):
    return Actor(role=ActorRole.COMPANY_ADMIN, company_id=company_id)


@pytest.fixture
def company_contact(company_id):
    return Actor(role=ActorRole.COMPANY_CONTACT, company_id=company_id)


@pytest.fixture
def company_admin2(other_company_id):
    return Actor(role=ActorRole.COMPANY_ADMIN, company_id=other_company_id)


@pytest.fixture
def company_contact2(other_company_id):
    return Actor(role=ActorRole.COMPANY_CONTACT, company_id=other_company_id)


@pytest.fixture
def agency_admin(agency_id):
    return Actor(role=ActorRole.AGENCY_ADMIN, agency_id=agency_id)


@pytest.fixture
def job_developer(agency_id):
    return Actor(role=ActorRole.JOB_DEVELOPER, agency_id=agency_id)


@pytest.fixture
def case_manager(agency_id):
    return Actor(role=ActorRole.CASE_MANAGER, agency_id=agency_id)


@pytest.fixture
def job_seeker():
    return Actor(role=ActorRole.JOB_SEEKER)


@pytest.fixture
def job_seeker2():
    return Actor(role=ActorRole.JOB_SEEKER)


@pytest.fixture
def unauthorized_actors(
    agency_admin,
    job_developer,
    case_manager,
    company_contact2,
    company_admin2,
    job_seeker,
):
    """Everyone who must be denied access to applications for the job."""
    return {
        "agency_admin": agency_admin,
        "job_developer": job_developer,
        "case_manager": case_manager,
        "company_contact2": company_contact2,
        "company_admin2": company_admin2,
        "job_seeker": job_seeker,
    }


@pytest.fixture
def valid_application(job, job_seeker):
    """Active application to the job."""
    return JobApplication(job=job, job_seeker_id=job_seeker.id)


@pytest.fixture
def inactive_application(job, job_seeker2):
    """Application to the job that has already been accepted."""
    return JobApplication(
        job=job,
        job_seeker_id=job_seeker2.id,
        status=ApplicationStatus.ACCEPTED,
    )


@pytest.fixture
def application_repository(valid_application, inactive_application):
    repository = InMemoryJobApplicationRepository()
    repository.add(valid_application)
    repository.add(inactive_application)
    return repository


@pytest.fixture
def job_repository(job):
    return InMemoryJobRepository(job)


@pytest.fixture
def lifecycle_service(application_repository, job_repository):
    return ApplicationLifecycleService(
        application_repository=application_repository,
        job_repository=job_repository,
    )


@pytest.fixture
def actor_repository(company_admin, company_contact, unauthorized_actors, job_seeker2):
    """Every actor defined above, resolvable by id."""
    return InMemoryActorRepository(
        company_admin, company_contact, job_seeker2, *unauthorized_actors.values()
    )


@pytest_asyncio.fixture
async def db_engine():
    """
    Create a test database engine with a fresh schema.

    Skips the test if PostgreSQL is not available.
    """
    skip_if_no_postgres()

    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session; its work is rolled back afterwards."""
    session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session
        await session.rollback()
