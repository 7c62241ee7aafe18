"""Tests for the SQLAlchemy repositories against a PostgreSQL test database.

Skipped when PostgreSQL is not reachable; see ``db_engine`` in conftest.
"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import update

from domain.entities import Job, JobApplication
from domain.enums import ActorRole, ApplicationStatus
from domain.exceptions import DuplicateApplicationError
from infrastructure.database.models import (
    CompanyModel,
    JobApplicationModel,
    JobModel,
    UserModel,
)
from infrastructure.database.repositories import (
    SQLAlchemyActorRepository,
    SQLAlchemyJobApplicationRepository,
)


@pytest.fixture
def stored_job():
    return Job(company_id=uuid4(), title="Forklift Operator")


@pytest.fixture
def seeker_ids():
    return [uuid4(), uuid4()]


@pytest_asyncio.fixture
async def seeded_session(db_session, stored_job, seeker_ids):
    """Session with a company, its job and two job seekers already stored."""
    db_session.add(CompanyModel(id=stored_job.company_id, name="Acme Logistics"))
    await db_session.flush()
    db_session.add(JobModel(id=stored_job.id, company_id=stored_job.company_id, title=stored_job.title))
    for index, seeker_id in enumerate(seeker_ids):
        db_session.add(
            UserModel(id=seeker_id, email=f"seeker{index}@example.com", role=ActorRole.JOB_SEEKER.value)
        )
    await db_session.flush()
    return db_session


@pytest.fixture
def repository(seeded_session):
    return SQLAlchemyJobApplicationRepository(seeded_session)


class TestJobApplicationRepository:
    """Test the job application repository on a real database."""

    @pytest.mark.asyncio
    async def test_create_maps_job(self, repository, stored_job, seeker_ids):
        created = await repository.create(JobApplication(job=stored_job, job_seeker_id=seeker_ids[0]))

        loaded = await repository.get_by_id(created.id)

        assert loaded.status == ApplicationStatus.ACTIVE
        assert loaded.job_id == stored_job.id
        assert loaded.company_id == stored_job.company_id
        assert loaded.job.title == "Forklift Operator"

    @pytest.mark.asyncio
    async def test_get_by_id_unknown_returns_none(self, repository):
        assert await repository.get_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_transition_from_expected_status(self, repository, stored_job, seeker_ids):
        application = await repository.create(JobApplication(job=stored_job, job_seeker_id=seeker_ids[0]))
        application.reject("Position filled")

        assert await repository.transition_status(application, ApplicationStatus.ACTIVE) is True

        loaded = await repository.get_by_id(application.id)
        assert loaded.status == ApplicationStatus.REJECTED
        assert loaded.reason_for_rejection == "Position filled"

    @pytest.mark.asyncio
    async def test_transition_after_status_changed_writes_nothing(
        self, repository, seeded_session, stored_job, seeker_ids
    ):
        application = await repository.create(JobApplication(job=stored_job, job_seeker_id=seeker_ids[0]))
        # Load it first so the session holds the active row
        assert (await repository.get_by_id(application.id)).is_active()

        # Another request moves it to processing
        await seeded_session.execute(
            update(JobApplicationModel)
            .where(JobApplicationModel.id == application.id)
            .values(status=ApplicationStatus.PROCESSING.value)
            .execution_options(synchronize_session=False)
        )

        application.reject("Too late")
        assert await repository.transition_status(application, ApplicationStatus.ACTIVE) is False

        loaded = await repository.get_by_id(application.id)
        assert loaded.status == ApplicationStatus.PROCESSING
        assert loaded.reason_for_rejection is None

    @pytest.mark.asyncio
    async def test_duplicate_application_raises_error(self, repository, stored_job, seeker_ids):
        await repository.create(JobApplication(job=stored_job, job_seeker_id=seeker_ids[0]))

        with pytest.raises(DuplicateApplicationError):
            await repository.create(JobApplication(job=stored_job, job_seeker_id=seeker_ids[0]))

    @pytest.mark.asyncio
    async def test_exists_for_job_seeker(self, repository, stored_job, seeker_ids):
        await repository.create(JobApplication(job=stored_job, job_seeker_id=seeker_ids[0]))

        assert await repository.exists_for_job_seeker(stored_job.id, seeker_ids[0]) is True
        assert await repository.exists_for_job_seeker(stored_job.id, seeker_ids[1]) is False

    @pytest.mark.asyncio
    async def test_list_by_job_seeker_in_creation_order(
        self, repository, seeded_session, stored_job, seeker_ids
    ):
        other_job = Job(company_id=stored_job.company_id, title="Dispatcher")
        seeded_session.add(JobModel(id=other_job.id, company_id=other_job.company_id, title=other_job.title))
        await seeded_session.flush()

        start = datetime.utcnow()
        later = await repository.create(
            JobApplication(job=other_job, job_seeker_id=seeker_ids[0], created_at=start + timedelta(minutes=5))
        )
        earlier = await repository.create(
            JobApplication(job=stored_job, job_seeker_id=seeker_ids[0], created_at=start)
        )
        theirs = await repository.create(JobApplication(job=stored_job, job_seeker_id=seeker_ids[1]))

        applications = await repository.list_by_job_seeker(seeker_ids[0])

        assert [application.id for application in applications] == [earlier.id, later.id]
        assert theirs.id not in {application.id for application in applications}


class TestActorRepository:
    """Test resolving users to actors on a real database."""

    @pytest.mark.asyncio
    async def test_resolves_job_seeker(self, seeded_session, seeker_ids):
        actor = await SQLAlchemyActorRepository(seeded_session).get_by_id(seeker_ids[0])

        assert actor.id == seeker_ids[0]
        assert actor.role == ActorRole.JOB_SEEKER
        assert actor.email == "seeker0@example.com"

    @pytest.mark.asyncio
    async def test_staff_row_without_company_resolves_to_none(self, seeded_session):
        user_id = uuid4()
        seeded_session.add(
            UserModel(id=user_id, email="orphan@example.com", role=ActorRole.COMPANY_ADMIN.value)
        )
        await seeded_session.flush()

        assert await SQLAlchemyActorRepository(seeded_session).get_by_id(user_id) is None
