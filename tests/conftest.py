"""Shared test fixtures for Jobly."""

import pytest

from jobly.db import CompanyRow, JobRow, get_session, init_db


@pytest.fixture
def db_engine(tmp_path):
    """A fresh database seeded with companies c1..c3 and jobs jobA..jobC."""
    engine = init_db(str(tmp_path / "test.db"))
    session = get_session(engine)
    session.add_all(
        [
            CompanyRow(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
            CompanyRow(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
            CompanyRow(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url="http://c3.img"),
        ]
    )
    session.flush()
    session.add_all(
        [
            JobRow(title="jobA", salary=100000, equity="0.0", company_handle="c1"),
            JobRow(title="jobB", salary=200000, equity="0.2", company_handle="c2"),
            JobRow(title="jobC", salary=300000, equity=None, company_handle="c3"),
        ]
    )
    session.commit()
    session.close()
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    session = get_session(db_engine)
    yield session
    session.close()


@pytest.fixture
def job_ids(db_session):
    """Seeded job ids keyed by title."""
    return {row.title: row.id for row in db_session.query(JobRow).all()}
