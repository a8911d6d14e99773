"""Job persistence: create, search, get, partial update, delete."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.errors import InvalidInputError, NotFoundError
from jobly.models import Job
from jobly.sql import (
    JOB_JS_TO_SQL,
    bind_params,
    job_filter_sql,
    placeholder,
    set_clause,
    sql_for_partial_update,
    where_clause,
)

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

IMMUTABLE_FIELDS = ("id", "companyHandle", "company_handle")


def create(
    session: Session,
    title: str,
    salary: int | None = None,
    equity: str | None = None,
    *,
    company_handle: str,
) -> Job:
    """Insert a job; the store assigns its id."""
    try:
        row = session.execute(
            text(
                "INSERT INTO jobs (title, salary, equity, company_handle) "
                "VALUES (:p1, :p2, :p3, :p4) "
                f"RETURNING {JOB_COLUMNS}"
            ),
            bind_params([title, salary, equity, company_handle]),
        ).mappings().one()
    except IntegrityError as e:
        session.rollback()
        if "FOREIGN KEY" in str(e.orig).upper():
            raise InvalidInputError(f"No company: {company_handle}") from e
        raise

    logger.info("Created job %s (%s) for %s", row["id"], title, company_handle)
    return Job.model_validate(dict(row))


def find_all(session: Session, filters: Mapping[str, Any] | None = None) -> list[Job]:
    """Jobs matching the filters, ordered by title then salary.

    Filters: title (substring, any case), minSalary, hasEquity.
    """
    compiled = job_filter_sql(filters)
    sql = f"SELECT {JOB_COLUMNS} FROM jobs {where_clause(compiled)} ORDER BY title, salary"
    logger.debug("find jobs: %s %s", sql, compiled.values)

    rows = session.execute(text(sql), compiled.params()).mappings().all()
    return [Job.model_validate(dict(r)) for r in rows]


def get(session: Session, job_id: int) -> Job:
    """A single job. Raises NotFoundError."""
    row = session.execute(
        text(f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = :p1"),
        bind_params([job_id]),
    ).mappings().first()
    if row is None:
        raise NotFoundError(f"No job: {job_id}")
    return Job.model_validate(dict(row))


def update(session: Session, job_id: int, data: Mapping[str, Any]) -> Job:
    """Apply a partial update to title, salary and/or equity.

    Raises NotFoundError, or InvalidInputError for an empty payload or an
    attempt to change the id or company.
    """
    locked = [f for f in IMMUTABLE_FIELDS if f in data]
    if locked:
        raise InvalidInputError(f"Job fields cannot be changed: {', '.join(locked)}")

    compiled = sql_for_partial_update(data, JOB_JS_TO_SQL)
    id_idx = placeholder(len(compiled.values) + 1)
    sql = (
        f"UPDATE jobs SET {set_clause(compiled)} "
        f"WHERE id = {id_idx} "
        f"RETURNING {JOB_COLUMNS}"
    )
    logger.debug("update job: %s", sql)

    row = session.execute(
        text(sql), bind_params(compiled.values + [job_id])
    ).mappings().first()
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    logger.info("Updated job %s (%s)", job_id, ", ".join(data))
    return Job.model_validate(dict(row))


def remove(session: Session, job_id: int) -> None:
    """Delete a job. Raises NotFoundError."""
    row = session.execute(
        text("DELETE FROM jobs WHERE id = :p1 RETURNING id"),
        bind_params([job_id]),
    ).first()
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    logger.info("Removed job %s", job_id)
