"""Company persistence: create, search, detail, partial update, delete.

Functions take an open Session and leave committing to the caller.
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.errors import ConflictError, InvalidInputError, NotFoundError
from jobly.models import Company, CompanyDetail, CompanyJob
from jobly.sql import (
    COMPANY_JS_TO_SQL,
    bind_params,
    company_filter_sql,
    placeholder,
    set_clause,
    sql_for_partial_update,
    where_clause,
)

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = (
    'handle, name, description, '
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)


def _raise_conflict(error: IntegrityError, handle: str, name: str | None) -> None:
    """Turn a UNIQUE violation into ConflictError; leave anything else alone."""
    detail = str(error.orig)
    if "UNIQUE" not in detail.upper():
        return
    if "companies.name" in detail:
        raise ConflictError(f"Duplicate company name: {name}") from error
    raise ConflictError(f"Duplicate company: {handle}") from error


def create(
    session: Session,
    handle: str,
    name: str,
    description: str = "",
    num_employees: int | None = None,
    logo_url: str | None = None,
) -> Company:
    """Insert a company. Raises ConflictError if the handle or name is taken."""
    duplicate = session.execute(
        text("SELECT handle FROM companies WHERE handle = :handle"),
        {"handle": handle},
    ).first()
    if duplicate:
        raise ConflictError(f"Duplicate company: {handle}")

    try:
        row = session.execute(
            text(
                "INSERT INTO companies (handle, name, description, num_employees, logo_url) "
                "VALUES (:p1, :p2, :p3, :p4, :p5) "
                f"RETURNING {COMPANY_COLUMNS}"
            ),
            bind_params([handle, name, description, num_employees, logo_url]),
        ).mappings().one()
    except IntegrityError as e:
        session.rollback()
        _raise_conflict(e, handle=handle, name=name)
        raise

    logger.info("Created company %s", handle)
    return Company.model_validate(dict(row))


def find_all(session: Session, filters: Mapping[str, Any] | None = None) -> list[Company]:
    """Companies matching the filters, ordered by name.

    Filters: name (substring, any case), minEmployees, maxEmployees.
    """
    filters = filters or {}
    min_employees = filters.get("minEmployees")
    max_employees = filters.get("maxEmployees")
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise InvalidInputError("minEmployees must be less than maxEmployees")

    compiled = company_filter_sql(filters)
    sql = f"SELECT {COMPANY_COLUMNS} FROM companies {where_clause(compiled)} ORDER BY name"
    logger.debug("find companies: %s %s", sql, compiled.values)

    rows = session.execute(text(sql), compiled.params()).mappings().all()
    return [Company.model_validate(dict(r)) for r in rows]


def get(session: Session, handle: str) -> CompanyDetail:
    """A company and its jobs. Raises NotFoundError."""
    row = session.execute(
        text(f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = :p1"),
        bind_params([handle]),
    ).mappings().first()
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    job_rows = session.execute(
        text(
            "SELECT id, title, salary, equity FROM jobs "
            "WHERE company_handle = :p1 ORDER BY id"
        ),
        bind_params([handle]),
    ).mappings().all()

    return CompanyDetail(
        **Company.model_validate(dict(row)).model_dump(),
        jobs=[CompanyJob.model_validate(dict(j)) for j in job_rows],
    )


def update(session: Session, handle: str, data: Mapping[str, Any]) -> Company:
    """Apply a partial update; fields not in ``data`` are untouched.

    Accepts name, description, numEmployees, logoUrl. Raises NotFoundError,
    InvalidInputError for an empty payload or an attempt to change the handle,
    ConflictError when the new name belongs to another company.
    """
    if "handle" in data:
        raise InvalidInputError("Company handle cannot be changed")

    compiled = sql_for_partial_update(data, COMPANY_JS_TO_SQL)
    handle_idx = placeholder(len(compiled.values) + 1)
    sql = (
        f"UPDATE companies SET {set_clause(compiled)} "
        f"WHERE handle = {handle_idx} "
        f"RETURNING {COMPANY_COLUMNS}"
    )
    logger.debug("update company: %s", sql)

    try:
        row = session.execute(
            text(sql), bind_params(compiled.values + [handle])
        ).mappings().first()
    except IntegrityError as e:
        session.rollback()
        _raise_conflict(e, handle=handle, name=data.get("name"))
        raise

    if row is None:
        raise NotFoundError(f"No company: {handle}")

    logger.info("Updated company %s (%s)", handle, ", ".join(data))
    return Company.model_validate(dict(row))


def remove(session: Session, handle: str) -> None:
    """Delete a company; its jobs go with it. Raises NotFoundError."""
    row = session.execute(
        text("DELETE FROM companies WHERE handle = :p1 RETURNING handle"),
        bind_params([handle]),
    ).first()
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    logger.info("Removed company %s", handle)
