"""Job CRUD routes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.models import Claims, JobFilters, JobNew, JobUpdate
from jobly.repositories import jobs as job_repo
from jobly.web.deps import get_db, require_admin

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", status_code=201)
async def create_job(
    payload: JobNew,
    session: Session = Depends(get_db),
    admin: Claims = Depends(require_admin),
):
    """Create a job. Admin only."""
    job = job_repo.create(
        session,
        title=payload.title,
        salary=payload.salary,
        equity=payload.equity,
        company_handle=payload.company_handle,
    )
    session.commit()
    return {"job": job.model_dump(by_alias=True)}


@router.get("")
async def list_jobs(
    title: str | None = Query(None),
    min_salary: int | None = Query(None, alias="minSalary", ge=0),
    has_equity: bool | None = Query(None, alias="hasEquity"),
    session: Session = Depends(get_db),
):
    """List jobs, optionally filtered by title, minimum salary and equity."""
    filters = JobFilters(title=title, min_salary=min_salary, has_equity=has_equity)
    jobs = job_repo.find_all(session, filters.to_payload())
    return {"jobs": [j.model_dump(by_alias=True) for j in jobs]}


@router.get("/{job_id}")
async def get_job(job_id: int, session: Session = Depends(get_db)):
    job = job_repo.get(session, job_id)
    return {"job": job.model_dump(by_alias=True)}


@router.patch("/{job_id}")
async def update_job(
    job_id: int,
    payload: JobUpdate,
    session: Session = Depends(get_db),
    admin: Claims = Depends(require_admin),
):
    """Partially update a job. Admin only; id and company are fixed."""
    job = job_repo.update(session, job_id, payload.to_payload())
    session.commit()
    return {"job": job.model_dump(by_alias=True)}


@router.delete("/{job_id}")
async def delete_job(
    job_id: int,
    session: Session = Depends(get_db),
    admin: Claims = Depends(require_admin),
):
    job_repo.remove(session, job_id)
    session.commit()
    return {"deleted": job_id}
