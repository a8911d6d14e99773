"""Company CRUD routes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.models import Claims, CompanyFilters, CompanyNew, CompanyUpdate
from jobly.repositories import companies as company_repo
from jobly.web.deps import get_db, require_admin

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", status_code=201)
async def create_company(
    payload: CompanyNew,
    session: Session = Depends(get_db),
    admin: Claims = Depends(require_admin),
):
    """Create a company. Admin only."""
    company = company_repo.create(
        session,
        handle=payload.handle,
        name=payload.name,
        description=payload.description,
        num_employees=payload.num_employees,
        logo_url=payload.logo_url,
    )
    session.commit()
    return {"company": company.model_dump(by_alias=True)}


@router.get("")
async def list_companies(
    name: str | None = Query(None),
    min_employees: int | None = Query(None, alias="minEmployees", ge=0),
    max_employees: int | None = Query(None, alias="maxEmployees", ge=0),
    session: Session = Depends(get_db),
):
    """List companies, optionally filtered by name and headcount range."""
    filters = CompanyFilters(
        name=name,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    companies = company_repo.find_all(session, filters.to_payload())
    return {"companies": [c.model_dump(by_alias=True) for c in companies]}


@router.get("/{handle}")
async def get_company(handle: str, session: Session = Depends(get_db)):
    """Company detail including its jobs."""
    company = company_repo.get(session, handle)
    return {"company": company.model_dump(by_alias=True)}


@router.patch("/{handle}")
async def update_company(
    handle: str,
    payload: CompanyUpdate,
    session: Session = Depends(get_db),
    admin: Claims = Depends(require_admin),
):
    """Partially update a company. Admin only."""
    company = company_repo.update(session, handle, payload.to_payload())
    session.commit()
    return {"company": company.model_dump(by_alias=True)}


@router.delete("/{handle}")
async def delete_company(
    handle: str,
    session: Session = Depends(get_db),
    admin: Claims = Depends(require_admin),
):
    """Delete a company and its jobs. Admin only."""
    company_repo.remove(session, handle)
    session.commit()
    return {"deleted": handle}
