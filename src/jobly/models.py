"""Pydantic data models for Jobly.

Wire names are camelCase (``numEmployees``, ``companyHandle``); Python
attribute names are snake_case. Dump with ``by_alias=True`` for the wire.
"""

from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def _check_equity(value: str | None) -> str | None:
    """Equity is a decimal string in [0, 1]; the string itself is kept."""
    if value is None:
        return value
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise ValueError("equity must be a decimal string")
    if not amount.is_finite() or amount < 0 or amount > 1:
        raise ValueError("equity must be between 0 and 1")
    return value


# --- Entities ---

class Company(_CamelModel):
    """A company as stored."""
    handle: str
    name: str
    description: str = ""
    num_employees: int | None = Field(None, alias="numEmployees")
    logo_url: str | None = Field(None, alias="logoUrl")


class CompanyJob(_CamelModel):
    """A job as embedded in its company's detail view."""
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None


class CompanyDetail(Company):
    """A company with its jobs."""
    jobs: list[CompanyJob] = Field(default_factory=list)


class Job(_CamelModel):
    """A job posting as stored."""
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None
    company_handle: str = Field(alias="companyHandle")


# --- Request payloads ---

class CompanyNew(_Payload):
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str = ""
    num_employees: int | None = Field(None, ge=0, alias="numEmployees")
    logo_url: str | None = Field(None, pattern=r"^https?://\S+$", alias="logoUrl")


class CompanyUpdate(_Payload):
    """Sparse company update; handle cannot be changed.

    name and description may be omitted but not nulled.
    """
    name: str = Field(None, min_length=1)
    description: str = Field(None)
    num_employees: int | None = Field(None, ge=0, alias="numEmployees")
    logo_url: str | None = Field(None, pattern=r"^https?://\S+$", alias="logoUrl")

    def to_payload(self) -> dict:
        return self.model_dump(exclude_unset=True, by_alias=True)


class JobNew(_Payload):
    title: str = Field(min_length=1)
    salary: int | None = Field(None, ge=0)
    equity: str | None = None
    company_handle: str = Field(min_length=1, max_length=25, alias="companyHandle")

    @field_validator("equity")
    @classmethod
    def check_equity(cls, value: str | None) -> str | None:
        return _check_equity(value)


class JobUpdate(_Payload):
    """Sparse job update; id and companyHandle cannot be changed."""
    title: str = Field(None, min_length=1)
    salary: int | None = Field(None, ge=0)
    equity: str | None = None

    @field_validator("equity")
    @classmethod
    def check_equity(cls, value: str | None) -> str | None:
        return _check_equity(value)

    def to_payload(self) -> dict:
        return self.model_dump(exclude_unset=True, by_alias=True)


# --- Search filters ---

class CompanyFilters(_Payload):
    name: str | None = None
    min_employees: int | None = Field(None, ge=0, alias="minEmployees")
    max_employees: int | None = Field(None, ge=0, alias="maxEmployees")

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True, by_alias=True)


class JobFilters(_Payload):
    title: str | None = None
    min_salary: int | None = Field(None, ge=0, alias="minSalary")
    # None and False both mean "no equity filter"
    has_equity: bool | None = Field(None, alias="hasEquity")

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True, by_alias=True)


# --- Auth ---

class Claims(_CamelModel):
    """Decoded token payload."""
    username: str
    is_admin: bool = Field(False, alias="isAdmin")
    iat: int | None = None
