"""Tests for request payload and filter models."""

import pytest
from pydantic import ValidationError

from jobly.models import (
    Company,
    CompanyFilters,
    CompanyNew,
    CompanyUpdate,
    Job,
    JobFilters,
    JobNew,
    JobUpdate,
)


class TestEntities:
    def test_company_dumps_camel_case(self):
        company = Company(handle="c1", name="C1", num_employees=5, logo_url=None)
        assert company.model_dump(by_alias=True) == {
            "handle": "c1",
            "name": "C1",
            "description": "",
            "numEmployees": 5,
            "logoUrl": None,
        }

    def test_job_accepts_wire_names(self):
        job = Job.model_validate({"id": 1, "title": "t", "companyHandle": "c1"})
        assert job.company_handle == "c1"


class TestCompanyPayloads:
    def test_new_requires_handle_and_name(self):
        with pytest.raises(ValidationError):
            CompanyNew.model_validate({"description": "x"})

    def test_new_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            CompanyNew.model_validate({"handle": "h", "name": "n", "ceo": "x"})

    def test_new_rejects_negative_employees(self):
        with pytest.raises(ValidationError):
            CompanyNew.model_validate({"handle": "h", "name": "n", "numEmployees": -1})

    def test_new_rejects_bad_logo_url(self):
        with pytest.raises(ValidationError):
            CompanyNew.model_validate({"handle": "h", "name": "n", "logoUrl": "not-a-url"})

    def test_update_payload_is_sparse(self):
        update = CompanyUpdate.model_validate({"name": "New"})
        assert update.to_payload() == {"name": "New"}

    def test_update_payload_keeps_explicit_null(self):
        update = CompanyUpdate.model_validate({"numEmployees": None})
        assert update.to_payload() == {"numEmployees": None}

    def test_update_empty_payload(self):
        assert CompanyUpdate.model_validate({}).to_payload() == {}

    def test_update_rejects_handle(self):
        with pytest.raises(ValidationError):
            CompanyUpdate.model_validate({"handle": "c9"})

    def test_update_rejects_null_name(self):
        with pytest.raises(ValidationError):
            CompanyUpdate.model_validate({"name": None})


class TestJobPayloads:
    def test_new_valid(self):
        job = JobNew.model_validate({"title": "t", "salary": 5, "equity": "0.3", "companyHandle": "c1"})
        assert job.equity == "0.3"

    @pytest.mark.parametrize("equity", ["1.5", "-0.1", "abc", "NaN"])
    def test_new_rejects_bad_equity(self, equity):
        with pytest.raises(ValidationError):
            JobNew.model_validate({"title": "t", "equity": equity, "companyHandle": "c1"})

    def test_new_rejects_non_numeric_salary(self):
        with pytest.raises(ValidationError):
            JobNew.model_validate({"salary": "hello", "companyHandle": "c1", "title": "t"})

    @pytest.mark.parametrize("field", ["id", "companyHandle"])
    def test_update_rejects_fixed_fields(self, field):
        with pytest.raises(ValidationError):
            JobUpdate.model_validate({field: "c2"})

    def test_update_payload_is_sparse(self):
        assert JobUpdate.model_validate({"salary": 10}).to_payload() == {"salary": 10}


class TestFilters:
    def test_company_filters_drop_absent(self):
        filters = CompanyFilters(name="net", min_employees=None, max_employees=10)
        assert filters.to_payload() == {"name": "net", "maxEmployees": 10}

    def test_job_filters_keep_false(self):
        filters = JobFilters(has_equity=False)
        assert filters.to_payload() == {"hasEquity": False}

    def test_job_filters_empty(self):
        assert JobFilters().to_payload() == {}
