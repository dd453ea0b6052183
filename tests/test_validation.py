"""
Tests for schema validation helpers
"""
import pytest

from app.core.exceptions import BadRequestError
from app.core.validation import format_errors, validate
from app.schemas.company import CompanyNew, CompanySearchFilters, CompanyUpdate


def test_validate_returns_model():
    company = validate(CompanyNew, {"handle": "a", "name": "A", "numEmployees": 0})
    
    assert company.handle == "a"
    assert company.num_employees == 0


def test_validate_collects_messages_in_field_order():
    with pytest.raises(BadRequestError) as exc_info:
        validate(CompanyNew, {"numEmployees": -1})
    
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == [
        "instance.handle: Field required",
        "instance.name: Field required",
        "instance.numEmployees: Input should be greater than or equal to 0",
    ]


def test_validate_rejects_non_object():
    with pytest.raises(BadRequestError) as exc_info:
        validate(CompanyNew, None)
    
    assert exc_info.value.detail == ["instance: is not of a type(s) object"]


def test_new_company_handle_length():
    with pytest.raises(BadRequestError):
        validate(CompanyNew, {"handle": "x" * 26, "name": "X"})


def test_new_company_no_string_coercion():
    with pytest.raises(BadRequestError):
        validate(CompanyNew, {"handle": "a", "name": "A", "numEmployees": "5"})


def test_new_company_rejects_python_field_names():
    with pytest.raises(BadRequestError) as exc_info:
        validate(CompanyNew, {"handle": "a", "name": "A", "num_employees": 5})
    
    assert exc_info.value.detail == ["instance.num_employees: Extra inputs are not permitted"]


def test_logo_url_must_be_absolute():
    with pytest.raises(BadRequestError) as exc_info:
        validate(CompanyNew, {"handle": "a", "name": "A", "logoUrl": "/logo.png"})
    
    assert exc_info.value.detail == [
        "instance.logoUrl: does not conform to the 'uri' format"
    ]


def test_logo_url_kept_verbatim():
    company = validate(CompanyNew, {"handle": "a", "name": "A", "logoUrl": "https://a.io"})
    
    assert company.logo_url == "https://a.io"


def test_update_only_tracks_given_fields():
    patch = validate(CompanyUpdate, {"description": None})
    
    assert patch.model_dump(exclude_unset=True) == {"description": None}


def test_search_filters_min_greater_than_max():
    with pytest.raises(BadRequestError) as exc_info:
        validate(CompanySearchFilters, {"minEmployees": 10, "maxEmployees": 2})
    
    assert exc_info.value.detail == [
        "instance: minEmployees cannot be greater than maxEmployees."
    ]


def test_search_filters_equal_bounds_allowed():
    filters = validate(CompanySearchFilters, {"minEmployees": 2, "maxEmployees": 2})
    
    assert filters.min_employees == filters.max_employees == 2


def test_format_errors_root_location():
    assert format_errors([{"loc": (), "msg": "bad", "type": "custom"}]) == ["instance: bad"]
