"""
Unit tests for the static reference catalogs.

Tests cover:
- HTTP method lookup (case-insensitive)
- Status code categories and filtering
- Glossary contents
"""

import pytest

from src.shared.core.exceptions import ReferenceNotFoundError
from src.shared.models.enums import StatusCategory
from src.shared.services.reference_service import ReferenceService, status_category


class TestHttpMethods:
    """HTTP method catalog."""

    def test_all_methods_listed(self):
        methods = [info.method for info in ReferenceService.list_methods()]

        assert methods == ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

    def test_lookup_is_case_insensitive(self):
        info = ReferenceService.get_method(" patch ")

        assert info.method == "PATCH"
        assert info.has_request_body
        assert not info.idempotent

    def test_safe_methods_are_idempotent(self):
        for info in ReferenceService.list_methods():
            if info.safe:
                assert info.idempotent, info.method

    def test_unknown_method(self):
        with pytest.raises(ReferenceNotFoundError):
            ReferenceService.get_method("BREW")


class TestStatusCodes:
    """Status code catalog."""

    @pytest.mark.parametrize(
        "code, category",
        [
            (100, StatusCategory.INFORMATIONAL),
            (204, StatusCategory.SUCCESS),
            (304, StatusCategory.REDIRECTION),
            (422, StatusCategory.CLIENT_ERROR),
            (599, StatusCategory.SERVER_ERROR),
        ],
    )
    def test_category_from_first_digit(self, code, category):
        assert status_category(code) == category

    @pytest.mark.parametrize("code", [99, 600, -1])
    def test_out_of_range(self, code):
        with pytest.raises(ValueError):
            status_category(code)

    def test_catalog_is_sorted_and_complete(self):
        codes = [info.code for info in ReferenceService.list_status_codes()]

        assert codes == sorted(codes)
        assert {200, 201, 204, 400, 401, 403, 404, 409, 413, 422, 500, 503} <= set(codes)

    def test_filter_by_category(self):
        infos = ReferenceService.list_status_codes(StatusCategory.SERVER_ERROR)

        assert infos
        assert all(500 <= info.code <= 599 for info in infos)

    def test_lookup(self):
        info = ReferenceService.get_status_code(404)

        assert info.phrase == "Not Found"
        assert info.category == StatusCategory.CLIENT_ERROR

    def test_valid_but_uncatalogued_code(self):
        with pytest.raises(ReferenceNotFoundError):
            ReferenceService.get_status_code(418)


def test_glossary_terms():
    terms = [entry.term for entry in ReferenceService.glossary()]

    assert terms[:4] == ["API", "REST", "HTTP verb", "Status code"]
    assert "Idempotent" in terms
    assert len(terms) == len(set(terms))
