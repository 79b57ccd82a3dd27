"""Unit tests for case request field checks."""

import pytest

from legal_case_service.core import validate_case_request
from legal_case_service.exceptions import InvalidArgumentError
from legal_case_service.models import CaseRequest, CaseStatus

from helpers import make_request


def assert_rejected(request, message):
    with pytest.raises(InvalidArgumentError) as exc_info:
        validate_case_request(request)
    assert exc_info.value.message == message
    assert exc_info.value.status_code == 400


@pytest.mark.unit
class TestCaseNumber:
    """Case number format rules"""

    def test_valid_request_passes(self):
        validate_case_request(make_request())

    def test_missing_request_rejected(self):
        assert_rejected(None, "Case request cannot be null")

    @pytest.mark.parametrize("case_number", [None, "", "   "])
    def test_blank_case_number_rejected(self, case_number):
        assert_rejected(make_request(case_number=case_number), "Case number is required")

    @pytest.mark.parametrize("case_number", ["ab12", "A", "AB-12", "A" * 21, "AB 12"])
    def test_malformed_case_number_rejected(self, case_number):
        assert_rejected(
            make_request(case_number=case_number),
            "Case number must be 2-20 characters long and contain only uppercase letters and numbers",
        )

    @pytest.mark.parametrize("case_number", ["AB", "AB12", "12345", "A" * 20])
    def test_well_formed_case_number_accepted(self, case_number):
        validate_case_request(make_request(case_number=case_number))


@pytest.mark.unit
class TestTitleStatusDescription:
    """Title, status and description rules"""

    @pytest.mark.parametrize("title", [None, "", "  "])
    def test_blank_title_rejected(self, title):
        assert_rejected(make_request(title=title), "Case title is required")

    @pytest.mark.parametrize("title", ["ab", "x" * 101])
    def test_title_length_out_of_range_rejected(self, title):
        assert_rejected(make_request(title=title), "Title must be between 3 and 100 characters")

    @pytest.mark.parametrize("title", ["abc", "x" * 100])
    def test_title_length_boundaries_accepted(self, title):
        validate_case_request(make_request(title=title))

    def test_missing_status_rejected(self):
        assert_rejected(make_request(status=None), "Case status is required")

    def test_description_too_long_rejected(self):
        assert_rejected(make_request(description="d" * 501), "Description cannot exceed 500 characters")

    def test_description_optional(self):
        validate_case_request(make_request(description=None))
        validate_case_request(make_request(description="d" * 500))

    def test_first_failing_rule_reported(self):
        request = CaseRequest(case_number="bad", title="x", status=None)
        assert_rejected(
            request,
            "Case number must be 2-20 characters long and contain only uppercase letters and numbers",
        )

    def test_status_parsed_from_wire_name(self):
        request = CaseRequest.model_validate({"caseNumber": "AB12", "title": "Title", "status": "ON_HOLD"})
        assert request.status is CaseStatus.ON_HOLD
        validate_case_request(request)
