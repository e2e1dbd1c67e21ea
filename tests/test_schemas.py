"""
Unit tests for Pydantic schemas.

Tests request validation, wire aliases and response constraints.
"""

import pytest
from pydantic import ValidationError

from mallu_card.models.address import TierCode
from mallu_api.schemas import AddressPayload, VerificationResponse, VerifyProofRequest


class TestAddressPayloadSchema:
    """Tests for AddressPayload schema."""

    def test_wire_fields(self):
        """Test address payload built from wire keys."""
        payload = AddressPayload.model_validate({
            "id": "a1",
            "address": "MG Road",
            "city": "Kochi",
            "addressCategory": 1,
            "name": "Arun",
        })

        address = payload.to_address()
        assert address.identifier == "a1"
        assert address.address_text == "MG Road"
        assert address.city == "Kochi"
        assert address.address_category == 1
        assert address.display_name == "Arun"
        assert address.is_primary is True

    def test_optional_fields_default(self):
        """Test only the identifier is needed."""
        address = AddressPayload.model_validate({"id": "a1"}).to_address()

        assert address.address_text == ""
        assert address.city is None
        assert address.address_category is None
        assert address.display_name is None

    def test_null_address_text_becomes_empty(self):
        """Test null address line is treated as empty."""
        address = AddressPayload.model_validate({"id": "a1", "address": None}).to_address()

        assert address.address_text == ""

    def test_numeric_identifier_coerced(self):
        """Test integer identifiers are accepted as strings."""
        assert AddressPayload.model_validate({"id": 7}).id == "7"

    @pytest.mark.parametrize("category", ["1", True, 1.0])
    def test_non_integer_category_rejected(self, category):
        """Test category must be a JSON integer, not a string, boolean or float."""
        with pytest.raises(ValidationError):
            AddressPayload.model_validate({"id": "1", "addressCategory": category})

    def test_null_category_accepted(self):
        assert AddressPayload.model_validate({"id": "1", "addressCategory": None}).address_category is None

    def test_invalid_category_rejected(self):
        with pytest.raises(ValidationError):
            AddressPayload.model_validate({"id": "1", "addressCategory": "home"})

    def test_non_object_rejected(self):
        with pytest.raises(ValidationError):
            AddressPayload.model_validate("MG Road, Kochi")


class TestVerifyProofRequestSchema:
    """Tests for VerifyProofRequest schema."""

    def test_valid_request(self, sample_public_data):
        request = VerifyProofRequest.model_validate({"publicData": sample_public_data})

        assert len(request.public_data.address) == 2

    def test_empty_address_list_is_structurally_valid(self):
        """Test emptiness is left to the service layer."""
        request = VerifyProofRequest.model_validate({"publicData": {"address": []}})

        assert request.public_data.address == []

    @pytest.mark.parametrize("body", [
        {},
        {"publicData": None},
        {"publicData": {}},
        {"publicData": {"address": "MG Road"}},
        {"publicData": {"address": {"id": "1"}}},
        [],
        "publicData",
    ])
    def test_malformed_requests_rejected(self, body):
        with pytest.raises(ValidationError):
            VerifyProofRequest.model_validate(body)


class TestVerificationResponseSchema:
    """Tests for VerificationResponse schema."""

    def test_serializes_with_aliases(self):
        response = VerificationResponse(
            is_regional=True,
            score=70,
            tier_code=TierCode.REGIONAL_WITH_EXCEPTIONS,
            tier_label="Mallu Explorer",
            display_name="Arun",
            regional_address_count=1,
            total_address_count=2,
        )

        data = response.model_dump(by_alias=True, mode="json")
        assert data["tierCode"] == "MALLU_EXPLORER"
        assert data["regionalAddressCount"] == 1
        assert data["isRegional"] is True

    def test_empty_display_name_rejected(self):
        with pytest.raises(ValidationError):
            VerificationResponse(
                isRegional=False,
                score=0,
                tierCode="NON_MALLU",
                tierLabel="Non-Mallu Civilian",
                displayName="",
                regionalAddressCount=0,
                totalAddressCount=1,
            )

    def test_score_range_validation(self):
        with pytest.raises(ValidationError):
            VerificationResponse(
                isRegional=True,
                score=101,
                tierCode="PURE_BRED_MALLU",
                tierLabel="Pure-Bred Malayali™",
                displayName="Arun",
                regionalAddressCount=1,
                totalAddressCount=1,
            )
