"""Verification service: request validation and classification."""

import json
from typing import Any, List, Union

import structlog
from pydantic import ValidationError

from mallu_card.core.classifier import RegionClassifier
from mallu_card.models.address import Address, ClassificationResult
from mallu_api.errors import (
    EmptyAddressListError,
    InvalidJSONError,
    MalformedRequestError,
    VerificationRequestError,
)
from mallu_api.schemas.requests import VerifyProofRequest
from mallu_api.services.proof_parser import extract_public_data
from mallu_api.utils.metrics import metrics

logger = structlog.get_logger(__name__)


class VerificationService:
    """Validates verification payloads and runs the classifier once per request."""

    def __init__(self, classifier: RegionClassifier):
        self.classifier = classifier
        self.logger = logger.bind(component="verification_service")

    def parse_body(self, raw_body: Union[bytes, str]) -> Any:
        """Decode a JSON request body."""
        try:
            return json.loads(raw_body)
        except (ValueError, UnicodeDecodeError):
            error = InvalidJSONError()
            self._record_rejection(error)
            raise error

    def extract_addresses(self, body: Any) -> List[Address]:
        """
        Validate a verification payload and convert it to addresses.

        Raises:
            MalformedRequestError: publicData.address is missing or not an address array
            EmptyAddressListError: the address array is empty
        """
        try:
            request = VerifyProofRequest.model_validate(body)
        except ValidationError as e:
            self.logger.debug("Payload failed schema validation", errors=e.error_count())
            raise MalformedRequestError()

        if not request.public_data.address:
            raise EmptyAddressListError()

        return [payload.to_address() for payload in request.public_data.address]

    def verify(self, body: Any) -> ClassificationResult:
        """Classify the address history in a decoded publicData payload."""
        try:
            addresses = self.extract_addresses(body)
        except VerificationRequestError as e:
            self._record_rejection(e)
            raise

        metrics.addresses_per_request.observe(len(addresses))

        result = self.classifier.classify(addresses)
        metrics.classifications.labels(tier=result.tier_code.value).inc()

        return result

    def verify_proof(self, proof: Any) -> ClassificationResult:
        """Classify the address history carried by a raw proof."""
        try:
            public_data = extract_public_data(proof)
        except VerificationRequestError as e:
            self._record_rejection(e)
            raise

        return self.verify({"publicData": public_data})

    def _record_rejection(self, error: VerificationRequestError) -> None:
        self.logger.warning("Verification request rejected",
                            code=error.code,
                            reason=error.message)
        metrics.rejected_requests.labels(reason=error.code).inc()
