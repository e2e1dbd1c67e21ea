"""Verification endpoint router."""

from fastapi import APIRouter, Depends, Request
import structlog

from mallu_api.app.dependencies import check_rate_limit, get_verification_service
from mallu_api.errors import VerificationFailedError, VerificationRequestError
from mallu_api.schemas.responses import ErrorResponse, VerificationResponse
from mallu_api.services.verification_service import VerificationService

router = APIRouter()
logger = structlog.get_logger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed, empty or non-JSON payload"},
    429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    500: {"model": ErrorResponse, "description": "Verification failed"},
}


@router.post("/verify-proof", response_model=VerificationResponse, responses=ERROR_RESPONSES)
async def verify_proof(
    request: Request,
    _: None = Depends(check_rate_limit),
    service: VerificationService = Depends(get_verification_service)
):
    """
    Classify the address history in a proof's publicData.

    The body must be ``{"publicData": {"address": [...]}}`` with at least one
    address. The response carries the tier, its score, the name to print on
    the card and the regional/total address counts.
    """

    request_logger = logger.bind(endpoint="verify_proof")
    request_logger.info("Verification request received")

    body = service.parse_body(await request.body())

    try:
        result = service.verify(body)
    except VerificationRequestError:
        raise
    except Exception as e:
        request_logger.error("Verification failed", error=str(e), exc_info=True)
        raise VerificationFailedError()

    request_logger.info("Verification completed", tier=result.tier_code.value, score=result.score)
    return VerificationResponse(**result.to_dict())


@router.post("/verify-proof/raw", response_model=VerificationResponse, responses=ERROR_RESPONSES)
async def verify_raw_proof(
    request: Request,
    _: None = Depends(check_rate_limit),
    service: VerificationService = Depends(get_verification_service)
):
    """
    Classify a raw proof as returned by the proof SDK.

    Accepts a single proof, a list of proofs (the first one is used) or a
    proof whose address data sits in the JSON-encoded ``claimData.context``.
    """

    request_logger = logger.bind(endpoint="verify_raw_proof")
    request_logger.info("Raw proof verification request received")

    proof = service.parse_body(await request.body())

    try:
        result = service.verify_proof(proof)
    except VerificationRequestError:
        raise
    except Exception as e:
        request_logger.error("Raw proof verification failed", error=str(e), exc_info=True)
        raise VerificationFailedError()

    request_logger.info("Raw proof verification completed", tier=result.tier_code.value, score=result.score)
    return VerificationResponse(**result.to_dict())
