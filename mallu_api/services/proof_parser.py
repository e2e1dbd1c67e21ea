"""Extraction of publicData from raw address proofs.

The proof SDK hands the client either a single proof object, a list of
proofs (cascading providers) or a JSON string. The address list lives in
``publicData`` or, for some providers, inside the JSON-encoded
``claimData.context``. Proof signatures are not checked here.
"""

import json
from typing import Any, Dict

import structlog

from mallu_api.errors import ProofFormatError

logger = structlog.get_logger(__name__)


def has_public_data(proof: Any) -> bool:
    """Whether a proof carries publicData with an address array."""
    if not isinstance(proof, dict):
        return False

    public_data = proof.get("publicData")
    if not isinstance(public_data, dict):
        return False

    return isinstance(public_data.get("address"), list)


def extract_public_data(payload: Any) -> Dict[str, Any]:
    """
    Locate the publicData object in a raw proof payload.

    Raises:
        ProofFormatError: if no publicData can be found
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError:
            raise ProofFormatError("Proof is not valid JSON")

    if isinstance(payload, list):
        if not payload:
            raise ProofFormatError("No proofs received")
        # Cascading providers: first proof wins
        payload = payload[0]

    if not isinstance(payload, dict):
        raise ProofFormatError("Invalid proof format received")

    if has_public_data(payload):
        return payload["publicData"]

    claim_data = payload.get("claimData")
    context = claim_data.get("context") if isinstance(claim_data, dict) else None
    if isinstance(context, str):
        try:
            parsed_context = json.loads(context)
        except ValueError:
            logger.warning("Unparseable claim context in proof")
            parsed_context = None

        if isinstance(parsed_context, dict) and isinstance(parsed_context.get("publicData"), dict):
            return parsed_context["publicData"]

    if "publicData" in payload:
        raise ProofFormatError("Proof received but publicData format is invalid")

    raise ProofFormatError("Proof received but could not extract address data")
