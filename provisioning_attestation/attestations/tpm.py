from typing import Optional
from pydantic import Field

from .base import Attestation


class TpmAttestation(Attestation):
    """TPM attestation: the endorsement key and, optionally, the storage root key.

    Keys are opaque base64 strings; they are stored as given and never decoded.
    """

    endorsement_key: str = Field(..., min_length=1)
    storage_root_key: Optional[str] = None
