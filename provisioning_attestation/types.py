from enum import Enum
from typing import Optional, TYPE_CHECKING
from pydantic import BaseModel

from .errors import InvalidConfigurationError

if TYPE_CHECKING:
    from .mechanism import AttestationMechanism


class AttestationMechanismType(str, Enum):
    NONE = "none"
    TPM = "tpm"
    X509 = "x509"


class DecodeResult(BaseModel):
    mechanism: Optional["AttestationMechanism"] = None
    error: Optional[str] = None
    error_type: Optional[str] = None  # exception class name, e.g. "InvalidConfigurationError"

    @property
    def ok(self) -> bool:
        return self.mechanism is not None

    def unwrap(self) -> "AttestationMechanism":
        """Return the decoded mechanism or raise InvalidConfigurationError."""
        if self.mechanism is None:
            raise InvalidConfigurationError(self.error or "Attestation mechanism missing")
        return self.mechanism
