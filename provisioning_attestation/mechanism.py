from typing import Any, Dict, Mapping, Optional, Tuple, Type
from pydantic import ValidationError, model_validator

from .attestations import Attestation, TpmAttestation, X509Attestation
from .attestations.base import WireModel
from .errors import InvalidArgumentError, InvalidConfigurationError
from .types import AttestationMechanismType, DecodeResult

# Concrete payload class -> (discriminant, payload slot)
_SLOTS: Dict[Type[Attestation], Tuple[AttestationMechanismType, str]] = {
    TpmAttestation: (AttestationMechanismType.TPM, "tpm"),
    X509Attestation: (AttestationMechanismType.X509, "x509"),
}


class AttestationMechanism(WireModel):
    """
    Attestation mechanism of an enrollment: a TPM or an X.509 attestation.

    ``type`` names the active variant and exactly the matching payload slot is
    populated. Serialized records carry the tag and the payloads
    independently, so both are cross-checked on the way in.
    """

    type: AttestationMechanismType
    tpm: Optional[TpmAttestation] = None
    x509: Optional[X509Attestation] = None

    @model_validator(mode="before")
    @classmethod
    def validate_type_matches_payload(cls, data: Any) -> Any:
        if isinstance(data, AttestationMechanism):
            return data
        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                f"Attestation mechanism must be a JSON object, got {type(data).__name__}"
            )

        kind = data.get("type")
        if kind == AttestationMechanismType.TPM:
            if data.get("tpm") is None:
                raise InvalidConfigurationError(
                    "Attestation mechanism type is tpm but the tpm attestation is missing"
                )
            # Any x509 payload next to a tpm tag is dropped, not validated.
            return {"type": AttestationMechanismType.TPM, "tpm": data["tpm"]}
        if kind == AttestationMechanismType.X509:
            if data.get("x509") is None:
                raise InvalidConfigurationError(
                    "Attestation mechanism type is x509 but the x509 attestation is missing"
                )
            return {"type": AttestationMechanismType.X509, "x509": data["x509"]}
        raise InvalidConfigurationError(f"Unknown attestation mechanism type: {kind!r}")

    @classmethod
    def from_attestation(cls, attestation: Attestation) -> "AttestationMechanism":
        """Wrap a TpmAttestation or X509Attestation, recording its type."""
        if attestation is None:
            raise InvalidArgumentError("Attestation cannot be None")
        slot = _SLOTS.get(type(attestation))
        if slot is None:
            raise InvalidArgumentError(
                f"Unknown attestation type: {type(attestation).__name__}"
            )
        kind, field = slot
        return cls(**{"type": kind, field: attestation})

    @classmethod
    def from_wire(cls, record: Mapping[str, Any]) -> "AttestationMechanism":
        """
        Build a mechanism from a deserialized JSON object.

        Raises InvalidConfigurationError if the type tag is unknown, if the
        payload matching the tag is missing, or if that payload is malformed.
        """
        if not isinstance(record, Mapping):
            raise InvalidConfigurationError(
                f"Attestation mechanism must be a JSON object, got {type(record).__name__}"
            )
        try:
            return cls.model_validate(dict(record))
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid attestation mechanism: {e}") from e

    @classmethod
    def try_from_wire(cls, record: Mapping[str, Any]) -> DecodeResult:
        try:
            return DecodeResult(mechanism=cls.from_wire(record))
        except InvalidConfigurationError as e:
            return DecodeResult(error=str(e), error_type=type(e).__name__)

    def get_attestation(self) -> Attestation:
        if self.type == AttestationMechanismType.TPM:
            return self.tpm
        if self.type == AttestationMechanismType.X509:
            return self.x509
        raise InvalidConfigurationError(
            f"Unknown attestation mechanism type: {self.type!r}"
        )

    def to_wire(self, include_null_payloads: bool = False) -> Dict[str, Any]:
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if include_null_payloads:
            payload.setdefault("tpm", None)
            payload.setdefault("x509", None)
        return payload


DecodeResult.model_rebuild()
