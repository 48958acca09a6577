from .types import AttestationMechanismType, DecodeResult
from .errors import (
    ProvisioningAttestationError,
    InvalidArgumentError,
    InvalidConfigurationError,
)
from .attestations import (
    Attestation,
    TpmAttestation,
    X509Attestation,
    X509CAReferences,
    X509CertificateInfo,
    X509Certificates,
    X509CertificateWithInfo,
)
from .mechanism import AttestationMechanism
from .builder import AttestationMechanismBuilder
from .config import CodecSettings, load_settings
from .codec import AttestationCodec

__all__ = [
    "AttestationMechanismType",
    "DecodeResult",
    "ProvisioningAttestationError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "Attestation",
    "TpmAttestation",
    "X509Attestation",
    "X509CAReferences",
    "X509CertificateInfo",
    "X509Certificates",
    "X509CertificateWithInfo",
    "AttestationMechanism",
    "AttestationMechanismBuilder",
    "CodecSettings",
    "load_settings",
    "AttestationCodec",
]
