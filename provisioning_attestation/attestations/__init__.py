from .base import Attestation
from .tpm import TpmAttestation
from .x509 import (
    X509Attestation,
    X509CAReferences,
    X509CertificateInfo,
    X509Certificates,
    X509CertificateWithInfo,
)

# Payload variants accepted by AttestationMechanism
# - TpmAttestation: TPM endorsement key (and optional storage root key)
# - X509Attestation: client certificates, signing certificates or CA references

__all__ = [
    "Attestation",
    "TpmAttestation",
    "X509Attestation",
    "X509CAReferences",
    "X509CertificateInfo",
    "X509Certificates",
    "X509CertificateWithInfo",
]
