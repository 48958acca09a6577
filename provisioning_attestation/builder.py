from typing import Optional

from .attestations import TpmAttestation, X509Attestation
from .mechanism import AttestationMechanism


class AttestationMechanismBuilder:
    @classmethod
    def create_tpm_attestation(
        cls, endorsement_key: str, storage_root_key: Optional[str] = None
    ) -> AttestationMechanism:
        """
        Create an AttestationMechanism for TPM.

        endorsement_key: TPM endorsement key
        storage_root_key: optional storage root key
        """
        tpm = TpmAttestation(
            endorsement_key=endorsement_key, storage_root_key=storage_root_key
        )
        return AttestationMechanism.from_attestation(tpm)

    @classmethod
    def create_x509_attestation_client_certs(
        cls, cert1: str, cert2: Optional[str] = None
    ) -> AttestationMechanism:
        """Create an AttestationMechanism for X509 from primary/secondary client certificates."""
        x509 = X509Attestation.create_from_client_certificates(cert1, cert2)
        return AttestationMechanism.from_attestation(x509)

    @classmethod
    def create_x509_attestation_signing_certs(
        cls, cert1: str, cert2: Optional[str] = None
    ) -> AttestationMechanism:
        """Create an AttestationMechanism for X509 from primary/secondary signing (root) certificates."""
        x509 = X509Attestation.create_from_root_certificates(cert1, cert2)
        return AttestationMechanism.from_attestation(x509)

    @classmethod
    def create_x509_attestation_ca_refs(
        cls, ref1: str, ref2: Optional[str] = None
    ) -> AttestationMechanism:
        x509 = X509Attestation.create_from_ca_references(ref1, ref2)
        return AttestationMechanism.from_attestation(x509)
