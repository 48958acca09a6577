from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, Field, model_validator

from ..errors import InvalidArgumentError
from .base import Attestation, WireModel


class X509CertificateInfo(WireModel):
    """Certificate metadata as reported back by the provisioning service."""

    subject_name: str
    sha1_thumbprint: str
    sha256_thumbprint: str
    issuer_name: str
    not_before_utc: datetime
    not_after_utc: datetime
    serial_number: str
    version: int


class X509CertificateWithInfo(WireModel):
    # Clients send the PEM certificate; the service answers with its info.
    certificate: Optional[str] = None
    info: Optional[X509CertificateInfo] = None

    @model_validator(mode="after")
    def validate_has_content(self) -> "X509CertificateWithInfo":
        if self.certificate is None and self.info is None:
            raise ValueError("X509 certificate entry needs a certificate or its info")
        return self


class X509Certificates(WireModel):
    primary: X509CertificateWithInfo
    secondary: Optional[X509CertificateWithInfo] = None


class X509CAReferences(WireModel):
    primary: str = Field(..., min_length=1)
    secondary: Optional[str] = None


def _certificates(primary: str, secondary: Optional[str]) -> X509Certificates:
    if not primary:
        raise InvalidArgumentError("Primary certificate is required")
    return X509Certificates(
        primary=X509CertificateWithInfo(certificate=primary),
        secondary=X509CertificateWithInfo(certificate=secondary) if secondary else None,
    )


class X509Attestation(Attestation):
    """
    X.509 attestation. Exactly one certificate source is populated:
    client certificates, root (signing) certificates, or CA references.
    """

    client_certificates: Optional[X509Certificates] = None
    root_certificates: Optional[X509Certificates] = Field(
        default=None,
        alias="signingCertificates",
        validation_alias=AliasChoices("signingCertificates", "rootCertificates"),
    )
    ca_references: Optional[X509CAReferences] = None

    @model_validator(mode="after")
    def validate_single_source(self) -> "X509Attestation":
        sources = [
            source
            for source in (
                self.client_certificates,
                self.root_certificates,
                self.ca_references,
            )
            if source is not None
        ]
        if len(sources) != 1:
            raise ValueError(
                "X509 attestation must carry exactly one of clientCertificates, "
                f"signingCertificates or caReferences (got {len(sources)})"
            )
        return self

    @classmethod
    def create_from_client_certificates(
        cls, primary: str, secondary: Optional[str] = None
    ) -> "X509Attestation":
        return cls(client_certificates=_certificates(primary, secondary))

    @classmethod
    def create_from_root_certificates(
        cls, primary: str, secondary: Optional[str] = None
    ) -> "X509Attestation":
        return cls(root_certificates=_certificates(primary, secondary))

    @classmethod
    def create_from_ca_references(
        cls, primary: str, secondary: Optional[str] = None
    ) -> "X509Attestation":
        if not primary:
            raise InvalidArgumentError("Primary CA reference is required")
        return cls(ca_references=X509CAReferences(primary=primary, secondary=secondary))

    def _active_certificates(self) -> Optional[X509Certificates]:
        return self.client_certificates or self.root_certificates

    def get_primary_x509_certificate_info(self) -> Optional[X509CertificateInfo]:
        certificates = self._active_certificates()
        if certificates is None:
            return None
        return certificates.primary.info

    def get_secondary_x509_certificate_info(self) -> Optional[X509CertificateInfo]:
        certificates = self._active_certificates()
        if certificates is None or certificates.secondary is None:
            return None
        return certificates.secondary.info
