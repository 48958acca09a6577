"""Exceptions raised while building or decoding attestation mechanisms."""


class ProvisioningAttestationError(Exception):
    """Base class for provisioning attestation errors"""
    pass


class InvalidArgumentError(ProvisioningAttestationError, ValueError):
    """Raised when a typed attestation value is missing or of an unknown kind"""
    pass


class InvalidConfigurationError(ProvisioningAttestationError):
    """Raised when serialized attestation data is inconsistent or unrecognized.

    Not a ValueError subclass: raised from a pydantic validator it propagates
    as-is instead of being folded into a ValidationError.
    """
    pass
