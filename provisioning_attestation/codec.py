import json
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .config import CodecSettings
from .errors import InvalidConfigurationError
from .mechanism import AttestationMechanism
from .types import DecodeResult

logger = logging.getLogger(__name__)

WireInput = Union[str, bytes, Mapping[str, Any]]


class AttestationCodec:
    """Decodes and encodes attestation mechanisms at the JSON boundary."""

    def __init__(self, settings: Optional[CodecSettings] = None):
        self.settings = settings or CodecSettings()

    def _load(self, data: WireInput) -> Any:
        if isinstance(data, (str, bytes, bytearray)):
            try:
                return json.loads(data)
            except (ValueError, UnicodeDecodeError, RecursionError) as e:
                raise InvalidConfigurationError(
                    f"Attestation mechanism is not valid JSON: {e}"
                ) from e
        return data

    def decode(self, data: WireInput) -> AttestationMechanism:
        mechanism = AttestationMechanism.from_wire(self._load(data))
        logger.debug(f"Decoded {mechanism.type.value} attestation mechanism")
        return mechanism

    def try_decode(self, data: WireInput) -> DecodeResult:
        """Decode without raising; failures are reported on the result."""
        try:
            return DecodeResult(mechanism=self.decode(data))
        except InvalidConfigurationError as e:
            return DecodeResult(error=str(e), error_type=type(e).__name__)

    def decode_many(self, records: Iterable[WireInput]) -> List[DecodeResult]:
        return [self.try_decode(record) for record in records]

    def encode(self, mechanism: AttestationMechanism) -> Dict[str, Any]:
        return mechanism.to_wire(
            include_null_payloads=self.settings.include_null_payloads
        )

    def dumps(self, mechanism: AttestationMechanism) -> str:
        return json.dumps(self.encode(mechanism), indent=self.settings.indent)
