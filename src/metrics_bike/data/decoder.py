"""
FIT file decoding.

Extracts the per-second power series from the ``record`` messages of a FIT
file using fitparse.
"""

import logging
from typing import Protocol

from fitparse import FitFile, FitParseError

from ..exceptions import FitDecodeError

logger = logging.getLogger(__name__)


class PowerDecoderProtocol(Protocol):
    """Protocol for power series decoders."""

    def decode(self, data: bytes) -> list[float]:
        """Decode raw file bytes into an ordered power sample series."""
        ...


class FitPowerDecoder:
    """Decodes the power field of FIT ``record`` messages."""

    field_name = "power"

    def decode(self, data: bytes) -> list[float]:
        """
        Decode FIT bytes into power samples in file order.

        Records without a power value contribute 0, matching the placeholder
        used for sensor dropouts.

        Args:
            data: Raw FIT file content

        Returns:
            Power samples in watts, one per record message

        Raises:
            FitDecodeError: If the file cannot be parsed
        """
        try:
            fit = FitFile(data)
            samples = [
                self._as_watts(message.get_value(self.field_name))
                for message in fit.get_messages("record")
            ]
        except (FitParseError, ValueError, TypeError, EOFError) as e:
            raise FitDecodeError(f"Failed to decode FIT file: {e}") from e

        logger.debug(f"Decoded {len(samples)} power samples")
        return samples

    @staticmethod
    def _as_watts(value) -> float:
        if value is None:
            return 0.0
        return float(value)
