"""Unit tests for FIT power decoding."""

from unittest.mock import MagicMock, patch

import pytest
from fitparse import FitParseError

from metrics_bike.data.decoder import FitPowerDecoder
from metrics_bike.exceptions import DataLoadError, FitDecodeError


def record(power):
    message = MagicMock()
    message.get_value.side_effect = lambda name: power if name == "power" else None
    return message


class TestFitPowerDecoder:
    """Test extraction of the power field from record messages."""

    def test_power_values_in_file_order(self):
        fit = MagicMock()
        fit.get_messages.return_value = [record(210), record(225), record(198)]

        with patch("metrics_bike.data.decoder.FitFile", return_value=fit) as fit_file:
            samples = FitPowerDecoder().decode(b"raw")

        fit_file.assert_called_once_with(b"raw")
        fit.get_messages.assert_called_once_with("record")
        assert samples == [210.0, 225.0, 198.0]

    def test_missing_power_becomes_zero(self):
        fit = MagicMock()
        fit.get_messages.return_value = [record(200), record(None), record(205)]

        with patch("metrics_bike.data.decoder.FitFile", return_value=fit):
            samples = FitPowerDecoder().decode(b"raw")

        assert samples == [200.0, 0.0, 205.0]

    def test_no_records(self):
        fit = MagicMock()
        fit.get_messages.return_value = []

        with patch("metrics_bike.data.decoder.FitFile", return_value=fit):
            assert FitPowerDecoder().decode(b"raw") == []

    def test_parse_error_wrapped(self):
        with patch(
            "metrics_bike.data.decoder.FitFile",
            side_effect=FitParseError("Invalid .FIT File Header"),
        ):
            with pytest.raises(FitDecodeError, match="Invalid .FIT File Header"):
                FitPowerDecoder().decode(b"not a fit file")

    def test_decode_error_is_data_load_error(self):
        assert issubclass(FitDecodeError, DataLoadError)
