"""License plate normalization and validation."""

import re
from typing import Optional

from ..config import DEFAULT_PLATE_PATTERN


class PlateValidationError(ValueError):
    """Base class for park-in validation failures."""

    kind = "invalid"
    message = "⚠️ Invalid license plate"

    def __init__(self, plate: str = ""):
        super().__init__(f"{self.kind}: {plate!r}")
        self.plate = plate


class EmptyInput(PlateValidationError):
    kind = "empty_input"
    message = "⚠️ Please enter a license plate!"


class InvalidFormat(PlateValidationError):
    kind = "invalid_format"
    message = "⚠️ Invalid format! (e.g. 'ZH 12345')"


class DuplicateVehicle(PlateValidationError):
    kind = "duplicate_vehicle"
    message = "❌ Error: vehicle is already in the garage!"


def normalize_plate(raw: Optional[str]) -> str:
    """
    Strip surrounding whitespace and upper-case.

    Upper-casing is one character to one character: characters that only
    have a multi-character upper form ("ß" -> "SS", ligatures) are kept
    as they are, so they still fail the format check.
    """
    text = (raw or "").strip()
    return "".join(c.upper() if len(c.upper()) == 1 else c for c in text)


class PlateValidator:
    """Checks normalized plates against the configured format."""

    def __init__(self, pattern: str = DEFAULT_PLATE_PATTERN):
        self.pattern = re.compile(pattern)

    def validate(self, raw: Optional[str]) -> str:
        """
        Normalize and validate a raw plate.

        Returns:
            The normalized plate

        Raises:
            EmptyInput: If nothing but whitespace was entered
            InvalidFormat: If the plate does not match the pattern
        """
        plate = normalize_plate(raw)
        if not plate:
            raise EmptyInput(plate)
        if not self.pattern.fullmatch(plate):
            raise InvalidFormat(plate)
        return plate
