"""Paper standard (structure template) of a research project."""

from enum import Enum

from capstone.domain.shared.exceptions import ErrorCode, ValidationError


class PaperStandard(str, Enum):
    IMRAD = "IMRAD"
    IAAA = "IAAA"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: str | None) -> "PaperStandard":
        """Parse a client-supplied value; matching is exact (case-sensitive).

        Raises
        ------
        ValidationError
            With code INVALID_PAPER_STANDARD when the value is not recognized
        """
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError(
                "Valid paper standard is required (IMRAD, IAAA, or custom)",
                code=ErrorCode.INVALID_PAPER_STANDARD,
                details={"value": value},
            ) from e
