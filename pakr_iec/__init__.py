from pakr_iec.errors import (
    MagnitudeOutOfRangeError,
    NegativeMagnitudeError,
    PakrIecError,
)
from pakr_iec.human_iec import (
    DECIMAL_SUFFIXES,
    IEC_SUFFIXES,
    HumanIEC,
    decimal,
    format_magnitude,
    iec,
)

__all__ = [
    "DECIMAL_SUFFIXES",
    "IEC_SUFFIXES",
    "HumanIEC",
    "MagnitudeOutOfRangeError",
    "NegativeMagnitudeError",
    "PakrIecError",
    "decimal",
    "format_magnitude",
    "iec",
]
