"""
Example Usage:

from pakr_iec import decimal, iec

decimal(1) # '1.0'
iec(1) # '1.0'
decimal(1000) # '1.0k'
iec(1024) # '1.0ki'
decimal(10_000_000) # '10.0M'
iec(10 * 1024 * 1024) # '10.0Mi'
decimal(1_000_000_000_000_000_000_000_000) # '1.0Y'
iec(1_208_925_819_614_629_174_706_176) # '1.0Yi'
"""

from typing import Literal

from pakr_iec.errors import MagnitudeOutOfRangeError, NegativeMagnitudeError

MODE_TYPE = Literal["decimal", "iec"]

DECIMAL_SUFFIXES = ("", "k", "M", "G", "T", "P", "E", "Z", "Y")
IEC_SUFFIXES = ("", "ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi")


class HumanIEC:
    """
    Formats integer magnitudes with decimal (1000 is 1.0k) or IEC (1024 is 1.0ki)
    suffixes up to yotta/yobi, always with exactly one fractional digit.

    The fractional digit is truncated, never rounded, and only the remainder
    of the last division step contributes to it.
    """

    DECIMAL_LABELS = DECIMAL_SUFFIXES
    IEC_LABELS = IEC_SUFFIXES
    DECIMAL_UNIT = 1000
    IEC_UNIT = 1024

    @staticmethod
    def max_value(unit: int, labels: tuple[str, ...]) -> int:
        """Largest magnitude that fits in `labels` when scaling by `unit`."""
        return unit ** len(labels) - 1

    @staticmethod
    def check_magnitude(value: int, unit: int, labels: tuple[str, ...]) -> None:
        # bool is an int subclass but True is not a magnitude
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"magnitude must be an int, got {type(value).__name__!r}")
        if value < 0:
            raise NegativeMagnitudeError(value)
        max_value = HumanIEC.max_value(unit, labels)
        if value > max_value:
            raise MagnitudeOutOfRangeError(value, base=unit, max_value=max_value)

    @staticmethod
    def decimal(value: int) -> str:
        """
        Format value with decimal multipliers (1000 increments) and one decimal place.

        Args:
            value: Non-negative magnitude, below 1000**9

        Returns:
            String like "999.0", "1.1k" or "10.0M"

        Raises:
            TypeError: If value is not an int
            NegativeMagnitudeError: If value is negative
            MagnitudeOutOfRangeError: If value needs a suffix beyond "Y"
        """
        labels = HumanIEC.DECIMAL_LABELS
        unit = HumanIEC.DECIMAL_UNIT
        HumanIEC.check_magnitude(value, unit, labels)

        step = 0
        tenths = 0
        while value >= unit and step < len(labels):
            step += 1
            # leading digit of this step's remainder, earlier steps are dropped
            tenths = (value % unit) // 100
            value //= unit

        return f"{value}.{tenths}{labels[step]}"

    @staticmethod
    def iec(value: int) -> str:
        """
        Format value with IEC multipliers (1024 increments) and one decimal place.

        The last remainder (0..1023) is turned into a digit with integer math,
        so 1024 + 102 is still "1.0ki" and the break to "1.1ki" is at 1024 + 103.

        Raises:
            TypeError: If value is not an int
            NegativeMagnitudeError: If value is negative
            MagnitudeOutOfRangeError: If value needs a suffix beyond "Yi"
        """
        labels = HumanIEC.IEC_LABELS
        unit = HumanIEC.IEC_UNIT
        HumanIEC.check_magnitude(value, unit, labels)

        step = 0
        remainder = 0
        while value >= unit and step < len(labels):
            step += 1
            remainder = value % unit
            value //= unit
        tenths = 10 * remainder // unit

        return f"{value}.{tenths}{labels[step]}"


def decimal(value: int) -> str:
    return HumanIEC.decimal(value)


def iec(value: int) -> str:
    return HumanIEC.iec(value)


def format_magnitude(value: int, mode: MODE_TYPE = "decimal") -> str:
    """Formats `value` with `decimal` or `iec` depending on `mode`."""
    if mode == "decimal":
        return decimal(value)
    elif mode == "iec":
        return iec(value)
    else:
        raise ValueError(f"Invalid mode {mode!r}. Choose from 'decimal' or 'iec'.")
