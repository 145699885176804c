class PakrIecError(Exception):
    pass


class NegativeMagnitudeError(PakrIecError, ValueError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"magnitude must be non-negative, got {value}")


class MagnitudeOutOfRangeError(PakrIecError, ValueError):
    """
    Raised when a magnitude needs a suffix beyond yotta/yobi.

    Attributes:
        value: The magnitude that was passed in
        base: 1000 for decimal, 1024 for IEC
        max_value: Largest magnitude that still formats for this base
    """

    def __init__(self, value: int, base: int, max_value: int):
        self.value = value
        self.base = base
        self.max_value = max_value
        super().__init__(
            f"magnitude {value} is out of range for base {base} (max {max_value})"
        )


class InvalidEnvironmentVariable(PakrIecError):
    pass
