import enum
from typing import Optional, Union


class Violation(enum.Enum):
    ID32_OUT_OF_RANGE = '32-bit SteamID is out of range'
    ID64_OUT_OF_RANGE = '64-bit SteamID is out of range'
    UNRECOGNIZED_FORMAT = 'unrecognized SteamID format'


class SteamIDException(ValueError):
    pass


class InvalidSteamID(SteamIDException):
    """
    Some input failed to parse into a SteamID.

    Attributes:
        input (str): the offending input as text.
        violation (Violation): the rule that was violated.

    """
    violation: Violation = Violation.UNRECOGNIZED_FORMAT

    def __init__(self, input: Union[str, int], violation: Optional[Violation] = None) -> None:
        self.input = str(input)
        if violation is not None:
            self.violation = violation

        super().__init__(self.input, self.violation)

    def __str__(self):
        return f'`{self.input}` is not a valid SteamID: {self.violation.value}.'


class OutOfRange(InvalidSteamID):
    violation = Violation.ID64_OUT_OF_RANGE


class UnrecognizedFormat(InvalidSteamID):
    pass


class InvalidAccountType(SteamIDException):
    pass


class InvalidAccountUniverse(SteamIDException):
    pass


class SteamIDCorrupted(AssertionError):
    pass
