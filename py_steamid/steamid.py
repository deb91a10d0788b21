import functools
import logging
import re
from typing import Union

from pretty_utils.type_functions.classes import AutoRepr

from py_steamid import exceptions
from py_steamid.exceptions import Violation
from py_steamid.models import MAX, OFFSET, TYPE_CHARS, AccountType, AccountUniverse, SteamIDFormat, SteamUrl

logger = logging.getLogger(__name__)

# Example: STEAM_1:1:161178172
STANDARD_REGEX = re.compile(r'STEAM_[0-5]:[01]:\d+', re.ASCII)

# Example: [U:1:322356345] or U:1:322356345
COMMUNITY_REGEX = re.compile(r'\[[{chars}]:1:\d+\]|[{chars}]:1:\d+'.format(chars=''.join(TYPE_CHARS)), re.ASCII)

# Example: 322356345 or 76561198282622073
INTEGER_REGEX = re.compile(r'\d+', re.ASCII)

ID32_LIMIT = 2 ** 32
ACCOUNT_NUMBER_LIMIT = 2 ** 31


def classify(value: str) -> SteamIDFormat:
    """
    Determine which of the textual formats a SteamID is written in.

    Bare integers below 2^32 are community numbers, all larger integers are packed 64-bit values.

    Args:
        value (str): a SteamID as text.

    Returns:
        SteamIDFormat: the format.

    Raises:
        UnrecognizedFormat: if the text matches none of the formats.

    """
    if STANDARD_REGEX.fullmatch(value):
        return SteamIDFormat.STANDARD

    if COMMUNITY_REGEX.fullmatch(value):
        return SteamIDFormat.COMMUNITY

    if INTEGER_REGEX.fullmatch(value):
        if fits_digits(value, ID32_LIMIT) and int(value) < ID32_LIMIT:
            return SteamIDFormat.ID32

        return SteamIDFormat.ID64

    raise exceptions.UnrecognizedFormat(value)


def fits_digits(digits: str, limit: int) -> bool:
    """
    Check that a digit string has no more significant digits than the limit, so int() can convert it.
    """
    return len(digits.lstrip('0')) <= len(str(limit))


def to_int(digits: str, limit: int, input: str, violation: Violation) -> int:
    if not fits_digits(digits, limit):
        raise exceptions.OutOfRange(input, violation)

    return int(digits)


def check_int(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f'SteamID must be an int, not {type(value).__name__}')

    return value


def check_bounds(steamid64: int, input: Union[str, int], violation: Violation) -> int:
    """
    Make sure a packed value lies within (OFFSET, MAX].

    Args:
        steamid64 (int): the packed value.
        input (Union[str, int]): the input it was derived from, for the error.
        violation (Violation): the rule to report.

    Returns:
        int: the packed value.

    Raises:
        OutOfRange: if the value is out of bounds.

    """
    if not OFFSET < steamid64 <= MAX:
        raise exceptions.OutOfRange(input, violation)

    return steamid64


def id32_to_id64(id32: int, input: Union[str, int, None] = None) -> int:
    if input is None:
        input = id32

    if id32 < 0:
        raise exceptions.OutOfRange(input, Violation.ID32_OUT_OF_RANGE)

    return check_bounds(id32 + OFFSET, input, Violation.ID32_OUT_OF_RANGE)


def standard_to_id64(value: str) -> int:
    _, account_type, account_number = value[len('STEAM_'):].split(':')
    account_type = int(account_type)
    account_number = to_int(account_number, ACCOUNT_NUMBER_LIMIT, value, Violation.ID64_OUT_OF_RANGE)
    if account_number >= ACCOUNT_NUMBER_LIMIT:
        raise exceptions.OutOfRange(value, Violation.ID64_OUT_OF_RANGE)

    # The universe digit is cosmetic, the encoded universe is always Public.
    steamid64 = AccountUniverse.Public << 56 | 1 << 52 | 1 << 32 | account_number << 1 | account_type
    return check_bounds(steamid64, value, Violation.ID64_OUT_OF_RANGE)


def community_to_id64(value: str) -> int:
    id32 = value.strip('[]').rsplit(':', 1)[1]
    return id32_to_id64(to_int(id32, ID32_LIMIT, value, Violation.ID32_OUT_OF_RANGE), value)


PARSERS = {
    SteamIDFormat.ID32: lambda value: id32_to_id64(int(value), value),
    SteamIDFormat.ID64: lambda value: check_bounds(
        to_int(value, MAX, value, Violation.ID64_OUT_OF_RANGE), value, Violation.ID64_OUT_OF_RANGE
    ),
    SteamIDFormat.STANDARD: standard_to_id64,
    SteamIDFormat.COMMUNITY: community_to_id64,
}


def parse(value: str) -> int:
    """
    Convert a SteamID in any of the textual formats to the packed 64-bit value.

    Args:
        value (str): a SteamID as text.

    Returns:
        int: the packed 64-bit value.

    Raises:
        OutOfRange: if the SteamID is well-formed but out of bounds.
        UnrecognizedFormat: if the text matches none of the formats.

    """
    try:
        steamid_format = classify(value)
        logger.debug('%r classified as %s', value, steamid_format.value)
        return PARSERS[steamid_format](value)

    except exceptions.InvalidSteamID as e:
        logger.debug('%r rejected: %s', value, e.violation.value)
        raise


@functools.total_ordering
class SteamID(AutoRepr):
    """
    A unique identifier of a Steam account, stored as a packed 64-bit integer.

    The value is composed of an account universe (bits 56-63), an account number (bits 1-31) and an account type
    (bit 0). Instances are immutable, compare by their packed value and can be used as dict keys.

    Attributes:
        steamid64 (int): the packed 64-bit value.
        OFFSET (int): any valid SteamID is greater than this value.
        MAX (int): the largest valid SteamID.

    """
    OFFSET = OFFSET
    MAX = MAX

    steamid64: int

    def __init__(self, id: Union[str, int, 'SteamID']) -> None:
        """
        Initialize the class.

        Args:
            id (Union[str, int, SteamID]): a SteamID in one of the following formats:

            - 322356345 (a community number, any integer below 2^32)
            - 76561198282622073 (a packed 64-bit value)
            - STEAM_1:1:161178172 (the universe digit may be 0-5)
            - [U:1:322356345] or U:1:322356345

        Raises:
            OutOfRange: if the SteamID is well-formed but out of bounds.
            UnrecognizedFormat: if the SteamID is in none of the formats.
            TypeError: if the SteamID is neither a str nor an int.

        """
        if isinstance(id, SteamID):
            steamid64 = id.steamid64

        elif isinstance(id, int) and not isinstance(id, bool):
            steamid64 = int_to_id64(id)

        elif isinstance(id, str):
            steamid64 = parse(id)

        else:
            raise TypeError(f'SteamID must be a str or an int, not {type(id).__name__}')

        object.__setattr__(self, 'steamid64', steamid64)

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if isinstance(other, SteamID):
            return self.steamid64 == other.steamid64

        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, SteamID):
            return self.steamid64 < other.steamid64

        return NotImplemented

    def __hash__(self):
        return hash(self.steamid64)

    def __int__(self):
        return self.steamid64

    def __str__(self):
        return self.to_standard()

    @classmethod
    def from_standard(cls, value: str) -> 'SteamID':
        """
        Create an instance from the 'STEAM_1:1:161178172' format only.
        """
        if not STANDARD_REGEX.fullmatch(value):
            raise exceptions.UnrecognizedFormat(value)

        return cls._from_id64(standard_to_id64(value))

    @classmethod
    def from_community(cls, value: str) -> 'SteamID':
        """
        Create an instance from the '[U:1:322356345]' or 'U:1:322356345' format only.
        """
        if not COMMUNITY_REGEX.fullmatch(value):
            raise exceptions.UnrecognizedFormat(value)

        return cls._from_id64(community_to_id64(value))

    @classmethod
    def from_id32(cls, id32: int) -> 'SteamID':
        check_int(id32)
        if id32 >= ID32_LIMIT:
            raise exceptions.OutOfRange(id32, Violation.ID32_OUT_OF_RANGE)

        return cls._from_id64(id32_to_id64(id32))

    @classmethod
    def from_id64(cls, id64: int) -> 'SteamID':
        return cls._from_id64(check_bounds(check_int(id64), id64, Violation.ID64_OUT_OF_RANGE))

    @classmethod
    def from_int(cls, value: int) -> 'SteamID':
        """
        Create an instance from an integer, treating values below 2^32 as community numbers.
        """
        return cls._from_id64(int_to_id64(value))

    @classmethod
    def _from_id64(cls, steamid64: int) -> 'SteamID':
        steamid = cls.__new__(cls)
        object.__setattr__(steamid, 'steamid64', steamid64)
        return steamid

    @property
    def account_universe(self) -> AccountUniverse:
        try:
            return AccountUniverse(self.steamid64 >> 56)

        except ValueError:
            raise exceptions.SteamIDCorrupted(
                f'Internal SteamID {self.steamid64} is invalid: incorrect account universe.'
            ) from None

    @property
    def account_type(self) -> AccountType:
        try:
            return AccountType(self.steamid64 & 1)

        except ValueError:
            raise exceptions.SteamIDCorrupted(
                f'Internal SteamID {self.steamid64} is invalid: incorrect account type.'
            ) from None

    @property
    def account_number(self) -> int:
        """
        The last segment of the standard format. (161178172 in 'STEAM_1:1:161178172')
        """
        return ((self.steamid64 - OFFSET) - self.account_type) // 2

    @property
    def community_number(self) -> int:
        """
        The last segment of the community format. (322356345 in '[U:1:322356345]')
        """
        account_type = int(self.account_type)
        return ((self.account_number + account_type) * 2) - account_type

    @property
    def profile_url(self) -> str:
        return SteamUrl.PROFILES_URL + '/' + str(self.steamid64)

    def as_id64(self) -> int:
        return self.steamid64

    def to_standard(self) -> str:
        """
        Render the standard format. The universe digit is always 1.

        Returns:
            str: e.g. 'STEAM_1:1:161178172'.

        """
        return f'STEAM_1:{int(self.account_type)}:{self.account_number}'

    def to_community(self, brackets: bool = True) -> str:
        """
        Render the community format.

        Args:
            brackets (bool): wrap the result in square brackets. (True)

        Returns:
            str: e.g. '[U:1:322356345]'.

        """
        community = f'U:1:{self.community_number}'
        if brackets:
            return f'[{community}]'

        return community

    def to_id64(self) -> str:
        return str(self.steamid64)


def int_to_id64(value: int) -> int:
    check_int(value)
    if value < 0:
        raise exceptions.OutOfRange(value, Violation.ID32_OUT_OF_RANGE)

    if value < ID32_LIMIT:
        return id32_to_id64(value)

    return check_bounds(value, value, Violation.ID64_OUT_OF_RANGE)
