import enum

from py_steamid import exceptions

# Any valid SteamID is strictly greater than OFFSET and at most MAX.
OFFSET = 76561197960265728
MAX = 76561202255233023


class SteamUrl:
    COMMUNITY_URL = 'https://steamcommunity.com'
    PROFILES_URL = COMMUNITY_URL + '/profiles'


class SteamIDFormat(enum.Enum):
    """
    The textual shapes a SteamID can arrive in.

    Attributes:
        ID32: a bare community number, e.g. '322356345'.
        ID64: a bare packed 64-bit value, e.g. '76561198282622073'.
        STANDARD: e.g. 'STEAM_1:1:161178172'.
        COMMUNITY: e.g. '[U:1:322356345]' or 'U:1:322356345'.

    """
    ID32 = 'id32'
    ID64 = 'id64'
    STANDARD = 'standard'
    COMMUNITY = 'community'


class AccountUniverse(enum.IntEnum):
    Individual = 0
    Public = 1
    Beta = 2
    Internal = 3
    Dev = 4
    Rc = 5

    def __str__(self):
        return self.name

    @classmethod
    def from_name(cls, name: str) -> 'AccountUniverse':
        """
        Get an account universe by its case-insensitive name.

        Args:
            name (str): a name, e.g. 'public' or 'RC'.

        Returns:
            AccountUniverse: the account universe.

        Raises:
            InvalidAccountUniverse: if there is no universe with this name.

        """
        for universe in cls:
            if universe.name.lower() == name.lower():
                return universe

        raise exceptions.InvalidAccountUniverse(f'`{name}` is not a valid steam account universe.')


class AccountType(enum.IntEnum):
    Invalid = 0
    Individual = 1
    Multiseat = 2
    GameServer = 3
    AnonGameServer = 4
    Pending = 5
    ContentServer = 6
    Clan = 7
    Chat = 8
    P2PSuperSeeder = 9
    AnonUser = 10

    def __str__(self):
        return self.name

    @classmethod
    def from_name(cls, name: str) -> 'AccountType':
        """
        Get an account type by its case-insensitive name.

        Args:
            name (str): a name, e.g. 'individual' or 'GameServer'.

        Returns:
            AccountType: the account type.

        Raises:
            InvalidAccountType: if there is no account type with this name.

        """
        for account_type in cls:
            if account_type.name.lower() == name.lower():
                return account_type

        raise exceptions.InvalidAccountType(f'`{name}` is not a valid steam account type.')

    @classmethod
    def from_char(cls, char: str) -> 'AccountType':
        """
        Get an account type by the letter used in the community format. ('U' in '[U:1:322356345]')

        Args:
            char (str): the letter.

        Returns:
            AccountType: the account type.

        Raises:
            InvalidAccountType: if the letter doesn't denote an account type.

        """
        try:
            return TYPE_CHARS[char]

        except KeyError:
            raise exceptions.InvalidAccountType(f'`{char}` is not a valid steam account type.') from None


TYPE_CHARS = {
    'I': AccountType.Invalid,
    'i': AccountType.Invalid,
    'U': AccountType.Individual,
    'M': AccountType.Multiseat,
    'G': AccountType.GameServer,
    'A': AccountType.AnonGameServer,
    'P': AccountType.Pending,
    'C': AccountType.ContentServer,
    'g': AccountType.Clan,
    'T': AccountType.Chat,
    'L': AccountType.Chat,
    'c': AccountType.Chat,
    'a': AccountType.AnonUser,
}
