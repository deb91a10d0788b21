from py_steamid.exceptions import (
    InvalidAccountType, InvalidAccountUniverse, InvalidSteamID, OutOfRange, SteamIDCorrupted, SteamIDException,
    UnrecognizedFormat, Violation
)
from py_steamid.models import MAX, OFFSET, AccountType, AccountUniverse, SteamIDFormat, SteamUrl
from py_steamid.steamid import SteamID, classify, parse
