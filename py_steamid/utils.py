import json
from typing import Any, Union

from py_steamid.steamid import SteamID


def extract_steamid(value: Union[str, int, SteamID]) -> SteamID:
    """
    Convert a value taken from a JSON document to a SteamID.

    Args:
        value (Union[str, int, SteamID]): a JSON number (a community number or a packed 64-bit value) or a JSON
            string in any of the textual formats.

    Returns:
        SteamID: the SteamID.

    Raises:
        OutOfRange: if the SteamID is well-formed but out of bounds.
        UnrecognizedFormat: if the string is in none of the textual formats.
        TypeError: if the value is neither a number nor a string.

    """
    if isinstance(value, SteamID):
        return value

    if isinstance(value, int) and not isinstance(value, bool):
        return SteamID.from_int(value)

    if isinstance(value, str):
        return SteamID(value)

    raise TypeError(f'Expected a JSON number or string, got {type(value).__name__}')


def steamid_to_json(steamid: SteamID) -> str:
    return steamid.to_standard()


class SteamIDEncoder(json.JSONEncoder):
    """
    JSON encoder that writes SteamIDs in the standard format.

    Examples:
        json.dumps({'steam_id': SteamID('76561198282622073')}, cls=SteamIDEncoder)

    """

    def default(self, o: Any) -> Any:
        if isinstance(o, SteamID):
            return steamid_to_json(o)

        return super().default(o)


def loads_steamid(text: Union[str, bytes]) -> SteamID:
    """
    Decode a JSON document that holds a single SteamID, e.g. '"STEAM_1:1:161178172"' or '322356345'.
    """
    return extract_steamid(json.loads(text))
