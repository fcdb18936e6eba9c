"""Security identifier parsing.

Identifier tokens in universe files look like ``"AAPL R735QTJ8XC9X"``: the
symbol first seen for the security, a space, then a base36 integer whose
decimal digits pack the security type, market and first-listing date.
Derivatives append their underlying after ``|``.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from datetime import date, timedelta
from enum import IntEnum
from typing import Self

from wikiviews.core.exceptions import InvalidSecurityIdentifierError


# Digit layout of the packed properties integer: (offset, width)
_SECURITY_TYPE = (1, 100)
_MARKET = (100, 1000)
_DAYS = (10**14, 100000)

_MAX_PROPERTIES = 2**64 - 1

# OLE automation dates count days from 1899-12-30
_OA_EPOCH = date(1899, 12, 30)

_BASE36_DIGITS = string.digits + string.ascii_uppercase
_PROPERTIES_RE = re.compile(r"[0-9A-Za-z]+")


class SecurityType(IntEnum):
    """Asset class encoded in the identifier."""

    BASE = 0
    EQUITY = 1
    OPTION = 2
    COMMODITY = 3
    FOREX = 4
    FUTURE = 5
    CFD = 6
    CRYPTO = 7
    FUTURE_OPTION = 8
    INDEX = 9
    INDEX_OPTION = 10
    CRYPTO_FUTURE = 11


MARKETS: dict[int, str] = {
    0: "empty",
    1: "usa",
    2: "fxcm",
    3: "oanda",
    4: "dukascopy",
    5: "bitfinex",
    6: "globex",
    7: "nymex",
    8: "cbot",
    9: "ice",
    10: "cboe",
    11: "india",
    12: "gdax",
    13: "kraken",
    14: "bittrex",
    15: "bithumb",
    16: "binance",
    17: "poloniex",
    18: "coinone",
    19: "hitbtc",
    20: "okcoin",
    21: "bitstamp",
    22: "comex",
    23: "cme",
    24: "sgx",
    25: "hkfe",
    26: "nyseliffe",
}

_MARKET_CODES = {name: code for code, name in MARKETS.items()}


def _extract(properties: int, layout: tuple[int, int]) -> int:
    offset, width = layout
    return (properties // offset) % width


def _encode_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


@dataclass(frozen=True, slots=True)
class SecurityIdentifier:
    """A decoded security identifier.

    Attributes:
        symbol: Symbol the security was first listed under.
        properties: Packed properties integer (base36 in the token).
        underlying: Identifier of the underlying for derivatives.

    Example:
        >>> sid = parse_security_identifier("AAPL R735QTJ8XC9X")
        >>> sid.symbol, sid.market, sid.date.isoformat()
        ('AAPL', 'usa', '1998-01-02')
    """

    symbol: str
    properties: int
    underlying: SecurityIdentifier | None = None

    @classmethod
    def generate(
        cls,
        symbol: str,
        security_type: SecurityType,
        market: str,
        listed: date,
        underlying: SecurityIdentifier | None = None,
    ) -> Self:
        """Build an identifier from its components.

        Raises:
            ValueError: If the market is unknown or the date is out of range.
        """
        if market not in _MARKET_CODES:
            raise ValueError(f"Unknown market '{market}'")
        days = (listed - _OA_EPOCH).days
        if not 0 <= days < _DAYS[1]:
            raise ValueError(f"Date {listed} cannot be encoded")
        properties = (
            days * _DAYS[0]
            + _MARKET_CODES[market] * _MARKET[0]
            + int(security_type) * _SECURITY_TYPE[0]
        )
        return cls(symbol=symbol, properties=properties, underlying=underlying)

    @property
    def security_type(self) -> SecurityType:
        """The asset class of the security."""
        return SecurityType(_extract(self.properties, _SECURITY_TYPE))

    @property
    def market_code(self) -> int:
        """Numeric market code packed in the properties."""
        return _extract(self.properties, _MARKET)

    @property
    def market(self) -> str | None:
        """Market name the security trades on (e.g. "usa").

        None for codes outside MARKETS; the code itself is kept in market_code.
        """
        return MARKETS.get(self.market_code)

    @property
    def date(self) -> date:
        """First-listing date (or the data start date for old listings)."""
        return _OA_EPOCH + timedelta(days=_extract(self.properties, _DAYS))

    def __str__(self) -> str:
        token = f"{self.symbol} {_encode_base36(self.properties)}"
        if self.underlying is not None:
            return f"{token}|{self.underlying}"
        return token


def parse_security_identifier(token: str) -> SecurityIdentifier:
    """Parse an encoded identifier token.

    This is the default resolver used by the universe line decoder.

    Args:
        token: Token such as "AAPL R735QTJ8XC9X" or "SPY 31KC0UT9OBQ62|SPY R735QTJ8XC9X".

    Returns:
        The decoded SecurityIdentifier.

    Raises:
        InvalidSecurityIdentifierError: If the token is not a valid identifier.
    """
    if not token.strip():
        raise InvalidSecurityIdentifierError(token, "empty token")

    head, _, rest = token.partition("|")
    underlying = parse_security_identifier(rest) if rest else None

    # Runs of spaces count as one separator
    parts = [part for part in head.split(" ") if part]
    if len(parts) != 2:
        raise InvalidSecurityIdentifierError(
            token, "expected '<symbol> <properties>'"
        )

    symbol, encoded = parts
    if not _PROPERTIES_RE.fullmatch(encoded):
        raise InvalidSecurityIdentifierError(token, "properties are not base36")

    properties = int(encoded, 36)
    if properties > _MAX_PROPERTIES:
        raise InvalidSecurityIdentifierError(token, "properties overflow 64 bits")

    type_code = _extract(properties, _SECURITY_TYPE)
    if type_code not in SecurityType._value2member_map_:
        raise InvalidSecurityIdentifierError(
            token, f"unknown security type {type_code}"
        )

    return SecurityIdentifier(
        symbol=symbol, properties=properties, underlying=underlying
    )
