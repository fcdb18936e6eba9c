"""Unit tests for security identifier parsing."""

from __future__ import annotations

from datetime import date

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from wikiviews.core.exceptions import InvalidSecurityIdentifierError
from wikiviews.core.identifiers import (
    MARKETS,
    SecurityIdentifier,
    SecurityType,
    parse_security_identifier,
)


@pytest.mark.core
@pytest.mark.tier(0)
class TestParseSecurityIdentifier:
    """Tests for parse_security_identifier()."""

    def test_parses_equity(self) -> None:
        """Properties decode into type, market and listing date."""
        sid = parse_security_identifier("AAPL R735QTJ8XC9X")

        assert sid.symbol == "AAPL"
        assert sid.properties == 3579700000000000101
        assert sid.security_type is SecurityType.EQUITY
        assert sid.market == "usa"
        assert sid.date == date(1998, 1, 2)
        assert sid.underlying is None

    def test_str_round_trips(self) -> None:
        assert str(parse_security_identifier("AAPL R735QTJ8XC9X")) == "AAPL R735QTJ8XC9X"

    def test_lowercase_properties_accepted(self) -> None:
        """Base36 is case-insensitive; str() prints upper case."""
        sid = parse_security_identifier("aapl r735qtj8xc9x")

        assert sid.properties == 3579700000000000101
        assert str(sid) == "aapl R735QTJ8XC9X"

    def test_zero_properties(self) -> None:
        sid = parse_security_identifier("X 0")

        assert sid.security_type is SecurityType.BASE
        assert sid.market == "empty"
        assert sid.date == date(1899, 12, 30)

    def test_underlying_after_pipe(self) -> None:
        sid = parse_security_identifier("OPT R735QTJ8XC9X|AAPL R735QTJ8XC9X")

        assert sid.symbol == "OPT"
        assert sid.underlying is not None
        assert sid.underlying.symbol == "AAPL"
        assert str(sid) == "OPT R735QTJ8XC9X|AAPL R735QTJ8XC9X"

    def test_unknown_market_code_still_parses(self) -> None:
        """Codes outside the market table keep the identifier usable."""
        sid = parse_security_identifier("VX RCN1HSSIGKBP")

        assert sid.symbol == "VX"
        assert sid.security_type is SecurityType.EQUITY
        assert sid.market_code == 33
        assert sid.market is None
        assert sid.date == date(1998, 7, 24)
        assert str(sid) == "VX RCN1HSSIGKBP"

    @pytest.mark.parametrize(
        "token",
        ["AAPL  R735QTJ8XC9X", " AAPL R735QTJ8XC9X", "AAPL R735QTJ8XC9X  "],
    )
    def test_extra_spaces_are_ignored(self, token: str) -> None:
        sid = parse_security_identifier(token)

        assert sid.symbol == "AAPL"
        assert sid.properties == 3579700000000000101
        assert str(sid) == "AAPL R735QTJ8XC9X"

    @pytest.mark.parametrize(
        ("token", "reason"),
        [
            ("", "empty"),
            ("   ", "empty"),
            ("T", "expected"),
            ("A B C", "expected"),
            ("AAPL R735-QTJ8", "base36"),
            ("AAPL ZZZZZZZZZZZZZ", "64 bits"),
            ("X C", "security type 12"),
            ("OPT R735QTJ8XC9X|bad", "expected"),
        ],
    )
    def test_rejects_invalid_tokens(self, token: str, reason: str) -> None:
        with pytest.raises(InvalidSecurityIdentifierError, match=reason):
            parse_security_identifier(token)

    def test_error_keeps_token(self) -> None:
        with pytest.raises(InvalidSecurityIdentifierError) as exc_info:
            parse_security_identifier("T")

        assert exc_info.value.token == "T"


@pytest.mark.core
class TestGenerate:
    """Tests for SecurityIdentifier.generate()."""

    def test_generate_matches_known_token(self) -> None:
        sid = SecurityIdentifier.generate(
            "AAPL", SecurityType.EQUITY, "usa", date(1998, 1, 2)
        )

        assert str(sid) == "AAPL R735QTJ8XC9X"

    def test_unknown_market_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown market"):
            SecurityIdentifier.generate("X", SecurityType.EQUITY, "mars", date(2000, 1, 1))

    def test_date_before_epoch_rejected(self) -> None:
        with pytest.raises(ValueError, match="cannot be encoded"):
            SecurityIdentifier.generate(
                "X", SecurityType.EQUITY, "usa", date(1899, 12, 29)
            )

    @pytest.mark.property
    @settings(database=None)
    @given(
        symbol=st.text(
            alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.",
            min_size=1,
            max_size=8,
        ),
        security_type=st.sampled_from(SecurityType),
        market=st.sampled_from(sorted(MARKETS.values())),
        listed=st.dates(min_value=date(1899, 12, 30), max_value=date(2150, 12, 31)),
    )
    def test_generated_tokens_parse_back(
        self,
        symbol: str,
        security_type: SecurityType,
        market: str,
        listed: date,
    ) -> None:
        """Property: parse(str(generate(...))) recovers every component."""
        sid = SecurityIdentifier.generate(symbol, security_type, market, listed)

        parsed = parse_security_identifier(str(sid))

        assert parsed == sid
        assert parsed.security_type is security_type
        assert parsed.market == market
        assert parsed.date == listed
