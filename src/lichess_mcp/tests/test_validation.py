"""Tests for argument validation: constraint types, defaults and error text."""

import pytest
from pydantic import Field

from lichess_mcp.foundation.errors import ErrorCode, ToolException
from lichess_mcp.gateway import FixedId, FreeText, Identifier, NoParams, ToolParams, id_list, validate_arguments
from lichess_mcp.tools.games import ExportGameParams, ExportUserGamesParams
from lichess_mcp.tools.tournaments import CreateSwissParams
from lichess_mcp.tools.users import LeaderboardParams


class SampleParams(ToolParams):
    user_name: Identifier = Field(description="Username")
    note: FreeText | None = None
    game_id: FixedId | None = None
    ids: id_list(3) | None = None
    limit: int = Field(default=10, ge=1, le=50)


def _fails(model: type[ToolParams], arguments: dict) -> ToolException:
    with pytest.raises(ToolException) as exc_info:
        validate_arguments("sample", model, arguments)
    assert exc_info.value.code == ErrorCode.VALIDATION_ERROR
    return exc_info.value


# ═══════════════════════════════════════════════════════════════════════════════
# Presence, trimming and defaults
# ═══════════════════════════════════════════════════════════════════════════════


def test_camel_case_aliases_and_defaults() -> None:
    params = validate_arguments("sample", SampleParams, {"userName": "thibault"})
    assert params.user_name == "thibault"
    assert params.limit == 10


def test_snake_case_names_also_accepted() -> None:
    assert validate_arguments("sample", SampleParams, {"user_name": "bob"}).user_name == "bob"


def test_missing_required_field_names_alias() -> None:
    err = _fails(SampleParams, {})
    assert err.error.message == "Invalid arguments for sample: userName is required"


def test_none_arguments_treated_as_empty() -> None:
    assert isinstance(validate_arguments("noop", NoParams, None), NoParams)
    _fails(SampleParams, None)  # type: ignore[arg-type]


def test_identifier_is_trimmed() -> None:
    assert validate_arguments("sample", SampleParams, {"userName": "  bob  "}).user_name == "bob"


def test_blank_identifier_rejected() -> None:
    err = _fails(SampleParams, {"userName": "   "})
    assert "userName cannot be empty" in err.error.message


def test_free_text_keeps_original_value() -> None:
    params = validate_arguments("sample", SampleParams, {"userName": "a", "note": "  hi there "})
    assert params.note == "  hi there "


def test_blank_free_text_rejected() -> None:
    err = _fails(SampleParams, {"userName": "a", "note": " \n "})
    assert "note cannot be empty" in err.error.message


def test_numbers_accepted_where_strings_expected() -> None:
    assert validate_arguments("sample", SampleParams, {"userName": 1234}).user_name == "1234"


def test_unknown_arguments_ignored() -> None:
    params = validate_arguments("sample", SampleParams, {"userName": "a", "bogus": True})
    assert not hasattr(params, "bogus")


def test_all_failures_reported_together() -> None:
    err = _fails(SampleParams, {"userName": "", "limit": 0})
    assert "userName cannot be empty" in err.error.message
    assert "limit must be at least 1" in err.error.message
    assert "; " in err.error.message


# ═══════════════════════════════════════════════════════════════════════════════
# Length, range, enum and list constraints
# ═══════════════════════════════════════════════════════════════════════════════


def test_fixed_id_length_seven_rejected() -> None:
    err = _fails(ExportGameParams, {"gameId": "abcdefg"})
    assert "gameId must be exactly 8 characters long" in err.error.message


def test_fixed_id_length_eight_accepted() -> None:
    assert validate_arguments("export_game", ExportGameParams, {"gameId": "abcdefgh"}).game_id == "abcdefgh"


def test_leaderboard_upper_bound() -> None:
    err = _fails(LeaderboardParams, {"nb": 500, "perfType": "blitz"})
    assert "nb must not exceed 200" in err.error.message


def test_leaderboard_default_nb() -> None:
    assert validate_arguments("get_leaderboard", LeaderboardParams, {"perfType": "blitz"}).nb == 100


def test_enum_membership() -> None:
    err = _fails(LeaderboardParams, {"perfType": "hyperBullet"})
    assert "perfType must be one of:" in err.error.message
    assert "'blitz'" in err.error.message


def test_id_list_limit() -> None:
    err = _fails(SampleParams, {"userName": "a", "ids": "a,b,c,d"})
    assert "ids accepts at most 3 comma-separated IDs, got 4" in err.error.message


def test_id_list_ignores_blank_items() -> None:
    params = validate_arguments("sample", SampleParams, {"userName": "a", "ids": "a,,b, ,c"})
    assert params.ids == "a,,b, ,c"


def test_timestamp_floor() -> None:
    err = _fails(ExportUserGamesParams, {"username": "bob", "since": 1000})
    assert "since must be at least 1356998400070" in err.error.message


# ═══════════════════════════════════════════════════════════════════════════════
# Cross-field checks
# ═══════════════════════════════════════════════════════════════════════════════


def test_since_after_until_rejected() -> None:
    err = _fails(ExportUserGamesParams, {"username": "bob", "since": 1700000000000, "until": 1600000000000})
    assert "since must not be later than until" in err.error.message


def test_swiss_clock_needs_both_fields() -> None:
    err = _fails(CreateSwissParams, {"teamId": "t", "name": "Weekly", "clock": {"limit": 180}})
    assert err.error.message == "Invalid arguments for sample: clock must specify both limit and increment"


def test_swiss_defaults() -> None:
    params = validate_arguments(
        "create_swiss", CreateSwissParams, {"teamId": "t", "name": "Weekly", "clock": {"limit": 180, "increment": 2}},
    )
    assert (params.nb_rounds, params.rated, params.variant, params.round_interval) == (7, True, "standard", 300)


# ═══════════════════════════════════════════════════════════════════════════════
# Encoding helpers
# ═══════════════════════════════════════════════════════════════════════════════


def test_pairs_in_requested_order_skipping_unset() -> None:
    params = validate_arguments(
        "export_user_games", ExportUserGamesParams,
        {"username": "bob", "max": 5, "pgnInJson": True, "rated": False},
    )
    assert params.pairs("rated", "since", "max", "pgn_in_json") == (
        ("rated", "false"), ("max", "5"), ("pgnInJson", "true"),
    )
