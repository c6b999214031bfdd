"""Tests for the command-line grammar (core/parsing.py, core/models.py).

Parsing is pure, so these tests need no streams and no environment.
"""

from __future__ import annotations

import pytest

from clip_cli.core.models import ParsedInvocation
from clip_cli.core.parsing import parse_argv, parse_option


# ---------------------------------------------------------------------------
# parse_option
# ---------------------------------------------------------------------------

class TestParseOption:
    def test_flag_is_true(self) -> None:
        assert parse_option("--verbose") == ("verbose", True)

    def test_key_value(self) -> None:
        assert parse_option("--env=prod") == ("env", "prod")

    def test_splits_on_first_equals_only(self) -> None:
        assert parse_option("--url=http://x.com?a=b") == ("url", "http://x.com?a=b")

    def test_empty_value_is_empty_string(self) -> None:
        assert parse_option("--name=") == ("name", "")

    def test_empty_key(self) -> None:
        assert parse_option("--=value") == ("", "value")

    def test_bare_prefix(self) -> None:
        assert parse_option("--") == ("", True)


# ---------------------------------------------------------------------------
# parse_argv
# ---------------------------------------------------------------------------

class TestParseArgv:
    def test_program_only(self) -> None:
        parsed = parse_argv(["prog"])
        assert parsed.command == ""
        assert parsed.arguments == ()
        assert dict(parsed.options) == {}

    def test_empty_list(self) -> None:
        assert parse_argv([]) == ParsedInvocation()

    def test_command_only(self) -> None:
        parsed = parse_argv(["prog", "build"])
        assert parsed.command == "build"
        assert parsed.arguments == ()

    def test_greet_scenario(self) -> None:
        parsed = parse_argv(["prog", "greet", "Alice", "--loud"])
        assert parsed.command == "greet"
        assert parsed.arguments == ("Alice",)
        assert dict(parsed.options) == {"loud": True}

    def test_arguments_keep_order_and_duplicates(self) -> None:
        parsed = parse_argv(["prog", "copy", "b", "a", "b"])
        assert parsed.arguments == ("b", "a", "b")

    def test_mixed_arguments_and_options(self) -> None:
        parsed = parse_argv(
            ["prog", "deploy", "web", "--env=prod", "api", "--force"],
        )
        assert parsed.arguments == ("web", "api")
        assert dict(parsed.options) == {"env": "prod", "force": True}

    def test_last_option_wins(self) -> None:
        parsed = parse_argv(["prog", "run", "--level=1", "--level=2"])
        assert parsed.options["level"] == "2"

    def test_flag_then_value_overrides(self) -> None:
        parsed = parse_argv(["prog", "run", "--debug", "--debug=no"])
        assert parsed.options["debug"] == "no"

    def test_single_dash_is_argument(self) -> None:
        parsed = parse_argv(["prog", "ls", "-la", "-"])
        assert parsed.arguments == ("-la", "-")
        assert dict(parsed.options) == {}

    def test_option_looking_command_is_still_command(self) -> None:
        parsed = parse_argv(["prog", "--help"])
        assert parsed.command == "--help"
        assert dict(parsed.options) == {}

    def test_malformed_tokens_accepted(self) -> None:
        parsed = parse_argv(["prog", "cmd", "--=value", "--"])
        assert dict(parsed.options) == {"": True}

    @pytest.mark.parametrize(
        "argv",
        [
            ["prog"],
            ["prog", "greet", "Alice", "--loud"],
            ["prog", "x", "--a=b=c", "y", "--a", "z"],
        ],
    )
    def test_idempotent(self, argv: list[str]) -> None:
        assert parse_argv(argv) == parse_argv(argv)

    def test_does_not_mutate_input(self) -> None:
        argv = ["prog", "greet", "--loud"]
        parse_argv(argv)
        assert argv == ["prog", "greet", "--loud"]


# ---------------------------------------------------------------------------
# ParsedInvocation
# ---------------------------------------------------------------------------

class TestParsedInvocation:
    def test_frozen(self) -> None:
        parsed = parse_argv(["prog", "build"])
        with pytest.raises(AttributeError):
            parsed.command = "other"  # type: ignore[misc]

    def test_options_are_read_only(self) -> None:
        parsed = parse_argv(["prog", "build", "--fast"])
        with pytest.raises(TypeError):
            parsed.options["fast"] = False  # type: ignore[index]

    def test_defaults(self) -> None:
        parsed = ParsedInvocation()
        assert parsed.command == ""
        assert parsed.arguments == ()
        assert len(parsed.options) == 0
