"""Tests for the command-line shell."""

import io

import pytest
from rich.console import Console

from src.fair_rps.cli.main import (
    EXIT_CHOICE,
    HELP_CHOICE,
    main,
    parse_menu_choice,
    run_game,
    split_arguments,
    verify_main,
)
from src.fair_rps.core import (
    GameSession,
    InvalidInput,
    MoveSet,
    ProtocolError,
    commit,
    verify,
)
from src.fair_rps.utils import GameDisplay

CLASSIC = MoveSet(["rock", "paper", "scissors"])


def make_console():
    return Console(file=io.StringIO(), width=200, color_system=None)


def scripted(*lines):
    """read_line stand-in returning the given lines, then EOF."""
    remaining = list(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read_line.prompts = prompts
    return read_line


def field(text, name):
    """Value printed after 'name: ' in the console output."""
    for line in text.splitlines():
        if line.startswith(f"{name}: "):
            return line[len(name) + 2:].strip()
    raise AssertionError(f"{name} not found in output")


def test_parse_menu_choice():
    """Test menu input routing."""
    assert parse_menu_choice("0", CLASSIC) == EXIT_CHOICE
    assert parse_menu_choice(" ? ", CLASSIC) == HELP_CHOICE
    assert parse_menu_choice("1", CLASSIC) == CLASSIC.move_named("rock")
    assert parse_menu_choice("3\n", CLASSIC) == CLASSIC.move_named("scissors")


@pytest.mark.parametrize("raw", ["4", "-1", "rock", "1.5", "01a", "²"])
def test_parse_menu_choice_invalid(raw):
    """Test unrecognized input raises InvalidInput."""
    with pytest.raises(InvalidInput):
        parse_menu_choice(raw, CLASSIC)


@pytest.mark.parametrize(
    "argv",
    [
        ["rock", "paper"],
        ["rock", "paper", "scissors", "lizard"],
        ["rock"],
        [],
        ["rock", "paper", "rock"],
    ],
)
def test_bad_configuration_exits_nonzero(argv):
    """Test invalid move lists fail before any commitment is shown."""
    output = make_console()
    errors = make_console()
    read_line = scripted("1")

    assert main(argv, output=output, errors=errors, read_line=read_line) == 1

    assert "Error" in errors.file.getvalue()
    assert "HMAC" not in output.file.getvalue()
    assert read_line.prompts == []


def test_play_round():
    """Test a full round prints tag, moves, outcome and a verifying key."""
    output = make_console()
    read_line = scripted("2")

    assert main(["rock", "paper", "scissors"], output=output, read_line=read_line) == 0

    text = output.file.getvalue()
    tag = field(text, "HMAC")
    key = field(text, "HMAC key")
    computer_move = field(text, "Computer move")

    assert field(text, "Your move") == "paper"
    assert any(msg in text for msg in ("You win!", "Computer wins!", "Draw"))
    assert verify(tag, key, computer_move)
    assert commit(key, computer_move) == tag


def test_tag_shown_before_prompt():
    """Test the HMAC is printed before the first move prompt."""
    output = make_console()
    seen_at_prompt = []

    def read_line(prompt):
        seen_at_prompt.append(output.file.getvalue())
        return "0"

    main(["rock", "paper", "scissors"], output=output, read_line=read_line)

    assert "HMAC:" in seen_at_prompt[0]
    assert "1 - rock" in seen_at_prompt[0]


def test_exit_choice():
    """Test 0 exits cleanly without revealing the key."""
    output = make_console()

    assert main(["a", "b", "c"], output=output, read_line=scripted("0")) == 0

    text = output.file.getvalue()
    assert "Exiting the game." in text
    assert "HMAC key" not in text


def test_help_then_play():
    """Test ? shows the table and re-prompts."""
    output = make_console()
    read_line = scripted("?", "1")

    assert main(["rock", "paper", "scissors"], output=output, read_line=read_line) == 0

    text = output.file.getvalue()
    assert "Win" in text and "Lose" in text
    assert len(read_line.prompts) == 2
    assert "HMAC key" in text


def test_invalid_input_reprompts():
    """Test bad input shows an error and asks again."""
    output = make_console()
    read_line = scripted("banana", "9", "3")

    assert main(["rock", "paper", "scissors"], output=output, read_line=read_line) == 0

    text = output.file.getvalue()
    assert text.count("Invalid input") == 2
    assert len(read_line.prompts) == 3
    assert field(text, "Your move") == "scissors"


@pytest.mark.parametrize("lines", [(), ("",), ("   ",)])
def test_eof_or_empty_input_fails(lines):
    """Test EOF or an empty line ends the game with failure."""
    output = make_console()

    assert main(["rock", "paper", "scissors"], output=output, read_line=scripted(*lines)) == 1
    assert "HMAC key" not in output.file.getvalue()


def test_labels_with_markup_characters():
    """Test labels are printed literally."""
    output = make_console()

    main(["[red]", "[/x]", "plain"], output=output, read_line=scripted("?", "2"))

    text = output.file.getvalue()
    assert "1 - [red]" in text
    assert field(text, "Your move") == "[/x]"


def test_verify_main():
    """Test the verify command accepts a real reveal and rejects a forged one."""
    key = "ab" * 32
    tag = commit(key, "rock")

    assert verify_main(["--key", key, "--move", "rock", "--tag", tag], output=make_console()) == 0
    assert verify_main(["--key", key, "--move", "paper", "--tag", tag], output=make_console()) == 1


def test_split_arguments():
    """Test options are only taken from before the first move."""
    assert split_arguments(["rock", "paper", "scissors"]) == ([], ["rock", "paper", "scissors"])
    assert split_arguments(["--log-level", "DEBUG", "--rich-logging", "a", "b", "c"]) == (
        ["--log-level", "DEBUG", "--rich-logging"],
        ["a", "b", "c"],
    )
    assert split_arguments(["--log-level=INFO", "a", "--rich-logging", "c"]) == (
        ["--log-level=INFO"],
        ["a", "--rich-logging", "c"],
    )
    assert split_arguments(["--", "--rich-logging", "-h", "x"]) == ([], ["--rich-logging", "-h", "x"])


@pytest.mark.parametrize(
    "argv, labels",
    [
        (["-a", "-b", "-c"], ["-a", "-b", "-c"]),
        (["rock", "--rich", "paper", "scissors", "lizard"], ["rock", "--rich", "paper", "scissors", "lizard"]),
        (["--log-level", "INFO", "rock", "-", "-x"], ["rock", "-", "-x"]),
        (["--", "--log-level", "-x", "y"], ["--log-level", "-x", "y"]),
    ],
)
def test_dash_prefixed_labels(argv, labels):
    """Test labels that look like options are played as moves."""
    output = make_console()

    assert main(argv, output=output, read_line=scripted("1")) == 0

    text = output.file.getvalue()
    for label in labels:
        assert f" - {label}" in text
    assert field(text, "Your move") == labels[0]


def test_bad_configuration_mentions_dash_hint():
    """Test the usage error explains how to pass dash-prefixed moves."""
    errors = make_console()

    assert main(["-a", "-b"], output=make_console(), errors=errors) == 1
    assert "Put -- before the moves" in errors.file.getvalue()


def test_key_discarded_on_unexpected_error():
    """Test the commitment is dropped when reading input fails."""
    session = GameSession(CLASSIC)

    def read_line(prompt):
        raise OSError("terminal went away")

    with pytest.raises(OSError):
        run_game(session, GameDisplay(make_console()), read_line)

    assert session.finished
    assert session.result is None
    with pytest.raises(ProtocolError):
        session.start()
