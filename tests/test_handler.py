import io

from ledgerloop import Depend, Effect, Need, catch, need, run, supply, throw, throws
from ledgerloop.console import Console, StreamConsole
from ledgerloop.errors import InputStreamError, MissingAbilityError
from ledgerloop.settings import LedgerSettings
from pytest import raises


def prompt() -> Depend[Need[LedgerSettings], str]:
    settings = yield from need(LedgerSettings)
    return settings.prompt


def console_and_prompt() -> Depend[Need[Console] | Need[LedgerSettings], tuple[Console, str]]:
    console = yield from need(Console)
    text = yield from prompt()
    return (console, text)


def test_supply_answers_by_type() -> None:
    settings = LedgerSettings(prompt="$ ")
    console = Console()
    assert run(supply(console, settings)(console_and_prompt)()) == (console, "$ ")


def test_supply_accepts_subclasses() -> None:
    stream_console = StreamConsole(io.StringIO(), io.StringIO())
    result = run(supply(LedgerSettings(), stream_console)(console_and_prompt)())
    assert result == (stream_console, "> ")


def test_first_supplied_instance_wins() -> None:
    first = LedgerSettings(prompt="1 ")
    second = LedgerSettings(prompt="2 ")
    assert run(supply(first, second)(prompt)()) == "1 "


def test_inner_handler_wins() -> None:
    outer = supply(LedgerSettings(prompt="outer "))
    inner = supply(LedgerSettings(prompt="inner "))
    assert run(outer(inner(prompt))()) == "inner "


def test_unanswered_request_goes_to_outer_handler() -> None:
    console = Console()
    effect = supply(console)(supply(LedgerSettings(prompt="# "))(console_and_prompt))()
    assert run(effect) == (console, "# ")


def test_combined_handlers() -> None:
    console = Console()
    combined = supply(LedgerSettings(prompt="# ")) | supply(console)
    assert run(combined(console_and_prompt)()) == (console, "# ")


def test_combined_handlers_pass_on_unanswered_requests() -> None:
    combined = supply(Console()) | supply(LedgerSettings())
    with raises(MissingAbilityError, match="int"):
        run(combined(lambda: need(int))())  # type: ignore


def test_missing_ability() -> None:
    with raises(MissingAbilityError, match="LedgerSettings"):
        run(supply(Console())(prompt)())  # type: ignore


def test_errors_pass_through_handler() -> None:
    @throws(InputStreamError)
    def closed() -> Depend[Need[LedgerSettings], str]:
        yield from prompt()
        raise InputStreamError("input stream closed")

    effect = catch(InputStreamError)(supply(LedgerSettings())(closed))()
    assert isinstance(run(effect), InputStreamError)


def test_error_thrown_back_through_handler() -> None:
    def recovers() -> Effect[Need[LedgerSettings], InputStreamError, str]:
        text = yield from prompt()
        try:
            yield from throw(InputStreamError("input stream closed"))
        except InputStreamError:
            return f"{text}recovered"
        return "unreachable"

    assert run(supply(LedgerSettings(prompt="> "))(recovers)()) == "> recovered"
