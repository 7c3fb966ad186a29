"""Contains the Console ability and ability helpers."""

from dataclasses import dataclass
from typing import Any, TextIO

from ledgerloop.effect import Depend, Effect, throws
from ledgerloop.errors import InputStreamError
from ledgerloop.need import Need, need


class Console:
    """The Console ability, reading from stdin and writing to stdout."""

    def print(self, content: Any) -> None:
        """Print the given content to stdout.

        Args:
        ----
            content: The content to print.

        """
        print(content)

    def input(self, prompt: str = "") -> str:
        """Read a line from stdin.

        Args:
        ----
            prompt: The prompt to display.

        Returns:
        -------
            The line read from stdin, without its line ending.

        Raises:
        ------
            InputStreamError: If stdin is closed or can't be read.

        """
        try:
            return input(prompt)
        except EOFError as e:
            raise InputStreamError("input stream closed") from e
        except OSError as e:
            raise InputStreamError(str(e)) from e


@dataclass(frozen=True)
class StreamConsole(Console):
    """Console bound to arbitrary text streams."""

    stdin: TextIO
    stdout: TextIO

    def print(self, content: Any) -> None:
        self.stdout.write(f"{content}\n")
        self.stdout.flush()

    def input(self, prompt: str = "") -> str:
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()
        try:
            line = self.stdin.readline()
        except (OSError, ValueError) as e:
            # closed file objects raise ValueError on readline
            raise InputStreamError(str(e)) from e
        if not line:
            raise InputStreamError("input stream closed")
        return line.removesuffix("\n").removesuffix("\r")


def print_line(content: Any) -> Depend[Need[Console], None]:
    """Print the given content as one line.

    Args:
    ----
        content: The content to print.

    Returns:
    -------
        An effect that prints the given content.

    """
    console = yield from need(Console)
    console.print(content)


@throws(InputStreamError)
def read_line(prompt: str = "") -> Effect[Need[Console], InputStreamError, str]:
    """Read a line of input.

    Args:
    ----
        prompt: The prompt to display.

    Returns:
    -------
        An effect that reads a line, or yields `InputStreamError` if the input is closed.

    """
    console: Console = yield from need(Console)
    return console.input(prompt)
