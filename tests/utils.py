import io

from ledgerloop.console import StreamConsole


def scripted_console(*lines: str) -> tuple[StreamConsole, io.StringIO]:
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    return StreamConsole(stdin, stdout), stdout
