import io
import sys

from ledgerloop.bank import run_session
from ledgerloop.console import StreamConsole
from ledgerloop.errors import ParseError
from ledgerloop.settings import LedgerSettings

script = io.StringIO("add 10\nadd 5.5\nremove 3\nadd abc\nquit\n")
console = StreamConsole(script, sys.stdout)

try:
    session = run_session(console, LedgerSettings(on_parse_error="fail"))
except ParseError as e:
    # the strict policy stops at the malformed amount
    print(f"session ended: {e}")
else:
    print(f"final balance: {session.balance}")
