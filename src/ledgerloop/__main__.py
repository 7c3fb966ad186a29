from ledgerloop.cli import cli

cli()
