from tsdecl.cli.main import cli

cli()
