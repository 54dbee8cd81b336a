from covmark.cli import cli

cli()
