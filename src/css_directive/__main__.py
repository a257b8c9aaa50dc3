from css_directive.cli.main import cli

cli()
