from pyvider.extensions import cli

cli.cli()
