from tagrun.cli import cli

cli(prog_name="tagrun")
