"""CLI entrypoint: Typer app definition and command registration"""

import typer

from linediff.cli.commands import diff_cmd, stat_cmd


app = typer.Typer(name="linediff", no_args_is_help=True, help="Line-oriented Myers diff with unified output")

app.command(name="diff")(diff_cmd)
app.command(name="stat")(stat_cmd)
