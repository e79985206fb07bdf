import typer

# Module-level constants for Typer options to avoid B008
PROJECT_OPTION = typer.Option(
    ...,
    '--project',
    '-p',
    help='Project ID',
)
