"""CLI module for plane-cli.

The CLI layer is kept thin: it parses arguments into command variants and
hands them to the business logic via ``run_cli_command`` for consistent
error handling.

Structure:
- `main.py`: The root Typer app. Its callback owns the global flags
  (--api-key, --base-url, --workspace, --timeout, --json) and stores them
  on ``ctx.obj``; every resource group is registered here.
- `projects.py`, `issues.py`, `states.py`, `labels.py`, `members.py`: One Typer
  sub-app per resource group. Each command builds a variant from
  `plane_cli.commands.models` and calls `run_cli_command`.
- `utils.py`: Logging setup and the error boundary.
- Business logic is in `plane_cli.commands`, `plane_cli.api` and
  `plane_cli.output`.

To add a new command:
1. Add a variant to `plane_cli/commands/models.py` and handle it in
   `plane_cli/commands/dispatch.py:execute`.
2. Add a Typer command to the matching sub-app that calls
   `run_cli_command(ctx, lambda: NewVariant(...))`.
3. Add a view for it in `plane_cli/output/views.py` if it needs one.
"""
