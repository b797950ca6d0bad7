"""CLI entry point for cfn-update, built on cli-core-yo.

Provides the ``update`` command, which updates an existing CloudFormation
stack through a changeset that reuses the deployed template.

Usage::

    cfn-update --help
    cfn-update update --stack-name my-stack \\
        --parameter-override Name=test --capability CAPABILITY_IAM
    cfn-update update --stack-name my-stack \\
        --role-arn arn:aws:iam::111111111111:role/deployer

Every option falls back to the GitHub Actions ``INPUT_*`` variable of the
same name, so the command can run unchanged as an action step.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

import typer
from cli_core_yo import output
from cli_core_yo.app import create_app
from cli_core_yo.spec import CliSpec, XdgSpec

# ── App specification ────────────────────────────────────────────────────────

spec = CliSpec(
    prog_name="cfn-update",
    app_display_name="CloudFormation Changeset Update",
    dist_name="cfn-changeset-update",
    root_help=(
        "Update an existing CloudFormation stack through a changeset, "
        "cleaning up the changeset if the update fails."
    ),
    xdg=XdgSpec(app_dir_name="cfn-update"),
)

app = create_app(spec)


# ── update command ───────────────────────────────────────────────────────────


@app.command()
def update(
    stack_name: Optional[str] = typer.Option(
        None,
        "--stack-name",
        help="Name of the stack to update.",
    ),
    parameter_override: Optional[List[str]] = typer.Option(
        None,
        "--parameter-override",
        help=(
            "Parameter override as KEY=VALUE. Can be specified multiple times. "
            "Parameters not overridden keep their deployed value."
        ),
    ),
    capability: Optional[List[str]] = typer.Option(
        None,
        "--capability",
        help="Capability to acknowledge (e.g. CAPABILITY_IAM). Repeatable.",
    ),
    role_arn: Optional[str] = typer.Option(
        None,
        "--role-arn",
        help="IAM role CloudFormation assumes to execute the changeset.",
    ),
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        help="AWS CLI profile. Defaults to AWS_PROFILE or the default chain.",
    ),
    region: Optional[str] = typer.Option(
        None,
        "--region",
        help="AWS region. Defaults to AWS_REGION / AWS_DEFAULT_REGION.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging.",
    ),
) -> None:
    """Create, execute and wait on a changeset for an existing stack.

    Environment variables:
      INPUT_STACK-NAME            Stack name when --stack-name is omitted.
      INPUT_PARAMETER-OVERRIDES   Newline-delimited KEY=VALUE overrides.
      INPUT_CAPABILITIES          Newline-delimited capabilities.
      INPUT_ROLE-ARN              Role ARN when --role-arn is omitted.
    """
    from cfn_update.aws.context import AWSContext
    from cfn_update.config.inputs import resolve_inputs
    from cfn_update.reporting import ConsoleReporter
    from cfn_update.state.models import InvalidArgumentError
    from cfn_update.workflow.update_stack import (
        EXIT_FAILURE,
        exit_code_for,
        run_update,
    )

    if debug:
        logging.basicConfig(level=logging.DEBUG)

    reporter = ConsoleReporter()
    try:
        inputs = resolve_inputs(
            stack_name,
            parameter_overrides=parameter_override,
            capabilities=capability,
            role_arn=role_arn,
        )
    except InvalidArgumentError as exc:
        reporter.report_failure(str(exc))
        raise typer.Exit(EXIT_FAILURE) from exc

    output.action(f"Updating stack {inputs.stack_name} ...")
    aws_ctx = AWSContext.build(region, profile=profile)
    outcome = run_update(inputs, aws_ctx=aws_ctx, reporter=reporter)

    if outcome.success:
        output.success(f"Stack {inputs.stack_name} updated.")
    raise typer.Exit(exit_code_for(outcome))


# ── Entry point ──────────────────────────────────────────────────────────────


def main() -> int:
    """Run the CLI and return an exit code."""
    try:
        app()
        return 0
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0


if __name__ == "__main__":
    sys.exit(main())
