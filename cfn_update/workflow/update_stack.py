"""Top-level stack update run: inputs → changeset request → lifecycle.

Execution order:

1. Validate local inputs (role ARN, parameter overrides).  Nothing has
   touched AWS yet, so a bad input fails fast.
2. When overrides were supplied, fetch the template's declared parameters
   and reconcile them into directives.  Without overrides the request
   carries no ``Parameters`` and ``GetTemplateSummary`` is never called.
3. Run the changeset lifecycle (:func:`cfn_update.aws.changeset.update_stack`).

Exactly one error reaches this boundary per run.  It is classified, its
message is reported unchanged via ``Reporter.report_failure`` and no
further AWS call is made.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError, WaiterError

from cfn_update.aws.changeset import ChangesetLifecycle, update_stack
from cfn_update.aws.context import AWSContext
from cfn_update.aws.iam import validate_arn
from cfn_update.aws.parameters import (
    get_template_parameters,
    parse_parameter_overrides,
    reconcile_parameters,
)
from cfn_update.config.inputs import UpdateInputs
from cfn_update.reporting import Reporter, default_reporter
from cfn_update.state.models import (
    ChangesetRequest,
    ErrorKind,
    InvalidArgumentError,
    UpdateOutcome,
    changeset_name_for,
)

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

COMPLETE_MESSAGE = "Cloudformation stack update is complete"


# ---------------------------------------------------------------------------
# Error classification
# ---------------------------------------------------------------------------


def classify_error(exc: BaseException) -> ErrorKind:
    """Map an exception to its :class:`ErrorKind`."""
    # WaiterError subclasses BotoCoreError, so check it first.
    if isinstance(exc, WaiterError):
        return ErrorKind.WAIT_FAILURE
    if isinstance(exc, InvalidArgumentError):
        return ErrorKind.CONFIGURATION
    if isinstance(exc, (ClientError, BotoCoreError)):
        return ErrorKind.REMOTE_REQUEST
    return ErrorKind.UNEXPECTED


def error_message(exc: BaseException) -> str:
    """Return the exception's own message (class name if it has none)."""
    return str(exc) or exc.__class__.__name__


# ---------------------------------------------------------------------------
# Request construction
# ---------------------------------------------------------------------------


def build_changeset_request(
    inputs: UpdateInputs,
    cfn_client: Any,
    reporter: Optional[Reporter] = None,
) -> ChangesetRequest:
    """Build the :class:`ChangesetRequest` for *inputs*.

    Local validation runs before the only AWS call made here
    (``get_template_summary``, and only when overrides were supplied).
    """
    reporter = reporter or default_reporter()

    role_arn = validate_arn(inputs.role_arn) if inputs.role_arn else None

    parameters = None
    if inputs.has_overrides:
        overrides = parse_parameter_overrides(inputs.parameter_overrides, reporter)
        template_parameters = get_template_parameters(cfn_client, inputs.stack_name)
        parameters = reconcile_parameters(template_parameters, overrides, reporter)

    return ChangesetRequest.for_stack(
        inputs.stack_name,
        capabilities=inputs.capabilities,
        parameters=parameters,
        role_arn=role_arn,
    )


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------


def run_update(
    inputs: UpdateInputs,
    *,
    cfn_client: Any = None,
    aws_ctx: Optional[AWSContext] = None,
    reporter: Optional[Reporter] = None,
) -> UpdateOutcome:
    """Update ``inputs.stack_name`` through a changeset and report the outcome.

    *cfn_client* wins over *aws_ctx*; with neither, an :class:`AWSContext`
    is resolved from the environment.  Never raises for errors raised by
    the run itself; they are reported and returned in the outcome.
    """
    reporter = reporter or default_reporter()
    name = changeset_name_for(inputs.stack_name)
    lifecycle = ChangesetLifecycle(change_set_name=name, stack_name=inputs.stack_name)

    try:
        if cfn_client is None:
            cfn_client = (aws_ctx or AWSContext.build()).cloudformation()
        request = build_changeset_request(inputs, cfn_client, reporter)
        update_stack(cfn_client, request, reporter, lifecycle=lifecycle)
    except Exception as exc:  # noqa: BLE001
        kind = classify_error(exc)
        message = error_message(exc)
        logger.debug("Run failed in state %s (%s)", lifecycle.state.value, kind.value)
        reporter.report_failure(message, traceback.format_exc())
        return UpdateOutcome(
            success=False,
            stack_name=inputs.stack_name,
            change_set_name=name,
            state=lifecycle.state,
            error_kind=kind,
            message=message,
        )

    reporter.info(COMPLETE_MESSAGE)
    return UpdateOutcome(
        success=True,
        stack_name=inputs.stack_name,
        change_set_name=name,
        state=lifecycle.state,
    )


def exit_code_for(outcome: UpdateOutcome) -> int:
    """Map an :class:`UpdateOutcome` to a process exit code."""
    return EXIT_SUCCESS if outcome.success else EXIT_FAILURE
