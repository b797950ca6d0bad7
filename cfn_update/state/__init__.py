"""Request, lifecycle and outcome models for a changeset run."""

from cfn_update.state.models import (
    CLEANUP_ELIGIBLE_STATES,
    ChangesetRequest,
    ChangesetState,
    ErrorKind,
    InvalidArgumentError,
    ParameterDirective,
    TemplateParameter,
    UpdateOutcome,
    changeset_name_for,
)

__all__ = [
    "CLEANUP_ELIGIBLE_STATES",
    "ChangesetRequest",
    "ChangesetState",
    "ErrorKind",
    "InvalidArgumentError",
    "ParameterDirective",
    "TemplateParameter",
    "UpdateOutcome",
    "changeset_name_for",
]
