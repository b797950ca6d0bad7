"""AWS service interactions (CloudFormation changesets, IAM role ARNs)."""

from cfn_update.aws.changeset import (
    CHANGESET_CREATE_MAX_WAIT_SECONDS,
    POLL_INTERVAL_SECONDS,
    STACK_UPDATE_MAX_WAIT_SECONDS,
    ChangesetLifecycle,
    cleanup_changeset,
    update_stack,
    waiter_config,
)
from cfn_update.aws.context import AWSContext, resolve_profile, resolve_region
from cfn_update.aws.iam import IAM_ARN_PREFIX, validate_arn
from cfn_update.aws.parameters import (
    get_template_parameters,
    parse_parameter_overrides,
    reconcile_parameters,
)

__all__ = [
    "AWSContext",
    "CHANGESET_CREATE_MAX_WAIT_SECONDS",
    "ChangesetLifecycle",
    "IAM_ARN_PREFIX",
    "POLL_INTERVAL_SECONDS",
    "STACK_UPDATE_MAX_WAIT_SECONDS",
    "cleanup_changeset",
    "get_template_parameters",
    "parse_parameter_overrides",
    "reconcile_parameters",
    "resolve_profile",
    "resolve_region",
    "update_stack",
    "validate_arn",
    "waiter_config",
]
