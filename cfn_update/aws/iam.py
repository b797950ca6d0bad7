"""IAM role ARN validation for the changeset service role.

CloudFormation assumes the role passed as ``RoleARN`` when it executes the
changeset.  The value is checked locally before any AWS call so that a typo
surfaces as a configuration error rather than a late ``ValidationError``.
"""

from __future__ import annotations

from typing import Any

from cfn_update.state.models import InvalidArgumentError

#: Every IAM ARN starts with this prefix (``arn:aws:iam::<account>:role/...``).
IAM_ARN_PREFIX = "arn:aws:iam:"

#: ``arn:partition:service:region:account:resource`` → at least 6 segments.
MIN_ARN_SEGMENTS = 6

INVALID_ARN_MESSAGE = "Input role-arn is an invalid arn format"


def validate_arn(arn: Any) -> str:
    """Return *arn* unchanged if it is an IAM ARN, else raise.

    Examples:
        >>> validate_arn("arn:aws:iam::111111111111:role/role-name")
        'arn:aws:iam::111111111111:role/role-name'

    Raises:
        InvalidArgumentError: non-string input, a non-IAM ARN (e.g. an EC2
            instance ARN), or fewer than 6 colon-delimited segments.
    """
    if (
        isinstance(arn, str)
        and arn.startswith(IAM_ARN_PREFIX)
        and len(arn.split(":")) >= MIN_ARN_SEGMENTS
    ):
        return arn
    raise InvalidArgumentError(INVALID_ARN_MESSAGE)
