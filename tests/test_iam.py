"""Tests for cfn_update.aws.iam — role ARN validation."""

from __future__ import annotations

import pytest

from cfn_update.aws.iam import (
    IAM_ARN_PREFIX,
    INVALID_ARN_MESSAGE,
    MIN_ARN_SEGMENTS,
    validate_arn,
)
from cfn_update.state.models import InvalidArgumentError


class TestValidateArn:
    def test_role_arn_returned_unchanged(self):
        arn = "arn:aws:iam::111111111111:role/role-name"
        assert validate_arn(arn) == arn

    def test_role_with_path(self):
        arn = "arn:aws:iam::111111111111:role/service-role/deployer"
        assert validate_arn(arn) is arn

    def test_ec2_instance_arn_rejected(self):
        with pytest.raises(InvalidArgumentError, match="invalid arn format"):
            validate_arn(
                "arn:aws:ec2:us-east-1:111111111111:instance/i-0123456789abcdef0"
            )

    def test_too_few_segments_rejected(self):
        with pytest.raises(InvalidArgumentError, match="invalid arn format"):
            validate_arn("arn:aws:iam::role/role-name")

    def test_non_string_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_arn(12345)

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_arn(None)

    def test_prefix_must_be_at_start(self):
        with pytest.raises(InvalidArgumentError):
            validate_arn(" arn:aws:iam::111111111111:role/role-name")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_arn("not-an-arn")


class TestConstants:
    def test_prefix(self):
        assert IAM_ARN_PREFIX == "arn:aws:iam:"

    def test_min_segments(self):
        assert MIN_ARN_SEGMENTS == 6

    def test_message(self):
        assert "invalid arn format" in INVALID_ARN_MESSAGE
