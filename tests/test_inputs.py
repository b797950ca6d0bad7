"""Tests for cfn_update.config.inputs — CLI / GitHub Actions inputs."""

from __future__ import annotations

import pytest

from cfn_update.config.inputs import (
    ENV_CAPABILITIES,
    ENV_PARAMETER_OVERRIDES,
    ENV_ROLE_ARN,
    ENV_STACK_NAME,
    UpdateInputs,
    build_inputs,
    inputs_from_env,
    resolve_inputs,
    split_multiline,
)
from cfn_update.state.models import InvalidArgumentError


class TestSplitMultiline:
    def test_none(self):
        assert split_multiline(None) == []

    def test_empty(self):
        assert split_multiline("") == []

    def test_strips_and_drops_blank_lines(self):
        assert split_multiline("  a=1\n\n b=2 \r\n") == ["a=1", "b=2"]


class TestBuildInputs:
    def test_defaults(self):
        inputs = build_inputs("my-stack")
        assert inputs == UpdateInputs(stack_name="my-stack")
        assert inputs.has_overrides is False

    def test_list_items_may_be_multiline(self):
        inputs = build_inputs("s", parameter_overrides=["A=1\nB=2", "C=3"])
        assert inputs.parameter_overrides == ["A=1", "B=2", "C=3"]

    def test_string_capabilities(self):
        inputs = build_inputs("s", capabilities="CAPABILITY_IAM\nCAPABILITY_AUTO_EXPAND")
        assert inputs.capabilities == ["CAPABILITY_IAM", "CAPABILITY_AUTO_EXPAND"]

    def test_stack_name_stripped(self):
        assert build_inputs("  s  ").stack_name == "s"

    def test_missing_stack_name(self):
        with pytest.raises(InvalidArgumentError, match="stack-name"):
            build_inputs(None)

    def test_blank_stack_name(self):
        with pytest.raises(InvalidArgumentError):
            build_inputs("   ")

    def test_none_role(self):
        assert build_inputs("s", role_arn=None).role_arn == ""


class TestInputsFromEnv:
    def test_reads_action_inputs(self):
        env = {
            ENV_STACK_NAME: "my-stack",
            ENV_PARAMETER_OVERRIDES: "UUID=0F54\nName=test\n",
            ENV_CAPABILITIES: "CAPABILITY_IAM",
            ENV_ROLE_ARN: "arn:aws:iam::111111111111:role/role-name",
        }
        inputs = inputs_from_env(env)
        assert inputs.stack_name == "my-stack"
        assert inputs.parameter_overrides == ["UUID=0F54", "Name=test"]
        assert inputs.capabilities == ["CAPABILITY_IAM"]
        assert inputs.role_arn == "arn:aws:iam::111111111111:role/role-name"

    def test_optional_inputs_absent(self):
        inputs = inputs_from_env({ENV_STACK_NAME: "s"})
        assert inputs.parameter_overrides == []
        assert inputs.capabilities == []
        assert inputs.role_arn == ""

    def test_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv(ENV_STACK_NAME, "env-stack")
        monkeypatch.delenv(ENV_PARAMETER_OVERRIDES, raising=False)
        assert inputs_from_env().stack_name == "env-stack"

    def test_env_names(self):
        assert ENV_STACK_NAME == "INPUT_STACK-NAME"
        assert ENV_ROLE_ARN == "INPUT_ROLE-ARN"


class TestResolveInputs:
    ENV = {
        ENV_STACK_NAME: "env-stack",
        ENV_PARAMETER_OVERRIDES: "Name=from-env\nUUID=0F54",
        ENV_CAPABILITIES: "CAPABILITY_IAM",
        ENV_ROLE_ARN: "arn:aws:iam::111111111111:role/env-role",
    }

    def test_env_only(self):
        inputs = resolve_inputs(environ=self.ENV)
        assert inputs.stack_name == "env-stack"
        assert inputs.parameter_overrides == ["Name=from-env", "UUID=0F54"]
        assert inputs.capabilities == ["CAPABILITY_IAM"]
        assert inputs.role_arn == "arn:aws:iam::111111111111:role/env-role"

    def test_explicit_values_win(self):
        inputs = resolve_inputs(
            "cli-stack",
            parameter_overrides=["Name=from-cli"],
            capabilities=["CAPABILITY_NAMED_IAM"],
            role_arn="arn:aws:iam::111111111111:role/cli-role",
            environ=self.ENV,
        )
        assert inputs.stack_name == "cli-stack"
        assert inputs.parameter_overrides == ["Name=from-cli"]
        assert inputs.capabilities == ["CAPABILITY_NAMED_IAM"]
        assert inputs.role_arn == "arn:aws:iam::111111111111:role/cli-role"

    def test_empty_list_falls_back_to_env(self):
        inputs = resolve_inputs(parameter_overrides=[], environ=self.ENV)
        assert inputs.parameter_overrides == ["Name=from-env", "UUID=0F54"]

    def test_missing_everywhere(self):
        with pytest.raises(InvalidArgumentError, match="stack-name"):
            resolve_inputs(environ={})
