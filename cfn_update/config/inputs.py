"""Run inputs: stack name, parameter overrides, capabilities, role ARN.

Inputs arrive either as CLI options or, when running as a GitHub Action, as
``INPUT_<NAME>`` environment variables (the runner upper-cases the input
name and keeps the dashes)::

    INPUT_STACK-NAME=my-stack
    INPUT_PARAMETER-OVERRIDES="UUID=0F54...\\nName=test"
    INPUT_CAPABILITIES=CAPABILITY_IAM
    INPUT_ROLE-ARN=arn:aws:iam::111111111111:role/role-name

Multi-line inputs are split on newlines; each line is stripped and blank
lines are dropped.
"""

from __future__ import annotations

import os
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from cfn_update.state.models import InvalidArgumentError

ENV_STACK_NAME = "INPUT_STACK-NAME"
ENV_PARAMETER_OVERRIDES = "INPUT_PARAMETER-OVERRIDES"
ENV_CAPABILITIES = "INPUT_CAPABILITIES"
ENV_ROLE_ARN = "INPUT_ROLE-ARN"


def split_multiline(value: Optional[str]) -> List[str]:
    """Split a newline-delimited input into stripped, non-empty lines."""
    if not value:
        return []
    return [line.strip() for line in value.splitlines() if line.strip()]


class UpdateInputs(BaseModel):
    """Validated inputs for one stack update."""

    stack_name: str
    parameter_overrides: List[str] = Field(default_factory=list)
    capabilities: List[str] = Field(default_factory=list)
    role_arn: str = ""

    @field_validator("stack_name", "role_arn", mode="before")
    @classmethod
    def _strip(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @field_validator("parameter_overrides", "capabilities", mode="before")
    @classmethod
    def _lines(cls, v: Any) -> Any:
        """Accept a newline-delimited string or a list of (multi-line) strings."""
        if v is None:
            return []
        if isinstance(v, str):
            return split_multiline(v)
        if isinstance(v, (list, tuple)):
            lines: List[str] = []
            for item in v:
                lines.extend(split_multiline(str(item)))
            return lines
        return v

    @property
    def has_overrides(self) -> bool:
        return bool(self.parameter_overrides)


def build_inputs(
    stack_name: Optional[str],
    parameter_overrides: Any = None,
    capabilities: Any = None,
    role_arn: Optional[str] = None,
) -> UpdateInputs:
    """Construct :class:`UpdateInputs`, requiring a non-empty stack name.

    Raises:
        InvalidArgumentError: stack name missing or blank.
    """
    inputs = UpdateInputs(
        stack_name=stack_name or "",
        parameter_overrides=parameter_overrides,
        capabilities=capabilities,
        role_arn=role_arn or "",
    )
    if not inputs.stack_name:
        raise InvalidArgumentError("Input required and not supplied: stack-name")
    return inputs


def resolve_inputs(
    stack_name: Optional[str] = None,
    parameter_overrides: Optional[List[str]] = None,
    capabilities: Optional[List[str]] = None,
    role_arn: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> UpdateInputs:
    """Layer explicit values over the ``INPUT_*`` variables in *environ*.

    Each argument left empty falls back to its environment variable
    (default ``os.environ``); a given value wins outright, lists included.
    """
    env = os.environ if environ is None else environ
    return build_inputs(
        stack_name or env.get(ENV_STACK_NAME),
        parameter_overrides=parameter_overrides or env.get(ENV_PARAMETER_OVERRIDES),
        capabilities=capabilities or env.get(ENV_CAPABILITIES),
        role_arn=role_arn or env.get(ENV_ROLE_ARN),
    )


def inputs_from_env(environ: Optional[Mapping[str, str]] = None) -> UpdateInputs:
    """Read GitHub Actions ``INPUT_*`` variables from *environ* (default ``os.environ``)."""
    return resolve_inputs(environ=environ)
