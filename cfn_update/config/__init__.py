"""Input handling for cfn-update runs."""

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

__all__ = [
    "ENV_CAPABILITIES",
    "ENV_PARAMETER_OVERRIDES",
    "ENV_ROLE_ARN",
    "ENV_STACK_NAME",
    "UpdateInputs",
    "build_inputs",
    "inputs_from_env",
    "resolve_inputs",
    "split_multiline",
]
