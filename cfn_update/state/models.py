"""Changeset request, lifecycle and outcome models.

The request rendered by :meth:`ChangesetRequest.to_api` is passed verbatim
to ``create_change_set``::

    {
      "ChangeSetName": "my-stack-changeset",
      "StackName": "my-stack",
      "UsePreviousTemplate": true,
      "Capabilities": ["CAPABILITY_IAM"],
      "Parameters": [                       # only when overrides were given
        {"ParameterKey": "UUID", "UsePreviousValue": true},
        {"ParameterKey": "Name", "ParameterValue": "test"}
      ],
      "RoleARN": "arn:aws:iam::111111111111:role/role-name"   # optional
    }
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class InvalidArgumentError(ValueError):
    """A caller-supplied input is malformed. Raised before any AWS call."""


class ErrorKind(str, Enum):
    """Classification of the single error that ends a run.

    Cleanup errors have no kind: cleanup only warns about them and they never
    reach classification, which always sees the error that triggered cleanup.
    """

    CONFIGURATION = "CONFIGURATION"
    REMOTE_REQUEST = "REMOTE_REQUEST"
    WAIT_FAILURE = "WAIT_FAILURE"
    UNEXPECTED = "UNEXPECTED"


# ---------------------------------------------------------------------------
# Lifecycle state
# ---------------------------------------------------------------------------


class ChangesetState(str, Enum):
    """Where a single changeset lifecycle currently stands."""

    NOT_CREATED = "NOT_CREATED"
    CREATED = "CREATED"
    CREATE_COMPLETE = "CREATE_COMPLETE"
    CREATE_FAILED = "CREATE_FAILED"
    EXECUTED = "EXECUTED"
    STACK_UPDATE_COMPLETE = "STACK_UPDATE_COMPLETE"
    STACK_UPDATE_FAILED = "STACK_UPDATE_FAILED"
    CLEANED_UP = "CLEANED_UP"


#: States in which a changeset exists remotely and may be deleted on failure.
CLEANUP_ELIGIBLE_STATES = frozenset({
    ChangesetState.CREATED,
    ChangesetState.CREATE_COMPLETE,
    ChangesetState.CREATE_FAILED,
    ChangesetState.EXECUTED,
    ChangesetState.STACK_UPDATE_FAILED,
})


# ---------------------------------------------------------------------------
# Template parameters and directives
# ---------------------------------------------------------------------------


class TemplateParameter(BaseModel):
    """A parameter declared by the deployed template (``GetTemplateSummary``)."""

    model_config = ConfigDict(frozen=True)

    key: str
    type: str = ""
    no_echo: bool = False
    description: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TemplateParameter":
        return cls(
            key=data["ParameterKey"],
            type=data.get("ParameterType") or "",
            no_echo=bool(data.get("NoEcho", False)),
            description=data.get("Description") or "",
        )


class ParameterDirective(BaseModel):
    """Resolved value for one template parameter.

    Exactly one of ``value`` or ``use_previous_value`` is set.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    value: Optional[str] = None
    use_previous_value: bool = False

    @model_validator(mode="after")
    def _exactly_one(self) -> "ParameterDirective":
        if self.use_previous_value == (self.value is not None):
            raise ValueError(
                f"Parameter {self.key!r} needs either a value or "
                "use_previous_value, not both"
            )
        return self

    @classmethod
    def explicit(cls, key: str, value: str) -> "ParameterDirective":
        return cls(key=key, value=value)

    @classmethod
    def previous(cls, key: str) -> "ParameterDirective":
        return cls(key=key, use_previous_value=True)

    def to_api(self) -> Dict[str, Any]:
        if self.use_previous_value:
            return {"ParameterKey": self.key, "UsePreviousValue": True}
        return {"ParameterKey": self.key, "ParameterValue": self.value}


# ---------------------------------------------------------------------------
# ChangesetRequest
# ---------------------------------------------------------------------------


def changeset_name_for(stack_name: str) -> str:
    """Return the deterministic changeset name for *stack_name*."""
    return f"{stack_name}-changeset"


class ChangesetRequest(BaseModel):
    """Everything ``create_change_set`` needs for one run."""

    model_config = ConfigDict(frozen=True)

    change_set_name: str
    stack_name: str
    use_previous_template: bool = True
    capabilities: List[str] = Field(default_factory=list)
    parameters: Optional[List[ParameterDirective]] = None
    role_arn: Optional[str] = None

    @classmethod
    def for_stack(
        cls,
        stack_name: str,
        *,
        capabilities: Optional[List[str]] = None,
        parameters: Optional[List[ParameterDirective]] = None,
        role_arn: Optional[str] = None,
    ) -> "ChangesetRequest":
        return cls(
            change_set_name=changeset_name_for(stack_name),
            stack_name=stack_name,
            capabilities=list(capabilities or []),
            parameters=parameters,
            role_arn=role_arn or None,
        )

    def to_api(self) -> Dict[str, Any]:
        """Render boto3 ``create_change_set`` keyword arguments."""
        kwargs: Dict[str, Any] = {
            "ChangeSetName": self.change_set_name,
            "StackName": self.stack_name,
            "UsePreviousTemplate": self.use_previous_template,
            "Capabilities": list(self.capabilities),
        }
        if self.parameters is not None:
            kwargs["Parameters"] = [p.to_api() for p in self.parameters]
        if self.role_arn:
            kwargs["RoleARN"] = self.role_arn
        return kwargs


# ---------------------------------------------------------------------------
# UpdateOutcome
# ---------------------------------------------------------------------------


class UpdateOutcome(BaseModel):
    """Result of one update run.

    On failure ``message`` is the original error's message, untranslated.
    """

    success: bool
    stack_name: str = ""
    change_set_name: str = ""
    state: ChangesetState = ChangesetState.NOT_CREATED
    error_kind: Optional[ErrorKind] = None
    message: str = ""
