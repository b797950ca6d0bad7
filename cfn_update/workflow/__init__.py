"""Stack update workflow entry points."""

from cfn_update.workflow.update_stack import (
    COMPLETE_MESSAGE,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    build_changeset_request,
    classify_error,
    error_message,
    exit_code_for,
    run_update,
)

__all__ = [
    "COMPLETE_MESSAGE",
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
    "build_changeset_request",
    "classify_error",
    "error_message",
    "exit_code_for",
    "run_update",
]
