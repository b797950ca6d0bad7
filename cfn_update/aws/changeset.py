"""Changeset lifecycle: create → wait → execute → wait, with cleanup.

State transitions (tracked explicitly on :class:`ChangesetLifecycle`)::

    NOT_CREATED ─create─▶ CREATED ─wait─▶ CREATE_COMPLETE ─execute─▶ EXECUTED
                              │                                        │
                              ▼                                        ▼
                        CREATE_FAILED                 STACK_UPDATE_COMPLETE
                              │                        / STACK_UPDATE_FAILED
                              ▼                                        │
                         CLEANED_UP ◀──────────── any failure ◀────────┘

If ``create_change_set`` itself fails nothing exists remotely, so no
cleanup is attempted.  After a successful execute the changeset stays in the
stack's history; CloudFormation refuses to delete executed changesets.

Both waits use boto3 waiters, which poll ``DescribeChangeSet`` /
``DescribeStacks`` and raise :class:`botocore.exceptions.WaiterError` on a
failure state or when ``MaxAttempts`` is exhausted.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from cfn_update import ui
from cfn_update.reporting import Reporter, default_reporter
from cfn_update.state.models import (
    CLEANUP_ELIGIBLE_STATES,
    ChangesetRequest,
    ChangesetState,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Wait budgets
# ---------------------------------------------------------------------------

#: Minimum delay between polls, shared by both waits.
POLL_INTERVAL_SECONDS = 10

#: Changeset evaluation: 30 minutes.
CHANGESET_CREATE_MAX_WAIT_SECONDS = 30 * 60

#: Stack update: 12 hours (replacing large resources can take a long time).
STACK_UPDATE_MAX_WAIT_SECONDS = 12 * 60 * 60

CHANGESET_CREATE_WAITER = "change_set_create_complete"
STACK_UPDATE_WAITER = "stack_update_complete"


def waiter_config(max_wait_seconds: int, poll_interval: int = POLL_INTERVAL_SECONDS) -> Dict[str, int]:
    """Translate a wait budget into a botocore ``WaiterConfig``."""
    if poll_interval <= 0:
        raise ValueError("poll_interval must be positive")
    attempts = max(1, -(-max_wait_seconds // poll_interval))
    return {"Delay": poll_interval, "MaxAttempts": attempts}


# ---------------------------------------------------------------------------
# Lifecycle tracking
# ---------------------------------------------------------------------------


@dataclass
class ChangesetLifecycle:
    """Explicit state of one changeset run."""

    change_set_name: str
    stack_name: str
    state: ChangesetState = ChangesetState.NOT_CREATED
    history: List[ChangesetState] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.history.append(self.state)

    def advance(self, new_state: ChangesetState) -> None:
        logger.debug(
            "Changeset %s: %s -> %s",
            self.change_set_name, self.state.value, new_state.value,
        )
        self.state = new_state
        self.history.append(new_state)

    @property
    def cleanup_eligible(self) -> bool:
        """True once the changeset exists remotely and has not been cleaned."""
        return self.state in CLEANUP_ELIGIBLE_STATES


# ---------------------------------------------------------------------------
# Cleanup
# ---------------------------------------------------------------------------


def cleanup_changeset(
    cfn_client: Any,
    change_set_name: str,
    stack_name: str,
    reporter: Optional[Reporter] = None,
) -> bool:
    """Delete *change_set_name*; never raises.

    Runs on the failure path, so an error here is reported as a warning and
    swallowed to leave the triggering error intact.

    Returns True if the delete call succeeded.
    """
    reporter = reporter or default_reporter()
    try:
        reporter.info(f"Cleaning up failed changeset {change_set_name}")
        cfn_client.delete_change_set(
            ChangeSetName=change_set_name,
            StackName=stack_name,
        )
        reporter.info(f"Successfully deleted changeset {change_set_name}")
        return True
    except Exception as exc:  # noqa: BLE001
        code = _error_code(exc)
        suffix = f" ({code})" if code else ""
        reporter.warning(
            f"Failed to cleanup changeset {change_set_name}{suffix}: {exc}"
        )
        return False


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


def update_stack(
    cfn_client: Any,
    request: ChangesetRequest,
    reporter: Optional[Reporter] = None,
    *,
    create_max_wait: int = CHANGESET_CREATE_MAX_WAIT_SECONDS,
    update_max_wait: int = STACK_UPDATE_MAX_WAIT_SECONDS,
    poll_interval: int = POLL_INTERVAL_SECONDS,
    lifecycle: Optional[ChangesetLifecycle] = None,
) -> ChangesetLifecycle:
    """Drive *request* through create → wait → execute → wait.

    Any failure after the changeset was created triggers
    :func:`cleanup_changeset`; the original exception is then re-raised
    unchanged.

    Pass *lifecycle* to observe the reached state after a failure.

    Returns the completed :class:`ChangesetLifecycle`.
    """
    reporter = reporter or default_reporter()
    name = request.change_set_name
    stack = request.stack_name
    if lifecycle is None:
        lifecycle = ChangesetLifecycle(change_set_name=name, stack_name=stack)
    if lifecycle.state is not ChangesetState.NOT_CREATED:
        raise ValueError(
            f"Changeset lifecycle for {name} already started ({lifecycle.state.value})"
        )
    started = time.monotonic()

    reporter.info(f"Creating CloudFormation Change Set {name} for stack {stack}")
    cfn_client.create_change_set(**request.to_api())
    lifecycle.advance(ChangesetState.CREATED)

    try:
        reporter.info("Waiting for CloudFormation changeset to create ...")
        try:
            cfn_client.get_waiter(CHANGESET_CREATE_WAITER).wait(
                ChangeSetName=name,
                StackName=stack,
                WaiterConfig=waiter_config(create_max_wait, poll_interval),
            )
        except Exception:
            lifecycle.advance(ChangesetState.CREATE_FAILED)
            raise
        lifecycle.advance(ChangesetState.CREATE_COMPLETE)

        reporter.info(f"Executing CloudFormation changeset {name}")
        cfn_client.execute_change_set(ChangeSetName=name, StackName=stack)
        lifecycle.advance(ChangesetState.EXECUTED)

        reporter.info(
            f"Waiting for CloudFormation stack {stack} to reach update complete ..."
        )
        try:
            cfn_client.get_waiter(STACK_UPDATE_WAITER).wait(
                StackName=stack,
                WaiterConfig=waiter_config(update_max_wait, poll_interval),
            )
        except Exception:
            lifecycle.advance(ChangesetState.STACK_UPDATE_FAILED)
            raise
        lifecycle.advance(ChangesetState.STACK_UPDATE_COMPLETE)
    except Exception:
        if lifecycle.cleanup_eligible:
            cleanup_changeset(cfn_client, name, stack, reporter)
            lifecycle.advance(ChangesetState.CLEANED_UP)
        raise

    reporter.debug(
        f"Changeset {name} finished in {ui.elapsed_str(time.monotonic() - started)}"
    )
    return lifecycle


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _error_code(exc: BaseException) -> str:
    """Extract AWS error code from a botocore ClientError (or return '')."""
    resp = getattr(exc, "response", None)
    if resp and isinstance(resp, dict):
        return resp.get("Error", {}).get("Code", "")
    return ""
