"""Template parameter reconciliation.

Every parameter the deployed template declares must appear in the changeset
request, otherwise CloudFormation falls back to the template default.  For
each declared parameter we either send the override supplied on the command
line or ask CloudFormation to keep the currently deployed value::

    declared: [UUID, Name]      overrides: ["Name=test"]
    → [{"ParameterKey": "UUID", "UsePreviousValue": True},
       {"ParameterKey": "Name", "ParameterValue": "test"}]
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from cfn_update.reporting import Reporter, default_reporter
from cfn_update.state.models import (
    InvalidArgumentError,
    ParameterDirective,
    TemplateParameter,
)

logger = logging.getLogger(__name__)

_MASK = "****"


# ---------------------------------------------------------------------------
# Override parsing
# ---------------------------------------------------------------------------


def parse_parameter_overrides(
    overrides: Iterable[str],
    reporter: Optional[Reporter] = None,
) -> Dict[str, str]:
    """Parse ``key=value`` strings into an ordered mapping.

    Only the first ``=`` separates key from value, so ``Url=a=b`` maps
    ``Url`` to ``a=b``.  Whitespace around the whole entry and around the key
    is trimmed, but the value is kept verbatim: ``Name = test`` maps ``Name``
    to ``" test"``.  When a key repeats, the last occurrence wins and a
    warning is reported.

    Raises:
        InvalidArgumentError: an entry has no ``=`` or an empty key.
    """
    reporter = reporter or default_reporter()
    parsed: Dict[str, str] = {}
    for raw in overrides:
        entry = raw.strip()
        key, sep, value = entry.partition("=")
        key = key.strip()
        if not sep or not key:
            raise InvalidArgumentError(
                f"Invalid parameter override '{entry}': expected key=value"
            )
        if key in parsed:
            reporter.warning(
                f"[Parameter] {key} given more than once; using the last value"
            )
        parsed[key] = value
    return parsed


# ---------------------------------------------------------------------------
# Template summary
# ---------------------------------------------------------------------------


def get_template_parameters(cfn_client: Any, stack_name: str) -> List[TemplateParameter]:
    """Return the parameters declared by the template deployed to *stack_name*.

    Errors from ``get_template_summary`` (e.g. the stack does not exist)
    propagate unchanged.
    """
    resp = cfn_client.get_template_summary(StackName=stack_name)
    params = [TemplateParameter.from_api(p) for p in resp.get("Parameters", [])]
    logger.debug("Stack %s declares %d parameter(s)", stack_name, len(params))
    return params


# ---------------------------------------------------------------------------
# Reconciliation
# ---------------------------------------------------------------------------


def reconcile_parameters(
    template_parameters: List[TemplateParameter],
    overrides: Dict[str, str],
    reporter: Optional[Reporter] = None,
) -> List[ParameterDirective]:
    """Build one :class:`ParameterDirective` per declared parameter, in order.

    Override keys the template does not declare are dropped (and reported at
    debug level).  ``NoEcho`` values are masked in the log line only.
    """
    reporter = reporter or default_reporter()
    directives: List[ParameterDirective] = []

    for param in template_parameters:
        if param.key in overrides:
            value = overrides[param.key]
            shown = _MASK if param.no_echo else value
            reporter.info(f"[Parameter] {param.key} => UpdateToValue: {shown}")
            directives.append(ParameterDirective.explicit(param.key, value))
        else:
            reporter.info(f"[Parameter] {param.key} => UsePreviousValue: true")
            directives.append(ParameterDirective.previous(param.key))

    declared = {p.key for p in template_parameters}
    for key in overrides:
        if key not in declared:
            reporter.debug(f"[Parameter] {key} is not declared by the template; ignored")

    return directives
