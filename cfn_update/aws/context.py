"""AWS context: session, region and profile resolution.

Wraps boto3 session creation into a single :class:`AWSContext` so the
workflow can build its CloudFormation client in one place.

Region resolution precedence:
1. Explicit ``--region`` CLI flag
2. ``AWS_REGION`` / ``AWS_DEFAULT_REGION`` env vars
3. Hardcoded fallback (``us-east-1``)

Profile resolution precedence:
1. Explicit ``--profile`` CLI flag
2. ``AWS_PROFILE`` env var
3. None — boto3's default credential chain (env keys, OIDC role, IMDS)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Optional

import boto3

logger = logging.getLogger(__name__)

_DEFAULT_REGION = "us-east-1"


def resolve_region(region: Optional[str] = None) -> str:
    """Return the AWS region string.

    Precedence: *region* flag → ``AWS_REGION`` → ``AWS_DEFAULT_REGION`` → fallback.
    """
    if region:
        return region
    return (
        os.environ.get("AWS_REGION")
        or os.environ.get("AWS_DEFAULT_REGION")
        or _DEFAULT_REGION
    )


def resolve_profile(profile: Optional[str] = None) -> Optional[str]:
    """Return the AWS profile name, or None to use the default credential chain."""
    return profile or os.environ.get("AWS_PROFILE") or None


@dataclass
class AWSContext:
    """Resolved profile/region plus a lazily created boto3 session.

    Attributes:
        region: AWS region (e.g. ``us-west-2``).
        profile: AWS profile name, or None for the default credential chain.
    """

    region: str
    profile: Optional[str] = None
    _session: Any = field(default=None, repr=False, compare=False)

    @classmethod
    def build(
        cls,
        region: Optional[str] = None,
        profile: Optional[str] = None,
    ) -> "AWSContext":
        """Resolve region/profile from flags and environment."""
        resolved_profile = resolve_profile(profile)
        resolved_region = resolve_region(region)
        if resolved_profile == "default":
            logger.warning("AWS_PROFILE is set to 'default'.")
        logger.debug(
            "AWS context: region=%s profile=%s", resolved_region, resolved_profile,
        )
        return cls(region=resolved_region, profile=resolved_profile)

    @property
    def session(self) -> boto3.Session:
        """Return the cached :class:`boto3.Session`."""
        if self._session is None:
            self._session = boto3.Session(
                profile_name=self.profile, region_name=self.region
            )
        return self._session

    def client(self, service: str, **kwargs: Any) -> Any:
        """Create a boto3 client for *service*."""
        return self.session.client(service, **kwargs)

    def cloudformation(self) -> Any:
        """Shortcut for the CloudFormation client used by the whole run."""
        return self.client("cloudformation")
