"""cfn-update - CloudFormation stack updates through changesets.

Creates a changeset against the deployed template, waits for it to be
evaluated, executes it and waits for the stack to settle, deleting the
changeset again if anything fails along the way.
"""

import logging

try:
    from importlib.metadata import version

    __version__ = version("cfn-changeset-update")
except Exception:
    __version__ = "0.0.0.dev0"

# User-facing output goes through ui; log records stay silent unless the
# application configures logging (``--debug``).
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["__version__"]
