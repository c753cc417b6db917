# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Version management utilities."""

import importlib.metadata
from functools import lru_cache


@lru_cache(maxsize=1)
def get_version() -> str:
    """Get the service version from the installed ``shoe-api`` distribution.

    Falls back to a default version when the package is not installed.
    """
    try:
        return importlib.metadata.version('shoe-api')
    except importlib.metadata.PackageNotFoundError:
        return '0.1.0'
