"""Variable collector: the process environment as sorted key/value pairs."""

import logging

from envscope.inspection.providers import DataProvider
from envscope.inspection.types import KeyValuePair

logger = logging.getLogger(__name__)


def collect_environment(provider: DataProvider) -> list[KeyValuePair]:
    """Return every environment variable, sorted by name.

    Sorting is case-sensitive code-point order. Unset values become ``""``;
    nothing is filtered out.
    """
    env = provider.environ()
    pairs = [KeyValuePair(key=key, value=env[key] or "") for key in sorted(env)]
    logger.debug("Collected %d environment variables", len(pairs))
    return pairs
