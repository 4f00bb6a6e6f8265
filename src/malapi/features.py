"""Feature toggles for the optional endpoint groups.

The forum and user groups are enabled unless switched off in the
``[features]`` table of the config file or with ``MALAPI_FEATURES_FORUM=0`` /
``MALAPI_FEATURES_USER=0``.
"""

from enum import Enum

from malapi.errors import FeatureDisabledError
from malapi.utils.config import resolve_setting


class Feature(str, Enum):
    FORUM = "forum"
    USER = "user"


def is_enabled(feature: Feature) -> bool:
    """Return True if *feature* is enabled."""
    return resolve_setting(f"features.{feature.value}", default=True)


def require_feature(feature: Feature) -> None:
    """Raise FeatureDisabledError unless *feature* is enabled."""
    if not is_enabled(feature):
        raise FeatureDisabledError(feature.value)
