from .endpoints import ApiEndpoints, endpoints_for_domain
from .loader import build_config, load_config_file, merge_settings
from .models import HelperConfig
from .selectors import ExplicitId, InstallationSelector, Organization, RepositorySlug, User

__all__ = [
    "ApiEndpoints",
    "ExplicitId",
    "HelperConfig",
    "InstallationSelector",
    "Organization",
    "RepositorySlug",
    "User",
    "build_config",
    "endpoints_for_domain",
    "load_config_file",
    "merge_settings",
]
