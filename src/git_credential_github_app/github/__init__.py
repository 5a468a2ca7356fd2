from .client import API_VERSION, GitHubAppClient, decode_json
from .installations import PAGE_SIZE, iter_installations, list_installations, resolve_installation
from .models import Installation, InstallationAccessToken, InstallationAccount
from .tokens import create_installation_token

__all__ = [
    "API_VERSION",
    "GitHubAppClient",
    "Installation",
    "InstallationAccessToken",
    "InstallationAccount",
    "PAGE_SIZE",
    "create_installation_token",
    "decode_json",
    "iter_installations",
    "list_installations",
    "resolve_installation",
]
