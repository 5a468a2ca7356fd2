from .gitconfig import CACHE_TIMEOUT_SECONDS, helper_command, render_git_config
from .protocol import QUIT_SENTINEL, Operation, format_get_output

__all__ = [
    "CACHE_TIMEOUT_SECONDS",
    "Operation",
    "QUIT_SENTINEL",
    "format_get_output",
    "helper_command",
    "render_git_config",
]
