"""
Headless browser discovery.

The candidate install locations live in ``config`` as plain data; this module
only expands them for the current platform and probes them in order. The
``exists`` callable is injectable so discovery can be tested without touching
the real filesystem.
"""

import logging
import ntpath
import os
import sys
from typing import Callable, Mapping, Optional

from .. import config
from ..exceptions import RenderEngineNotFoundError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Chrome/Chromium not found. Please install Chrome or provide the executable path."


def candidate_paths(platform: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> list[str]:
    """
    Get the ordered list of browser locations to probe.

    Args:
        platform: A ``sys.platform`` value; defaults to the running platform
        environ: Environment used to expand Windows install roots

    Returns:
        Candidate executable paths, most preferred first
    """
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ

    if platform.startswith('win'):
        paths = []
        for variable, relative in config.WINDOWS_BROWSER_CANDIDATES:
            root = environ.get(variable)
            if root:
                paths.append(ntpath.join(root, relative))
        return paths

    if platform == 'darwin':
        return list(config.BROWSER_CANDIDATES['darwin'])
    if platform.startswith('linux'):
        return list(config.BROWSER_CANDIDATES['linux'])
    return []


def find_browser_executable(platform: Optional[str] = None,
                            environ: Optional[Mapping[str, str]] = None,
                            exists: Callable[[str], bool] = os.path.isfile) -> Optional[str]:
    """Return the first existing candidate path, or None."""
    for path in candidate_paths(platform, environ):
        if exists(path):
            logger.debug(f"Found browser executable: {path}")
            return path
    return None


def resolve_browser_executable(executable_path: Optional[str] = None,
                               platform: Optional[str] = None,
                               environ: Optional[Mapping[str, str]] = None,
                               exists: Callable[[str], bool] = os.path.isfile) -> str:
    """
    Resolve the browser to launch: the supplied path, else the first discovered one.

    Raises:
        RenderEngineNotFoundError: If nothing resolves or the path does not exist
    """
    path = executable_path or find_browser_executable(platform, environ, exists)
    if not path:
        raise RenderEngineNotFoundError(NOT_FOUND_MESSAGE)
    if not exists(path):
        raise RenderEngineNotFoundError(f"Chrome executable not found at: {path}")
    return path
