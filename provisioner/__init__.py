"""tilewm-setup - provisions a tiling window manager desktop on Windows."""

from config.project import get_project

__version__ = get_project().version

# No package-level imports - use absolute imports instead
