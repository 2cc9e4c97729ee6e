"""Load and validate the docsite YAML configuration.

This subpackage parses the project's ``docsite.yaml`` file, applies defaults,
resolves relative paths against the configuration file, and produces typed
dataclasses (:class:`SiteConfig`, :class:`ThemeConfig`, etc.) that the tree
loader and renderer consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from docsite.config import load_site_config
>>> site = load_site_config(Path("docsite.yaml"))  # doctest: +SKIP
>>> site.base_path  # doctest: +SKIP
'/docs/'
"""

from .loader import load_site_config
from .models import (
    CategoryConfig,
    LinkConfig,
    SiteConfig,
    SiteConfigError,
    ThemeConfig,
)

__all__ = [
    "CategoryConfig",
    "LinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
    "load_site_config",
]
