# -*- coding: utf-8 -*-
"""
replyclipboard - Named text snippets copied to the clipboard on demand
"""

from .config import APP_VERSION as __version__  # noqa: F401
