"""
Commit Activity README Updater

Counts a GitHub user's commits by time of day and keeps a text bar chart of
the distribution up to date in a README section.
"""

__version__ = "1.0.0"

from .app import ExitCode, ProductiveBox, run
from .config import Config, load_configuration

__all__ = [
    "Config",
    "ExitCode",
    "ProductiveBox",
    "load_configuration",
    "run",
]
