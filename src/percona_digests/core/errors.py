"""Fatal error kinds raised by the update pipeline.

Every error aborts the run; the CLI prints the message and exits with status 1.
"""

from __future__ import annotations


class UpdaterError(Exception):
    """Base class for all fatal pipeline errors."""


class UnsupportedOperator(UpdaterError):
    pass


class UpstreamUnavailable(UpdaterError):
    """The GitHub releases API could not be read."""


class NoReleasesFound(UpdaterError):
    pass


class NoStableReleasesFound(NoReleasesFound):
    """Releases exist, but all of them are drafts or pre-releases."""


class NotesUnavailable(UpdaterError):
    """The release-notes document could not be fetched."""


class NoCertifiedImages(UpdaterError):
    pass


class ConfigFileMissing(UpdaterError):
    pass


class InvalidConfigFile(UpdaterError):
    """The Renovate config exists but is not a JSON object."""
