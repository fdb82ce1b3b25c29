"""Filesystem locations used by medoc-check."""

from pathlib import Path

from medoc_check.constants import CONFIG_DIR_NAME, DEFAULT_CONFIG_SUBDIR


class Paths:
    """Application directories.

    Everything medoc-check writes (settings.conf, checkpoint.json, its own
    log) lives under CONFIG_DIR unless settings.conf points elsewhere.
    """

    CONFIG_DIR = Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR

    @staticmethod
    def expand_path(path_str: str) -> Path:
        """Expand ``~`` and make a settings value absolute.

        Example:
            >>> Paths.expand_path("~/medoc/checkpoint.json")
            PosixPath('/home/user/medoc/checkpoint.json')

        """
        return Path(path_str.strip()).expanduser().resolve(strict=False)
