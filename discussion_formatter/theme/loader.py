"""
Load external JSON themes.

A theme named "ocean" lives in <dir>/ocean.json. Every failure (missing file,
unreadable file, bad JSON, wrong shape) is logged and reported as None so the
renderer falls back to palette-only styling.
"""

import json
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from discussion_formatter.core.settings import get_setting
from discussion_formatter.logging import get_logger

from .base import Theme

logger = get_logger(__name__)

BUNDLED_THEMES_DIR = Path(__file__).parent / "themes"
THEME_SUFFIX = ".json"

PathLike = Union[str, Path]


class ThemeLoader:
    """Looks up theme files across an ordered list of directories."""

    def __init__(self, search_dirs: Iterable[PathLike] = ()):
        self._search_dirs: List[Path] = [Path(d) for d in search_dirs]

    @classmethod
    def default(cls) -> 'ThemeLoader':
        """Loader over the configured themes_dir, then the bundled themes."""
        configured = get_setting("themes_dir")
        if isinstance(configured, str) and configured.strip():
            return cls([configured, BUNDLED_THEMES_DIR])
        return cls([BUNDLED_THEMES_DIR])

    @property
    def search_dirs(self) -> Sequence[Path]:
        return tuple(self._search_dirs)

    def find(self, theme_name: Optional[str]) -> Optional[Path]:
        """Return the first theme file matching the name, or None."""
        if not theme_name or not theme_name.strip():
            return None
        theme_name = theme_name.strip()
        if '/' in theme_name or '\\' in theme_name or theme_name.startswith('.'):
            logger.warning(f"Rejecting theme name with path components: {theme_name!r}")
            return None

        for directory in self._search_dirs:
            candidate = directory / f"{theme_name}{THEME_SUFFIX}"
            try:
                if candidate.is_file():
                    return candidate
            except (OSError, ValueError) as e:
                # e.g. ENAMETOOLONG; treat like a missing file
                logger.warning(f"Cannot look up theme {theme_name[:40]!r} in {directory}: {e}")
                return None
        return None

    def load(self, theme_name: Optional[str]) -> Optional[Theme]:
        """Load a theme by name; None when absent or unusable."""
        path = self.find(theme_name)
        if path is None:
            logger.debug(f"No external theme named {theme_name!r}")
            return None
        return self.load_file(path)

    def load_file(self, path: PathLike) -> Optional[Theme]:
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read theme file {path}: {e}")
            return None
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse theme file {path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Theme file {path} does not contain a JSON object")
            return None

        theme = Theme.from_dict(data)
        logger.debug(f"Loaded theme {theme.name or path.stem!r} from {path}")
        return theme

    def list_available_theme_names(self) -> List[str]:
        """Names of all theme files, sorted case-insensitively.

        Uses the "name" field inside each file, or the file stem when the
        file cannot be parsed or has no name.
        """
        names = set()
        for directory in self._search_dirs:
            if not directory.is_dir():
                continue
            for path in directory.glob(f"*{THEME_SUFFIX}"):
                names.add(self._display_name(path))
        return sorted(names, key=str.casefold)

    @staticmethod
    def _display_name(path: Path) -> str:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.debug(f"Using file name for unparseable theme {path}: {e}")
            return path.stem
        name = data.get("name") if isinstance(data, dict) else None
        if isinstance(name, str) and name.strip():
            return name.strip()
        return path.stem
