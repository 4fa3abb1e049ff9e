import datetime
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import yaml

from fstable.utils.entry import FSEntry

logger = logging.getLogger(__name__)

KB = 1024
MB = 1024 * KB
GB = 1024 * MB

MINUTE = datetime.timedelta(minutes=1)
HOUR = datetime.timedelta(hours=1)
DAY = datetime.timedelta(days=1)
MONTH = datetime.timedelta(days=30)


def local_now() -> datetime.datetime:
    """Current time, timezone-aware in the local zone."""
    return datetime.datetime.now(datetime.timezone.utc).astimezone()


@dataclass(frozen=True)
class Palette:
    """Terminal color sequences for name cells.

    Attributes
    ----------
    folder : str
        Sequence written before folder names.
    file : str
        Sequence written before file names.
    reset : str
        Sequence written after every name.
    """

    folder: str = '\x1b[1;92m'
    file: str = '\x1b[1;97m'
    reset: str = '\x1b[0m'

    @classmethod
    def from_yaml(cls, path: str) -> 'Palette':
        """Creates class instance from configuration path.

        Parameters
        ----------
        path : str
            path to configuration file.

        Returns
        -------
        Palette
            Class instance.
        """
        with open(path) as f:
            config = yaml.safe_load(f) or {}
        if not isinstance(config, dict):
            raise ValueError(f"configuration file must contain a mapping: '{path}'")
        fields = {'folder_color': 'folder', 'file_color': 'file', 'reset_color': 'reset'}
        for key, value in config.items():
            if key not in fields:
                raise ValueError(f"unknown configuration field: '{key}'")
            if not isinstance(value, str):
                raise ValueError(f"configuration field '{key}' must be a string, got {value!r}")
        logger.debug('loaded palette from %s', path)
        return cls(**{fields[key]: value for key, value in config.items()})


DEFAULT_PALETTE = Palette()


@dataclass(frozen=True)
class Row:
    index: str
    name: str
    type: str
    size: str
    modified: str

    def cells(self) -> list[str]:
        return [self.index, self.name, self.type, self.size, self.modified]


def human_size(size: int) -> str:
    """Format byte count with binary units."""
    if size < KB:
        return f'{size} B'
    elif size < MB:
        return f'{size / KB:.1f} kB'
    elif size < GB:
        return f'{size / MB:.1f} MB'
    return f'{size / GB:.1f} GB'


def human_time(
    modified: datetime.datetime,
    now: Optional[datetime.datetime] = None
) -> str:
    """Format modification time relative to `now`.

    Parameters
    ----------
    modified : datetime.datetime
        Modification time.
    now : Optional[datetime.datetime], default=None
        Reference time, current local time if not set. Both
        values must be timezone-aware.

    Returns
    -------
    str
        Relative time for the last 30 days, absolute date otherwise.
    """
    if now is None:
        now = local_now()
    delta = now - modified
    if delta < MINUTE:
        return 'just now'
    elif delta < HOUR:
        return f'{delta // MINUTE} minutes ago'
    elif delta < DAY:
        return f'{delta // HOUR} hours ago'
    elif delta < MONTH:
        return f'{delta // DAY} days ago'
    return modified.strftime('%b %d, %Y')


def colorize(name: str, kind: str, palette: Palette = DEFAULT_PALETTE) -> str:
    prefix = palette.folder if kind == 'folder' else palette.file
    return f'{prefix}{name}{palette.reset}'


def format_entry(
    index: int,
    entry: FSEntry,
    now: Optional[datetime.datetime] = None,
    palette: Palette = DEFAULT_PALETTE
) -> Row:
    return Row(
        index=str(index),
        name=colorize(entry.name, entry.type, palette),
        type=entry.type,
        size=human_size(entry.size),
        modified=human_time(entry.last_modified, now)
    )


def format_entries(
    entries: Iterable[FSEntry],
    now: Optional[datetime.datetime] = None,
    palette: Palette = DEFAULT_PALETTE
) -> list[Row]:
    """Convert sorted entries to display rows.

    Parameters
    ----------
    entries : Iterable[FSEntry]
        Entries in display order.
    now : Optional[datetime.datetime], default=None
        Reference time shared by all rows, current local time if not set.
    palette : Palette, default=DEFAULT_PALETTE
        Name colors.

    Returns
    -------
    list[Row]
        One row per entry, indexed from zero.
    """
    if now is None:
        now = local_now()
    return [format_entry(i, entry, now, palette) for i, entry in enumerate(entries)]
