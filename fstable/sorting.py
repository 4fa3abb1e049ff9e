from typing import Iterable

from fstable.utils.entry import FSEntry


def _sort_key(entry: FSEntry) -> tuple[bool, str]:
    return entry.type != 'folder', entry.name


def sort_entries(entries: Iterable[FSEntry]) -> list[FSEntry]:
    """Order entries for display.

    Folders come before files; within each group names are compared
    ordinally. The sort is stable.

    Parameters
    ----------
    entries : Iterable[FSEntry]
        Entries in enumeration order.

    Returns
    -------
    list[FSEntry]
        New sorted list.
    """
    return sorted(entries, key=_sort_key)
