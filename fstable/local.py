import os
import datetime
import logging
from typing import List

from fstable.connector import Connector
from fstable.errors import AccessError, MetadataError
from fstable.utils.entry import FSEntry

logger = logging.getLogger(__name__)


class LocalConnector(Connector):
    """Local file system connector."""

    def scandir(self, path: str) -> List[FSEntry]:
        result = []
        try:
            with os.scandir(path) as it:
                for entry in it:
                    try:
                        result.append(self._to_entry(entry))
                    except MetadataError as err:
                        logger.debug('skipping entry: %s', err.message)
        except OSError as err:
            raise AccessError(path, err) from err
        return result

    @staticmethod
    def _to_entry(entry: os.DirEntry) -> FSEntry:
        try:
            stat = entry.stat(follow_symlinks=False)
        except OSError as err:
            raise MetadataError(entry.path, err) from err
        entry_type = 'folder' if entry.is_dir(follow_symlinks=False) else 'file'
        last_modified = datetime.datetime.fromtimestamp(stat.st_mtime, tz=datetime.timezone.utc).astimezone()
        return FSEntry(entry.name, entry_type, stat.st_size, last_modified)
