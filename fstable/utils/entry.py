import datetime
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class FSEntry:
    name: str
    type: Literal['file', 'folder']
    size: int
    last_modified: datetime.datetime
