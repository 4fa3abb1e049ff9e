from fstable.connector import Connector
from fstable.local import LocalConnector
from fstable.errors import AccessError, FSTableError, MetadataError
from fstable.utils.entry import FSEntry
