from abc import ABC, abstractmethod

from fstable.utils.entry import FSEntry


class Connector(ABC):
    """Abstract class for directory reader."""

    @abstractmethod
    def scandir(self, path: str) -> list[FSEntry]:
        """List directory content with metadata.

        Only immediate children are returned, in enumeration order.

        Parameters
        ----------
        path : str
            Directory path.

        Returns
        -------
        list[FSEntry]
            List of directory contents with metadata.

        Raises
        ------
        AccessError
            If the directory cannot be opened or enumerated.
        """
        pass
