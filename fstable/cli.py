import argparse
import datetime
import logging
import sys
from typing import IO, Optional, Sequence

from fstable.connector import Connector
from fstable.errors import AccessError
from fstable.formatting import DEFAULT_PALETTE, Palette, Row, format_entries
from fstable.local import LocalConnector
from fstable.sorting import sort_entries
from fstable.table import print_table
from fstable.utils.entry import FSEntry


class CLI:
    """Directory listing pipeline.

    Attributes
    ----------
    connector : Connector
        Directory reader.
    palette : Palette
        Name colors.
    """

    def __init__(
        self,
        connector: Connector,
        palette: Palette = DEFAULT_PALETTE
    ):
        self.connector = connector
        self.palette = palette

    def list_directory(self, path: str) -> tuple[list[FSEntry], Optional[AccessError]]:
        """Read directory entries.

        Parameters
        ----------
        path : str
            Directory path.

        Returns
        -------
        tuple[list[FSEntry], Optional[AccessError]]
            Entries and the listing error. On error entries are empty.
        """
        try:
            return self.connector.scandir(path), None
        except AccessError as err:
            return [], err

    def build_rows(
        self,
        entries: Sequence[FSEntry],
        now: Optional[datetime.datetime] = None
    ) -> list[Row]:
        return format_entries(sort_entries(entries), now, self.palette)

    def run(
        self,
        path: str,
        now: Optional[datetime.datetime] = None,
        out: Optional[IO[str]] = None,
        err: Optional[IO[str]] = None
    ) -> bool:
        """List `path` and print the table.

        Parameters
        ----------
        path : str
            Directory path.
        now : Optional[datetime.datetime], default=None
            Reference time for relative dates.
        out : Optional[IO[str]], default=None
            Table stream, stdout if not set.
        err : Optional[IO[str]], default=None
            Error stream, stderr if not set.

        Returns
        -------
        bool
            False if the directory could not be listed.
        """
        entries, error = self.list_directory(path)
        if error is not None:
            print(f'error: {error.message}', file=err if err is not None else sys.stderr)
        print_table(self.build_rows(entries, now), file=out)
        return error is None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fstable',
        description='list directory contents as a table'
    )
    parser.add_argument('path', nargs='?', default='.', type=str, help='directory path (default: current directory)')
    parser.add_argument('--config_path', type=str, default=None, help='path to palette configuration file')
    parser.add_argument('--strict', action='store_true', help='exit with status 1 if the directory cannot be listed')
    parser.add_argument('--debug', action='store_true', help='enable debug logging')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='[%(name)s] %(levelname)s: %(message)s',
            stream=sys.stderr
        )

    palette = Palette.from_yaml(args.config_path) if args.config_path else DEFAULT_PALETTE
    ok = CLI(LocalConnector(), palette).run(args.path)
    if not ok and args.strict:
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == '__main__':
    run()
