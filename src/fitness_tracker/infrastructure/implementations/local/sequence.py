"""
Persistent id sequence for the local file-based repositories.

The last issued id is kept in ``{directory}/_sequence`` so ids are never
reused, even after the entity holding the highest id is deleted.
"""

from pathlib import Path

from loguru import logger

SEQUENCE_FILE = "_sequence"


def numeric_ids(directory: Path) -> list[int]:
    """Ids of the ``{id}.json`` files in a directory, ignoring other files."""
    return [
        int(path.stem) for path in directory.glob("*.json") if path.stem.isdigit()
    ]


class FileSequence:
    """
    Monotonic id counter stored next to the entity files.

    Not thread-safe on its own; callers hold their repository lock.
    """

    def __init__(self, directory: Path):
        self.directory = directory
        self.path = directory / SEQUENCE_FILE

    def _last_issued(self) -> int:
        if not self.path.exists():
            return 0
        content = self.path.read_text().strip()
        if not content.isdigit():
            logger.warning(f"Ignoring unreadable id sequence at {self.path}")
            return 0
        return int(content)

    def next_id(self) -> int:
        """
        Issue the next id.

        Existing files are also taken into account so directories written
        before the sequence file existed never hand out a stored id.
        """
        next_id = max([self._last_issued(), *numeric_ids(self.directory)]) + 1
        self.path.write_text(str(next_id))
        return next_id

    def advance_to(self, issued_id: int) -> None:
        """Record an id supplied by the caller so it is never issued again."""
        if issued_id > self._last_issued():
            self.path.write_text(str(issued_id))
