from pathlib import Path
from typing import Union

from ..core.logging_config import get_logger
from ..core.validation import require_instance, require_not_none
from ..domain.entities import Journal
from ..domain.interfaces import IJournalPersistence

logger = get_logger(__name__)


class JournalFileRepository(IJournalPersistence):
    """Saves journals as plain UTF-8 text, one entry per line."""

    def save_to_file(
        self,
        journal: Journal,
        filename: Union[str, Path],
        overwrite: bool = False,
    ) -> bool:
        """Write the journal unless the file exists and overwrite is off."""
        require_instance(journal, Journal, "journal")
        require_not_none(filename, "filename")
        path = Path(filename)

        if path.exists() and not overwrite:
            logger.warning(
                "Journal file already exists; not overwriting",
                extra={"context": {"path": str(path)}},
            )
            return False

        path.write_text(str(journal), encoding="utf-8")
        logger.info(
            "Journal saved",
            extra={"context": {"path": str(path), "entries": len(journal)}},
        )
        return True
