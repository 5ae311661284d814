import logging
import sys

from app.exceptions import InvalidDocument
from app.repos.content_repo import FileContentRepo
from app.schemas.content import Status
from app.services.content_store import ContentStore
from app.settings import settings

logger = logging.getLogger(__name__)


def check_all(store: ContentStore) -> int:
    """Load every post and draft, returning how many failed to parse."""
    failures = 0
    for status in Status:
        for path in store.repo.list_paths(status):
            try:
                store.load_file(path, status)
            except InvalidDocument as e:
                failures += 1
                logger.error(f"{e.doc_id}: {e.reason}")
    return failures


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    store = ContentStore(
        FileContentRepo.from_settings(settings),
        words_per_minute=settings.WORDS_PER_MINUTE,
    )
    failures = check_all(store)
    if failures:
        logger.error(f"{failures} invalid document(s)")
        sys.exit(1)
    logger.info("All documents are valid.")
