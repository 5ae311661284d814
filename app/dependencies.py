from fastapi import Depends

from app.repos.content_repo import FileContentRepo
from app.security import get_settings
from app.services.content_store import ContentStore
from app.settings import Settings


def get_content_repo(current_settings: Settings = Depends(get_settings)):
    return FileContentRepo.from_settings(current_settings)


def get_content_store(
    repo=Depends(get_content_repo),
    current_settings: Settings = Depends(get_settings),
):
    return ContentStore(repo=repo, words_per_minute=current_settings.WORDS_PER_MINUTE)
