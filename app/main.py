import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from app.routers import documents
from app.security import require_content_key
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    locations = {"posts": settings.posts_path, "drafts": settings.drafts_path}
    for label, path in locations.items():
        if path.is_dir():
            logger.info(f"Serving {label} from {path.resolve()}")
        else:
            logger.warning(f"No {label} directory at {path.resolve()}")
    yield


app = FastAPI(
    title="Content Store API",
    description="Posts and drafts of a static website",
    lifespan=lifespan,
)

app.include_router(
    documents.router, dependencies=[Depends(require_content_key)]
)


@app.get("/")
async def root():
    return {"message": "Content Store API is running"}
