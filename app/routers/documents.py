import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.exceptions import DocumentNotFound, InvalidDocument
from app.schemas.content import DocumentDetail, DocumentSummary, Status
from app.services.content_store import ContentStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/documents", response_model=List[DocumentSummary])
def list_documents(
    status: Status = Status.PUBLISHED,
    store: ContentStore = Depends(deps.get_content_store),
):
    """List published posts or drafts, without bodies."""
    try:
        return [doc.summary() for doc in store.list_documents(status)]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing {status.value} documents: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve documents")


@router.get("/documents/{doc_id:path}", response_model=DocumentDetail)
def get_document(
    doc_id: str,
    store: ContentStore = Depends(deps.get_content_store),
):
    """Get a single document by id."""
    try:
        return store.get_document(doc_id)
    except DocumentNotFound:
        raise HTTPException(status_code=404, detail="Document not found")
    except InvalidDocument as e:
        logger.warning(f"Refusing invalid document {doc_id}: {e.reason}")
        raise HTTPException(status_code=422, detail=e.reason)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving document {doc_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve document")


@router.get("/tags", response_model=Dict[str, List[str]])
def list_tags(store: ContentStore = Depends(deps.get_content_store)):
    """Tags of published documents, with the ids carrying each."""
    try:
        return store.list_tags()
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag}", response_model=List[DocumentSummary])
def documents_by_tag(tag: str, store: ContentStore = Depends(deps.get_content_store)):
    try:
        return [doc.summary() for doc in store.documents_by_tag(tag)]
    except Exception as e:
        logger.error(f"Unexpected error listing documents tagged {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve documents")
