import datetime
import logging
import math
import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from pydantic import ValidationError

from app.exceptions import InvalidDocument
from app.schemas.content import DocumentDetail, Status
from app.services.content_parser import ContentParser, FrontMatterError

logger = logging.getLogger(__name__)

DATED_FILENAME = re.compile(r"^(\d{4}-\d{2}-\d{2})-(.+)$")
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


class DocumentSequence:
    """Documents of one status. Each iteration re-reads the content directory."""

    def __init__(self, store: "ContentStore", status: Status):
        self.store = store
        self.status = status

    def __iter__(self) -> Iterator[DocumentDetail]:
        yield from self.store._load(self.status)


class ContentStore:
    def __init__(
        self,
        repo,
        parser: Optional[ContentParser] = None,
        words_per_minute: int = 200,
    ):
        self.repo = repo
        self.parser = parser or ContentParser()
        self.words_per_minute = words_per_minute

    def list_documents(self, status: Status = Status.PUBLISHED) -> DocumentSequence:
        return DocumentSequence(self, Status(status))

    def get_document(self, doc_id: str) -> DocumentDetail:
        path, status = self.repo.find(doc_id)
        logger.debug(f"Loading {status.value} document {doc_id} from {path}")
        return self.load_file(path, status)

    def list_tags(self) -> Dict[str, List[str]]:
        """Map each tag on a published document to the ids carrying it."""
        index: Dict[str, List[str]] = {}
        for doc in self.list_documents(Status.PUBLISHED):
            for tag in doc.tags:
                index.setdefault(tag, []).append(doc.id)
        return dict(sorted(index.items()))

    def documents_by_tag(self, tag: str) -> List[DocumentDetail]:
        return [
            doc for doc in self.list_documents(Status.PUBLISHED) if tag in doc.tags
        ]

    def _load(self, status: Status) -> List[DocumentDetail]:
        docs = []
        for path in self.repo.list_paths(status):
            try:
                docs.append(self.load_file(path, status))
            except InvalidDocument as e:
                logger.warning(f"Skipping {e.doc_id}: {e.reason}")

        if status is Status.PUBLISHED:
            docs.sort(
                key=lambda d: (d.date or datetime.date.min, Path(d.id).name),
                reverse=True,
            )
        else:
            docs.sort(key=lambda d: Path(d.id).name)
        return docs

    def load_file(self, path: Path, status: Status) -> DocumentDetail:
        doc_id = self.repo.doc_id(path)
        try:
            text = self.repo.read(path)
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidDocument(doc_id, f"unreadable: {e}") from e
        return parse_document(
            doc_id,
            text,
            status,
            parser=self.parser,
            words_per_minute=self.words_per_minute,
        )


def parse_document(
    doc_id: str,
    text: str,
    status: Status,
    *,
    parser: ContentParser,
    words_per_minute: int = 200,
) -> DocumentDetail:
    """Parse front matter and body into a document, raising InvalidDocument."""
    try:
        metadata, body = parser.parse(text)
    except FrontMatterError as e:
        raise InvalidDocument(doc_id, str(e)) from e

    stem = Path(doc_id).stem
    filename_date, slug = split_dated_filename(stem)

    try:
        date = _convert_date(metadata.get("date")) or filename_date
    except ValueError as e:
        raise InvalidDocument(doc_id, f"bad date: {metadata.get('date')!r}") from e

    title = derive_title(metadata, slug)
    if not title:
        raise InvalidDocument(doc_id, "empty title: none given and none derivable")

    author = metadata.get("author")
    try:
        return DocumentDetail(
            id=doc_id,
            slug=slug,
            title=title,
            layout=metadata.get("layout") or "post",
            author=str(author) if author else None,
            tags=normalize_tags(metadata.get("tags")),
            comments=metadata.get("comments"),
            status=status,
            date=date,
            excerpt=_derive_excerpt(metadata, body),
            readingTime=calculate_reading_time(body, words_per_minute),
            body=body,
        )
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise InvalidDocument(doc_id, f"invalid front matter ({fields})") from e


def split_dated_filename(stem: str):
    """Split 'YYYY-MM-DD-slug' into (date, slug); undated stems keep their name."""
    match = DATED_FILENAME.match(stem)
    if match:
        try:
            return datetime.date.fromisoformat(match.group(1)), match.group(2)
        except ValueError:
            pass
    return None, stem


def derive_title(metadata: dict, slug: str) -> str:
    title = metadata.get("title")
    if title is not None and str(title).strip():
        return str(title).strip()
    clean_slug = slug.replace("-", " ").replace("_", " ")
    return clean_slug.title().strip()


def normalize_tags(value) -> List[str]:
    """
    Tags come as a YAML list or a whitespace separated string. Order is kept,
    duplicates dropped.
    """
    if not value:
        return []
    if isinstance(value, str):
        items = value.split()
    elif isinstance(value, (list, tuple, set)):
        items = [str(item).strip() for item in value if item is not None]
    else:
        items = [str(value)]
    return list(dict.fromkeys(item for item in items if item))


def _convert_date(value) -> Optional[datetime.date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(str(value).strip()[:10])


def _derive_excerpt(metadata: dict, body: str) -> Optional[str]:
    if metadata.get("excerpt"):
        return str(metadata["excerpt"]).strip()
    for paragraph in PARAGRAPH_BREAK.split(body.strip()):
        paragraph = paragraph.strip()
        if paragraph and not paragraph.startswith("#"):
            return " ".join(paragraph.split())
    return None


def calculate_reading_time(text: str, words_per_minute: int = 200) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / words_per_minute) or 1
    return f"{minutes} min"
