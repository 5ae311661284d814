class ContentError(Exception):
    """Base class for content store failures."""


class DocumentNotFound(ContentError):
    def __init__(self, doc_id: str):
        super().__init__(f"Document not found: {doc_id}")
        self.doc_id = doc_id


class InvalidDocument(ContentError):
    def __init__(self, doc_id: str, reason: str):
        super().__init__(f"Invalid document {doc_id}: {reason}")
        self.doc_id = doc_id
        self.reason = reason
