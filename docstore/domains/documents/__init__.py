from docstore.domains.documents.entities import Author, Document
from docstore.domains.documents.schemas import (
    SearchRequest, AuthorSchema, DocumentSave, DocumentResponse
)
from docstore.domains.documents.services import DocumentService

__all__ = [
    "Author", "Document",
    "SearchRequest", "AuthorSchema", "DocumentSave", "DocumentResponse",
    "DocumentService"
]
