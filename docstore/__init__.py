from docstore.domains.documents import Author, Document, DocumentService, SearchRequest

__all__ = ["Author", "Document", "DocumentService", "SearchRequest"]
