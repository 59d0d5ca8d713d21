import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from docstore.db.repositories.document_repository import InMemoryDocumentRepository
from docstore.domains.documents.entities import Document, as_utc
from docstore.domains.documents.schemas import SearchRequest

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class DocumentService:
    """Сервис для работы с документами: upsert, поиск и получение по id"""

    def __init__(
        self,
        repository: Optional[InMemoryDocumentRepository] = None,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utcnow
    ):
        self.repository = repository if repository is not None else InMemoryDocumentRepository()
        self._id_factory = id_factory
        self._clock = clock

    def save(self, document: Document) -> Document:
        """Сохранение документа.

        Новому документу присваиваются id и, если не задана, дата создания.
        При обновлении без created сохраняется дата создания прежней версии.
        Переданный объект изменяется на месте и возвращается.
        """
        if document is None:
            raise ValueError("Document is required")

        document.created = as_utc(document.created)

        if not document.has_id():
            document.id = self._id_factory()
            if document.created is None:
                document.created = as_utc(self._clock())
            logger.info(f"Assigned new id {document.id} to document")
        else:
            existing = self.repository.get_by_id(document.id)
            # Явно переданный created перезаписывает исходную дату
            if existing is not None and document.created is None:
                document.created = existing.created
            logger.debug(f"Upserting document {document.id} (existing={existing is not None})")

        return self.repository.put(document)

    def search(self, request: Optional[SearchRequest] = None) -> List[Document]:
        """Поиск документов по фильтру; без фильтра возвращаются все"""
        documents = self.repository.search(request)
        logger.debug(f"Search matched {len(documents)} of {self.repository.count()} documents")
        return documents

    def find_by_id(self, document_id: str) -> Optional[Document]:
        """Получение документа по id"""
        document = self.repository.get_by_id(document_id)
        logger.debug(f"Lookup of document {document_id}: {'found' if document else 'not found'}")
        return document
