from typing import Callable, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from docstore.domains.documents.entities import Document
    from docstore.domains.documents.schemas import SearchRequest


Condition = Callable[["Document"], bool]


class InMemoryDocumentRepository:
    """Репозиторий документов в памяти процесса"""

    def __init__(self):
        self._documents: Dict[str, "Document"] = {}

    def get_by_id(self, document_id: str) -> Optional["Document"]:
        """Получение документа по id"""
        return self._documents.get(document_id)

    def put(self, document: "Document") -> "Document":
        """Сохранение документа под его id с заменой прежнего значения"""
        self._documents[document.id] = document
        return document

    def all(self) -> List["Document"]:
        return list(self._documents.values())

    def count(self) -> int:
        return len(self._documents)

    def search(self, request: Optional["SearchRequest"]) -> List["Document"]:
        """Поиск документов: И между измерениями фильтра, ИЛИ внутри измерения"""
        if request is None:
            return self.all()

        conditions = self._build_conditions(request)

        return [
            document for document in self._documents.values()
            if all(condition(document) for condition in conditions)
        ]

    def _build_conditions(self, request: "SearchRequest") -> List[Condition]:
        conditions: List[Condition] = []

        if request.title_prefixes:
            prefixes = tuple(request.title_prefixes)
            conditions.append(
                lambda doc: doc.title is not None and doc.title.startswith(prefixes)
            )

        if request.contains_contents:
            fragments = list(request.contains_contents)
            conditions.append(
                lambda doc: doc.content is not None
                and any(fragment in doc.content for fragment in fragments)
            )

        if request.author_ids:
            author_ids = set(request.author_ids)
            conditions.append(
                lambda doc: doc.author is not None and doc.author.id in author_ids
            )

        # Документы без даты создания не отсекаются границами дат
        if request.created_from is not None:
            created_from = request.created_from
            conditions.append(
                lambda doc: doc.created is None or doc.created >= created_from
            )

        if request.created_to is not None:
            created_to = request.created_to
            conditions.append(
                lambda doc: doc.created is None or doc.created <= created_to
            )

        return conditions
