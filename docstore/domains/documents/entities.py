from datetime import datetime, timezone
from typing import Optional


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Наивное время считается UTC"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author:
    """Сущность автора документа"""

    def __init__(self, id: str, name: Optional[str] = None):
        self.id = id
        self.name = name

    def __eq__(self, other) -> bool:
        if not isinstance(other, Author):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name={self.name})"


class Document:
    """Сущность документа.

    Все поля необязательны на входе: id и created заполняются хранилищем
    при сохранении.
    """

    def __init__(
        self,
        id: Optional[str] = None,
        title: Optional[str] = None,
        content: Optional[str] = None,
        author: Optional[Author] = None,
        created: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.author = author
        self.created = created

    def has_id(self) -> bool:
        """Есть ли у документа непустой идентификатор"""
        return bool(self.id)

    def _fields(self) -> tuple:
        author = (self.author.id, self.author.name) if self.author is not None else None
        return (self.id, self.title, self.content, author, self.created)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self._fields() == other._fields()

    __hash__ = None

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title}, created={self.created})"
