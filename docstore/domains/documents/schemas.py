from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from docstore.domains.documents.entities import Author, Document, as_utc


class SearchRequest(BaseModel):
    """Фильтр поиска документов.

    Пустое или отсутствующее поле не ограничивает выборку.
    """
    title_prefixes: Optional[List[str]] = None
    contains_contents: Optional[List[str]] = None
    author_ids: Optional[List[str]] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None

    @field_validator("created_from", "created_to")
    @classmethod
    def normalize_bounds(cls, v):
        return as_utc(v)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthorSchema(BaseModel):
    id: str
    name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class DocumentSave(BaseModel):
    """Схема для сохранения (upsert) документа"""
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorSchema] = None
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def normalize_created(cls, v):
        return as_utc(v)

    def to_entity(self) -> Document:
        """Преобразование схемы в доменную сущность"""
        author = None
        if self.author is not None:
            author = Author(id=self.author.id, name=self.author.name)

        return Document(
            id=self.id,
            title=self.title,
            content=self.content,
            author=author,
            created=self.created
        )


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: str
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorSchema] = None
    created: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
