from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import List, Optional

from docstore.domains.documents.schemas import DocumentSave, DocumentResponse, SearchRequest
from docstore.domains.documents.services import DocumentService

router = APIRouter(prefix="/documents", tags=["documents"])


def get_document_service(request: Request) -> DocumentService:
    """Сервис документов, общий для всего приложения"""
    return request.app.state.document_service


@router.post("", response_model=DocumentResponse)
async def save_document(
    document_data: DocumentSave,
    service: DocumentService = Depends(get_document_service)
):
    """Создание или обновление документа"""
    document = service.save(document_data.to_entity())
    return DocumentResponse.model_validate(document)


@router.get("", response_model=List[DocumentResponse])
async def list_documents(service: DocumentService = Depends(get_document_service)):
    """Получение всех документов"""
    return [DocumentResponse.model_validate(doc) for doc in service.search(None)]


@router.post("/search", response_model=List[DocumentResponse])
async def search_documents(
    search_request: Optional[SearchRequest] = None,
    service: DocumentService = Depends(get_document_service)
):
    """Поиск документов по фильтру"""
    documents = service.search(search_request)
    return [DocumentResponse.model_validate(doc) for doc in documents]


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service)
):
    """Получение документа по id"""
    document = service.find_by_id(document_id)

    if not document:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )

    return DocumentResponse.model_validate(document)
