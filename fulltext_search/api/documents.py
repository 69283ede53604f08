"""Document ingestion and lookup API endpoints."""

from fastapi import APIRouter, HTTPException, Path, Query

from ..core.document import Document
from ..models.response import DocumentResponse, IngestResponse
from ..models.request import DocumentRequest, BatchDocumentRequest
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["documents"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine


def _to_response(doc: Document, include_content: bool = False) -> DocumentResponse:
    return DocumentResponse(
        document_id=doc.id,
        filename=doc.filename,
        total_words=doc.total_words,
        unique_words=doc.unique_word_count,
        content=doc.content if include_content else None
    )


def _ingest(requests: list) -> IngestResponse:
    added = []
    skipped = []
    for request in requests:
        doc = search_engine.add_document(request.filename, request.text)
        if doc is None:
            skipped.append(request.filename)
        else:
            added.append(_to_response(doc))

    return IngestResponse(
        added=added,
        skipped=skipped,
        total_documents=len(search_engine.corpus)
    )


@router.post(
    "/documents",
    response_model=IngestResponse,
    status_code=201,
    summary="Add a document",
    description="Tokenize and index a single plain-text document"
)
async def add_document(request: DocumentRequest) -> IngestResponse:
    """
    Add a document to the index.

    Documents with empty text are skipped rather than rejected; they are
    reported in the ``skipped`` list.
    """
    try:
        return _ingest([request])

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to add document: {str(e)}"
        )


@router.post(
    "/documents/batch",
    response_model=IngestResponse,
    status_code=201,
    summary="Add several documents",
    description="Index several documents; ids are assigned in request order"
)
async def add_documents(request: BatchDocumentRequest) -> IngestResponse:
    """Add several documents in a single request."""
    try:
        return _ingest(request.documents)

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to add documents: {str(e)}"
        )


@router.get(
    "/documents",
    response_model=list[DocumentResponse],
    summary="List documents",
    description="List indexed documents in id order"
)
async def list_documents(
    offset: int = Query(0, ge=0, description="Number of documents to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of documents to return")
) -> list[DocumentResponse]:
    """List indexed documents without their content."""
    documents = list(search_engine.corpus)[offset:offset + limit]
    return [_to_response(doc) for doc in documents]


@router.get(
    "/documents/{document_id}",
    response_model=DocumentResponse,
    summary="Get a document",
    description="Get an indexed document including its normalized content"
)
async def get_document(
    document_id: int = Path(..., ge=0, description="Sequential document identifier")
) -> DocumentResponse:
    """Get a single document by id."""
    doc = search_engine.get_document(document_id)
    if doc is None:
        raise HTTPException(
            status_code=404,
            detail=f"Document {document_id} not found"
        )

    return _to_response(doc, include_content=True)
