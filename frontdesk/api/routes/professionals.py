"""Professional routes - API endpoints for professional records."""

from fastapi import APIRouter, HTTPException
from uuid import UUID

from frontdesk.api.deps import DBSession
from frontdesk.schemas.professional import ProfessionalCreate, ProfessionalUpdate, ProfessionalResponse
from frontdesk.services.professional_service import ProfessionalService

router = APIRouter()


@router.post("/", response_model=ProfessionalResponse, status_code=201)
async def create_professional(professional_data: ProfessionalCreate, db: DBSession):
    """Register a new professional."""
    service = ProfessionalService(db)
    return await service.create_professional(professional_data)


@router.get("/", response_model=list[ProfessionalResponse])
async def list_professionals(db: DBSession, search: str | None = None):
    """List professionals, optionally filtered by name."""
    service = ProfessionalService(db)
    return await service.list_professionals(search)


@router.get("/{professional_id}", response_model=ProfessionalResponse)
async def get_professional(professional_id: UUID, db: DBSession):
    """Get a professional by ID."""
    service = ProfessionalService(db)
    professional = await service.get_professional_by_id(professional_id)

    if not professional:
        raise HTTPException(status_code=404, detail="Professional not found")

    return professional


@router.patch("/{professional_id}", response_model=ProfessionalResponse)
async def update_professional(professional_id: UUID, professional_data: ProfessionalUpdate, db: DBSession):
    """Update a professional."""
    service = ProfessionalService(db)
    professional = await service.get_professional_by_id(professional_id)

    if not professional:
        raise HTTPException(status_code=404, detail="Professional not found")

    return await service.update_professional(professional, professional_data)


@router.delete("/{professional_id}", status_code=204)
async def delete_professional(professional_id: UUID, db: DBSession):
    """Delete a professional together with their appointments."""
    service = ProfessionalService(db)
    professional = await service.get_professional_by_id(professional_id)

    if not professional:
        raise HTTPException(status_code=404, detail="Professional not found")

    await service.delete_professional(professional)
