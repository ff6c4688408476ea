"""Professional service - Business logic for professional records."""

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from frontdesk.models.professional import Professional
from frontdesk.schemas.professional import ProfessionalCreate, ProfessionalUpdate
from frontdesk.services.persistence import flush


class ProfessionalService:
    """Service class for professional operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_professional(self, professional_data: ProfessionalCreate) -> Professional:
        """Create a new professional."""
        professional = Professional(**professional_data.model_dump())
        self.db.add(professional)
        await flush(self.db, "register professional", professional)
        logfire.info("professional_created", professional_id=str(professional.id))
        return professional

    async def get_professional_by_id(self, professional_id: UUID) -> Professional | None:
        """Get a professional by ID."""
        return await self.db.get(Professional, professional_id)

    async def list_professionals(self, search: str | None = None) -> list[Professional]:
        """List professionals ordered by name."""
        query = select(Professional)

        if search:
            query = query.where(Professional.name.ilike(f"%{search}%"))

        result = await self.db.execute(query.order_by(Professional.name))
        return list(result.scalars().all())

    async def update_professional(
        self, professional: Professional, professional_data: ProfessionalUpdate
    ) -> Professional:
        """Update a professional."""
        update_data = professional_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(professional, field, value)
        await flush(self.db, "update professional", professional)
        return professional

    async def delete_professional(self, professional: Professional) -> None:
        """Delete a professional together with their appointments."""
        await self.db.delete(professional)
        await flush(self.db, "delete professional")
        logfire.info("professional_deleted", professional_id=str(professional.id))
