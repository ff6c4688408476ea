"""Patient service - Business logic for patient records."""

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from frontdesk.models.patient import Patient
from frontdesk.schemas.patient import PatientCreate, PatientUpdate
from frontdesk.services.persistence import flush


class PatientService:
    """Service class for patient operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_patient(self, patient_data: PatientCreate) -> Patient:
        """Create a new patient."""
        patient = Patient(**patient_data.model_dump())
        self.db.add(patient)
        await flush(self.db, "register patient", patient)
        logfire.info("patient_created", patient_id=str(patient.id))
        return patient

    async def get_patient_by_id(self, patient_id: UUID) -> Patient | None:
        """Get a patient by ID."""
        return await self.db.get(Patient, patient_id)

    async def list_patients(self, search: str | None = None) -> list[Patient]:
        """List patients ordered by name, optionally filtered by a name fragment."""
        query = select(Patient)

        if search:
            query = query.where(Patient.name.ilike(f"%{search}%"))

        result = await self.db.execute(query.order_by(Patient.name))
        return list(result.scalars().all())

    async def update_patient(self, patient: Patient, patient_data: PatientUpdate) -> Patient:
        """Update a patient."""
        update_data = patient_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(patient, field, value)
        await flush(self.db, "update patient", patient)
        return patient

    async def delete_patient(self, patient: Patient) -> None:
        """Delete a patient and, through the cascade, their appointments."""
        await self.db.delete(patient)
        await flush(self.db, "delete patient")
        logfire.info("patient_deleted", patient_id=str(patient.id))
