"""Patient routes - API endpoints for patient records."""

from fastapi import APIRouter, HTTPException
from uuid import UUID

from frontdesk.api.deps import DBSession
from frontdesk.schemas.patient import PatientCreate, PatientUpdate, PatientResponse
from frontdesk.services.patient_service import PatientService

router = APIRouter()


@router.post("/", response_model=PatientResponse, status_code=201)
async def create_patient(patient_data: PatientCreate, db: DBSession):
    """Register a new patient."""
    service = PatientService(db)
    return await service.create_patient(patient_data)


@router.get("/", response_model=list[PatientResponse])
async def list_patients(db: DBSession, search: str | None = None):
    """List patients, optionally filtered by name."""
    service = PatientService(db)
    return await service.list_patients(search)


@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(patient_id: UUID, db: DBSession):
    """Get a patient by ID."""
    service = PatientService(db)
    patient = await service.get_patient_by_id(patient_id)

    if not patient:
        raise HTTPException(status_code=404, detail="Patient not found")

    return patient


@router.patch("/{patient_id}", response_model=PatientResponse)
async def update_patient(patient_id: UUID, patient_data: PatientUpdate, db: DBSession):
    """Update a patient."""
    service = PatientService(db)
    patient = await service.get_patient_by_id(patient_id)

    if not patient:
        raise HTTPException(status_code=404, detail="Patient not found")

    return await service.update_patient(patient, patient_data)


@router.delete("/{patient_id}", status_code=204)
async def delete_patient(patient_id: UUID, db: DBSession):
    """Delete a patient and their appointments."""
    service = PatientService(db)
    patient = await service.get_patient_by_id(patient_id)

    if not patient:
        raise HTTPException(status_code=404, detail="Patient not found")

    await service.delete_patient(patient)
