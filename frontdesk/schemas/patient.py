from pydantic import BaseModel, Field
from datetime import datetime, date
from uuid import UUID


class PatientBase(BaseModel):
    """Base patient schema."""
    name: str = Field(..., min_length=1, max_length=150, description="Patient full name")
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=20)
    address: str | None = None
    birth_date: date | None = Field(None, description="Birth date (YYYY-MM-DD)")
    cpf: str | None = Field(None, max_length=14, description="CPF document number")


class PatientCreate(PatientBase):
    """Schema for creating a patient."""
    pass


class PatientUpdate(BaseModel):
    """Schema for updating a patient."""
    name: str | None = Field(None, min_length=1, max_length=150)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=20)
    address: str | None = None
    birth_date: date | None = None
    cpf: str | None = Field(None, max_length=14)


class PatientResponse(PatientBase):
    """Schema for patient response."""
    id: UUID
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
