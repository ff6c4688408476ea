from pydantic import BaseModel, Field
from datetime import datetime
from uuid import UUID


class ProfessionalBase(BaseModel):
    """Base professional schema."""
    name: str = Field(..., min_length=1, max_length=150, description="Professional full name")
    specialty: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=20)
    registration_number: str | None = Field(None, max_length=30, description="Council registration (CRM/CRN)")


class ProfessionalCreate(ProfessionalBase):
    """Schema for creating a professional."""
    pass


class ProfessionalUpdate(BaseModel):
    """Schema for updating a professional."""
    name: str | None = Field(None, min_length=1, max_length=150)
    specialty: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=20)
    registration_number: str | None = Field(None, max_length=30)


class ProfessionalResponse(ProfessionalBase):
    """Schema for professional response."""
    id: UUID
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
