import uuid
import datetime as dt
from sqlalchemy import String, DateTime, Date, Time, Integer, ForeignKey, Text, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from frontdesk.database import Base
from frontdesk.scheduling.status import AppointmentStatus


class Appointment(Base):
    """Appointment model."""

    __tablename__ = "appointments"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True,
        default=uuid.uuid4,
    )
    patient_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("patients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    professional_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("professionals.id", ondelete="CASCADE"),
        nullable=False,
    )
    date: Mapped[dt.date] = mapped_column(
        Date,
        nullable=False,
    )
    time: Mapped[dt.time] = mapped_column(
        Time,
        nullable=False,
    )
    duration: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=30,
    )
    status: Mapped[str] = mapped_column(
        String(20),
        default=AppointmentStatus.SCHEDULED.value,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    ticket_number: Mapped[str] = mapped_column(String(40), nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime,
        default=dt.datetime.utcnow,
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime,
        default=dt.datetime.utcnow,
        onupdate=dt.datetime.utcnow,
    )

    # Relationships
    patient: Mapped["Patient"] = relationship("Patient", back_populates="appointments")
    professional: Mapped["Professional"] = relationship("Professional", back_populates="appointments")

    # Overlap checks only run inside a request, so two concurrent bookings can
    # both pass; this constraint stops the exact-same-start case at the database.
    __table_args__ = (
        UniqueConstraint(
            "professional_id",
            "date",
            "time",
            name="unique_professional_slot",
        ),
        Index("ix_appointments_professional_date", "professional_id", "date"),
    )

    def __repr__(self) -> str:
        return f"<Appointment {self.date} {self.time}>"
