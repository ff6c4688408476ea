from fastapi import APIRouter
from frontdesk.api.routes import patients, professionals, appointments, calendar, dashboard

api_router = APIRouter()

api_router.include_router(patients.router, prefix="/patients", tags=["Patients"])
api_router.include_router(professionals.router, prefix="/professionals", tags=["Professionals"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["Appointments"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["Calendar"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
