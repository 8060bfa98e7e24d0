from fastapi import APIRouter

from medcase.api.api_v1.endpoints import (
    auth,
    cases,
    documents,
    reference,
    clients,
    employees,
    users,
    upload,
    health,
)

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(cases.router, prefix="/cases", tags=["cases"])
api_router.include_router(documents.router, prefix="/cases", tags=["documents"])
api_router.include_router(reference.router, tags=["reference data"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(users.router, tags=["users"])
api_router.include_router(upload.router, prefix="/upload", tags=["upload"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
