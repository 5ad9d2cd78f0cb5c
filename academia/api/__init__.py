"""API routes. Everything except login and health requires a bearer token."""

from fastapi import APIRouter, Depends

from academia.api import (
    auth,
    estudiantes,
    health,
    materias,
    matriculas,
    pagos,
    perfil,
    periodos,
    planes,
    profesores,
    roles,
    usuarios,
)
from academia.api.auth import get_current_user

protected = [Depends(get_current_user)]

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/login", tags=["auth"])
router.include_router(perfil.router, prefix="/perfil", tags=["perfil"])
router.include_router(usuarios.router, prefix="/usuarios", tags=["usuarios"], dependencies=protected)
router.include_router(roles.router, prefix="/roles", tags=["roles"], dependencies=protected)
router.include_router(planes.router, prefix="/planes", tags=["planes"], dependencies=protected)
router.include_router(materias.router, prefix="/materias", tags=["materias"], dependencies=protected)
router.include_router(
    estudiantes.router, prefix="/estudiantes", tags=["estudiantes"], dependencies=protected
)
router.include_router(
    profesores.router, prefix="/profesores", tags=["profesores"], dependencies=protected
)
router.include_router(periodos.router, prefix="/periodos", tags=["periodos"], dependencies=protected)
router.include_router(
    matriculas.router, prefix="/matriculas", tags=["matriculas"], dependencies=protected
)
router.include_router(pagos.router, prefix="/pagos", tags=["pagos"], dependencies=protected)
