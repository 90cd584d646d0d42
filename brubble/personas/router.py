from fastapi import APIRouter

from brubble.dependencies import PersonaServiceDep
from brubble.personas.schemas import Persona, PlatformInfo

router = APIRouter()


@router.get("", response_model=list[Persona])
async def list_personas(service: PersonaServiceDep) -> list[Persona]:
    return service.list_personas()


@router.get("/platforms", response_model=list[PlatformInfo])
async def list_platforms(service: PersonaServiceDep) -> list[PlatformInfo]:
    return service.list_platforms()
