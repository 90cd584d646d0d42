from fastapi import APIRouter

from brubble.analysis.schemas import AnalysisRequest, BrubbleAnalysis
from brubble.dependencies import AnalysisServiceDep

router = APIRouter()


@router.post("", response_model=BrubbleAnalysis)
async def search(request: AnalysisRequest, service: AnalysisServiceDep) -> BrubbleAnalysis:
    return await service.analyze(request.query, request.personas)
