"""
Session analysis endpoints.
"""

from fastapi import APIRouter

from fitcoach.schemas.physiology import PhysiologicalAnalysis
from fitcoach.schemas.session import PhysiologyRequest
from fitcoach.scoring.physiology import estimate_physiological_impact

router = APIRouter()


@router.post("/physiology", summary="Estimate the physiological impact of a planned session.",
             response_model=PhysiologicalAnalysis)
def analyze_session(data: PhysiologyRequest):
    return estimate_physiological_impact(data.session, data.user_fatigue, data.user_readiness)
