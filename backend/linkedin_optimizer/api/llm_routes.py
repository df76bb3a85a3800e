from fastapi import APIRouter

from linkedin_optimizer.services.llm_service import get_providers_info

router = APIRouter()


@router.get("/providers")
async def list_providers():
    """
    List the LLM providers and models the analyze endpoint can route to.
    No API keys are returned, only whether a server default is set.
    """
    return {"providers": get_providers_info()}
