import logging

from fastapi import APIRouter, Depends

from linkedin_optimizer.config import settings
from linkedin_optimizer.errors import OptimizerError, ServiceError, ValidationError
from linkedin_optimizer.models.profile_models import (
    AnalyzeRequest,
    ErrorResponse,
    OptimizationResult,
)
from linkedin_optimizer.services.optimizer_service import optimize_profile
from linkedin_optimizer.utils.dependencies import APIKeys, get_api_keys

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/analyze",
    response_model=OptimizationResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_profile_endpoint(
    req: AnalyzeRequest,
    api_keys: APIKeys = Depends(get_api_keys),
):
    """
    Suggest an optimized headline, keywords, experience bullets and summary.

    Only `profileData` is analysed; a body carrying just `linkedinUrl` is
    rejected, since no profile page is fetched.
    """
    if req.profile_data is None:
        if req.linkedin_url:
            logger.info(f"URL-only request rejected: {req.linkedin_url}")
        raise ValidationError()

    provider = req.provider or settings.default_provider
    model_key = req.model_key or settings.default_model_key

    try:
        return await optimize_profile(
            profile=req.profile_data,
            provider=provider,
            model_key=model_key,
            api_key=api_keys.get_key(provider),
        )
    except OptimizerError:
        raise
    except Exception as e:
        logger.error(f"LinkedIn optimization error: {e}")
        raise ServiceError(str(e)) from e
