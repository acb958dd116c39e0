import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from starlette import status

from recipe_planner.app.schemas.extract import ExtractRequest
from recipe_planner.app.services import url_recipe_parser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/extract", tags=["extract"])

CLIENT_ERROR_CODES = {"no_recipe_found", "invalid_url", "unsupported_content_type"}


@router.post("")
async def extract_recipe(payload: ExtractRequest):
    url = (payload.url or "").strip()
    if not url:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "URL is required"})

    result = await url_recipe_parser.parse_recipe_from_url(url)
    if result.success and result.recipe is not None:
        return result.recipe.to_response()

    if result.error_code in CLIENT_ERROR_CODES:
        message = (
            "Could not extract recipe from URL"
            if result.error_code == "no_recipe_found"
            else result.error_message or "Invalid URL"
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    logger.error("Recipe extraction failed for %s: %s (%s)", url, result.error_code, result.error_message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Failed to extract recipe"},
    )
