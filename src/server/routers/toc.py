"""ToC endpoint for the API."""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from server.models import TocErrorResponse, TocRequest, TocSuccessResponse
from server.query_processor import process_toc_request

router = APIRouter()

COMMON_TOC_RESPONSES: dict[int | str, dict] = {
    status.HTTP_200_OK: {"model": TocSuccessResponse, "description": "ToC built"},
    status.HTTP_413_CONTENT_TOO_LARGE: {"model": TocErrorResponse, "description": "Content too large"},
}


@router.post("/api/toc", responses=COMMON_TOC_RESPONSES)
async def api_toc(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    toc_request: TocRequest,
) -> JSONResponse:
    """Inject heading ids into a document and build its table of contents.

    **Parameters**

    - **toc_request** (`TocRequest`): the document plus raw ToC options

    **Returns**

    - **JSONResponse**: the rewritten document, the rendered ToC and the
      heading tree, or an error response with the matching status code

    """
    response = await process_toc_request(
        toc_request.content,
        toc_request.to_options(),
        use_cache=toc_request.use_cache,
    )

    if isinstance(response, TocErrorResponse):
        return JSONResponse(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            content=response.model_dump(),
        )
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json"))
