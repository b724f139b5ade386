"""Response headers exposing where a service result was served from."""

from fastapi import Response

from article_cms.domain.entities import ServiceResult

DATA_SOURCE_HEADER = "X-Data-Source"
FALLBACK_REASON_HEADER = "X-Fallback-Reason"


def tag_response(response: Response, result: ServiceResult) -> None:
    response.headers[DATA_SOURCE_HEADER] = result.source.value
    if result.fallback_reason is not None:
        response.headers[FALLBACK_REASON_HEADER] = result.fallback_reason.value
