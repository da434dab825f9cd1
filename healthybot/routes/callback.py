"""LINE webhook callback endpoint."""

from fastapi import APIRouter, Depends, Header, Request, status
from starlette.concurrency import run_in_threadpool

from healthybot.dependencies import get_runtime
from healthybot.logging.config import get_logger
from healthybot.middleware.request_validation import check_request_size
from healthybot.runtime import BotRuntime

logger = get_logger(__name__)

router = APIRouter(tags=["Webhook"])


@router.post(
    "/callback",
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Events accepted and dispatched",
            "content": {"application/json": {"example": {"status": "ok"}}},
        },
        400: {
            "description": "Missing or invalid X-Line-Signature",
            "content": {
                "application/json": {
                    "example": {
                        "status": "error",
                        "error_code": "INVALID_SIGNATURE",
                        "message": "Invalid signature",
                        "details": {},
                    }
                }
            },
        },
        500: {
            "description": "Signed body could not be parsed",
            "content": {
                "application/json": {
                    "example": {
                        "status": "error",
                        "error_code": "WEBHOOK_PARSE_ERROR",
                        "message": "Failed to parse webhook body: 1 error(s)",
                        "details": {"errors": []},
                    }
                }
            },
        },
    },
)
async def callback(
    request: Request,
    x_line_signature: str | None = Header(default=None),
    runtime: BotRuntime = Depends(get_runtime),
) -> dict[str, str]:
    """
    Receive a LINE webhook delivery.

    Verifies the signature, parses the events and replies to each one.
    Reply failures are logged by the dispatcher and never change the
    response status.

    Args:
        request: FastAPI request object
        x_line_signature: Signature header set by the LINE platform
        runtime: Process runtime (injected by dependency)

    Returns:
        Acknowledgement payload

    Raises:
        SignatureInvalidError: If the signature is missing or wrong (400)
        RequestTooLargeError: If the body is over the size limit (413)
        WebhookParseError: If the body cannot be parsed (500)
    """
    body = await request.body()
    check_request_size(len(body))

    events = runtime.parser.parse(body, x_line_signature)

    logger.info(
        "Webhook received",
        extra={
            "correlation_id": getattr(request.state, "correlation_id", None),
            "context": {"event_count": len(events)},
        },
    )

    # The LINE SDK client is blocking
    result = await run_in_threadpool(runtime.dispatcher.dispatch, events)
    request.state.dispatch_result = result

    return {"status": "ok"}
