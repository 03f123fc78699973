"""Translation of boto3 responses and faults into regional-s3 errors."""

from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from regional_s3.core import get_logger
from regional_s3.core.exceptions import RpcFailureError

logger = get_logger(__name__)


def status_code(response: Any) -> Optional[int]:
    """Extract the HTTP status code from a boto3 response dict."""
    if not isinstance(response, dict):
        return None
    return response.get("ResponseMetadata", {}).get("HTTPStatusCode")


def is_success(response: Any) -> bool:
    """True if the response carries a 2xx status code."""
    code = status_code(response)
    return code is not None and 200 <= code < 300


def check_status(operation: str, response: Any) -> Any:
    """Return ``response`` unchanged if it succeeded.

    Raises:
        RpcFailureError: If the status code is missing or not 2xx
    """
    if not is_success(response):
        code = status_code(response)
        logger.error(
            "S3 call returned non-success status",
            operation=operation,
            status_code=code,
        )
        raise RpcFailureError(operation, f"unexpected status {code}", status_code=code)
    return response


def error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


def rpc_failure(operation: str, error: Exception) -> RpcFailureError:
    """Build an RpcFailureError from a botocore fault."""
    if isinstance(error, ClientError):
        code = error_code(error)
        status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        logger.error(
            "S3 call failed",
            operation=operation,
            error_code=code,
            status_code=status,
        )
        logger.debug("S3 error detail", operation=operation, error=str(error))
        return RpcFailureError(
            operation, str(error), status_code=status, error_code=code
        )

    logger.error("S3 transport failure", operation=operation, error=str(error))
    return RpcFailureError(operation, str(error))


# Faults the service or transport can raise; everything else propagates
RPC_FAULTS = (ClientError, BotoCoreError)
