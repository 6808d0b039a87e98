import json

from ..errors import ParseError
from ..results import OperationResult


def format_output(result: OperationResult, output_format: str = "plain") -> bytes:
    if output_format == "json":
        return format_json(result)
    return format_plain(result)


def format_plain(result: OperationResult) -> bytes:
    """Raw payload bytes, or the message for outcomes that carry one."""
    if result.message is not None:
        return result.message.encode()
    return result.payload


def format_json(result: OperationResult) -> bytes:
    data = None
    if result.payload.strip():
        try:
            data = json.loads(result.payload)
        except ValueError as e:
            raise ParseError("stored records", str(e)) from e

    return json.dumps({
        "status": result.status,
        "message": result.message,
        "data": data,
    }, indent=2).encode()
