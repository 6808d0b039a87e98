import logging
from typing import BinaryIO, Callable

from .arguments import (
    Arguments,
    OPERATION_ADD,
    OPERATION_FIND,
    OPERATION_LIST,
    OPERATION_REMOVE,
    check_flags,
)
from .errors import InvalidOperation, UserCmdError
from .handlers import handle_add, handle_find, handle_list, handle_remove
from .output.formatters import format_output
from .results import OperationResult
from .storage import DEFAULT_PERMISSIONS, Resource, open_resource

logger = logging.getLogger(__name__)

HANDLERS: dict[str, Callable[[Arguments, Resource], OperationResult]] = {
    OPERATION_ADD: lambda args, resource: handle_add(args.item, resource),
    OPERATION_LIST: lambda args, resource: handle_list(resource),
    OPERATION_FIND: lambda args, resource: handle_find(args.id, resource),
    OPERATION_REMOVE: lambda args, resource: handle_remove(args.id, resource),
}


def run_operation(args: Arguments, resource: Resource) -> OperationResult:
    handler = HANDLERS.get(args.operation)
    if not handler:
        raise InvalidOperation(args.operation)
    return handler(args, resource)


def perform(
    args: Arguments,
    writer: BinaryIO,
    output_format: str = "plain",
    permissions: int = DEFAULT_PERMISSIONS,
) -> OperationResult:
    """Validate `args`, run the operation against its file and write the result to `writer`."""
    check_flags(args)

    logger.debug(f"Running {args.operation} on {args.file_name}")
    try:
        with open_resource(args.file_name, permissions) as resource:
            result = run_operation(args, resource)
            writer.write(format_output(result, output_format))
    except UserCmdError as e:
        logger.warning(f"{args.operation} on {args.file_name} failed: {e}")
        raise

    logger.debug(f"{args.operation} on {args.file_name} finished with status {result.status}")
    return result
