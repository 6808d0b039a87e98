from pydantic import BaseModel, ConfigDict

from .errors import (
    InvalidFileExtension,
    InvalidOperation,
    MissingFileName,
    MissingId,
    MissingItem,
    MissingOperation,
)

OPERATION_ADD = "add"
OPERATION_LIST = "list"
OPERATION_FIND = "findById"
OPERATION_REMOVE = "remove"

OPERATIONS = [OPERATION_ADD, OPERATION_LIST, OPERATION_FIND, OPERATION_REMOVE]

FILE_EXTENSION = "json"

EMPTY_ITEM = "{}"


class Arguments(BaseModel):
    """Command line values for one invocation, built once and passed around."""
    model_config = ConfigDict(frozen=True)

    operation: str = ""
    id: str = ""
    item: str = ""
    file_name: str = ""


def check_filename(file_name: str) -> None:
    if not file_name:
        raise MissingFileName()

    if file_name.split(".")[-1] != FILE_EXTENSION:
        raise InvalidFileExtension(file_name)


def check_flags(args: Arguments) -> None:
    """Raise the ArgumentError for the first problem found in `args`."""
    if not args.operation:
        raise MissingOperation()

    if args.operation not in OPERATIONS:
        raise InvalidOperation(args.operation)

    if args.operation == OPERATION_ADD:
        if not args.item or args.item == EMPTY_ITEM:
            raise MissingItem()

    if args.operation in (OPERATION_FIND, OPERATION_REMOVE):
        if not args.id:
            raise MissingId()

    check_filename(args.file_name)
