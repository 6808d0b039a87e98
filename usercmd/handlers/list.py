"""Handler for the list operation."""

from ..results import OperationResult
from ..storage import Resource


def handle_list(resource: Resource) -> OperationResult:
    return OperationResult.ok(resource.read_all())
