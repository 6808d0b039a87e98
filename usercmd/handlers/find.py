"""Handler for the findById operation."""

from ..models import decode_records, encode_record
from ..results import OperationResult
from ..storage import Resource


def handle_find(id: str, resource: Resource) -> OperationResult:
    for record in decode_records(resource.read_all()):
        if record.id == id:
            return OperationResult.ok(encode_record(record))
    return OperationResult.not_found()
