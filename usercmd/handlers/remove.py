"""Handler for the remove operation."""

import logging

from ..models import decode_records, encode_records
from ..results import OperationResult
from ..storage import Resource

logger = logging.getLogger(__name__)


def handle_remove(id: str, resource: Resource) -> OperationResult:
    records = decode_records(resource.read_all())

    for i, record in enumerate(records):
        if record.id == id:
            # The last item takes the removed slot, so order is not kept.
            records[i] = records[-1]
            records.pop()
            resource.overwrite(encode_records(records))
            logger.info(f"Removed item {id} from {resource.path} ({len(records)} items left)")
            return OperationResult.ok()

    return OperationResult.not_found(f"Item with id {id} not found")
