"""Handler for the add operation."""

import logging

from ..models import decode_record, decode_records, encode_records
from ..results import OperationResult
from ..storage import Resource

logger = logging.getLogger(__name__)


def handle_add(item: str, resource: Resource) -> OperationResult:
    buffer = resource.read_all()
    record = decode_record(item)
    records = decode_records(buffer)

    for existing in records:
        if existing.id == record.id:
            logger.info(f"Item {record.id} already in {resource.path}, not adding")
            return OperationResult.already_exists(f"Item with id {record.id} already exists")

    records.append(record)
    resource.overwrite(encode_records(records))
    logger.info(f"Added item {record.id} to {resource.path} ({len(records)} items)")
    return OperationResult.ok()
