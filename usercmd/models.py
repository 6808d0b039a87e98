from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from .errors import ParseError


class Record(BaseModel):
    """A single user entry."""
    model_config = ConfigDict(strict=True)

    id: str
    email: str
    age: int = 0


RecordList = TypeAdapter(list[Record])


def _describe(error: ValidationError) -> str:
    problems = []
    for err in error.errors():
        loc = ".".join(str(part) for part in err["loc"])
        problems.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(problems)


def decode_record(data: bytes | str) -> Record:
    try:
        return Record.model_validate_json(data)
    except ValidationError as e:
        raise ParseError("item", _describe(e)) from e


def decode_records(data: bytes) -> list[Record]:
    """Decode the stored collection. An empty buffer is an empty collection."""
    if not data.strip():
        return []
    try:
        return RecordList.validate_json(data)
    except ValidationError as e:
        raise ParseError("stored records", _describe(e)) from e


def encode_record(record: Record) -> bytes:
    return record.model_dump_json().encode()


def encode_records(records: list[Record]) -> bytes:
    return RecordList.dump_json(records)
