"""Record shapes and the CRUD operations shared by every kind of record.

A record shape is a nested dict of field names to specs, where a spec is one of

* ``str``: a string field, ``""`` when missing or null
* ``[spec]``: a list whose elements follow ``spec``, ``[]`` when missing or null
* ``{name: spec}``: a nested object

Decoding keeps only the declared fields, so stored records always have the
same set of attributes no matter what the client sent.
"""
import json
import logging

from .errors import (
    AlreadyExistsError,
    ConditionFailedError,
    DoesNotExistError,
    InvalidDataError,
    UnmarshalError,
)
from .store import ABSENT, PRESENT

logger = logging.getLogger(__name__)


class ShapeError(ValueError):
    pass


def decode_value(spec, value, path):
    if spec is str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ShapeError(f"{path} must be a string")
        return value

    if isinstance(spec, list):
        if value is None:
            return []
        if not isinstance(value, list):
            raise ShapeError(f"{path} must be a list")
        return [decode_value(spec[0], v, f"{path}[{i}]") for i, v in enumerate(value)]

    if isinstance(spec, dict):
        if not isinstance(value, dict):
            raise ShapeError(f"{path} must be an object")
        return {name: decode_value(s, value.get(name), f"{path}.{name}") for name, s in spec.items()}

    raise TypeError(f"unsupported field spec at {path}: {spec!r}")


class RecordKind:
    """One kind of record: its name, key attribute and field shape."""

    def __init__(self, name, key_field, fields):
        if fields.get(key_field) is not str:
            raise ValueError(f"key field {key_field!r} must be declared as a string")
        self.name = name
        self.key_field = key_field
        self.fields = fields

    def __repr__(self):
        return f"RecordKind({self.name!r}, key={self.key_field!r})"

    @property
    def invalid_data_message(self):
        return f"invalid {self.name} data"

    @property
    def already_exists_message(self):
        return f"{self.name}{self.name} already exists"

    @property
    def does_not_exist_message(self):
        return f"{self.name}{self.name} does not exist"

    def decode(self, raw):
        """Project ``raw`` onto this kind's shape. Raises ShapeError."""
        return decode_value(self.fields, raw, self.name)

    def parse_body(self, body):
        """Decode a request body into a record, or raise InvalidDataError."""
        try:
            record = self.decode(json.loads(body))
        except (TypeError, ValueError, RecursionError) as e:
            # JSONDecodeError and ShapeError are ValueErrors; deep nesting raises RecursionError
            logger.info("rejected %s body: %s", self.name, e)
            raise InvalidDataError(self.invalid_data_message) from e

        if not record[self.key_field]:
            logger.info("rejected %s body: missing %s", self.name, self.key_field)
            raise InvalidDataError(self.invalid_data_message)
        return record


def fetch_one(kind, store, key):
    item = store.get(key)
    if item is None:
        raise UnmarshalError()
    try:
        return kind.decode(item)
    except ShapeError as e:
        logger.warning("stored %s %s=%r does not decode: %s", kind.name, kind.key_field, key, e)
        raise UnmarshalError() from e


def fetch_all(kind, store):
    records = []
    for item in store.scan():
        try:
            records.append(kind.decode(item))
        except ShapeError as e:
            logger.warning("stored %s %s=%r does not decode: %s",
                           kind.name, kind.key_field, item.get(kind.key_field), e)
            raise UnmarshalError() from e
    return records


def create(kind, store, body):
    record = kind.parse_body(body)
    key = record[kind.key_field]

    if store.get(key) is not None:
        raise AlreadyExistsError(kind.already_exists_message)

    try:
        store.put(record, condition=ABSENT)
    except ConditionFailedError as e:
        # created between our read and our write
        raise AlreadyExistsError(kind.already_exists_message) from e
    return record


def update(kind, store, body):
    record = kind.parse_body(body)
    key = record[kind.key_field]

    if store.get(key) is None:
        raise DoesNotExistError(kind.does_not_exist_message)

    try:
        store.put(record, condition=PRESENT)
    except ConditionFailedError as e:
        raise DoesNotExistError(kind.does_not_exist_message) from e
    return record


def delete(kind, store, query):
    key = (query or {}).get(kind.key_field, "")
    store.delete(key)
