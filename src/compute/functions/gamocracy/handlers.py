import base64
import binascii
import logging

from . import entity
from .errors import InvalidDataError, RecordError
from .responses import api_response, error_response

logger = logging.getLogger(__name__)

ERROR_METHOD_NOT_ALLOWED = "Method not allowed"


def log_level(name, default=logging.INFO):
    """Map a LOG_LEVEL value to a logging level, falling back to ``default``."""
    level = logging.getLevelName((name or '').strip().upper())
    if isinstance(level, int):
        return level
    if name:
        logger.warning("unknown LOG_LEVEL %r, using %s", name, logging.getLevelName(default))
    return default


def request_body(event, kind):
    body = event.get('body')
    if body and event.get('isBase64Encoded'):
        try:
            body = base64.b64decode(body).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise InvalidDataError(kind.invalid_data_message) from e
    return body


def get_records(event, kind, store):
    key = (event.get('queryStringParameters') or {}).get(kind.key_field)
    try:
        if key:
            result = entity.fetch_one(kind, store, key)
        else:
            result = entity.fetch_all(kind, store)
    except RecordError as e:
        return error_response(400, e.message)
    return api_response(200, result)


def create_record(event, kind, store):
    try:
        result = entity.create(kind, store, request_body(event, kind))
    except RecordError as e:
        return error_response(400, e.message)
    return api_response(201, result)


def update_record(event, kind, store):
    try:
        result = entity.update(kind, store, request_body(event, kind))
    except RecordError as e:
        return error_response(400, e.message)
    return api_response(200, result)


def delete_record(event, kind, store):
    try:
        entity.delete(kind, store, event.get('queryStringParameters'))
    except RecordError as e:
        return error_response(400, e.message)
    return api_response(200, None)


def unhandled_method():
    return api_response(405, ERROR_METHOD_NOT_ALLOWED)


ROUTES = {
    'GET': get_records,
    'POST': create_record,
    'PUT': update_record,
    'DELETE': delete_record,
}


def dispatch(event, kind, store):
    """Route an API Gateway proxy event to the operation for its HTTP method."""
    method = event.get('httpMethod')
    query = event.get('queryStringParameters') or {}
    logger.info("%s %s %s=%s", method, kind.name, kind.key_field, query.get(kind.key_field))

    route = ROUTES.get(method)
    if route is None:
        return unhandled_method()

    try:
        return route(event, kind, store)
    except Exception:
        logger.exception("unhandled error in %s %s", method, kind.name)
        return error_response(500, "internal server error")
