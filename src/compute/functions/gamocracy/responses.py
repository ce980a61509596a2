import json
import logging
from decimal import Decimal

logger = logging.getLogger(__name__)

HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Content-Type": "application/json",
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
}


def jsonify(obj):
    """Recursively convert Decimal -> int/float so json.dumps works."""
    if isinstance(obj, list):
        return [jsonify(x) for x in obj]
    if isinstance(obj, dict):
        return {k: jsonify(v) for k, v in obj.items()}
    if isinstance(obj, Decimal):
        # keep integers as int, others as float
        return int(obj) if obj % 1 == 0 else float(obj)
    return obj


def api_response(status, body):
    if body is None:
        payload = ""
    else:
        try:
            payload = json.dumps(jsonify(body))
        except (TypeError, ValueError) as e:
            logger.warning("could not serialize %d response body: %s", status, e)
            payload = ""

    return {
        "statusCode": status,
        "headers": dict(HEADERS),
        "body": payload,
    }


def error_response(status, message):
    return api_response(status, {"error": message})
