import json
from decimal import Decimal

JSON_HEADERS = {
    'Content-Type': 'application/json',
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'GET,POST,OPTIONS',
}


def _to_json(value):
    # boto3 hands numbers back as Decimal
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def build_response(status_code, body=None):
    return {
        'statusCode': status_code,
        'headers': dict(JSON_HEADERS),
        'body': '' if body is None else json.dumps(body, default=_to_json),
    }


def error_response(status_code, message):
    return build_response(status_code, {'error': message})


def preflight():
    """Answer a CORS preflight request."""
    return build_response(200)
