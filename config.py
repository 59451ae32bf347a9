import os
import logging

import boto3

logger = logging.getLogger()

_table = None


def configure_logging():
    level = os.getenv('LOG_LEVEL', 'INFO').upper()
    # getLevelName gives back a string for names it does not know
    if not isinstance(logging.getLevelName(level), int):
        level = 'INFO'
    logger.setLevel(level)


configure_logging()


def get_table_name():
    """Name of the DynamoDB table holding the tasks, or None when unset."""
    return os.environ.get('TABLE_NAME') or None


def get_table():
    # One resource per process, reused across warm invocations
    global _table
    if _table is None:
        dynamodb = boto3.resource('dynamodb')
        _table = dynamodb.Table(get_table_name())
    return _table
