import logging

from cors_handler import build_response

logger = logging.getLogger(__name__)


def list_tasks(table):
    # Unbounded scan, no pagination
    response = table.scan()
    return response.get('Items', [])


def handler(table):
    tasks = list_tasks(table)
    logger.info("Listed %d tasks", len(tasks))
    return build_response(200, tasks)
