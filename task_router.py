import logging

import config
import create_task
import get_tasks
import update_task
from cors_handler import error_response, preflight
from task_payload import decode_body, parse_task_input

logger = logging.getLogger(__name__)


def get_method(event):
    # HTTP API (payload v2) first, REST API (payload v1) as fallback
    http = (event.get('requestContext') or {}).get('http') or {}
    method = http.get('method') or event.get('httpMethod') or ''
    return method.upper()


class TaskRouter:
    """Dispatches one API Gateway event against the tasks table."""

    def __init__(self, table):
        self.table = table

    def route(self, event):
        method = get_method(event)
        logger.info("Handling %s request", method)

        if method == 'OPTIONS':
            return preflight()

        try:
            if method == 'GET':
                return get_tasks.handler(self.table)

            if method == 'POST':
                return self.post(event)

            return error_response(405, "Method not allowed")

        except Exception as e:
            logger.exception("Error handling %s request", method)
            return error_response(400, str(e) or "Unexpected error")

    def post(self, event):
        task_input = parse_task_input(decode_body(event))
        if task_input.id is None:
            return create_task.handler(self.table, task_input)
        return update_task.handler(self.table, task_input)


_router = None


def handler(event, context):
    global _router

    if not config.get_table_name():
        logger.error("TABLE_NAME environment variable is not set.")
        return error_response(500, "TABLE_NAME is not configured")

    if _router is None:
        try:
            _router = TaskRouter(config.get_table())
        except Exception as e:
            logger.exception("Could not create the DynamoDB table client")
            if get_method(event) == 'OPTIONS':
                return preflight()
            return error_response(400, str(e) or "Unexpected error")

    return _router.route(event)


lambda_handler = handler
