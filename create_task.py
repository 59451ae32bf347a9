import logging
import uuid

from cors_handler import build_response, error_response

logger = logging.getLogger(__name__)


def handler(table, task_input):
    if not task_input.titulo:
        return error_response(400, "Field 'titulo' is required")

    completada = task_input.completada if task_input.has_completada else False
    item = {
        'id': str(uuid.uuid4()),
        'titulo': task_input.titulo,
        'completada': completada,
    }

    table.put_item(Item=item)
    logger.info("Created task %s", item['id'])

    return build_response(200, item)
