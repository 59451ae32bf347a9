import logging

from botocore.exceptions import ClientError

from cors_handler import build_response, error_response

logger = logging.getLogger(__name__)


def build_update_expression(task_input):
    """Build the SET expression for the fields present in ``task_input``.

    Only the supplied fields are touched, so an update carrying just
    ``completada`` leaves the stored title alone.
    """
    update_parts = []
    expression_values = {}

    if task_input.titulo is not None:
        update_parts.append("titulo = :t")
        expression_values[':t'] = task_input.titulo

    if task_input.has_completada:
        update_parts.append("completada = :c")
        expression_values[':c'] = task_input.completada

    return "SET " + ", ".join(update_parts), expression_values


def handler(table, task_input):
    if not task_input.has_titulo and not task_input.has_completada:
        return error_response(
            400, "You must send at least one of 'titulo' or 'completada' to update a task"
        )

    if task_input.has_titulo and not task_input.titulo:
        return error_response(400, "Field 'titulo' cannot be empty")

    update_expression, expression_values = build_update_expression(task_input)

    try:
        response = table.update_item(
            Key={'id': task_input.id},
            UpdateExpression=update_expression,
            ConditionExpression="attribute_exists(id)",
            ExpressionAttributeValues=expression_values,
            ReturnValues="ALL_NEW"
        )
    except ClientError as e:
        if e.response['Error']['Code'] == 'ConditionalCheckFailedException':
            logger.warning("Task %s does not exist, nothing updated", task_input.id)
            return error_response(404, "Task with the given id does not exist")
        raise

    logger.info("Updated task %s", task_input.id)

    attributes = response.get('Attributes')
    if not attributes:
        # Backend echoed nothing: return what we know
        attributes = {'id': task_input.id}
        if task_input.titulo is not None:
            attributes['titulo'] = task_input.titulo
        if task_input.has_completada:
            attributes['completada'] = task_input.completada

    return build_response(200, attributes)
