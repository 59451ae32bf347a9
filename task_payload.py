import base64
import json
from dataclasses import dataclass
from typing import Optional


class InvalidPayload(ValueError):
    pass


@dataclass
class TaskInput:
    """Fields a POST body may carry, already trimmed and type-checked.

    ``has_titulo`` records whether ``titulo`` was sent as a string at all, so
    an empty title can be told apart from a missing one.
    """
    id: Optional[str] = None
    titulo: Optional[str] = None
    has_titulo: bool = False
    completada: Optional[bool] = None

    @property
    def has_completada(self):
        return self.completada is not None


def decode_body(event):
    raw = event.get('body') or ''
    if event.get('isBase64Encoded'):
        raw = base64.b64decode(raw).decode('utf-8')
    if not raw:
        return {}
    return json.loads(raw)


def parse_task_input(payload):
    if not isinstance(payload, dict):
        raise InvalidPayload('Request body must be a JSON object')

    task_id = payload.get('id')
    task_id = task_id.strip() if isinstance(task_id, str) else ''

    raw_title = payload.get('titulo')
    has_titulo = isinstance(raw_title, str)
    titulo = raw_title.strip() if has_titulo else ''

    # bool only; 0/1 and "true" do not count
    completada = payload.get('completada')
    if not isinstance(completada, bool):
        completada = None

    return TaskInput(
        id=task_id or None,
        titulo=titulo or None,
        has_titulo=has_titulo,
        completada=completada,
    )
