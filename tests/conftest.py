import copy

import pytest
from botocore.exceptions import ClientError

import task_router


class FakeTable:
    """In-memory stand-in for a boto3 DynamoDB Table keyed by ``id``."""

    def __init__(self, items=None, echo_attributes=True):
        self.items = {item['id']: dict(item) for item in (items or [])}
        self.echo_attributes = echo_attributes
        self.calls = []

    def scan(self, **kwargs):
        self.calls.append(('scan', kwargs))
        return {'Items': [copy.deepcopy(i) for i in self.items.values()]}

    def put_item(self, Item, **kwargs):
        self.calls.append(('put_item', dict(Item=Item, **kwargs)))
        self.items[Item['id']] = dict(Item)
        return {}

    def update_item(self, Key, UpdateExpression, ExpressionAttributeValues,
                    ConditionExpression=None, ReturnValues=None):
        self.calls.append(('update_item', {
            'Key': Key,
            'UpdateExpression': UpdateExpression,
            'ExpressionAttributeValues': ExpressionAttributeValues,
            'ConditionExpression': ConditionExpression,
            'ReturnValues': ReturnValues,
        }))
        item = self.items.get(Key['id'])
        if item is None and ConditionExpression == 'attribute_exists(id)':
            raise ClientError(
                {'Error': {'Code': 'ConditionalCheckFailedException',
                           'Message': 'The conditional request failed'}},
                'UpdateItem',
            )
        item = item if item is not None else dict(Key)

        assignments = UpdateExpression[len('SET '):].split(', ')
        for assignment in assignments:
            name, placeholder = assignment.split(' = ')
            item[name] = ExpressionAttributeValues[placeholder]
        self.items[Key['id']] = item

        if not self.echo_attributes:
            return {}
        return {'Attributes': dict(item)}


class FailingTable(FakeTable):

    def __init__(self, error):
        super().__init__()
        self.error = error

    def scan(self, **kwargs):
        raise self.error

    def put_item(self, Item, **kwargs):
        raise self.error

    def update_item(self, **kwargs):
        raise self.error


def http_event(method, body=None, is_base64=False):
    event = {'requestContext': {'http': {'method': method}}, 'isBase64Encoded': is_base64}
    if body is not None:
        event['body'] = body
    return event


@pytest.fixture
def table():
    return FakeTable()


@pytest.fixture
def router(table):
    return task_router.TaskRouter(table)
