from copy import deepcopy
from typing import Optional

from botocore.exceptions import ClientError


def client_error(code: str, operation_name: str) -> ClientError:
    return ClientError({'Error': {'Code': code, 'Message': f'{code} raised by the test table'}}, operation_name)


class FakeTable:
    """
    Stand-in of the boto3 dynamodb Table resource used by DynamoDocumentStore.
    Keeps items by (partkey, sortkey), records every request and fails the methods listed in fail_with
    """

    def __init__(self, items=None, page_size: Optional[int] = None, fail_with: Optional[dict] = None):
        self.items = {(item['partkey'], item['sortkey']): deepcopy(item) for item in items or []}
        self.page_size = page_size
        self.fail_with = fail_with or {}
        self.calls = []

    def __call__(self):
        return self

    def _record(self, method: str, kwargs: dict):
        self.calls.append((method, deepcopy(kwargs)))
        if method in self.fail_with:
            raise client_error(self.fail_with[method], method)

    def requests(self, method: str) -> list:
        return [kwargs for name, kwargs in self.calls if name == method]

    @staticmethod
    def _key(key: dict) -> tuple:
        return key['partkey'], key['sortkey']

    def put_item(self, **kwargs):
        self._record('put_item', kwargs)
        item = deepcopy(kwargs['Item'])
        self.items[self._key(item)] = item
        return {}

    def get_item(self, **kwargs):
        self._record('get_item', kwargs)
        key = self._key(kwargs['Key'])
        return {'Item': deepcopy(self.items[key])} if key in self.items else {}

    def delete_item(self, **kwargs):
        self._record('delete_item', kwargs)
        self.items.pop(self._key(kwargs['Key']), None)
        return {}

    def update_item(self, **kwargs):
        self._record('update_item', kwargs)
        key = self._key(kwargs['Key'])
        if key not in self.items:
            raise client_error('ConditionalCheckFailedException', 'UpdateItem')
        names = kwargs['ExpressionAttributeNames']
        values = kwargs['ExpressionAttributeValues']
        for assignment in kwargs['UpdateExpression'][len('SET '):].split(', '):
            target, value_alias = assignment.split('=')
            attribute_alias, field_alias = target.split('.')
            self.items[key][names[attribute_alias]][names[field_alias]] = deepcopy(values[value_alias])
        return {'Attributes': deepcopy(self.items[key])}

    def query(self, **kwargs):
        self._record('query', kwargs)
        partkey = kwargs['KeyConditionExpression'].get_expression()['values'][1]
        items = [deepcopy(item) for (item_partkey, _), item in sorted(self.items.items()) if item_partkey == partkey]
        start = 0
        if kwargs.get('ExclusiveStartKey'):
            start = [self._key(item) for item in items].index(self._key(kwargs['ExclusiveStartKey'])) + 1
        end = start + self.page_size if self.page_size else len(items)
        response = {'Items': items[start:end]}
        if end < len(items):
            last = items[end - 1]
            response['LastEvaluatedKey'] = {'partkey': last['partkey'], 'sortkey': last['sortkey']}
        return response
