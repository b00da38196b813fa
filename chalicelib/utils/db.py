import functools
import os
from random import uniform
from time import sleep

import boto3 as boto3
from botocore.exceptions import ClientError

from chalicelib.utils import exceptions
from chalicelib.utils.boto_clients import aws_config_ddb
from chalicelib.utils.logger import logger, log_exception

# For safe db operations
RETRY_EXCEPTIONS = ('ProvisionedThroughputExceededException', 'ThrottlingException')
need_return_capacity = ('put_item', 'get_item', 'update_item', 'delete_item')

BODY_ATTRIBUTE = 'body'

_DB = None


def exp_db_backoff(func):
    """
        should be used for any atomic
        get/put item in the code
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger.debug(f'{func.__name__}:: args={args}, kwargs={kwargs}')
        max_retries = 15
        timeout_seed = uniform(0.1, 0.99)

        for retries in range(max_retries):
            try:
                if func.__name__ in need_return_capacity:
                    kwargs.update({'ReturnConsumedCapacity': 'TOTAL'})
                else:
                    raise RuntimeError("This decorator only for DynamoDB methods")
                result = func(*args, **kwargs)
                logger.info(f'{func.__name__}:: SUCCESS')

                return result

            except ClientError as e:
                if e.response.get('Error', {}).get('Code') not in RETRY_EXCEPTIONS:
                    log_exception(e, msg=f'Got exception while trying to {func.__name__}: ')
                    raise
                logger.warning(f'{func.__name__}:: throttled, retry={retries}')
                sleep(timeout_seed * 2 ** min(retries, 5) / 10)

        raise exceptions.NumberOfRetriesExceeded(
            f"MaxNumber={max_retries} of DB retries has exceeded"
        )

    return wrapper


def get_table(gl_table: boto3.session.Session.resource, table_name: str) -> boto3.session.Session.resource:
    if gl_table is None:
        if os.environ.get('ENDPOINT_URL'):
            gl_table = boto3.resource('dynamodb', endpoint_url=os.environ.get('ENDPOINT_URL')).Table(table_name)
        else:
            gl_table = boto3.resource('dynamodb', config=aws_config_ddb).Table(table_name)

        gl_table.put_item = exp_db_backoff(gl_table.put_item)
        gl_table.get_item = exp_db_backoff(gl_table.get_item)
        gl_table.update_item = exp_db_backoff(gl_table.update_item)
        gl_table.delete_item = exp_db_backoff(gl_table.delete_item)

    return gl_table


def get_gen_table():
    global _DB
    _DB = get_table(_DB, os.environ.get('GEN_TABLE_NAME'))
    return _DB


def put_db_record(item: dict, table=get_gen_table):
    table().put_item(Item=item)


def delete_db_record(partkey, sortkey, table=get_gen_table):
    table().delete_item(Key={'partkey': partkey, 'sortkey': sortkey})


def update_db_record(key: dict, update_body: dict, table=get_gen_table):
    """
    Shallow update of the stored body map, each key of update_body replaces one attribute of the body
    """
    set_expr, expr_attr_values, expr_attr_names = generate_update_expression(update_body=update_body)
    if not set_expr:
        return None
    return table().update_item(
        Key=key,
        UpdateExpression=set_expr,
        ExpressionAttributeValues=expr_attr_values,
        ExpressionAttributeNames=expr_attr_names,
        ConditionExpression='attribute_exists(partkey)',
        ReturnValues='UPDATED_NEW'
    )


def generate_update_expression(update_body: dict):
    """
    Generate SET expression for the nested attributes of the body map.
    Attribute names are always aliased, most of the record fields (name, status, date...) are reserved words
    """
    expr_attr_values = {}
    expr_attr_names = {'#body': BODY_ATTRIBUTE}
    set_parts = []
    for index, (field, field_value) in enumerate(update_body.items()):
        if field_value is None:
            continue
        expr_attr_names[f'#f{index}'] = field
        expr_attr_values[f':v{index}'] = field_value
        set_parts.append(f'#body.#f{index}=:v{index}')

    if not set_parts:
        return None, None, None
    return 'SET ' + ', '.join(set_parts), expr_attr_values, expr_attr_names


def get_db_item(partkey, sortkey, table=get_gen_table):
    result = table().get_item(
        Key={
            'partkey': partkey,
            'sortkey': sortkey
        }
    )

    if result.__contains__('Item'):
        return result['Item']
    else:
        logger.warning(f"get_db_item ::: record partkey={partkey} sortkey={sortkey} not found")
        raise exceptions.RecordNotFound(f'record partkey={partkey} sortkey={sortkey} not found')


def query_items_paginated(key_condition_expression, table=get_gen_table, start_key=None):
    kwargs = {'KeyConditionExpression': key_condition_expression}
    if start_key:
        kwargs.update({'ExclusiveStartKey': start_key})

    resp = table().query(**kwargs)
    return resp['Items'], resp.get('LastEvaluatedKey')


def query_items_paged(key_condition_expression, table=get_gen_table):
    """ This method shall be used whenever you think the query will
        return more than 1mb of data at once"""
    all_items = []
    items, last_evaluated_key = query_items_paginated(key_condition_expression, table=table)
    all_items.extend(items)

    while last_evaluated_key is not None:
        items, last_evaluated_key = query_items_paginated(
            key_condition_expression,
            table=table,
            start_key=last_evaluated_key
        )
        all_items.extend(items)

    return all_items
