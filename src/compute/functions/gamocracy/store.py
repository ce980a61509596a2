import logging
import os

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import (
    ConditionFailedError,
    DeleteError,
    FetchError,
    MarshalError,
    WriteError,
)

logger = logging.getLogger(__name__)

# Conditions accepted by RecordStore.put
ABSENT = 'absent'
PRESENT = 'present'


def error_code(e):
    if isinstance(e, ClientError):
        return e.response.get('Error', {}).get('Code', 'Unknown')
    return type(e).__name__


class RecordStore:
    """Single-table access to one kind of record, keyed by one string attribute."""

    def __init__(self, table, key_name):
        self.table = table
        self.key_name = key_name

    @classmethod
    def for_table(cls, table_name, key_name):
        region = os.environ.get('AWS_REGION')
        dynamodb = boto3.resource('dynamodb', region_name=region) if region else boto3.resource('dynamodb')
        return cls(dynamodb.Table(table_name), key_name)

    @property
    def table_name(self):
        return getattr(self.table, 'name', None)

    def get(self, key):
        try:
            resp = self.table.get_item(Key={self.key_name: key})
        except (ClientError, BotoCoreError) as e:
            logger.warning("get_item %s=%r failed: %s", self.key_name, key, error_code(e))
            raise FetchError() from e
        return resp.get('Item')

    def scan(self):
        # Single page only; tables are expected to stay small.
        try:
            resp = self.table.scan()
        except (ClientError, BotoCoreError) as e:
            logger.warning("scan of %s failed: %s", self.table_name, error_code(e))
            raise FetchError() from e
        return resp.get('Items', [])

    def put(self, item, condition=None):
        kwargs = {'Item': item}
        if condition == ABSENT:
            kwargs['ConditionExpression'] = f'attribute_not_exists({self.key_name})'
        elif condition == PRESENT:
            kwargs['ConditionExpression'] = f'attribute_exists({self.key_name})'
        elif condition is not None:
            raise ValueError(f"unknown put condition: {condition!r}")

        try:
            self.table.put_item(**kwargs)
        except TypeError as e:
            logger.warning("could not serialize %s=%r: %s", self.key_name, item.get(self.key_name), e)
            raise MarshalError() from e
        except ClientError as e:
            code = error_code(e)
            if code == 'ConditionalCheckFailedException':
                raise ConditionFailedError() from e
            logger.warning("put_item %s=%r failed: %s", self.key_name, item.get(self.key_name), code)
            raise WriteError() from e
        except BotoCoreError as e:
            logger.warning("put_item %s=%r failed: %s", self.key_name, item.get(self.key_name), error_code(e))
            raise WriteError() from e

    def delete(self, key):
        try:
            self.table.delete_item(Key={self.key_name: key})
        except (ClientError, BotoCoreError) as e:
            logger.warning("delete_item %s=%r failed: %s", self.key_name, key, error_code(e))
            raise DeleteError() from e
