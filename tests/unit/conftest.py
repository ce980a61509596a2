import copy
import json

import pytest

from gamocracy.errors import ConditionFailedError, DeleteError, FetchError
from gamocracy.store import ABSENT, PRESENT


class FakeStore:
    """In-memory stand-in for RecordStore with the same put conditions."""

    def __init__(self, key_name):
        self.key_name = key_name
        self.items = {}
        self.fail_gets = False
        self.fail_deletes = False
        # error class raised by every put, e.g. WriteError or MarshalError
        self.put_error = None
        self.puts = 0

    def get(self, key):
        if self.fail_gets:
            raise FetchError()
        item = self.items.get(key)
        return copy.deepcopy(item) if item is not None else None

    def scan(self):
        if self.fail_gets:
            raise FetchError()
        return [copy.deepcopy(item) for item in self.items.values()]

    def put(self, item, condition=None):
        if self.put_error is not None:
            raise self.put_error()
        key = item[self.key_name]
        if condition == ABSENT and key in self.items:
            raise ConditionFailedError()
        if condition == PRESENT and key not in self.items:
            raise ConditionFailedError()
        self.puts += 1
        self.items[key] = copy.deepcopy(item)

    def delete(self, key):
        if self.fail_deletes:
            raise DeleteError()
        self.items.pop(key, None)


@pytest.fixture
def blog_store():
    return FakeStore('blogId')


@pytest.fixture
def post_store():
    return FakeStore('postId')


def make_event(method="GET", query=None, body=None):
    event = {
        "httpMethod": method,
        "queryStringParameters": query,
        "body": None,
        "isBase64Encoded": False,
    }
    if body is not None:
        event["body"] = body if isinstance(body, str) else json.dumps(body)
    return event
