"""Unit tests for the Blog and Post Lambda entry points."""
import importlib
import json
import logging
import os
from unittest.mock import MagicMock, patch

import pytest

from conftest import make_event
from gamocracy import blog, post


@pytest.fixture
def mock_table():
    table = MagicMock()
    resource = MagicMock()
    resource.Table.return_value = table

    blog.get_store.cache_clear()
    post.get_store.cache_clear()
    with patch("boto3.resource", return_value=resource):
        yield table
    blog.get_store.cache_clear()
    post.get_store.cache_clear()


class TestBlogHandler:
    def test_get_one(self, mock_table):
        mock_table.get_item.return_value = {"Item": {"blogId": "b1", "title": "Hi"}}
        result = blog.handler(make_event("GET", query={"blogId": "b1"}), None)

        assert result["statusCode"] == 200
        assert json.loads(result["body"])["title"] == "Hi"
        mock_table.get_item.assert_called_once_with(Key={"blogId": "b1"})

    def test_create(self, mock_table):
        mock_table.get_item.return_value = {}
        result = blog.handler(make_event("POST", body={"blogId": "b1", "title": "New"}), None)

        assert result["statusCode"] == 201
        _, kwargs = mock_table.put_item.call_args
        assert kwargs["Item"]["blogId"] == "b1"
        assert kwargs["ConditionExpression"] == "attribute_not_exists(blogId)"

    def test_store_is_reused(self, mock_table):
        mock_table.scan.return_value = {"Items": []}
        blog.handler(make_event("GET"), None)
        blog.handler(make_event("GET"), None)
        assert blog.get_store() is blog.get_store()
        assert mock_table.scan.call_count == 2


class TestPostHandler:
    def test_list(self, mock_table):
        mock_table.scan.return_value = {"Items": [{"postId": "p1"}, {"postId": "p2"}]}
        result = post.handler(make_event("GET"), None)

        assert result["statusCode"] == 200
        assert [p["postId"] for p in json.loads(result["body"])] == ["p1", "p2"]

    def test_delete(self, mock_table):
        result = post.handler(make_event("DELETE", query={"postId": "p1"}), None)

        assert result["statusCode"] == 200
        assert result["body"] == ""
        mock_table.delete_item.assert_called_once_with(Key={"postId": "p1"})

    def test_method_not_allowed(self, mock_table):
        result = post.handler(make_event("PATCH"), None)
        assert result["statusCode"] == 405


class TestLogLevelConfig:
    @pytest.mark.parametrize("module", [blog, post])
    def test_unknown_level_does_not_break_import(self, module):
        root = logging.getLogger()
        previous = root.level
        try:
            with patch.dict(os.environ, {"LOG_LEVEL": "chatty"}):
                importlib.reload(module)
            assert root.level == logging.INFO
        finally:
            importlib.reload(module)
            root.setLevel(previous)
