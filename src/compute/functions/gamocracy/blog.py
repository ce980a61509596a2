import functools
import logging
import os

from .entity import RecordKind
from .handlers import dispatch, log_level
from .store import RecordStore

logger = logging.getLogger()
logger.setLevel(log_level(os.environ.get('LOG_LEVEL')))

TABLE_NAME = os.environ.get('TABLE_NAME', 'GC_Blog')

GAME_SUMMARY = {
    'name': str,
    'image': str,
}

BLOG = RecordKind('Blog', 'blogId', {
    'type': str,
    'blogId': str,
    'coverImage': str,
    'title': str,
    'content': str,
    'author': str,
    'games': [GAME_SUMMARY],
    'createdAt': str,
    'updatedAt': str,
})


@functools.lru_cache(maxsize=None)
def get_store():
    return RecordStore.for_table(TABLE_NAME, BLOG.key_field)


def handler(event, context):
    return dispatch(event, BLOG, get_store())
