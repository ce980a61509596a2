import functools
import logging
import os

from .entity import RecordKind
from .handlers import dispatch, log_level
from .store import RecordStore

logger = logging.getLogger()
logger.setLevel(log_level(os.environ.get('LOG_LEVEL')))

TABLE_NAME = os.environ.get('TABLE_NAME', 'GC_Post')

# reactors may repeat; they are stored exactly as sent
REACTION = {
    'emoji': str,
    'reactors': [str],
}

POST = RecordKind('Post', 'postId', {
    'type': str,
    'postId': str,
    'title': str,
    'content': str,
    'author': str,
    'createdAt': str,
    'updatedAt': str,
    'images': [str],
    'reactions': [REACTION],
})


@functools.lru_cache(maxsize=None)
def get_store():
    return RecordStore.for_table(TABLE_NAME, POST.key_field)


def handler(event, context):
    return dispatch(event, POST, get_store())
