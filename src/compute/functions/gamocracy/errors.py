ERROR_FAILED_TO_FETCH_RECORD = "failed to fetch record"
ERROR_FAILED_TO_UNMARSHAL_RECORD = "failed to unmarshal record"
ERROR_COULD_NOT_MARSHAL_ITEM = "could not marshal item"
ERROR_COULD_NOT_PUT_ITEM = "could not dynamo put item"
ERROR_COULD_NOT_DELETE_ITEM = "could not delete item"


class RecordError(Exception):
    """Base class for errors that end a request with a 400 response.

    The message is what the client sees, so it never carries backend detail.
    """
    message = "record error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class FetchError(RecordError):
    message = ERROR_FAILED_TO_FETCH_RECORD


class UnmarshalError(RecordError):
    message = ERROR_FAILED_TO_UNMARSHAL_RECORD


class InvalidDataError(RecordError):
    pass


class MarshalError(RecordError):
    message = ERROR_COULD_NOT_MARSHAL_ITEM


class WriteError(RecordError):
    message = ERROR_COULD_NOT_PUT_ITEM


class DeleteError(RecordError):
    message = ERROR_COULD_NOT_DELETE_ITEM


class AlreadyExistsError(RecordError):
    pass


class DoesNotExistError(RecordError):
    pass


class ConditionFailedError(WriteError):
    """A conditional put lost to a concurrent writer."""
