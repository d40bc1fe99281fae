class CouchDBException(Exception):
    """There was an ambiguous error interacting with CouchDB."""

    def __init__(self, message=None, name=None):
        self.message = message or self.__class__.__doc__
        self.name = name
        super(CouchDBException, self).__init__(self.message)

    def __str__(self):
        if self.name is not None:
            return "{message} ({name})".format(message=self.message, name=self.name)
        return self.message


class ConnectionError(CouchDBException):
    """The server could not be reached or did not answer as expected."""
    pass


class Timeout(ConnectionError):
    """The request timed out."""
    pass


class DatabaseExists(CouchDBException):
    """Could not create a database, it exists already."""
    pass


class NotFound(CouchDBException):
    """A requested resource (database, document, view, attachment) does not exist."""
    pass


class Conflict(CouchDBException):
    """A revision conflict occurred."""
    pass


class InvalidDesignDocument(CouchDBException, ValueError):
    """Design document IDs must start with '_design/'."""
    pass
