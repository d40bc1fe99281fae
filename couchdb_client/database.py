"""Database handles.

>>> client = Client()
>>> db = client.new_database('python-tests').create()
>>> doc = db.new_document('johndoe', data={'type': 'Person'}).create()
>>> db.document_exists('johndoe')
True
>>> db.delete()
True
"""
import re

from couchdb_client import exceptions, views
from couchdb_client.document import Document
from couchdb_client.design import DesignDocument, DESIGN_PREFIX

__all__ = ['Database']


VALID_NAME = re.compile(r'^[a-z0-9_$()+/-]+/$')


class Database(object):
    """Representation of one named database on a CouchDB server.

    The name is kept unescaped, with a trailing slash; it is only escaped
    when building URIs (see `uri_name`). Nothing is requested from the server
    until an operation is called.
    """

    def __init__(self, client, name):
        if not name:
            raise ValueError('CouchDB database requires a name.')
        if client is None:
            raise ValueError('CouchDB database requires a client.')
        if not name.endswith('/'):
            name += '/'
        self._name = name
        self._client = client

    @property
    def name(self):
        return self._name

    @property
    def client(self):
        return self._client

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.name)

    @staticmethod
    def valid_name(name):
        """Return whether `name` (including its trailing slash) is a valid
        CouchDB database name.
        """
        return VALID_NAME.match(name) is not None

    def uri_name(self):
        """The database name escaped for use in a URI.

        Every slash but the trailing one is replaced with ``%2F``; no other
        character is escaped.
        """
        return re.sub(r'/(?=.)', '%2F', self._name)

    def _request(self, method, path='', content=None):
        return self._client.request(method, self.uri_name() + path, content=content)

    def info(self):
        """Return the metadata CouchDB maintains about this database.

        :rtype: `dict`
        :raise ConnectionError: if the request failed
        """
        res = self._request('GET')
        if res.success:
            return res.json
        raise exceptions.ConnectionError(res.msg)

    def exists(self):
        """Return whether the database exists on the server."""
        res = self._request('GET')
        if res.success:
            return True
        if res.status == 404:
            return False
        raise exceptions.ConnectionError(res.msg)

    def create(self):
        """Create the database on the server.

        :return: this database
        :raise DatabaseExists: if a database with that name already exists
        :raise ConnectionError: for any other failure
        """
        res = self._request('PUT')
        if res.success and res.json and res.json.get('ok'):
            return self
        if res.status == 409:
            raise exceptions.DatabaseExists(res.msg, name=self._name)
        raise exceptions.ConnectionError(res.msg)

    def delete(self):
        """Delete the database from the server.

        :return: `True`
        :raise NotFound: if the database does not exist
        :raise ConnectionError: for any other failure
        """
        res = self._request('DELETE')
        if res.success and res.json and res.json.get('ok'):
            return True
        if res.status == 404:
            raise exceptions.NotFound(res.msg, name=self._name)
        raise exceptions.ConnectionError(res.msg)

    def new_document(self, id=None, rev=None, data=None, attachments=None):
        """Return a `Document` bound to this database. Nothing is created on
        the server.
        """
        return Document(self, id=id, rev=rev, data=data, attachments=attachments)

    def list_document_id_revisions(self, args=None):
        """Return ``{'id': ..., 'rev': ...}`` dicts for the documents listed by
        ``_all_docs``.

        :param args: optional view arguments restricting the listing
        :raise ConnectionError: if the request failed
        """
        qs = self.build_query_string(args) if args else ''
        res = self._request('GET', '_all_docs' + qs)
        if not res.success or res.json is None:
            raise exceptions.ConnectionError(res.msg)
        return [{'id': row['id'], 'rev': row['value']['_rev']}
                for row in res.json.get('rows', [])]

    def list_documents(self, args=None):
        return [self.new_document(item['id'], item['rev'])
                for item in self.list_document_id_revisions(args)]

    def document_exists(self, id, rev=None):
        """Return whether a document with the given ID (and, if given, the
        given latest revision) exists.

        Lists every document in the database on each call.
        """
        return _matches(self.list_document_id_revisions(), id, rev)

    def new_design_document(self, id=None, rev=None, data=None):
        """Return a `DesignDocument` bound to this database.

        :raise InvalidDesignDocument: if `id` does not start with ``_design/``
        """
        return DesignDocument(self, id=id, rev=rev, data=data)

    def list_design_document_id_revisions(self, args=None):
        return [item for item in self.list_document_id_revisions(args)
                if item['id'].startswith(DESIGN_PREFIX)]

    def list_design_documents(self, args=None):
        return [self.new_design_document(item['id'], item['rev'])
                for item in self.list_design_document_id_revisions(args)]

    def design_document_exists(self, id, rev=None):
        """Same as `document_exists`, for design documents; `id` may omit the
        ``_design/`` prefix.
        """
        if not id.startswith(DESIGN_PREFIX):
            id = DESIGN_PREFIX + id
        return _matches(self.list_design_document_id_revisions(), id, rev)

    @staticmethod
    def normalize_view_arguments(args):
        return views.normalize_view_arguments(args)

    @staticmethod
    def build_query_string(args):
        return views.build_query_string(args)


def _matches(items, id, rev):
    if rev:
        return any(item['id'] == id and item['rev'] == rev for item in items)
    return any(item['id'] == id for item in items)
