"""Document handles."""
import base64

from couchdb_client import exceptions
from couchdb_client.views import quote

__all__ = ['Document']


class Document(object):
    """Representation of a document in a database.

    Holds the document ID and revision, its fields (`data`) and attachment
    stubs (`attachments`). Changes are local until `create` or `update` is
    called.

    >>> doc = db.new_document('johndoe', data={'name': 'John Doe'})
    >>> doc.create().rev        #doctest: +ELLIPSIS
    '1-...'
    >>> doc.data['age'] = 42
    >>> doc.update().rev        #doctest: +ELLIPSIS
    '2-...'
    """

    def __init__(self, db, id=None, rev=None, data=None, attachments=None):
        self.db = db
        self.id = id
        self.rev = rev
        self.data = dict(data) if data is not None else {}
        self.attachments = attachments if attachments is not None else {}

    def __repr__(self):
        return '<%s %r@%r %r>' % (type(self).__name__, self.id, self.rev, self.data)

    def uri_name(self):
        """The document URI, relative to the server.

        The ID is fully escaped, except for the slash of a ``_design/``
        prefix.
        """
        name = quote(self.id)
        if name.startswith('_design%2F'):
            name = '_design/' + name[len('_design%2F'):]
        return self.db.uri_name() + name

    def content_for_submit(self):
        """Return the JSON body sent to the server on create and update."""
        content = dict(self.data)
        if self.id:
            content['_id'] = self.id
        if self.rev:
            content['_rev'] = self.rev
        if self.attachments:
            content['_attachments'] = self.attachments
        return content

    def _request(self, method, path, content=None):
        return self.db.client.request(method, path, content=content)

    def _require_id(self):
        if not self.id:
            raise ValueError('document ID cannot be None')

    def _require_rev(self):
        self._require_id()
        if not self.rev:
            raise ValueError('document revision cannot be None')

    def create(self):
        """Create the document on the server.

        Without an ID the server allocates one. The new ID and revision are
        stored on this handle.

        :return: this document
        :raise Conflict: if a document with this ID already exists
        :raise ConnectionError: for any other failure
        """
        if self.rev:
            raise ValueError('document already has a revision, use update()')
        if self.id:
            res = self._request('PUT', self.uri_name(), self.content_for_submit())
        else:
            res = self._request('POST', self.db.uri_name(), self.content_for_submit())
        if res.success and res.json and res.json.get('ok'):
            self.id = res.json['id']
            self.rev = res.json['rev']
            return self
        if res.status == 409:
            raise exceptions.Conflict(res.msg, name=self.id)
        raise exceptions.ConnectionError(res.msg)

    def _load(self, content):
        content = dict(content)
        self.id = content.pop('_id', self.id)
        self.rev = content.pop('_rev', None)
        self.attachments = content.pop('_attachments', {})
        self.data = dict((k, v) for k, v in content.items() if not k.startswith('_'))

    def _get(self, qs=''):
        self._require_id()
        res = self._request('GET', self.uri_name() + qs)
        if res.success and res.json is not None:
            return res.json
        if res.status == 404:
            raise exceptions.NotFound(res.msg, name=self.id)
        raise exceptions.ConnectionError(res.msg)

    def retrieve(self):
        """Fetch the latest revision of the document and replace the local
        state with it.

        :return: this document
        :raise NotFound: if the document does not exist
        """
        self._load(self._get())
        return self

    def retrieve_from_revision(self, rev):
        """Return a new handle populated from the given revision."""
        doc = type(self)(self.db, id=self.id)
        doc._load(self._get('?rev=' + quote(rev)))
        return doc

    def revisions_info(self):
        """Return the ``_revs_info`` list of the document: one dict with
        ``rev`` and ``status`` per known revision, newest first.
        """
        return self._get('?revs_info=true').get('_revs_info', [])

    def update(self):
        """Store the local state on the server as a new revision.

        :return: this document
        :raise Conflict: if the server has a newer revision
        :raise NotFound: if the document does not exist
        """
        self._require_rev()
        res = self._request('PUT', self.uri_name(), self.content_for_submit())
        if res.success and res.json and res.json.get('ok'):
            self.rev = res.json['rev']
            return self
        if res.status == 409:
            raise exceptions.Conflict(res.msg, name=self.id)
        if res.status == 404:
            raise exceptions.NotFound(res.msg, name=self.id)
        raise exceptions.ConnectionError(res.msg)

    def delete(self):
        """Delete the document from the server.

        The handle stays usable; its revision becomes the deletion revision.

        :return: `True`
        :raise Conflict: if the server has a newer revision
        :raise NotFound: if the document does not exist
        """
        self._require_rev()
        res = self._request('DELETE', self.uri_name() + '?rev=' + quote(self.rev))
        if res.success and res.json and res.json.get('ok'):
            self.rev = res.json.get('rev', self.rev)
            return True
        if res.status == 409:
            raise exceptions.Conflict(res.msg, name=self.id)
        if res.status == 404:
            raise exceptions.NotFound(res.msg, name=self.id)
        raise exceptions.ConnectionError(res.msg)

    def fetch_attachment(self, name):
        """Return the content of the named attachment as bytes.

        :raise NotFound: if the attachment is unknown locally or on the server
        """
        if name not in self.attachments:
            raise exceptions.NotFound('No such attachment', name=name)
        self._require_id()
        res = self._request('GET', self.uri_name() + '/' + quote(name))
        if res.success:
            return res.content
        if res.status == 404:
            raise exceptions.NotFound(res.msg, name=name)
        raise exceptions.ConnectionError(res.msg)

    def add_attachment(self, name, content_type, data):
        """Add an inline attachment; it is sent with the next create or update."""
        self.attachments[name] = {
            'content_type': content_type,
            'data': self.to_base64(data),
        }

    def delete_attachment(self, name):
        """Drop an attachment; it is removed with the next update."""
        self.attachments.pop(name, None)

    @staticmethod
    def to_base64(data):
        if isinstance(data, str):
            data = data.encode('utf-8')
        return base64.b64encode(data).decode('ascii')
