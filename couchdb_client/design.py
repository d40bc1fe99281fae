"""Design documents (views)."""
from couchdb_client import exceptions
from couchdb_client.views import build_query_string
from couchdb_client.document import Document

__all__ = ['DesignDocument', 'DESIGN_PREFIX']


DESIGN_PREFIX = '_design/'


class DesignDocument(Document):
    """A document in the ``_design/`` namespace defining views.

    Design documents never carry attachments: they are dropped from the
    submitted body. ``language`` defaults to ``javascript``.

    >>> ddoc = db.new_design_document('_design/reports', data={'views': {
    ...     'byDate': {'map': 'function(doc) { emit(doc.date, null); }'}}})
    >>> ddoc.create().list_views()
    {'byDate'}
    >>> ddoc.query_view('byDate', {'descending': True, 'count': 10})['rows']
    []
    """

    def __init__(self, db, id=None, rev=None, data=None, attachments=None):
        super(DesignDocument, self).__init__(db, id=id, rev=rev, data=data,
                                             attachments=attachments)
        if not self.id or not self.id.startswith(DESIGN_PREFIX):
            raise exceptions.InvalidDesignDocument(
                "Design document ID must start with '%s'" % DESIGN_PREFIX, name=self.id)
        self.data.setdefault('language', 'javascript')

    @property
    def views(self):
        """The view definitions, as CouchDB expects them. Changes are local
        until the document is created or updated.
        """
        return self.data.get('views')

    @views.setter
    def views(self, value):
        self.data['views'] = value

    @property
    def short_name(self):
        return self.id[len(DESIGN_PREFIX):]

    def content_for_submit(self):
        content = super(DesignDocument, self).content_for_submit()
        content.pop('_attachments', None)
        return content

    def list_views(self):
        return set(self.views or {})

    def query_view(self, view_name, args=None):
        """Query one of the views of this design document.

        :param view_name: the name of a view defined in `views`
        :param args: optional view arguments (a mapping or `ViewArguments`)
        :return: the decoded response, usually with ``total_rows``,
                 ``offset`` and ``rows``
        :raise NotFound: if the view is not defined locally
        :raise ConnectionError: if the request failed
        """
        if view_name not in (self.views or {}):
            raise exceptions.NotFound('No such view', name=view_name)
        qs = build_query_string(args) if args else ''
        path = '%s_view/%s/%s%s' % (self.db.uri_name(), self.short_name, view_name, qs)
        res = self.db.client.request('GET', path)
        if not res.success:
            raise exceptions.ConnectionError(res.msg)
        return res.json
