"""View query arguments.

CouchDB parses ``key``, ``startkey`` and ``endkey`` as JSON values, and only
understands ``descending=true`` and ``update=false``; their absence means the
server default (ascending order, index updated before the query).
"""
import json

import furl

__all__ = ['ViewArguments', 'normalize_view_arguments', 'build_query_string']


JSON_KEYS = ('key', 'startkey', 'endkey')


def _jsons(data):
    """Convert data into a compact JSON string."""
    return json.dumps(data, ensure_ascii=False, separators=(',', ':'))


def quote(value, safe=''):
    return furl.quote(str(value), safe=safe)


class ViewArguments(object):
    """Explicitly typed view query arguments.

    ``descending`` defaults to `False` and ``update`` to `True`; at their
    defaults both are left out of the query string. Every other field is
    sent only when it is not `None`, so ``key=None`` means "no key" and
    never a JSON ``null`` key.

    >>> ViewArguments(startkey=['a'], count=10, descending=True).to_dict()
    {'startkey': ['a'], 'count': 10, 'descending': True}
    """

    fields = ('key', 'startkey', 'startkey_docid', 'endkey', 'count', 'skip')

    def __init__(self, key=None, startkey=None, startkey_docid=None, endkey=None,
                 count=None, skip=None, descending=False, update=True):
        self.key = key
        self.startkey = startkey
        self.startkey_docid = startkey_docid
        self.endkey = endkey
        self.count = count
        self.skip = skip
        self.descending = bool(descending)
        self.update = bool(update)

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.to_dict())

    def to_dict(self):
        args = {}
        for name in self.fields:
            value = getattr(self, name)
            if value is not None:
                args[name] = value
        if self.descending:
            args['descending'] = True
        if not self.update:
            args['update'] = False
        return args


def _as_dict(args):
    if args is None:
        return {}
    if isinstance(args, ViewArguments):
        return args.to_dict()
    return dict(args)


def normalize_view_arguments(args):
    """Return a copy of `args` with the values turned into what CouchDB
    understands.

    :param args: a mapping of view arguments or a `ViewArguments`
    :rtype: `dict`
    """
    result = _as_dict(args)
    for name in list(result):
        value = result[name]
        if name in JSON_KEYS:
            if isinstance(value, (list, tuple, dict)):
                result[name] = _jsons(value)
            else:
                result[name] = '"%s"' % (value,)
        elif name == 'descending':
            if value:
                result[name] = 'true'
            else:
                del result[name]
        elif name == 'update':
            if value:
                del result[name]
            else:
                result[name] = 'false'
    return result


def build_query_string(args):
    """Normalize `args` and render them as a query string with a leading ``?``.

    Pairs are sorted by key. An empty string is returned when nothing is left
    after normalization.
    """
    normalized = normalize_view_arguments(args)
    if not normalized:
        return ''
    return '?' + '&'.join(
        '%s=%s' % (quote(name), quote(normalized[name]))
        for name in sorted(normalized))
