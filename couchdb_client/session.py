import collections
import logging

import requests.exceptions
from requests_toolbelt import sessions

from couchdb_client import exceptions

__all__ = ['Session', 'Response']

log = logging.getLogger(__name__)


Response = collections.namedtuple("Response", ["success", "status", "json", "msg", "content"])
Response.__doc__ = """Outcome of a single request against the server.

``json`` is the decoded body, or `None` when the body is not JSON; ``msg`` is
the status line, followed by the server's ``reason`` when it sent one.
"""


def _message(resp, data):
    msg = '{0} {1}'.format(resp.status_code, resp.reason or '').strip()
    if isinstance(data, dict) and data.get('reason'):
        msg = '{0}: {1}'.format(msg, data['reason'])
    return msg


class Session(object):
    """Wrapper around BaseUrlSession that turns every exchange into a `Response`.

    HTTP error statuses are reported through ``Response.success``; only
    transport failures raise, as `ConnectionError` (or `Timeout`).
    Extra keyword arguments (``timeout``, ``auth``, ``verify`` ...) are passed
    on to every request.
    """

    def __init__(self, base_url=None, **request_defaults):
        self._base_session = sessions.BaseUrlSession(base_url=base_url)
        self._request_defaults = request_defaults

    @property
    def base_url(self):
        return self._base_session.base_url

    @base_url.setter
    def base_url(self, url):
        self._base_session.base_url = url

    def request(self, method, path, content=None):
        kwargs = dict(self._request_defaults)
        if content is not None:
            kwargs['json'] = content
        try:
            resp = self._base_session.request(method, str(path), **kwargs)
        except requests.exceptions.Timeout as exc:
            log.warning('%s %s timed out', method, path)
            raise exceptions.Timeout(str(exc)) from exc
        except requests.exceptions.RequestException as exc:
            log.warning('%s %s failed: %s', method, path, exc)
            raise exceptions.ConnectionError(str(exc)) from exc

        try:
            data = resp.json()
        except ValueError:
            data = None
        log.debug('%s %s -> %s', method, path, resp.status_code)
        return Response(
            success=resp.ok,
            status=resp.status_code,
            json=data,
            msg=_message(resp, data),
            content=resp.content,
        )
