# -*- coding: utf-8 -*-
"""Client library for CouchDB's HTTP/JSON API."""

from couchdb_client import exceptions
from couchdb_client.client import Client
from couchdb_client.database import Database
from couchdb_client.design import DesignDocument
from couchdb_client.document import Document
from couchdb_client.session import Session, Response
from couchdb_client.views import ViewArguments

__version__ = '0.1.0'
