# -*- coding: utf-8 -*-

import unittest
import couchdb_client


class TestPackage(unittest.TestCase):

    def test_exports(self):
        expected = set([
            'Client', 'Database', 'Document', 'DesignDocument',
            'Session', 'Response', 'ViewArguments',
            'exceptions',
        ])
        exported = set(e for e in dir(couchdb_client) if not e.startswith('_'))
        self.assertTrue(expected <= exported)

    def test_connection_error_is_not_the_builtin(self):
        self.assertFalse(issubclass(couchdb_client.exceptions.ConnectionError, ConnectionError))
        self.assertTrue(issubclass(couchdb_client.exceptions.Timeout,
                                   couchdb_client.exceptions.ConnectionError))
