# -*- coding: utf-8 -*-

import unittest

from couchdb_client.views import ViewArguments, build_query_string, normalize_view_arguments, quote


class NormalizeViewArgumentsTestCase(unittest.TestCase):

    def test_descending(self):
        self.assertEqual({'descending': 'true'}, normalize_view_arguments({'descending': 1}))
        self.assertEqual({}, normalize_view_arguments({'descending': 0}))

    def test_update(self):
        self.assertEqual({'update': 'false'}, normalize_view_arguments({'update': 0}))
        self.assertEqual({}, normalize_view_arguments({'update': 1}))

    def test_composite_keys_are_json_encoded(self):
        self.assertEqual({'key': '["a","b"]'}, normalize_view_arguments({'key': ['a', 'b']}))
        self.assertEqual({'startkey': '{"a":1}'}, normalize_view_arguments({'startkey': {'a': 1}}))

    def test_scalar_keys_are_quoted(self):
        self.assertEqual({'key': '"x"'}, normalize_view_arguments({'key': 'x'}))
        self.assertEqual({'endkey': '"5"'}, normalize_view_arguments({'endkey': 5}))

    def test_other_keys_pass_through(self):
        args = {'count': 10, 'skip': 2, 'startkey_docid': 'abc'}
        self.assertEqual(args, normalize_view_arguments(args))

    def test_input_not_mutated(self):
        args = {'descending': False, 'key': 'x'}
        normalize_view_arguments(args)
        self.assertEqual({'descending': False, 'key': 'x'}, args)


class BuildQueryStringTestCase(unittest.TestCase):

    def test_pairs_sorted_and_joined(self):
        self.assertEqual('?count=10&descending=true',
                         build_query_string({'descending': 1, 'count': 10}))

    def test_values_percent_encoded(self):
        self.assertEqual('?key=%22a%20b%22', build_query_string({'key': 'a b'}))
        self.assertEqual('?key=%5B%22a%22%2C%22b%22%5D', build_query_string({'key': ['a', 'b']}))

    def test_utf8(self):
        self.assertEqual('?key=%22%C3%A9%22', build_query_string({'key': u'\xe9'}))

    def test_empty(self):
        self.assertEqual('', build_query_string({}))
        self.assertEqual('', build_query_string({'descending': False}))


class ViewArgumentsTestCase(unittest.TestCase):

    def test_defaults_are_omitted(self):
        self.assertEqual({}, ViewArguments().to_dict())
        self.assertEqual({}, normalize_view_arguments(ViewArguments()))

    def test_explicit_fields(self):
        args = ViewArguments(key=['a', 1], count=5, descending=True, update=False)
        self.assertEqual({
            'key': '["a",1]',
            'count': 5,
            'descending': 'true',
            'update': 'false',
        }, normalize_view_arguments(args))

    def test_query_string(self):
        self.assertEqual('?skip=3&startkey=%22b%22',
                         build_query_string(ViewArguments(startkey='b', skip=3)))

    def test_none_fields_are_not_sent(self):
        self.assertEqual({'count': 1}, ViewArguments(key=None, count=1).to_dict())
        self.assertEqual({'key': '"None"'}, normalize_view_arguments({'key': None}))


class QuoteTestCase(unittest.TestCase):

    def test_reserved_characters_escaped(self):
        self.assertEqual('a%2Fb%20c%3F%26', quote('a/b c?&'))
        self.assertEqual('10', quote(10))
