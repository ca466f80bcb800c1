import logging

import numpy as np
import pytest

from seededlda import InvalidArgument, SeedDictionary
from seededlda.dictionary import as_dictionary, lookup, select_features

FEATURES = ['Love', 'lovers', 'glove', 'space', 'spaceship', 'star', 'a.b']


class TestSeedDictionary:

    def test_keeps_order_and_wraps_strings(self):
        dictionary = SeedDictionary([('b', 'x'), ('a', ['y', 'z'])])

        assert list(dictionary) == ['b', 'a']
        assert dictionary['b'] == ('x',)
        assert dictionary['a'] == ('y', 'z')
        assert len(dictionary) == 2

    @pytest.mark.parametrize('entries', [
        {'': ['x']},
        {1: ['x']},
        {'a': [1, 2]},
    ])
    def test_rejects_invalid_entries(self, entries):
        with pytest.raises(InvalidArgument):
            SeedDictionary(entries)

    def test_as_dictionary_accepts_mapping(self):
        dictionary = as_dictionary({'a': ['x']})

        assert isinstance(dictionary, SeedDictionary)

    @pytest.mark.parametrize('value', [['aa', 'bb'], 'aa', None, 3])
    def test_as_dictionary_rejects_other_values(self, value):
        with pytest.raises(InvalidArgument, match='dictionary must be a dictionary object'):
            as_dictionary(value)


class TestSelectFeatures:

    def test_glob_matches_whole_feature(self):
        ids = select_features(FEATURES, ['love*'])

        np.testing.assert_array_equal(ids, [0, 1])

    def test_glob_question_mark(self):
        ids = select_features(FEATURES, ['sta?'])

        np.testing.assert_array_equal(ids, [5])

    def test_glob_case_sensitive(self):
        ids = select_features(FEATURES, ['love*'], case_insensitive=False)

        np.testing.assert_array_equal(ids, [1])

    def test_regex_searches_anywhere(self):
        ids = select_features(FEATURES, ['ove'], valuetype='regex')

        np.testing.assert_array_equal(ids, [0, 1, 2])

    def test_fixed_escapes_pattern(self):
        assert list(select_features(FEATURES, ['a.b'], valuetype='fixed')) == [6]
        assert list(select_features(FEATURES, ['space'], valuetype='fixed')) == [3]

    def test_multiple_patterns_do_not_duplicate(self):
        ids = select_features(FEATURES, ['space*', 'space'])

        np.testing.assert_array_equal(ids, [3, 4])

    def test_invalid_valuetype(self):
        with pytest.raises(InvalidArgument, match='valuetype'):
            select_features(FEATURES, ['x'], valuetype='wildcard')

    def test_invalid_regex(self):
        with pytest.raises(InvalidArgument, match='invalid regular expression'):
            select_features(FEATURES, ['('], valuetype='regex')


class TestLookup:

    def test_lookup_each_topic(self):
        matched = lookup(FEATURES, {'romance': ['love*'], 'sifi': ['space*', 'star']})

        assert list(matched) == ['romance', 'sifi']
        np.testing.assert_array_equal(matched['sifi'], [3, 4, 5])

    def test_warns_about_unmatched_topic(self, caplog):
        with caplog.at_level(logging.WARNING, logger='SeedDictionary'):
            matched = lookup(FEATURES, {'none': ['zzz']})

        assert len(matched['none']) == 0
        assert 'no feature matches the seed words of "none"' in caplog.text
