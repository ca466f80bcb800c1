import re
from collections import OrderedDict
from collections.abc import Mapping

import numpy as np

from .errors import InvalidArgument
from .formatted_logger import formatted_logger

logger = formatted_logger('SeedDictionary')

VALUETYPES = ('glob', 'regex', 'fixed')


class SeedDictionary(Mapping):
    """ Ordered mapping from topic name to the seed patterns of the topic

    Parameters
    ----------
    entries: mapping or iterable of (key, patterns) pairs
        a single pattern given as a string is treated as a one element list
    """

    def __init__(self, entries):
        if isinstance(entries, Mapping):
            entries = entries.items()
        self._entries = OrderedDict()
        for key, patterns in entries:
            if not isinstance(key, str) or not key:
                raise InvalidArgument('dictionary keys must be non-empty strings')
            if key in self._entries:
                raise InvalidArgument('duplicated dictionary key: %s' % key)
            if isinstance(patterns, str):
                patterns = [patterns]
            patterns = list(patterns)
            if not all(isinstance(pattern, str) for pattern in patterns):
                raise InvalidArgument('patterns of "%s" must be strings' % key)
            self._entries[key] = tuple(patterns)

    def __getitem__(self, key):
        return self._entries[key]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return 'SeedDictionary(%s)' % ', '.join('%s=%s' % (key, list(val)) for key, val in self._entries.items())


def as_dictionary(dictionary):
    """ Return `dictionary` as a SeedDictionary, accepting any mapping
    """
    if isinstance(dictionary, SeedDictionary):
        return dictionary
    if isinstance(dictionary, Mapping):
        return SeedDictionary(dictionary)
    raise InvalidArgument('dictionary must be a dictionary object')


def _glob_to_regex(pattern):
    parts = list()
    for char in pattern:
        if char == '*':
            parts.append('.*')
        elif char == '?':
            parts.append('.')
        else:
            parts.append(re.escape(char))
    return '^%s$' % ''.join(parts)


def compile_pattern(pattern, valuetype='glob', case_insensitive=True):
    """ Compile a seed pattern to a regular expression object

    glob patterns support `*` and `?` and must match the whole feature,
    regex patterns match anywhere in the feature,
    fixed patterns must be equal to the feature.
    """
    if valuetype not in VALUETYPES:
        raise InvalidArgument('valuetype must be one of %s' % ', '.join(VALUETYPES))
    if valuetype == 'glob':
        regex = _glob_to_regex(pattern)
    elif valuetype == 'fixed':
        regex = '^%s$' % re.escape(pattern)
    else:
        regex = pattern
    flags = re.IGNORECASE if case_insensitive else 0
    try:
        return re.compile(regex, flags)
    except re.error as e:
        raise InvalidArgument('invalid regular expression "%s": %s' % (pattern, e))


def select_features(featnames, patterns, valuetype='glob', case_insensitive=True):
    """ Resolve patterns against the vocabulary

    Parameters
    ----------
    featnames: sequence of str
        ordered vocabulary
    patterns: sequence of str

    Returns
    -------
    ids: ndarray
        ascending indices of the features matched by at least one pattern
    """
    compiled = [compile_pattern(pattern, valuetype, case_insensitive) for pattern in patterns]
    ids = [wi for wi, name in enumerate(featnames) if any(regex.search(name) for regex in compiled)]
    return np.array(ids, dtype=np.int64)


def lookup(featnames, dictionary, valuetype='glob', case_insensitive=True):
    """ Resolve every topic of `dictionary` against the vocabulary

    Returns
    -------
    matched: OrderedDict
        key = topic name
        value = ascending feature indices matched by the topic
    """
    dictionary = as_dictionary(dictionary)
    matched = OrderedDict()
    for key, patterns in dictionary.items():
        ids = select_features(featnames, patterns, valuetype, case_insensitive)
        if len(ids) == 0:
            logger.warning('no feature matches the seed words of "%s"', key)
        else:
            logger.debug('%d features match the seed words of "%s"', len(ids), key)
        matched[key] = ids
    return matched
