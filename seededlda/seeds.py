import math
import numbers

import numpy as np
import scipy.sparse as sp

from .dictionary import VALUETYPES, as_dictionary, lookup
from .errors import InvalidArgument

DEFAULT_WEIGHT = 0.01
RESIDUAL_LABEL = 'other'


class SeedMatrix:
    """ Seed pseudo-counts added to the topic-word Dirichlet prior

    Attributes
    ----------
    matrix: csr_matrix, shape (n_voca, n_topic)
        pseudo-count of each word under each topic
    featnames: ndarray, shape (n_voca)
        row labels, the vocabulary the seeds were resolved against
    labels: ndarray, shape (n_topic)
        column labels, the topic names
    """

    def __init__(self, matrix, featnames, labels):
        self.matrix = sp.csr_matrix(matrix, dtype=np.float64, copy=True)
        self.featnames = np.array([str(name) for name in featnames], dtype=object)
        self.labels = np.array([str(label) for label in labels], dtype=object)

        n_voca, n_topic = self.matrix.shape
        if len(self.featnames) != n_voca or len(self.labels) != n_topic:
            raise InvalidArgument('seed labels do not match the shape of the seed matrix')
        if self.matrix.nnz and self.matrix.data.min() < 0:
            raise InvalidArgument('seed pseudo-counts must be non-negative')

        self.matrix.data.setflags(write=False)
        self.featnames.setflags(write=False)
        self.labels.setflags(write=False)

    @property
    def shape(self):
        return self.matrix.shape

    @property
    def n_topic(self):
        return self.matrix.shape[1]

    def toarray(self):
        return self.matrix.toarray()

    def check_features(self, featnames):
        """ Fail unless the seeds were resolved against `featnames`, in the same order
        """
        featnames = np.asarray(featnames, dtype=object)
        if len(featnames) != len(self.featnames) or np.any(featnames != self.featnames):
            raise InvalidArgument('seed features must match model features')


def tfm(x, dictionary, valuetype='glob', case_insensitive=True, weight=DEFAULT_WEIGHT, residual=False):
    """ Construct the seed word-topic matrix of the seeded LDA

    Each word matched by the patterns of a topic receives floor(x.ntoken * weight)
    pseudo-counts under that topic, once per word and topic however many patterns match.

    Parameters
    ----------
    x: DocumentFeatureMatrix
    dictionary: SeedDictionary or mapping
        topic name -> seed patterns
    valuetype: str
        one of 'glob', 'regex', 'fixed'
    case_insensitive: boolean
    weight: float
        pseudo-count of seed words as a proportion of the total number of words in `x`
    residual: boolean
        if True, append an unseeded topic named 'other'

    Returns
    -------
    seeds: SeedMatrix, shape (x.nfeat, len(dictionary) + residual)
    """
    dictionary = as_dictionary(dictionary)
    if not isinstance(weight, numbers.Real) or not np.isfinite(weight) or weight < 0:
        raise InvalidArgument('weight must be a positive value')
    if valuetype not in VALUETYPES:
        raise InvalidArgument('valuetype must be one of %s' % ', '.join(VALUETYPES))

    matched = lookup(x.featnames, dictionary, valuetype, case_insensitive)

    id_feat = list()
    id_key = list()
    for ki, ids in enumerate(matched.values()):
        id_feat.extend(ids)
        id_key.extend([ki] * len(ids))

    count = math.floor(x.ntoken * weight)
    labels = list(dictionary.keys())
    if residual:
        if RESIDUAL_LABEL in dictionary:
            raise InvalidArgument('"%s" is reserved for the residual topic' % RESIDUAL_LABEL)
        labels.append(RESIDUAL_LABEL)

    matrix = sp.csr_matrix((np.full(len(id_feat), count, dtype=np.float64), (id_feat, id_key)),
                           shape=(x.nfeat, len(labels)))
    return SeedMatrix(matrix, x.featnames, labels)
