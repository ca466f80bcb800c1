from collections import Counter

import numpy as np
import scipy.sparse as sp

from .errors import InvalidArgument


class DocumentFeatureMatrix:
    """ Sparse document-feature count matrix

    Attributes
    ----------
    counts: csr_matrix, shape (n_doc, n_voca)
        number of occurrences of each feature in each document
    docnames: ndarray, shape (n_doc)
        ordered document names
    featnames: ndarray, shape (n_voca)
        ordered, unique feature names
    """

    def __init__(self, counts, docnames=None, featnames=None):
        if sp.issparse(counts):
            counts = sp.csr_matrix(counts, copy=True)
        else:
            dense = np.asarray(counts)
            if dense.ndim != 2:
                raise InvalidArgument('counts must be a two dimensional matrix')
            counts = sp.csr_matrix(dense)
        counts.sum_duplicates()
        counts.sort_indices()
        counts.eliminate_zeros()

        if counts.nnz:
            data = counts.data
            if np.any(data < 0):
                raise InvalidArgument('counts must be non-negative')
            if not np.all(np.equal(np.mod(data, 1), 0)):
                raise InvalidArgument('counts must be integers')
        self.counts = sp.csr_matrix(counts, dtype=np.int64)

        n_doc, n_voca = self.counts.shape
        if docnames is None:
            docnames = ['text%d' % (di + 1) for di in range(n_doc)]
        if featnames is None:
            featnames = ['feature%d' % (wi + 1) for wi in range(n_voca)]
        self.docnames = np.array([str(name) for name in docnames], dtype=object)
        self.featnames = np.array([str(name) for name in featnames], dtype=object)

        if len(self.docnames) != n_doc:
            raise InvalidArgument('docnames must have %d elements' % n_doc)
        if len(self.featnames) != n_voca:
            raise InvalidArgument('featnames must have %d elements' % n_voca)
        if len(set(self.featnames)) != n_voca:
            raise InvalidArgument('featnames must be unique')

        self.docnames.setflags(write=False)
        self.featnames.setflags(write=False)

    @classmethod
    def from_token_lists(cls, docs, docnames=None):
        """ Count already tokenized documents

        Features are ordered by their first appearance in the corpus.

        Parameters
        ----------
        docs: list of list of str
            tokens of each document
        docnames: list of str, optional
        """
        voca_dic = dict()
        rows, cols, vals = list(), list(), list()
        for di, doc in enumerate(docs):
            if isinstance(doc, str):
                raise InvalidArgument('each document must be a list of tokens, not a string')
            freq = Counter()
            for word in doc:
                if word not in voca_dic:
                    voca_dic[word] = len(voca_dic)
                freq[voca_dic[word]] += 1
            for wi, cnt in freq.items():
                rows.append(di)
                cols.append(wi)
                vals.append(cnt)

        featnames = sorted(voca_dic, key=voca_dic.get)
        counts = sp.csr_matrix((vals, (rows, cols)), shape=(len(docs), len(voca_dic)), dtype=np.int64)
        return cls(counts, docnames=docnames, featnames=featnames)

    @property
    def shape(self):
        return self.counts.shape

    @property
    def ndoc(self):
        return self.counts.shape[0]

    @property
    def nfeat(self):
        return self.counts.shape[1]

    @property
    def ntoken(self):
        """total number of word tokens in the corpus"""
        return int(self.counts.sum())

    def rowsums(self):
        return np.asarray(self.counts.sum(1)).ravel()

    def colsums(self):
        return np.asarray(self.counts.sum(0)).ravel()

    def iter_docs(self):
        """ Yield (doc index, feature ids, counts) in ascending document and feature order
        """
        indptr, indices, data = self.counts.indptr, self.counts.indices, self.counts.data
        for di in range(self.ndoc):
            start, end = indptr[di], indptr[di + 1]
            yield di, indices[start:end], data[start:end]

    def match_features(self, featnames):
        """ Project onto the vocabulary `featnames`

        Features missing from this matrix become zero columns, features
        missing from `featnames` are dropped.
        """
        position = dict((name, wi) for wi, name in enumerate(self.featnames))
        target = np.array([str(name) for name in featnames], dtype=object)
        keep_src = list()
        keep_dst = list()
        for wi, name in enumerate(target):
            if name in position:
                keep_src.append(position[name])
                keep_dst.append(wi)

        selector = sp.csr_matrix((np.ones(len(keep_src), dtype=np.int64), (keep_src, keep_dst)),
                                 shape=(self.nfeat, len(target)))
        return DocumentFeatureMatrix(self.counts.dot(selector), docnames=self.docnames, featnames=target)

    def __repr__(self):
        return 'DocumentFeatureMatrix of: %d documents, %d features.' % (self.ndoc, self.nfeat)
