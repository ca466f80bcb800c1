import numpy as np
import pytest
import scipy.sparse as sp

from seededlda import DocumentFeatureMatrix, InvalidArgument


class TestDocumentFeatureMatrix:

    def test_from_dense_counts(self):
        x = DocumentFeatureMatrix([[1, 0, 2], [0, 3, 0]], featnames=['a', 'b', 'c'])

        assert x.shape == (2, 3)
        assert x.ndoc == 2
        assert x.nfeat == 3
        assert x.ntoken == 6
        assert list(x.docnames) == ['text1', 'text2']
        np.testing.assert_array_equal(x.rowsums(), [3, 3])
        np.testing.assert_array_equal(x.colsums(), [1, 3, 2])

    def test_from_sparse_counts_keeps_names(self):
        counts = sp.csr_matrix(np.array([[0, 1], [4, 0]]))
        x = DocumentFeatureMatrix(counts, docnames=['d1', 'd2'], featnames=['x', 'y'])

        assert list(x.docnames) == ['d1', 'd2']
        assert list(x.featnames) == ['x', 'y']
        assert x.counts.dtype == np.int64

    def test_from_token_lists(self):
        x = DocumentFeatureMatrix.from_token_lists([['a', 'b', 'a'], ['c'], []])

        assert list(x.featnames) == ['a', 'b', 'c']
        np.testing.assert_array_equal(x.counts.toarray(), [[2, 1, 0], [0, 0, 1], [0, 0, 0]])

    def test_from_token_lists_rejects_raw_strings(self):
        with pytest.raises(InvalidArgument):
            DocumentFeatureMatrix.from_token_lists(['not tokenized'])

    def test_iter_docs_is_ordered(self):
        x = DocumentFeatureMatrix([[0, 2, 1], [5, 0, 0]])
        docs = [(di, list(ids), list(cnt)) for di, ids, cnt in x.iter_docs()]

        assert docs == [(0, [1, 2], [2, 1]), (1, [0], [5])]

    @pytest.mark.parametrize('counts', [
        [[1, -1]],
        [[0.5, 1]],
    ])
    def test_rejects_invalid_counts(self, counts):
        with pytest.raises(InvalidArgument):
            DocumentFeatureMatrix(counts)

    def test_rejects_duplicated_features(self):
        with pytest.raises(InvalidArgument, match='unique'):
            DocumentFeatureMatrix([[1, 1]], featnames=['a', 'a'])

    def test_rejects_wrong_number_of_names(self):
        with pytest.raises(InvalidArgument):
            DocumentFeatureMatrix([[1, 1]], featnames=['a'])
        with pytest.raises(InvalidArgument):
            DocumentFeatureMatrix([[1, 1]], docnames=['d1', 'd2'])

    def test_match_features(self):
        x = DocumentFeatureMatrix([[1, 2, 3]], featnames=['a', 'b', 'c'])
        y = x.match_features(['c', 'z', 'a'])

        assert list(y.featnames) == ['c', 'z', 'a']
        np.testing.assert_array_equal(y.counts.toarray(), [[3, 0, 1]])

    def test_repr(self):
        x = DocumentFeatureMatrix([[1, 2, 3]])

        assert repr(x) == 'DocumentFeatureMatrix of: 1 documents, 3 features.'
