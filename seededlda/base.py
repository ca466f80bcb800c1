import numbers

import numpy as np
import scipy.sparse as sp

from .errors import InvalidArgument
from .utils import check_random_state

DEFAULT_BETA = 0.1


class BaseTopicModel():
    """
    Attributes
    ----------
    n_doc: int
        the number of total documents in the corpus
    n_voca: int
        the vocabulary size of the corpus
    verbose: boolean
        if True, log each iteration step while inference.
    random_state: RandomState
        the single random source of the inference
    """
    def __init__(self, n_doc, n_voca, **kwargs):
        if n_doc <= 0:
            raise InvalidArgument('the corpus must contain at least one document')
        if n_voca <= 0:
            raise InvalidArgument('the corpus must contain at least one feature')
        self.n_doc = n_doc
        self.n_voca = n_voca
        self.verbose = kwargs.pop('verbose', False)
        self.random_state = check_random_state(kwargs.pop('random_state', None))


class BaseGibbsParamTopicModel(BaseTopicModel):
    """ Base class of parametric topic models with Gibbs sampling inference

    Count tables keep raw numbers of assigned tokens, priors are kept apart.

    Attributes
    ----------
    n_topic: int
        a number of topics to be inferred through the Gibbs sampling
    TW: ndarray, shape (n_topic, n_voca)
        topic-word matrix, keeps the number of assigned word tokens for each topic-word pair
    DT: ndarray, shape (n_doc, n_topic)
        document-topic matrix, keeps the number of assigned word tokens for each document-topic pair
    sum_T: ndarray, shape (n_topic)
        number of word tokens assigned for each topic
    doc_len: ndarray, shape (n_doc)
        number of word tokens in each document
    alpha: ndarray, shape (n_topic)
        parameter of Dirichlet prior for document-topic distribution, 50 / n_topic by default
    beta: float
        symmetric parameter of Dirichlet prior for topic-word distribution
    beta_eff: ndarray, shape (n_topic, n_voca)
        topic-word prior including seed pseudo-counts
    beta_sum: ndarray, shape (n_topic)
        row sums of beta_eff
    """

    def __init__(self, n_doc, n_voca, n_topic, alpha=None, beta=None, seeds=None, **kwargs):
        if not isinstance(n_topic, (numbers.Integral, np.integer)) or isinstance(n_topic, bool):
            raise InvalidArgument('k must be an integer')
        if n_topic <= 0:
            raise InvalidArgument('k must be larger than zero')
        super(BaseGibbsParamTopicModel, self).__init__(n_doc=n_doc, n_voca=n_voca, **kwargs)
        self.n_topic = int(n_topic)

        if alpha is None:
            alpha = 50. / self.n_topic
        alpha = np.asarray(alpha, dtype=np.float64)
        if alpha.ndim == 0:
            alpha = np.repeat(alpha, self.n_topic)
        if alpha.shape != (self.n_topic,):
            raise InvalidArgument('alpha must be a scalar or have %d elements' % self.n_topic)
        if not np.all(np.isfinite(alpha)) or np.any(alpha <= 0):
            raise InvalidArgument('alpha must be larger than zero')

        if beta is None:
            beta = DEFAULT_BETA
        if not isinstance(beta, numbers.Real) or not np.isfinite(beta) or beta <= 0:
            raise InvalidArgument('beta must be a positive scalar')

        self.alpha = alpha
        self.beta = float(beta)

        self.beta_eff = np.zeros([self.n_topic, self.n_voca]) + self.beta
        if seeds is not None:
            seeds = seeds.toarray() if sp.issparse(seeds) else np.asarray(seeds, dtype=np.float64)
            if seeds.shape != (self.n_voca, self.n_topic):
                raise InvalidArgument('seeds must have shape (%d, %d)' % (self.n_voca, self.n_topic))
            if not np.all(np.isfinite(seeds)) or np.any(seeds < 0):
                raise InvalidArgument('seed pseudo-counts must be non-negative and finite')
            self.beta_eff += seeds.T
        self.beta_sum = self.beta_eff.sum(1)

        self.TW = np.zeros([self.n_topic, self.n_voca], dtype=np.int64)
        self.DT = np.zeros([self.n_doc, self.n_topic], dtype=np.int64)
        self.sum_T = np.zeros(self.n_topic, dtype=np.int64)
        self.doc_len = np.zeros(self.n_doc, dtype=np.int64)

        self.topic_assignment = list()
