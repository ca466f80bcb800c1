import time

import numpy as np
from scipy.special import gammaln

from .base import BaseGibbsParamTopicModel
from .errors import InvalidArgument, NumericInstability
from .formatted_logger import formatted_logger
from .utils import convert_cnt_to_list, normalize_rows, sampling_from_dist

logger = formatted_logger('GibbsLDA')

DEFAULT_MAX_ITER = 2000


class GibbsLDA(BaseGibbsParamTopicModel):
    """
    Latent dirichlet allocation,
    Blei, David M and Ng, Andrew Y and Jordan, Michael I, 2003

    Latent Dirichlet allocation with collapsed Gibbs sampling.
    When seed pseudo-counts are given, they are added to the topic-word prior,
    which gives the seeded LDA of Lu et al. (2011).

    Attributes
    ----------
    docs:
        list of word ids for each word token, one array per document
    topic_assignment:
        list of topic assignment for each word token
    n_iter: int
        number of sweeps executed by the last call to fit
    """

    def __init__(self, n_doc, n_voca, n_topic, alpha=None, beta=None, seeds=None, **kwargs):
        super(GibbsLDA, self).__init__(n_doc=n_doc, n_voca=n_voca, n_topic=n_topic, alpha=alpha, beta=beta,
                                       seeds=seeds, **kwargs)
        self.docs = list()
        self.n_iter = 0

    def _check_corpus(self, x):
        if x.shape != (self.n_doc, self.n_voca):
            raise InvalidArgument('the corpus must have shape (%d, %d), not %s' % (self.n_doc, self.n_voca, x.shape))

    def random_init(self, x):
        """ Expand each document into word tokens and assign them uniformly random topics

        Parameters
        ----------
        x: DocumentFeatureMatrix

        """
        self._check_corpus(x)
        self.TW[:] = 0
        self.DT[:] = 0
        self.sum_T[:] = 0
        self.docs = list()
        self.topic_assignment = list()

        for di, word_ids, word_cnt in x.iter_docs():
            doc = convert_cnt_to_list(word_ids, word_cnt)
            topics = self.random_state.randint(self.n_topic, size=len(doc))
            self.docs.append(doc)
            self.topic_assignment.append(topics)

            np.add.at(self.TW, (topics, doc), 1)
            np.add.at(self.DT[di], topics, 1)
            self.doc_len[di] = len(doc)
        self.sum_T[:] = self.TW.sum(1)

        logger.debug('[INIT] num_doc:%d, num_voca:%d, num_topic:%d, num_token:%d',
                     self.n_doc, self.n_voca, self.n_topic, self.doc_len.sum())

    def fit(self, x, max_iter=DEFAULT_MAX_ITER):
        """ Gibbs sampling for LDA

        Parameters
        ----------
        x: DocumentFeatureMatrix
        max_iter: int
            number of Gibbs sampling iterations, all of them are executed

        """
        if max_iter < 0:
            raise InvalidArgument('max_iter must not be negative')
        self.random_init(x)
        self.n_iter = 0

        for iteration in range(max_iter):
            prev = time.time()

            for di in range(self.n_doc):
                doc = self.docs[di]
                topics = self.topic_assignment[di]
                for wi in range(len(doc)):
                    word = doc[wi]
                    old_topic = topics[wi]

                    self.TW[old_topic, word] -= 1
                    self.sum_T[old_topic] -= 1
                    self.DT[di, old_topic] -= 1

                    # compute conditional probability of a topic of current word wi
                    prob = (self.TW[:, word] + self.beta_eff[:, word]) / (self.sum_T + self.beta_sum) \
                        * (self.DT[di, :] + self.alpha)

                    try:
                        new_topic = sampling_from_dist(prob, self.random_state)
                    except NumericInstability:
                        # put the token back so the count tables still match the corpus
                        self.TW[old_topic, word] += 1
                        self.sum_T[old_topic] += 1
                        self.DT[di, old_topic] += 1
                        raise

                    topics[wi] = new_topic
                    self.TW[new_topic, word] += 1
                    self.sum_T[new_topic] += 1
                    self.DT[di, new_topic] += 1

            self.n_iter = iteration + 1
            if self.verbose:
                logger.info('[ITER] %d,\telapsed time:%.2f,\tlog_likelihood:%.2f', iteration, time.time() - prev,
                            self.log_likelihood())

    @property
    def phi(self):
        """ topic-word distribution, shape (n_topic, n_voca)
        """
        return normalize_rows(self.TW + self.beta_eff, 'phi')

    @property
    def theta(self):
        """ document-topic distribution, shape (n_doc, n_topic)
        """
        return normalize_rows(self.DT + self.alpha, 'theta')

    def log_likelihood(self):
        """
        collapsed joint log likelihood of the word tokens and their topic assignments
        """
        alpha_sum = self.alpha.sum()
        ll = self.n_doc * (gammaln(alpha_sum) - gammaln(self.alpha).sum())
        ll += gammaln(self.DT + self.alpha).sum() - gammaln(self.doc_len + alpha_sum).sum()

        ll += (gammaln(self.beta_sum) - gammaln(self.beta_eff).sum(1)).sum()
        ll += gammaln(self.TW + self.beta_eff).sum() - gammaln(self.sum_T + self.beta_sum).sum()

        return ll

    def sample_heldout_doc(self, x, max_iter):
        """ Infer document-topic distributions of unseen documents with the current phi
        """
        return sample_heldout_doc(self.phi, self.alpha, x, max_iter, self.random_state)


def sample_heldout_doc(phi, alpha, x, max_iter, random_state):
    """ Infer document-topic distributions of unseen documents with phi held fixed

    Parameters
    ----------
    phi: ndarray, shape (n_topic, n_voca)
        fitted topic-word distribution
    alpha: ndarray, shape (n_topic)
        document-topic prior
    x: DocumentFeatureMatrix
        documents over the same vocabulary as the fitted corpus
    max_iter: int
        number of Gibbs sampling iterations
    random_state: RandomState

    Returns
    -------
    theta: ndarray, shape (x.ndoc, n_topic)
    """
    n_topic, n_voca = phi.shape
    if x.nfeat != n_voca:
        raise InvalidArgument('the documents must have %d features, not %d' % (n_voca, x.nfeat))
    h_docs = list()
    h_doc_topics = list()
    h_doc_topic_sum = np.zeros([x.ndoc, n_topic], dtype=np.int64)

    # random init
    for di, word_ids, word_cnt in x.iter_docs():
        doc = convert_cnt_to_list(word_ids, word_cnt)
        topics = random_state.randint(n_topic, size=len(doc))
        h_docs.append(doc)
        h_doc_topics.append(topics)
        np.add.at(h_doc_topic_sum[di], topics, 1)

    for iteration in range(max_iter):
        for di in range(x.ndoc):
            doc = h_docs[di]
            topics = h_doc_topics[di]
            for wi in range(len(doc)):
                word = doc[wi]
                h_doc_topic_sum[di, topics[wi]] -= 1

                prob = phi[:, word] * (h_doc_topic_sum[di, :] + alpha)

                new_topic = sampling_from_dist(prob, random_state)

                topics[wi] = new_topic
                h_doc_topic_sum[di, new_topic] += 1

    return normalize_rows(h_doc_topic_sum + alpha, 'theta')
