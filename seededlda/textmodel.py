import numpy as np

from .dfm import DocumentFeatureMatrix
from .errors import InvalidArgument
from .formatted_logger import formatted_logger
from .lda_gibbs import DEFAULT_MAX_ITER, GibbsLDA, sample_heldout_doc
from .seeds import DEFAULT_WEIGHT, tfm
from .utils import check_random_state, get_top_words, write_top_words

logger = formatted_logger('textmodel')


class TextmodelLDA:
    """ LDA model fitted to a document-feature matrix

    Attributes
    ----------
    k: int
        number of topics
    labels: ndarray, shape (k)
        topic names
    phi: ndarray, shape (k, nfeat)
        topic-word distribution
    theta: ndarray, shape (ndoc, k)
        document-topic distribution
    docnames, featnames: ndarray
        row and column names of the fitted matrix
    alpha: ndarray, shape (k)
    beta: float
    max_iter: int
        requested number of Gibbs sampling iterations
    n_iter: int
        executed number of Gibbs sampling iterations
    seeds: SeedMatrix or None
    log_likelihood: float
        collapsed joint log likelihood after the last iteration
    random_state:
        the seed the model was fitted with
    """

    def __init__(self, sampler, labels, docnames, featnames, max_iter, seeds=None, random_state=None):
        self.k = sampler.n_topic
        self.labels = _frozen(np.array(labels, dtype=object))
        self.phi = _frozen(sampler.phi)
        self.theta = _frozen(sampler.theta)
        self.docnames = docnames
        self.featnames = featnames
        self.alpha = _frozen(sampler.alpha.copy())
        self.beta = sampler.beta
        self.max_iter = max_iter
        self.n_iter = sampler.n_iter
        self.seeds = seeds
        self.log_likelihood = sampler.log_likelihood()
        self.random_state = random_state

    @property
    def ndoc(self):
        return len(self.docnames)

    @property
    def nfeat(self):
        return len(self.featnames)

    def terms(self, n=10):
        """ Most likely features of each topic

        Returns
        -------
        terms: ndarray, shape (min(n, nfeat), k)
            column i lists the features of topic i by decreasing probability
        """
        if n < 0:
            raise InvalidArgument('n must not be negative')
        n = min(n, self.nfeat)
        result = np.empty([n, self.k], dtype=object)
        for ti in range(self.k):
            result[:, ti] = get_top_words(self.phi, self.featnames, ti, n)
        return result

    def topics(self):
        """ Most likely topic of each document, ties go to the first topic
        """
        return _dominant(self.theta, self.labels)

    def predict(self, newdata, max_iter=100, random_state=None):
        """ Most likely topic of each unseen document

        Features of `newdata` unknown to the model are ignored.

        Parameters
        ----------
        newdata: DocumentFeatureMatrix
        max_iter: int
            number of Gibbs sampling iterations for the new documents
        random_state: None, int or RandomState
        """
        if not isinstance(newdata, DocumentFeatureMatrix):
            raise InvalidArgument('newdata must be a DocumentFeatureMatrix')
        newdata = newdata.match_features(self.featnames)
        theta = sample_heldout_doc(self.phi, self.alpha, newdata, max_iter, check_random_state(random_state))
        return _dominant(theta, self.labels)

    def write_terms(self, filepath, n=10):
        """ Write the `n` most likely features of each topic to `filepath`, one topic per line
        """
        write_top_words(self.phi, self.featnames, filepath, n_words=n, labels=self.labels)

    def __str__(self):
        return 'Topics: %d; %d documents; %d features.' % (self.k, self.ndoc, self.nfeat)

    def __repr__(self):
        return '<TextmodelLDA %s>' % self


def _frozen(array):
    array.setflags(write=False)
    return array


def _dominant(theta, labels):
    return labels[np.argmax(theta, axis=1)]


def _check_k(k):
    if not isinstance(k, (int, np.integer)) or isinstance(k, bool):
        raise InvalidArgument('k must be an integer')
    if k <= 0:
        raise InvalidArgument('k must be larger than zero')


def terms(model, n=10):
    """Extract the most likely terms of each topic"""
    return model.terms(n)


def topics(model):
    """Extract the most likely topic of each document"""
    return model.topics()


def lda(x, k, label, max_iter=DEFAULT_MAX_ITER, alpha=None, beta=None, seeds=None, random_state=None,
        verbose=False):
    """ Fit LDA by collapsed Gibbs sampling

    Parameters
    ----------
    x: DocumentFeatureMatrix
    k: int
        number of topics
    label: sequence of str
        names of the k topics
    seeds: SeedMatrix, optional
        seed pseudo-counts resolved against the features of x
    random_state: None, int or RandomState
        seed of the only random source of the run
    """
    if not isinstance(x, DocumentFeatureMatrix):
        raise InvalidArgument('x must be a DocumentFeatureMatrix')
    _check_k(k)
    if seeds is not None:
        seeds.check_features(x.featnames)
        if seeds.n_topic != k:
            raise InvalidArgument('k must be equal to the number of seeded topics')
    if len(label) != k:
        raise InvalidArgument('label must have %d elements' % k)

    sampler = GibbsLDA(x.ndoc, x.nfeat, k, alpha=alpha, beta=beta,
                       seeds=None if seeds is None else seeds.matrix,
                       random_state=random_state, verbose=verbose)
    if verbose:
        logger.info('Fitting LDA with %d topics', k)
        logger.info(' ...initializing')
    sampler.fit(x, max_iter)
    if verbose:
        logger.info(' ...complete')

    return TextmodelLDA(sampler, label, x.docnames, x.featnames, max_iter, seeds=seeds, random_state=random_state)


def textmodel_lda(x, k=10, max_iter=DEFAULT_MAX_ITER, alpha=None, beta=None, random_state=None, verbose=False):
    """ Unsupervised Latent Dirichlet allocation

    Parameters
    ----------
    x: DocumentFeatureMatrix
    k: int
        number of topics
    max_iter: int
        number of Gibbs sampling iterations
    alpha: float or ndarray, optional
        document-topic prior, 50 / k by default
    beta: float, optional
        topic-word prior, 0.1 by default
    random_state: None, int or RandomState
    verbose: boolean

    Returns
    -------
    model: TextmodelLDA, with topics named topic1 ... topic{k}
    """
    _check_k(k)
    label = ['topic%d' % (ti + 1) for ti in range(k)]
    return lda(x, k, label, max_iter, alpha, beta, random_state=random_state, verbose=verbose)


def textmodel_seededlda(x, dictionary, valuetype='glob', case_insensitive=True, residual=False,
                        weight=DEFAULT_WEIGHT, max_iter=DEFAULT_MAX_ITER, alpha=None, beta=None, random_state=None,
                        verbose=False):
    """ Semisupervised Latent Dirichlet allocation

    Seed words of each dictionary key receive pseudo-counts under the topic of
    that key, so the topics are identified by the dictionary.

    Parameters
    ----------
    x: DocumentFeatureMatrix
    dictionary: SeedDictionary or mapping
        topic name -> seed patterns
    valuetype: str
        'glob', 'regex' or 'fixed'
    case_insensitive: boolean
    residual: boolean
        if True, an unseeded topic 'other' is added to the dictionary topics
    weight: float
        pseudo-count given to seed words as a proportion of the total number of words in x

    Returns
    -------
    model: TextmodelLDA, with topics named after the dictionary keys
    """
    if not isinstance(x, DocumentFeatureMatrix):
        raise InvalidArgument('x must be a DocumentFeatureMatrix')
    seeds = tfm(x, dictionary, valuetype=valuetype, case_insensitive=case_insensitive, weight=weight,
                residual=residual)
    k = seeds.n_topic
    return lda(x, k, seeds.labels, max_iter, alpha, beta, seeds=seeds, random_state=random_state, verbose=verbose)
