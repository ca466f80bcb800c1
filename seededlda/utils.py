import numbers

import numpy as np

from .errors import InvalidArgument, NumericInstability


def check_random_state(seed):
    """ Turn `seed` into a numpy.random.RandomState instance

    Parameters
    ----------
    seed: None, int or RandomState
        None gives a fresh RandomState seeded from the OS,
        an int gives a RandomState seeded with it,
        a RandomState is returned as it is.
    """
    if seed is None:
        return np.random.RandomState()
    if isinstance(seed, np.random.RandomState):
        return seed
    if isinstance(seed, (numbers.Integral, np.integer)) and not isinstance(seed, bool):
        return np.random.RandomState(seed)
    raise InvalidArgument('%r cannot be used to seed a numpy.random.RandomState instance' % (seed,))


def sampling_from_dist(prob, random_state):
    """ Sample index from a list of unnormalised probability distribution
        same as random_state.multinomial(1, prob/np.sum(prob)).argmax()

    Parameters
    ----------
    prob: ndarray
        array of unnormalised probability distribution
    random_state: RandomState
        random source of the run

    Returns
    -------
    new_topic: return a sampled index
    """
    c_sum = prob.cumsum()
    total = c_sum[-1]
    if not np.isfinite(total) or total <= 0:
        raise NumericInstability('unnormalised topic probabilities sum to %r' % total)
    thr = total * random_state.rand()
    new_topic = int(np.searchsorted(c_sum, thr, side='right'))
    # thr can only reach total through rounding
    return min(new_topic, len(prob) - 1)


def convert_cnt_to_list(word_ids, word_cnt):
    """ Expand the (word id, count) pairs of one document into one entry per word token
    """
    return np.repeat(np.asarray(word_ids, dtype=np.int64), np.asarray(word_cnt, dtype=np.int64))


def normalize_rows(matrix, name):
    """ Divide each row by its sum, failing instead of producing nan
    """
    row_sum = matrix.sum(1)
    if not np.all(np.isfinite(row_sum)) or np.any(row_sum <= 0):
        raise NumericInstability('%s has a zero or non-finite normalizer' % name)
    return matrix / row_sum[:, np.newaxis]


def get_top_words(topic_word_matrix, vocab, topic, n_words=20):
    """ Return the `n_words` most probable words of `topic`, ties broken by vocabulary order
    """
    if not isinstance(vocab, np.ndarray):
        vocab = np.array(vocab)
    order = np.argsort(-topic_word_matrix[topic], kind='stable')
    return vocab[order[:n_words]]


def write_top_words(topic_word_matrix, vocab, filepath, n_words=20, labels=None, delimiter=',', newline='\n'):
    with open(filepath, 'w') as f:
        for ti in range(topic_word_matrix.shape[0]):
            top_words = get_top_words(topic_word_matrix, vocab, ti, n_words)
            if labels is None:
                f.write('%d' % ti)
            else:
                f.write('%s' % labels[ti])
            for word in top_words:
                f.write(delimiter + word)
            f.write(newline)
