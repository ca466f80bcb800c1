"""
Shared fixtures: a small corpus of three separable themes.

Documents are generated deterministically, each one drawn from a single
theme plus a few words shared by every document.
"""

import numpy as np
import pytest

from seededlda import DocumentFeatureMatrix, textmodel_lda, textmodel_seededlda

NOISE = ['movie', 'film', 'story', 'actor']
ROMANCE = ['love', 'lovers', 'couple', 'kiss', 'wedding', 'heart', 'romance', 'date']
WAR = ['war', 'soldier', 'tank', 'battle', 'army', 'gun', 'general', 'enemy']
SPACE = ['space', 'planet', 'alien', 'rocket', 'star', 'orbit', 'mars', 'earth']
SIFI = ['space', 'planet', 'alien', 'rocket']

# space words come last so that ties between unused words never favour them
VOCABULARY = NOISE + ROMANCE + WAR + SPACE


def make_corpus(n_doc=36, theme_tokens=16, noise_tokens=4, seed=42):
    rng = np.random.RandomState(seed)
    themes = [ROMANCE, WAR, SPACE]
    index = dict((word, wi) for wi, word in enumerate(VOCABULARY))
    counts = np.zeros([n_doc, len(VOCABULARY)], dtype=np.int64)
    for di in range(n_doc):
        theme = themes[di % len(themes)]
        for word in rng.choice(theme, theme_tokens):
            counts[di, index[word]] += 1
        for word in rng.choice(NOISE, noise_tokens):
            counts[di, index[word]] += 1
    return DocumentFeatureMatrix(counts, featnames=VOCABULARY)


@pytest.fixture(scope='session')
def dfmt():
    return make_corpus()


@pytest.fixture(scope='session')
def small_dfmt():
    return make_corpus(n_doc=6, theme_tokens=5, noise_tokens=1, seed=3)


@pytest.fixture(scope='session')
def seed_dict():
    return {'romance': ['love*', 'couple*'], 'sifi': ['space', 'planet', 'alien*']}


@pytest.fixture(scope='session')
def lda_model(dfmt):
    return textmodel_lda(dfmt, k=3, max_iter=200, alpha=0.1, random_state=1234)


@pytest.fixture(scope='session')
def seeded_model(dfmt, seed_dict):
    return textmodel_seededlda(dfmt, seed_dict, residual=True, weight=0.05, max_iter=300, alpha=0.1,
                               random_state=1234)
