from .dfm import DocumentFeatureMatrix
from .dictionary import SeedDictionary
from .errors import InvalidArgument, NumericInstability, SeededLDAError
from .lda_gibbs import GibbsLDA
from .seeds import SeedMatrix, tfm
from .textmodel import TextmodelLDA, lda, terms, textmodel_lda, textmodel_seededlda, topics
