class SeededLDAError(Exception):
    """Base class of the errors raised by seededlda"""


class InvalidArgument(SeededLDAError, ValueError):
    """ Malformed or out-of-range input, detected before sampling starts
    """


class NumericInstability(SeededLDAError, ArithmeticError):
    """ A normalizing sum became zero or non-finite during inference
    """
