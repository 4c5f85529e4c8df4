"""Exception hierarchy for categorical Naive Bayes classification.

Every failure the engine can signal derives from ``NaiveBayesError`` and
also from the builtin exception a caller would naturally expect
(``ValueError`` for bad input, ``RuntimeError`` for unusable models), so
``except ValueError`` keeps working for callers that do not know this
package.
"""

from __future__ import annotations


class NaiveBayesError(Exception):
    """Base class for all classification errors."""


class SchemaMismatch(NaiveBayesError, ValueError):
    """A query or training row does not have exactly F feature values."""


class InvalidLabel(NaiveBayesError, ValueError):
    """A training label is not an integer in ``[0, C)``."""


class DegenerateModel(NaiveBayesError, RuntimeError):
    """Total evidence across all classes is zero."""


class ModelNotReady(NaiveBayesError, RuntimeError):
    """Classification was requested before any training data was loaded."""
