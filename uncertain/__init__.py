"""Computation with uncertain values, queried by hypothesis tests and expectations.

The interface and combinators live in ``uncertain.base``, the sources in
``uncertain.distributions``, and the queries in ``uncertain.sprt`` and
``uncertain.expectation``.
"""

__version__ = "0.3.1"