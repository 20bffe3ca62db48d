"""Testing support – builders, fixtures and Hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["eventgate.testing.fixtures"]
"""

from eventgate.testing.builders import make_event, make_principal

__all__ = ["make_event", "make_principal"]
