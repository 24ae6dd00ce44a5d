"""
search_params – typed query constraints with a flat query-string wire format.

Import path convention::

    from search_params.application.search import Filter, SearchParameters, search
    from search_params.kernel.errors import UnknownWireCodeError
    from search_params.config import EnvSettingsLoader, SearchSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
