"""Weather proxy.

Serves weatherapi.com current conditions to a single-page front end while
keeping the API key on the server.
"""

__version__ = "0.1.0"
