"""
edge-i18n: locale routing layer for web applications.

Decides, per request, which locale to serve and whether the client must be
redirected to a locale-qualified path or to another delivery domain.
"""

__version__ = "1.0.0"
