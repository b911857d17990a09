"""
twitmin
=======

Does: Root package initializer for the tweet minifier.
Returns: Exposes the `resolution` subpackage through a stable namespace.
Used by: All higher-level imports starting from `twitmin.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
