"""Routing — named route table and URL generation.

Routes are registered during setup and compiled into an immutable
lookup structure. ``UrlBuilder`` turns route names back into URLs.
"""
