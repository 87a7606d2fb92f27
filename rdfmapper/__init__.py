"""This module rewrites the namespaces of iris in rdf data. Use
:py:func:`map_term`, :py:func:`map_quad`, :py:func:`map_dataset` or
:py:func:`map_stream`. Rules are used in the given order, the first
matching rule wins.

"""
from .rules import ruleset, rewrite_rule, InvalidRewriteRule
from .factory import rdflib_factory, default_factory
from .mapping import map_term, map_quad, map_dataset
from .stream import map_stream, quadstream
