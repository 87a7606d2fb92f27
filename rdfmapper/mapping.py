"""Rewrites the namespaces of iris in terms, quads and datasets.

Every function can be used in two ways. With a single rule, the result is
returned directly:

    >>> map_term(URIRef("http://abc.com/1"), "http://abc.com/", "http://abc.org/")
    rdflib.term.URIRef('http://abc.org/1')

With a ruleset, a reusable mapper is returned:

    >>> mapper = map_quad({"http://abc.com/": "http://abc.org/",
    ...                    "http://xyz.com/": "http://xyz.org/"})
    >>> new_quads = [mapper(q) for q in quads]

The rules are tried in the given order and the first rule, whose prefix
matches, is used. See :py:class:`rdfmapper.rules.ruleset`.
"""
import logging
logger = logging.getLogger( __name__ )
import typing as typ
import rdflib
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID

from .rules import ruleset
from .factory import default_factory

Term = typ.Optional[ rdflib.term.Node ]
Quad = typ.Tuple


def _get_ruleset( from_, to ) -> ruleset:
    if from_ is None or to is None:
        raise TypeError( "from_ and to must be given together, got "
                        f"from_={from_!r}, to={to!r}" )
    return ruleset.single( from_, to )

#####################################################################
#single items

def _map_term( term: Term, rules: ruleset, factory ) -> Term:
    if not isinstance( term, rdflib.URIRef ):
        return term
    value = rules.apply( str( term ) )
    if value is None:
        return term
    return factory.named_node( value )

def _map_graph( graph, rules: ruleset, factory ):
    """The default graph is never translated. Graphs from
    :py:meth:`rdflib.ConjunctiveGraph.quads` are translated through
    their identifier.
    """
    if not isinstance( graph, rdflib.Graph ):
        if graph == DATASET_DEFAULT_GRAPH_ID:
            return graph
        return _map_term( graph, rules, factory )
    if graph.identifier == DATASET_DEFAULT_GRAPH_ID:
        return graph
    identifier = _map_term( graph.identifier, rules, factory )
    if identifier is graph.identifier:
        return graph
    return identifier

def _map_quad( quad: Quad, rules: ruleset, factory ) -> Quad:
    if len( quad ) == 3:
        subject, predicate, object = quad
        graph = newgraph = None
    elif len( quad ) == 4:
        subject, predicate, object, graph = quad
        newgraph = _map_graph( graph, rules, factory )
    else:
        raise TypeError( "expected triple or quad, got %s" % (quad,) )
    newsubject = _map_term( subject, rules, factory )
    newpredicate = _map_term( predicate, rules, factory )
    newobject = _map_term( object, rules, factory )
    if newsubject is subject and newpredicate is predicate \
            and newobject is object and newgraph is graph:
        return quad
    if len( quad ) == 3:
        return factory.triple( newsubject, newpredicate, newobject )
    return factory.quad( newsubject, newpredicate, newobject, newgraph )

def _iter_quads( dataset ) -> typ.Iterator[ Quad ]:
    """Plain graphs are iterated as triples, datasets as quads. Quads of
    the default graph of a dataset get None as graph.
    """
    if not isinstance( dataset, (rdflib.Dataset, rdflib.ConjunctiveGraph) ):
        yield from dataset
        return
    default = dataset.default_context.identifier
    for quad in dataset.quads( (None, None, None, None) ):
        graph = quad[3]
        if isinstance( graph, rdflib.Graph ):
            graph = graph.identifier
        if graph is not None and graph == default:
            quad = (*quad[:3], None)
        yield quad

def _map_dataset( dataset: typ.Iterable[ Quad ], rules: ruleset, factory ):
    changed = 0
    newquads = []
    for quad in _iter_quads( dataset ):
        newquad = _map_quad( quad, rules, factory )
        if newquad is not quad:
            changed += 1
        newquads.append( newquad )
    logger.debug( "mapped %d quads, %d changed", len( newquads ), changed )
    return factory.dataset( newquads )

#####################################################################
#public functions

def map_term( term_or_rules, from_=None, to=None, *, factory=None ):
    """Translates a single term.

    Only iris (:py:class:`rdflib.URIRef`) are translated. Blank nodes,
    literals and None are returned unchanged.
    If no rule matches, the same term object is returned.

    :param term_or_rules: Term to translate if from_ and to are given.
        Else ruleset as accepted by :py:class:`rdfmapper.rules.ruleset`.
    :param from_: Prefix to replace. :py:class:`rdflib.URIRef`, url
        or str.
    :param to: Replacement of from_. :py:class:`rdflib.URIRef`, url or str.
    :param factory: Used to create new iris.
        Default is :py:data:`rdfmapper.factory.default_factory`
    :returns: The translated term or, if only rules are given, a function
        that translates a term.
    """
    if factory is None:
        factory = default_factory
    if from_ is None and to is None:
        rules = ruleset( term_or_rules )
        def term_mapper( term: Term ) -> Term:
            return _map_term( term, rules, factory )
        return term_mapper
    return map_term( _get_ruleset( from_, to ), factory=factory )( term_or_rules )

def map_quad( quad_or_rules, from_=None, to=None, *, factory=None ):
    """Translates all terms of a quad. If nothing changes, the same
    quad object is returned. Triples are also supported. The default
    graph is never translated.

    :param quad_or_rules: Quad to translate if from_ and to are given.
        Else ruleset as accepted by :py:class:`rdfmapper.rules.ruleset`.
    :returns: The translated quad or, if only rules are given, a function
        that translates a quad.
    :raises TypeError: if given quad is neither triple nor quad
    """
    if factory is None:
        factory = default_factory
    if from_ is None and to is None:
        rules = ruleset( quad_or_rules )
        def quad_mapper( quad: Quad ) -> Quad:
            return _map_quad( quad, rules, factory )
        return quad_mapper
    return map_quad( _get_ruleset( from_, to ), factory=factory )( quad_or_rules )

def map_dataset( dataset_or_rules, from_=None, to=None, *, factory=None ):
    """Translates all quads of a dataset. Always returns a new dataset,
    even if no quad was changed. Unchanged quads are reused.

    :param dataset_or_rules: Dataset (or any iterable of quads) to
        translate, if from_ and to are given. Else ruleset as accepted
        by :py:class:`rdfmapper.rules.ruleset`.
    :returns: New dataset, created with factory.dataset or, if only rules
        are given, a function that translates a dataset.
    :rtype: rdflib.Dataset
    """
    if factory is None:
        factory = default_factory
    if from_ is None and to is None:
        rules = ruleset( dataset_or_rules )
        def dataset_mapper( dataset: typ.Iterable[ Quad ] ):
            return _map_dataset( dataset, rules, factory )
        return dataset_mapper
    return map_dataset( _get_ruleset( from_, to ), factory=factory )( dataset_or_rules )
