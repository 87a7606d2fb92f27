"""Constructors used by :py:mod:`rdfmapper.mapping` to create new nodes,
quads and datasets. Every mapping function accepts a `factory` keyword,
which must provide the same methods as :py:class:`rdflib_factory`.
"""
import abc
import typing as typ
import rdflib
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID

class factory_base( abc.ABC ):
    """Interface of all factories"""
    @abc.abstractmethod
    def named_node( self, value: str ):
        """Creates a new iri from its stringform"""
        pass

    @abc.abstractmethod
    def quad( self, subject, predicate, object, graph=None ):
        pass

    @abc.abstractmethod
    def triple( self, subject, predicate, object ):
        pass

    @abc.abstractmethod
    def dataset( self, quads: typ.Iterable ):
        """Creates a new collection containing given quads"""
        pass


class rdflib_factory( factory_base ):
    """Creates :py:class:`rdflib.URIRef` as iris, tuples as quads and
    :py:class:`rdflib.Dataset` as collection of quads.
    """
    def named_node( self, value: str ) -> rdflib.URIRef:
        return rdflib.URIRef( value )

    def quad( self, subject, predicate, object, graph=None ) -> tuple:
        return (subject, predicate, object, graph)

    def triple( self, subject, predicate, object ) -> tuple:
        return (subject, predicate, object)

    def dataset( self, quads: typ.Iterable = () ) -> rdflib.Dataset:
        """Triples will be added to the default graph. Quads with graph
        None are also added to the default graph.
        """
        ds = rdflib.Dataset()
        for quad in quads:
            if len( quad ) == 4:
                graph = quad[3]
                if isinstance( graph, rdflib.Graph ):
                    graph = graph.identifier
                if graph is None or graph == DATASET_DEFAULT_GRAPH_ID:
                    quad = quad[:3]
                else:
                    quad = (*quad[:3], graph)
            ds.add( quad )
        return ds


default_factory = rdflib_factory()
"""Used by all mapping functions, when no factory is given"""
