"""Streaming version of :py:func:`rdfmapper.mapping.map_quad`.

    >>> stage = map_stream({"http://abc.com/": "http://abc.org/"})
    >>> for quad in stage(dataset.quads()):
    ...     print(quad)

"""
import logging
logger = logging.getLogger( __name__ )
import typing as typ

from .rules import ruleset
from .factory import default_factory
from .mapping import _map_quad, _get_ruleset, Quad


class quadstream:
    """Transformation for streams of quads. For every quad in the input
    exactly one quad is yielded, in the same order. The next quad of the
    input is only requested, after the last translated quad was consumed.
    Errors of the input are not caught. Closing the output also closes
    the input, if it is a generator.

    :var rules: The used ruleset
    :var factory: Used to create new iris and quads
    """
    rules: ruleset
    factory: object

    def __init__( self, rules, factory=None ):
        self.rules = ruleset( rules )
        self.factory = default_factory if factory is None else factory

    def transform( self, quad: Quad ) -> Quad:
        """Translates a single pushed quad"""
        return _map_quad( quad, self.rules, self.factory )

    def __call__( self, quads: typ.Iterable[ Quad ] ) -> typ.Iterator[ Quad ]:
        logger.debug( "start stream with %r", self.rules )
        count = 0
        quads = iter( quads )
        try:
            for quad in quads:
                yield _map_quad( quad, self.rules, self.factory )
                count += 1
        finally:
            close = getattr( quads, "close", None )
            if close is not None:
                close()
        logger.debug( "stream finished after %d quads", count )

    pipe = __call__
    """Alias for calling this object"""

    async def amap( self, quads: typ.AsyncIterable[ Quad ] ) \
            -> typ.AsyncIterator[ Quad ]:
        """Same as calling this object but for asynchronous iterables."""
        logger.debug( "start async stream with %r", self.rules )
        count = 0
        try:
            async for quad in quads:
                yield _map_quad( quad, self.rules, self.factory )
                count += 1
        finally:
            aclose = getattr( quads, "aclose", None )
            if aclose is not None:
                await aclose()
        logger.debug( "async stream finished after %d quads", count )

    def __repr__( self ):
        name = f"{type(self).__module__}.{type(self).__name__}"
        return f"<{name}:{self.rules!r}>"


def map_stream( rules_or_from, to=None, *, factory=None ) -> quadstream:
    """Creates a stream transformation, that translates every quad.

    :param rules_or_from: Ruleset as accepted by
        :py:class:`rdfmapper.rules.ruleset`. If to is given, this is the
        prefix, that should be replaced.
    :param to: Replacement for the prefix rules_or_from.
    :param factory: Used to create new iris and quads.
    :rtype: quadstream
    """
    if to is None:
        return quadstream( rules_or_from, factory )
    return quadstream( _get_ruleset( rules_or_from, to ), factory )
