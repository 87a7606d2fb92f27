"""Rewrite rules and rulesets. All values of a rule are normalized once,
when the ruleset is created, so the mapping functions only have to compare
plain strings.

"""
import collections.abc
import dataclasses
import numbers
import logging
logger = logging.getLogger( __name__ )
import typing as typ
import rdflib


class InvalidRewriteRule( ValueError ):
    """Is thrown, when a value of a rule cant be used as prefix of an iri.
    """
    def __init__( self, value, *args ):
        super().__init__( value, *args )
        self.value = value

_NO_IDENTIFIERS = ( rdflib.BNode, rdflib.Literal, rdflib.Variable )

def as_prefix( value ) -> str:
    """Returns the stringform of a value given as `from` or `to` of a rule.

    :param value: Can be a :py:class:`rdflib.URIRef` (or
        :py:class:`rdflib.Namespace`), an url-like object like
        :py:class:`urllib.parse.SplitResult` or a plain string.
    :raises InvalidRewriteRule: if value has no usable stringform
    """
    if value is None or isinstance( value, _NO_IDENTIFIERS ):
        raise InvalidRewriteRule( value, "invalid rewrite rule: expected "
                                 "iri, url or str" )
    if isinstance( value, str ):
        return str( value )
    geturl = getattr( value, "geturl", None )
    if callable( geturl ):
        prefix = geturl()
    elif isinstance( value, (bytes, bytearray, numbers.Number) ) \
            or type( value ).__str__ is object.__str__:
        raise InvalidRewriteRule( value, "invalid rewrite rule: %s has no "
                                 "stringform" % type( value ).__name__ )
    else:
        prefix = str( value )
    if not isinstance( prefix, str ):
        raise InvalidRewriteRule( value, "invalid rewrite rule: stringform "
                                 "is not a str" )
    return prefix


@dataclasses.dataclass( frozen=True )
class rewrite_rule:
    """A single rule. Every iri starting with from_prefix will be
    translated, so that it starts with to_prefix instead.
    """
    from_prefix: str
    to_prefix: str

    @classmethod
    def from_values( cls, from_, to ):
        """Normalizes both values with :py:meth:`as_prefix`"""
        return cls( as_prefix( from_ ), as_prefix( to ) )

    def apply( self, value: str ) -> typ.Optional[ str ]:
        """Returns the translated value or None if this rule doesnt match"""
        if not value.startswith( self.from_prefix ):
            return None
        return self.to_prefix + value[ len( self.from_prefix ): ]


class ruleset( tuple ):
    """Ordered and immutable collection of :py:class:`rewrite_rule`.

    The first rule, whose from_prefix matches an iri, is used. There is
    no search for the longest matching prefix, so the order of the rules
    is significant, if the prefixes overlap:

        >>> rules = ruleset({"http://example.com/": "http://a.org/",
        ...                  "http://example.com/b/": "http://b.org/"})
        >>> rules.apply("http://example.com/b/1")
        'http://a.org/b/1'

    :param rules: Mapping of `from` to `to` (insertion order is used),
        an iterable of pairs, a single rewrite_rule or another ruleset.
    """
    def __new__( cls, rules=() ):
        if isinstance( rules, ruleset ):
            return rules
        if isinstance( rules, rewrite_rule ):
            rules = (rules,)
        elif isinstance( rules, collections.abc.Mapping ):
            rules = rules.items()
        elif isinstance( rules, (str, bytes) ):
            raise InvalidRewriteRule( rules, "invalid rewrite rule: expected "
                                     "mapping or pairs, got a string" )
        newrules = []
        for rule in rules:
            if isinstance( rule, rewrite_rule ):
                newrules.append( rule )
                continue
            try:
                from_, to = rule
            except (TypeError, ValueError) as err:
                raise InvalidRewriteRule( rule, "invalid rewrite rule: "
                                         "expected pair (from, to)" ) from err
            newrules.append( rewrite_rule.from_values( from_, to ) )
        logger.debug( "compiled ruleset: %s",
                     [ (r.from_prefix, r.to_prefix) for r in newrules ] )
        return super().__new__( cls, newrules )

    @classmethod
    def single( cls, from_, to ):
        """Ruleset with only one rule"""
        return cls( (rewrite_rule.from_values( from_, to ),) )

    def apply( self, value: str ) -> typ.Optional[ str ]:
        """Uses the first matching rule. Returns None if no rule matches.
        """
        for rule in self:
            newvalue = rule.apply( value )
            if newvalue is not None:
                return newvalue
        return None

    def __repr__( self ):
        name = f"{type(self).__module__}.{type(self).__name__}"
        pairs = ", ".join( f"{r.from_prefix!r}: {r.to_prefix!r}"
                          for r in self )
        return f"<{name}:{{{pairs}}}>"
