"""
Validation errors raised by the rate graph.
"""


class RateGraphError(ValueError):
    """Base class for rejected rate graph updates"""


class InvalidPair(RateGraphError):
    """Base and quote currency are the same vertex"""


class InvalidRate(RateGraphError):
    """Rate is not a finite positive real number"""


class InvalidVertex(RateGraphError):
    """Vertex id (or currency label) is outside the currency set"""
