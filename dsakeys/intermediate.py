"""
The plain record DSA key components travel in.
"""


class DSAIntermediateKey:
    """
    Big-endian byte encodings of the numbers making up a DSA key.

    This is the only form keys enter or leave a `.DSAKey` in; turning it
    into JSON, XML or anything else is left to the caller.

    :param bytes p: prime modulus
    :param bytes q: prime divisor of ``p - 1``
    :param bytes g: generator of the order-``q`` subgroup
    :param bytes y: public value, ``g^x mod p``
    :param bytes x: private value, or ``None`` for a public key
    """

    __slots__ = ("p", "q", "g", "y", "x")

    def __init__(self, p=None, q=None, g=None, y=None, x=None):
        self.p = p
        self.q = q
        self.g = g
        self.y = y
        self.x = x

    def __repr__(self):
        fields = ", ".join(
            f"{name}=<{len(value)}>"
            for name, value in self._items()
            if value is not None
        )
        return f"DSAIntermediateKey({fields})"

    def __eq__(self, other):
        if not isinstance(other, DSAIntermediateKey):
            return NotImplemented
        return tuple(self._items()) == tuple(other._items())

    def _items(self):
        for name in self.__slots__:
            yield name, getattr(self, name)

    def has_private(self):
        """
        Return ``True`` if the private value ``x`` is set.
        """
        return self.x is not None

    def public_part(self):
        """
        Return a copy of this record without the private value.
        """
        return DSAIntermediateKey(p=self.p, q=self.q, g=self.g, y=self.y)
