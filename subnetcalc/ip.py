import re
from enum import Enum
from functools import reduce

from subnetcalc.errors import ParseError, InvalidAddress, NullInput


class Prefix(Enum):
    UNDEFINED = 'undefined'
    INVALID = 'invalid'


MAX_PREFIX = 32
MAX_OCTET = 0xFF

_DELIMITERS = re.compile(r'[./]')
_DIGITS = re.compile(r'[0-9]+')


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _prefix_tag(prefix):
    if prefix is None:
        return Prefix.UNDEFINED
    if isinstance(prefix, Prefix) or _is_int(prefix):
        return prefix
    return Prefix.INVALID


class IPv4Address(object):
    """
    Four address octets and an optional CIDR prefix length.

    The prefix is either a concrete ``int`` or one of the ``Prefix`` tags.
    Construction does not validate; use ``from_octets`` or ``from_string``
    to get a value that is known to be usable.
    """
    __slots__ = ('_octets', '_prefix')

    def __init__(self, b0, b1, b2, b3, prefix=Prefix.UNDEFINED):
        self._octets = (b0, b1, b2, b3)
        self._prefix = _prefix_tag(prefix)

    @property
    def b0(self):
        return self._octets[0]

    @property
    def b1(self):
        return self._octets[1]

    @property
    def b2(self):
        return self._octets[2]

    @property
    def b3(self):
        return self._octets[3]

    @property
    def octets(self):
        return self._octets

    @property
    def prefix(self):
        return self._prefix

    @property
    def int(self):
        if not all(is_valid_octet(x) for x in self._octets):
            raise InvalidAddress('Octets out of range: %s' % (self._octets,))
        return reduce(lambda x, y: x * 0x100 + y, self._octets, 0)

    def __str__(self):
        return to_string(self)

    def __repr__(self):
        octets = '.'.join(str(x) for x in self._octets)
        if self._prefix is Prefix.UNDEFINED:
            return '<IPv4Address %s>' % octets
        if self._prefix is Prefix.INVALID:
            return '<IPv4Address %s/?>' % octets
        return '<IPv4Address %s/%s>' % (octets, self._prefix)

    def __lt__(self, other):
        if not isinstance(other, IPv4Address):
            return NotImplemented
        return self.int < other.int

    def __eq__(self, other):
        if not isinstance(other, IPv4Address):
            return NotImplemented
        return self._octets == other._octets and self._prefix == other._prefix

    def __hash__(self):
        return hash(self.__repr__())


def is_valid_octet(x):
    return _is_int(x) and 0 <= x <= MAX_OCTET


def is_valid_prefix(p):
    if p is Prefix.UNDEFINED:
        return True
    return _is_int(p) and 0 <= p <= MAX_PREFIX


def is_valid_address(addr):
    if not isinstance(addr, IPv4Address):
        return False
    return all(is_valid_octet(x) for x in addr.octets) and is_valid_prefix(addr.prefix)


def from_octets(b0, b1, b2, b3, prefix=Prefix.UNDEFINED):
    addr = IPv4Address(b0, b1, b2, b3, prefix)
    if not is_valid_address(addr):
        raise InvalidAddress('Invalid IP address or CIDR value: %r' % addr)
    return addr


def from_string(text):
    """
    Parse ``a.b.c.d`` or ``a.b.c.d/p``.

    The trimmed text is split on every "." and "/"; four tokens give an
    address without a prefix, five tokens give one with a prefix. Each
    token must be a plain decimal number.

    >>> from_string('192.168.1.7/24')
    <IPv4Address 192.168.1.7/24>
    >>> from_string('192.168.1.7\\n')
    <IPv4Address 192.168.1.7>
    """
    if text is None:
        raise NullInput('No IP address given')
    if not isinstance(text, str):
        raise ParseError('Can\'t parse %s as an IP address' % repr(text))

    fields = _DELIMITERS.split(text.strip())
    if len(fields) not in (4, 5):
        raise ParseError('Expected "a.b.c.d" or "a.b.c.d/p", got "%s"' % text.strip())

    for field in fields:
        if not _DIGITS.fullmatch(field):
            raise ParseError('"%s" is not a decimal number in "%s"' % (field, text.strip()))

    values = [int(x) for x in fields]
    if len(values) == 4:
        values.append(Prefix.UNDEFINED)
    return from_octets(*values)


def to_string(addr):
    if not is_valid_address(addr):
        raise InvalidAddress('Can\'t format invalid IP address %r' % addr)
    octets = '.'.join(str(x) for x in addr.octets)
    if addr.prefix is Prefix.UNDEFINED:
        return octets
    return '%s/%s' % (octets, addr.prefix)


def int_to_octets(raw):
    octets = []
    for _ in range(4):
        octets.append(raw % 0x100)
        raw //= 0x100

    assert raw == 0
    return tuple(reversed(octets))
