from subnetcalc.errors import InvalidAddress, InvalidMask, UndefinedPrefix
from subnetcalc.ip import (IPv4Address, Prefix, MAX_PREFIX, from_octets, int_to_octets,
                           is_valid_address, is_valid_prefix)

_ALL_BITS = 0xFFFFFFFF


def prefix_to_mask(prefix):
    """
    Subnet mask with the top ``prefix`` bits set.

    >>> mask_to_string(prefix_to_mask(20))
    '255.255.240.0'
    """
    if prefix is None or prefix is Prefix.UNDEFINED:
        raise UndefinedPrefix('A CIDR prefix is needed to derive a subnet mask')
    if not is_valid_prefix(prefix):
        raise InvalidAddress('Invalid CIDR value: %r' % (prefix,))

    bits = (_ALL_BITS << (MAX_PREFIX - prefix)) & _ALL_BITS
    return IPv4Address(*int_to_octets(bits))


def is_contiguous_mask(mask):
    if not is_valid_address(mask):
        raise InvalidMask('Invalid subnet mask: %r' % mask)
    host_bits = ~mask.int & _ALL_BITS
    # host part must be of the form 0b0..01..1
    return host_bits & (host_bits + 1) == 0


def mask_to_prefix(mask, strict=False):
    """
    Prefix length of a mask, i.e. the number of bits set in it.

    Contiguity is only checked when ``strict`` is set; otherwise a mask
    like 255.0.255.0 counts as 16.
    """
    if not is_valid_address(mask):
        raise InvalidMask('Invalid subnet mask: %r' % mask)
    if strict and not is_contiguous_mask(mask):
        raise InvalidMask('Subnet mask %s is not a contiguous run of leading bits'
                          % mask_to_string(mask))
    return sum(bin(x).count('1') for x in mask.octets)


def calculate_subnet(addr):
    if not is_valid_address(addr):
        raise InvalidAddress('Invalid IP address or CIDR value: %r' % addr)
    if addr.prefix is Prefix.UNDEFINED:
        raise UndefinedPrefix('No CIDR prefix given for %s' % addr)

    mask = prefix_to_mask(addr.prefix)
    octets = [a & m for a, m in zip(addr.octets, mask.octets)]
    return from_octets(*octets, prefix=addr.prefix)


def mask_to_string(mask):
    if not is_valid_address(mask):
        raise InvalidMask('Can\'t format invalid subnet mask %r' % mask)
    return '.'.join(str(x) for x in mask.octets)
