class SubnetError(ValueError):
    """Base class for every failure raised by the address and subnet helpers"""


class ParseError(SubnetError):
    pass


class InvalidAddress(SubnetError):
    pass


class InvalidMask(SubnetError):
    pass


class UndefinedPrefix(SubnetError):
    pass


class NullInput(SubnetError):
    pass
