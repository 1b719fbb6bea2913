#!/usr/bin/env python3
import sys

from subnetcalc.argparsetree import ArgParseTree
from subnetcalc.errors import SubnetError, NullInput, InvalidAddress, InvalidMask
from subnetcalc.ip import from_string, to_string
from subnetcalc.settings import Settings, SettingsError
from subnetcalc.subnet import (calculate_subnet, prefix_to_mask, mask_to_prefix,
                               mask_to_string)


class Main(ArgParseTree):
    """\
    Perform network calculations on IPv4 addresses in CIDR notation
    """
    prog = 'subnet'

    def args(self, parser):
        parser.add_argument("--config", default=None, metavar='DIR',
                            help='Settings directory (default: ~/.config/subnet-calc)')


class Action(ArgParseTree):
    uses_settings = False
    settings = None

    def run(self, args):
        if self.uses_settings:
            self.settings = Settings(args.config)
        try:
            return self.go(args)
        except SubnetError as e:
            sys.stderr.write('! %s\n' % e)
            return 1

    def go(self, args):
        raise NotImplementedError()

    def report(self, addr):
        subnet = calculate_subnet(addr)
        mask = prefix_to_mask(addr.prefix)
        sys.stdout.write("Input IP Address: %s\n" % to_string(addr))
        sys.stdout.write("Subnet Mask (dot.decimal): %s\n" % mask_to_string(mask))
        sys.stdout.write("Subnet: %s\n" % to_string(subnet))
        return 0


class AddressAction(Action):
    def args(self, parser):
        parser.add_argument("address", help="IPv4 address with CIDR prefix, e.g.: 192.168.1.7/24")


class Network(AddressAction):
    """\
    Network address

    Mask off the host bits of the address, keeping its CIDR prefix
    """
    def go(self, args):
        addr = from_string(args.address)
        sys.stdout.write("%s\n" % to_string(calculate_subnet(addr)))
        return 0


class Info(AddressAction):
    """\
    Address report

    Show the address, its subnet mask and its network address
    """
    def go(self, args):
        return self.report(from_string(args.address))


class Mask(Action):
    """\
    Subnet mask for a prefix

    Print the dot.decimal subnet mask for a CIDR prefix length, given either
    on its own or as the suffix of an address
    """
    def args(self, parser):
        parser.add_argument("prefix", help="CIDR prefix length or address, e.g.: 24 or 10.0.0.1/8")

    def go(self, args):
        text = args.prefix.strip()
        if '.' in text:
            prefix = from_string(text).prefix
        else:
            if text.startswith('/'):
                text = text[1:]
            # reuse the address parser for the range and digit checks
            prefix = from_string('0.0.0.0/%s' % text).prefix
        sys.stdout.write("%s\n" % mask_to_string(prefix_to_mask(prefix)))
        return 0


class PrefixLength(Action):
    """\
    Prefix length of a subnet mask

    Count the bits set in a dot.decimal subnet mask. Masks that are not one
    run of leading bits are only rejected in strict mode
    """
    name = 'prefix'
    uses_settings = True

    def args(self, parser):
        parser.add_argument("mask", help="Subnet mask, e.g.: 255.255.255.0")
        parser.add_argument("--strict", default=False, action='store_true',
                            help="Reject non-contiguous masks")

    def go(self, args):
        strict = args.strict or self.settings.strict_mask()
        try:
            mask = from_string(args.mask)
        except InvalidAddress as e:
            raise InvalidMask(str(e))
        sys.stdout.write("%s\n" % mask_to_prefix(mask, strict=strict))
        return 0


class Interactive(Action):
    """\
    Prompt for an address

    Read an address in CIDR notation from standard input and show its report
    """
    uses_settings = True

    def go(self, args):
        while True:
            try:
                line = input(self.settings.prompt())
            except EOFError:
                raise NullInput('No IP address entered')
            try:
                return self.report(from_string(line))
            except SubnetError as e:
                if not self.settings.repeat_prompt():
                    raise
                sys.stderr.write('! %s\n' % e)


def main(argv=None):
    m = Main()
    Network(m)
    Info(m)
    Mask(m)
    PrefixLength(m)
    Interactive(m)

    try:
        return m.main(argv)
    except SettingsError as e:
        sys.stderr.write('! %s\n' % e)
        for problem in e.problems:
            sys.stderr.write('  - %s\n' % problem)
        return 3
    except KeyboardInterrupt:
        sys.stderr.write('^C\n')
        return 3


if __name__ == "__main__":
    exit(main())
