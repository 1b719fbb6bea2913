#!/usr/bin/env python
import sys
from argparse import ArgumentParser
from textwrap import dedent


class ArgParseTree(object):
    """
    Facilitates building a CLI argument parser with sub commands and options.

    Each sub command is a class; its docstring provides the help line and the
    description, ``args()`` adds its arguments and ``run()`` does the work and
    returns the exit code.

    Example:
        $ subnet [--quiet] mask <prefix>
        $ subnet [--quiet] net <address>

    >>> from subnetcalc.argparsetree import ArgParseTree
    ...
    >>> class Main(ArgParseTree):
    ...     prog = 'subnet'
    ...     def args(self, parser):
    ...         parser.add_argument("--quiet", default=False, action='store_true')
    ...
    >>> class Mask(ArgParseTree):
    ...     def args(self, parser):
    ...         parser.add_argument("prefix", type=int)
    ...
    ...     def run(self, args):
    ...         print("MASK: /%s (%s)" % (args.prefix, args.quiet))
    ...         return 0
    ...
    >>> class Network(ArgParseTree):
    ...     name = 'net'
    ...     def args(self, parser):
    ...         parser.add_argument("address")
    ...
    ...     def run(self, args):
    ...         print("NET: %s (%s)" % (args.address, args.quiet))
    ...         return 2
    ...
    >>> m = Main()
    >>> Mask(m)  # doctest: +ELLIPSIS
    <...>
    >>> Network(m)  # doctest: +ELLIPSIS
    <...>
    >>> m.main(['mask', '24'])
    MASK: /24 (False)
    0
    >>> m.main(['--quiet', 'net', '10.0.0.1/8'])
    NET: 10.0.0.1/8 (True)
    2
    """
    prog = None
    usage = None
    name = None
    _parent = None
    _children = None
    _parser = None
    _subparser = None

    def __init__(self, parent=None):
        if parent:
            self._parent = parent
            parent._children = parent._children or []
            parent._children.append(self)

    def _doc(self):
        if not self.__doc__:
            return None, None
        doc = dedent(self.__doc__.rstrip()).splitlines()
        return doc[0], '\n'.join(doc[2:])

    def _setup_args(self):
        help, description = self._doc()
        if self._parent is None:
            self._parser = ArgumentParser(prog=self.prog, usage=self.usage,
                                          description=help)
        else:
            name = self.name or self.__class__.__name__.lower()
            self._parser = self._parent._subparser.add_parser(name=name,
                                                              help=help,
                                                              description=description)

        args = getattr(self, 'args', None)
        if args is not None:
            args(self._parser)

        if self._children:
            self._subparser = self._parser.add_subparsers()
            for child in self._children:
                child._setup_args()
        else:
            run = getattr(self, 'run', None)
            if run is not None:
                self._parser.set_defaults(_run=run)

    def main(self, argv=None):
        self._setup_args()

        if argv is None:
            argv = sys.argv[1:]

        args = self._parser.parse_args(argv)
        if '_run' in args:
            return args._run(args)
        self._parser.print_help(sys.stderr)
        return 1


if __name__ == "__main__":
    import doctest
    doctest.testmod()
