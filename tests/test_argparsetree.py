import pytest

from subnetcalc.argparsetree import ArgParseTree


class Root(ArgParseTree):
    pass


class Broken(ArgParseTree):
    def args(self, parser):
        raise AttributeError('typo in args()')

    def run(self, args):
        return 0


class NoRun(ArgParseTree):
    pass


def test_errors_in_args_are_not_swallowed():
    root = Root()
    Broken(root)
    with pytest.raises(AttributeError):
        root.main(['broken'])


def test_command_without_run_prints_help(capsys):
    root = Root()
    NoRun(root)
    assert root.main(['norun']) == 1
    assert 'usage:' in capsys.readouterr().err
