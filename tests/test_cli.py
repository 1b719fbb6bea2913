import io
import os

import pytest

from subnetcalc.cli import main


@pytest.fixture
def config(tmp_path):
    (tmp_path / 'settings.conf').write_text('')
    return str(tmp_path)


def run(config, *argv):
    return main(['--config', config] + list(argv))


def test_network(config, capsys):
    assert run(config, 'network', '192.168.1.130/24') == 0
    assert capsys.readouterr().out == '192.168.1.0/24\n'


def test_network_without_prefix(config, capsys):
    assert run(config, 'network', '192.168.1.130') == 1
    assert capsys.readouterr().err.startswith('! No CIDR prefix')


def test_network_parse_error(config, capsys):
    assert run(config, 'network', '1.1.1/24') == 1
    assert capsys.readouterr().err.startswith('! ')


def test_info(config, capsys):
    assert run(config, 'info', '10.20.30.40/8') == 0
    assert capsys.readouterr().out == ('Input IP Address: 10.20.30.40/8\n'
                                       'Subnet Mask (dot.decimal): 255.0.0.0\n'
                                       'Subnet: 10.0.0.0/8\n')


@pytest.mark.parametrize('arg, expected', [
    ('24', '255.255.255.0'),
    ('/20', '255.255.240.0'),
    ('0', '0.0.0.0'),
    ('10.0.0.1/8', '255.0.0.0'),
])
def test_mask(config, capsys, arg, expected):
    assert run(config, 'mask', arg) == 0
    assert capsys.readouterr().out == expected + '\n'


@pytest.mark.parametrize('arg', ['33', 'x', '10.0.0.1', '//24', '///24'])
def test_mask_errors(config, arg):
    assert run(config, 'mask', arg) == 1


def test_prefix(config, capsys):
    assert run(config, 'prefix', '255.255.255.0') == 0
    assert capsys.readouterr().out == '24\n'


def test_prefix_non_contiguous(config, capsys):
    assert run(config, 'prefix', '255.0.255.0') == 0
    assert capsys.readouterr().out == '16\n'
    assert run(config, 'prefix', '--strict', '255.0.255.0') == 1
    assert 'contiguous' in capsys.readouterr().err


def test_prefix_strict_from_settings(tmp_path, capsys):
    (tmp_path / 'settings.conf').write_text('[mask]\nstrict = True\n')
    assert run(str(tmp_path), 'prefix', '255.0.255.0') == 1


def test_prefix_bad_mask(config, capsys):
    assert run(config, 'prefix', '255.256.0.0') == 1
    assert capsys.readouterr().err.startswith('! ')


def test_interactive(config, capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO('192.168.1.130/24\n'))
    assert run(config, 'interactive') == 0
    out = capsys.readouterr().out
    assert out.startswith('Insert string IP address (fmt x.x.x.x/x): ')
    assert out.endswith('Subnet: 192.168.1.0/24\n')


def test_interactive_no_input(config, capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO(''))
    assert run(config, 'interactive') == 1
    assert 'No IP address entered' in capsys.readouterr().err


def test_interactive_error_stops(config, capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO('bad\n192.168.1.130/24\n'))
    assert run(config, 'interactive') == 1
    assert 'Subnet:' not in capsys.readouterr().out


def test_interactive_repeat(tmp_path, capsys, monkeypatch):
    (tmp_path / 'settings.conf').write_text('[interactive]\nrepeat = True\nprompt = "> "\n')
    monkeypatch.setattr('sys.stdin', io.StringIO('bad\n192.168.1.130\n192.168.1.130/24\n'))
    assert run(str(tmp_path), 'interactive') == 0
    captured = capsys.readouterr()
    assert captured.err.count('! ') == 2
    assert captured.out.count('> ') == 3
    assert captured.out.endswith('Subnet: 192.168.1.0/24\n')


def test_no_command(config, capsys):
    assert run(config) == 1
    assert 'usage: subnet' in capsys.readouterr().err


def test_bad_settings(tmp_path, capsys):
    (tmp_path / 'settings.conf').write_text('[mask]\nstrict = perhaps\nwidth = 3\n')
    assert run(str(tmp_path), 'prefix', '255.255.0.0') == 3
    err = capsys.readouterr().err
    assert err.startswith('! Unusable config file')
    assert '  - bad value /mask/strict = perhaps\n' in err
    assert '  - unknown key /mask/width\n' in err


def test_calculations_ignore_settings(tmp_path, capsys):
    (tmp_path / 'settings.conf').write_text('[mask]\nstrict = perhaps\n')
    assert run(str(tmp_path), 'network', '10.20.30.40/8') == 0
    assert capsys.readouterr().out == '10.0.0.0/8\n'


def test_no_files_written(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv('HOME', str(tmp_path))
    assert main(['network', '10.20.30.40/8']) == 0
    assert main(['prefix', '255.255.255.0']) == 0
    monkeypatch.setattr('sys.stdin', io.StringIO('10.20.30.40/8\n'))
    assert main(['interactive']) == 0
    captured = capsys.readouterr()
    assert captured.err == ''
    assert os.listdir(str(tmp_path)) == []
