"""
Test suite for the command line front end
"""

import argparse
import io

import pytest
import sys
import os

# Add grandparent directory to path for imports (to find periodicode package)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from periodicode.cli import main, radix_argument, EXIT_OK, EXIT_ERROR, EXIT_FATAL


class TestRadixArgument:
    """Test --radix parsing"""

    def test_name(self):
        assert radix_argument('dozenal') == 12

    def test_number(self):
        assert radix_argument('7') == 7

    def test_out_of_range(self):
        with pytest.raises(argparse.ArgumentTypeError):
            radix_argument('30')

    def test_unknown(self):
        with pytest.raises(argparse.ArgumentTypeError):
            radix_argument('bogus')

    def test_rejected_by_parser(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['-r', 'bogus', '-e', '1'])
        assert exc_info.value.code == 2


class TestBatch:
    """Test -e expressions and script files"""

    def test_expression(self, capsys):
        assert main(['--no-color', '-e', '1/7']) == EXIT_OK
        out = capsys.readouterr().out
        assert 'PeriodiCode:base-10> 1/7' in out
        assert 'digt: 0.r142857' in out

    def test_initial_radix(self, capsys):
        assert main(['--no-color', '-r', 'hex', '-e', 'ff']) == EXIT_OK
        assert 'frac: ff # @decimal { 255 }' in capsys.readouterr().out

    def test_expressions_share_state(self, capsys):
        assert main(['--no-color', '-e', '6;', '-e', '$_ * 7']) == EXIT_OK
        assert 'frac: 42' in capsys.readouterr().out

    def test_recoverable_error(self, capsys):
        assert main(['--no-color', '-e', '1 2']) == EXIT_ERROR
        assert 'cannot parse the remaining' in capsys.readouterr().err

    def test_fatal_error(self, capsys):
        assert main(['--no-color', '-e', '@assert_eq(1, 2)']) == EXIT_FATAL
        assert 'ASSERTION FAILED' in capsys.readouterr().err

    def test_script(self, tmp_path, capsys):
        script = tmp_path / 'demo.periodicode'
        script.write_text('@set_radix(@binary);\n101 # five\n', encoding='utf-8')
        assert main(['--no-color', str(script)]) == EXIT_OK
        assert 'frac: 101 # @decimal { 5 }' in capsys.readouterr().out

    def test_missing_script(self, tmp_path, capsys):
        assert main(['--no-color', str(tmp_path / 'absent.periodicode')]) == EXIT_ERROR
        assert 'cannot load' in capsys.readouterr().err


class TestRepl:
    """Test the interactive loop on a redirected stdin"""

    def test_reads_until_eof(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO('1/2\n@set_radix(@hex);\nff\n'))
        assert main(['--no-color']) == EXIT_OK
        out = capsys.readouterr().out
        assert 'frac: 1/2' in out
        assert 'frac: ff # @decimal { 255 }' in out

    def test_recoverable_error_continues(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO('(1\n2 + 2\n'))
        assert main(['--no-color']) == EXIT_OK
        captured = capsys.readouterr()
        assert 'Mismatched parenthesis' in captured.err
        assert 'frac: 4' in captured.out

    def test_fatal_error_ends_session(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO('@nope\n1\n'))
        assert main(['--no-color']) == EXIT_FATAL
        captured = capsys.readouterr()
        assert 'UNSUPPORTED FUNCTION' in captured.err
        assert 'frac: 1' not in captured.out
