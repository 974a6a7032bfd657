import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import io

import utils


def test_log_with_time(monkeypatch):
    utils.start_time = 0
    out = io.StringIO()
    monkeypatch.setattr('sys.stdout', out)
    utils.log_with_time('Test message', color='')
    assert 'Test message' in out.getvalue()


def test_log_with_time_sets_start_time(monkeypatch):
    monkeypatch.setattr(utils, 'start_time', None)
    out = io.StringIO()
    monkeypatch.setattr('sys.stdout', out)
    utils.log_with_time('first')
    assert utils.start_time is not None
    assert '[00:00.' in out.getvalue()


def test_vlog_quiet_by_default(monkeypatch):
    monkeypatch.setattr(utils, 'VERBOSE', False)
    out = io.StringIO()
    monkeypatch.setattr('sys.stdout', out)
    utils.vlog('hidden')
    assert out.getvalue() == ''


def test_vlog_verbose(monkeypatch):
    monkeypatch.setattr(utils, 'VERBOSE', True)
    utils.start_time = 0
    out = io.StringIO()
    monkeypatch.setattr('sys.stdout', out)
    utils.vlog('Verbose test', t0=0)
    assert 'Verbose test' in out.getvalue()
    assert 'took' in out.getvalue()


def test_log_error_is_red(monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr('sys.stdout', out)
    utils.log_error('boom')
    assert '\x1b[31m' in out.getvalue()
    assert 'boom' in out.getvalue()


def test_format_flag():
    assert 'yes' in utils.format_flag(True)
    assert 'no' in utils.format_flag(False)
