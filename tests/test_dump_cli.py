import json

import pytest

from builders import session, marker, update_tab_navigation
from dump import main


@pytest.fixture
def session_file(tmp_path, sample_session):
    path = tmp_path / 'Session_1'
    path.write_bytes(sample_session)
    return str(path)


def test_dump_text(session_file, capsys):
    main(['dump', session_file])
    out = capsys.readouterr().out
    assert out.startswith('Window\nUpdateTabNavigation(')
    assert "url: 'https://python.org/'" in out


def test_dump_json_to_file(session_file, tmp_path, capsys):
    out_path = tmp_path / 'out.json'
    main(['dump', session_file, '--format', 'json', '-o', str(out_path)])
    assert f"Written to {out_path}" in capsys.readouterr().out
    doc = json.loads(out_path.read_text(encoding='utf-8'))
    assert [c['command'] for c in doc['commands']][:2] == ['Window', 'UpdateTabNavigation']


def test_dump_xml(session_file, capsys):
    main(['dump', session_file, '--format', 'xml'])
    assert '<snss-session' in capsys.readouterr().out


def test_info(session_file, capsys):
    main(['info', session_file])
    out = capsys.readouterr().out
    assert 'Version: 3' in out
    assert 'Commands: 6' in out
    assert 'Groups: 2' in out
    assert '  UpdateTabNavigation: 3' in out
    assert '    https://example.com/docs' in out


def test_dump_reports_decode_error(tmp_path, capsys):
    path = tmp_path / 'bad'
    path.write_bytes(session(marker(), update_tab_navigation(1, 1, 0, 'x'), b'\x02\x00\x07\x00'))
    with pytest.raises(SystemExit) as exc:
        main(['dump', str(path)])
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert 'Error:' in err
    assert 'No reader for opcode 7' in err


def test_strict_flag(tmp_path, capsys):
    path = tmp_path / 'padded'
    path.write_bytes(session(b'\x02\x00\xff\x00'))
    main(['dump', str(path)])
    assert capsys.readouterr().out.strip() == 'Marker'
    with pytest.raises(SystemExit):
        main(['dump', '--strict', str(path)])


def test_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(['info', str(tmp_path / 'nope')])
    assert exc.value.code == 1


def test_scan(session_dir, capsys):
    main(['scan', str(session_dir)])
    assert 'Decoded 2 files (1 failures)' in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    main([])
    assert 'usage:' in capsys.readouterr().out
