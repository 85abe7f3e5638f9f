import pytest

from subchat.cli import main
from subchat.params import ChatParams

HEADER = "time,user_name,user_color,message\n"


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "config.ini"
    ChatParams().save(path)
    return path


def _csv(tmp_path, body):
    path = tmp_path / "chat.csv"
    path.write_text(HEADER + body, encoding="utf-8")
    return path


def _run(config, csv, output, unit):
    return main(["-c", str(config), "-i", str(csv), "-o", str(output), "-u", unit])


def test_writes_subtitles_in_seconds(tmp_path, config, capsys):
    csv = _csv(tmp_path, "1,alice,#ff0000,hello\n2,bob,,hi there\n")
    output = tmp_path / "out.srv3"
    assert _run(config, csv, output, "sec") == 0
    xml = output.read_text(encoding="utf-8")
    assert xml.startswith('<timedtext format="3">')
    assert 't="1000" d="1000"' in xml
    assert "alice" in xml
    assert str(output) in capsys.readouterr().out


def test_milliseconds_are_kept(tmp_path, config):
    csv = _csv(tmp_path, "10,alice,#ff0000,hello\n30,bob,,hi\n")
    output = tmp_path / "out.ytt"
    assert _run(config, csv, output, "ms") == 0
    assert 't="10" d="20"' in output.read_text(encoding="utf-8")


def test_time_unit_ignores_case(tmp_path, config):
    csv = _csv(tmp_path, "1,alice,#ff0000,hello\n2,bob,,hi\n")
    output = tmp_path / "out.srv3"
    assert _run(config, csv, output, "SEC") == 0
    assert 't="1000"' in output.read_text(encoding="utf-8")


def test_invalid_time_unit_rejected(tmp_path, config):
    csv = _csv(tmp_path, "1,alice,,hello\n")
    with pytest.raises(SystemExit) as info:
        _run(config, csv, tmp_path / "out.srv3", "min")
    assert info.value.code == 2


def test_missing_config_rejected(tmp_path):
    csv = _csv(tmp_path, "1,alice,,hello\n")
    with pytest.raises(SystemExit) as info:
        _run(tmp_path / "absent.ini", csv, tmp_path / "out.srv3", "ms")
    assert info.value.code == 2


def test_empty_chat_fails(tmp_path, config, capsys):
    csv = _csv(tmp_path, "")
    output = tmp_path / "out.srv3"
    assert _run(config, csv, output, "ms") == 1
    assert not output.exists()
    assert "empty" in capsys.readouterr().err


def test_bad_header_fails(tmp_path, config):
    csv = tmp_path / "chat.csv"
    csv.write_text("a,b,c\n1,alice,,hello\n", encoding="utf-8")
    output = tmp_path / "out.srv3"
    assert _run(config, csv, output, "ms") == 1
    assert not output.exists()


def test_unwritable_output_fails(tmp_path, config):
    csv = _csv(tmp_path, "1,alice,,hello\n")
    output = tmp_path / "missing_dir" / "out.srv3"
    assert _run(config, csv, output, "ms") == 1