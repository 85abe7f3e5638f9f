import pytest

from subchat.chat import (
    CSV_HEADER,
    Batch,
    ChatLine,
    ChatMessage,
    CsvFormatError,
    User,
    generate_batches,
    parse_csv,
    wrap_message,
)
from subchat.color import Color, random_color
from subchat.params import ChatParams

WRAP_CASES = [
    ("bob", ":", "hello world", 25),
    ("alice", ": ", "Lorem ipsum dolor sit amet, consectetur adipiscing elit.", 12),
    ("x", ":", "a" * 23 + " tiny " + "b" * 31, 10),
    ("someone", ">", "Supercalifragilisticexpialidocious indeed", 7),
    ("Zubenelgenubi", ":", "Vivamus sagittis lacus vel augue laoreet rutrum", 5),
    ("z", "", "word " * 20, 1),
]


def test_short_message_stays_on_first_line():
    assert wrap_message("bob", ":", "hello world", 25) == ("bob", [":hello world"])


@pytest.mark.parametrize("username, separator, message, width", WRAP_CASES)
def test_lines_fit_width(username, separator, message, width):
    name, lines = wrap_message(username, separator, message, width)
    first_budget = width if len(username) > width else width - len(name)
    assert len(lines[0]) <= first_budget
    assert all(len(line) <= width for line in lines[1:])


def test_long_username_is_cut_and_gets_own_line():
    username = "x" * 30
    name, lines = wrap_message(username, ":", "hi", 10)
    assert name == username[:10]
    assert lines[0] == ""
    assert lines[1].startswith(":")


def test_separator_is_cut_to_remaining_space():
    name, lines = wrap_message("abcd", "::::::", "", 6)
    assert name == "abcd"
    assert len(name) + len(lines[0]) == 6
    assert set(lines[0]) == {":"}


def test_unicode_counts_code_points():
    name, lines = wrap_message("Ёж", ":", "привет мир", 25)
    assert name == "Ёж"
    assert lines == [":привет мир"]


def test_non_positive_width_rejected():
    with pytest.raises(ValueError):
        wrap_message("bob", ":", "hello", 0)


def _messages():
    texts = [
        (0, "Sirius", "Lorem ipsum dolor sit amet, consectetur adipiscing elit."),
        (1000, "Vega", "Ut enim ad minim veniam, quis nostrud exercitation."),
        (2000, "Rigel", "Duis aute irure dolor in reprehenderit."),
        (3000, "Antares", "Excepteur sint occaecat cupidatat non proident."),
    ]
    return [ChatMessage(t, User(n, random_color(n)), m) for t, n, m in texts]


def test_batches_respect_line_limit():
    params = ChatParams(total_display_lines=3, max_chars_per_line=10)
    batches = generate_batches(_messages(), params)
    assert [b.time for b in batches] == [0, 1000, 2000, 3000]
    assert all(len(b.lines) <= 3 for b in batches)


def test_last_batch_ends_with_last_message():
    params = ChatParams()
    messages = _messages()
    batches = generate_batches(messages, params)
    last = messages[-1]
    name, wrapped = wrap_message(
        last.user.name, params.username_separator, last.message, params.max_chars_per_line
    )
    tail = batches[-1].lines[-len(wrapped):]
    assert [line.text for line in tail] == wrapped
    assert tail[0].user == User(name, last.user.color)
    assert all(line.user is None for line in tail[1:])


def test_same_time_messages_share_first_batch():
    params = ChatParams()
    messages = [
        ChatMessage(0, User("a", Color(1, 2, 3)), "first"),
        ChatMessage(0, User("b", Color(4, 5, 6)), "second"),
        ChatMessage(5, User("c", Color(7, 8, 9)), "third"),
    ]
    batches = generate_batches(messages, params)
    assert [b.time for b in batches] == [0, 5]
    assert [line.user.name for line in batches[0].lines] == ["a"]
    assert [line.user.name for line in batches[1].lines] == ["a", "b", "c"]


def test_zero_line_limit_keeps_nothing():
    params = ChatParams(total_display_lines=0)
    batches = generate_batches(_messages(), params)
    assert len(batches) == 4
    assert all(b.lines == () for b in batches)


def test_batch_is_plain_data():
    line = ChatLine(None, "text")
    assert Batch(7, (line,)).lines[0].text == "text"


def _write(tmp_path, body):
    path = tmp_path / "chat.csv"
    path.write_text(body, encoding="utf-8")
    return path


def test_parse_csv_reads_rows(tmp_path):
    path = _write(
        tmp_path,
        CSV_HEADER + "\n"
        '3,alice,#ff0000,"hi, there"\n'
        "4,bob,#00ff0080,plain text\n",
    )
    messages = parse_csv(path, 1000)
    assert [m.time for m in messages] == [3000, 4000]
    assert messages[0].user == User("alice", Color.from_hex("#ff0000"))
    assert messages[0].message == "hi, there"
    assert messages[1].user.color == Color.from_hex("#00ff0080")
    assert messages[1].message == "plain text"


def test_parse_csv_empty_color_uses_palette(tmp_path):
    path = _write(tmp_path, CSV_HEADER + "\n10,carol,,hello\n")
    (message,) = parse_csv(path, 1)
    assert message.time == 10
    assert message.user.color == random_color("carol")


def test_parse_csv_header_only(tmp_path):
    assert parse_csv(_write(tmp_path, CSV_HEADER + "\n"), 1) == []


@pytest.mark.parametrize(
    "body",
    ["", "time,user,color,message\n1,a,,b\n", CSV_HEADER + "\r\n1,a,,b\r\n"],
)
def test_parse_csv_bad_header(tmp_path, body):
    with pytest.raises(CsvFormatError):
        parse_csv(_write(tmp_path, body), 1)


def test_parse_csv_bad_time(tmp_path):
    with pytest.raises(CsvFormatError):
        parse_csv(_write(tmp_path, CSV_HEADER + "\nsoon,a,,b\n"), 1)


def test_parse_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_csv(tmp_path / "absent.csv", 1)