# subchat

Turn a recorded chat log into subtitles that replay the chat next to a video.
The command writes YouTube timed text (YTT / SRV3), which lets every chat line
keep its own position, colour and style on the player. The library can also
write an ASS script of the same chat, for previewing in an ordinary player.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library. For the tests:

```
pip install ".[test]"
pytest
```

## Input

The chat log is a CSV file whose first line must be exactly:

```
time,user_name,user_color,message
```

Each following line holds one message:

- `time` – when the message appeared, as a whole number of milliseconds or
  seconds
- `user_name` – the name shown before the message
- `user_color` – a hex colour such as `#1e90ff`; leave it empty to get a colour
  picked from a fixed palette by the name (the same name always gets the same
  colour)
- `message` – the rest of the line, commas included; one pair of surrounding
  double quotes is removed

A wrong header or a time that is not a number raises
`subchat.chat.CsvFormatError`.

## Configuration

Layout and style come from an INI file with a `[General]` section. Any key that
is left out, or whose value cannot be read, keeps its default:

```ini
[General]
bold = false
italic = false
underline = false
textForegroundColor = #FEFEFE
textBackgroundColor = #FEFEFE00
textEdgeColor = #000000
textEdgeType = SoftShadow
fontStyle = MonospacedSans
fontSizePercent = 0
textAlignment = Left
horizontalMargin = 71
verticalMargin = 0
verticalSpacing = -1
totalDisplayLines = 13
maxCharsPerLine = 25
usernameSeparator = ":"
```

- Colours may be written as `#RGB`, `#RGBA`, `#RRGGBB` or `#RRGGBBAA`; each
  channel tops out at 254, which also counts as fully opaque.
- `textEdgeType` is one of `None`, `HardShadow`, `Bevel`, `GlowOutline`,
  `SoftShadow`; `fontStyle` one of `Default`, `Monospaced`, `Proportional`,
  `MonospacedSans`, `ProportionalSans`, `Casual`, `Cursive`, `SmallCapitals`;
  `textAlignment` one of `Left`, `Right`, `Center`. Their numbers are accepted
  too.
- Messages are wrapped to `maxCharsPerLine` characters, the first line sharing
  its width with the user name and separator. Long words are split.
- At most `totalDisplayLines` lines are on screen; older lines scroll off.
- With `verticalSpacing = -1` each moment of the chat is written as one
  multi-line caption; with any other value every line gets its own window
  position, `verticalSpacing` apart.

## Command line

```
subtitles-generator -c config.ini -i chat.csv -o chat.srv3 -u ms
```

| Option              | Meaning                                        |
|---------------------|------------------------------------------------|
| `-c`, `--config`    | INI config file (must exist)                   |
| `-i`, `--input`     | chat CSV file (must exist)                     |
| `-o`, `--output`    | file to write, e.g. `chat.srv3`                |
| `-u`, `--time-unit` | unit of the CSV `time` column: `ms` or `sec` (any case) |

The command exits with status 1 and a message on standard error when a file
cannot be read or written, or when the CSV is malformed or holds no messages.

## Library use

```python
from subchat.params import ChatParams
from subchat.chat import parse_csv, generate_batches
from subchat.ytt import generate_xml
from subchat.ass import generate_ass

params = ChatParams().load("config.ini")
messages = parse_csv("chat.csv", 1)   # 1000 when times are in seconds
batches = generate_batches(messages, params)

srv3 = generate_xml(batches, params)
ass = generate_ass(batches, params, 1920, 1080)
```

Each batch is shown until the next one starts, so the last batch only marks
when the one before it ends.

Other pieces:

- `ChatParams.save(path)` writes the current settings to an INI file with a
  comment on every key.
- `subchat.chat.wrap_message(username, separator, message, max_width)` wraps a
  single message the way the subtitles do.
- `subchat.color.Color` parses and formats hex colours (`from_hex`, `to_hex`,
  `to_ass`); `random_color(username)` gives the palette colour for a name.
- `subchat.preview.InteractiveTextOverlay` computes where the chat lines land
  on a frame (`real_x`, `real_y`, `real_font_size`) and, with
  `generate_preview()`, which `(user name, text)` rows would be on screen. It
  comes with a list of sample messages.

## What it does not do

There is no graphical editor: the package does not open images or draw the
preview, it only computes the layout. Config files are written by hand or with
`ChatParams.save`. ASS output is available from the library only; the command
writes SRV3.