"""Layout of the chat preview drawn over a still frame."""

from __future__ import annotations

from dataclasses import dataclass, field

from .chat import ChatMessage, User, wrap_message
from .params import ChatParams

_SAMPLE_CHAT = (
    ("Sirius", "Lorem ipsum dolor sit amet, consectetur adipiscing elit."),
    ("Betelgeuse", "Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua."),
    ("Vega", "Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris."),
    ("Rigel", "Duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore."),
    ("Antares", "Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia."),
    ("Arcturus", "Curabitur pretium tincidunt lacus. Nulla gravida orci a odio."),
    ("Aldebaran", "Pellentesque habitant morbi tristique senectus et netus et malesuada fames."),
    ("Procyon", "Maecenas sed diam eget risus varius blandit sit amet non magna."),
    ("Capella", "Cras mattis consectetur purus sit amet fermentum."),
    ("Altair", "Aenean lacinia bibendum nulla sed consectetur."),
    ("Pollux", "Vestibulum id ligula porta felis euismod semper."),
    ("Spica", "Praesent commodo cursus magna, vel scelerisque nisl consectetur et."),
    ("Deneb", "Nullam quis risus eget urna mollis ornare vel eu leo."),
    ("Canopus", "Etiam porta sem malesuada magna mollis euismod."),
    ("Fomalhaut", "Donec ullamcorper nulla non metus auctor fringilla."),
    ("Bellatrix", "Aenean eu leo quam. Pellentesque ornare sem lacinia quam venenatis."),
    ("Achernar", "Integer posuere erat a ante venenatis dapibus posuere velit aliquet."),
    ("Regulus", "Sed posuere consectetur est at lobortis."),
    ("Castor", "Curabitur blandit tempus porttitor."),
    ("Mira", "Morbi leo risus, porta ac consectetur ac, vestibulum at eros."),
    ("Alpheratz", "Fusce dapibus, tellus ac cursus commodo, tortor mauris condimentum nibh."),
    ("Shaula", "Donec id elit non mi porta gravida at eget metus."),
    ("Zubenelgenubi", "Vivamus sagittis lacus vel augue laoreet rutrum faucibus dolor auctor."),
    ("Sadr", "Integer nec odio. Praesent libero. Sed cursus ante dapibus diam."),
    ("Nunki", "Suspendisse potenti. Morbi fringilla convallis sapien."),
    ("Hadar", "Curabitur tortor. Pellentesque nibh."),
    ("Mintaka", "Aenean quam. In scelerisque sem at dolor."),
    ("Alnilam", "Maecenas mattis. Sed convallis tristique sem."),
    ("Wezen", "Proin ut ligula vel nunc egestas porttitor."),
    ("Naos", "Aliquam erat volutpat. Nulla facilisi."),
    ("Rasalhague", "Nam dui ligula, fringilla a, euismod sodales, sollicitudin vel, wisi."),
    ("Markab", "Nulla facilisi. Aenean nec eros."),
    ("Diphda", "Vestibulum ante ipsum primis in faucibus orci luctus et ultrices posuere."),
    ("Enif", "Duis cursus, mi quis viverra ornare, eros dolor interdum nulla."),
    ("Unukalhai", "Fusce lacinia arcu et nulla."),
    ("Gienah", "Suspendisse in justo eu magna luctus suscipit."),
    ("Algol", "Curabitur at lacus ac velit ornare lobortis."),
    ("Menkar", "Nullam nulla eros, ultricies sit amet, nonummy id, imperdiet feugiat."),
    ("Saiph", "Phasellus viverra nulla ut metus varius laoreet."),
    ("Izar", "Quisque rutrum. Aenean imperdiet."),
    ("Alhena", "Etiam ultricies nisi vel augue."),
    ("Menkalinan", "Curabitur ullamcorper ultricies nisi."),
    ("Avior", "Donec mollis hendrerit risus."),
    ("Peacock", "Praesent egestas tristique nibh."),
    ("Hamal", "Curabitur blandit mollis lacus."),
    ("Eltanin", "Nam adipiscing. Vestibulum eu odio."),
    ("Sadalmelik", "Curabitur vestibulum aliquam leo."),
    ("Ankaa", "Pellentesque habitant morbi tristique senectus et netus et malesuada."),
    ("Tarazed", "Nunc nonummy metus. Vestibulum volutpat pretium libero."),
    ("Caph", "Duis leo. Sed fringilla mauris sit amet nibh."),
    ("Alsephina", "Donec sodales sagittis magna."),
    ("Sabik", "Fusce fermentum odio nec arcu."),
)


def _sample_messages() -> list[ChatMessage]:
    return [ChatMessage(0, User(name), text) for name, text in _SAMPLE_CHAT]


@dataclass
class InteractiveTextOverlay:
    """Chat lines laid out over a preview image, in image-relative units."""

    params: ChatParams = field(default_factory=ChatParams)
    messages: list[ChatMessage] = field(default_factory=_sample_messages)
    preview: list[tuple[str, str]] = field(default_factory=list)
    revalidate_preview: bool = True
    is_inside_picture: bool = True

    def real_font_size(self, height: int) -> float:
        """Return the font size in pixels on an image of the given height."""
        percent = self.params.font_size_percent
        return (100.0 + (percent - 100.0) / 4.0) / 100.0 * (height / 22.5)

    def real_x(self) -> float:
        """Return the left edge of the text as a fraction of the image width."""
        return (self.params.horizontal_margin * 0.96 + 2.5) / 100.0

    def real_y(self, n: int = 0) -> float:
        """Return the top of line ``n`` as a fraction of the image height."""
        offset = self.params.vertical_margin + n * self.params.vertical_spacing
        return (offset * 0.96 + 2.15) / 100.0

    def generate_preview(self) -> list[tuple[str, str]]:
        """Rebuild the ``(user name, text)`` rows shown and return them.

        Rows are filled from the oldest message until ``total_display_lines``
        is reached; continuation lines have an empty user name.
        """
        limit = self.params.total_display_lines
        rows: list[tuple[str, str]] = []
        for message in self.messages:
            username, wrapped = wrap_message(
                message.user.name,
                self.params.username_separator,
                message.message,
                self.params.max_chars_per_line,
            )
            if not wrapped:
                continue
            if len(rows) >= limit:
                break
            rows.append((username, wrapped[0]))
            for text in wrapped[1:]:
                if len(rows) >= limit:
                    break
                rows.append(("", text))
        self.preview = rows
        self.revalidate_preview = False
        return rows