"""Emoji category markers and their HTML rendering."""

from __future__ import annotations

import re

# One astral-plane emoji (a UTF-16 surrogate pair), with its optional
# variation selector.
MATCH_EMOJIS = re.compile("[\U00010000-\U0010FFFF]\uFE0F?")
_WHITESPACE = re.compile(r"\s+")

CATEGORIES = {
    "\U0001F5FA": "mindmap",         # world map
    "\U0001F310": "wiki",            # globe with meridians
    "\U0001F5C2": "stack exchange",  # card index dividers
    "\U0001F4D6": "free book",       # open book
    "\U0001F4D5": "non-free book",   # closed book
    "\U0001F4C4": "paper",           # page facing up
    "\U0001F440": "video",           # eyes
    "\U0001F58B": "article",         # fountain pen
    "\U0001F5C3": "blog",            # card file box
    "\U0001F419": "github",          # octopus
    "\U0001F47E": "interactive",     # alien monster
    "\U0001F58C": "image",           # paintbrush
    "\U0001F399": "podcast",         # studio microphone
    "\U0001F4EE": "newsletter",      # postbox
    "\U0001F5E3": "chat",            # speaking head
    "\U0001F3A5": "youtube",         # movie camera
    "\U0001F916": "reddit",          # robot
}

EMOJI_TEMPLATE = (
    '<img class="mindmap-emoji" '
    'src="https://assets-cdn.github.com/images/icons/emoji/unicode/{}.png">'
)
CUSTOM_EMOJI_TEMPLATE = (
    '<img class="mindmap-emoji" '
    'src="https://assets-cdn.github.com/images/icons/emoji/{}.png">'
)

SPECIAL_IMAGES = {
    "\U0001F419": CUSTOM_EMOJI_TEMPLATE.format("octocat"),
    "\U0001F916": (
        '<img class="mindmap-emoji reddit-emoji" '
        'src="https://encrypted-tbn0.gstatic.com/images?q=tbn:'
        'ANd9GcTNpOQVZdTCyVamjJPl92KjaDHigNWVM8mOLHPRU4DHoVNJWxCg">'
    ),
    "\U0001F5C2": (
        '<img class="mindmap-emoji" '
        'src="https://cdn.sstatic.net/Sites/stackoverflow/company/img/logos/se/se-icon.png?v=93426798a1d4">'
    ),
}


def _bare(emoji: str) -> str:
    return emoji.replace("\uFE0F", "")


def emoji_to_category(emoji: str) -> str:
    """Return the category an emoji marker stands for, or "" if none."""
    return CATEGORIES.get(_bare(emoji), "")


def find_category(text: str) -> str:
    """Return the category of the first recognized emoji marker in `text`."""
    for match in MATCH_EMOJIS.finditer(text):
        category = emoji_to_category(match.group())
        if category:
            return category
    return ""


def strip_emojis(text: str) -> str:
    """Remove every emoji marker, collapsing the whitespace left behind."""
    return _WHITESPACE.sub(" ", MATCH_EMOJIS.sub("", text)).strip()


def _unicode_name(emoji: str) -> str:
    """Image file name for an emoji, derived from its surrogate pair."""
    units = emoji.encode("utf-16-be")
    lead = int.from_bytes(units[0:2], "big") & 0x3FF
    trail = int.from_bytes(units[2:4], "big") & 0x3FF
    return "1" + format((lead << 10) + trail, "x")


def _to_img(match: re.Match) -> str:
    emoji = _bare(match.group())
    if emoji in SPECIAL_IMAGES:
        return SPECIAL_IMAGES[emoji]
    return EMOJI_TEMPLATE.format(_unicode_name(emoji))


def emoji_to_html(text: str) -> str:
    """Replace every emoji in `text` with an <img> tag from the GitHub CDN."""
    return MATCH_EMOJIS.sub(_to_img, text)
