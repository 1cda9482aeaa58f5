from mindnode_parser import get_text, get_url, trim_note


def test_get_text_strips_markup():
    rich = '<p style="text-align:center;"><b>Quantum</b> <i>mechanics</i></p>'
    assert get_text(rich) == "Quantum mechanics"


def test_get_text_line_breaks():
    rich = "<p>First line<br>second line</p><p>third</p>"
    assert get_text(rich) == "First line second line third"


def test_get_text_entities():
    assert get_text("<p>Tom &amp; Jerry &lt;3</p>") == "Tom & Jerry <3"


def test_get_text_plain_and_empty():
    assert get_text("no markup here") == "no markup here"
    assert get_text("") == ""
    assert get_text(None) == ""


def test_get_url_first_link():
    rich = (
        '<p><a href="https://example.org/one">one</a> and '
        '<a href="https://example.org/two">two</a></p>'
    )
    assert get_url(rich) == "https://example.org/one"


def test_get_url_none():
    assert get_url("<p>nothing</p>") == ""
    assert get_url('<p><a name="anchor">x</a></p>') == ""
    assert get_url(None) == ""


def test_get_text_keeps_link_text():
    rich = '<p>\U0001F310 <a href="https://en.wikipedia.org/wiki/Physics">Physics</a></p>'
    assert get_text(rich) == "\U0001F310 Physics"


def test_trim_note():
    note = "Great intro. if you think this can be improved in any way, please say"
    assert trim_note(note) == "Great intro."
    note = "if you think this can be improved in any way  please say"
    assert trim_note(note) == ""
    assert trim_note("Untouched note") == "Untouched note"


def test_get_text_bare_angle_bracket_starts_a_tag():
    assert get_text("<p>x &lt;y and z</p>") == "x <y and z"
    assert get_text("<p>x<y and z</p>") == "x"
