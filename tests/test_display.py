import io
from dataclasses import dataclass, field
from typing import Any

from gopl.display import display, format_any


@dataclass
class Box:
    x: Any


@dataclass
class Movie:
    title: str
    subtitle: str
    year: int
    color: bool
    actor: dict[str, str] = field(default_factory=dict)
    oscars: list[str] = field(default_factory=list)
    sequel: str | None = None


def _show(name, x):
    out = io.StringIO()
    display(name, x, out)
    return out.getvalue()


def test_format_int():
    assert format_any(1) == "1"


def test_format_bool_and_string():
    assert format_any(True) == "true"
    assert format_any(False) == "false"
    assert format_any('a"b') == '"a\\"b"'


def test_format_none_is_invalid():
    assert format_any(None) == "invalid"


def test_format_reference_shows_address():
    values = [1]
    assert format_any(values) == f"list 0x{id(values):x}"


def test_format_value_type():
    assert format_any((1, 2)) == "tuple value"


def test_slice():
    assert _show("slice", [0, None]) == (
        "Display slice (list):\n"
        "slice[0] = 0\n"
        "slice[1] = nil\n"
    )


def test_nil_interface():
    assert _show("w", None) == "Display w (None):\nw = invalid\n"


def test_struct_with_interface_field():
    assert _show("x", Box(3)) == (
        "Display x (Box):\n"
        "x.x.type = int\n"
        "x.x.value = 3\n"
    )


def test_struct_with_nil_interface_field():
    assert _show("x", Box(None)) == "Display x (Box):\nx.x = nil\n"


def test_interface():
    assert _show("i", 3) == "Display i (int):\ni = 3\n"


def test_array():
    assert _show("x", (3,)) == "Display x (tuple):\nx[0] = 3\n"


def test_map_keys_are_formatted():
    assert _show("m", {1: "a"}) == 'Display m (dict):\nm[1] = "a"\n'


def test_movie():
    strangelove = Movie(
        title="Dr. Strangelove",
        subtitle="How I Learned to Stop Worrying and Love the Bomb",
        year=1964,
        color=False,
        actor={
            "Gen. Buck Turgidson": "George C. Scott",
            "Brig. Gen. Jack D. Ripper": "Sterling Hayden",
            'Maj. T.J. "King" Kong': "Slim Pickens",
            "Dr. Strangelove": "Peter Sellers",
            "Grp. Capt. Lionel Mandrake": "Peter Sellers",
            "Pres. Merkin Muffley": "Peter Sellers",
        },
        oscars=[
            "Best Actor (Nomin.)",
            "Best Adapted Screenplay (Nomin.)",
            "Best Director (Nomin.)",
            "Best Picture (Nomin.)",
        ],
    )
    assert _show("strangelove", strangelove) == (
        "Display strangelove (Movie):\n"
        'strangelove.title = "Dr. Strangelove"\n'
        'strangelove.subtitle = "How I Learned to Stop Worrying and Love the Bomb"\n'
        "strangelove.year = 1964\n"
        "strangelove.color = false\n"
        'strangelove.actor["Gen. Buck Turgidson"] = "George C. Scott"\n'
        'strangelove.actor["Brig. Gen. Jack D. Ripper"] = "Sterling Hayden"\n'
        'strangelove.actor["Maj. T.J. \\"King\\" Kong"] = "Slim Pickens"\n'
        'strangelove.actor["Dr. Strangelove"] = "Peter Sellers"\n'
        'strangelove.actor["Grp. Capt. Lionel Mandrake"] = "Peter Sellers"\n'
        'strangelove.actor["Pres. Merkin Muffley"] = "Peter Sellers"\n'
        'strangelove.oscars[0] = "Best Actor (Nomin.)"\n'
        'strangelove.oscars[1] = "Best Adapted Screenplay (Nomin.)"\n'
        'strangelove.oscars[2] = "Best Director (Nomin.)"\n'
        'strangelove.oscars[3] = "Best Picture (Nomin.)"\n'
        "strangelove.sequel = nil\n"
    )


def test_default_output_is_stdout(capsys):
    display("i", 7)
    assert capsys.readouterr().out == "Display i (int):\ni = 7\n"