import re

from rich.console import Console

from Core.console import ConsoleOutput, current_datetime


def test_plain_prompt_when_not_a_terminal():
    out = ConsoleOutput(Console(force_terminal=False))
    assert out.render_prompt("PCMI [x]:> ") == "PCMI [x]:> "


def test_color_codes_wrapped_for_readline():
    out = ConsoleOutput(Console(force_terminal=True, color_system="standard"))
    rendered = out.render_prompt("PCMI [x]:> ")
    assert "\001\x1b[" in rendered
    assert re.sub("\001[^\002]*\002", "", rendered) == "PCMI [x]:> "


def test_timestamp_format():
    assert re.fullmatch(r"\d{4}:\d{2}:\d{2}:\d{2}:\d{2}:\d{2}\.\d{3}", current_datetime())
