import io

from oledlab.lightbringer import BANNER, PROMPT, Blinker, LightController


def make_controller(**kwargs):
    writes = []
    sleeps = []
    out = io.StringIO()
    ctl = LightController(
        write=lambda pin, level: writes.append((pin, level)),
        sleep=sleeps.append,
        output=out,
        **kwargs,
    )
    return ctl, writes, sleeps, out


def test_on_command_lights_led():
    ctl, writes, _, out = make_controller()
    assert ctl.process_command("on") is True
    assert writes == [(21, True)]
    assert out.getvalue().splitlines() == [
        "You asked for light to be: on",
        "light is now on",
    ]


def test_off_command():
    ctl, writes, _, _ = make_controller()
    ctl.process_command("on")
    assert ctl.process_command("off") is False
    assert ctl.level is False
    assert writes[-1] == (21, False)


def test_unknown_command():
    ctl, writes, _, out = make_controller()
    assert ctl.process_command("blue") is None
    assert writes == []
    assert out.getvalue().splitlines()[-1] == "I don't get that :("


def test_read_input_trims():
    ctl, writes, _, _ = make_controller()
    assert ctl.read_input(b"  on\r\n") is True
    assert writes == [(21, True)]


def test_read_input_empty_does_nothing():
    ctl, _, _, out = make_controller()
    assert ctl.read_input("") is None
    assert out.getvalue() == ""


def test_read_input_whitespace_is_unknown_command():
    ctl, _, _, out = make_controller()
    assert ctl.read_input("   ") is None
    assert "I don't get that :(" in out.getvalue()


def test_greeting_blinks_three_times():
    ctl, writes, sleeps, out = make_controller()
    ctl.greeting()
    assert writes == [(21, True), (21, False)] * 3
    assert sum(sleeps) == 6.0
    lines = out.getvalue().splitlines()
    assert lines[0] == BANNER
    assert lines[-1] == PROMPT


def test_greeting_trace_dumps_counter():
    ctl, _, _, out = make_controller(trace=True)
    ctl.greeting()
    assert [l for l in out.getvalue().splitlines() if l.startswith("i = ")] == [
        "i = 0",
        "i = 1",
        "i = 2",
    ]


def test_blinker_without_debug_is_silent():
    writes = []
    blinker = Blinker(write=lambda p, l: writes.append((p, l)), sleep=lambda s: None)
    blinker.blink(5)
    assert writes == [(5, True), (5, False)] * 5
    assert blinker.debug_enabled is False


def test_blinker_debug_messages():
    out = io.StringIO()
    blinker = Blinker(sleep=lambda s: None)
    blinker.enable_debug(out)
    blinker.blink()
    assert out.getvalue().splitlines() == ["Turning LED on", "Turning LED off"] * 5