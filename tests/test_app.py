import io

from lggram.app import APP_ID, Application
from lggram.window import MainWindow

FEATURES = {"battery_care_limit": "80", "fn_lock": "0", "usb_charge": "1", "reader_mode": "0"}


class Recorder:
    def __init__(self):
        self.calls = []

    async def __call__(self, feature_id, value):
        self.calls.append((feature_id, value))
        return ""


def build(tmp_path, commands, setter=None, info=None):
    for name, value in FEATURES.items():
        (tmp_path / name).write_text(value)
    setter = setter or Recorder()

    async def default_info():
        return "Product Name\nGram\n"

    def factory(app):
        return MainWindow(
            app, settings_dir=tmp_path, setter=setter, info_source=info or default_info
        )

    out = io.StringIO()
    app = Application(input=io.StringIO(commands), output=out, window_factory=factory)
    return app, out, setter


def test_about():
    info = Application().about()
    assert info.application_name == "LG Gram Settings"
    assert info.application_icon == "lg-gram-settings"
    assert info.version == "0.7.1"


def test_default_application_id():
    assert Application().application_id == APP_ID == "com.github.LGGramSettings"


def test_run_lists_features(tmp_path):
    app, out, _ = build(tmp_path, "quit\n")
    assert app.run([]) == 0
    text = out.getvalue()
    assert "1. Battery Care Limit: 80" in text
    assert "4. Reader Mode: 0" in text
    assert app.active_window is not None


def test_toggle_writes_feature(tmp_path):
    app, out, setter = build(tmp_path, "toggle 2\nquit\n")
    app.run([])
    assert setter.calls == [("fn_lock", "1")]
    assert "Fn Lock: 1" in out.getvalue()


def test_set_value(tmp_path):
    app, _, setter = build(tmp_path, "set 1 100\n")
    app.run([])
    assert setter.calls == [("battery_care_limit", "100")]


def test_set_invalid_value(tmp_path):
    app, out, setter = build(tmp_path, "set 1 50\n")
    app.run([])
    assert setter.calls == []
    assert "error: value must be one of 100, 80" in out.getvalue()


def test_info_prints_pairs(tmp_path):
    app, out, _ = build(tmp_path, "info\n")
    app.run([])
    assert "Product Name: Gram" in out.getvalue()


def test_unknown_command(tmp_path):
    app, out, _ = build(tmp_path, "dance\n")
    app.run([])
    assert "error: unknown command: dance" in out.getvalue()


def test_quit_stops_before_later_commands(tmp_path):
    app, _, setter = build(tmp_path, "quit\ntoggle 1\n")
    app.run([])
    assert setter.calls == []


def test_missing_features_reported(tmp_path):
    out = io.StringIO()

    def factory(app):
        return MainWindow(app, settings_dir=tmp_path / "absent", setter=Recorder())

    app = Application(input=io.StringIO(""), output=out, window_factory=factory)
    app.run([])
    text = out.getvalue()
    assert "! Failed to read fn_lock: file not found" in text
    assert "2. Fn Lock: unavailable" in text