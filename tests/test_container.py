from mdwrap.di.container import Container
from mdwrap.services.config.app_config import AppConfig


def test_container_builds_default_config(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "mdwrap.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / appname),
    )
    c = Container.default()
    assert isinstance(c.config, AppConfig)
    assert "bold" in c.config.delimiter_pairs()


def test_container_builds_window_with_its_config(qapp, qtbot, monkeypatch, tmp_path):
    monkeypatch.setattr(
        "mdwrap.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / appname),
    )
    ini = tmp_path / "custom.ini"
    ini.write_text("[formats]\nmark = == ==\n", encoding="utf-8")

    c = Container.default(explicit_ini=ini)
    w = c.build_main_window(app_title="Test")
    qtbot.addWidget(w)
    assert w.windowTitle() == "Test"
    assert "mark" in w.format_actions
