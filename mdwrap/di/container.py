from __future__ import annotations

from pathlib import Path

from mdwrap.domain.interfaces import IAppConfig
from mdwrap.services.config.app_config import build_app_config
from mdwrap.services.ui.main_window import MainWindow


class Container:
    """
    Lightweight DI container:
      - Builds the app config if none is supplied
      - Creates the Qt window wired to that config
    """

    def __init__(self, config: IAppConfig | None = None) -> None:
        self.config: IAppConfig = config or build_app_config()

    @staticmethod
    def default(*, explicit_ini: Path | None = None) -> Container:
        return Container(config=build_app_config(explicit_ini=explicit_ini))

    # ---------- UI factories ----------

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = "mdwrap",
    ) -> MainWindow:
        return MainWindow(self.config, start_path=start_path, app_title=app_title)
