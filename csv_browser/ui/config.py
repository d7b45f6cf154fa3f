from dataclasses import dataclass
from pathlib import Path

from csv_browser.config import BrowserConfig
from csv_browser.services.viewer_session import ViewerSession


@dataclass
class AppConfig:
    config_root: Path
    browser_config: BrowserConfig
    session: ViewerSession
