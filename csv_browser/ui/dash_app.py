from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from csv_browser.config import load_config
from csv_browser.services.preferences import PreferenceGateway
from csv_browser.services.storage import InMemoryStorage, LocalFileSystemStorage, StorageBackend
from csv_browser.services.viewer_session import ViewerSession
from csv_browser.ui.callbacks.callbacks_export import register_export_callbacks
from csv_browser.ui.callbacks.callbacks_load import register_load_callbacks
from csv_browser.ui.callbacks.callbacks_view import register_view_callbacks
from csv_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    browser_config = load_config(config_root)

    # 2) Preference storage: on disk when configured, otherwise per-process memory
    storage: StorageBackend
    if browser_config.preferences_dir is not None:
        storage = LocalFileSystemStorage(browser_config.preferences_dir)
        logger.info("Column preferences on disk", extra={"path": str(browser_config.preferences_dir)})
    else:
        storage = InMemoryStorage()
        logger.info("Column preferences kept in memory")

    # 3) Session (the single writer behind every callback)
    session = ViewerSession(PreferenceGateway(storage), config=browser_config)

    ctx = AppConfig(
        config_root=config_root,
        browser_config=browser_config,
        session=session,
    )

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        suppress_callback_exceptions=True,
    )
    app.title = browser_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_load_callbacks(app, ctx)
    register_view_callbacks(app, ctx)
    register_export_callbacks(app, ctx)

    return app
