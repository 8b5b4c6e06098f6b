"""Dash application entry point with layout root and state stores."""
import uuid
from pathlib import Path

from dash import Dash, html, dcc
import dash_mantine_components as dmc

from config import get_dashboard_config
from core.logging_config import get_logger, setup_logging
from core.models import FilterSelection
from dash_app.components.header import make_header
from dash_app.components.filter_bar import make_filter_bar
from dash_app.components.status_panel import make_status_panel
from dash_app.components.kpi_row import make_kpi_row
from dash_app.components.chart_card import make_chart_grid
from dash_app.components.footer import make_footer

config = get_dashboard_config()
setup_logging(
    level=config.logging.level,
    file_logging=config.logging.file_logging,
    log_dir=Path(config.logging.log_dir),
)
logger = get_logger(__name__)

for problem in config.validate():
    logger.warning(f"Configuration problem: {problem}")

app = Dash(
    __name__,
    title="Public Health Statistics Dashboard",
    suppress_callback_exceptions=True,
)


def serve_layout():
    """Build the page layout. Dash calls this on every page load, so each tab gets its own client id."""
    return dmc.MantineProvider(
        children=[
            # State stores
            dcc.Store(id="client-id", storage_type="memory", data=uuid.uuid4().hex),
            dcc.Store(id="app-state", storage_type="memory", data=FilterSelection().to_dict()),
            dcc.Store(id="dashboard-data", storage_type="memory"),

            # Page structure
            make_header(),
            html.Main(
                className="main",
                children=[
                    make_filter_bar(),
                    make_status_panel(),
                    make_kpi_row(),
                    make_chart_grid(),
                    make_footer(),
                ],
            ),
        ],
    )


app.layout = serve_layout

from dash_app.callbacks import register_callbacks

register_callbacks(app)

server = app.server
