"""Default configuration for ccstatusline."""

from .schema import StatusLineConfig, WidgetConfigModel


def get_default_config() -> StatusLineConfig:
    """Generate the default status line configuration."""
    return StatusLineConfig(
        version=1,
        lines=[
            [
                WidgetConfigModel(type="model", color="cyan"),
                WidgetConfigModel(type="separator"),
                WidgetConfigModel(type="context-percentage"),
                WidgetConfigModel(type="separator"),
                WidgetConfigModel(type="context-percentage-usable"),
                WidgetConfigModel(type="separator"),
                WidgetConfigModel(type="block-timer"),
            ]
        ],
    )
