# Core module exports
from declension.core.config import Settings, get_settings
from declension.core.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    new_correlation_id,
    current_correlation_id,
    api_logger,
    engine_logger,
    registry_logger,
)
