"""
Client Factory
Creates MizbanCloud instances from environment settings
"""

from typing import Optional

import httpx

from mizbancloud.client import MizbanCloud
from mizbancloud.utils.config import get_settings, Settings
from mizbancloud.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def create_client(
    config: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> MizbanCloud:
    """
    Factory function to create a configured MizbanCloud client.
    
    Args:
        config: Optional Settings instance. Uses get_settings() if None.
        transport: Optional httpx transport
        
    Returns:
        MizbanCloud instance, authenticated when MIZBANCLOUD_API_TOKEN is set
        
    Example:
        # Use MIZBANCLOUD_* environment variables / .env
        client = create_client()
        
        # Explicit settings
        client = create_client(Settings(language="fa"))
    """
    if config is None:
        config = get_settings()
    
    configure_logging(config.log_level, config.log_file)
    
    client = MizbanCloud(config.client_config(), transport=transport)
    
    if config.has_token():
        client.set_token(config.api_token)
        logger.info("API token loaded from settings")
    
    return client
