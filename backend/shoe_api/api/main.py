# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Local development entry point."""

import os

import uvicorn
from loguru import logger

from shoe_api.api.app import create_app
from shoe_api.config import get_settings
from shoe_api.logging_config import setup_logging

settings = get_settings()
setup_logging(settings.log_level)

logger.info('Starting application creation')
app = create_app(settings)

if __name__ == '__main__':
    hot_reload = os.environ.get('HOT_RELOAD', 'false').lower() == 'true'
    if hot_reload:
        logger.info(
            'Hot reload enabled - server will automatically restart when files change'
        )

    uvicorn.run(
        'shoe_api.api.main:app',
        host=settings.api.host,
        port=settings.api.port,
        reload=hot_reload,
        log_level=settings.log_level.lower(),
    )
