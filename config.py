"""
Runtime configuration for the ATS scoring API, read from the environment
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Base configuration"""

    APP_TITLE = os.environ.get('APP_TITLE', 'Resume ATS Scorer API')
    APP_VERSION = '1.0.0'

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Comma separated list, "*" allows every origin
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get('CORS_ORIGINS', '*').split(',')
        if origin.strip()
    ]

    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '8000'))

    # "hash" keeps auto-fix output reproducible, "random" varies the verbs
    AUTO_FIX_VERB_STRATEGY = os.environ.get('AUTO_FIX_VERB_STRATEGY', 'hash').lower()


config = Config()
