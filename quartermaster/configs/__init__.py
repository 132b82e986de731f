#!/usr/bin/env python

"""
    Configurations for Quartermaster

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import os


# Determine environment
TESTING = os.getenv("TESTING", "false").lower() == "true"

# API server configuration
HOST = os.environ.get('QUARTERMASTER_HOST', 'localhost')
PORT = int(os.environ.get('QUARTERMASTER_PORT', 3001))
WORKERS = int(os.environ.get('QUARTERMASTER_WORKERS', 1))
DEBUG = bool(int(os.environ.get('QUARTERMASTER_DEBUG', 0)))
LOG_LEVEL = os.environ.get('QUARTERMASTER_LOG_LEVEL', 'info')
CORS_ORIGINS = [
    origin.strip() for origin in
    os.environ.get('QUARTERMASTER_CORS_ORIGINS', 'http://localhost:3000').split(',')
    if origin.strip()
]

OPTIONS = {
    'host': HOST,
    'port': PORT,
    'log_level': LOG_LEVEL,
    'reload': DEBUG,
    'workers': WORKERS,
}

DB_CONFIG = {
    'user': os.environ.get('DB_USER', 'postgres'),
    'password': os.environ.get('DB_PASSWORD'),
    'host': os.environ.get('DB_HOST'),
    'port': int(os.environ.get('DB_PORT', '5432')),
    'dbname': os.environ.get('DB_NAME', 'quartermaster'),
}

# Database configuration
if TESTING:
    DB_URI = "sqlite:///:memory:"
elif os.environ.get('DB_URI'):
    DB_URI = os.environ['DB_URI']
elif DB_CONFIG['host']:
    DB_URI = 'postgresql+psycopg2://{user}:{password}@{host}:{port}/{dbname}'.format(**DB_CONFIG)
else:
    DB_URI = "sqlite:///quartermaster.db"

__all__ = ['HOST', 'PORT', 'DEBUG', 'LOG_LEVEL', 'CORS_ORIGINS', 'OPTIONS', 'DB_URI', 'DB_CONFIG', 'TESTING']
