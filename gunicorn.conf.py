"""
Gunicorn configuration for the TeamSync API.

Usage:
    gunicorn app.main:app -c gunicorn.conf.py

PORT and WEB_CONCURRENCY override the bind port and worker count.
"""

import multiprocessing
import os

bind = f"0.0.0.0:{os.getenv('PORT', '8000')}"

# Each worker holds its own SQLAlchemy pool (pool_size=5, max_overflow=10)
workers = int(os.getenv("WEB_CONCURRENCY", multiprocessing.cpu_count() * 2 + 1))
worker_class = "uvicorn.workers.UvicornWorker"

# Each worker runs the lifespan, role seeding included
preload_app = False

timeout = 30
graceful_timeout = 20
keepalive = 5

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info")
