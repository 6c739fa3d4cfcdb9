"""
Gunicorn configuration for the job board API.
Run with: gunicorn -c gunicorn.conf.py
"""
import multiprocessing
import os

# Application
wsgi_app = "app.main:app"
worker_class = "uvicorn.workers.UvicornWorker"

# Server socket
bind = os.getenv("BIND", "0.0.0.0:8000")
backlog = 2048

# Worker processes
# Request handling is I/O bound on the database; (2 * cores) + 1 unless overridden
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))

# Worker lifecycle
max_requests = 1000
max_requests_jitter = 100

# Timeouts
timeout = int(os.getenv("GUNICORN_TIMEOUT", 30))
keepalive = 5
graceful_timeout = 30

# Process naming
proc_name = "jobboard_api"

# Logging (application logs are structured JSON on stdout)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s "%(r)s" %(s)s %(b)s %(D)s'


def on_starting(server):
    server.log.info("Starting job board API")


def worker_abort(worker):
    """Called when a worker times out."""
    worker.log.warning("Worker %s aborted (timeout)", worker.pid)
