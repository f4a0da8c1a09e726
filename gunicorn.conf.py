# Gunicorn configuration file: gunicorn -c gunicorn.conf.py app:app
import os

bind = os.environ.get("PERFPAGES_BIND", "0.0.0.0:5000")
workers = int(os.environ.get("PERFPAGES_WORKERS", "2"))
reuse_port = True

loglevel = os.environ.get("PERFPAGES_LOG_LEVEL", "info").lower()


def on_starting(server):
    server.log.info("Starting perfpages")


def when_ready(server):
    server.log.info("perfpages is ready. Spawning workers")


def worker_int(worker):
    worker.log.info("worker received INT or QUIT signal")
