"""Production server startup script for the network service.

This module provides the entry point for starting the Django application
with Gunicorn in production environments (Docker containers, Kubernetes).
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the network service using Gunicorn.

    Worker and thread counts can be tuned through GUNICORN_WORKERS and
    GUNICORN_THREADS. Follow and unfollow calls are short transactions, so
    several threads per worker share a process comfortably.
    """
    sys.argv = [
        "gunicorn",
        "network_service.wsgi:application",
        "--bind",
        os.getenv("GUNICORN_BIND", "0.0.0.0:8000"),
        "--workers",
        os.getenv("GUNICORN_WORKERS", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        "30",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
