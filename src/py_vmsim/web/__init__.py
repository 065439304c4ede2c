"""Browser-facing JSON API for the simulator.

This package provides a Flask application that exposes one
``MemoryState`` over HTTP.  It is an **optional** extra — install with::

    pip install py-vmsim[web]

The ``create_app`` factory in ``app.py`` builds a fresh simulator and
serves its commands as JSON endpoints under ``/api``.
"""
