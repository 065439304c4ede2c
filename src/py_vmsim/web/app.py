"""Flask application factory for the simulator's JSON API.

The ``create_app`` function builds a ``MemoryState`` and returns a
Flask app with these endpoints:

- ``GET /api/memory`` — occupied frames and the watermark.
- ``GET /api/processes`` — registered processes in registration order.
- ``POST /api/processes`` — register a process.
- ``POST /api/processes/<pid>/load`` — load a process into memory.
- ``GET /api/processes/<pid>/pages/<page>`` — resolve a page access.
- ``POST /api/reset`` — clear all state.
- ``GET /api/status`` — text tables for memory and processes.

Simulator errors become JSON ``{"error": ...}`` responses with a 4xx
status chosen by the error's class.
"""

from __future__ import annotations

from flask import Flask, Response, jsonify, request

from py_vmsim.config import SimulatorConfig
from py_vmsim.errors import SimulatorError
from py_vmsim.memory.pool import InsufficientMemoryError
from py_vmsim.process.table import (
    AlreadyLoadedError,
    CapacityExceededError,
    DuplicateNameError,
    InvalidNameError,
    InvalidSizeError,
    ProcessNotLoadedError,
    UnknownProcessError,
)
from py_vmsim.report import format_memory, format_processes
from py_vmsim.simulator import MemoryState

_HTTP_CREATED = 201
_HTTP_BAD_REQUEST = 400
_HTTP_NOT_FOUND = 404
_HTTP_CONFLICT = 409

_ERROR_STATUS: dict[type[SimulatorError], int] = {
    InvalidNameError: _HTTP_BAD_REQUEST,
    InvalidSizeError: _HTTP_BAD_REQUEST,
    UnknownProcessError: _HTTP_NOT_FOUND,
    DuplicateNameError: _HTTP_CONFLICT,
    CapacityExceededError: _HTTP_CONFLICT,
    AlreadyLoadedError: _HTTP_CONFLICT,
    InsufficientMemoryError: _HTTP_CONFLICT,
    ProcessNotLoadedError: _HTTP_CONFLICT,
}


def _status_for(error: SimulatorError) -> int:
    """Return the HTTP status for a simulator error."""
    for error_type, status in _ERROR_STATUS.items():
        if isinstance(error, error_type):
            return status
    return _HTTP_BAD_REQUEST


def create_app(config: SimulatorConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Limits for the simulator.  Defaults apply if None.

    Returns:
        A configured Flask application ready to serve.

    """
    state = MemoryState(config)

    app = Flask(__name__)
    app.config["SIMULATOR"] = state

    @app.errorhandler(SimulatorError)
    def handle_simulator_error(error: SimulatorError) -> tuple[Response, int]:  # pyright: ignore[reportUnusedFunction]
        """Turn a rejected command into a JSON error."""
        return jsonify({"error": str(error)}), _status_for(error)

    @app.route("/api/memory")
    def memory() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the occupied frames and the watermark."""
        frames = [{"index": index, "label": label} for index, label in state.memory_snapshot()]
        return jsonify(
            {
                "used_frames": state.used_frames,
                "capacity": state.config.pool_capacity,
                "frames": frames,
            }
        )

    @app.route("/api/processes")
    def processes() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return every registered process."""
        listing = [
            {"pid": pid, "name": name, "loaded": is_loaded, "size": size}
            for pid, (name, is_loaded, size) in enumerate(state.process_list())
        ]
        return jsonify({"processes": listing})

    @app.route("/api/processes", methods=["POST"])
    def register() -> tuple[Response, int]:  # pyright: ignore[reportUnusedFunction]
        """Register a process.

        Expects JSON body: ``{"size": 4}`` with an optional ``"name"``.
        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "size" not in data:
            return jsonify({"error": "Missing 'size' field"}), _HTTP_BAD_REQUEST
        size = data["size"]
        name = data.get("name")
        if not isinstance(size, int) or isinstance(size, bool):
            return jsonify({"error": "'size' must be an integer"}), _HTTP_BAD_REQUEST
        if name is not None and not isinstance(name, str):
            return jsonify({"error": "'name' must be a string"}), _HTTP_BAD_REQUEST
        pid = state.register_process(name, size)
        return jsonify({"pid": pid}), _HTTP_CREATED

    @app.route("/api/processes/<int:pid>/load", methods=["POST"])
    def load(pid: int) -> Response:  # pyright: ignore[reportUnusedFunction]
        """Load a process and return its page placement."""
        report = state.load_process(pid)
        assignments = [{"page": page, "frame": frame} for page, frame in report.assignments]
        return jsonify({"pid": pid, "assignments": assignments})

    @app.route("/api/processes/<int(signed=True):pid>/pages/<int(signed=True):page>")
    def access(pid: int, page: int) -> Response:  # pyright: ignore[reportUnusedFunction]
        """Resolve one page access."""
        result = state.access_page(pid, page)
        return jsonify({"outcome": str(result.outcome), "frame": result.frame})

    @app.route("/api/reset", methods=["POST"])
    def reset() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Clear the pool and the process table."""
        state.reset()
        return jsonify({"reset": True})

    @app.route("/api/status")
    def status() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return text tables for memory and processes."""
        return jsonify({"memory": format_memory(state), "processes": format_processes(state)})

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``py-vmsim-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
