from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify

from ..core.exceptions import NotFoundError, StoreError, ValidationError


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def api_view(app: Flask, container, *, load_state: bool = True):
    """Decorator for JSON/CSV endpoints.

    Loads the application state on first use and maps domain errors to the
    ``{"success": false, "message": ...}`` envelope. State is never touched
    when a store call fails.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                if load_state:
                    container.sync_service.ensure_loaded()
                return view(*args, **kwargs)
            except ValidationError as e:
                return fail(str(e), 400)
            except NotFoundError as e:
                return fail(str(e), 404)
            except StoreError as e:
                app.logger.warning("Store operation failed: %s", e)
                return fail("Koneksi database bermasalah. Silakan coba lagi.", 502)
            except Exception:
                app.logger.exception("Unhandled error in %s", view.__name__)
                return fail("Terjadi kesalahan sistem", 500)

        return wrapper

    return decorator


def request_json(request) -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
