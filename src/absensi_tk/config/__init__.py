import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module, default 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "absensi_tk.config.production"

    if env in {"test", "testing"}:
        return "absensi_tk.config.testing"

    return "absensi_tk.config.development"
