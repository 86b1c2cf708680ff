import os


def get_env(name: str, default: str | None = None) -> str:
    value = os.environ.get(name)
    if value is not None:
        return value

    if default is not None:
        return default

    raise KeyError(f"{name} env variable is not set")
