from pathlib import Path


def expand_home(path: str, home: str | Path) -> Path:
    """Replace a leading ``~`` segment with ``home``.

    Only ``~`` on its own or followed by ``/`` is expanded; ``~user`` forms are
    left untouched.
    """
    if path == "~":
        return Path(home)
    if path.startswith("~/"):
        return Path(home) / path[2:]
    return Path(path)
