"""Read the key names of a dotenv file, never its values."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from quickstart_context.data.errors import MissingInputError


def get_env_file_keys(file_path: Union[str, Path]) -> List[str]:
    """Return the keys of every ``KEY=VALUE`` line, in file order.

    Lines without '=' are ignored. Only the first '=' splits, so values may
    contain more of them. No quoting or escaping is interpreted.

    Raises:
        MissingInputError: If the file is missing or unreadable.
    """
    path = Path(file_path)
    try:
        file = open(path, "rb")
    except FileNotFoundError:
        raise MissingInputError("env file", path) from None
    except OSError as exc:
        raise MissingInputError("env file", path, f"cannot be read: {exc.strerror}") from exc

    keys: List[str] = []
    with file:
        for raw in file:
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                continue
            key, sep, _ = line.partition("=")
            if sep:
                keys.append(key.strip())

    return keys
