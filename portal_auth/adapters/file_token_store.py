"""
File Token Store - Persists the session as a JSON file.

The desktop/CLI counterpart of browser local storage.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any, Union

from portal_auth.ports.token_store_port import TokenStorePort

logger = logging.getLogger(__name__)


class FileTokenStore(TokenStorePort):
    """
    JSON file token storage.

    The file is written with owner-only permissions. A corrupt file is
    treated as "nothing stored".
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize file token store.

        Args:
            path: Location of the JSON file (parent dirs are created on save)
        """
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[Dict[str, Any]]:
        if not self._path.exists():
            return None

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable token file %s: %s", self._path, e)
            return None

        if not isinstance(data, dict) or not data.get("token"):
            return None
        return data

    def save(self, token: str, user: Optional[Dict[str, Any]] = None):
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps({"token": token, "user": user}), encoding="utf-8")
        os.chmod(tmp, 0o600)
        os.replace(tmp, self._path)

    def clear(self) -> bool:
        try:
            self._path.unlink()
        except FileNotFoundError:
            return False
        return True
