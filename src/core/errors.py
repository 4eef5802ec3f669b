from __future__ import annotations


class AssetLoadError(Exception):
    """Raised when an image or font can't be loaded at startup.

    There is no fallback asset; callers are expected to abort.
    """

    def __init__(self, asset: str, path: str | None, cause: BaseException) -> None:
        self.asset = asset
        self.path = path
        self.cause = cause
        where = path if path is not None else "<embedded>"
        super().__init__(f"Failed to load {asset} {where}: {cause}")
