from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version
from typing import Final

DISTRIBUTION_NAME: Final = "adtkit"


def _lookup_version() -> str:
    try:
        return _distribution_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


version: Final = _lookup_version()
