__title__ = 'paramenu'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .faults import *
from .kinds import *
from .layout import *
from .menu import *
from .messages import *
from .parameters import *
from .parsing import *
from .rendering import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__title__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of every module
__all__ += faults.__all__  # type: ignore[attr-defined]
__all__ += kinds.__all__  # type: ignore[attr-defined]
__all__ += layout.__all__  # type: ignore[attr-defined]
__all__ += menu.__all__  # type: ignore[attr-defined]
__all__ += messages.__all__  # type: ignore[attr-defined]
__all__ += parameters.__all__  # type: ignore[attr-defined]
__all__ += parsing.__all__  # type: ignore[attr-defined]
__all__ += rendering.__all__  # type: ignore[attr-defined]
