"""linestyle — line-oriented style checker for Java sources."""

__all__ = [
    "__version__",
    "check_lines",
    "check_paths",
    "mask_strings",
    "scan_file",
    "Diagnostic",
    "RuleConfig",
]
__version__ = "0.1.0"

from linestyle.api import check_lines, check_paths  # noqa: E402, F401
from linestyle.core.config import RuleConfig  # noqa: E402, F401
from linestyle.core.engine import scan_file  # noqa: E402, F401
from linestyle.core.masking import mask_strings  # noqa: E402, F401
from linestyle.model.diagnostic import Diagnostic  # noqa: E402, F401
