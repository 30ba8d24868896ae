"""atomic-css - compile style declarations into deduplicated atomic CSS classes."""

__version__ = "0.1.0"

from .builder import FirstThatWorks, first_that_works
from .compiler import StyleCompiler
from .config import AtomicCSSConfig, load_config
from .manifest import Manifest, UsageRecord

__all__ = [
    "StyleCompiler",
    "AtomicCSSConfig",
    "load_config",
    "Manifest",
    "UsageRecord",
    "FirstThatWorks",
    "first_that_works",
    "__version__",
]
