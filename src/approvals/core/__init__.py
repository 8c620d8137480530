"""
Core layer: the verification engine and its configuration.

- FileApprover (engine), Options, scoped defaults, approvals.yaml loading
"""

from .config import ApprovalsConfig, load_config
from .defaults import (
    DefaultNamerDisposer,
    DefaultReporterDisposer,
    Disposer,
    FrontLoadedReporterDisposer,
    SubdirectoryDisposer,
    get_default_namer,
    get_default_reporter,
    get_default_subdirectory,
    get_front_loaded_reporters,
    reporter_from_environment,
)
from .file_approver import ComparisonResult, FileApprover, compare_files
from .options import Options

__all__ = [
    # engine
    "FileApprover",
    "ComparisonResult",
    "compare_files",
    # options
    "Options",
    # defaults
    "Disposer",
    "DefaultReporterDisposer",
    "FrontLoadedReporterDisposer",
    "DefaultNamerDisposer",
    "SubdirectoryDisposer",
    "get_default_namer",
    "get_default_reporter",
    "get_default_subdirectory",
    "get_front_loaded_reporters",
    "reporter_from_environment",
    # config
    "ApprovalsConfig",
    "load_config",
]
