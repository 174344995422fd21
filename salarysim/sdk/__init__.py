"""Salary Sim SDK - Core functionality for net salary simulations."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_profile_path,
    load_profile,
    save_profile,
    get_profile_value,
    set_profile_value,
    load_defaults,
    ProfileError,
    get_data_path,
    get_exports_path,
)

from .schemas import (
    SimulationInput,
    ValidInput,
    SimulationResult,
    ProfileDefaults,
)

from .validation import (
    validate,
    ValidationError,
)

from .taxes import compute

from .history import (
    HistoryStore,
    get_history_path,
)

from .notifications import Notification

from .report import (
    render,
    report_lines,
    report_filename,
    format_amount,
    ExportPreconditionError,
)

from .simulator import (
    SalarySimulator,
    SubmissionOutcome,
    ExportOutcome,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "get_profile_path",
    "load_profile",
    "save_profile",
    "get_profile_value",
    "set_profile_value",
    "load_defaults",
    "ProfileError",
    "get_data_path",
    "get_exports_path",
    # Schemas
    "SimulationInput",
    "ValidInput",
    "SimulationResult",
    "ProfileDefaults",
    # Validation
    "validate",
    "ValidationError",
    # Calculation
    "compute",
    # History
    "HistoryStore",
    "get_history_path",
    # Notifications
    "Notification",
    # Report
    "render",
    "report_lines",
    "report_filename",
    "format_amount",
    "ExportPreconditionError",
    # Engine
    "SalarySimulator",
    "SubmissionOutcome",
    "ExportOutcome",
]
