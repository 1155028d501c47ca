from tzoracle.comparator import (
    ZoneComparator,
    any_equivalent,
    assert_equivalent,
    equivalent,
)
from tzoracle.dataset import TestCase, check_case, check_pole_collapse, load_test_cases
from tzoracle.errors import (
    AssertionMismatch,
    CandidateMismatch,
    ErrorBudgetExceeded,
    ExactMismatch,
    InvalidCoordinateError,
    InvalidInputAccepted,
    OffsetMismatch,
    PoleCollapseError,
    TzOracleError,
    ZoneResolutionError,
)
from tzoracle.fuzz import FuzzConfig, FuzzReport, MismatchRecord, run_fuzz, validate_fuzz
from tzoracle.harness import (
    Capabilities,
    ScenarioResult,
    build_scenarios,
    run_scenarios,
    run_suite,
)
from tzoracle.invalid_input import INVALID_INPUTS, check_rejected
from tzoracle.offsets import zone_offset_minutes
from tzoracle.profiler import ProfileResult, profile
from tzoracle.utils import validate_coordinates

# https://docs.python.org/3/tutorial/modules.html#importing-from-a-package
# determines which objects will be imported with "import *"
__all__ = (
    "ZoneComparator",
    "equivalent",
    "assert_equivalent",
    "any_equivalent",
    "TestCase",
    "load_test_cases",
    "check_case",
    "check_pole_collapse",
    "FuzzConfig",
    "FuzzReport",
    "MismatchRecord",
    "run_fuzz",
    "validate_fuzz",
    "INVALID_INPUTS",
    "check_rejected",
    "ProfileResult",
    "profile",
    "Capabilities",
    "ScenarioResult",
    "build_scenarios",
    "run_scenarios",
    "run_suite",
    "zone_offset_minutes",
    "validate_coordinates",
    "TzOracleError",
    "InvalidCoordinateError",
    "ZoneResolutionError",
    "AssertionMismatch",
    "ExactMismatch",
    "OffsetMismatch",
    "CandidateMismatch",
    "PoleCollapseError",
    "InvalidInputAccepted",
    "ErrorBudgetExceeded",
)
