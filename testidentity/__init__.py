"""testidentity - registry of testing frameworks and their attribute identifiers."""

__version__ = "0.1.0"

from .framework_registry import (
    FrameworkIdentifiers,
    TestingFramework,
    all_identifiers,
    get_for_framework,
    get_for_framework_code_name,
    get_testing_framework_by_code_name,
)
from .name_dictionary import CaseInvariantNameDictionary, DuplicateKeyError

__all__ = [
    "__version__",
    "CaseInvariantNameDictionary",
    "DuplicateKeyError",
    "FrameworkIdentifiers",
    "TestingFramework",
    "all_identifiers",
    "get_for_framework",
    "get_for_framework_code_name",
    "get_testing_framework_by_code_name",
]
