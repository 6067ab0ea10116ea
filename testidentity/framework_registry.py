"""Registry of testing frameworks and their common attribute identifiers."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from functools import lru_cache

from testidentity.name_dictionary import CaseInvariantNameDictionary
from testidentity.utils.logging import logger


class TestingFramework(Enum):
    """Known testing frameworks."""

    UNKNOWN = "Unknown"
    NUNIT = "NUnit"
    XUNIT = "XUnit"
    MSTEST = "MSTest"

    def __str__(self) -> str:
        return self.value


# Code-friendly names, as they appear in generated code and configuration
NUNIT_CODE_NAME = str(TestingFramework.NUNIT)
XUNIT_CODE_NAME = str(TestingFramework.XUNIT)
MSTEST_CODE_NAME = str(TestingFramework.MSTEST)


@dataclass(frozen=True)
class FrameworkIdentifiers:
    """A testing framework's common identifiers.

    ``code_framework_name`` falls back to ``framework_name`` when not given.
    ``test_class_attribute_name`` is only set for frameworks that require
    test classes to be marked (MSTest).
    """

    testing_framework: TestingFramework
    framework_name: str
    attribute_namespace: str
    inline_data_attribute_name: str
    parameterized_test_attribute_name: str
    test_class_attribute_name: str | None = None
    code_framework_name: str = field(default="")

    def __post_init__(self):
        if not self.code_framework_name:
            object.__setattr__(self, "code_framework_name", self.framework_name)

    def to_dict(self) -> dict[str, str | None]:
        """Plain-dict view, with the framework as its string form."""
        data = asdict(self)
        data["testing_framework"] = str(self.testing_framework)
        return data


NUNIT_IDENTIFIERS = FrameworkIdentifiers(
    testing_framework=TestingFramework.NUNIT,
    framework_name=NUNIT_CODE_NAME,
    attribute_namespace="NUnit.Framework",
    inline_data_attribute_name="TestCase",
    parameterized_test_attribute_name="Test",
)

# Official name is "xUnit", code name keeps the enum's casing
XUNIT_IDENTIFIERS = FrameworkIdentifiers(
    testing_framework=TestingFramework.XUNIT,
    framework_name="xUnit",
    code_framework_name=XUNIT_CODE_NAME,
    attribute_namespace="Xunit",
    inline_data_attribute_name="InlineData",
    parameterized_test_attribute_name="Theory",
)

MSTEST_IDENTIFIERS = FrameworkIdentifiers(
    testing_framework=TestingFramework.MSTEST,
    framework_name=MSTEST_CODE_NAME,
    attribute_namespace="Microsoft.VisualStudio.TestTools.UnitTesting",
    inline_data_attribute_name="DataRow",
    parameterized_test_attribute_name="DataTestMethod",
    test_class_attribute_name="TestClass",
)


class TestingFrameworkDictionary(CaseInvariantNameDictionary[TestingFramework]):
    """Name dictionary whose misses resolve to ``TestingFramework.UNKNOWN``."""

    def __init__(self):
        super().__init__(TestingFramework)

    @property
    def default_value(self) -> TestingFramework:
        return TestingFramework.UNKNOWN


def build_framework_dictionary() -> TestingFrameworkDictionary:
    """Build a dictionary seeded with the string form of every known framework."""
    names = TestingFrameworkDictionary()
    names.map_string_representations(
        TestingFramework.NUNIT,
        TestingFramework.XUNIT,
        TestingFramework.MSTEST,
    )
    return names


@lru_cache(maxsize=1)
def get_framework_dictionary() -> TestingFrameworkDictionary:
    """Process-wide framework dictionary, built on first use and never reseeded."""
    names = build_framework_dictionary()
    logger.debug("Seeded testing framework names: {names}", names=names.names())
    return names


def get_testing_framework_by_code_name(name: str) -> TestingFramework:
    """Resolve a code name case-insensitively; unrecognised names give UNKNOWN."""
    return get_framework_dictionary().get_mapped_value(name)


def get_for_framework_code_name(name: str) -> FrameworkIdentifiers | None:
    """Identifiers for the framework with the given code name, if recognised."""
    return get_for_framework(get_testing_framework_by_code_name(name))


def get_for_framework(framework: TestingFramework) -> FrameworkIdentifiers | None:
    """Identifiers for ``framework``; None for UNKNOWN or any unregistered member."""
    match framework:
        case TestingFramework.NUNIT:
            return NUNIT_IDENTIFIERS
        case TestingFramework.XUNIT:
            return XUNIT_IDENTIFIERS
        case TestingFramework.MSTEST:
            return MSTEST_IDENTIFIERS
        case TestingFramework.UNKNOWN:
            return None
        case _:
            return None


def all_identifiers() -> tuple[FrameworkIdentifiers, ...]:
    """Every registered framework's identifiers, in enum declaration order."""
    return tuple(
        identifiers
        for identifiers in (get_for_framework(framework) for framework in TestingFramework)
        if identifiers is not None
    )


__all__ = [
    "TestingFramework",
    "FrameworkIdentifiers",
    "TestingFrameworkDictionary",
    "NUNIT_CODE_NAME",
    "XUNIT_CODE_NAME",
    "MSTEST_CODE_NAME",
    "NUNIT_IDENTIFIERS",
    "XUNIT_IDENTIFIERS",
    "MSTEST_IDENTIFIERS",
    "build_framework_dictionary",
    "get_framework_dictionary",
    "get_testing_framework_by_code_name",
    "get_for_framework_code_name",
    "get_for_framework",
    "all_identifiers",
]
