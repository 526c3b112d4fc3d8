"""Enum types for query controls and submission choice fields."""

from enum import Enum


class SortDirective(str, Enum):
    """Name ordering applied to the candidate listing."""
    none = "none"
    asc = "asc"
    desc = "desc"


class Sex(str, Enum):
    """Student sex as captured on the registration form."""
    male = "Male"
    female = "Female"


class StudentStatus(str, Enum):
    """Whether the student is looking for an internship or a graduate role."""
    intern = "Intern"
    degree_holder = "Degree Holder"


class StartupStatus(str, Enum):
    """Stage of a posted startup idea."""
    planning = "Planning"
    existing = "Existing"


class StartupNeed(str, Enum):
    """Kinds of support a founder can ask for."""
    financial_support = "Financial Support"
    mentorship = "Mentorship"


class ViewStatus(str, Enum):
    """Lifecycle of a listing view within one page visit."""
    loading = "loading"
    ready = "ready"
    error = "error"
