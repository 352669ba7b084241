"""
Recommendation Record Type Definitions

Shapes of the records returned by the three suggestion flows. Every field
except the identifying title is optional: records coming back from the model
are passed through as-is, so these types describe the canonical shape (the
one the default batches always satisfy), not a validation contract.
"""

from typing import Literal, TypedDict


class HobbyIdea(TypedDict, total=False):
    """One way to make money from a hobby. Title field: method."""
    method: str
    description: str
    tools: str
    earnings: str  # currency-formatted range, e.g. "₹8,000-₹1,60,000/month"
    icon: str  # single emoji
    source: str  # optional learning resource URL


class CourseRecord(TypedDict, total=False):
    """One course or free learning resource. Title field: title."""
    title: str
    hobby: str
    provider: str
    duration: str
    rating: float  # 4.5 - 5.0
    students: int
    price: str
    level: str
    description: str
    url: str


class TrendingHobby(TypedDict, total=False):
    """One currently trending hobby. Title field: title."""
    title: str
    description: str
    category: str
    incomeRange: str
    trend: Literal["rising", "hot", "stable"]
    icon: str
