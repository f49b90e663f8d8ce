from typing import Any, List, Optional
from pydantic import BaseModel


# Fields are optional so that missing values reach the handler and get the
# site's own 400 message rather than a framework validation error.
class SubscribeIn(BaseModel):
    email: Optional[str] = None
    journey: Optional[str] = None


class SubscribeOut(BaseModel):
    message: str


class ApplyOut(BaseModel):
    success: bool = True


class ErrorOut(BaseModel):
    error: Any


class JourneyOption(BaseModel):
    value: str
    label: str


class ResourceOut(BaseModel):
    type: str
    title: str
    description: str
    category: str
    meta: str
    featured: bool


class CategoryOut(BaseModel):
    id: str
    label: str


class ResourceListOut(BaseModel):
    categories: List[CategoryOut]
    featured: List[ResourceOut]
    resources: List[ResourceOut]


class IssueOut(BaseModel):
    number: int
    slug: str
    date: str
    title: str
    excerpt: str
    read_time: str
    access: str
    topics: List[str]


class IssueDetailOut(BaseModel):
    issue: IssueOut
    related: List[IssueOut]
